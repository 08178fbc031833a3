"""GoodFriends: friends, pets and quotes (REST backend + web client)."""
