"""GoodFriends REST backend: friends, their addresses, pets and quotes."""
