"""Server-rendered web client for the GoodFriends API."""
