from .friends_api import ApiError, FriendsApiClient, create_http_client

__all__ = ["ApiError", "FriendsApiClient", "create_http_client"]
