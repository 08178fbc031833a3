from goodfriends.schemas.base import CamelModel


class FriendsByCountry(CamelModel):
    country: str = ""
    total_friends: int = 0
    cities: int = 0


class FriendsByCountryCity(CamelModel):
    country: str = ""
    city: str = ""
    nr_friends: int = 0


class CityFriendsPets(CamelModel):
    country: str = ""
    city: str = ""
    friends_count: int = 0
    pets_count: int = 0
