from goodfriends.api.db.session import Base, async_session, engine

__all__ = ["Base", "async_session", "engine"]
