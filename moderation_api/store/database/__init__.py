from moderation_api.store.database.sqlalchemy_database import db
from moderation_api.store.database.database import Database

__all__ = ("db", "Database")
