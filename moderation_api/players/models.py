from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    String,
)
from sqlalchemy.sql import func

from moderation_api.store.database import db


class PlayerModel(db):
    __tablename__ = "players"

    user_id = Column(BigInteger, primary_key=True, autoincrement=False)
    username = Column(String(255), nullable=False)
    join_date = Column(DateTime(timezone=True), server_default=func.now())
    last_seen = Column(DateTime(timezone=True), server_default=func.now())
