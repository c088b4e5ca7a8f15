from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.sql import func

from moderation_api.store.database import db
from moderation_api.players.models import PlayerModel  # noqa: F401

MODERATION_TYPES = ("ban", "warning", "kick")

INDEXED_COLUMNS = (
    "user_id",
    "type",
    "issued_at",
    "is_active",
    "expires_at",
    "moderator_id",
)


class ModerationModel(db):
    __tablename__ = "moderations"
    __table_args__ = (
        CheckConstraint(
            "type IN ({})".format(", ".join(f"'{t}'" for t in MODERATION_TYPES)),
            name="moderations_type_check",
        ),
        *(Index(f"idx_moderations_{column}", column) for column in INDEXED_COLUMNS),
    )

    id = Column(UUID(as_uuid=True), primary_key=True,
                server_default=text("uuid_generate_v4()"))
    user_id = Column(BigInteger, ForeignKey("players.user_id", ondelete="CASCADE"),
                     nullable=False)
    moderator_id = Column(BigInteger, nullable=False)
    moderator_name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)
    reason = Column(Text, nullable=False)
    evidence = Column(ARRAY(Text))
    duration_seconds = Column(Integer, server_default=text("0"))
    issued_at = Column(DateTime(timezone=True), server_default=func.now())
    expires_at = Column(DateTime(timezone=True))
    is_active = Column(Boolean, server_default=text("true"))
    acknowledged = Column(Boolean, server_default=text("false"))
    discord_message_id = Column(String(255))
