from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class Moderation:
    id: UUID
    user_id: int
    moderator_id: int
    moderator_name: str
    type: str
    reason: str
    evidence: Optional[list[str]] = None
    duration_seconds: int = 0
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    is_active: bool = True
    acknowledged: bool = False
    discord_message_id: Optional[str] = None
    player_username: Optional[str] = None


@dataclass
class Statistics:
    total_moderations: int = 0
    total_bans: int = 0
    total_warnings: int = 0
    total_kicks: int = 0
    active_moderations: int = 0
    active_bans: int = 0
    active_warnings: int = 0
    this_week_moderations: int = 0


@dataclass
class NewModeration:
    user_id: int
    moderator_id: int
    moderator_name: str
    type: str
    reason: str
    evidence: Optional[list[str]] = field(default=None)
    duration_seconds: int = 0
