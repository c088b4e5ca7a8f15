from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Player:
    user_id: int
    username: str
    join_date: Optional[datetime] = None
    last_seen: Optional[datetime] = None
