from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.sql import func

from moderation_api.base import BaseAccessor, translate_store_errors
from .models import PlayerModel
from .player_dataclasses import Player


class PlayerAccessor(BaseAccessor):
    @translate_store_errors
    async def upsert_player(self, user_id: int, username: str) -> Player:
        insert_query = insert(PlayerModel).values(
            user_id=user_id,
            username=username,
            last_seen=func.now(),
        )
        upsert_query = insert_query.on_conflict_do_update(
            index_elements=[PlayerModel.user_id],
            set_={
                "username": insert_query.excluded.username,
                "last_seen": func.now(),
            },
        ).returning(*PlayerModel.__table__.columns)

        async with self.app.database.session() as session:
            res = await session.execute(upsert_query)
            row = res.mappings().one()
            await session.commit()

        return Player(**row)
