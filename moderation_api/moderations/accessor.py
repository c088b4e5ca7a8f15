from datetime import timedelta

from sqlalchemy import and_, case, desc, insert, select, update
from sqlalchemy.sql import func

from moderation_api.base import BaseAccessor, translate_store_errors
from moderation_api.players.models import PlayerModel
from .models import ModerationModel
from .moderation_dataclasses import Moderation, NewModeration, Statistics

STATISTICS_WINDOW = timedelta(days=7)


class ModerationAccessor(BaseAccessor):
    @staticmethod
    def _joined_select():
        return (
            select(
                *ModerationModel.__table__.columns,
                PlayerModel.username.label("player_username"),
            )
            .join(PlayerModel, ModerationModel.user_id == PlayerModel.user_id)
        )

    @translate_store_errors
    async def create_moderation(self, moderation: NewModeration) -> Moderation:
        duration = moderation.duration_seconds or 0
        # evaluated by postgres in the same statement as issued_at, so both
        # share one transaction timestamp
        expires_at = func.now() + timedelta(seconds=duration) if duration > 0 else None

        insert_query = (
            insert(ModerationModel)
            .values(
                user_id=moderation.user_id,
                moderator_id=moderation.moderator_id,
                moderator_name=moderation.moderator_name,
                type=moderation.type,
                reason=moderation.reason,
                evidence=moderation.evidence,
                duration_seconds=duration,
                expires_at=expires_at,
            )
            .returning(*ModerationModel.__table__.columns)
        )

        async with self.app.database.session() as session:
            res = await session.execute(insert_query)
            row = res.mappings().one()
            await session.commit()

        return Moderation(**row)

    @translate_store_errors
    async def get_player_moderations(self, user_id: int) -> list[Moderation]:
        select_query = (
            self._joined_select()
                .where(ModerationModel.user_id == user_id)
                .order_by(desc(ModerationModel.issued_at))
        )

        async with self.app.database.session() as session:
            res = await session.execute(select_query)

        return [Moderation(**row) for row in res.mappings()]

    @translate_store_errors
    async def get_active_moderations(self, user_id: int, moderation_type: str) -> list[Moderation]:
        """Moderations still flagged active.

        Rows whose ``expires_at`` already passed stay in the result until
        ``cleanup_expired`` flips them, so callers gating on a ban should
        compare ``expires_at`` themselves.
        """
        select_query = (
            self._joined_select()
                .where(ModerationModel.user_id == user_id,
                       ModerationModel.type == moderation_type,
                       ModerationModel.is_active.is_(True))
                .order_by(desc(ModerationModel.issued_at))
        )

        async with self.app.database.session() as session:
            res = await session.execute(select_query)

        return [Moderation(**row) for row in res.mappings()]

    @translate_store_errors
    async def cleanup_expired(self) -> int:
        update_query = (
            update(ModerationModel)
                .where(ModerationModel.expires_at.is_not(None),
                       ModerationModel.expires_at < func.now(),
                       ModerationModel.is_active.is_(True))
                .values(is_active=False)
                .execution_options(synchronize_session=False)
        )

        async with self.app.database.session() as session:
            res = await session.execute(update_query)
            await session.commit()

        return res.rowcount

    @translate_store_errors
    async def get_statistics(self) -> Statistics:
        is_active = ModerationModel.is_active.is_(True)

        def count_when(*conditions):
            return func.count(case((and_(*conditions), 1)))

        select_query = select(
            func.count().label("total_moderations"),
            count_when(ModerationModel.type == "ban").label("total_bans"),
            count_when(ModerationModel.type == "warning").label("total_warnings"),
            count_when(ModerationModel.type == "kick").label("total_kicks"),
            count_when(is_active).label("active_moderations"),
            count_when(is_active, ModerationModel.type == "ban").label("active_bans"),
            count_when(is_active, ModerationModel.type == "warning").label("active_warnings"),
            count_when(
                ModerationModel.issued_at >= func.now() - STATISTICS_WINDOW
            ).label("this_week_moderations"),
        ).select_from(ModerationModel)

        async with self.app.database.session() as session:
            res = await session.execute(select_query)

        return Statistics(**res.mappings().one())
