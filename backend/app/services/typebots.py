from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Typebot


async def get_typebot_access(session: AsyncSession, typebot_id: str) -> Typebot | None:
    stmt = (
        select(Typebot)
        .options(selectinload(Typebot.collaborators))
        .where(Typebot.id == typebot_id)
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()
