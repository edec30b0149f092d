from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import MemberInWorkspace, Workspace


async def get_workspace_members(
    session: AsyncSession, workspace_id: str
) -> list[MemberInWorkspace] | None:
    """Membership list of a workspace, or ``None`` when it does not exist."""
    stmt = (
        select(Workspace)
        .options(selectinload(Workspace.members))
        .where(Workspace.id == workspace_id)
    )
    result = await session.execute(stmt)
    workspace = result.scalar_one_or_none()
    if workspace is None:
        return None
    return list(workspace.members)
