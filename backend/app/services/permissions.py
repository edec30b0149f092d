from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.models import CollaborationType, MemberInWorkspace, Typebot, WorkspaceRole
from app.services.workspaces import get_workspace_members

_WRITE_COLLABORATIONS = frozenset({CollaborationType.WRITE, CollaborationType.FULL_ACCESS})


def is_write_workspace_forbidden(members: Sequence[MemberInWorkspace], user_id: str) -> bool:
    role = next((member.role for member in members if member.user_id == user_id), None)
    return role is None or role == WorkspaceRole.GUEST


async def is_write_typebot_forbidden(
    session: AsyncSession, typebot: Typebot, user_id: str
) -> bool:
    """Direct write collaborators pass; everyone else needs write access to the workspace."""
    collaboration = next(
        (c.type for c in typebot.collaborators if c.user_id == user_id),
        None,
    )
    if collaboration in _WRITE_COLLABORATIONS:
        return False
    members = await get_workspace_members(session, typebot.workspace_id)
    if members is None:
        return True
    return is_write_workspace_forbidden(members, user_id)
