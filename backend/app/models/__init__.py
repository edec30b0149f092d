from app.models.typebot import CollaborationType, CollaboratorsOnTypebots, Typebot
from app.models.user import User
from app.models.workspace import MemberInWorkspace, Workspace, WorkspaceRole

__all__ = [
    "User",
    "Workspace",
    "WorkspaceRole",
    "MemberInWorkspace",
    "Typebot",
    "CollaborationType",
    "CollaboratorsOnTypebots",
]
