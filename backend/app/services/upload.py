from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.models import User
from app.schemas import (
    BlockUploadTarget,
    GenerateUploadUrlRequest,
    GenerateUploadUrlResponse,
    TypebotUploadTarget,
    UploadTarget,
    UserUploadTarget,
    WorkspaceUploadTarget,
)
from app.services.permissions import is_write_typebot_forbidden, is_write_workspace_forbidden
from app.services.storage import StorageService, get_storage_service
from app.services.typebots import get_typebot_access
from app.services.workspaces import get_workspace_members

logger = logging.getLogger(__name__)


class UploadError(Exception):
    """Base class for upload URL generation failures."""


class StorageNotConfiguredError(UploadError):
    """Raised when the S3 credentials are not set."""


class UnauthorizedUploadError(UploadError):
    """Raised when the caller may not upload for the requested target."""


class InvalidUploadTargetError(UploadError):
    """Raised when the upload target lacks a workspace."""


class UploadTargetNotFoundError(UploadError):
    """Raised when the workspace or typebot is missing or not writable by the caller."""


def ensure_storage_configured(settings: Settings) -> None:
    if not settings.s3_endpoint or not settings.s3_access_key or not settings.s3_secret_key:
        raise StorageNotConfiguredError(
            "S3 not properly configured. Missing one of those variables: "
            "S3_ENDPOINT, S3_ACCESS_KEY, S3_SECRET_KEY"
        )


async def parse_file_path(
    session: AsyncSession,
    authenticated_user_id: str | None,
    target: UploadTarget,
) -> str:
    """Resolve the storage key for ``target`` after checking the caller may write there.

    Workspaces and typebots the caller cannot write to are reported as missing,
    so their existence is never confirmed to outsiders.
    """
    if not authenticated_user_id:
        raise UnauthorizedUploadError("You must be logged in to upload this type of file")

    if isinstance(target, UserUploadTarget):
        if target.user_id != authenticated_user_id:
            logger.warning(
                "User %s tried to upload a file for user %s",
                authenticated_user_id,
                target.user_id,
            )
            raise UnauthorizedUploadError("You are not authorized to upload a file for this user")
        return f"public/users/{target.user_id}/{target.file_name}"

    if not isinstance(target, (WorkspaceUploadTarget, TypebotUploadTarget, BlockUploadTarget)):
        raise InvalidUploadTargetError("workspaceId is missing")

    if isinstance(target, WorkspaceUploadTarget):
        members = await get_workspace_members(session, target.workspace_id)
        if members is None or is_write_workspace_forbidden(members, authenticated_user_id):
            logger.warning(
                "Upload to workspace %s denied for user %s",
                target.workspace_id,
                authenticated_user_id,
            )
            raise UploadTargetNotFoundError("Workspace not found")
        return f"public/workspaces/{target.workspace_id}/{target.file_name}"

    typebot = await get_typebot_access(session, target.typebot_id)
    if typebot is None or await is_write_typebot_forbidden(
        session, typebot, authenticated_user_id
    ):
        logger.warning(
            "Upload to typebot %s denied for user %s",
            target.typebot_id,
            authenticated_user_id,
        )
        raise UploadTargetNotFoundError("Typebot not found")

    typebot_path = f"public/workspaces/{target.workspace_id}/typebots/{target.typebot_id}"
    if isinstance(target, TypebotUploadTarget):
        return f"{typebot_path}/{target.file_name}"

    block_path = f"{typebot_path}/blocks/{target.block_id}"
    if target.item_id:
        return f"{block_path}/items/{target.item_id}"
    return block_path


def compose_file_url(settings: Settings, presigned_url: str, file_path: str) -> str:
    if settings.s3_public_custom_domain:
        return f"{settings.s3_public_custom_domain}/{file_path}"
    return presigned_url.split("?", 1)[0]


async def generate_upload_url(
    session: AsyncSession,
    user: User | None,
    payload: GenerateUploadUrlRequest,
    storage: StorageService | None = None,
) -> GenerateUploadUrlResponse:
    settings = get_settings()
    ensure_storage_configured(settings)

    target = payload.file_path_props
    if isinstance(target, UserUploadTarget) and user is None:
        raise UnauthorizedUploadError("You must be logged in to upload a file")

    file_path = await parse_file_path(session, user.id if user else None, target)

    storage = storage or get_storage_service()
    presigned_url = storage.create_presigned_put(file_path, payload.file_type)
    logger.info("Issued upload URL for %s", file_path)

    return GenerateUploadUrlResponse(
        presigned_url=presigned_url,
        file_url=compose_file_url(settings, presigned_url, file_path),
    )
