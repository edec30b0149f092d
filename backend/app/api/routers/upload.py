from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_optional_user
from app.models import User
from app.schemas import GenerateUploadUrlRequest, GenerateUploadUrlResponse
from app.services import upload as upload_service

router = APIRouter(tags=["upload"])


@router.post(
    "/generate-upload-url",
    response_model=GenerateUploadUrlResponse,
    summary="Generate upload URL",
    description="Generate the needed URL to upload a file from the client",
)
async def generate_upload_url(
    payload: GenerateUploadUrlRequest,
    session: AsyncSession = Depends(get_db),
    user: User | None = Depends(get_optional_user),
) -> GenerateUploadUrlResponse:
    try:
        return await upload_service.generate_upload_url(session, user, payload)
    except upload_service.StorageNotConfiguredError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc
    except upload_service.UnauthorizedUploadError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
    except upload_service.InvalidUploadTargetError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except upload_service.UploadTargetNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
