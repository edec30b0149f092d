from app.schemas.upload import (
    BlockUploadTarget,
    GenerateUploadUrlRequest,
    GenerateUploadUrlResponse,
    TypebotUploadTarget,
    UploadTarget,
    UserUploadTarget,
    WorkspaceUploadTarget,
)

__all__ = [
    "BlockUploadTarget",
    "TypebotUploadTarget",
    "UserUploadTarget",
    "WorkspaceUploadTarget",
    "UploadTarget",
    "GenerateUploadUrlRequest",
    "GenerateUploadUrlResponse",
]
