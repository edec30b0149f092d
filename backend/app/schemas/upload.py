from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Discriminator, Tag
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BlockUploadTarget(_CamelModel):
    kind: ClassVar[str] = "block"

    workspace_id: str
    typebot_id: str
    block_id: str
    item_id: str | None = None


class TypebotUploadTarget(_CamelModel):
    kind: ClassVar[str] = "typebot"

    workspace_id: str
    typebot_id: str
    file_name: str


class UserUploadTarget(_CamelModel):
    kind: ClassVar[str] = "user"

    user_id: str
    file_name: str


class WorkspaceUploadTarget(_CamelModel):
    kind: ClassVar[str] = "workspace"

    workspace_id: str
    file_name: str


# Variants overlap, so the first one whose required keys are all present wins.
_TARGET_REQUIRED_KEYS: tuple[tuple[str, frozenset[str]], ...] = (
    ("block", frozenset({"workspaceId", "typebotId", "blockId"})),
    ("typebot", frozenset({"workspaceId", "typebotId", "fileName"})),
    ("user", frozenset({"userId", "fileName"})),
    ("workspace", frozenset({"workspaceId", "fileName"})),
)

_FIELD_ALIASES = {
    "workspace_id": "workspaceId",
    "typebot_id": "typebotId",
    "block_id": "blockId",
    "user_id": "userId",
    "file_name": "fileName",
}


def upload_target_kind(value: Any) -> str | None:
    if isinstance(value, BaseModel):
        return getattr(value, "kind", None)
    if not isinstance(value, dict):
        return None
    keys = {_FIELD_ALIASES.get(key, key) for key, item in value.items() if item is not None}
    for kind, required in _TARGET_REQUIRED_KEYS:
        if required <= keys:
            return kind
    return None


UploadTarget = Annotated[
    Annotated[BlockUploadTarget, Tag("block")]
    | Annotated[TypebotUploadTarget, Tag("typebot")]
    | Annotated[UserUploadTarget, Tag("user")]
    | Annotated[WorkspaceUploadTarget, Tag("workspace")],
    Discriminator(
        upload_target_kind,
        custom_error_type="invalid_upload_target",
        custom_error_message="filePathProps does not match any upload target",
    ),
]


class GenerateUploadUrlRequest(_CamelModel):
    file_path_props: UploadTarget
    file_type: str | None = None


class GenerateUploadUrlResponse(_CamelModel):
    presigned_url: str
    file_url: str
