import importlib
import os
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config import get_settings
from app.core.security import create_access_token
from app.db.base import Base
from app.db import session as db_session
from app.models import (
    CollaborationType,
    CollaboratorsOnTypebots,
    MemberInWorkspace,
    Typebot,
    User,
    Workspace,
    WorkspaceRole,
)
from app.services import storage as storage_service


class DummyStorage(storage_service.StorageService):
    def __init__(self) -> None:  # type: ignore[super-init-not-called]
        self.settings = get_settings()
        self.bucket = "dummy"
        self.signed: list[tuple[str, str | None]] = []

    def create_presigned_put(  # type: ignore[override]
        self, key: str, content_type: str | None = None, expires_in: int | None = None
    ) -> str:
        self.signed.append((key, content_type))
        return f"https://example.com/put/{key}?X-Amz-Signature=dummy&X-Amz-Expires=600"


@dataclass
class Seed:
    workspace_id: str
    typebot_id: str
    admin_id: str
    member_id: str
    guest_id: str
    writer_id: str
    full_access_id: str
    reader_id: str
    outsider_id: str


@pytest.fixture(scope="session", autouse=True)
def configure_environment():
    os.environ["ENV"] = "test"
    os.environ["DEBUG"] = "false"
    os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
    os.environ["JWT_SECRET_KEY"] = "test-secret"
    os.environ["S3_ENDPOINT"] = "http://localhost:9000"
    os.environ["S3_ACCESS_KEY"] = "test"
    os.environ["S3_SECRET_KEY"] = "test"
    os.environ["S3_BUCKET"] = "test-bucket"
    os.environ.pop("S3_PUBLIC_CUSTOM_DOMAIN", None)
    get_settings.cache_clear()
    storage_service.reset_storage_service()
    storage_service._storage_service = DummyStorage()


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def dummy_storage() -> DummyStorage:
    storage = storage_service._storage_service
    assert isinstance(storage, DummyStorage)
    storage.signed.clear()
    return storage


@pytest.fixture(scope="session")
def app_instance(configure_environment):
    from app import main as app_module

    importlib.reload(app_module)
    return app_module.app


@pytest_asyncio.fixture
async def database():
    engine = db_session.get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await db_session.dispose_engine()


@pytest_asyncio.fixture
async def session(database):
    async with db_session.get_session_factory()() as session:
        yield session


@pytest_asyncio.fixture
async def seed(database) -> Seed:
    users = {
        role: User(email=f"{role}@example.com")
        for role in (
            "admin", "member", "guest", "writer", "full_access", "reader", "outsider"
        )
    }
    workspace = Workspace(name="Acme")
    typebot = Typebot(name="Lead generation", workspace=workspace)

    async with db_session.get_session_factory()() as session:
        session.add_all([*users.values(), workspace, typebot])
        await session.flush()
        session.add_all(
            [
                MemberInWorkspace(
                    user_id=users["admin"].id,
                    workspace_id=workspace.id,
                    role=WorkspaceRole.ADMIN,
                ),
                MemberInWorkspace(
                    user_id=users["member"].id,
                    workspace_id=workspace.id,
                    role=WorkspaceRole.MEMBER,
                ),
                MemberInWorkspace(
                    user_id=users["guest"].id,
                    workspace_id=workspace.id,
                    role=WorkspaceRole.GUEST,
                ),
                CollaboratorsOnTypebots(
                    user_id=users["writer"].id,
                    typebot_id=typebot.id,
                    type=CollaborationType.WRITE,
                ),
                CollaboratorsOnTypebots(
                    user_id=users["full_access"].id,
                    typebot_id=typebot.id,
                    type=CollaborationType.FULL_ACCESS,
                ),
                CollaboratorsOnTypebots(
                    user_id=users["reader"].id,
                    typebot_id=typebot.id,
                    type=CollaborationType.READ,
                ),
            ]
        )
        await session.commit()

    return Seed(
        workspace_id=workspace.id,
        typebot_id=typebot.id,
        admin_id=users["admin"].id,
        member_id=users["member"].id,
        guest_id=users["guest"].id,
        writer_id=users["writer"].id,
        full_access_id=users["full_access"].id,
        reader_id=users["reader"].id,
        outsider_id=users["outsider"].id,
    )


@pytest.fixture
def auth_headers():
    def _headers(user_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}

    return _headers


@pytest_asyncio.fixture
async def client(app_instance, database):
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
