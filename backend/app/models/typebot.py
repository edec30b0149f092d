from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from sqlalchemy import DateTime, Enum as SqlEnum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class CollaborationType(str, Enum):
    READ = "READ"
    WRITE = "WRITE"
    FULL_ACCESS = "FULL_ACCESS"


class Typebot(Base):
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    workspace_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("workspace.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="My typebot")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    workspace: Mapped["Workspace"] = relationship("Workspace", back_populates="typebots")
    collaborators: Mapped[list["CollaboratorsOnTypebots"]] = relationship(
        "CollaboratorsOnTypebots",
        back_populates="typebot",
        cascade="all, delete-orphan",
    )


class CollaboratorsOnTypebots(Base):
    __tablename__ = "collaborators_on_typebots"

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("user.id", ondelete="CASCADE"),
        primary_key=True,
    )
    typebot_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("typebot.id", ondelete="CASCADE"),
        primary_key=True,
    )
    type: Mapped[CollaborationType] = mapped_column(
        SqlEnum(CollaborationType, name="collaboration_type"),
        nullable=False,
    )

    typebot: Mapped[Typebot] = relationship("Typebot", back_populates="collaborators")


Index("ix_typebot_workspace", Typebot.workspace_id)
