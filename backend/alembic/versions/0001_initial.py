"""create users, workspaces and typebots"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

WORKSPACE_ROLES = ("ADMIN", "MEMBER", "GUEST")
COLLABORATION_TYPES = ("READ", "WRITE", "FULL_ACCESS")


def _enum(name: str, values: tuple[str, ...], dialect: str) -> sa.Enum:
    if dialect == "postgresql":
        return postgresql.ENUM(*values, name=name, create_type=False)
    return sa.Enum(*values, name=name)


def upgrade() -> None:
    bind = op.get_bind()
    dialect = bind.dialect.name

    if dialect == "postgresql":
        postgresql.ENUM(*WORKSPACE_ROLES, name="workspace_role").create(bind, checkfirst=True)
        postgresql.ENUM(*COLLABORATION_TYPES, name="collaboration_type").create(
            bind, checkfirst=True
        )

    op.create_table(
        "user",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(op.f("ix_user_email"), "user", ["email"], unique=True)

    op.create_table(
        "workspace",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "member_in_workspace",
        sa.Column(
            "user_id",
            sa.String(length=36),
            sa.ForeignKey("user.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "workspace_id",
            sa.String(length=36),
            sa.ForeignKey("workspace.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("role", _enum("workspace_role", WORKSPACE_ROLES, dialect), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "typebot",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column(
            "workspace_id",
            sa.String(length=36),
            sa.ForeignKey("workspace.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_typebot_workspace", "typebot", ["workspace_id"])

    op.create_table(
        "collaborators_on_typebots",
        sa.Column(
            "user_id",
            sa.String(length=36),
            sa.ForeignKey("user.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "typebot_id",
            sa.String(length=36),
            sa.ForeignKey("typebot.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "type", _enum("collaboration_type", COLLABORATION_TYPES, dialect), nullable=False
        ),
    )


def downgrade() -> None:
    op.drop_table("collaborators_on_typebots")
    op.drop_index("ix_typebot_workspace", table_name="typebot")
    op.drop_table("typebot")
    op.drop_table("member_in_workspace")
    op.drop_table("workspace")
    op.drop_index(op.f("ix_user_email"), table_name="user")
    op.drop_table("user")

    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        postgresql.ENUM(name="collaboration_type").drop(bind, checkfirst=True)
        postgresql.ENUM(name="workspace_role").drop(bind, checkfirst=True)
