"""Initial schema.

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("created_by", sa.String(length=50), nullable=True),
        sa.Column("updated_by", sa.String(length=50), nullable=True),
    ]


def upgrade() -> None:
    user_role = sa.Enum("admin", "instructor", "participant", name="user_role")
    registration_status = sa.Enum("registered", "cancelled", name="registration_status")

    op.create_table(
        "users",
        *_base_columns(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", user_role, nullable=False, server_default="participant"),
    )

    op.create_table(
        "audit_logs",
        *_base_columns(),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("action_type", sa.String(length=50), nullable=False),
        sa.Column("resource_type", sa.String(length=50), nullable=False),
        sa.Column("details", sa.JSON(), nullable=False),
        sa.Column("ip_address", sa.String(length=50), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
    )

    op.create_table(
        "workshops",
        *_base_columns(),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("deleted_by", sa.String(length=50), nullable=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date", sa.Date(), nullable=True),
        sa.Column("time", sa.String(length=20), nullable=True),
        sa.Column("venue", sa.String(length=200), nullable=True),
        sa.Column("seats", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "instructor_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    op.create_index("ix_workshops_instructor_id", "workshops", ["instructor_id"])

    op.create_table(
        "registrations",
        *_base_columns(),
        sa.Column(
            "workshop_id",
            sa.Uuid(),
            sa.ForeignKey("workshops.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("status", registration_status, nullable=False, server_default="registered"),
        sa.Column("registration_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_registrations_workshop_id", "registrations", ["workshop_id"])
    op.create_index("ix_registrations_user_id", "registrations", ["user_id"])
    op.create_index(
        "uq_registrations_active_workshop_user",
        "registrations",
        ["workshop_id", "user_id"],
        unique=True,
        postgresql_where=sa.text("status = 'registered'"),
        sqlite_where=sa.text("status = 'registered'"),
    )

    op.create_table(
        "attendance",
        *_base_columns(),
        sa.Column(
            "registration_id",
            sa.Uuid(),
            sa.ForeignKey("registrations.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("attended", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("marked_by", sa.Uuid(), sa.ForeignKey("users.id"), nullable=True),
    )

    op.create_table(
        "feedback",
        *_base_columns(),
        sa.Column(
            "workshop_id",
            sa.Uuid(),
            sa.ForeignKey("workshops.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_feedback_rating_range"),
    )
    op.create_index("ix_feedback_workshop_id", "feedback", ["workshop_id"])

    op.create_table(
        "materials",
        *_base_columns(),
        sa.Column(
            "workshop_id",
            sa.Uuid(),
            sa.ForeignKey("workshops.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("file_url", sa.String(length=1000), nullable=False),
        sa.Column("uploaded_by", sa.Uuid(), sa.ForeignKey("users.id"), nullable=True),
    )
    op.create_index("ix_materials_workshop_id", "materials", ["workshop_id"])

    op.create_table(
        "certificates",
        *_base_columns(),
        sa.Column(
            "workshop_id",
            sa.Uuid(),
            sa.ForeignKey("workshops.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("certificate_url", sa.String(length=1000), nullable=False),
        sa.Column("issued_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_certificates_user_id", "certificates", ["user_id"])


def downgrade() -> None:
    op.drop_table("certificates")
    op.drop_table("materials")
    op.drop_table("feedback")
    op.drop_table("attendance")
    op.drop_table("registrations")
    op.drop_table("workshops")
    op.drop_table("audit_logs")
    op.drop_table("users")
    sa.Enum(name="registration_status").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="user_role").drop(op.get_bind(), checkfirst=True)
