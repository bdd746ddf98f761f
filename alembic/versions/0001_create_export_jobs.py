"""create export_jobs table

Revision ID: 0001
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

EXPORT_STAGES = ("VALIDATE_DIAGRAM", "GENERATE_PROJECT", "PACKAGE_ARCHIVE", "DONE", "FAILED")

def upgrade():
    op.create_table(
        "export_jobs",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("project_name", sa.String(length=100), nullable=False),
        sa.Column("package_name", sa.String(length=200), nullable=False),
        sa.Column("diagram", sa.JSON(), nullable=False),
        sa.Column("stage", sa.Enum(*EXPORT_STAGES, name="exportstage"), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.Column("artifacts", sa.JSON(), nullable=False),
    )

def downgrade():
    op.drop_table("export_jobs")
    sa.Enum(name="exportstage").drop(op.get_bind(), checkfirst=True)
