"""create courses, faculty, rooms and timetable_entries

Revision ID: 4b1e9c2d7a30
Revises:
Create Date: 2026-10-19 09:12:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e9c2d7a30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "courses",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("code", sa.String(length=30), nullable=False),
        sa.Column("enrollment", sa.Integer(), nullable=False),
        sa.Column("duration_hours", sa.SmallInteger(), nullable=False, server_default="1"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("position", sa.BigInteger(), nullable=False),
    )
    op.create_index("ix_courses_code", "courses", ["code"])
    op.create_index("ix_courses_position", "courses", ["position"])

    op.create_table(
        "faculty",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("email", sa.String(length=120), nullable=False),
        sa.Column("department", sa.String(length=120), nullable=True),
        sa.Column("specializations", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("position", sa.BigInteger(), nullable=False),
    )
    op.create_index("ix_faculty_email", "faculty", ["email"])
    op.create_index("ix_faculty_position", "faculty", ["position"])

    op.create_table(
        "rooms",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("building", sa.String(length=120), nullable=True),
        sa.Column("floor", sa.SmallInteger(), nullable=True),
        sa.Column("has_projector", sa.Boolean(), nullable=True),
        sa.Column("has_computers", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("position", sa.BigInteger(), nullable=False),
    )
    op.create_index("ix_rooms_position", "rooms", ["position"])

    op.create_table(
        "timetable_entries",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("course_id", sa.String(length=36), sa.ForeignKey("courses.id", ondelete="CASCADE"), nullable=False),
        sa.Column("faculty_id", sa.String(length=36), sa.ForeignKey("faculty.id", ondelete="CASCADE"), nullable=False),
        sa.Column("room_id", sa.String(length=36), sa.ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False),
        sa.Column("time_slot_id", sa.SmallInteger(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("time_slot_id", name="uq_timetable_entries_time_slot_id"),
    )
    op.create_index("ix_timetable_entries_course_id", "timetable_entries", ["course_id"])
    op.create_index("ix_timetable_entries_faculty_id", "timetable_entries", ["faculty_id"])
    op.create_index("ix_timetable_entries_room_id", "timetable_entries", ["room_id"])


def downgrade() -> None:
    op.drop_table("timetable_entries")
    op.drop_table("rooms")
    op.drop_table("faculty")
    op.drop_table("courses")
