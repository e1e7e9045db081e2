"""attendance_unique_without_class

Revision ID: 5d2a7c9e4b13
Revises: c4f1e8a2b901
Create Date: 2026-10-20 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5d2a7c9e4b13'
down_revision: Union[str, Sequence[str], None] = 'c4f1e8a2b901'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """One attendance record per person and day when no class is attached."""
    op.create_index(
        'uq_attendance_person_date_no_class',
        'attendance_records',
        ['person_id', 'person_type', 'date'],
        unique=True,
        postgresql_where=sa.text('class_id IS NULL'),
    )


def downgrade() -> None:
    op.drop_index(
        'uq_attendance_person_date_no_class', table_name='attendance_records'
    )
