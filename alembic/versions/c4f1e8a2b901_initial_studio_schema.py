"""initial_studio_schema

Revision ID: c4f1e8a2b901
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = 'c4f1e8a2b901'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    'client_status_enum': ('active', 'inactive', 'suspended'),
    'payment_plan_enum': ('monthly', 'quarterly', 'semester', 'annual'),
    'client_payment_status_enum': ('active', 'overdue', 'suspended'),
    'teacher_status_enum': ('active', 'inactive'),
    'weekday_enum': (
        'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday'
    ),
    'class_status_enum': ('active', 'cancelled'),
    'employee_role_enum': ('manager', 'employee'),
    'employee_status_enum': ('active', 'inactive'),
    'attendance_person_type_enum': ('teacher', 'client', 'employee'),
    'attendance_status_enum': ('present', 'absent', 'late'),
    'payment_method_enum': ('cash', 'card', 'transfer'),
}


def _enum(name: str) -> sa.Enum:
    return sa.Enum(*ENUMS[name], name=name)


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema - create studio tables."""

    op.create_table(
        'clients',
        sa.Column('id', UUID(as_uuid=False), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=False),
        sa.Column('membership_type', sa.String(), nullable=False),
        sa.Column('status', _enum('client_status_enum'), nullable=False),
        sa.Column('join_date', sa.Date(), nullable=False),
        sa.Column('payment_plan', _enum('payment_plan_enum'), nullable=False),
        sa.Column('payment_amount', sa.BigInteger(), nullable=False),
        sa.Column('next_payment_date', sa.Date(), nullable=False),
        sa.Column('payment_status', _enum('client_payment_status_enum'), nullable=False),
        sa.Column('notes', sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_clients_email', 'clients', ['email'])
    op.create_index('ix_clients_next_payment_date', 'clients', ['next_payment_date'])

    op.create_table(
        'teachers',
        sa.Column('id', UUID(as_uuid=False), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=False),
        sa.Column('specialties', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('experience_level', sa.String(), nullable=False),
        sa.Column('status', _enum('teacher_status_enum'), nullable=False),
        sa.Column('hourly_rate', sa.BigInteger(), nullable=False),
        sa.Column('color', sa.String(length=7), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_teachers_email', 'teachers', ['email'])

    op.create_table(
        'classes',
        sa.Column('id', UUID(as_uuid=False), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('teacher_id', UUID(as_uuid=False), nullable=False),
        sa.Column('teacher_name', sa.String(), nullable=False),
        sa.Column('day', _enum('weekday_enum'), nullable=False),
        sa.Column('start_time', sa.String(length=5), nullable=False),
        sa.Column('end_time', sa.String(length=5), nullable=False),
        sa.Column('max_capacity', sa.Integer(), nullable=False),
        sa.Column('current_enrollment', sa.Integer(), nullable=False),
        sa.Column('enrolled_clients', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('price', sa.BigInteger(), nullable=False),
        sa.Column('status', _enum('class_status_enum'), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['teacher_id'], ['teachers.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_classes_teacher_id', 'classes', ['teacher_id'])
    op.create_index('ix_classes_day', 'classes', ['day'])

    op.create_table(
        'employees',
        sa.Column('id', UUID(as_uuid=False), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('role', _enum('employee_role_enum'), nullable=False),
        sa.Column('permissions', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('status', _enum('employee_status_enum'), nullable=False),
        sa.Column('hire_date', sa.Date(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_employees_email', 'employees', ['email'])

    op.create_table(
        'attendance_records',
        sa.Column('id', UUID(as_uuid=False), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('person_id', UUID(as_uuid=False), nullable=False),
        sa.Column('person_type', _enum('attendance_person_type_enum'), nullable=False),
        sa.Column('person_name', sa.String(), nullable=False),
        sa.Column('class_id', UUID(as_uuid=False), nullable=True),
        sa.Column('class_name', sa.String(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('status', _enum('attendance_status_enum'), nullable=False),
        sa.Column('notes', sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'person_id', 'person_type', 'class_id', 'date',
            name='uq_attendance_person_class_date',
        )
    )
    op.create_index('ix_attendance_records_person_id', 'attendance_records', ['person_id'])
    op.create_index('ix_attendance_records_class_id', 'attendance_records', ['class_id'])
    op.create_index('ix_attendance_records_date', 'attendance_records', ['date'])

    op.create_table(
        'payment_records',
        sa.Column('id', UUID(as_uuid=False), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('client_id', UUID(as_uuid=False), nullable=False),
        sa.Column('client_name', sa.String(), nullable=False),
        sa.Column('amount', sa.BigInteger(), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=False),
        sa.Column('payment_method', _enum('payment_method_enum'), nullable=False),
        sa.Column('notes', sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_payment_records_client_id', 'payment_records', ['client_id'])
    op.create_index('ix_payment_records_payment_date', 'payment_records', ['payment_date'])

    op.create_table(
        'studio_profile',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=False),
        sa.Column('address', sa.String(), nullable=False),
        sa.Column('website', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    """Downgrade schema - drop studio tables."""
    op.drop_table('studio_profile')
    op.drop_table('payment_records')
    op.drop_table('attendance_records')
    op.drop_table('employees')
    op.drop_table('classes')
    op.drop_table('teachers')
    op.drop_table('clients')

    for name in ENUMS:
        sa.Enum(name=name).drop(op.get_bind(), checkfirst=True)
