"""
Initial schema: tunnels, coaches, reservations

Revision ID: 0001
Revises:
Create Date: 2025-08-01
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None

coach_specialty = postgresql.ENUM(
    'hitting', 'pitching', 'fielding', 'catching',
    name='coach_specialty', create_type=False,
)
reservation_kind = postgresql.ENUM(
    'tunnel', 'lesson',
    name='reservation_kind', create_type=False,
)
reservation_status = postgresql.ENUM(
    'held', 'confirmed', 'cancelled', 'completed', 'no_show',
    name='reservation_status', create_type=False,
)


def upgrade() -> None:
    # gen_random_uuid() is built in from Postgres 13; older servers need pgcrypto
    op.execute('CREATE EXTENSION IF NOT EXISTS pgcrypto')

    bind = op.get_bind()
    coach_specialty.create(bind, checkfirst=True)
    reservation_kind.create(bind, checkfirst=True)
    reservation_status.create(bind, checkfirst=True)

    # tunnels
    tunnels = op.create_table(
        'tunnels',
        sa.Column('id', sa.Integer(), sa.Identity(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # coaches
    op.create_table(
        'coaches',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('specialties', postgresql.ARRAY(coach_specialty), nullable=False, server_default='{}'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # reservations
    op.create_table(
        'reservations',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('reservation_kind', reservation_kind, nullable=False),
        sa.Column('tunnel_id', sa.Integer(), sa.ForeignKey('tunnels.id'), nullable=True),
        sa.Column('coach_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('coaches.id'), nullable=True),
        sa.Column('customer_first_name', sa.String(), nullable=False),
        sa.Column('customer_last_name', sa.String(), nullable=False),
        sa.Column('customer_phone', sa.String(), nullable=False),
        sa.Column('customer_email', sa.String(), nullable=True),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', reservation_status, nullable=False, server_default='held'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_reservations_start_time', 'reservations', ['start_time'])
    op.create_index('ix_reservations_tunnel_start_time', 'reservations', ['tunnel_id', 'start_time'])

    op.bulk_insert(
        tunnels,
        [
            {'name': 'Tunnel 1'},
            {'name': 'Tunnel 2'},
            {'name': 'Tunnel 3'},
            {'name': 'Tunnel 4'},
        ],
    )


def downgrade() -> None:
    op.drop_index('ix_reservations_tunnel_start_time', table_name='reservations')
    op.drop_index('ix_reservations_start_time', table_name='reservations')
    op.drop_table('reservations')
    op.drop_table('coaches')
    op.drop_table('tunnels')

    bind = op.get_bind()
    reservation_status.drop(bind, checkfirst=True)
    reservation_kind.drop(bind, checkfirst=True)
    coach_specialty.drop(bind, checkfirst=True)
