"""initial schema: users, child_profiles, voice_presets, stories

Revision ID: 001
Revises:
Create Date: 2025-12-02 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

audio_status = sa.Enum('pending', 'generating', 'ready', 'error', name='audio_status')


def upgrade() -> None:
    # ==================== Users ====================
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('text_api_key_ciphertext', sa.LargeBinary(), nullable=True),
        sa.Column('text_api_key_iv', sa.LargeBinary(), nullable=True),
        sa.Column('speech_api_key_ciphertext', sa.LargeBinary(), nullable=True),
        sa.Column('speech_api_key_iv', sa.LargeBinary(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # ==================== Child Profiles ====================
    op.create_table(
        'child_profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('interests', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_child_profiles'),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.id'],
            name='fk_child_profiles_user_id_users',
            ondelete='CASCADE',
        ),
    )
    op.create_index('ix_child_profiles_user_id', 'child_profiles', ['user_id'], unique=False)

    # ==================== Voice Presets ====================
    op.create_table(
        'voice_presets',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('provider_voice_id', sa.String(length=255), nullable=False),
        sa.Column('provider_voice_name', sa.String(length=255), nullable=False),
        sa.Column('sample_audio_path', sa.String(length=1024), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_voice_presets'),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.id'],
            name='fk_voice_presets_user_id_users',
            ondelete='CASCADE',
        ),
    )
    op.create_index('ix_voice_presets_user_id', 'voice_presets', ['user_id'], unique=False)

    # ==================== Stories ====================
    # child_id / voice_preset_id는 FK 없음 (원본 삭제 후에도 스냅샷 유지)
    op.create_table(
        'stories',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('child_id', sa.Uuid(), nullable=True),
        sa.Column('child_name', sa.String(length=100), nullable=False),
        sa.Column('voice_preset_id', sa.Uuid(), nullable=True),
        sa.Column('voice_name', sa.String(length=100), nullable=False),
        sa.Column('voice_description', sa.Text(), nullable=True),
        sa.Column('audio_storage_path', sa.String(length=1024), nullable=True),
        sa.Column('audio_status', audio_status, nullable=False, server_default='pending'),
        sa.Column('audio_status_updated_at', sa.DateTime(), nullable=False),
        sa.Column('is_favorite', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_stories'),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.id'],
            name='fk_stories_user_id_users',
            ondelete='CASCADE',
        ),
        sa.CheckConstraint(
            "audio_status != 'ready' OR audio_storage_path IS NOT NULL",
            name='ck_stories_ready_has_audio',
        ),
    )
    op.create_index('ix_stories_user_id', 'stories', ['user_id'], unique=False)
    op.create_index('ix_stories_child_id', 'stories', ['child_id'], unique=False)
    op.create_index('ix_stories_voice_preset_id', 'stories', ['voice_preset_id'], unique=False)
    op.create_index('ix_stories_user_id_created_at', 'stories', ['user_id', 'created_at'], unique=False)


def downgrade() -> None:
    op.drop_table('stories')
    audio_status.drop(op.get_bind(), checkfirst=True)
    op.drop_table('voice_presets')
    op.drop_table('child_profiles')
    op.drop_table('users')
