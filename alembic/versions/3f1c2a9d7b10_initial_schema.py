"""initial schema

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

project_status = sa.Enum('DRAFT', 'ACTIVE', 'REVIEW', 'COMPLETE', 'ARCHIVED', name='project_status')
resource_category = sa.Enum('ENGINEERING', 'GOVERNANCE', 'PROJECT_MANAGEMENT', name='resource_category')


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('customer', sa.String(), nullable=True),
        sa.Column('status', project_status, nullable=False),
        sa.Column('owner_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_projects_id', 'projects', ['id'])
    op.create_index('ix_projects_owner_id', 'projects', ['owner_id'])

    op.create_table(
        'resource_types',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('category', resource_category, nullable=False),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id'), nullable=False),
    )
    op.create_index('ix_resource_types_id', 'resource_types', ['id'])
    op.create_index('ix_resource_types_project_id', 'resource_types', ['project_id'])

    op.create_table(
        'epics',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id'), nullable=False),
    )
    op.create_index('ix_epics_id', 'epics', ['id'])
    op.create_index('ix_epics_project_id', 'epics', ['project_id'])

    op.create_table(
        'features',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('assumptions', sa.String(), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('epic_id', sa.Integer(), sa.ForeignKey('epics.id'), nullable=False),
    )
    op.create_index('ix_features_id', 'features', ['id'])
    op.create_index('ix_features_epic_id', 'features', ['epic_id'])

    op.create_table(
        'user_stories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('assumptions', sa.String(), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('feature_id', sa.Integer(), sa.ForeignKey('features.id'), nullable=False),
    )
    op.create_index('ix_user_stories_id', 'user_stories', ['id'])
    op.create_index('ix_user_stories_feature_id', 'user_stories', ['feature_id'])

    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('assumptions', sa.String(), nullable=True),
        sa.Column('hours_effort', sa.Float(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('user_story_id', sa.Integer(), sa.ForeignKey('user_stories.id'), nullable=False),
        sa.Column('resource_type_id', sa.Integer(), sa.ForeignKey('resource_types.id'), nullable=False),
    )
    op.create_index('ix_tasks_id', 'tasks', ['id'])
    op.create_index('ix_tasks_user_story_id', 'tasks', ['user_story_id'])

    op.create_table(
        'feature_templates',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=True),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_feature_templates_id', 'feature_templates', ['id'])

    op.create_table(
        'template_tasks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('hours_small', sa.Float(), nullable=False),
        sa.Column('hours_medium', sa.Float(), nullable=False),
        sa.Column('hours_large', sa.Float(), nullable=False),
        sa.Column('hours_extra_large', sa.Float(), nullable=False),
        sa.Column('resource_type_name', sa.String(), nullable=False),
        sa.Column('template_id', sa.Integer(), sa.ForeignKey('feature_templates.id'), nullable=False),
    )
    op.create_index('ix_template_tasks_id', 'template_tasks', ['id'])
    op.create_index('ix_template_tasks_template_id', 'template_tasks', ['template_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('template_tasks')
    op.drop_table('feature_templates')
    op.drop_table('tasks')
    op.drop_table('user_stories')
    op.drop_table('features')
    op.drop_table('epics')
    op.drop_table('resource_types')
    op.drop_table('projects')
    op.drop_table('users')
    resource_category.drop(op.get_bind(), checkfirst=True)
    project_status.drop(op.get_bind(), checkfirst=True)
