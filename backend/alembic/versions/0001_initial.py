"""initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def _deleted_at():
    return sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True)


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=50), nullable=False, server_default='developer'),
        *_timestamps(),
        _deleted_at(),
        sa.UniqueConstraint('email'),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'])
    op.create_index('ix_users_deleted_at', 'users', ['deleted_at'])

    op.create_table('company_profiles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('company_name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('website', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('location', sa.String(length=255), nullable=False, server_default=''),
        *_timestamps(),
        _deleted_at(),
        sa.UniqueConstraint('user_id'),
    )
    op.create_index('ix_company_profiles_user_id', 'company_profiles', ['user_id'])
    op.create_index('ix_company_profiles_deleted_at', 'company_profiles', ['deleted_at'])

    op.create_table('company_ratings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('company_id', sa.Integer(), sa.ForeignKey('company_profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('user_id', 'company_id', name='uq_rating_user_company'),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_rating_range'),
    )
    op.create_index('ix_company_ratings_company_id', 'company_ratings', ['company_id'])
    op.create_index('ix_company_ratings_user_id', 'company_ratings', ['user_id'])

    op.create_table('company_reviews',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('company_id', sa.Integer(), sa.ForeignKey('company_profiles.id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('is_approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        _deleted_at(),
    )
    op.create_index('ix_company_reviews_company_id', 'company_reviews', ['company_id'])
    op.create_index('ix_company_reviews_user_id', 'company_reviews', ['user_id'])
    op.create_index('ix_company_reviews_deleted_at', 'company_reviews', ['deleted_at'])

    op.create_table('company_review_comments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('review_id', sa.Integer(), sa.ForeignKey('company_reviews.id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('is_approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        _deleted_at(),
    )
    op.create_index('ix_company_review_comments_review_id', 'company_review_comments', ['review_id'])
    op.create_index('ix_company_review_comments_user_id', 'company_review_comments', ['user_id'])
    op.create_index('ix_company_review_comments_deleted_at', 'company_review_comments', ['deleted_at'])

    op.create_table('developer_profiles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False, server_default=''),
        *_timestamps(),
        _deleted_at(),
        sa.UniqueConstraint('user_id'),
    )
    op.create_index('ix_developer_profiles_user_id', 'developer_profiles', ['user_id'])
    op.create_index('ix_developer_profiles_deleted_at', 'developer_profiles', ['deleted_at'])

    op.create_table('job_posts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('company_id', sa.Integer(), sa.ForeignKey('company_profiles.id'), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('salary_min', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('salary_max', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('experience_min_years', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('experience_max_years', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('work_mode', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('location', sa.String(length=255), nullable=False, server_default=''),
        *_timestamps(),
        _deleted_at(),
    )
    op.create_index('ix_job_posts_company_id', 'job_posts', ['company_id'])
    op.create_index('ix_job_posts_deleted_at', 'job_posts', ['deleted_at'])

    op.create_table('job_comments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('job_post_id', sa.Integer(), sa.ForeignKey('job_posts.id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('is_approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        _deleted_at(),
    )
    op.create_index('ix_job_comments_job_post_id', 'job_comments', ['job_post_id'])
    op.create_index('ix_job_comments_user_id', 'job_comments', ['user_id'])
    op.create_index('ix_job_comments_deleted_at', 'job_comments', ['deleted_at'])

    op.create_table('user_reports',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('reporter_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('reported_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('report_type', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='pending'),
        sa.Column('reviewed_by', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('reviewed_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        _deleted_at(),
    )
    op.create_index('ix_user_reports_reporter_id', 'user_reports', ['reporter_id'])
    op.create_index('ix_user_reports_reported_id', 'user_reports', ['reported_id'])
    op.create_index('ix_user_reports_reviewed_by', 'user_reports', ['reviewed_by'])
    op.create_index('ix_user_reports_status', 'user_reports', ['status'])
    op.create_index('ix_user_reports_deleted_at', 'user_reports', ['deleted_at'])


def downgrade():
    op.drop_table('user_reports')
    op.drop_table('job_comments')
    op.drop_table('job_posts')
    op.drop_table('developer_profiles')
    op.drop_table('company_review_comments')
    op.drop_table('company_reviews')
    op.drop_table('company_ratings')
    op.drop_table('company_profiles')
    op.drop_table('users')
