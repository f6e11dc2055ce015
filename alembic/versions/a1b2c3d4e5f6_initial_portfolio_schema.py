"""initial_portfolio_schema

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 09:00:00.000000

포트폴리오 스키마 초기 생성: 관리자, 프로필, 기술, 경력, 프로젝트, 상세 레코드, 연결 테이블.
Create the portfolio schema: admins, profiles, technologies, experiences,
projects, profile-owned detail records, and the technology link tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def _profile_fk() -> sa.Column:
    return sa.Column('profile_id', sa.Integer(), sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)


def upgrade() -> None:
    # admins: 관리 API 로그인 계정 (Admin API accounts)
    op.create_table(
        'admins',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(50), nullable=False, unique=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(512), nullable=False),
        sa.Column('enabled', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('role', sa.String(32), server_default='ADMIN', nullable=False),
        sa.Column('last_login', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )

    # profiles: 포트폴리오 소유자 (Portfolio owners, root aggregate)
    op.create_table(
        'profiles',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('fname', sa.String(255), nullable=False),
        sa.Column('lname', sa.String(255), nullable=False),
        sa.Column('sex', sa.String(64), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('banner', sa.String(512), nullable=True),
        sa.Column('intro', sa.Text(), nullable=True),
        sa.Column('contour', sa.Text(), nullable=True),
        sa.Column('url', sa.String(512), nullable=True),
        *_timestamps(),
    )

    # technologies: 기술 카탈로그 (Technology catalog, not profile-owned)
    op.create_table(
        'technologies',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('category', sa.String(255), nullable=True),
        sa.Column('type', sa.String(16), nullable=True),
        sa.Column('proficiency', sa.String(16), nullable=True),
        sa.Column('banner', sa.String(512), nullable=True),
        sa.Column('github', sa.String(512), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_technologies_name', 'technologies', ['name'])

    # experiences / experience_points
    op.create_table(
        'experiences',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        _profile_fk(),
        sa.Column('company', sa.String(255), nullable=True),
        sa.Column('position', sa.String(255), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('url', sa.String(512), nullable=True),
        sa.Column('banner', sa.String(512), nullable=True),
        sa.Column('github', sa.String(512), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_experiences_profile_id', 'experiences', ['profile_id'])

    op.create_table(
        'experience_points',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('experience_id', sa.Integer(), sa.ForeignKey('experiences.id', ondelete='CASCADE'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_experience_points_experience_id', 'experience_points', ['experience_id'])

    # projects / project_points
    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        _profile_fk(),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('url', sa.String(512), nullable=True),
        sa.Column('banner', sa.String(512), nullable=True),
        sa.Column('github', sa.String(512), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_projects_profile_id', 'projects', ['profile_id'])

    op.create_table(
        'project_points',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_project_points_project_id', 'project_points', ['project_id'])

    # 프로필 소유 상세 레코드 (Profile-owned detail records)
    op.create_table(
        'addresses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        _profile_fk(),
        sa.Column('street', sa.String(255), nullable=True),
        sa.Column('landmark', sa.String(255), nullable=True),
        sa.Column('city', sa.String(64), nullable=True),
        sa.Column('state', sa.String(64), nullable=True),
        sa.Column('country', sa.String(64), nullable=True),
        sa.Column('pincode', sa.Integer(), nullable=True),
        sa.Column('type', sa.String(64), nullable=True),
        sa.Column('phone', sa.String(16), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('url', sa.String(255), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_addresses_profile_id', 'addresses', ['profile_id'])

    op.create_table(
        'educations',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        _profile_fk(),
        sa.Column('degree', sa.String(255), nullable=True),
        sa.Column('institution', sa.String(255), nullable=True),
        sa.Column('field', sa.String(255), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('percentage', sa.Numeric(5, 2), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('url', sa.String(512), nullable=True),
        sa.Column('banner', sa.String(512), nullable=True),
        sa.Column('github', sa.String(512), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_educations_profile_id', 'educations', ['profile_id'])

    op.create_table(
        'contacts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        _profile_fk(),
        sa.Column('platform', sa.String(255), nullable=False),
        sa.Column('url', sa.String(512), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('banner', sa.String(512), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_contacts_profile_id', 'contacts', ['profile_id'])

    op.create_table(
        'achievements',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        _profile_fk(),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('date_achieved', sa.Date(), nullable=True),
        sa.Column('issuer', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('url', sa.String(512), nullable=True),
        sa.Column('banner', sa.String(512), nullable=True),
        sa.Column('github', sa.String(512), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_achievements_profile_id', 'achievements', ['profile_id'])

    op.create_table(
        'faqs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        _profile_fk(),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_faqs_profile_id', 'faqs', ['profile_id'])

    op.create_table(
        'inquiries',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        _profile_fk(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_inquiries_profile_id', 'inquiries', ['profile_id'])

    # 기술 연결 테이블: 양쪽 FK 모두 CASCADE (Technology link tables, both sides cascade)
    for table_name, owner_column, owner_table in (
        ('profiles_technologies', 'profile_id', 'profiles'),
        ('experiences_technologies', 'experience_id', 'experiences'),
        ('projects_technologies', 'project_id', 'projects'),
    ):
        op.create_table(
            table_name,
            sa.Column(owner_column, sa.Integer(), sa.ForeignKey(f'{owner_table}.id', ondelete='CASCADE'), primary_key=True),
            sa.Column('technology_id', sa.Integer(), sa.ForeignKey('technologies.id', ondelete='CASCADE'), primary_key=True),
        )


def downgrade() -> None:
    for table_name in ('projects_technologies', 'experiences_technologies', 'profiles_technologies'):
        op.drop_table(table_name)

    for table_name in ('inquiries', 'faqs', 'achievements', 'contacts', 'educations', 'addresses'):
        op.drop_index(f'ix_{table_name}_profile_id', table_name=table_name)
        op.drop_table(table_name)

    op.drop_index('ix_project_points_project_id', table_name='project_points')
    op.drop_table('project_points')
    op.drop_index('ix_projects_profile_id', table_name='projects')
    op.drop_table('projects')

    op.drop_index('ix_experience_points_experience_id', table_name='experience_points')
    op.drop_table('experience_points')
    op.drop_index('ix_experiences_profile_id', table_name='experiences')
    op.drop_table('experiences')

    op.drop_index('ix_technologies_name', table_name='technologies')
    op.drop_table('technologies')
    op.drop_table('profiles')
    op.drop_table('admins')
