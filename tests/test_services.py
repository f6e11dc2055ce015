"""서비스 계층 테스트 — HTTP를 거치지 않고 비즈니스 로직 검증.

Service layer tests — Business logic exercised directly against the session.
"""

import logging

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.admin import LoginRequest
from app.schemas.experience import ExperienceCreate, ExperiencePointUpdate, ExperienceUpdate
from app.schemas.portfolio import EducationCreate, FaqCreate, FaqUpdate, InquiryCreate
from app.schemas.profile import ProfileCreate
from app.schemas.project import ProjectCreate, ProjectPointUpdate
from app.services.auth_service import auth_service
from app.services.education_service import education_service
from app.services.experience_point_service import experience_point_service
from app.services.experience_service import experience_service
from app.services.faq_service import faq_service
from app.services.inquiry_service import inquiry_service
from app.services.profile_service import profile_service
from app.services.project_point_service import project_point_service
from app.services.project_service import project_service
from app.services.technology_service import technology_service
from app.utils.exceptions import DuplicateError, NotFoundError, UnauthorizedError


class TestTechnologyService:
    """기술 서비스 테스트."""

    async def test_resolve_collapses_duplicates(self, db: AsyncSession, technologies):
        python, react = technologies["Python"], technologies["React"]
        resolved = await technology_service.resolve_technologies(db, [react.id, python.id, react.id])
        assert [t.id for t in resolved] == [react.id, python.id]

    async def test_resolve_empty(self, db: AsyncSession):
        assert await technology_service.resolve_technologies(db, []) == []

    async def test_resolve_unknown(self, db: AsyncSession, technologies):
        with pytest.raises(NotFoundError) as exc_info:
            await technology_service.resolve_technologies(db, [technologies["Python"].id, 4242])
        assert exc_info.value.detail == "Technology not found with id: 4242"

    async def test_get_by_name_not_found(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await technology_service.get_technology_by_name(db, "Fortran")


class TestProfileService:
    """프로필 서비스 테스트."""

    async def test_create_and_get(self, db: AsyncSession, technologies):
        created = await profile_service.create_profile(db, ProfileCreate(
            fname="Katherine",
            lname="Johnson",
            technology_ids=[technologies["Python"].id],
        ))
        fetched = await profile_service.get_profile_by_name(db, "Katherine", "Johnson")
        assert fetched.id == created.id

    async def test_ensure_profile_exists(self, db: AsyncSession, profile):
        await profile_service.ensure_profile_exists(db, profile.id)
        with pytest.raises(NotFoundError):
            await profile_service.ensure_profile_exists(db, profile.id + 100)

    async def test_delete_not_found(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await profile_service.delete_profile(db, 1)


class TestExperienceService:
    """경력 서비스 테스트."""

    async def test_create_with_points(self, db: AsyncSession, profile):
        result = await experience_service.create_experience(db, ExperienceCreate(
            profile_id=profile.id,
            company="Acme",
            experience_points=["a", "b"],
        ))
        assert [p.content for p in result.experience_points] == ["a", "b"]
        assert result.technologies == []

    async def test_update_unknown(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await experience_service.update_experience(db, 999, ExperienceUpdate(company="x"))


class TestPointServices:
    """세부 항목 서비스 테스트 (조회/수정/삭제 로그 포함)."""

    async def test_experience_point_lifecycle_logs(self, db: AsyncSession, profile, caplog):
        experience = await experience_service.create_experience(db, ExperienceCreate(
            profile_id=profile.id, company="Acme", experience_points=["first"],
        ))
        point_id = experience.experience_points[0].id

        with caplog.at_level(logging.INFO, logger="app.services.experience_point_service"):
            fetched = await experience_point_service.get_point(db, point_id)
            updated = await experience_point_service.update_point(db, point_id, ExperiencePointUpdate(content="edited"))
            await experience_point_service.delete_point(db, point_id)

        assert fetched.content == "first"
        assert updated.content == "edited"
        messages = [r.getMessage() for r in caplog.records if r.name == "app.services.experience_point_service"]
        assert f"Fetching experience point with id: {point_id}" in messages
        assert f"Experience point updated successfully with id: {point_id}" in messages
        assert f"Experience point deleted successfully with id: {point_id}" in messages

    async def test_project_point_lifecycle_logs(self, db: AsyncSession, profile, caplog):
        project = await project_service.create_project(db, ProjectCreate(
            profile_id=profile.id, name="Engine", project_points=["first"],
        ))
        point_id = project.project_points[0].id

        with caplog.at_level(logging.INFO, logger="app.services.project_point_service"):
            await project_point_service.get_point(db, point_id)
            await project_point_service.update_point(db, point_id, ProjectPointUpdate(content="edited"))
            await project_point_service.delete_point(db, point_id)

        messages = [r.getMessage() for r in caplog.records if r.name == "app.services.project_point_service"]
        assert f"Fetching project point with id: {point_id}" in messages
        assert f"Project point updated successfully with id: {point_id}" in messages
        assert f"Project point deleted successfully with id: {point_id}" in messages

    async def test_point_unknown(self, db: AsyncSession):
        with pytest.raises(NotFoundError) as exc_info:
            await project_point_service.get_point(db, 77)
        assert exc_info.value.detail == "Project point not found with id: 77"


class TestRecordServices:
    """상세 레코드 서비스 테스트."""

    async def test_faq_null_safe_update(self, db: AsyncSession, profile):
        created = await faq_service.create_faq(db, FaqCreate(profile_id=profile.id, question="Q", answer="A"))
        updated = await faq_service.update_faq(db, created.id, FaqUpdate(answer="B"))
        assert updated.question == "Q"
        assert updated.answer == "B"

    async def test_faq_unknown_profile(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await faq_service.create_faq(db, FaqCreate(profile_id=999, question="Q", answer="A"))

    async def test_education_percentage_is_float(self, db: AsyncSession, profile):
        result = await education_service.create_education(db, EducationCreate(profile_id=profile.id, percentage="91.25"))
        assert result.percentage == pytest.approx(91.25)

    async def test_inquiry_lists(self, db: AsyncSession, profile, other_profile):
        await inquiry_service.create_inquiry(db, InquiryCreate(
            profile_id=profile.id, name="N", email="n@example.com", message="M",
        ))
        assert len(await inquiry_service.list_inquiries_by_profile(db, profile.id)) == 1
        assert await inquiry_service.list_inquiries_by_profile(db, other_profile.id) == []
        assert len(await inquiry_service.list_inquiries(db)) == 1

    async def test_inquiry_get_unknown(self, db: AsyncSession):
        with pytest.raises(NotFoundError) as exc_info:
            await inquiry_service.get_inquiry(db, 5)
        assert exc_info.value.detail == "Inquiry not found with id: 5"


class TestAuthService:
    """인증 서비스 테스트."""

    async def test_create_admin_duplicate(self, db: AsyncSession, admin_user):
        with pytest.raises(DuplicateError):
            await auth_service.create_admin(db, username="admin", password="pw", email="other@test.com")
        with pytest.raises(DuplicateError):
            await auth_service.create_admin(db, username="other", password="pw", email="admin@test.com")

    async def test_create_admin_then_login(self, db: AsyncSession):
        admin = await auth_service.create_admin(db, username="root", password="s3cret!", email="root@test.com")
        assert admin.password_hash != "s3cret!"

        token = await auth_service.login(db, LoginRequest(username="root", password="s3cret!"))
        assert token.access_token

    async def test_login_wrong_password(self, db: AsyncSession, admin_user):
        with pytest.raises(UnauthorizedError):
            await auth_service.login(db, LoginRequest(username="admin", password="nope"))
