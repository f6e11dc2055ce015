"""관리자 API 라우터 패키지 — 모든 관리자 엔드포인트 통합.

Admin API Router package — Aggregates all admin-facing endpoints
into a single router mounted under /api/v1/admin.
Every route shares the "admin" rate-limit bucket; all routes except
/auth/login require an ADMIN bearer token.

Included routers:
    - auth: 관리자 로그인 (Admin login, current admin)
    - profiles: 프로필 관리 (Profile management, name search)
    - technologies: 기술 관리 (Technology management, category/profile listing)
    - experiences, experience_points: 경력 및 세부 항목 (Experiences and points)
    - projects, project_points: 프로젝트 및 세부 항목 (Projects and points)
    - addresses, educations, contacts, achievements, faqs: 프로필 상세 (Profile details)
    - inquiries: 방문자 문의 (Visitor inquiries, also served at /inquires)
"""

from fastapi import APIRouter, Depends

from app.api.deps import admin_rate_limit
from app.schemas.common import ErrorResponse
from app.api.admin.auth import router as auth_router
from app.api.admin.profiles import router as profiles_router
from app.api.admin.technologies import router as technologies_router
from app.api.admin.experiences import router as experiences_router
from app.api.admin.experience_points import router as experience_points_router
from app.api.admin.projects import router as projects_router
from app.api.admin.project_points import router as project_points_router
from app.api.admin.addresses import router as addresses_router
from app.api.admin.educations import router as educations_router
from app.api.admin.contacts import router as contacts_router
from app.api.admin.achievements import router as achievements_router
from app.api.admin.faqs import router as faqs_router
from app.api.admin.inquiries import router as inquiries_router

# 공통 오류 응답 문서화 (Uniform error body in the OpenAPI schema)
ADMIN_ERROR_RESPONSES: dict = {
    code: {"model": ErrorResponse} for code in (400, 401, 403, 404, 409, 429)
}

admin_router: APIRouter = APIRouter(
    dependencies=[Depends(admin_rate_limit)],
    responses=ADMIN_ERROR_RESPONSES,
)

# ---------------------------------------------------------------------------
# 인증 (Authentication)
# ---------------------------------------------------------------------------
admin_router.include_router(auth_router, prefix="/auth", tags=["Admin Auth"])

# ---------------------------------------------------------------------------
# 프로필 및 기술 (Profile aggregate and technology catalog)
# ---------------------------------------------------------------------------
admin_router.include_router(profiles_router, prefix="/profiles", tags=["Profiles"])
admin_router.include_router(technologies_router, prefix="/technologies", tags=["Technologies"])

# ---------------------------------------------------------------------------
# 경력/프로젝트 (Experiences and projects with their points)
# ---------------------------------------------------------------------------
admin_router.include_router(experiences_router, prefix="/experiences", tags=["Experiences"])
admin_router.include_router(experience_points_router, prefix="/experience-points", tags=["Experience Points"])
admin_router.include_router(projects_router, prefix="/projects", tags=["Projects"])
admin_router.include_router(project_points_router, prefix="/project-points", tags=["Project Points"])

# ---------------------------------------------------------------------------
# 프로필 상세 (Profile-owned detail records)
# ---------------------------------------------------------------------------
admin_router.include_router(addresses_router, prefix="/addresses", tags=["Addresses"])
admin_router.include_router(educations_router, prefix="/educations", tags=["Educations"])
admin_router.include_router(contacts_router, prefix="/contacts", tags=["Contacts"])
admin_router.include_router(achievements_router, prefix="/achievements", tags=["Achievements"])
admin_router.include_router(faqs_router, prefix="/faqs", tags=["FAQs"])
admin_router.include_router(inquiries_router, prefix="/inquiries", tags=["Inquiries"])
admin_router.include_router(inquiries_router, prefix="/inquires", include_in_schema=False)
