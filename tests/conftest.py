"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh database (aiosqlite + StaticPool) with foreign keys
enforced so ON DELETE CASCADE behaves as it does on PostgreSQL.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403
from app.utils.jwt import create_access_token
from app.utils.password import hash_password
from app.utils.rate_limit import rate_limiter

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite://"

ADMIN = "/api/v1/admin"
PUBLIC = "/api/v1"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 테스트마다 새 인메모리 DB."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(eng.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """테스트 간 요청 제한 기록을 초기화합니다."""
    rate_limiter.reset()
    yield
    rate_limiter.reset()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def admin_user(db: AsyncSession):
    """관리자 계정을 생성합니다."""
    from app.models.admin import Admin
    admin = Admin(
        username="admin",
        email="admin@test.com",
        name="Test Admin",
        password_hash=hash_password("admin123!"),
        role="ADMIN",
    )
    db.add(admin)
    await db.flush()
    await db.refresh(admin)
    return admin


@pytest_asyncio.fixture
async def viewer_user(db: AsyncSession):
    """ADMIN 역할이 아닌 계정을 생성합니다."""
    from app.models.admin import Admin
    viewer = Admin(
        username="viewer",
        email="viewer@test.com",
        password_hash=hash_password("viewer123!"),
        role="VIEWER",
    )
    db.add(viewer)
    await db.flush()
    await db.refresh(viewer)
    return viewer


@pytest_asyncio.fixture
async def profile(db: AsyncSession):
    """테스트 프로필을 생성합니다."""
    from app.models.profile import Profile
    p = Profile(fname="Ada", lname="Lovelace", intro="Analyst", url="https://ada.dev")
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


@pytest_asyncio.fixture
async def other_profile(db: AsyncSession):
    """두 번째 테스트 프로필을 생성합니다."""
    from app.models.profile import Profile
    p = Profile(fname="Alan", lname="Turing")
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


@pytest_asyncio.fixture
async def technologies(db: AsyncSession):
    """기술 3개를 생성합니다 (Python, PostgreSQL, React)."""
    from app.models.technology import Technology
    result = {}
    for name, category in [("Python", "Backend"), ("PostgreSQL", "Database"), ("React", "Frontend")]:
        tech = Technology(name=name, category=category)
        db.add(tech)
        await db.flush()
        await db.refresh(tech)
        result[name] = tech
    return result


def make_token(admin, role: str | None = None) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({
        "sub": str(admin.id),
        "username": admin.username,
        "role": role or admin.role,
    })


@pytest.fixture
def admin_token(admin_user) -> str:
    return make_token(admin_user)


@pytest.fixture
def viewer_token(viewer_user) -> str:
    return make_token(viewer_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
