"""초기 데이터 시드 스크립트 — 테이블 및 관리자 계정 생성.

Seed script — Creates tables and the initial administrator account.
Run this script once to bootstrap the database.

Usage:
    python -m app.seed

Creates:
    - ORM 메타데이터의 모든 테이블 (Every table in the ORM metadata)
    - 1개 관리자 계정: ADMIN_USERNAME / ADMIN_PASSWORD (1 admin account from settings)
"""

import asyncio
import logging

from app.config import settings
from app.database import Base, async_session, engine
from app.models import *  # noqa: F401,F403
from app.repositories.admin_repository import admin_repository
from app.services.auth_service import auth_service

logger = logging.getLogger("app.seed")


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Creates tables if they don't exist, then inserts the admin account.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    # 테이블 생성: DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        # 이미 시드되었는지 확인 (Check for an existing admin with the same username)
        if await admin_repository.get_by_username(db, settings.ADMIN_USERNAME) is not None:
            logger.info("Admin '%s' already exists. Skipping.", settings.ADMIN_USERNAME)
            return

        admin = await auth_service.create_admin(
            db,
            username=settings.ADMIN_USERNAME,
            password=settings.ADMIN_PASSWORD,
            email=settings.ADMIN_EMAIL,
            name=settings.ADMIN_NAME,
        )
        await db.commit()
        logger.info("Seeded: admin=%s (id=%s)", admin.username, admin.id)


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    asyncio.run(seed())
