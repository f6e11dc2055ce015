"""기술 API 테스트 — CRUD, 이름 검색, 분류/프로필별 조회, 삭제 시 태그 정리.

Technology API tests — CRUD, name search, category/profile listings,
and link cleanup on delete.
"""

from httpx import AsyncClient

from tests.conftest import ADMIN, PUBLIC, auth_header

TECHNOLOGIES = f"{ADMIN}/technologies"


class TestTechnologyCrud:
    """기술 CRUD 테스트."""

    async def test_create_technology(self, client: AsyncClient, admin_token):
        res = await client.post(f"{TECHNOLOGIES}", json={
            "name": "FastAPI",
            "category": "Backend",
            "type": "Framework",
            "proficiency": "Advanced",
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "FastAPI"
        assert data["proficiency"] == "Advanced"

    async def test_create_invalid_proficiency(self, client: AsyncClient, admin_token):
        """정의되지 않은 숙련도는 400."""
        res = await client.post(f"{TECHNOLOGIES}", json={
            "name": "FastAPI",
            "proficiency": "Wizard",
        }, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert "proficiency" in res.json()["errors"]

    async def test_create_type_too_long(self, client: AsyncClient, admin_token):
        res = await client.post(f"{TECHNOLOGIES}", json={
            "name": "FastAPI",
            "type": "x" * 17,
        }, headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_list_technologies(self, client: AsyncClient, admin_token, technologies):
        res = await client.get(f"{TECHNOLOGIES}", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert len(res.json()) == 3

    async def test_get_technology_not_found(self, client: AsyncClient, admin_token):
        res = await client.get(f"{TECHNOLOGIES}/9999", headers=auth_header(admin_token))
        assert res.status_code == 404
        assert res.json()["message"] == "Technology not found with id: 9999"

    async def test_search_by_name(self, client: AsyncClient, admin_token, technologies):
        res = await client.get(f"{TECHNOLOGIES}/search", params={"name": "React"}, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["id"] == technologies["React"].id

    async def test_search_by_name_not_found(self, client: AsyncClient, admin_token, technologies):
        res = await client.get(f"{TECHNOLOGIES}/search", params={"name": "Cobol"}, headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_list_by_category_sorted_by_name(self, client: AsyncClient, admin_token, db, technologies):
        """분류별 조회는 이름순."""
        from app.models.technology import Technology
        db.add(Technology(name="Django", category="Backend"))
        await db.flush()

        res = await client.get(f"{TECHNOLOGIES}/category/Backend", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert [t["name"] for t in res.json()] == ["Django", "Python"]

    async def test_update_is_null_safe(self, client: AsyncClient, admin_token, technologies):
        python = technologies["Python"]
        res = await client.patch(f"{TECHNOLOGIES}/{python.id}", json={
            "proficiency": "Expert",
            "category": None,
        }, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["proficiency"] == "Expert"
        assert res.json()["category"] == "Backend"

    async def test_delete_technology(self, client: AsyncClient, admin_token, technologies):
        python = technologies["Python"]
        res = await client.delete(f"{TECHNOLOGIES}/{python.id}", headers=auth_header(admin_token))
        assert res.status_code == 204

        res = await client.get(f"{TECHNOLOGIES}/{python.id}", headers=auth_header(admin_token))
        assert res.status_code == 404


class TestTechnologyLinks:
    """기술 태그 관계 테스트."""

    async def test_list_by_profile_ordering(self, client: AsyncClient, admin_token, profile, technologies):
        """프로필 기술은 분류, 이름 순."""
        ids = [t.id for t in technologies.values()]
        await client.put(f"{ADMIN}/profiles/{profile.id}", json={"technology_ids": ids}, headers=auth_header(admin_token))

        res = await client.get(f"{TECHNOLOGIES}/profile/{profile.id}", headers=auth_header(admin_token))
        assert res.status_code == 200
        # Backend < Database < Frontend
        assert [t["name"] for t in res.json()] == ["Python", "PostgreSQL", "React"]

    async def test_list_by_unknown_profile_is_empty(self, client: AsyncClient, admin_token):
        res = await client.get(f"{TECHNOLOGIES}/profile/9999", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == []

    async def test_delete_keeps_tagged_records(self, client: AsyncClient, admin_token, profile, technologies):
        """기술 삭제 시 태그만 제거되고 프로젝트는 유지."""
        headers = auth_header(admin_token)
        python, react = technologies["Python"], technologies["React"]
        res = await client.post(f"{ADMIN}/projects", json={
            "profile_id": profile.id,
            "name": "Portfolio",
            "technology_ids": [python.id, react.id],
        }, headers=headers)
        project_id = res.json()["id"]

        res = await client.delete(f"{TECHNOLOGIES}/{python.id}", headers=headers)
        assert res.status_code == 204

        res = await client.get(f"{ADMIN}/projects/{project_id}", headers=headers)
        assert res.status_code == 200
        assert [t["name"] for t in res.json()["technologies"]] == ["React"]

        res = await client.get(f"{PUBLIC}/profiles/{profile.id}")
        assert res.status_code == 200
