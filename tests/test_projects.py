"""프로젝트 API 테스트 — 세부 항목/기술 동기화, 연쇄 삭제, 세부 항목 라우터.

Project API tests — Points and technology sync, cascade delete, and the
project point router.
"""

from httpx import AsyncClient

from tests.conftest import ADMIN, auth_header

PROJECTS = f"{ADMIN}/projects"
POINTS = f"{ADMIN}/project-points"


class TestProjectCrud:
    """프로젝트 CRUD 테스트."""

    async def test_create_project(self, client: AsyncClient, admin_token, profile, technologies):
        res = await client.post(f"{PROJECTS}", json={
            "profile_id": profile.id,
            "name": "Difference Engine",
            "github": "https://github.com/ada/engine",
            "project_points": ["Designed the mill", "Wrote notes"],
            "technology_ids": [technologies["Python"].id],
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "Difference Engine"
        assert [p["content"] for p in data["project_points"]] == ["Designed the mill", "Wrote notes"]
        assert data["technologies"] == [{"id": technologies["Python"].id, "name": "Python"}]

    async def test_create_unknown_profile(self, client: AsyncClient, admin_token):
        res = await client.post(f"{PROJECTS}", json={"profile_id": 9999, "name": "x"}, headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_list_newest_first(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        first = (await client.post(f"{PROJECTS}", json={"profile_id": profile.id, "name": "A"}, headers=headers)).json()
        second = (await client.post(f"{PROJECTS}", json={"profile_id": profile.id, "name": "B"}, headers=headers)).json()

        res = await client.get(f"{PROJECTS}", headers=headers)
        assert [p["id"] for p in res.json()] == [second["id"], first["id"]]

    async def test_update_project(self, client: AsyncClient, admin_token, profile, technologies):
        headers = auth_header(admin_token)
        created = (await client.post(f"{PROJECTS}", json={
            "profile_id": profile.id,
            "name": "Old",
            "url": "https://old.example",
            "technology_ids": [technologies["Python"].id],
        }, headers=headers)).json()

        res = await client.put(f"{PROJECTS}/{created['id']}", json={
            "name": "New",
            "url": None,
            "technology_ids": [technologies["React"].id, technologies["PostgreSQL"].id],
        }, headers=headers)
        assert res.status_code == 200
        data = res.json()
        assert data["name"] == "New"
        assert data["url"] == "https://old.example"
        assert {t["name"] for t in data["technologies"]} == {"React", "PostgreSQL"}

    async def test_update_not_found(self, client: AsyncClient, admin_token):
        res = await client.patch(f"{PROJECTS}/9999", json={"name": "x"}, headers=auth_header(admin_token))
        assert res.status_code == 404
        assert res.json()["message"] == "Project not found with id: 9999"

    async def test_delete_cascades_points(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        created = (await client.post(f"{PROJECTS}", json={
            "profile_id": profile.id,
            "name": "Temp",
            "project_points": ["p"],
        }, headers=headers)).json()
        point_id = created["project_points"][0]["id"]

        res = await client.delete(f"{PROJECTS}/{created['id']}", headers=headers)
        assert res.status_code == 204
        res = await client.get(f"{POINTS}/{point_id}", headers=headers)
        assert res.status_code == 404


class TestProjectPoints:
    """프로젝트 세부 항목 라우터 테스트."""

    async def test_point_crud(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        project = (await client.post(f"{PROJECTS}", json={"profile_id": profile.id, "name": "P"}, headers=headers)).json()

        res = await client.post(f"{POINTS}", json={"project_id": project["id"], "content": "Shipped v1"}, headers=headers)
        assert res.status_code == 201
        point = res.json()

        res = await client.get(f"{POINTS}/project/{project['id']}", headers=headers)
        assert [p["content"] for p in res.json()] == ["Shipped v1"]

        res = await client.put(f"{POINTS}/{point['id']}", json={"content": None}, headers=headers)
        assert res.status_code == 200
        assert res.json()["content"] == "Shipped v1"

        res = await client.delete(f"{POINTS}/{point['id']}", headers=headers)
        assert res.status_code == 204

    async def test_create_point_unknown_project(self, client: AsyncClient, admin_token):
        res = await client.post(f"{POINTS}", json={"project_id": 9999, "content": "x"}, headers=auth_header(admin_token))
        assert res.status_code == 404
        assert res.json()["message"] == "Project not found with id: 9999"

    async def test_list_points_unknown_project_is_empty(self, client: AsyncClient, admin_token):
        res = await client.get(f"{POINTS}/project/9999", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == []
