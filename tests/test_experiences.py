"""경력 API 테스트 — 세부 항목/기술과 함께 생성, 부분 수정, 연쇄 삭제, 세부 항목 라우터.

Experience API tests — Creation with points and technologies, partial
updates, cascade delete, and the experience point router.
"""

from httpx import AsyncClient

from tests.conftest import ADMIN, auth_header

EXPERIENCES = f"{ADMIN}/experiences"
POINTS = f"{ADMIN}/experience-points"


async def _create_experience(client: AsyncClient, token: str, profile_id: int, **extra) -> dict:
    payload = {"profile_id": profile_id, "company": "Acme", "position": "Engineer"}
    payload.update(extra)
    res = await client.post(f"{EXPERIENCES}", json=payload, headers=auth_header(token))
    assert res.status_code == 201, res.text
    return res.json()


class TestExperienceCrud:
    """경력 CRUD 테스트."""

    async def test_create_with_points_and_technologies(self, client: AsyncClient, admin_token, profile, technologies):
        """세부 항목과 기술 태그를 함께 생성."""
        data = await _create_experience(
            client, admin_token, profile.id,
            start_date="2020-01-01",
            experience_points=["Built APIs", "Mentored juniors"],
            technology_ids=[technologies["Python"].id, technologies["PostgreSQL"].id],
        )
        assert data["company"] == "Acme"
        assert data["start_date"] == "2020-01-01"
        assert [p["content"] for p in data["experience_points"]] == ["Built APIs", "Mentored juniors"]
        assert {t["name"] for t in data["technologies"]} == {"Python", "PostgreSQL"}
        assert "profile_id" not in data

    async def test_create_unknown_profile(self, client: AsyncClient, admin_token):
        """존재하지 않는 프로필이면 404."""
        res = await client.post(f"{EXPERIENCES}", json={"profile_id": 9999, "company": "Acme"}, headers=auth_header(admin_token))
        assert res.status_code == 404
        assert res.json()["message"] == "Profile not found with id: 9999"

    async def test_create_unknown_technology_writes_nothing(self, client: AsyncClient, admin_token, profile):
        res = await client.post(f"{EXPERIENCES}", json={
            "profile_id": profile.id,
            "company": "Acme",
            "technology_ids": [9999],
        }, headers=auth_header(admin_token))
        assert res.status_code == 404

        res = await client.get(f"{EXPERIENCES}", headers=auth_header(admin_token))
        assert res.json() == []

    async def test_get_not_found(self, client: AsyncClient, admin_token):
        res = await client.get(f"{EXPERIENCES}/9999", headers=auth_header(admin_token))
        assert res.status_code == 404
        assert res.json()["message"] == "Experience not found with id: 9999"

    async def test_list_by_profile_most_recent_first(self, client: AsyncClient, admin_token, profile, other_profile):
        """프로필별 목록은 시작일 역순, 시작일 없는 항목은 마지막."""
        older = await _create_experience(client, admin_token, profile.id, start_date="2018-05-01")
        undated = await _create_experience(client, admin_token, profile.id)
        newer = await _create_experience(client, admin_token, profile.id, start_date="2022-03-01")
        await _create_experience(client, admin_token, other_profile.id, start_date="2023-01-01")

        res = await client.get(f"{EXPERIENCES}/profile/{profile.id}", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert [e["id"] for e in res.json()] == [newer["id"], older["id"], undated["id"]]

    async def test_update_is_null_safe(self, client: AsyncClient, admin_token, profile):
        created = await _create_experience(client, admin_token, profile.id, location="Remote")
        res = await client.put(f"{EXPERIENCES}/{created['id']}", json={
            "position": "Senior Engineer",
            "location": None,
        }, headers=auth_header(admin_token))
        assert res.status_code == 200
        data = res.json()
        assert data["position"] == "Senior Engineer"
        assert data["location"] == "Remote"
        assert data["company"] == "Acme"

    async def test_update_reparent(self, client: AsyncClient, admin_token, profile, other_profile):
        """profile_id로 다른 프로필로 이동."""
        created = await _create_experience(client, admin_token, profile.id)
        res = await client.patch(f"{EXPERIENCES}/{created['id']}", json={"profile_id": other_profile.id}, headers=auth_header(admin_token))
        assert res.status_code == 200

        res = await client.get(f"{EXPERIENCES}/profile/{other_profile.id}", headers=auth_header(admin_token))
        assert [e["id"] for e in res.json()] == [created["id"]]

    async def test_update_reparent_unknown_profile(self, client: AsyncClient, admin_token, profile):
        created = await _create_experience(client, admin_token, profile.id)
        res = await client.patch(f"{EXPERIENCES}/{created['id']}", json={"profile_id": 9999}, headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_update_technologies(self, client: AsyncClient, admin_token, profile, technologies):
        """태그 교체, 생략 시 유지, 빈 목록은 모두 제거."""
        created = await _create_experience(client, admin_token, profile.id, technology_ids=[technologies["Python"].id])
        url = f"{EXPERIENCES}/{created['id']}"
        headers = auth_header(admin_token)

        res = await client.put(url, json={"technology_ids": [technologies["React"].id]}, headers=headers)
        assert [t["name"] for t in res.json()["technologies"]] == ["React"]

        res = await client.put(url, json={"company": "Globex"}, headers=headers)
        assert [t["name"] for t in res.json()["technologies"]] == ["React"]

        res = await client.put(url, json={"technology_ids": []}, headers=headers)
        assert res.json()["technologies"] == []

        res = await client.put(url, json={"technology_ids": [9999]}, headers=headers)
        assert res.status_code == 404

    async def test_delete_cascades_points(self, client: AsyncClient, admin_token, profile, technologies):
        """경력 삭제 시 세부 항목도 삭제, 기술은 유지."""
        created = await _create_experience(
            client, admin_token, profile.id,
            experience_points=["One"],
            technology_ids=[technologies["Python"].id],
        )
        point_id = created["experience_points"][0]["id"]

        res = await client.delete(f"{EXPERIENCES}/{created['id']}", headers=auth_header(admin_token))
        assert res.status_code == 204

        res = await client.get(f"{POINTS}/{point_id}", headers=auth_header(admin_token))
        assert res.status_code == 404
        res = await client.get(f"{ADMIN}/technologies/{technologies['Python'].id}", headers=auth_header(admin_token))
        assert res.status_code == 200

    async def test_delete_not_found(self, client: AsyncClient, admin_token):
        res = await client.delete(f"{EXPERIENCES}/9999", headers=auth_header(admin_token))
        assert res.status_code == 404


class TestExperiencePoints:
    """경력 세부 항목 라우터 테스트."""

    async def test_point_crud(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        experience = await _create_experience(client, admin_token, profile.id, experience_points=["First"])

        res = await client.post(f"{POINTS}", json={"experience_id": experience["id"], "content": "Second"}, headers=headers)
        assert res.status_code == 201
        point = res.json()
        assert point["experience_id"] == experience["id"]

        res = await client.get(f"{POINTS}/experience/{experience['id']}", headers=headers)
        assert [p["content"] for p in res.json()] == ["First", "Second"]

        res = await client.patch(f"{POINTS}/{point['id']}", json={"content": "Second, edited"}, headers=headers)
        assert res.status_code == 200
        assert res.json()["content"] == "Second, edited"

        res = await client.get(f"{EXPERIENCES}/{experience['id']}", headers=headers)
        assert [p["content"] for p in res.json()["experience_points"]] == ["First", "Second, edited"]

        res = await client.delete(f"{POINTS}/{point['id']}", headers=headers)
        assert res.status_code == 204
        res = await client.get(f"{POINTS}/{point['id']}", headers=headers)
        assert res.status_code == 404

    async def test_create_point_unknown_experience(self, client: AsyncClient, admin_token):
        res = await client.post(f"{POINTS}", json={"experience_id": 9999, "content": "x"}, headers=auth_header(admin_token))
        assert res.status_code == 404
        assert res.json()["message"] == "Experience not found with id: 9999"

    async def test_create_point_blank_content(self, client: AsyncClient, admin_token, profile):
        experience = await _create_experience(client, admin_token, profile.id)
        res = await client.post(f"{POINTS}", json={"experience_id": experience["id"], "content": ""}, headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_move_point_to_other_experience(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        source = await _create_experience(client, admin_token, profile.id, experience_points=["Movable"])
        target = await _create_experience(client, admin_token, profile.id)
        point_id = source["experience_points"][0]["id"]

        res = await client.put(f"{POINTS}/{point_id}", json={"experience_id": target["id"]}, headers=headers)
        assert res.status_code == 200
        assert res.json()["content"] == "Movable"

        res = await client.get(f"{POINTS}/experience/{target['id']}", headers=headers)
        assert [p["id"] for p in res.json()] == [point_id]
        res = await client.get(f"{POINTS}/experience/{source['id']}", headers=headers)
        assert res.json() == []

    async def test_move_point_unknown_experience(self, client: AsyncClient, admin_token, profile):
        experience = await _create_experience(client, admin_token, profile.id, experience_points=["x"])
        point_id = experience["experience_points"][0]["id"]
        res = await client.put(f"{POINTS}/{point_id}", json={"experience_id": 9999}, headers=auth_header(admin_token))
        assert res.status_code == 404
