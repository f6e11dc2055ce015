"""프로필 상세 레코드 API 테스트 — 주소, 학력, 연락처, 수상, FAQ, 문의.

Profile-owned record API tests — Addresses, educations, contacts,
achievements, FAQs, and inquiries.
"""

import pytest
from httpx import AsyncClient

from app.main import app
from tests.conftest import ADMIN, auth_header


# ===== Address =====

class TestAddresses:
    """주소 CRUD 테스트."""

    async def test_address_crud(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        res = await client.post(f"{ADMIN}/addresses", json={
            "profile_id": profile.id,
            "street": "12 St James's Square",
            "city": "London",
            "country": "UK",
            "pincode": 12345,
            "email": "ada@example.com",
        }, headers=headers)
        assert res.status_code == 201
        address = res.json()
        assert address["city"] == "London"

        res = await client.put(f"{ADMIN}/addresses/{address['id']}", json={"city": "Paris", "street": None}, headers=headers)
        assert res.status_code == 200
        assert res.json()["city"] == "Paris"
        assert res.json()["street"] == "12 St James's Square"

        res = await client.get(f"{ADMIN}/addresses/profile/{profile.id}", headers=headers)
        assert [a["id"] for a in res.json()] == [address["id"]]

        res = await client.delete(f"{ADMIN}/addresses/{address['id']}", headers=headers)
        assert res.status_code == 204
        res = await client.get(f"{ADMIN}/addresses/{address['id']}", headers=headers)
        assert res.status_code == 404
        assert res.json()["message"] == f"Address not found with id: {address['id']}"

    async def test_address_unknown_profile(self, client: AsyncClient, admin_token):
        res = await client.post(f"{ADMIN}/addresses", json={"profile_id": 9999, "city": "X"}, headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_address_invalid_email(self, client: AsyncClient, admin_token, profile):
        res = await client.post(f"{ADMIN}/addresses", json={"profile_id": profile.id, "email": "not-an-email"}, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert "email" in res.json()["errors"]

    async def test_address_phone_too_long(self, client: AsyncClient, admin_token, profile):
        res = await client.post(f"{ADMIN}/addresses", json={"profile_id": profile.id, "phone": "1" * 17}, headers=auth_header(admin_token))
        assert res.status_code == 400

    @pytest.mark.parametrize("collection", [
        "profiles", "technologies", "experiences", "projects", "addresses",
        "educations", "contacts", "achievements", "faqs", "inquiries",
    ])
    async def test_collection_without_trailing_slash(self, client: AsyncClient, admin_token, collection):
        """슬래시 없는 목록 경로가 리다이렉트 없이 응답."""
        res = await client.get(f"{ADMIN}/{collection}", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert "location" not in res.headers


# ===== Education =====

class TestEducations:
    """학력 테스트 — 백분율과 시작일 정렬."""

    async def test_education_percentage(self, client: AsyncClient, admin_token, profile):
        res = await client.post(f"{ADMIN}/educations", json={
            "profile_id": profile.id,
            "degree": "BSc",
            "institution": "University of London",
            "percentage": 87.5,
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        assert res.json()["percentage"] == 87.5

    async def test_education_percentage_out_of_range(self, client: AsyncClient, admin_token, profile):
        res = await client.post(f"{ADMIN}/educations", json={
            "profile_id": profile.id,
            "percentage": 120,
        }, headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_educations_by_profile_ordering(self, client: AsyncClient, admin_token, profile):
        """시작일 역순, 시작일 없는 항목은 마지막."""
        headers = auth_header(admin_token)
        ids = []
        for start in ("2010-09-01", None, "2014-09-01"):
            res = await client.post(f"{ADMIN}/educations", json={"profile_id": profile.id, "start_date": start}, headers=headers)
            ids.append(res.json()["id"])

        res = await client.get(f"{ADMIN}/educations/profile/{profile.id}", headers=headers)
        assert [e["id"] for e in res.json()] == [ids[2], ids[0], ids[1]]

    async def test_education_update_and_delete(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        created = (await client.post(f"{ADMIN}/educations", json={"profile_id": profile.id, "degree": "BSc"}, headers=headers)).json()

        res = await client.patch(f"{ADMIN}/educations/{created['id']}", json={"field": "Mathematics"}, headers=headers)
        assert res.json()["field"] == "Mathematics"
        assert res.json()["degree"] == "BSc"

        res = await client.delete(f"{ADMIN}/educations/{created['id']}", headers=headers)
        assert res.status_code == 204


# ===== Contact =====

class TestContacts:
    """연락처 테스트."""

    async def test_contact_requires_platform(self, client: AsyncClient, admin_token, profile):
        res = await client.post(f"{ADMIN}/contacts", json={"profile_id": profile.id, "url": "https://x"}, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert "platform" in res.json()["errors"]

    async def test_contact_crud(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        res = await client.post(f"{ADMIN}/contacts", json={
            "profile_id": profile.id,
            "platform": "GitHub",
            "url": "https://github.com/ada",
        }, headers=headers)
        assert res.status_code == 201
        contact = res.json()

        res = await client.put(f"{ADMIN}/contacts/{contact['id']}", json={"description": "Code"}, headers=headers)
        assert res.json()["platform"] == "GitHub"
        assert res.json()["description"] == "Code"

        res = await client.get(f"{ADMIN}/contacts", headers=headers)
        assert len(res.json()) == 1

        res = await client.delete(f"{ADMIN}/contacts/{contact['id']}", headers=headers)
        assert res.status_code == 204


# ===== Achievement =====

class TestAchievements:
    """수상 테스트 — 취득일 역순."""

    async def test_achievements_by_profile_ordering(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        ids = []
        for achieved in ("2019-01-01", "2021-06-30", None):
            res = await client.post(f"{ADMIN}/achievements", json={
                "profile_id": profile.id,
                "name": f"Award {achieved}",
                "date_achieved": achieved,
            }, headers=headers)
            assert res.status_code == 201
            ids.append(res.json()["id"])

        res = await client.get(f"{ADMIN}/achievements/profile/{profile.id}", headers=headers)
        assert [a["id"] for a in res.json()] == [ids[1], ids[0], ids[2]]

    async def test_achievement_reparent_unknown_profile(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        created = (await client.post(f"{ADMIN}/achievements", json={"profile_id": profile.id, "name": "A"}, headers=headers)).json()
        res = await client.put(f"{ADMIN}/achievements/{created['id']}", json={"profile_id": 9999}, headers=headers)
        assert res.status_code == 404


# ===== FAQ =====

class TestFaqs:
    """FAQ 테스트."""

    async def test_faq_crud(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        res = await client.post(f"{ADMIN}/faqs", json={
            "profile_id": profile.id,
            "question": "Are you available?",
            "answer": "Yes",
        }, headers=headers)
        assert res.status_code == 201
        faq = res.json()

        res = await client.patch(f"{ADMIN}/faqs/{faq['id']}", json={"answer": "From March"}, headers=headers)
        assert res.json()["question"] == "Are you available?"
        assert res.json()["answer"] == "From March"

        res = await client.delete(f"{ADMIN}/faqs/{faq['id']}", headers=headers)
        assert res.status_code == 204

    async def test_faq_requires_answer(self, client: AsyncClient, admin_token, profile):
        res = await client.post(f"{ADMIN}/faqs", json={"profile_id": profile.id, "question": "Q?"}, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert "answer" in res.json()["errors"]

    async def test_faq_not_found(self, client: AsyncClient, admin_token):
        res = await client.get(f"{ADMIN}/faqs/9999", headers=auth_header(admin_token))
        assert res.status_code == 404
        assert res.json()["message"] == "FAQ not found with id: 9999"


# ===== Inquiry =====

class TestInquiries:
    """관리자 문의 테스트 — 수정 엔드포인트 없음."""

    async def test_inquiry_admin_flow(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        res = await client.post(f"{ADMIN}/inquiries", json={
            "profile_id": profile.id,
            "name": "Charles",
            "email": "charles@example.com",
            "message": "Let's build an engine",
        }, headers=headers)
        assert res.status_code == 201
        inquiry = res.json()

        res = await client.get(f"{ADMIN}/inquiries/profile/{profile.id}", headers=headers)
        assert [i["id"] for i in res.json()] == [inquiry["id"]]

        res = await client.get(f"{ADMIN}/inquiries/{inquiry['id']}", headers=headers)
        assert res.json()["email"] == "charles@example.com"

        res = await client.delete(f"{ADMIN}/inquiries/{inquiry['id']}", headers=headers)
        assert res.status_code == 204

    async def test_inquiry_has_no_update(self, client: AsyncClient, admin_token, profile):
        headers = auth_header(admin_token)
        created = (await client.post(f"{ADMIN}/inquiries", json={
            "profile_id": profile.id,
            "name": "C",
            "email": "c@example.com",
            "message": "Hi",
        }, headers=headers)).json()

        res = await client.put(f"{ADMIN}/inquiries/{created['id']}", json={"message": "Edited"}, headers=headers)
        assert res.status_code == 405

    async def test_original_path_served(self, client: AsyncClient, admin_token, profile):
        """/inquires 경로도 같은 라우터."""
        headers = auth_header(admin_token)
        created = (await client.post(f"{ADMIN}/inquires", json={
            "profile_id": profile.id,
            "name": "C",
            "email": "c@example.com",
            "message": "Hi",
        }, headers=headers)).json()

        res = await client.get(f"{ADMIN}/inquires", headers=headers)
        assert res.status_code == 200
        assert [i["id"] for i in res.json()] == [created["id"]]

        res = await client.delete(f"{ADMIN}/inquires/{created['id']}", headers=headers)
        assert res.status_code == 204

    def test_original_path_hidden_from_schema(self):
        paths = app.openapi()["paths"]
        assert f"{ADMIN}/inquiries" in paths
        assert not any("inquires" in path for path in paths)
