"""사용자 시나리오 E2E 테스트

가입부터 삭제까지의 사용자 흐름을 API 수준에서 검증합니다.
"""

import pytest


class TestSignupScenario:
    """가입 시나리오"""

    @pytest.mark.asyncio
    async def test_same_email_twice(self, api_client):
        """같은 이메일로 두 번 가입하면 두 번째는 거부"""
        payload = {"email": "a@x.com", "name": "A", "password": "secret1"}

        first = await api_client.post("/api/v1/users", json=payload)
        second = await api_client.post("/api/v1/users", json=payload)

        assert first.status_code == 200
        assert first.json() == {"message": "Successfully signed up"}
        assert second.status_code == 400
        assert second.json() == {"error": "This email already reserved"}


class TestProfileScenario:
    """프로필 수정/삭제 시나리오"""

    @pytest.mark.asyncio
    async def test_rename_then_remove(self, api_client):
        """이름 변경 후 삭제하면 이후 조회는 실패"""
        payload = {"email": "a@x.com", "name": "A", "password": "secret1"}
        await api_client.post("/api/v1/users", json=payload)
        user_id = (await api_client.get("/api/v1/users")).json()[0]["id"]

        renamed = await api_client.put(
            f"/api/v1/users/{user_id}", json={"name": "B"}
        )
        body = renamed.json()
        assert body["name"] == "B"
        assert body["email"] == "a@x.com"
        assert "hashed_password" not in body

        removed = await api_client.delete(f"/api/v1/users/{user_id}")
        assert removed.json()["name"] == "B"

        gone = await api_client.get(f"/api/v1/users/{user_id}")
        assert gone.status_code == 400
        assert gone.json() == {"error": "User not found"}
