"""HTTP client harness for API tests over in-memory persistence."""

import asyncio

from fastapi.testclient import TestClient

from learnhub.config import Settings
from learnhub.domain.model import User
from learnhub.domain.repository import UserRepository
from learnhub.domain.value import Role
from learnhub.interface.api.app import create_app
from learnhub.util.jwt import create_token
from tests.factories import make_user
from tests.di import build_test_container


class ApiHarness:
    """Test client plus helpers for seeding users and signing in."""

    def __init__(self) -> None:
        self.container = build_test_container()
        self.client = TestClient(create_app(self.container))
        self.settings = Settings()

    def user(self, username: str, role: Role = Role.STUDENT, **kwargs) -> User:
        """Store a user directly in the repository."""

        async def save() -> User:
            user_repo = await self.container.get(UserRepository)
            return await user_repo.save(make_user(username, role, **kwargs))

        return asyncio.run(save())

    def login(self, user: User) -> None:
        """Send requests as ``user`` from now on."""
        token = create_token(
            str(user.id), user.username.root, user.role, self.settings.auth
        )
        self.client.cookies.set("auth_token", token)

    def logout(self) -> None:
        self.client.cookies.clear()

    def create_post(self, teacher: User, content: str = "Week 3 reading") -> dict:
        self.login(teacher)
        response = self.client.post("/posts", json={"content": content})
        assert response.status_code == 201, response.text
        return response.json()["data"]["post"]

    def comment(self, author: User, post_id: str, content: str, parent_id=None) -> dict:
        self.login(author)
        response = self.client.post(
            "/comments",
            json={"post_id": post_id, "content": content, "parent_id": parent_id},
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]["comment"]

