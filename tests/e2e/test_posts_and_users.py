"""End-to-end tests for post, user profile and health endpoints."""

from learnhub.domain.value import Role


class TestPostEndpoints:
    """Post API."""

    def test_students_cannot_post(self, api):
        """Should return 403 when a student publishes a post."""
        student = api.user("ada")
        api.login(student)

        response = api.client.post("/posts", json={"content": "Hello class"})

        assert response.status_code == 403

    def test_create_and_get_post(self, api):
        teacher = api.user("prof_lee", Role.TEACHER)
        post = api.create_post(teacher, "Read chapter 4")
        student = api.user("ada")
        api.comment(student, post["post_id"], "Done!")

        response = api.client.get(f"/posts/{post['post_id']}")

        assert response.status_code == 200
        data = response.json()["data"]["post"]
        assert data["content"] == "Read chapter 4"
        assert data["author"]["username"] == "prof_lee"
        assert data["comment_count"] == 1


class TestUserProfileEndpoints:
    """User profile API."""

    def test_get_nonexistent_user_profile(self, api):
        """Should return 404 for nonexistent user."""
        response = api.client.get("/users/nobody")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_update_profile_without_auth_fails(self, api):
        """Should return 401 when not authenticated."""
        response = api.client.put("/users/me", json={"bio": "Hi"})

        assert response.status_code == 401

    def test_update_profile_with_invalid_token_fails(self, api):
        """Should return 401 with invalid token."""
        api.client.cookies.set("auth_token", "invalid-token")

        response = api.client.put("/users/me", json={"bio": "Hi"})

        assert response.status_code == 401

    def test_bio_max_length_is_validated(self, api):
        """Should validate bio max length at API layer."""
        student = api.user("ada")
        api.login(student)

        response = api.client.put("/users/me", json={"bio": "a" * 501})

        assert response.status_code == 422

    def test_rename_propagates_to_comments(self, api):
        """Should copy profile changes into existing comment stamps."""
        # Arrange
        teacher = api.user("prof_lee", Role.TEACHER)
        student = api.user("ada", avatar_url="https://cdn/ada.png")
        post = api.create_post(teacher)
        api.comment(student, post["post_id"], "Hello")

        # Act
        api.login(student)
        updated = api.client.put("/users/me", json={"display_name": "Ada Lovelace"})
        removed = api.client.delete("/users/me/avatar")
        listing = api.client.get(f"/comments/post/{post['post_id']}")
        profile = api.client.get("/users/ada")

        # Assert
        assert updated.json()["data"]["display_name"] == "Ada Lovelace"
        assert removed.json()["data"]["avatar_url"] is None
        author = listing.json()["data"]["comments"][0]["author"]
        assert author["display_name"] == "Ada Lovelace"
        assert author["avatar_url"] is None
        assert profile.json()["data"]["stats"]["comments_count"] == 1


class TestHealthEndpoint:
    def test_health(self, api):
        response = api.client.get("/health")

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "healthy"
