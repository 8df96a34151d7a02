"""End-to-end tests for comment endpoints."""

from uuid import uuid4

from learnhub.domain.value import Role


class TestCommentEndpoints:
    """Comment API over in-memory persistence.

    Business rules are covered in depth by unit tests; these check the HTTP
    contract: status codes, envelopes and authentication.
    """

    def test_create_requires_authentication(self, api):
        """Should return 401 when creating a comment anonymously."""
        response = api.client.post(
            "/comments", json={"post_id": str(uuid4()), "content": "Hi"}
        )

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "message": "Authentication required to create comments",
        }

    def test_create_and_list_thread(self, api):
        """Should list a root comment with its reply preview and pagination."""
        # Arrange
        teacher = api.user("prof_lee", Role.TEACHER)
        student = api.user("ada")
        post = api.create_post(teacher)

        # Act
        root = api.comment(student, post["post_id"], "What is a monad?")
        reply = api.comment(
            teacher, post["post_id"], "A monoid in...", parent_id=root["comment_id"]
        )
        api.logout()
        response = api.client.get(f"/comments/post/{post['post_id']}")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        comments = body["data"]["comments"]
        assert len(comments) == 1
        assert comments[0]["comment_id"] == root["comment_id"]
        assert comments[0]["reply_count"] == 1
        assert comments[0]["replies"][0]["comment_id"] == reply["comment_id"]
        assert comments[0]["has_more_replies"] is False
        assert body["data"]["pagination"] == {
            "page": 1,
            "limit": 10,
            "total": 1,
            "total_pages": 1,
            "has_more": False,
        }

    def test_create_on_missing_post_is_404(self, api):
        """Should return 404 when the post does not exist."""
        student = api.user("ada")
        api.login(student)

        response = api.client.post(
            "/comments", json={"post_id": str(uuid4()), "content": "Hi"}
        )

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_malformed_id_is_400(self, api):
        """Should return 400 for an id that is not a UUID."""
        student = api.user("ada")
        api.login(student)

        response = api.client.post(
            "/comments", json={"post_id": "nope", "content": "Hi"}
        )

        assert response.status_code == 400

    def test_empty_content_is_400(self, api):
        """Should reject content that sanitises to nothing."""
        teacher = api.user("prof_lee", Role.TEACHER)
        post = api.create_post(teacher)

        response = api.client.post(
            "/comments", json={"post_id": post["post_id"], "content": "<b></b>"}
        )

        assert response.status_code == 400
        assert "required" in response.json()["message"]

    def test_edit_by_someone_else_is_403(self, api):
        """Should only let the author edit a comment."""
        teacher = api.user("prof_lee", Role.TEACHER)
        student = api.user("ada")
        post = api.create_post(teacher)
        comment = api.comment(student, post["post_id"], "Original")

        api.login(teacher)
        response = api.client.put(
            f"/comments/{comment['comment_id']}", json={"content": "Hijacked"}
        )

        assert response.status_code == 403

    def test_edit_and_delete_own_comment(self, api):
        # Arrange
        teacher = api.user("prof_lee", Role.TEACHER)
        student = api.user("ada")
        post = api.create_post(teacher)
        comment = api.comment(student, post["post_id"], "Original")
        comment_url = f"/comments/{comment['comment_id']}"

        # Act
        edited = api.client.put(comment_url, json={"content": "Edited"})
        deleted = api.client.delete(comment_url)
        edit_after_delete = api.client.put(comment_url, json={"content": "Again"})

        # Assert
        assert edited.status_code == 200
        assert edited.json()["data"]["comment"]["is_edited"] is True
        assert deleted.json()["data"] == {
            "comment_id": comment["comment_id"],
            "deleted": True,
        }
        assert edit_after_delete.status_code == 400

    def test_like_is_idempotent(self, api):
        teacher = api.user("prof_lee", Role.TEACHER)
        student = api.user("ada")
        post = api.create_post(teacher)
        comment = api.comment(student, post["post_id"], "Like me")
        like_url = f"/comments/{comment['comment_id']}/like"

        api.login(teacher)
        first = api.client.post(like_url)
        second = api.client.post(like_url)
        listing = api.client.get(f"/comments/post/{post['post_id']}")
        removed = api.client.delete(like_url)

        assert first.json()["data"]["like_count"] == 1
        assert second.json()["data"]["like_count"] == 1
        assert listing.json()["data"]["comments"][0]["is_liked"] is True
        assert removed.json()["data"] == {
            "comment_id": comment["comment_id"],
            "like_count": 0,
            "is_liked": False,
        }

    def test_pin_rules(self, api):
        """Should let teachers pin, keeping one pinned comment per post."""
        # Arrange
        teacher = api.user("prof_lee", Role.TEACHER)
        student = api.user("ada")
        post = api.create_post(teacher)
        first = api.comment(student, post["post_id"], "First")
        second = api.comment(student, post["post_id"], "Second")

        # Act
        api.login(student)
        by_student = api.client.post(f"/comments/{first['comment_id']}/pin")
        api.login(teacher)
        api.client.post(f"/comments/{first['comment_id']}/pin")
        api.client.post(f"/comments/{second['comment_id']}/pin")
        listing = api.client.get(f"/comments/post/{post['post_id']}")

        # Assert
        assert by_student.status_code == 403
        pinned = listing.json()["data"]["pinned_comment"]
        assert pinned["comment_id"] == second["comment_id"]
        assert pinned["is_pinned"] is True

    def test_deep_link_with_context(self, api):
        teacher = api.user("prof_lee", Role.TEACHER)
        student = api.user("ada")
        post = api.create_post(teacher)
        root = api.comment(student, post["post_id"], "Q")
        reply = api.comment(teacher, post["post_id"], "A", root["comment_id"])
        api.logout()

        with_context = api.client.get(f"/comments/{reply['comment_id']}")
        without = api.client.get(f"/comments/{reply['comment_id']}?context=false")
        replies = api.client.get(
            f"/comments/post/{post['post_id']}/replies/{root['comment_id']}"
        )

        assert [a["comment_id"] for a in with_context.json()["data"]["ancestors"]] == [
            root["comment_id"]
        ]
        assert without.json()["data"]["ancestors"] == []
        assert replies.json()["data"]["replies"][0]["comment_id"] == reply["comment_id"]

    def test_invalid_sort_is_422(self, api):
        """Should wrap request validation errors in the error envelope."""
        response = api.client.get(f"/comments/post/{uuid4()}?sort=random")

        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_zero_page_and_limit_use_defaults(self, api):
        """Should fall back to the default page and size instead of rejecting."""
        teacher = api.user("prof_lee", Role.TEACHER)
        post = api.create_post(teacher)
        api.comment(teacher, post["post_id"], "First")

        response = api.client.get(f"/comments/post/{post['post_id']}?page=0&limit=0")

        assert response.status_code == 200
        pagination = response.json()["data"]["pagination"]
        assert pagination["page"] == 1
        assert pagination["limit"] == 10
        assert len(response.json()["data"]["comments"]) == 1
