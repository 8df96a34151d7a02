"""Unit tests for identity stamps and stamp patches."""

from uuid import uuid4

from learnhub.domain.value import IdentityStamp, Role, StampPatch, UserId


def _stamp(**overrides) -> IdentityStamp:
    fields = {
        "user_id": UserId(uuid4()),
        "username": "ada",
        "display_name": "Ada",
        "avatar_url": "https://cdn.example/ada.png",
        "role": Role.STUDENT,
    }
    fields.update(overrides)
    return IdentityStamp(**fields)


class TestStampPatch:
    """Tests for partial stamp updates."""

    def test_only_explicit_fields_are_changes(self):
        patch = StampPatch(display_name="Ada L.")

        assert patch.changes() == {"display_name": "Ada L."}
        assert not patch.is_empty()

    def test_explicit_none_removes_avatar(self):
        """Passing avatar_url=None is a change, not an omission."""
        stamp = _stamp()

        updated = StampPatch(avatar_url=None).apply(stamp)

        assert updated.avatar_url is None
        assert updated.display_name == stamp.display_name

    def test_empty_patch(self):
        stamp = _stamp()

        assert StampPatch().is_empty()
        assert StampPatch().apply(stamp) == stamp

    def test_between_keeps_differing_fields_only(self):
        before = _stamp()
        after = before.model_copy(update={"display_name": "Countess"})

        patch = StampPatch.between(before, after)

        assert patch.changes() == {"display_name": "Countess"}

    def test_between_identical_stamps_is_empty(self):
        stamp = _stamp()

        assert StampPatch.between(stamp, stamp).is_empty()

    def test_apply_never_touches_identity_fields(self):
        """Username, user id and role are not patchable."""
        stamp = _stamp(role=Role.TEACHER)

        updated = StampPatch(display_name="Prof. Ada", avatar_url=None).apply(stamp)

        assert updated.user_id == stamp.user_id
        assert updated.username == stamp.username
        assert updated.role == Role.TEACHER
