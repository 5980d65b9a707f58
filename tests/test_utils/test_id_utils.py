"""
Tests for id generation, hashing and instance identity.
"""

from datetime import timezone

from contentutils.utils.id_utils import (
    InstanceContext,
    generate_id,
    init_instance,
    md5
)


class TestGenerateId:
    """Tests for generate_id function."""

    def test_id_is_digits(self):
        """Test that ids consist only of digits."""
        new_id = generate_id()

        assert new_id.isdigit()
        assert 2 <= len(new_id) <= 18

    def test_ids_are_unique(self):
        """Test that repeated calls do not collide."""
        ids = {generate_id() for _ in range(1000)}

        assert len(ids) == 1000


class TestMd5:
    """Tests for md5 function."""

    def test_known_digest(self):
        assert md5("hello") == "5d41402abc4b2a76b9719d911017c592"

    def test_bytes_and_text_agree(self):
        """Test that text is hashed as UTF-8."""
        assert md5("café") == md5("café".encode("utf-8"))


class TestInitInstance:
    """Tests for init_instance function."""

    def test_returns_context_with_pid(self):
        """Test that a fresh context carries a digit pid."""
        context = init_instance()

        assert isinstance(context, InstanceContext)
        assert context.pid.isdigit()
        assert context.started_at.tzinfo == timezone.utc

    def test_each_instance_has_own_pid(self):
        """Test that separate initializations produce separate identities."""
        assert init_instance().pid != init_instance().pid
