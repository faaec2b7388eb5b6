# Area: Shared Tests
"""Tests for the exception hierarchy."""

from gamer_pool.errors import (
    GamerPoolError,
    GamerNotFoundError,
    MalformedGamerError,
    PersistenceError,
)


class TestErrors:
    """Tests for error context and formatting."""

    def test_not_found_carries_name(self):
        error = GamerNotFoundError("alice")
        assert isinstance(error, GamerPoolError)
        assert error.name == "alice"
        assert "alice" in str(error)

    def test_not_found_error_block(self):
        block = GamerNotFoundError("alice").format_error_log()
        assert "GAMER_NOT_FOUND" in block
        assert "alice" in block

    def test_malformed_error_block_lists_details(self):
        error = MalformedGamerError({"name": ""}, ["name: too short"])
        block = error.format_error_log()
        assert "MALFORMED_GAMER" in block
        assert "• name: too short" in block
        assert '"name": ""' in block

    def test_malformed_error_with_non_dict_payload(self):
        block = MalformedGamerError([1, 2], ["bad"]).format_error_log()
        assert "[1, 2]" in block

    def test_persistence_error(self):
        error = PersistenceError("add", "disk full", "bob")
        assert error.operation == "add"
        assert error.gamer_name == "bob"
        assert str(error) == "add failed: disk full"
        assert "PERSISTENCE_FAILURE" in error.format_error_log()
