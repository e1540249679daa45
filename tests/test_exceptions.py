"""Tests for public exceptions."""

import pytest

from spoke_sdk.exceptions import SpokeConfigError, SpokeError


class TestSpokeError:
    """Tests for base SpokeError."""

    def test_is_exception(self):
        """SpokeError should be an Exception."""
        assert issubclass(SpokeError, Exception)

    def test_can_be_raised(self):
        """SpokeError should be raisable with message."""
        with pytest.raises(SpokeError) as exc_info:
            raise SpokeError("test error")
        assert str(exc_info.value) == "test error"


class TestSpokeConfigError:
    """Tests for SpokeConfigError."""

    def test_inherits_from_spoke_error(self):
        """SpokeConfigError should inherit from SpokeError."""
        assert issubclass(SpokeConfigError, SpokeError)

    def test_can_be_caught_as_spoke_error(self):
        """Should be catchable as SpokeError."""
        with pytest.raises(SpokeError) as exc_info:
            raise SpokeConfigError("Missing API token")
        assert str(exc_info.value) == "Missing API token"
