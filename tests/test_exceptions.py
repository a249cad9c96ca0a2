"""Tests for the exception hierarchy."""

import pytest

from regionlayout.exceptions import (
    InvalidArgumentException,
    InvalidOperationException,
    LayoutException,
    RegionLayoutException,
    RegionNotFoundException,
)


class TestRegionLayoutException:
    """Test the base exception."""

    def test_str_with_code(self) -> None:
        """Error codes prefix the message."""
        error = RegionLayoutException("boom", error_code="E1")

        assert str(error) == "[E1] boom"
        assert error.context == {}

    def test_str_without_code(self) -> None:
        """Without a code only the message is shown."""
        assert str(RegionLayoutException("boom")) == "boom"

    def test_log_fields(self) -> None:
        """Log fields carry the code, the message and the context."""
        error = RegionNotFoundException("footer", operation="adjust")

        assert error.region_id == "footer"
        assert error.log_fields() == {
            "error_code": "REGION_NOT_FOUND",
            "error": "Region 'footer' not found",
            "region_id": "footer",
            "operation": "adjust",
        }

    def test_region_id_absent(self) -> None:
        """Errors about an option rather than a region have no region id."""
        assert InvalidArgumentException("field", "unknown").region_id is None


class TestLayoutExceptions:
    """Test the registry exceptions."""

    def test_invalid_argument(self) -> None:
        """Test InvalidArgumentException details."""
        error = InvalidArgumentException("sizeTo", "region 'x' does not exist", region_id="new")

        assert str(error) == (
            "[INVALID_ARGUMENT] Invalid argument 'sizeTo': region 'x' does not exist"
        )
        assert error.context == {
            "argument": "sizeTo",
            "reason": "region 'x' does not exist",
            "region_id": "new",
        }

    def test_not_found(self) -> None:
        """Test RegionNotFoundException details."""
        error = RegionNotFoundException("footer")

        assert error.message == "Region 'footer' not found"
        assert error.error_code == "REGION_NOT_FOUND"

    def test_invalid_operation(self) -> None:
        """Test InvalidOperationException details."""
        error = InvalidOperationException("stage", "remove", "built-in regions are read-only")

        assert error.message == "Cannot remove region 'stage': built-in regions are read-only"
        assert error.context["operation"] == "remove"

    @pytest.mark.parametrize(
        "error",
        [
            InvalidArgumentException("id", "missing"),
            RegionNotFoundException("x"),
            InvalidOperationException("stage", "adjust"),
        ],
    )
    def test_hierarchy(self, error) -> None:
        """All registry errors share the base classes."""
        assert isinstance(error, LayoutException)
        assert isinstance(error, RegionLayoutException)
