"""Tests for crumb.errors — exception hierarchy."""

import pytest

from crumb.cookie import Cookie
from crumb.errors import ConfigurationError, CrumbError, InvalidInput


class TestHierarchy:
    def test_invalid_input_is_crumb_error(self) -> None:
        assert issubclass(InvalidInput, CrumbError)

    def test_invalid_input_is_value_error(self) -> None:
        assert issubclass(InvalidInput, ValueError)

    def test_configuration_error_is_crumb_error(self) -> None:
        assert issubclass(ConfigurationError, CrumbError)


class TestMessages:
    def test_name_in_message(self) -> None:
        with pytest.raises(InvalidInput, match=r"'name\[\]' contains invalid characters"):
            Cookie("name[]")

    def test_samesite_lists_allowed_values(self) -> None:
        with pytest.raises(InvalidInput, match='"None", "Lax", "Strict"'):
            Cookie("name", samesite="bogus")

    def test_expire_reports_type(self) -> None:
        with pytest.raises(InvalidInput, match="received 'float'"):
            Cookie("name", expires=1.5)  # type: ignore[arg-type]

    def test_caught_as_value_error(self) -> None:
        with pytest.raises(ValueError):
            Cookie("")
