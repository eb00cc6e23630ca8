"""Tests for version validation."""

import pytest

from neo4j_testcontainers.core.version import is_valid_version, validate_version
from neo4j_testcontainers.exceptions import ConfigurationError, InvalidVersion


class TestValidateVersion:
    """Test cases for validate_version."""

    @pytest.mark.parametrize("literal", ["4", "4.2", "4.2.0", "5.13.0", "0", "10.20.30"])
    def test_valid_versions_returned_unchanged(self, literal):
        """Test valid literals are accepted without normalization."""
        assert validate_version(literal) == literal

    @pytest.mark.parametrize("literal", [
        "4.2.0-enterprise",
        "5.1.0-rc1",
        "5.1.0+build.7",
        "5.1.0.1",
        "latest",
        "v5",
        "5.",
        ".5",
        " 5",
        "5 ",
        "",
        "5..1",
    ])
    def test_invalid_versions_rejected(self, literal):
        """Test pre-release, build metadata, extra parts and free text are rejected."""
        with pytest.raises(InvalidVersion) as exc_info:
            validate_version(literal)

        assert exc_info.value.literal == literal
        assert f"'{literal}'" in str(exc_info.value)

    def test_invalid_version_is_configuration_error(self):
        """Test InvalidVersion belongs to the configuration error family."""
        with pytest.raises(ConfigurationError):
            validate_version("five")

    def test_is_valid_version(self):
        """Test boolean helper."""
        assert is_valid_version("5.13")
        assert not is_valid_version("5.13-enterprise")
