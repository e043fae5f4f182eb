"""Tests for LicenseClassification model."""
import pytest
from pydantic import ValidationError

from license_auditor.models.license import LicenseClassification


class TestLicenseClassification:
    """Tests for LicenseClassification model."""

    def test_recognized_when_type_present(self) -> None:
        """Test that a non-empty type is recognized."""
        lic = LicenseClassification(type="MIT", text="Permission is hereby granted")
        assert lic.recognized is True

    def test_unrecognized_when_type_empty(self) -> None:
        """Test that an empty type is not recognized."""
        assert LicenseClassification(type="", text="some text").recognized is False

    def test_defaults_to_empty(self) -> None:
        """Test that type and text default to empty strings."""
        lic = LicenseClassification()
        assert lic.type == ""
        assert lic.text == ""
        assert lic.recognized is False

    def test_is_frozen(self) -> None:
        """Test that classifications are immutable."""
        lic = LicenseClassification(type="MIT")
        with pytest.raises(ValidationError):
            lic.type = "GPL-3.0"  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Test that extra fields are rejected."""
        with pytest.raises(ValidationError):
            LicenseClassification(type="MIT", url="x")  # type: ignore[call-arg]
