"""Tests for scanner module."""

from email.message import Message
from pathlib import PurePosixPath
from typing import Optional
from unittest.mock import MagicMock, patch

import pytest

from license_auditor.exceptions import ScanError
from license_auditor.models.license import LicenseClassification
from license_auditor.scanner import (
    classify_distribution,
    detect_licenses,
    discover_dependencies,
)


class _FakePath:
    """Package path whose read_text returns canned content."""

    def __init__(self, path: str, content: Optional[str]) -> None:
        pure = PurePosixPath(path)
        self.parts = pure.parts
        self.name = pure.name
        self._content = content

    def read_text(self, encoding: Optional[str] = None) -> str:
        if self._content is None:
            raise OSError("missing")
        return self._content


def _file(path: str, content: Optional[str]) -> _FakePath:
    return _FakePath(path, content)


def _make_dist(
    name: str,
    requires: Optional[list[str]] = None,
    license: Optional[str] = None,
    expression: Optional[str] = None,
    classifiers: tuple[str, ...] = (),
    files: Optional[list[_FakePath]] = None,
) -> MagicMock:
    metadata = Message()
    metadata["Name"] = name
    metadata["Version"] = "1.0.0"
    if license is not None:
        metadata["License"] = license
    if expression is not None:
        metadata["License-Expression"] = expression
    for classifier in classifiers:
        metadata["Classifier"] = classifier

    dist = MagicMock()
    dist.metadata = metadata
    dist.requires = requires
    dist.files = files or []
    return dist


class TestDiscoverDependencies:
    """Tests for discover_dependencies function."""

    def test_all_installed_without_roots(self) -> None:
        """Test that every installed distribution is returned."""
        dists = [_make_dist("Click"), _make_dist("PyYAML")]

        with patch("license_auditor.scanner.distributions", return_value=dists):
            assert discover_dependencies() == {"click", "pyyaml"}

    def test_skips_distributions_without_name(self) -> None:
        """Test that broken metadata is skipped."""
        broken = MagicMock()
        broken.metadata = Message()

        with patch(
            "license_auditor.scanner.distributions",
            return_value=[broken, _make_dist("rich")],
        ):
            assert discover_dependencies() == {"rich"}

    def test_transitive_closure_from_roots(self) -> None:
        """Test that requirements are followed recursively."""
        dists = [
            _make_dist("app", requires=["Requests>=2.0", "click"]),
            _make_dist("requests", requires=["urllib3<3", "idna"]),
            _make_dist("urllib3"),
            _make_dist("idna"),
            _make_dist("click"),
            _make_dist("unrelated"),
        ]

        with patch("license_auditor.scanner.distributions", return_value=dists):
            found = discover_dependencies(["app"])

        assert found == {"app", "requests", "urllib3", "idna", "click"}

    def test_extras_and_foreign_markers_skipped(self) -> None:
        """Test that extra-only and non-matching marker requirements are skipped."""
        dists = [
            _make_dist(
                "app",
                requires=[
                    "pytest; extra == 'test'",
                    "pywin32; sys_platform == 'nonexistent'",
                    "idna",
                ],
            ),
            _make_dist("pytest"),
            _make_dist("pywin32"),
            _make_dist("idna"),
        ]

        with patch("license_auditor.scanner.distributions", return_value=dists):
            assert discover_dependencies(["app"]) == {"app", "idna"}

    def test_circular_requirements_terminate(self) -> None:
        """Test that dependency cycles do not loop forever."""
        dists = [
            _make_dist("a", requires=["b"]),
            _make_dist("b", requires=["a"]),
        ]

        with patch("license_auditor.scanner.distributions", return_value=dists):
            assert discover_dependencies(["a"]) == {"a", "b"}

    def test_missing_requirement_ignored(self) -> None:
        """Test that declared but uninstalled requirements are skipped."""
        dists = [_make_dist("app", requires=["ghost", "not a valid requirement!!"])]

        with patch("license_auditor.scanner.distributions", return_value=dists):
            assert discover_dependencies(["app"]) == {"app"}

    def test_unknown_root_raises(self) -> None:
        """Test that an uninstalled root is an error."""
        with patch("license_auditor.scanner.distributions", return_value=[]):
            with pytest.raises(ScanError) as exc_info:
                discover_dependencies(["nope"])
        assert "nope" in str(exc_info.value)

    def test_enumeration_failure_raises_scan_error(self) -> None:
        """Test that OS errors during enumeration become ScanError."""
        with patch(
            "license_auditor.scanner.distributions", side_effect=OSError("denied")
        ):
            with pytest.raises(ScanError):
                discover_dependencies()


class TestClassifyDistribution:
    """Tests for classify_distribution function."""

    def test_license_expression_preferred(self) -> None:
        """Test that License-Expression wins over other metadata."""
        dist = _make_dist(
            "pkg",
            license="BSD",
            expression="MIT OR Apache-2.0",
            classifiers=("License :: OSI Approved :: MIT License",),
        )
        assert classify_distribution(dist).type == "MIT OR Apache-2.0"

    def test_short_license_field(self) -> None:
        """Test that a single-line License field is used as the type."""
        assert classify_distribution(_make_dist("pkg", license="ISC")).type == "ISC"

    def test_unknown_license_field_falls_back_to_classifier(self) -> None:
        """Test that UNKNOWN is skipped in favor of classifiers."""
        dist = _make_dist(
            "pkg",
            license="UNKNOWN",
            classifiers=("License :: OSI Approved :: Apache Software License",),
        )
        assert classify_distribution(dist).type == "Apache-2.0"

    def test_multiline_license_field_is_text(self) -> None:
        """Test that a full license text in License is not used as a type."""
        dist = _make_dist("pkg", license="Copyright (c) Someone\n\nPermission is granted")

        result = classify_distribution(dist)

        assert result.type == ""
        assert result.text.startswith("Copyright (c) Someone")

    def test_license_files_read(self) -> None:
        """Test that license files in the metadata directory provide the text."""
        files = [
            _file("pkg/__init__.py", "code"),
            _file("pkg-1.0.0.dist-info/licenses/LICENSE", "MIT License\n"),
            _file("pkg-1.0.0.dist-info/NOTICE.txt", "Notice\n"),
        ]
        dist = _make_dist("pkg", expression="MIT", files=files)

        result = classify_distribution(dist)

        assert result == LicenseClassification(type="MIT", text="MIT License\n\nNotice")

    def test_unreadable_license_file_skipped(self) -> None:
        """Test that read failures do not abort detection."""
        files = [_file("pkg-1.0.0.dist-info/LICENSE", None)]
        dist = _make_dist("pkg", license="MIT", files=files)

        assert classify_distribution(dist) == LicenseClassification(type="MIT", text="MIT")

    def test_nothing_found(self) -> None:
        """Test that missing metadata yields an unrecognized classification."""
        assert classify_distribution(_make_dist("pkg")) == LicenseClassification()


class TestDetectLicenses:
    """Tests for detect_licenses function."""

    def test_maps_each_dependency(self) -> None:
        """Test that each identifier gets a classification."""
        dists = [_make_dist("click", license="BSD-3-Clause")]

        with patch("license_auditor.scanner.distributions", return_value=dists):
            result = detect_licenses(["click", "ghost"])

        assert result["click"].type == "BSD-3-Clause"
        assert result["ghost"] == LicenseClassification()
