"""Dependency enumeration and license detection from installed metadata.

These are the collaborators feeding the audit engine. They only read the
metadata of distributions installed in the current environment.
"""
from __future__ import annotations

import logging
from importlib.metadata import Distribution, distributions
from typing import Iterable, Optional

from packaging.markers import UndefinedEnvironmentName
from packaging.requirements import InvalidRequirement, Requirement
from packaging.utils import canonicalize_name

from license_auditor.exceptions import ScanError
from license_auditor.models.license import LicenseClassification

logger = logging.getLogger(__name__)

# Mapping of trove classifiers to SPDX identifiers
CLASSIFIER_TO_SPDX: dict[str, str] = {
    "License :: OSI Approved :: MIT License": "MIT",
    "License :: OSI Approved :: MIT No Attribution License (MIT-0)": "MIT-0",
    "License :: OSI Approved :: Apache Software License": "Apache-2.0",
    "License :: OSI Approved :: BSD License": "BSD-3-Clause",
    "License :: OSI Approved :: GNU General Public License v3 (GPLv3)": "GPL-3.0",
    "License :: OSI Approved :: GNU General Public License v2 (GPLv2)": "GPL-2.0",
    "License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)": (
        "LGPL-3.0"
    ),
    "License :: OSI Approved :: GNU Lesser General Public License v2 (LGPLv2)": (
        "LGPL-2.0"
    ),
    "License :: OSI Approved :: GNU Affero General Public License v3": "AGPL-3.0",
    "License :: OSI Approved :: ISC License (ISCL)": "ISC",
    "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)": "MPL-2.0",
    "License :: OSI Approved :: Python Software Foundation License": "PSF-2.0",
    "License :: OSI Approved :: The Unlicense (Unlicense)": "Unlicense",
    "License :: OSI Approved :: zlib/libpng License": "Zlib",
    "License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication": "CC0-1.0",
}

LICENSE_FILE_PREFIXES = ("LICENSE", "LICENCE", "COPYING", "NOTICE")

_NO_LICENSE_VALUES = ("", "UNKNOWN", "NONE")


def _index_distributions() -> dict[str, Distribution]:
    try:
        dists = list(distributions())
    except OSError as e:
        raise ScanError(f"Cannot enumerate installed distributions: {e}") from e

    index: dict[str, Distribution] = {}
    for dist in dists:
        name = dist.metadata.get("Name")
        # Skip packages with missing metadata
        if name:
            index.setdefault(canonicalize_name(name), dist)
    return index


def _requirements_of(dist: Distribution) -> list[str]:
    names: list[str] = []
    for raw in dist.requires or []:
        try:
            req = Requirement(raw)
        except InvalidRequirement:
            logger.debug("Skipping invalid requirement %r", raw)
            continue
        if req.marker is not None:
            try:
                if not req.marker.evaluate({"extra": ""}):
                    continue
            except UndefinedEnvironmentName:
                continue
        names.append(canonicalize_name(req.name))
    return names


def discover_dependencies(roots: Optional[Iterable[str]] = None) -> set[str]:
    """Enumerate dependency identifiers from the current environment.

    Args:
        roots: Optional distribution names to start from. When given, the
            result is their transitive closure (extras are not followed).
            When omitted, every installed distribution is returned.

    Returns:
        Set of canonical (PEP 503) distribution names.

    Raises:
        ScanError: If distributions cannot be enumerated or a root is not
            installed.
    """
    installed = _index_distributions()

    if roots is None:
        return set(installed)

    pending = [canonicalize_name(r) for r in roots]
    missing = sorted(name for name in pending if name not in installed)
    if missing:
        raise ScanError(f"Package(s) not installed: {', '.join(missing)}")

    found: set[str] = set()
    while pending:
        name = pending.pop()
        if name in found:
            continue
        dist = installed.get(name)
        if dist is None:
            # Requirement declared but not installed
            logger.debug("Dependency %s is not installed, skipping", name)
            continue
        found.add(name)
        pending.extend(_requirements_of(dist))

    return found


def _license_type(dist: Distribution) -> str:
    expression = dist.metadata.get("License-Expression")
    if expression and expression.strip():
        return expression.strip()

    license_str = dist.metadata.get("License")
    if license_str:
        cleaned = license_str.strip()
        # Multi-line values hold license text, not an identifier
        if "\n" not in cleaned and cleaned.upper() not in _NO_LICENSE_VALUES:
            return cleaned

    for classifier in dist.metadata.get_all("Classifier") or []:
        if classifier in CLASSIFIER_TO_SPDX:
            return CLASSIFIER_TO_SPDX[classifier]

    return ""


def _license_text(dist: Distribution) -> str:
    texts: list[str] = []
    for path in dist.files or []:
        in_metadata_dir = any(part.endswith(".dist-info") for part in path.parts)
        if not in_metadata_dir or not path.name.upper().startswith(LICENSE_FILE_PREFIXES):
            continue
        try:
            texts.append(path.read_text(encoding="utf-8").strip())
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read license file %s: %s", path, e)

    if texts:
        return "\n\n".join(texts)

    license_str = dist.metadata.get("License") or ""
    if license_str.strip().upper() in _NO_LICENSE_VALUES:
        return ""
    return license_str.strip()


def classify_distribution(dist: Distribution) -> LicenseClassification:
    """Classify the license of one installed distribution.

    Type resolution order: ``License-Expression`` metadata, a single-line
    ``License`` field, then trove classifiers.

    Args:
        dist: Installed distribution.

    Returns:
        LicenseClassification with type and text populated where found.
    """
    return LicenseClassification(type=_license_type(dist), text=_license_text(dist))


def detect_licenses(dependencies: Iterable[str]) -> dict[str, LicenseClassification]:
    """Detect the license of each dependency.

    Args:
        dependencies: Dependency identifiers from ``discover_dependencies``.

    Returns:
        Mapping of identifier to classification. Dependencies that are not
        installed get an empty (unrecognized) classification.

    Raises:
        ScanError: If distributions cannot be enumerated.
    """
    installed = _index_distributions()
    licenses: dict[str, LicenseClassification] = {}
    for dependency in dependencies:
        dist = installed.get(canonicalize_name(dependency))
        if dist is None:
            licenses[dependency] = LicenseClassification()
        else:
            licenses[dependency] = classify_distribution(dist)
    return licenses
