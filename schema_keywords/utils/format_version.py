# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Format version handling for metaschema definition files.

The ``metaschema_format`` field of a definition file declares which layout
the file follows (e.g. ``0.1.0``).

Compatibility rule:
  * **Major** must match exactly, otherwise the file is rejected.
  * **Minor** of the file newer than the package is accepted with a warning.
  * **Patch** is ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .. import METASCHEMA_FORMAT_VERSION
from ..exceptions import FormatVersionError


_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)$")


@dataclass(frozen=True)
class SemanticVersion:
    """A parsed semantic version (major, minor, patch)."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_format_version(raw: str) -> SemanticVersion:
    """Parse a version string like ``0.1.0`` (with or without 'v' prefix).

    Raises:
        FormatVersionError: If the string cannot be parsed.
    """
    if not isinstance(raw, str):
        raise FormatVersionError(
            f"Format version must be a string, got {type(raw).__name__}: {raw!r}"
        )

    m = _VERSION_RE.match(raw.strip())
    if m is None:
        raise FormatVersionError(
            f"Invalid format version string: '{raw}'. "
            "Expected 'MAJOR.MINOR.PATCH' (e.g. '0.1.0')."
        )
    return SemanticVersion(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def get_supported_format_version() -> SemanticVersion:
    return parse_format_version(METASCHEMA_FORMAT_VERSION)


@dataclass(frozen=True)
class VersionCheckResult:
    """Outcome of a compatible format-version check."""

    file_version: SemanticVersion
    supported_version: SemanticVersion
    minor_newer: bool = False
    message: Optional[str] = None


def check_format_version(raw_version: str) -> VersionCheckResult:
    """Check that *raw_version* can be read by this package.

    Returns:
        A :class:`VersionCheckResult`; ``minor_newer`` is set (with a
        message) when the file is newer than the package within the same
        major version.

    Raises:
        FormatVersionError: If the version is malformed or the major
            version differs.
    """
    supported = get_supported_format_version()
    file_ver = parse_format_version(raw_version)

    if file_ver.major != supported.major:
        raise FormatVersionError(
            f"Incompatible format version: file declares {file_ver} "
            f"but this package supports major version {supported.major} "
            f"(supported: {supported})."
        )

    if file_ver.minor > supported.minor:
        return VersionCheckResult(
            file_version=file_ver,
            supported_version=supported,
            minor_newer=True,
            message=(
                f"Format version {file_ver} has a newer minor version than "
                f"the supported {supported}. Some entries may be ignored."
            ),
        )

    return VersionCheckResult(file_version=file_ver, supported_version=supported)
