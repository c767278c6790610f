# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Version helpers for tinycli and for host applications.

Hosts usually fill ``App.version`` from their own distribution metadata::

    version = format_version_string(package_version("mytool"), vcs_revision("mytool"))
"""

import json
from importlib import metadata
from typing import Any


def package_version(dist_name: str, default: str = "unknown") -> str:
    """Return the installed version of *dist_name*, or *default*."""
    try:
        return metadata.version(dist_name)
    except metadata.PackageNotFoundError:
        return default


def vcs_revision(dist_name: str) -> str | None:
    """Return VCS revision from PEP 610 metadata, if available.

    When a distribution is installed from a VCS URL (``pip install
    git+https://...``), pip records ``direct_url.json``.  Its
    ``requested_revision`` (falling back to ``commit_id``) names what was
    installed.  Any other install returns None.
    """
    try:
        dist = metadata.distribution(dist_name)
        direct_url = dist.read_text("direct_url.json")
    except (
        metadata.PackageNotFoundError,
        FileNotFoundError,
        PermissionError,
        UnicodeDecodeError,
        OSError,
    ):
        return None

    if not direct_url:
        return None

    try:
        data = json.loads(direct_url)
    except json.JSONDecodeError:
        return None

    vcs_info = data.get("vcs_info") if isinstance(data, dict) else None
    if not isinstance(vcs_info, dict):
        return None

    def validate_and_strip(value: Any) -> str | None:
        if isinstance(value, str):
            stripped = value.strip()
            if stripped:
                return stripped
        return None

    if result := validate_and_strip(vcs_info.get("requested_revision")):
        return result

    if result := validate_and_strip(vcs_info.get("commit_id")):
        return result

    return None


def format_version_string(version: str, branch: str | None = None) -> str:
    """Format version and branch into a display string.

    Args:
        version: The version string (e.g., "0.3.1")
        branch: The branch name or None

    Returns:
        Formatted string like "0.3.1" or "0.3.1 [feature-branch]"
    """
    if branch:
        return f"{version} [{branch}]"
    return version
