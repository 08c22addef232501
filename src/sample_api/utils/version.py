"""Version utility module for the sample API.

The build writes ``sample_api/__version__.py`` with a setuptools-scm style
string such as ``0.1.0.post11+ga524f7b.dirty.2025-03-23T21:41:10Z``. Source
checkouts without that file report ``0.1.0-dev``.
"""

import re

from loguru import logger
from pydantic import BaseModel

DEV_VERSION = "0.1.0-dev"

_BASE_RE = re.compile(r"^(\d+\.\d+\.\d+)")
_POST_RE = re.compile(r"\.post(\d+)")
_GIT_RE = re.compile(r"\+g([a-f0-9]+)")
_TIMESTAMP_RE = re.compile(r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z)$")


class VersionInfo(BaseModel):
    """Version information model."""

    full_version: str
    version: str
    post_count: str | None = None
    git_commit: str | None = None
    is_dirty: bool = False
    build_timestamp: str | None = None


def parse_version(full_version: str) -> VersionInfo:
    """Split a full version string into its components.

    Args:
        full_version: e.g. "0.1.0.post11+ga524f7b.dirty.2025-03-23T21:41:10Z"

    Returns:
        VersionInfo with the parts that are present; missing parts are None.
    """
    base = _BASE_RE.match(full_version)
    post = _POST_RE.search(full_version)
    git = _GIT_RE.search(full_version)

    return VersionInfo(
        full_version=full_version,
        version=base.group(1) if base else full_version,
        post_count=post.group(1) if post else None,
        git_commit=git.group(1) if git else None,
        is_dirty=".dirty" in full_version,
        build_timestamp=extract_build_timestamp(full_version),
    )


def extract_build_timestamp(full_version: str) -> str | None:
    """Return the trailing ISO 8601 build timestamp, if the version has one."""
    match = _TIMESTAMP_RE.search(full_version)
    return match.group(1) if match else None


def get_version() -> VersionInfo:
    """Get the version information with fallback for development."""
    try:
        from sample_api.__version__ import __version__ as full_version
    except ImportError:
        logger.debug(f"No generated __version__ module, reporting {DEV_VERSION}")
        return VersionInfo(full_version=DEV_VERSION, version=DEV_VERSION)

    logger.trace(f"Loaded version: {full_version}")
    return parse_version(full_version)
