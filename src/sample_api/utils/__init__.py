"""Utility functions for the sample API."""

from sample_api.utils.version import VersionInfo, get_version, parse_version

__all__ = ["VersionInfo", "get_version", "parse_version"]
