"""Tests for version utility module."""

import unittest
from unittest.mock import MagicMock, patch

from sample_api.utils.version import DEV_VERSION, extract_build_timestamp, get_version, parse_version


class TestVersion(unittest.TestCase):
    """Test cases for version utility functions."""

    def test_get_version_from_generated_module(self):
        """get_version parses the generated __version__ module when present."""
        test_version = "0.1.0.post11+ga524f7b.dirty.2025-03-23T21:41:10Z"
        with patch.dict("sys.modules", {"sample_api.__version__": MagicMock(__version__=test_version)}):
            result = get_version()

        self.assertEqual(result.version, "0.1.0")
        self.assertEqual(result.full_version, test_version)
        self.assertEqual(result.post_count, "11")
        self.assertEqual(result.git_commit, "a524f7b")
        self.assertTrue(result.is_dirty)
        self.assertEqual(result.build_timestamp, "2025-03-23T21:41:10Z")

    def test_get_version_falls_back_to_dev(self):
        """Without the generated module the dev version is reported."""
        with patch.dict("sys.modules", {"sample_api.__version__": None}):
            result = get_version()

        self.assertEqual(result.version, DEV_VERSION)
        self.assertEqual(result.full_version, DEV_VERSION)
        self.assertIsNone(result.git_commit)
        self.assertFalse(result.is_dirty)

    def test_parse_version_complete(self):
        result = parse_version("0.1.0.post11+ga524f7b.dirty.2025-03-23T21:41:10Z")
        self.assertEqual(result.version, "0.1.0")
        self.assertEqual(result.post_count, "11")
        self.assertEqual(result.git_commit, "a524f7b")
        self.assertTrue(result.is_dirty)
        self.assertEqual(result.build_timestamp, "2025-03-23T21:41:10Z")

    def test_parse_version_no_dirty(self):
        result = parse_version("0.1.0.post11+ga524f7b.2025-03-23T21:41:10Z")
        self.assertFalse(result.is_dirty)
        self.assertEqual(result.git_commit, "a524f7b")

    def test_parse_version_no_post(self):
        result = parse_version("0.1.0+ga524f7b.dirty.2025-03-23T21:41:10Z")
        self.assertIsNone(result.post_count)
        self.assertEqual(result.git_commit, "a524f7b")

    def test_parse_version_no_git(self):
        result = parse_version("0.1.0.post11.dirty.2025-03-23T21:41:10Z")
        self.assertEqual(result.post_count, "11")
        self.assertIsNone(result.git_commit)

    def test_parse_version_plain_release(self):
        result = parse_version("1.2.3")
        self.assertEqual(result.version, "1.2.3")
        self.assertIsNone(result.post_count)
        self.assertIsNone(result.git_commit)
        self.assertFalse(result.is_dirty)
        self.assertIsNone(result.build_timestamp)

    def test_extract_build_timestamp(self):
        self.assertEqual(extract_build_timestamp("0.1.0.post11+ga524f7b.dirty.2025-03-23T21:41:10Z"), "2025-03-23T21:41:10Z")
        self.assertIsNone(extract_build_timestamp("0.1.0.post11+ga524f7b.dirty"))


if __name__ == "__main__":
    unittest.main()
