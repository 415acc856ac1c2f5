import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from pocket.credentials import DEFAULT_SITE, Credentials, _normalize_credentials  # noqa: E402


class CredentialsTests(unittest.TestCase):
    def test_site_trailing_slash_stripped(self):
        self.assertEqual(Credentials("k", "t", "https://example.com/").site, "https://example.com")

    def test_default_site(self):
        self.assertEqual(Credentials("k", "t").site, DEFAULT_SITE.rstrip("/"))

    def test_immutable(self):
        credentials = Credentials("k", "t")
        with self.assertRaises(AttributeError):
            credentials.consumer_key = "other"  # type: ignore[misc]

    def test_auth_fields(self):
        self.assertEqual(
            Credentials("k", "t").auth_fields(),
            {"consumer_key": "k", "access_token": "t"},
        )

    def test_from_env(self):
        env = {"POCKET_CONSUMER_KEY": "ek", "POCKET_ACCESS_TOKEN": "et"}
        with patch.dict(os.environ, env):
            credentials = Credentials.from_env(site="https://s")
        self.assertEqual(credentials, Credentials("ek", "et", "https://s"))

    def test_from_env_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValueError):
                Credentials.from_env()


class NormalizeCredentialsTests(unittest.TestCase):
    def test_instance_is_returned(self):
        credentials = Credentials("k", "t")
        self.assertIs(_normalize_credentials(credentials), credentials)

    def test_instance_with_site_override(self):
        credentials = _normalize_credentials(Credentials("k", "t"), site="https://other")
        self.assertEqual(credentials.site, "https://other")
        self.assertEqual(credentials.consumer_key, "k")

    def test_mapping(self):
        credentials = _normalize_credentials({"consumer_key": "k", "access_token": "t", "site": "https://m"})
        self.assertEqual(credentials, Credentials("k", "t", "https://m"))

    def test_mapping_missing_key(self):
        with self.assertRaises(ValueError):
            _normalize_credentials({"consumer_key": "k"})

    def test_pair(self):
        self.assertEqual(_normalize_credentials(("k", "t")), Credentials("k", "t"))

    def test_unsupported(self):
        with self.assertRaises(ValueError):
            _normalize_credentials("k:t")
        with self.assertRaises(ValueError):
            _normalize_credentials(42)


if __name__ == "__main__":
    unittest.main()
