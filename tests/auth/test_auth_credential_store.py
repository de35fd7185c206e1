import datetime as dt
import json
import os
import tempfile
import unittest

from gdrivewrap.auth import CredentialStore
from gdrivewrap.errors import CredentialError


class TestCredentialStore(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.token_file = os.path.join(self._tmp.name, "token_v2.json")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, payload) -> None:
        with open(self.token_file, "w", encoding="utf-8") as f:
            if isinstance(payload, str):
                f.write(payload)
            else:
                json.dump(payload, f)

    def test_missing_file(self) -> None:
        store = CredentialStore(self.token_file)
        self.assertFalse(store.exists())
        with self.assertRaises(CredentialError) as ctx:
            store.load()
        self.assertEqual(ctx.exception.details["token_file"], self.token_file)

    def test_malformed_file(self) -> None:
        self._write("{not json")
        with self.assertRaises(CredentialError) as ctx:
            CredentialStore(self.token_file).load()
        self.assertIsNotNone(ctx.exception.cause)

        self._write([1, 2])
        with self.assertRaises(CredentialError):
            CredentialStore(self.token_file).load()

        self._write({"refresh_token": "r"})
        with self.assertRaises(CredentialError):
            CredentialStore(self.token_file).load()

    def test_load(self) -> None:
        self._write({"access_token": "a", "token_type": "Bearer", "refresh_token": "r"})
        data = CredentialStore(self.token_file).load()
        self.assertEqual(data["access_token"], "a")
        self.assertEqual(data["refresh_token"], "r")

    def test_credentials(self) -> None:
        self._write(
            {
                "access_token": "a",
                "token_type": "Bearer",
                "refresh_token": "r",
                "expiry": "2030-01-02T03:04:05.123456789+01:00",
            }
        )
        creds = CredentialStore(self.token_file).credentials()
        self.assertEqual(creds.token, "a")
        self.assertEqual(creds.refresh_token, "r")
        self.assertEqual(creds.expiry, dt.datetime(2030, 1, 2, 2, 4, 5, 123456))

    def test_credentials_bad_expiry(self) -> None:
        self._write({"access_token": "a", "expiry": "yesterday"})
        with self.assertRaises(CredentialError):
            CredentialStore(self.token_file).credentials()


if __name__ == "__main__":
    unittest.main()
