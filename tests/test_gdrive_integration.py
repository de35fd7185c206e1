import os
import tempfile
import unittest
import uuid

from gdrivewrap import GoogleDriveWrapper, ToolConfig

SANDBOX_ENV = "GDRIVEWRAP_TEST_DIR"


@unittest.skipUnless(os.environ.get(SANDBOX_ENV), f"{SANDBOX_ENV} is not set")
class TestGoogleDriveIntegration(unittest.TestCase):
    """
    Integration test with a real gdrive binary and Google Drive account.

    Required env vars:
        - GDRIVEWRAP_TEST_DIR: existing Drive directory used as a sandbox
          (e.g. "/gdrivewrap-it")

    Optional:
        - GDRIVE_EXECUTABLE, GDRIVE_CONFIG_DIR (see ToolConfig.from_env)
    """

    @classmethod
    def setUpClass(cls) -> None:
        cls.sandbox = os.environ[SANDBOX_ENV].rstrip("/")
        cls.wrapper = GoogleDriveWrapper(ToolConfig.from_env(timeout_sec=300))

    def test_put_get_smoke(self) -> None:
        name = f"it-{uuid.uuid4().hex}.txt"

        with tempfile.TemporaryDirectory() as tmp:
            src = os.path.join(tmp, name)
            with open(src, "w", encoding="utf-8") as f:
                f.write("hello")

            self.wrapper.put(src, self.sandbox)
            entry, _ = self.wrapper.info(f"{self.sandbox}/{name}")
            self.assertTrue(entry.is_file)

            out = os.path.join(tmp, "out")
            os.mkdir(out)
            self.wrapper.get(f"{self.sandbox}/{name}", out)
            with open(os.path.join(out, name), encoding="utf-8") as f:
                self.assertEqual(f.read(), "hello")


if __name__ == "__main__":
    unittest.main()
