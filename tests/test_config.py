import os
import unittest
from unittest import mock

from gdrivewrap.config import ENV_CONFIG_DIR, ENV_EXECUTABLE, ToolConfig, default_executable
from gdrivewrap.errors import InvalidArgumentError


class TestToolConfig(unittest.TestCase):
    def test_rejects_invalid_values(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            ToolConfig(executable="")
        with self.assertRaises(InvalidArgumentError):
            ToolConfig(executable="gdrive", config_dir="  ")
        with self.assertRaises(InvalidArgumentError):
            ToolConfig(executable="gdrive", timeout_sec=0)

    def test_token_file(self) -> None:
        cfg = ToolConfig(executable="gdrive", config_dir="/tmp/gd")
        self.assertEqual(cfg.token_file, os.path.join("/tmp/gd", "token_v2.json"))

        cfg = ToolConfig(executable="gdrive")
        self.assertEqual(
            cfg.token_file,
            os.path.join(os.path.expanduser("~"), ".gdrive", "token_v2.json"),
        )

    def test_from_env(self) -> None:
        env = {ENV_EXECUTABLE: "/opt/gdrive", ENV_CONFIG_DIR: "/etc/gd"}
        with mock.patch.dict(os.environ, env, clear=False):
            cfg = ToolConfig.from_env(timeout_sec=30)
        self.assertEqual(cfg.executable, "/opt/gdrive")
        self.assertEqual(cfg.config_dir, "/etc/gd")
        self.assertEqual(cfg.timeout_sec, 30)

    def test_from_env_falls_back_to_default_executable(self) -> None:
        with mock.patch.dict(os.environ, {ENV_EXECUTABLE: "", ENV_CONFIG_DIR: ""}, clear=False):
            with mock.patch("gdrivewrap.config.default_executable", return_value="gdrive-linux-x64"):
                cfg = ToolConfig.from_env()
        self.assertEqual(cfg.executable, "gdrive-linux-x64")
        self.assertIsNone(cfg.config_dir)


class TestDefaultExecutable(unittest.TestCase):
    def test_known_platforms(self) -> None:
        self.assertEqual(default_executable("Windows", "AMD64"), "gdrive-windows-x64.exe")
        self.assertEqual(default_executable("Linux", "x86_64"), "gdrive-linux-x64")
        self.assertEqual(default_executable("Darwin", "x86_64"), "gdrive-osx-x64")

    def test_unknown_platform(self) -> None:
        with self.assertRaises(InvalidArgumentError) as ctx:
            default_executable("Linux", "armv7l")
        self.assertEqual(ctx.exception.details["machine"], "armv7l")


if __name__ == "__main__":
    unittest.main()
