import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from gradient_core.config import AppConfig, load_config


class ConfigTests(unittest.TestCase):
    def test_defaults_without_path(self):
        cfg = load_config()
        self.assertIsInstance(cfg, AppConfig)
        self.assertEqual((cfg.render.width, cfg.render.height), (256, 256))
        self.assertEqual(cfg.output.path, "image.png")
        self.assertFalse(cfg.logging.enabled)
        self.assertIsNone(cfg.logging.directory)

    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = load_config(Path(tmp) / "missing.json")
            self.assertEqual(cfg.output.path, "image.png")

    def test_load_default_when_unparseable(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.render.width, 256)

    def test_load_full_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "output": {"path": "out.png"},
                "logging": {"enabled": True, "directory": "logs", "console": True},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.output.path, "out.png")
            self.assertTrue(cfg.logging.enabled)
            self.assertEqual(cfg.logging.directory, "logs")
            self.assertTrue(cfg.logging.console)

    def test_partial_file_and_unknown_keys(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "render": {"width": "64", "depth": 9},
                "logging": {"keep_log_files": 0},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.render.width, 64)
            self.assertEqual(cfg.render.height, 256)
            self.assertFalse(hasattr(cfg.render, "depth"))
            self.assertEqual(cfg.logging.keep_log_files, 1)

    def test_small_dimensions_are_not_clamped(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"render": {"width": 1}}), encoding="utf-8")
            self.assertEqual(load_config(path).render.width, 1)

    def test_wrong_types_fall_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": "two",
                "render": {"width": "abc", "height": None},
                "output": {"path": 123},
                "logging": {"enabled": "yes", "directory": 5, "keep_log_files": [], "console": 1},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual((cfg.render.width, cfg.render.height), (256, 256))
            self.assertEqual(cfg.output.path, "image.png")
            self.assertFalse(cfg.logging.enabled)
            self.assertIsNone(cfg.logging.directory)
            self.assertEqual(cfg.logging.keep_log_files, 7)
            self.assertFalse(cfg.logging.console)
            self.assertEqual(cfg.config_version, 1)

    def test_non_object_section_ignored(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"render": [1, 2], "output": "x.png"}), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.render.width, 256)
            self.assertEqual(cfg.output.path, "image.png")


if __name__ == "__main__":
    unittest.main()
