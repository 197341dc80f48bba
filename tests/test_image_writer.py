"""
Tests for the image writer.

Tests cover:
- Writer configuration
- Path resolution and traversal protection
- Writing, overwriting and directory creation
- Error handling
"""

import tempfile
import unittest
from pathlib import Path

from Identicon_Libs.exceptions import PersistenceError
from Identicon_Libs.OutputLib.image_writer import (
    ImageWriterConfig,
    ImageWriter,
    save_image,
)

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class TestImageWriterConfig(unittest.TestCase):
    """Test ImageWriterConfig dataclass."""

    def test_config_creation_default(self):
        """Test creating config with defaults."""
        config = ImageWriterConfig()

        self.assertEqual(config.output_dir, ".")
        self.assertEqual(config.extension, ".png")
        self.assertTrue(config.overwrite)
        self.assertTrue(config.create_directories)

    def test_config_round_trip(self):
        """Test converting config to and from a dictionary."""
        config = ImageWriterConfig(output_dir="/tmp/out", overwrite=False)

        restored = ImageWriterConfig.from_dict(config.to_dict())

        self.assertEqual(restored, config)

    def test_from_dict_ignores_unknown_keys(self):
        config = ImageWriterConfig.from_dict({"overwrite": False, "quality": 90})

        self.assertFalse(config.overwrite)


class TestImageWriter(unittest.TestCase):
    """Test ImageWriter path handling and file I/O."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.output_dir = Path(self.temp_dir.name).resolve()
        self.writer = ImageWriter(ImageWriterConfig(output_dir=str(self.output_dir)))

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_resolve_appends_extension(self):
        """Test that the .png extension is appended to the name."""
        path = self.writer.resolve_path("hipster")

        self.assertEqual(path, self.output_dir / "hipster.png")

    def test_resolve_keeps_existing_dots(self):
        path = self.writer.resolve_path("john.doe")

        self.assertEqual(path.name, "john.doe.png")

    def test_resolve_rejects_parent_reference(self):
        """Test that '..' in the name is blocked."""
        with self.assertRaises(PersistenceError):
            self.writer.resolve_path("../escape")

    def test_resolve_rejects_absolute_outside(self):
        """Test that absolute names outside the output directory are blocked."""
        outside = Path(tempfile.gettempdir()).resolve() / "elsewhere" / "x"

        with self.assertRaises(PersistenceError):
            self.writer.resolve_path(str(outside))

    def test_resolve_empty_name(self):
        """Test that an empty name resolves to a bare .png in the output directory."""
        path = self.writer.resolve_path("")

        self.assertEqual(path, self.output_dir / ".png")

    def test_resolve_rejects_null_byte(self):
        """Test that invalid path characters surface as PersistenceError."""
        with self.assertRaises(PersistenceError) as ctx:
            self.writer.resolve_path("a\x00b")

        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    def test_write_creates_file(self):
        """Test writing bytes to <name>.png."""
        path = self.writer.write(PNG_BYTES, "asdf")

        self.assertEqual(path, self.output_dir / "asdf.png")
        self.assertEqual(path.read_bytes(), PNG_BYTES)

    def test_write_empty_name(self):
        """Test that an empty name writes .png."""
        path = self.writer.write(PNG_BYTES, "")

        self.assertEqual(path.read_bytes(), PNG_BYTES)
        self.assertEqual(path.name, ".png")

    def test_write_null_byte_name(self):
        with self.assertRaises(PersistenceError):
            self.writer.write(PNG_BYTES, "a\x00b")

        self.assertEqual(list(self.output_dir.iterdir()), [])

    def test_write_creates_subdirectories(self):
        """Test that nested names create directories."""
        path = self.writer.write(PNG_BYTES, "team/alice")

        self.assertTrue(path.exists())
        self.assertEqual(path.parent, self.output_dir / "team")

    def test_write_without_create_directories(self):
        """Test that missing directories fail when creation is disabled."""
        writer = ImageWriter(
            ImageWriterConfig(output_dir=str(self.output_dir), create_directories=False)
        )

        with self.assertRaises(PersistenceError):
            writer.write(PNG_BYTES, "missing/alice")

    def test_write_overwrites_by_default(self):
        self.writer.write(b"old", "asdf")
        path = self.writer.write(PNG_BYTES, "asdf")

        self.assertEqual(path.read_bytes(), PNG_BYTES)

    def test_write_refuses_overwrite_when_disabled(self):
        """Test that existing files are kept when overwrite=False."""
        writer = ImageWriter(ImageWriterConfig(output_dir=str(self.output_dir), overwrite=False))
        writer.write(b"old", "asdf")

        with self.assertRaises(PersistenceError):
            writer.write(PNG_BYTES, "asdf")

        self.assertEqual((self.output_dir / "asdf.png").read_bytes(), b"old")

    def test_write_failure_is_persistence_error(self):
        """Test that OS errors surface as PersistenceError with the cause chained."""
        blocker = self.output_dir / "blocker"
        blocker.write_bytes(b"not a directory")
        writer = ImageWriter(ImageWriterConfig(output_dir=str(blocker)))

        with self.assertRaises(PersistenceError) as ctx:
            writer.write(PNG_BYTES, "asdf")

        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_persistence_error_is_os_error(self):
        with self.assertRaises(OSError):
            self.writer.write(PNG_BYTES, "../escape")


class TestSaveImage(unittest.TestCase):
    """Test the save_image convenience function."""

    def test_save_image(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = save_image(PNG_BYTES, "new_image", output_dir=temp_dir)

            self.assertTrue(path.exists())
            self.assertEqual(path.name, "new_image.png")
