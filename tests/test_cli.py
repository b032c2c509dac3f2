import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from copy_all_children.__main__ import main


class TestCli(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp())
        self.origin = self.test_dir / "origin"
        self.origin.mkdir()
        (self.origin / "a.txt").write_text("alpha")
        (self.origin / ".hidden").write_text("secret")
        self.target = self.test_dir / "target"

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    @patch("copy_all_children.__main__.print_success")
    def test_copy(self, mock_success):
        code = main([str(self.origin), str(self.target)])

        self.assertEqual(code, 0)
        self.assertEqual((self.target / "a.txt").read_text(), "alpha")
        self.assertTrue((self.target / ".hidden").exists())
        mock_success.assert_called_once()
        message = mock_success.call_args[0][0]
        self.assertIn(str(self.origin), message)
        self.assertIn(str(self.target), message)

    def test_flags(self):
        code = main([str(self.origin), str(self.target), "--ignore-hidden", "--delete-origin"])

        self.assertEqual(code, 0)
        self.assertFalse(self.origin.exists())
        self.assertTrue((self.target / "a.txt").exists())
        self.assertFalse((self.target / ".hidden").exists())

    def test_dry_run_does_not_modify(self):
        code = main([str(self.origin), str(self.target), "--dry-run", "--delete-origin"])

        self.assertEqual(code, 0)
        self.assertFalse(self.target.exists())
        self.assertTrue((self.origin / "a.txt").exists())

    @patch("copy_all_children.__main__.console")
    def test_dry_run_preview_lines(self, mock_console):
        """Dry run lists the target creation, every copy and the origin removal."""
        code = main([str(self.origin), str(self.target), "--dry-run", "--delete-origin"])

        self.assertEqual(code, 0)
        lines = [c.args[0] for c in mock_console.print.call_args_list]
        self.assertIn(f"  [WOULD CREATE] {self.target}", lines)
        self.assertIn(f"  [WOULD COPY] a.txt -> {self.target / 'a.txt'}", lines)
        self.assertIn(f"  [WOULD COPY] .hidden -> {self.target / '.hidden'}", lines)
        self.assertIn(f"  [WOULD DELETE] {self.origin}", lines)

    @patch("copy_all_children.__main__.console")
    def test_dry_run_preview_existing_target_hidden_skipped(self, mock_console):
        self.target.mkdir()

        code = main([str(self.origin), str(self.target), "--dry-run", "--ignore-hidden"])

        self.assertEqual(code, 0)
        lines = [c.args[0] for c in mock_console.print.call_args_list]
        self.assertEqual(
            [line for line in lines if line.startswith("  [WOULD")],
            [f"  [WOULD COPY] a.txt -> {self.target / 'a.txt'}"],
        )

    @patch("copy_all_children.__main__.print_error")
    def test_unsearchable_origin_exits_with_error(self, mock_error):
        """A stat failure on the origin is an error line, not a traceback."""
        real_stat = os.stat

        def fake_stat(path, *args, **kwargs):
            if str(path) == str(self.origin):
                raise PermissionError(13, "Permission denied", str(self.origin))
            return real_stat(path, *args, **kwargs)

        with patch("copy_all_children.copier.os.stat", side_effect=fake_stat):
            code = main([str(self.origin), str(self.target)])

        self.assertEqual(code, 1)
        self.assertIn("does not exist", mock_error.call_args[0][0])
        self.assertFalse(self.target.exists())

    @patch("copy_all_children.__main__.print_error")
    def test_dry_run_reports_errors(self, mock_error):
        self.target.write_text("file")

        code = main([str(self.origin), str(self.target), "--dry-run"])

        self.assertEqual(code, 1)
        self.assertIn("not a directory", mock_error.call_args[0][0])

    @patch("copy_all_children.__main__.print_error")
    def test_error_exit_code(self, mock_error):
        code = main([str(self.test_dir / "missing"), str(self.target)])

        self.assertEqual(code, 1)
        self.assertIn("does not exist", mock_error.call_args[0][0])
        self.assertFalse(self.target.exists())

    @patch("copy_all_children.__main__.copy_all_children", side_effect=KeyboardInterrupt)
    def test_keyboard_interrupt(self, mock_copy):
        code = main([str(self.origin), str(self.target)])
        self.assertEqual(code, 130)

    def test_missing_arguments(self):
        with patch("sys.stderr"):
            with self.assertRaises(SystemExit) as ctx:
                main([])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
