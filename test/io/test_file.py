import os
import shutil
import stat
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from rbkit.io import file as rb_file
from rbkit.io.file import File


class TestFilePaths(unittest.TestCase):

    def test_basename(self):
        self.assertEqual(rb_file.basename("/home/work/file.swift"), "file.swift")
        self.assertEqual(rb_file.basename("/home/work/file.swift", ".swift"), "file")
        self.assertEqual(rb_file.basename("/home/work/file.swift", ".*"), "file")
        self.assertEqual(rb_file.basename("/home/work/file.rb", ".*"), "file")
        self.assertEqual(rb_file.basename("/home/work/file.rb", ".py"), "file.rb")
        self.assertEqual(rb_file.basename("/home/work/"), "work")
        self.assertEqual(rb_file.basename(".rb", ".rb"), ".rb")

    @unittest.skipUnless(os.sep == "/", "posix root")
    def test_basename_of_root(self):
        self.assertEqual(rb_file.basename("/"), "/")
        self.assertEqual(rb_file.basename("//"), "/")
        self.assertEqual(rb_file.split("/"), ("/", "/"))

    def test_dirname_and_split(self):
        self.assertEqual(rb_file.dirname("/home/work/file.swift"), "/home/work")
        self.assertEqual(rb_file.dirname("/home/work/"), "/home")
        self.assertEqual(rb_file.split("/home/gumby/.profile"), ("/home/gumby", ".profile"))

    def test_extname(self):
        self.assertEqual(rb_file.extname("foo.rb"), ".rb")
        self.assertEqual(rb_file.extname("/a/b/foo.tar.gz"), ".gz")
        self.assertEqual(rb_file.extname(".profile"), "")
        self.assertEqual(rb_file.extname("foo."), "")
        self.assertEqual(rb_file.extname("foo"), "")

    def test_join(self):
        self.assertEqual(rb_file.join("usr", "bin", "swift"), os.path.join("usr", "bin", "swift"))
        self.assertEqual(rb_file.join("usr"), "usr")
        self.assertEqual(rb_file.join(), "")

    def test_expand_and_absolute_path(self):
        home = os.path.expanduser("~")
        self.assertEqual(rb_file.expand("~/file.swift"), os.path.join(home, "file.swift"))
        self.assertEqual(rb_file.expand("file.swift", "/usr/bin"), "/usr/bin/file.swift")
        self.assertEqual(rb_file.expand("../file.swift", "/usr/bin"), "/usr/file.swift")
        self.assertEqual(rb_file.absolute_path("./file.swift"), os.path.join(os.getcwd(), "file.swift"))
        self.assertEqual(rb_file.absolute_path("/usr/bin/"), "/usr/bin")


class TestFileSystem(unittest.TestCase):
    def setUp(self):
        self.tmpdir = Path(tempfile.mkdtemp(prefix="rbkit_file_test_"))
        self.file = self.tmpdir / "some.txt"
        self.file.write_text("hello", encoding="utf-8")
        self.empty = self.tmpdir / "empty.txt"
        self.empty.touch()

    def tearDown(self):
        if self.tmpdir.exists():
            shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_predicates(self):
        self.assertTrue(rb_file.is_file(self.file))
        self.assertFalse(rb_file.is_file(self.tmpdir))
        self.assertTrue(rb_file.is_directory(self.tmpdir))
        self.assertTrue(rb_file.is_exist(self.file))
        self.assertTrue(rb_file.is_readable(self.file))
        self.assertTrue(rb_file.is_writable(self.file))
        self.assertTrue(rb_file.is_deletable(self.file))
        self.assertFalse(rb_file.is_char_dev(self.file))
        self.assertFalse(rb_file.is_block_dev(self.file))

    def test_predicates_on_missing_path(self):
        missing = self.tmpdir / "missing"
        for pred in (rb_file.is_file, rb_file.is_directory, rb_file.is_exist, rb_file.is_readable,
                     rb_file.is_writable, rb_file.is_executable, rb_file.is_deletable,
                     rb_file.is_zero, rb_file.is_block_dev, rb_file.is_char_dev):
            self.assertFalse(pred(missing), pred.__name__)

    def test_stat_predicates_on_unstattable_paths(self):
        paths = [self.tmpdir / ("x" * 300)]
        loop = self.tmpdir / "loop"
        try:
            os.symlink(loop, loop)
            paths.append(loop)
        except (OSError, NotImplementedError):
            pass
        for p in paths:
            for pred in (rb_file.is_zero, rb_file.is_block_dev, rb_file.is_char_dev,
                         rb_file.is_file, rb_file.is_exist):
                with self.subTest(path=p.name[:10], pred=pred.__name__):
                    self.assertFalse(pred(p))

    def test_size_and_zero(self):
        self.assertEqual(rb_file.size(self.file), 5)
        self.assertEqual(rb_file.size(self.empty), 0)
        self.assertTrue(rb_file.is_zero(self.empty))
        self.assertFalse(rb_file.is_zero(self.file))
        with self.assertRaises(FileNotFoundError):
            rb_file.size(self.tmpdir / "missing")

    def test_times(self):
        self.assertIsInstance(rb_file.atime(self.file), datetime)
        self.assertIsInstance(rb_file.mtime(self.file), datetime)
        self.assertIsInstance(rb_file.birthtime(self.file), datetime)

    def test_ftype(self):
        self.assertEqual(rb_file.ftype(self.file), "file")
        self.assertEqual(rb_file.ftype(self.tmpdir), "directory")
        link = self.tmpdir / "link"
        try:
            os.symlink(self.file, link)
        except (OSError, NotImplementedError):
            self.skipTest("symlinks not supported")
        self.assertEqual(rb_file.ftype(link), "link")

    @unittest.skipUnless(os.name == "posix", "posix permissions")
    def test_chmod_and_executable(self):
        other = self.tmpdir / "run.sh"
        other.write_text("#!/bin/sh\n", encoding="utf-8")
        self.assertEqual(rb_file.chmod(0o755, self.file, other), 2)
        self.assertEqual(stat.S_IMODE(os.stat(other).st_mode), 0o755)
        self.assertTrue(rb_file.is_executable(other))
        rb_file.chmod(0o644, other)
        self.assertFalse(rb_file.is_executable(other))

    def test_delete(self):
        self.assertEqual(rb_file.delete(self.file, self.empty), 2)
        self.assertFalse(self.file.exists())
        self.assertFalse(self.empty.exists())
        with self.assertRaises(FileNotFoundError):
            rb_file.delete(self.file)

    @unittest.skipUnless(os.name == "posix", "posix umask")
    def test_umask(self):
        original = rb_file.get_umask()
        try:
            self.assertEqual(rb_file.set_umask(0o077), original)
            self.assertEqual(rb_file.get_umask(), 0o077)
        finally:
            rb_file.set_umask(original)


class TestFileHandle(unittest.TestCase):
    def setUp(self):
        self.tmpdir = Path(tempfile.mkdtemp(prefix="rbkit_handle_test_"))
        self.path = self.tmpdir / "data.txt"

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_open_with_closure_closes(self):
        f = File.open(self.path, "w", closure=lambda fh: fh.write("abc"))
        self.assertTrue(f.closed)
        self.assertEqual(self.path.read_text(), "abc")
        self.assertEqual(f.to_path, str(self.path))

    def test_open_without_closure_stays_open(self):
        self.path.write_text("xyz")
        f = File.open(self.path)
        try:
            self.assertFalse(f.closed)
            self.assertEqual(f.read(), "xyz")
        finally:
            f.close()

    def test_closure_error_still_closes(self):
        opened = []

        def boom(fh):
            opened.append(fh)
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            File.new(self.path, "w", closure=boom)
        self.assertTrue(opened[0].closed)

    def test_context_manager(self):
        with File(self.path, "w") as f:
            f.write("ctx")
        self.assertTrue(f.closed)
        self.assertEqual(rb_file.size(self.path), 3)


if __name__ == "__main__":
    unittest.main()
