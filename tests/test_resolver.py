import os
import stat
import tempfile
import unittest

import resolver
from exceptions import CommandNotFound, CommandPermissionDenied


class TestResolver(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.bin1 = os.path.join(self.tmpdir.name, "bin1")
        self.bin2 = os.path.join(self.tmpdir.name, "bin2")
        os.mkdir(self.bin1)
        os.mkdir(self.bin2)
        self.path = os.pathsep.join([self.bin1, self.bin2])

    def make_file(self, directory, name, executable=True):
        path = os.path.join(directory, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write("#!/bin/sh\n")
        mode = stat.S_IRUSR | stat.S_IWUSR
        if executable:
            mode |= stat.S_IXUSR
        os.chmod(path, mode)
        return path

    def test_finds_executable(self):
        expected = self.make_file(self.bin2, "tool")
        self.assertEqual(expected, resolver.resolve("tool", self.path))

    def test_earlier_directory_wins(self):
        first = self.make_file(self.bin1, "tool")
        self.make_file(self.bin2, "tool")
        self.assertEqual(first, resolver.resolve("tool", self.path))

    def test_skips_non_executable_when_a_later_one_is_executable(self):
        self.make_file(self.bin1, "tool", executable=False)
        second = self.make_file(self.bin2, "tool")
        self.assertEqual(second, resolver.resolve("tool", self.path))

    def test_not_found(self):
        with self.assertRaises(CommandNotFound) as ctx:
            resolver.resolve("zzzznotacommand", self.path)
        self.assertEqual("zzzznotacommand: command not found", str(ctx.exception))

    def test_directories_are_not_commands(self):
        os.mkdir(os.path.join(self.bin1, "adir"))
        with self.assertRaises(CommandNotFound):
            resolver.resolve("adir", self.path)

    @unittest.skipIf(hasattr(os, "geteuid") and os.geteuid() == 0, "root bypasses permission bits")
    def test_permission_denied(self):
        self.make_file(self.bin1, "tool", executable=False)
        with self.assertRaises(CommandPermissionDenied) as ctx:
            resolver.resolve("tool", self.path)
        self.assertEqual("tool: permission denied", str(ctx.exception))

    def test_name_with_slash_is_checked_directly(self):
        path = self.make_file(self.bin2, "tool")
        self.assertEqual(path, resolver.resolve(path, self.bin1))

    def test_empty_name(self):
        with self.assertRaises(CommandNotFound):
            resolver.resolve("", self.path)

    def test_candidate_paths_empty_entry_means_current_directory(self):
        self.assertEqual([os.path.join(os.curdir, "x"), os.path.join("/bin", "x")],
                         resolver.candidate_paths("x", os.pathsep + "/bin"))


if __name__ == "__main__":
    unittest.main()
