import unittest

from exelocate import DEFAULT_EXTENSIONS
from exelocate.match import has_extension, is_recognized, matches, parse_extensions, probe_names

EXE_ONLY = {".exe": None}


class TestParseExtensions(unittest.TestCase):
    def test_defaults_with_empty_variable(self):
        extensions = parse_extensions("")
        self.assertEqual(list(extensions), list(DEFAULT_EXTENSIONS) + [""])

    def test_merges_lowercased(self):
        extensions = parse_extensions(".PY;.Rb;.EXE", sep=";")
        self.assertEqual(list(extensions), [".com", ".exe", ".bat", ".cmd", ".py", ".rb"])

    def test_empty_entries_add_empty_extension(self):
        self.assertIn("", parse_extensions(".py::.sh", sep=":"))
        self.assertNotIn("", parse_extensions(".py:.sh", sep=":"))


class TestMatches(unittest.TestCase):
    def test_has_extension(self):
        self.assertTrue(has_extension("tool.exe"))
        self.assertFalse(has_extension("tool"))

    def test_is_recognized_ignores_case(self):
        self.assertTrue(is_recognized("TOOL.EXE", EXE_ONLY))
        self.assertFalse(is_recognized("tool.bat", EXE_ONLY))

    def test_explicit_extension_needs_exact_name(self):
        self.assertTrue(matches("tool.exe", "tool.exe", EXE_ONLY))
        self.assertTrue(matches("Tool.EXE", "tOOL.exe", EXE_ONLY))

    def test_explicit_extension_never_gets_another_appended(self):
        extensions = parse_extensions("")
        self.assertFalse(matches("tool.exe", "tool.exe.bat", extensions))
        self.assertFalse(matches("tool.exe", "tool.bat", extensions))
        self.assertFalse(matches("tool.exe", "tool", extensions))

    def test_explicit_extension_must_be_recognized(self):
        self.assertFalse(matches("notes.txt", "notes.txt", parse_extensions("")))

    def test_no_extension_takes_recognized_extension(self):
        self.assertTrue(matches("run", "run.exe", EXE_ONLY))
        self.assertTrue(matches("run", "RUN.Exe", EXE_ONLY))

    def test_no_extension_rejects_unrecognized_extension(self):
        self.assertFalse(matches("run", "run.bat", EXE_ONLY))
        self.assertFalse(matches("run", "run.txt", parse_extensions("")))

    def test_no_extension_rejects_other_base_names(self):
        self.assertFalse(matches("run", "runner.exe", EXE_ONLY))
        self.assertFalse(matches("run", "xrun.exe", EXE_ONLY))

    def test_bare_name_needs_empty_extension(self):
        self.assertTrue(matches("ls", "ls", {"": None}))
        self.assertFalse(matches("ls", "ls", EXE_ONLY))


class TestProbeNames(unittest.TestCase):
    def test_without_extension_tries_every_extension(self):
        self.assertEqual(probe_names("ls", {"": None, ".exe": None}), ["ls", "ls.exe"])

    def test_with_extension_tries_only_itself(self):
        self.assertEqual(probe_names("tool.exe", parse_extensions("")), ["tool.exe"])
