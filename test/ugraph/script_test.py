import argparse
import contextlib
import io
import unittest
from unittest import mock

from ugraph.constants import Constants
from ugraph.commands.common import parse_edge
from ugraph.script import Script

class ScriptTest(unittest.TestCase):
    def run_script(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            Script().run(list(argv))
        return out.getvalue().splitlines()

    def test_parse_edge(self):
        self.assertEqual(parse_edge("A-B"), ("A", "B", 0.0))
        self.assertEqual(parse_edge(" A-B:2.5 "), ("A", "B", 2.5))

    def test_parse_edge_invalid(self):
        for value in ("AB", "A-", "-B", "A-B:heavy"):
            with self.assertRaises(argparse.ArgumentTypeError):
                parse_edge(value)

    def test_traverse(self):
        lines = self.run_script("traverse", "--origin", "A", "A-B", "A-C", "B-D")
        self.assertEqual(lines, ["A B C D"])

    def test_path(self):
        lines = self.run_script("path", "--origin", "A", "--destination", "D", "A-B", "B-C:4", "C-D")
        self.assertEqual(lines, ["3", "A B C D"])

    def test_path_same_vertex(self):
        lines = self.run_script("path", "--origin", "A", "--destination", "A", "A-B")
        self.assertEqual(lines, ["0", "A"])

    def test_path_unreachable(self):
        lines = self.run_script("path", "--origin", "A", "--destination", "E", "--vertex", "E", "A-B")
        self.assertEqual(lines, ["unreachable"])

    def test_unknown_vertex_is_a_usage_error(self):
        with contextlib.redirect_stderr(io.StringIO()) as err:
            with self.assertRaises(SystemExit) as ctx:
                Script().run(["traverse", "--origin", "Z", "A-B"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("'Z'", err.getvalue())

    def test_unknown_log_level_is_a_usage_error(self):
        with mock.patch.object(Constants, "LOG_LEVEL", "LOUD"):
            with contextlib.redirect_stderr(io.StringIO()) as err:
                with self.assertRaises(SystemExit) as ctx:
                    Script().run(["traverse", "--origin", "A", "A-B"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("UGRAPH_LOG_LEVEL", err.getvalue())

    def test_lowercase_log_level(self):
        with mock.patch.object(Constants, "LOG_LEVEL", "error"):
            lines = self.run_script("traverse", "--origin", "A", "A-B")
        self.assertEqual(lines, ["A B"])

    def test_malformed_edge_is_a_usage_error(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                Script().run(["traverse", "--origin", "A", "AB"])
        self.assertEqual(ctx.exception.code, 2)

if __name__ == "__main__":
    unittest.main()
