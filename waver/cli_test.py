# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

import contextlib
import io
import json
import os.path
import shutil
import tempfile
import unittest

from waver.cli import *


alu4 = os.path.join(os.path.dirname(os.path.abspath(__file__)), "alu4.vcd")


class CliTest(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.vcd_file = os.path.join(self.tmp.name, "alu4.vcd")
        shutil.copyfile(alu4, self.vcd_file)

    def tearDown(self):
        self.tmp.cleanup()

    def test_output_filename(self):
        self.assertEqual(output_filename("a/b/alu4.vcd"), "a/b/alu4.json")
        self.assertEqual(output_filename("wave"), "wave.json")

    def test_default_output(self):
        self.assertEqual(main([self.vcd_file]), 0)
        with open(os.path.join(self.tmp.name, "alu4.json")) as f:
            j = json.load(f)
        self.assertEqual(j["header"]["scopes"][0]["name"], "TOP")
        self.assertEqual(len(j["value_changes"]), 4)

    def test_explicit_output(self):
        json_file = os.path.join(self.tmp.name, "out.json")
        self.assertEqual(main([self.vcd_file, json_file, "--indent", "0"]), 0)
        self.assertTrue(os.path.exists(json_file))
        self.assertFalse(os.path.exists(os.path.join(self.tmp.name, "alu4.json")))

    def test_signals(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            self.assertEqual(main([self.vcd_file, "--signals"]), 0)
        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], ") wire 4 TOP.lhs[3:0]")
        self.assertEqual(len(lines), 49)

    def test_missing_file(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            self.assertEqual(main([os.path.join(self.tmp.name, "missing.vcd")]), 1)
        self.assertTrue(err.getvalue().startswith("Failed to parse the VCD file: "))

    def test_output_is_input(self):
        vcd_file = os.path.join(self.tmp.name, "wave.json")
        shutil.copyfile(alu4, vcd_file)
        with open(vcd_file) as f:
            before = f.read()
        for argv in [[vcd_file], [vcd_file, vcd_file]]:
            err = io.StringIO()
            with contextlib.redirect_stderr(err):
                self.assertEqual(main(argv), 1)
            self.assertIn("is the input file", err.getvalue())
        with open(vcd_file) as f:
            self.assertEqual(f.read(), before)

    def test_unwritable_output(self):
        json_file = os.path.join(self.tmp.name, "missing_dir", "out.json")
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            self.assertEqual(main([self.vcd_file, json_file]), 1)
        self.assertTrue(err.getvalue().startswith("Failed to write the JSON file: "))

    def test_parse_failure(self):
        bad = os.path.join(self.tmp.name, "bad.vcd")
        with open(bad, "w") as f:
            f.write("$scope module top $end\n")
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            self.assertEqual(main([bad]), 1)
        self.assertIn("unexpected end of file", err.getvalue())
        self.assertFalse(os.path.exists(os.path.join(self.tmp.name, "bad.json")))


if __name__ == "__main__":
    unittest.main()
