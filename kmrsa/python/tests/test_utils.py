#!/usr/bin/env python3

import argparse
import logging
import os
import tempfile
import unittest

import numpy as np

from kmrsa import AttributeDict, format_suffixes, setup_logger, str2bool


class TestUtils(unittest.TestCase):
    def test_attribute_dict(self):
        params = AttributeDict({"sentinel": "$"})
        params.validate = True
        self.assertEqual(params.sentinel, "$")
        self.assertTrue(params["validate"])
        del params.validate
        self.assertNotIn("validate", params)
        with self.assertRaises(AttributeError):
            params.validate
        with self.assertRaises(AttributeError):
            del params.validate

    def test_str2bool(self):
        for v in ("yes", "True", "t", "Y", "1", True):
            self.assertTrue(str2bool(v))
        for v in ("no", "FALSE", "f", "n", "0", False):
            self.assertFalse(str2bool(v))
        with self.assertRaises(argparse.ArgumentTypeError):
            str2bool("maybe")

    def test_format_suffixes(self):
        self.assertEqual(
            format_suffixes("aa$", np.array([2, 1, 0])), "2\t$\n1\ta$\n0\taa$"
        )
        self.assertEqual(
            format_suffixes(b"a$", np.array([1, 0])), "1\tb'$'\n0\tb'a$'"
        )
        self.assertEqual(
            format_suffixes(np.array([2, 0]), np.array([1, 0])),
            "1\t[0]\n0\t[2, 0]",
        )

    def test_setup_logger(self):
        root = logging.getLogger("")
        handlers = list(root.handlers)
        level = root.level
        try:
            for h in handlers:
                root.removeHandler(h)
            with tempfile.TemporaryDirectory() as tmp_dir:
                log_filename = setup_logger(
                    f"{tmp_dir}/log/log-build", log_level="debug", use_console=False
                )
                logging.debug("hello")
                for h in list(root.handlers):
                    h.flush()
                    h.close()
                    root.removeHandler(h)
                self.assertTrue(os.path.isfile(log_filename))
                with open(log_filename) as f:
                    self.assertIn("hello", f.read())
        finally:
            for h in handlers:
                root.addHandler(h)
            root.setLevel(level)


if __name__ == "__main__":
    unittest.main()
