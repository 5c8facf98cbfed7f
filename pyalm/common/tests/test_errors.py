#  ___________________________________________________________________________
#
#  pyalm: Python Algebraic Layer for Modeling
#  Copyright (c) 2008-2025
#  National Technology and Engineering Solutions of Sandia, LLC
#  Under the terms of Contract DE-NA0003525 with National Technology and
#  Engineering Solutions of Sandia, LLC, the U.S. Government retains certain
#  rights in this software.
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

import pyalm.common.unittest as unittest

from pyalm.common.errors import (
    format_exception,
    DeveloperError,
    MouseTrap,
    PyalmException,
)


class LocalException(PyalmException):
    default_message = 'Default message.'


class TestFormatException(unittest.TestCase):
    def test_basic_message(self):
        self.assertEqual(format_exception("Hello world:"), "Hello world:")

    def test_basic_message_wrap(self):
        self.assertEqual(
            format_exception(
                "Hello world, this is a very long message that will "
                "inevitably wrap onto another line."
            ),
            "Hello world, this is a very long message that will\n"
            "    inevitably wrap onto another line.",
        )

    def test_prolog_and_epilog(self):
        msg = format_exception("Hello world", prolog="Prolog:", epilog="Epilog.")
        self.assertEqual(msg, "Prolog:\n        Hello world\n    Epilog.")

    def test_builtin_exception_indent(self):
        self.assertEqual(
            format_exception(
                "Hello world, this is a very long message that will "
                "inevitably wrap onto another line.",
                exception=RuntimeError,
            ),
            "Hello world, this is a very long message that will inevitably\n"
            "    wrap onto another line.",
        )


class TestExceptions(unittest.TestCase):
    def test_default_message(self):
        self.assertEqual(str(LocalException()), 'Default message.')
        self.assertEqual(str(LocalException('Local.')), 'Local.')

    def test_DeveloperError(self):
        e = DeveloperError("Unrecognized constraint sense 'x'")
        self.assertIsInstance(e, NotImplementedError)
        self.assertIsInstance(e, PyalmException)
        self.assertRegex(
            str(e),
            r"^Internal pyalm implementation error:\n"
            r"        \"Unrecognized constraint sense 'x'\"\n"
            r"    Please report this to the pyalm Developers.$",
        )

    def test_MouseTrap(self):
        e = MouseTrap("printing widgets")
        self.assertIsInstance(e, NotImplementedError)
        with self.assertRaisesRegex(
            MouseTrap,
            "Sorry, mouse, no cookies here! 'printing widgets' This is "
            "functionality we think may be rational to support, but is not "
            "yet implemented.",
            normalize_whitespace=True,
        ):
            raise e


if __name__ == "__main__":
    unittest.main()
