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

import logging
from io import StringIO

import pyalm.common.unittest as unittest

from pyalm.common.log import LoggingIntercept, WrappingFormatter, is_debug_set


class TestIsDebugSet(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger('pyalm.test.log')
        self.level = self.logger.level

    def tearDown(self):
        self.logger.setLevel(self.level)

    def test_debug(self):
        self.logger.setLevel(logging.DEBUG)
        self.assertTrue(is_debug_set(self.logger))

    def test_info(self):
        self.logger.setLevel(logging.INFO)
        self.assertFalse(is_debug_set(self.logger))

    def test_disabled(self):
        self.logger.setLevel(logging.DEBUG)
        logging.disable(logging.DEBUG)
        try:
            self.assertFalse(is_debug_set(self.logger))
        finally:
            logging.disable(logging.NOTSET)


class TestWrappingFormatter(unittest.TestCase):
    def test_short_message(self):
        out = StringIO()
        with LoggingIntercept(out, 'pyalm.test.log', formatter=WrappingFormatter()):
            logging.getLogger('pyalm.test.log').warning('hello %s', 'world')
        self.assertEqual(out.getvalue(), "WARNING: hello world\n")

    def test_long_message(self):
        out = StringIO()
        with LoggingIntercept(out, 'pyalm.test.log', formatter=WrappingFormatter()):
            logging.getLogger('pyalm.test.log').warning(' '.join(['word'] * 20))
        self.assertEqual(
            out.getvalue(),
            "WARNING: "
            + ' '.join(['word'] * 14)
            + "\n    "
            + ' '.join(['word'] * 6)
            + "\n",
        )

    def test_style(self):
        out = StringIO()
        with LoggingIntercept(
            out, 'pyalm.test.log', formatter=WrappingFormatter(style='{')
        ):
            logging.getLogger('pyalm.test.log').warning('hello')
        self.assertEqual(out.getvalue(), "WARNING: hello\n")
        with self.assertRaisesRegex(ValueError, 'unrecognized style flag "!"'):
            WrappingFormatter(style='!')


class TestLoggingIntercept(unittest.TestCase):
    def test_intercept(self):
        logger = logging.getLogger('pyalm.test.log')
        out = StringIO()
        with LoggingIntercept(out, 'pyalm.test.log', logging.INFO) as buf:
            self.assertIs(buf, out)
            logger.debug('not captured')
            logger.info('captured')
        logger.warning('after the context')
        self.assertEqual(out.getvalue(), "captured\n")

    def test_default_output(self):
        with LoggingIntercept(module='pyalm.test.log') as buf:
            logging.getLogger('pyalm.test.log').warning('a message')
        self.assertEqual(buf.getvalue(), "a message\n")

    def test_module_and_logger(self):
        with self.assertRaisesRegex(
            ValueError, "only one of 'module' and 'logger' is allowed"
        ):
            LoggingIntercept(
                module='pyalm.test.log', logger=logging.getLogger('pyalm.test.log')
            )


if __name__ == "__main__":
    unittest.main()
