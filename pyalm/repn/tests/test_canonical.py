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

from pyalm.common.log import LoggingIntercept
from pyalm.core.base.var import Var
from pyalm.core.expr.numeric_expr import AffExpr, QuadExpr
from pyalm.repn.canonical import (
    canonicalize,
    canonicalize_linear,
    canonicalize_quadratic,
    unordered_pair_id,
)


class TestCanonicalize(unittest.TestCase):
    def setUp(self):
        self.x = Var('x')
        self.y = Var('y')
        self.z = Var('z')

    def test_empty(self):
        self.assertEqual(canonicalize([]), [])

    def test_no_duplicates(self):
        x, y, z = self.x, self.y, self.z
        self.assertTermsEqual(
            canonicalize([(y, 1), (x, 2), (z, 3)]), [(y, 1), (x, 2), (z, 3)]
        )

    def test_first_occurrence_order(self):
        x, y, z = self.x, self.y, self.z
        terms = [(x, 1), (y, 2), (x, -1), (z, 3), (y, 3), (x, 5)]
        ans = canonicalize(terms)
        self.assertTermsEqual(ans, [(x, 5), (y, 5), (z, 3)])
        self.assertLessEqual(len(ans), len(terms))

    def test_keys_compared_by_identity(self):
        # Two distinct variables with the same name are different terms
        x1, x2 = Var('x'), Var('x')
        self.assertTermsEqual(canonicalize([(x1, 1), (x2, 1)]), [(x1, 1), (x2, 1)])

    def test_cancellation_is_kept(self):
        x, y = self.x, self.y
        # Zero coefficients are not dropped here: that is a display decision
        self.assertTermsEqual(canonicalize([(x, 1), (y, 1), (x, -1)]), [(x, 0), (y, 1)])

    def test_summation_order(self):
        x = self.x
        ans = canonicalize([(x, 0.1), (x, 0.2), (x, 0.3)])
        self.assertEqual(ans[0][1], (0.1 + 0.2) + 0.3)

    def test_debug_output(self):
        x = self.x
        out = StringIO()
        with LoggingIntercept(out, 'pyalm.repn', logging.DEBUG):
            canonicalize([(x, 1), (x, 2), (x, 3)])
        self.assertEqual(out.getvalue(), "Merged 2 duplicate terms (1 distinct of 3)\n")

        out = StringIO()
        with LoggingIntercept(out, 'pyalm.repn', logging.DEBUG):
            canonicalize([(x, 1)])
        self.assertEqual(out.getvalue(), "")


class TestUnorderedPair(unittest.TestCase):
    def test_pair_id(self):
        x, y = Var('x'), Var('y')
        self.assertEqual(unordered_pair_id((x, y)), unordered_pair_id((y, x)))
        self.assertNotEqual(unordered_pair_id((x, x)), unordered_pair_id((x, y)))
        self.assertNotEqual(unordered_pair_id((x, x)), unordered_pair_id((y, y)))


class TestCanonicalRepn(unittest.TestCase):
    def test_linear(self):
        x, y = Var('x'), Var('y')
        e = AffExpr(2, [x, y, x, y], [1, 2, 3, -2])
        repn = canonicalize_linear(e)
        self.assertEqual(repn.constant, 2)
        self.assertEqual(len(repn), 2)
        self.assertTermsEqual(repn.terms(), [(x, 4), (y, 0)])
        # The expression itself is not modified
        self.assertEqual(len(e.linear_vars), 4)

    def test_quadratic(self):
        x, y = Var('x'), Var('y')
        e = QuadExpr([(x, y), (x, x), (y, x)], [1, 4, 2], AffExpr(1, [y, y], [1, 1]))
        repn = canonicalize_quadratic(e)
        self.assertEqual(len(repn), 2)
        self.assertTermsEqual(repn.terms(), [((x, y), 3), ((x, x), 4)])
        self.assertTermsEqual(repn.linear.terms(), [(y, 2)])
        self.assertEqual(repn.linear.constant, 1)

    def test_quadratic_first_tuple_order(self):
        x, y = Var('x'), Var('y')
        repn = canonicalize_quadratic(QuadExpr([(y, x), (x, y)], [1, 1]))
        self.assertTermsEqual(repn.terms(), [((y, x), 2)])


if __name__ == "__main__":
    unittest.main()
