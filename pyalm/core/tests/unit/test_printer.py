# -*- coding: utf-8 -*-
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

from parameterized import parameterized

import pyalm.common.unittest as unittest

from pyalm.common.errors import MouseTrap
from pyalm.common.log import LoggingIntercept
from pyalm.core.base.var import Var, Integers, Binary
from pyalm.core.expr.numeric_expr import AffExpr, QuadExpr
from pyalm.core.expr.printer import (
    PRINT_CONFIG,
    PRINT_ZERO_TOL,
    aff_str,
    index_set_str,
    indexed_str,
    quad_str,
    to_string,
    var_domain_str,
    var_str,
)
from pyalm.core.expr.symbols import RenderMode

plain = RenderMode.plain
markup = RenderMode.markup


class TestVarStr(unittest.TestCase):
    def test_named(self):
        self.assertEqual(var_str(plain, Var('x')), 'x')
        self.assertEqual(var_str(plain, Var('x[1,2]')), 'x[1,2]')

    def test_noname(self):
        self.assertEqual(var_str(plain, Var()), 'noname')
        self.assertEqual(var_str(markup, Var()), 'noname')
        self.assertEqual(to_string(Var(), markup), '$$ noname $$')

    def test_markup_subscript(self):
        self.assertEqual(var_str(markup, Var('x[1]')), 'x_{1}')
        self.assertEqual(var_str(markup, Var('x[1,a]')), 'x_{1,a}')
        self.assertEqual(var_str(markup, Var('x')), 'x')
        self.assertEqual(to_string(Var('x[1]'), markup), '$$ x_{1} $$')
        self.assertEqual(to_string(Var('x[1]'), markup, math_mode=True), 'x_{1}')

    def test_markup_multiple_brackets(self):
        # Only the first "[" and the last "]" are converted
        x = Var('x[1][2]')
        out = StringIO()
        with LoggingIntercept(out, 'pyalm.core', logging.DEBUG):
            self.assertEqual(var_str(markup, x), 'x_{1][2}')
        self.assertIn("Variable name 'x[1][2]' contains multiple", out.getvalue())
        self.assertEqual(var_str(plain, x), 'x[1][2]')

    def test_labeler(self):
        x = Var('x')
        self.assertEqual(var_str(plain, x, labeler=lambda v: 'X'), 'X')
        self.assertEqual(var_str(plain, x, labeler=lambda v: ''), 'noname')
        self.assertEqual(
            to_string(x + 2 * Var('y'), labeler=lambda v: v.name.upper()), 'X + 2 Y'
        )


class TestAffStr(unittest.TestCase):
    def setUp(self):
        self.x = Var('x')
        self.y = Var('y')

    def test_difference(self):
        x, y = self.x, self.y
        self.assertEqual(aff_str(plain, AffExpr(0, [x, y], [1.0, -1.0])), "x - y")

    def test_self_cancelling(self):
        x = self.x
        self.assertEqual(aff_str(plain, AffExpr(0, [x, x], [1.0, -1.0])), "0")
        self.assertEqual(aff_str(plain, AffExpr(2, [x, x], [1.0, -1.0])), "2")
        self.assertEqual(
            aff_str(plain, AffExpr(2, [x, x], [1.0, -1.0]), show_constant=False), "0"
        )

    def test_empty(self):
        self.assertEqual(aff_str(plain, AffExpr(3.0)), "3")
        self.assertEqual(aff_str(plain, AffExpr(3.0), show_constant=False), "0")
        self.assertEqual(aff_str(plain, AffExpr()), "0")
        self.assertEqual(aff_str(plain, AffExpr(-2.5)), "-2.5")

    def test_signs(self):
        x, y = self.x, self.y
        self.assertEqual(aff_str(plain, AffExpr(-2, [x, y], [-1, 2.5])), "-x + 2.5 y - 2")
        self.assertEqual(aff_str(plain, AffExpr(4, [x, y], [-3, -1])), "-3 x - y + 4")
        self.assertEqual(
            aff_str(plain, AffExpr(4, [x, y], [-3, -1]), show_constant=False),
            "-3 x - y",
        )

    def test_merge_first_occurrence_order(self):
        x, y = self.x, self.y
        e = AffExpr(0, [y, x, y], [1, 2, 3])
        self.assertEqual(aff_str(plain, e), "4 y + 2 x")

    def test_skipped_first_term(self):
        x, y = self.x, self.y
        self.assertEqual(aff_str(plain, AffExpr(0, [x, y], [1e-12, -3])), "-3 y")

    def test_markup(self):
        x = Var('x[1]')
        e = AffExpr(1, [x, self.y], [1, 2])
        self.assertEqual(aff_str(markup, e), "x_{1} + 2 y + 1")
        self.assertEqual(aff_str(markup, e, show_constant=False), "x_{1} + 2 y")
        self.assertEqual(to_string(e, markup), "$$ x_{1} + 2 y + 1 $$")
        self.assertEqual(e._repr_latex_(), "$$ x_{1} + 2 y + 1 $$")

    def test_pure(self):
        x, y = self.x, self.y
        e = AffExpr(1.5, [x, y, x], [1, -2, 0.25])
        self.assertEqual(str(e), "1.25 x - 2 y + 1.5")
        self.assertEqual(str(e), to_string(e))
        self.assertEqual(e.linear_vars, (x, y, x))


class TestTolerance(unittest.TestCase):
    def setUp(self):
        self.x = Var('x')

    def test_tolerance_value(self):
        self.assertEqual(PRINT_ZERO_TOL, 1e-10)

    @parameterized.expand(
        [
            ('below', 9.9e-11, "0"),
            ('at', 1e-10, "1e-10 x"),
            ('above', 1.1e-10, "1.1e-10 x"),
            ('negative_below', -9.9e-11, "0"),
            ('negative_at', -1e-10, "-1e-10 x"),
        ]
    )
    def test_negligible_coefficient(self, name, coef, ans):
        self.assertEqual(aff_str(plain, AffExpr(0, [self.x], [coef])), ans)

    @parameterized.expand(
        [
            ('exact', 1.0, "x"),
            ('within', 1.00000000001, "x"),
            ('outside', 1.0000000002, "1.0000000002 x"),
            ('negative_within', -0.99999999999, "-x"),
            ('negative_outside', -0.9999999998, "-0.9999999998 x"),
        ]
    )
    def test_unit_coefficient(self, name, coef, ans):
        self.assertEqual(aff_str(plain, AffExpr(0, [self.x], [coef])), ans)

    @parameterized.expand(
        [
            ('below', 9.9e-11, "x"),
            ('at', 1e-10, "x + 1e-10"),
            ('negative_at', -1e-10, "x - 1e-10"),
        ]
    )
    def test_constant(self, name, const, ans):
        self.assertEqual(aff_str(plain, AffExpr(const, [self.x], [1])), ans)


class TestQuadStr(unittest.TestCase):
    def setUp(self):
        self.x = Var('x')
        self.y = Var('y')

    def test_merge_unordered_pairs(self):
        x, y = self.x, self.y
        e = QuadExpr([(x, y), (y, x)], [1.0, 2.0])
        self.assertEqual(quad_str(plain, e), "3 x×y")
        e = QuadExpr([(y, x), (x, y)], [1.0, 2.0])
        self.assertEqual(quad_str(plain, e), "3 y×x")

    def test_square(self):
        x = self.x
        self.assertEqual(quad_str(plain, QuadExpr([(x, x)], [-1])), "-x²")
        # Distinct variables with the same name are not squared
        self.assertEqual(quad_str(plain, QuadExpr([(x, Var('x'))], [1])), "x×x")

    def test_affine_part(self):
        x, y = self.x, self.y
        e = QuadExpr([(x, x)], [2], AffExpr(-3, [y], [-1]))
        self.assertEqual(quad_str(plain, e), "2 x² - y - 3")
        e = QuadExpr([(x, y)], [-1], AffExpr(3, [y], [1]))
        self.assertEqual(quad_str(plain, e), "-x×y + y + 3")
        e = QuadExpr([(x, x)], [1], AffExpr(0, [y, y], [1, -1]))
        self.assertEqual(quad_str(plain, e), "x²")

    def test_no_quadratic_terms(self):
        x, y = self.x, self.y
        self.assertEqual(quad_str(plain, QuadExpr()), "0")
        self.assertEqual(quad_str(plain, QuadExpr((), (), AffExpr(2))), "2")
        e = QuadExpr([(x, y), (y, x)], [1, -1], AffExpr(0, [y], [-1]))
        self.assertEqual(quad_str(plain, e), "-y")

    def test_ascii(self):
        x, y = self.x, self.y
        e = QuadExpr([(x, y), (x, x)], [2, 1])
        self.assertEqual(quad_str(plain, e, use_ascii_fallback=True), "2 x*y + x^2")

    def test_markup(self):
        x, y = self.x, self.y
        e = QuadExpr([(x, y), (x, x)], [2, 1], AffExpr(1))
        self.assertEqual(quad_str(markup, e), "2 x\\times y + x^2 + 1")
        self.assertEqual(to_string(e, markup), "$$ 2 x\\times y + x^2 + 1 $$")


class TestDomainStr(unittest.TestCase):
    @parameterized.expand(
        [
            ('bounded', dict(lb=0, ub=1), "0 ≤ x ≤ 1"),
            ('lower', dict(lb=0), "x ≥ 0"),
            ('upper', dict(ub=5.5), "x ≤ 5.5"),
            ('fixed', dict(lb=3, ub=3), "x = 3"),
            ('free', dict(), "x ∈ [-∞,∞]"),
            ('infinite', dict(lb=float('-inf'), ub=float('inf')), "x ∈ [-∞,∞]"),
            ('integer', dict(lb=0, domain=Integers), "x ≥ 0, x integer"),
            ('binary', dict(domain=Binary), "0 ≤ x ≤ 1, x integer"),
        ]
    )
    def test_plain(self, name, kwds, ans):
        self.assertEqual(var_domain_str(plain, Var('x', **kwds)), ans)

    def test_ascii(self):
        self.assertEqual(
            var_domain_str(plain, Var('x'), use_ascii_fallback=True), "x in [-Inf,Inf]"
        )
        self.assertEqual(
            var_domain_str(plain, Var('x', lb=0, ub=1), use_ascii_fallback=True),
            "0 <= x <= 1",
        )

    def test_markup(self):
        x = Var('x[1]', lb=0, domain=Integers)
        self.assertEqual(
            var_domain_str(markup, x), "x_{1} \\geq 0, x_{1} \\in \\mathbb{Z}"
        )
        self.assertEqual(
            var_domain_str(markup, Var('y')), "y \\in \\[-\\infty,\\infty\\]"
        )


class TestIndexSetStr(unittest.TestCase):
    @parameterized.expand(
        [
            ('long_run', range(1, 11), "{1,2,…,10}"),
            ('short_run', [1, 2, 3], "{1,2,3}"),
            ('two_runs', [1, 2, 3, 4, 5, 8, 9, 10, 11], "{1,2,…,5} ∪ {8,9,…,11}"),
            ('run_and_value', [1, 2, 3, 4, 5, 8], "{1,2,…,5} ∪ {8}"),
            ('unordered', [3, 1, 2], "{3,1,2}"),
            ('strings', ['a', 'b'], "{a,b}"),
            ('mixed', [1, 'a', 2.5], "{1,a,2.5}"),
            ('empty', [], "{}"),
        ]
    )
    def test_plain(self, name, values, ans):
        self.assertEqual(index_set_str(plain, values), ans)

    def test_markup(self):
        self.assertEqual(index_set_str(markup, range(1, 11)), "\\{1,2,\\dots,10\\}")

    def test_ascii(self):
        self.assertEqual(
            index_set_str(plain, [1, 2, 3, 4, 7, 8, 9, 10], use_ascii_fallback=True),
            "{1,2,..,4} or {7,8,..,10}",
        )

    def test_indexed(self):
        self.assertEqual(
            indexed_str(plain, 'x', [range(1, 11), ['a', 'b']], lb=0),
            "x[i,j] ≥ 0 ∀ i ∈ {1,2,…,10}, j ∈ {a,b}",
        )
        self.assertEqual(
            indexed_str(markup, 'x', [range(1, 11), ['a', 'b']], lb=0),
            "x_{i,j} \\geq 0 \\quad\\forall i \\in \\{1,2,\\dots,10\\}, "
            "j \\in \\{a,b\\}",
        )
        self.assertEqual(
            indexed_str(plain, 'z', [[1, 2]], integer=True),
            "z[i] ∈ [-∞,∞], z[i] integer ∀ i ∈ {1,2}",
        )

    def test_too_many_index_sets(self):
        with self.assertRaisesRegex(
            ValueError, r"Cannot print 'x': only 6 index sets are supported \(got 7\)"
        ):
            indexed_str(plain, 'x', [[1]] * 7)


class TestToString(unittest.TestCase):
    def test_numbers(self):
        self.assertEqual(to_string(5.0), "5")
        self.assertEqual(to_string(-0.0), "0")
        self.assertEqual(to_string(2.5, markup), "$$ 2.5 $$")

    def test_unsupported(self):
        with self.assertRaisesRegex(
            MouseTrap, "Printing objects of type 'object' is not supported"
        ):
            to_string(object())

    def test_invalid_options(self):
        with self.assertRaisesRegex(
            ValueError, "key 'colour' not defined for ConfigDict 'printer'"
        ):
            to_string(Var('x'), colour=True)
        with self.assertRaisesRegex(
            ValueError, "invalid value for configuration 'math_mode'"
        ):
            to_string(Var('x'), markup, math_mode='sometimes')

    def test_mode_by_name(self):
        self.assertEqual(to_string(Var('x[1]'), 'markup'), "$$ x_{1} $$")
        with self.assertRaises(ValueError):
            to_string(Var('x'), 'html')

    def test_config_not_modified(self):
        before = PRINT_CONFIG.value()
        to_string(Var('x'), markup, math_mode=True, use_ascii_fallback=True)
        self.assertEqual(PRINT_CONFIG.value(), before)


if __name__ == "__main__":
    unittest.main()
