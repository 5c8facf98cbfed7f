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

from parameterized import parameterized

import pyalm.common.unittest as unittest

from pyalm.common.formatting import tostr, format_number


class DerivedList(list):
    def __str__(self):
        return "DerivedList"


class TestFormatNumber(unittest.TestCase):
    @parameterized.expand(
        [
            (5.3, "5.3"),
            (1.0, "1"),
            (-1.0, "-1"),
            (0.0, "0"),
            (-0.0, "0"),
            (3, "3"),
            (2.5e-7, "2.5e-07"),
            (1e20, "1e+20"),
            (0.1 + 0.2, "0.30000000000000004"),
            (-12.25, "-12.25"),
            (float('inf'), "inf"),
        ]
    )
    def test_format_number(self, val, ans):
        self.assertEqual(format_number(val), ans)


class TestToStr(unittest.TestCase):
    def test_scalars(self):
        self.assertEqual(tostr(1), '1')
        self.assertEqual(tostr(2.0), '2')
        self.assertEqual(tostr(0.5), '0.5')
        self.assertEqual(tostr('a'), 'a')
        self.assertEqual(tostr('a', quote_str=True), "'a'")
        self.assertEqual(tostr(None), 'None')

    def test_containers(self):
        self.assertEqual(tostr([1, 'a', 2.0]), "[1, 'a', 2]")
        self.assertEqual(tostr((1, 'a')), "(1, 'a')")
        self.assertEqual(tostr((1.5,)), "(1.5,)")
        self.assertEqual(tostr([(1, 2.0), 'b']), "[(1, 2), 'b']")

    def test_derived_container(self):
        self.assertEqual(tostr(DerivedList([1, 2])), "DerivedList")


if __name__ == "__main__":
    unittest.main()
