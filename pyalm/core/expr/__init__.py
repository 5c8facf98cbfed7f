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

from pyalm.core.expr.symbols import RenderMode, PrintSymbol, symbol_table, lookup, math
from pyalm.core.expr.printer import (
    PRINT_CONFIG,
    PRINT_ZERO_TOL,
    to_string,
    var_str,
    aff_str,
    quad_str,
    con_str,
)
from pyalm.core.expr.numeric_expr import AffExpr, QuadExpr, as_expression
