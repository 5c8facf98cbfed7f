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

from pyalm.common.enums import ConstraintSense
from pyalm.core.expr import (
    RenderMode,
    PrintSymbol,
    PRINT_CONFIG,
    PRINT_ZERO_TOL,
    to_string,
    AffExpr,
    QuadExpr,
)
from pyalm.core.base import (
    Var,
    IndexedVar,
    VarDomain,
    Reals,
    Integers,
    Binary,
    ScalarConstraint,
    NonlinearConstraint,
    VectorOfVariablesConstraint,
    VectorAffExprConstraint,
    NormConstraint,
    PSDCone,
    PositiveSemidefiniteConeTriangle,
    PositiveSemidefiniteConeSquare,
    build_psd_constraint,
    NonlinearExpressionRef,
    NonlinearParameterRef,
    Model,
)
