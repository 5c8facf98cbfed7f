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

from pyalm.core.base.var import Var, IndexedVar, VarDomain, Reals, Integers, Binary
from pyalm.core.base.constraint import (
    ScalarConstraint,
    NonlinearConstraint,
    VectorOfVariablesConstraint,
    VectorAffExprConstraint,
    NormConstraint,
)
from pyalm.core.base.psd import (
    PSDCone,
    PositiveSemidefiniteConeTriangle,
    PositiveSemidefiniteConeSquare,
    build_psd_constraint,
)
from pyalm.core.base.nonlinear import NonlinearExpressionRef, NonlinearParameterRef
from pyalm.core.base.model import Model
