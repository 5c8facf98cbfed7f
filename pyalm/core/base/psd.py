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

"""Positive semidefinite matrix constraints

``build_psd_constraint(Q, PSDCone())`` constrains the square matrix
``Q`` (a sequence of rows) to be positive semidefinite:

  - a symmetric matrix of variables (``Q[i][j] is Q[j][i]``) is
    constrained through its upper triangle, listed column by column,
    in :py:class:`PositiveSemidefiniteConeTriangle`;
  - any other matrix of variables is listed column by column (all
    entries) in :py:class:`PositiveSemidefiniteConeSquare`;
  - a matrix of expressions must be symmetric, and is constrained
    through its upper triangle.

"""

__all__ = [
    'PSDCone',
    'PositiveSemidefiniteConeTriangle',
    'PositiveSemidefiniteConeSquare',
    'build_psd_constraint',
]

from pyalm.common.numeric_types import native_numeric_types
from pyalm.core.base.constraint import VectorAffExprConstraint, VectorOfVariablesConstraint
from pyalm.core.expr.numeric_expr import as_expression
from pyalm.core.expr.printer import psd_str
from pyalm.repn.canonical import canonicalize_linear


class PSDCone(object):
    """Marker requesting a positive semidefinite constraint"""

    __slots__ = ()

    def __repr__(self):
        return "PSDCone()"


class _PSDConeBase(object):
    __slots__ = ('side_dimension',)

    def __init__(self, side_dimension):
        if side_dimension.__class__ is bool or side_dimension != int(side_dimension):
            raise ValueError(
                "The side dimension of a PSD cone must be an integer (found %s)"
                % (side_dimension,)
            )
        self.side_dimension = int(side_dimension)

    def __eq__(self, other):
        return (
            other.__class__ is self.__class__
            and other.side_dimension == self.side_dimension
        )

    def __hash__(self):
        return hash((self.__class__, self.side_dimension))

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, self.side_dimension)

    def _constraint_str(self, mode, func, config):
        return psd_str(mode, self.matrix(func), config=config)


class PositiveSemidefiniteConeTriangle(_PSDConeBase):
    """Symmetric PSD matrices, stored as the column-wise upper triangle"""

    __slots__ = ()

    @property
    def dimension(self):
        n = self.side_dimension
        return n * (n + 1) // 2

    def matrix(self, func):
        """Return the (full, symmetric) rows described by ``func``"""
        n = self.side_dimension
        rows = [[None] * n for _ in range(n)]
        k = 0
        for j in range(n):
            for i in range(j + 1):
                rows[i][j] = rows[j][i] = func[k]
                k += 1
        return rows


class PositiveSemidefiniteConeSquare(_PSDConeBase):
    """PSD matrices, stored as all entries in column-major order"""

    __slots__ = ()

    @property
    def dimension(self):
        return self.side_dimension**2

    def matrix(self, func):
        """Return the rows described by ``func``"""
        n = self.side_dimension
        return [[func[j * n + i] for j in range(n)] for i in range(n)]


def _check_square(Q):
    rows = [list(row) for row in Q]
    n = len(rows)
    for i, row in enumerate(rows):
        if len(row) != n:
            raise ValueError(
                "PSD constraints require a square matrix: the matrix has %s "
                "rows, but row %s has %s entries" % (n, i, len(row))
            )
    return rows


def _is_variable(obj):
    return hasattr(obj, 'is_variable_type') and obj.is_variable_type()


def _linear_map(expr):
    repn = canonicalize_linear(expr)
    return repn.constant, {id(v): c for v, c in repn.terms()}


def _same_entry(a, b):
    if a is b:
        return True
    if a.__class__ in native_numeric_types and b.__class__ in native_numeric_types:
        return a == b
    a, b = as_expression(a), as_expression(b)
    if a is None or b is None:
        return False
    if a.polynomial_degree() > 1 or b.polynomial_degree() > 1:
        return False
    return _linear_map(a) == _linear_map(b)


def build_psd_constraint(Q, cone):
    """Return the vector constraint that ``Q`` is positive semidefinite

    Parameters
    ----------
    Q: Sequence
        The matrix, as a sequence of rows of variables or (affine)
        expressions

    cone: PSDCone

    """
    if not isinstance(cone, PSDCone):
        raise TypeError("Expected a PSDCone (found %s)" % (type(cone).__name__,))
    rows = _check_square(Q)
    n = len(rows)
    triangle = [rows[i][j] for j in range(n) for i in range(j + 1)]
    if all(_is_variable(e) for row in rows for e in row):
        if all(rows[i][j] is rows[j][i] for j in range(n) for i in range(j)):
            return VectorOfVariablesConstraint(
                triangle, PositiveSemidefiniteConeTriangle(n)
            )
        return VectorOfVariablesConstraint(
            [rows[i][j] for j in range(n) for i in range(n)],
            PositiveSemidefiniteConeSquare(n),
        )
    for j in range(n):
        for i in range(j):
            if not _same_entry(rows[i][j], rows[j][i]):
                raise ValueError(
                    "PSD constraints on matrices of expressions require a "
                    "symmetric matrix: entries (%s, %s) and (%s, %s) differ"
                    % (i, j, j, i)
                )
    return VectorAffExprConstraint(triangle, PositiveSemidefiniteConeTriangle(n))
