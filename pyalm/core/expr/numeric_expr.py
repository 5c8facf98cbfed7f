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

"""Affine and quadratic expressions

Expressions are immutable term lists.  Arithmetic never merges or
reorders terms: ``x + 2*y - x`` is stored as three terms, exactly as
written.  Duplicates are merged only when the expression is printed
(see :py:mod:`pyalm.repn.canonical`).
"""

import logging

from pyalm.common.numeric_types import native_numeric_types, check_if_numeric_type
from pyalm.core.expr.printer import aff_str, quad_str, to_string
from pyalm.core.expr.symbols import RenderMode

logger = logging.getLogger('pyalm.core')


def _is_numeric(obj):
    return obj.__class__ in native_numeric_types or (
        not hasattr(obj, 'is_variable_type') and check_if_numeric_type(obj)
    )


def as_expression(obj):
    """Convert a number, variable, or expression to an expression

    Returns None if ``obj`` cannot be interpreted as an affine or
    quadratic expression.
    """
    if isinstance(obj, (AffExpr, QuadExpr)):
        return obj
    if hasattr(obj, 'is_variable_type'):
        if obj.is_variable_type():
            return AffExpr(0.0, (obj,), (1.0,))
        return None
    if _is_numeric(obj):
        return AffExpr(float(obj))
    return None


def _add(a, b):
    if a.__class__ is QuadExpr or b.__class__ is QuadExpr:
        a, b = _as_quad(a), _as_quad(b)
        return QuadExpr(
            a.quadratic_vars + b.quadratic_vars,
            a.quadratic_coefs + b.quadratic_coefs,
            _add(a.aff, b.aff),
        )
    return AffExpr(
        a.constant + b.constant,
        a.linear_vars + b.linear_vars,
        a.linear_coefs + b.linear_coefs,
    )


def _scale(a, c):
    if a.__class__ is QuadExpr:
        return QuadExpr(
            a.quadratic_vars, tuple(c * q for q in a.quadratic_coefs), _scale(a.aff, c)
        )
    return AffExpr(c * a.constant, a.linear_vars, tuple(c * q for q in a.linear_coefs))


def _mul(a, b):
    # Products with constants are scalings
    if a.is_constant():
        return _scale(b, a.constant)
    if b.is_constant():
        return _scale(a, b.constant)
    if a.__class__ is QuadExpr or b.__class__ is QuadExpr:
        raise TypeError(
            "Cannot multiply a quadratic expression by a non-constant "
            "expression: the result would not be quadratic (%s) * (%s)" % (a, b)
        )
    qvars = []
    qcoefs = []
    for v, c in zip(a.linear_vars, a.linear_coefs):
        for w, d in zip(b.linear_vars, b.linear_coefs):
            qvars.append((v, w))
            qcoefs.append(c * d)
    aff = AffExpr(a.constant * b.constant)
    if b.constant:
        aff = _add(aff, _scale(AffExpr(0.0, a.linear_vars, a.linear_coefs), b.constant))
    if a.constant:
        aff = _add(aff, _scale(AffExpr(0.0, b.linear_vars, b.linear_coefs), a.constant))
    return QuadExpr(qvars, qcoefs, aff)


def _as_quad(e):
    if e.__class__ is QuadExpr:
        return e
    return QuadExpr((), (), e)


class ExpressionArithmetic(object):
    """Mixin implementing the arithmetic operators for pyalm expressions

    Classes using this mixin (variables and expressions) combine into
    :py:class:`AffExpr` and :py:class:`QuadExpr` objects.  Relational
    operators are intentionally not overloaded: modeling components are
    compared by identity.
    """

    __slots__ = ()

    def __add__(self, other):
        other = as_expression(other)
        if other is None:
            return NotImplemented
        return _add(as_expression(self), other)

    def __radd__(self, other):
        other = as_expression(other)
        if other is None:
            return NotImplemented
        return _add(other, as_expression(self))

    def __sub__(self, other):
        other = as_expression(other)
        if other is None:
            return NotImplemented
        return _add(as_expression(self), _scale(other, -1.0))

    def __rsub__(self, other):
        other = as_expression(other)
        if other is None:
            return NotImplemented
        return _add(other, _scale(as_expression(self), -1.0))

    def __mul__(self, other):
        other = as_expression(other)
        if other is None:
            return NotImplemented
        return _mul(as_expression(self), other)

    def __rmul__(self, other):
        other = as_expression(other)
        if other is None:
            return NotImplemented
        return _mul(other, as_expression(self))

    def __truediv__(self, other):
        if not _is_numeric(other):
            return NotImplemented
        return _scale(as_expression(self), 1.0 / other)

    def __neg__(self):
        return _scale(as_expression(self), -1.0)

    def __pos__(self):
        return as_expression(self)

    def __pow__(self, exponent):
        if exponent.__class__ not in native_numeric_types or exponent not in (0, 1, 2):
            raise TypeError(
                "Only the exponents 0, 1, and 2 are supported for "
                "affine and quadratic expressions (got %s)" % (exponent,)
            )
        e = as_expression(self)
        if exponent == 0:
            return AffExpr(1.0)
        if exponent == 1:
            return e
        return _mul(e, e)


class PrintableMixin(object):
    """Mixin routing ``str()`` and notebook rendering through the printer

    Subclasses implement ``_to_string(mode, config)``.
    """

    __slots__ = ()

    def to_string(self, mode=RenderMode.plain, **options):
        return to_string(self, mode, **options)

    def __str__(self):
        return self.to_string()

    def _repr_latex_(self):
        return self.to_string(RenderMode.markup)


class AffExpr(ExpressionArithmetic, PrintableMixin):
    """An affine expression: ``constant + sum(coef * var)``

    Parameters
    ----------
    constant: float
        The constant term

    linear_vars: Sequence
        The variables of each term (duplicates are allowed)

    linear_coefs: Sequence
        The coefficient of each term

    """

    __slots__ = ('constant', 'linear_vars', 'linear_coefs')

    def __init__(self, constant=0.0, linear_vars=(), linear_coefs=()):
        self.constant = float(constant)
        self.linear_vars = tuple(linear_vars)
        self.linear_coefs = tuple(float(c) for c in linear_coefs)
        if len(self.linear_vars) != len(self.linear_coefs):
            raise ValueError(
                "AffExpr: the number of variables (%s) does not match the "
                "number of coefficients (%s)"
                % (len(self.linear_vars), len(self.linear_coefs))
            )

    def is_constant(self):
        return not self.linear_vars

    def polynomial_degree(self):
        return 1 if self.linear_vars else 0

    def __repr__(self):
        return "<AffExpr %s>" % (self,)

    def _to_string(self, mode, config):
        return aff_str(mode, self, config=config)


class QuadExpr(ExpressionArithmetic, PrintableMixin):
    """A quadratic expression: ``sum(coef * v1 * v2) + aff``

    Parameters
    ----------
    quadratic_vars: Sequence
        ``(v1, v2)`` pairs for each quadratic term.  ``(x, y)`` and
        ``(y, x)`` are the same term; the order is kept for display.

    quadratic_coefs: Sequence
        The coefficient of each quadratic term

    aff: AffExpr
        The affine ("linear") part of the expression

    """

    __slots__ = ('quadratic_vars', 'quadratic_coefs', 'aff')

    def __init__(self, quadratic_vars=(), quadratic_coefs=(), aff=None):
        self.quadratic_vars = tuple(tuple(p) for p in quadratic_vars)
        self.quadratic_coefs = tuple(float(c) for c in quadratic_coefs)
        if len(self.quadratic_vars) != len(self.quadratic_coefs):
            raise ValueError(
                "QuadExpr: the number of variable pairs (%s) does not match "
                "the number of coefficients (%s)"
                % (len(self.quadratic_vars), len(self.quadratic_coefs))
            )
        for p in self.quadratic_vars:
            if len(p) != 2:
                raise ValueError("QuadExpr: quadratic terms must be pairs (got %s)" % (p,))
        if aff is None:
            aff = AffExpr()
        self.aff = aff

    @property
    def constant(self):
        return self.aff.constant

    def is_constant(self):
        return not self.quadratic_vars and self.aff.is_constant()

    def polynomial_degree(self):
        if self.quadratic_vars:
            return 2
        return self.aff.polynomial_degree()

    def __repr__(self):
        return "<QuadExpr %s>" % (self,)

    def _to_string(self, mode, config):
        return quad_str(mode, self, config=config)
