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

__all__ = [
    'ScalarConstraint',
    'NonlinearConstraint',
    'VectorOfVariablesConstraint',
    'VectorAffExprConstraint',
    'NormConstraint',
]

import logging

from pyalm.common.enums import ConstraintSense
from pyalm.common.errors import MouseTrap
from pyalm.common.numeric_types import native_numeric_types, check_if_numeric_type
from pyalm.core.expr.numeric_expr import AffExpr, QuadExpr, PrintableMixin, as_expression
from pyalm.core.expr.printer import con_str, norm_str

logger = logging.getLogger('pyalm.core')

_inf = float('inf')
_ninf = -_inf


def _process_bound(val, bound):
    if val is None:
        return None
    if val.__class__ not in native_numeric_types and not check_if_numeric_type(val):
        raise ValueError(
            "Constraint %s bound must be a number or None (found %s)"
            % (bound, type(val).__name__)
        )
    val = float(val)
    if val != val:
        raise ValueError("Constraint %s bound is nan" % (bound,))
    if (bound == 'lower' and val == _ninf) or (bound == 'upper' and val == _inf):
        return None
    return val


def _infer_sense(lb, ub):
    if lb is not None and ub is not None:
        if lb == ub:
            return ConstraintSense.eq
        return ConstraintSense.range
    if ub is not None:
        return ConstraintSense.leq
    if lb is not None:
        return ConstraintSense.geq
    raise ValueError("Constraint has no finite lower or upper bound")


class _BoundedConstraintMixin(object):
    """Bounds, sense, and right-hand side shared by scalar constraints"""

    __slots__ = ()

    @property
    def lb(self):
        return self._lb

    @property
    def ub(self):
        return self._ub

    @property
    def sense(self):
        return self._sense

    @property
    def rhs(self):
        if self._sense is ConstraintSense.range:
            raise ValueError(
                "Range constraints do not have a (single) right-hand side"
            )
        if self._sense is ConstraintSense.leq:
            return self._ub
        return self._lb

    def _set_bounds(self, lb, ub, sense):
        self._lb = _process_bound(lb, 'lower')
        self._ub = _process_bound(ub, 'upper')
        if sense is None:
            self._sense = _infer_sense(self._lb, self._ub)
            return
        self._sense = ConstraintSense(sense)
        if self._sense is ConstraintSense.range:
            if self._lb is None or self._ub is None:
                raise ValueError("Range constraints require both a lower and upper bound")
        elif self._sense is ConstraintSense.leq:
            if self._ub is None:
                raise ValueError("'leq' constraints require an upper bound")
        elif self._lb is None:
            raise ValueError("'%s' constraints require a lower bound" % (self._sense,))
        elif self._sense is ConstraintSense.eq:
            self._ub = self._lb


def _strip_constant(expr):
    if expr.__class__ is QuadExpr:
        aff = expr.aff
        return QuadExpr(
            expr.quadratic_vars,
            expr.quadratic_coefs,
            AffExpr(0.0, aff.linear_vars, aff.linear_coefs),
        )
    return AffExpr(0.0, expr.linear_vars, expr.linear_coefs)


class ScalarConstraint(_BoundedConstraintMixin, PrintableMixin):
    """A constraint ``lb <= body <= ub`` on an affine or quadratic body

    The sense is inferred from the bounds (both equal: ``eq``; only
    ``ub``: ``leq``; only ``lb``: ``geq``; both: ``range``) unless it is
    given explicitly.  When printed, the constant of the body is moved
    into the bounds: ``x + 1 <= 3`` prints as ``x ≤ 2``.

    Parameters
    ----------
    body: Var, AffExpr, or QuadExpr

    lb, ub: float
        The bounds (None for unbounded)

    sense: ConstraintSense, optional

    """

    __slots__ = ('_body', '_lb', '_ub', '_sense')

    def __init__(self, body, lb=None, ub=None, sense=None):
        expr = as_expression(body)
        if expr is None:
            raise TypeError(
                "Constraint body must be a variable or an affine or quadratic "
                "expression (found %s)" % (type(body).__name__,)
            )
        self._body = expr
        self._set_bounds(lb, ub, sense)

    @classmethod
    def leq(cls, body, rhs):
        return cls(body, None, rhs, ConstraintSense.leq)

    @classmethod
    def geq(cls, body, rhs):
        return cls(body, rhs, None, ConstraintSense.geq)

    @classmethod
    def eq(cls, body, rhs):
        return cls(body, rhs, rhs, ConstraintSense.eq)

    @classmethod
    def range(cls, body, lb, ub):
        return cls(body, lb, ub, ConstraintSense.range)

    @property
    def body(self):
        return self._body

    def _to_string(self, mode, config):
        c = self._body.constant
        lb = None if self._lb is None else self._lb - c
        ub = None if self._ub is None else self._ub - c
        body = _strip_constant(self._body)._to_string(mode, config)
        return con_str(mode, body, self._sense, lb, ub, config=config)


class NonlinearConstraint(_BoundedConstraintMixin, PrintableMixin):
    """A constraint ``lb <= f(x) <= ub`` on a nonlinear function

    Parameters
    ----------
    expr: str or Callable
        The printed form of the nonlinear function.  A callable is
        passed the :py:class:`~pyalm.core.expr.symbols.RenderMode` and
        returns the string for that mode.

    lb, ub: float
        The bounds (None for unbounded)

    """

    __slots__ = ('_expr', '_lb', '_ub', '_sense')

    def __init__(self, expr, lb=None, ub=None, sense=None):
        if not isinstance(expr, str) and not callable(expr):
            raise TypeError(
                "Nonlinear constraint expressions must be strings or "
                "callables (found %s)" % (type(expr).__name__,)
            )
        self._expr = expr
        self._set_bounds(lb, ub, sense)

    def expr_str(self, mode):
        if isinstance(self._expr, str):
            return self._expr
        return self._expr(mode)

    def _to_string(self, mode, config):
        return con_str(
            mode, self.expr_str(mode), self._sense, self._lb, self._ub, config=config
        )


class _VectorConstraint(PrintableMixin):
    __slots__ = ('_func', '_set')

    @property
    def func(self):
        return self._func

    @property
    def set(self):
        return self._set

    def __len__(self):
        return len(self._func)

    def _to_string(self, mode, config):
        try:
            fcn = self._set._constraint_str
        except AttributeError:
            raise MouseTrap(
                "Printing constraints in sets of type '%s' is not supported"
                % (type(self._set).__name__,)
            ) from None
        return fcn(mode, self._func, config)


class VectorOfVariablesConstraint(_VectorConstraint):
    """The constraint that a vector of variables lies in a set"""

    __slots__ = ()

    def __init__(self, variables, set):
        self._func = tuple(variables)
        for v in self._func:
            if not (hasattr(v, 'is_variable_type') and v.is_variable_type()):
                raise TypeError(
                    "VectorOfVariablesConstraint requires variables (found %s)"
                    % (type(v).__name__,)
                )
        self._set = set
        if len(self._func) != set.dimension:
            raise ValueError(
                "Dimension of the function (%s) does not match the dimension "
                "of the set (%s)" % (len(self._func), set.dimension)
            )


class VectorAffExprConstraint(_VectorConstraint):
    """The constraint that a vector of affine expressions lies in a set"""

    __slots__ = ()

    def __init__(self, exprs, set):
        func = []
        for e in exprs:
            expr = as_expression(e)
            if expr is None or expr.__class__ is not AffExpr:
                raise TypeError(
                    "VectorAffExprConstraint requires affine expressions "
                    "(found %s)" % (type(e).__name__,)
                )
            func.append(expr)
        self._func = tuple(func)
        self._set = set
        if len(self._func) != set.dimension:
            raise ValueError(
                "Dimension of the function (%s) does not match the dimension "
                "of the set (%s)" % (len(self._func), set.dimension)
            )


class NormConstraint(PrintableMixin):
    """The second-order cone constraint ``‖[e1, ..., en]‖₂ ≤ t``"""

    __slots__ = ('_bound', '_exprs')

    def __init__(self, t, exprs):
        bound = as_expression(t)
        if bound is None or bound.polynomial_degree() > 1:
            raise TypeError(
                "The norm bound must be a number, variable, or affine "
                "expression (found %s)" % (type(t).__name__,)
            )
        # Keep variables as variables so they print as themselves
        self._bound = t if t.__class__ not in native_numeric_types else float(t)
        self._exprs = []
        for e in exprs:
            expr = as_expression(e)
            if expr is None or expr.polynomial_degree() > 1:
                raise TypeError(
                    "Norm arguments must be numbers, variables, or affine "
                    "expressions (found %s)" % (type(e).__name__,)
                )
            self._exprs.append(e if e.__class__ not in native_numeric_types else float(e))
        self._exprs = tuple(self._exprs)
        if not self._exprs:
            raise ValueError("NormConstraint requires at least one expression")

    @property
    def bound(self):
        return self._bound

    @property
    def exprs(self):
        return self._exprs

    def _to_string(self, mode, config):
        return norm_str(mode, self._exprs, self._bound, config=config)
