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

__all__ = ['Var', 'IndexedVar', 'VarDomain', 'Reals', 'Integers', 'Binary']

import itertools
import logging

from pyalm.common.enums import NamedIntEnum
from pyalm.common.formatting import tostr
from pyalm.common.numeric_types import native_numeric_types, check_if_numeric_type
from pyalm.core.expr.numeric_expr import ExpressionArithmetic, PrintableMixin
from pyalm.core.expr.printer import indexed_str, var_domain_str, var_str

logger = logging.getLogger('pyalm.core')

_inf = float('inf')
_ninf = -_inf
_nonfinite_values = {_inf, _ninf}


class VarDomain(NamedIntEnum):
    """The set of values a variable may take"""

    Reals = 1
    Integers = 2
    Binary = 3


Reals = VarDomain.Reals
Integers = VarDomain.Integers
Binary = VarDomain.Binary


def _process_bound(val, name, bound):
    if val is None:
        return None
    if val.__class__ not in native_numeric_types and not check_if_numeric_type(val):
        raise ValueError(
            "Invalid %s bound for variable '%s': expected a number, found %s"
            % (bound, name, type(val).__name__)
        )
    val = float(val)
    if val != val:
        raise ValueError("Invalid %s bound for variable '%s': nan" % (bound, name))
    # Infinite bounds are equivalent to no bound
    if val in _nonfinite_values:
        if (bound == 'lower' and val == _inf) or (bound == 'upper' and val == _ninf):
            raise ValueError(
                "Invalid %s bound for variable '%s': %s" % (bound, name, val)
            )
        return None
    return val


class Var(ExpressionArithmetic, PrintableMixin):
    """A scalar decision variable

    Variables are compared (and hashed) by identity.  Combining them
    with numbers or other variables through the arithmetic operators
    builds :py:class:`~pyalm.core.expr.numeric_expr.AffExpr` and
    :py:class:`~pyalm.core.expr.numeric_expr.QuadExpr` objects.

    Parameters
    ----------
    name: str
        The display name (may be empty)

    lb, ub: float
        The bounds.  None (or an infinite value) means unbounded.
        Binary variables default to the bounds [0, 1].

    domain: VarDomain
        ``Reals``, ``Integers``, or ``Binary``

    """

    __slots__ = ('_name', '_lb', '_ub', '_domain', '_model')

    def __init__(self, name='', lb=None, ub=None, domain=Reals):
        if not isinstance(name, str):
            raise ValueError(
                "Variable names must be strings (found %s)" % (type(name).__name__,)
            )
        self._name = name
        self._model = None
        self._domain = VarDomain(domain)
        if self._domain is Binary:
            if lb is None:
                lb = 0
            if ub is None:
                ub = 1
        self._lb = _process_bound(lb, name, 'lower')
        self._ub = _process_bound(ub, name, 'upper')

    def is_variable_type(self):
        return True

    @property
    def name(self):
        if self._model is not None:
            return self._model.var_name(self)
        return self._name

    @property
    def model(self):
        """The model owning this variable (None if not added to one)"""
        return self._model

    @property
    def lb(self):
        return self._lb

    @lb.setter
    def lb(self, val):
        self._lb = _process_bound(val, self.name, 'lower')

    @property
    def ub(self):
        return self._ub

    @ub.setter
    def ub(self, val):
        self._ub = _process_bound(val, self.name, 'upper')

    @property
    def bounds(self):
        return self._lb, self._ub

    @property
    def domain(self):
        return self._domain

    def is_integer(self):
        return self._domain is not Reals

    def is_binary(self):
        return self._domain is Binary

    def is_fixed(self):
        return self._lb is not None and self._lb == self._ub

    def domain_str(self, mode=None, **options):
        """Return the bounds and integrality of this variable"""
        if mode is None:
            mode = 'plain'
        return var_domain_str(mode, self, **options)

    def __repr__(self):
        return "<Var %s>" % (var_str('plain', self),)

    def _to_string(self, mode, config):
        return var_str(mode, self, config=config)


class IndexedVar(PrintableMixin):
    """A family of variables indexed by the product of index sets

    ``IndexedVar('x', [1, 2], ['a', 'b'])`` creates ``x[1,a]``,
    ``x[1,b]``, ``x[2,a]`` and ``x[2,b]``.  Members are retrieved with
    ``x[1, 'a']`` (or ``x[1]`` for a single index set).
    """

    __slots__ = ('_name', '_index_sets', '_data', '_lb', '_ub', '_domain', '_model')

    def __init__(self, name, *index_sets, lb=None, ub=None, domain=Reals):
        if not index_sets:
            raise ValueError("IndexedVar '%s' requires at least one index set" % (name,))
        self._name = name
        self._model = None
        self._index_sets = tuple(tuple(s) for s in index_sets)
        self._domain = VarDomain(domain)
        self._data = {}
        for idx in itertools.product(*self._index_sets):
            key = idx[0] if len(idx) == 1 else idx
            self._data[key] = Var(
                "%s[%s]" % (name, ','.join(tostr(i) for i in idx)),
                lb=lb,
                ub=ub,
                domain=domain,
            )
        # The family bounds are those of the members
        v = next(iter(self._data.values()), None)
        self._lb = v.lb if v is not None else None
        self._ub = v.ub if v is not None else None

    @property
    def name(self):
        return self._name

    @property
    def index_sets(self):
        return self._index_sets

    def dim(self):
        return len(self._index_sets)

    def is_integer(self):
        return self._domain is not Reals

    def __getitem__(self, idx):
        return self._data[idx]

    def __contains__(self, idx):
        return idx in self._data

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def keys(self):
        return self._data.keys()

    def values(self):
        return self._data.values()

    def items(self):
        return self._data.items()

    def _to_string(self, mode, config):
        return indexed_str(
            mode,
            self._name,
            self._index_sets,
            lb=self._lb,
            ub=self._ub,
            integer=self.is_integer(),
            config=config,
        )
