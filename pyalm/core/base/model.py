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

__all__ = ['Model']

import logging
import sys

from pyalm.common.collections import ComponentMap
from pyalm.common.log import is_debug_set
from pyalm.core.base.nonlinear import NonlinearExpressionRef, NonlinearParameterRef
from pyalm.core.base.var import IndexedVar, Reals, Var
from pyalm.core.expr.numeric_expr import PrintableMixin
from pyalm.core.expr.printer import PRINT_CONFIG, var_domain_str
from pyalm.core.expr.symbols import RenderMode, math

logger = logging.getLogger('pyalm.core')


class Model(PrintableMixin):
    """A container of variables and constraints

    The model owns the display names of its variables: ``x.name`` looks
    the name up in the model that ``x`` was added to, and
    :py:meth:`set_name` renames it.
    """

    def __init__(self):
        self._vars = []
        self._indexed_vars = []
        self._var_names = ComponentMap()
        self._constraints = []
        self._con_names = ComponentMap()
        self._nl_exprs = []
        self._nl_params = []

    #
    # Variables
    #

    def _register_var(self, var):
        if var._model is not None:
            raise ValueError(
                "Variable '%s' has already been added to a model" % (var.name,)
            )
        self._var_names[var] = var._name
        var._model = self

    def add_var(self, name='', lb=None, ub=None, domain=Reals):
        """Create a variable in this model and return it"""
        var = Var(name, lb=lb, ub=ub, domain=domain)
        self._register_var(var)
        self._vars.append(var)
        if is_debug_set(logger):
            logger.debug("Added variable '%s'" % (name,))
        return var

    def add_indexed_var(self, name, *index_sets, lb=None, ub=None, domain=Reals):
        """Create a family of indexed variables and return it"""
        var = IndexedVar(name, *index_sets, lb=lb, ub=ub, domain=domain)
        for v in var.values():
            self._register_var(v)
        var._model = self
        self._indexed_vars.append(var)
        if is_debug_set(logger):
            logger.debug("Added %s variables '%s'" % (len(var), name))
        return var

    def var_name(self, var):
        """Return the display name of a variable of this model"""
        try:
            return self._var_names[var]
        except KeyError:
            raise ValueError(
                "Variable %r does not belong to this model" % (var._name,)
            ) from None

    def set_name(self, var, name):
        if var not in self._var_names:
            raise ValueError(
                "Variable %r does not belong to this model" % (var._name,)
            )
        if not isinstance(name, str):
            raise ValueError(
                "Variable names must be strings (found %s)" % (type(name).__name__,)
            )
        self._var_names[var] = name

    @property
    def variables(self):
        """All scalar variables (including members of indexed variables)"""
        return list(self._var_names)

    def num_variables(self):
        return len(self._var_names)

    #
    # Constraints
    #

    def add_constraint(self, con, name=''):
        """Add a constraint to this model and return it"""
        if not hasattr(con, '_to_string'):
            raise TypeError(
                "Expected a pyalm constraint (found %s)" % (type(con).__name__,)
            )
        if con in self._con_names:
            raise ValueError("The constraint has already been added to this model")
        self._constraints.append(con)
        self._con_names[con] = name
        return con

    def constraint_name(self, con):
        return self._con_names[con]

    @property
    def constraints(self):
        return list(self._constraints)

    def num_constraints(self):
        return len(self._constraints)

    #
    # Nonlinear expressions and parameters
    #

    def add_nonlinear_expression(self, expr):
        """Register a nonlinear expression and return a reference to it"""
        self._nl_exprs.append(expr)
        return NonlinearExpressionRef(self, len(self._nl_exprs))

    def add_nonlinear_parameter(self, value):
        """Register a nonlinear parameter and return a reference to it"""
        self._nl_params.append(float(value))
        return NonlinearParameterRef(self, len(self._nl_params))

    #
    # Printing
    #

    def _to_string(self, mode, config):
        return "A pyalm Model"

    def _listing(self, mode, config):
        lines = []
        for con in self._constraints:
            name = self._con_names[con]
            body = con._to_string(mode, config)
            lines.append("%s : %s" % (name, body) if name else body)
        # Members of indexed variables are listed once, as a family
        for var in self._indexed_vars:
            lines.append(var._to_string(mode, config))
        for var in self._vars:
            lines.append(var_domain_str(mode, var, config))
        return lines

    def pprint(self, ostream=None, mode=RenderMode.plain, **options):
        """Write the constraints and variable domains of this model

        In markup mode, the listing is an ``aligned`` environment
        (wrapped in ``$$ ... $$`` unless ``math_mode`` is True).
        """
        if ostream is None:
            ostream = sys.stdout
        config = PRINT_CONFIG(options)
        mode = RenderMode(mode)
        lines = self._listing(mode, config)
        if mode is RenderMode.markup:
            body = "\\begin{aligned}\n"
            body += "".join("& %s\\\\\n" % (line,) for line in lines)
            body += "\\end{aligned}"
            ostream.write(math(body, config.math_mode) + "\n")
            return
        ostream.write("Subject to\n")
        for line in lines:
            ostream.write(" %s\n" % (line,))
