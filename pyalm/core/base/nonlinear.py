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

__all__ = ['NonlinearExpressionRef', 'NonlinearParameterRef']

from pyalm.core.expr.numeric_expr import PrintableMixin
from pyalm.core.expr.printer import reference_str


class _NonlinearRef(PrintableMixin):
    __slots__ = ('_model', '_index')
    _kind = None

    def __init__(self, model, index):
        if index.__class__ is bool or index != int(index) or index < 1:
            raise ValueError(
                "Nonlinear %s indices are positive integers (found %s)"
                % (self._kind, index)
            )
        self._model = model
        self._index = int(index)

    @property
    def model(self):
        return self._model

    @property
    def index(self):
        return self._index

    def __eq__(self, other):
        return (
            other.__class__ is self.__class__
            and other._model is self._model
            and other._index == self._index
        )

    def __hash__(self):
        return hash((self.__class__, id(self._model), self._index))

    def __repr__(self):
        return str(self)

    def _to_string(self, mode, config):
        return reference_str(mode, self._kind, self._index)


class NonlinearExpressionRef(_NonlinearRef):
    """Handle to the ``index``-th nonlinear expression of a model"""

    __slots__ = ()
    _kind = 'expression'


class NonlinearParameterRef(_NonlinearRef):
    """Handle to the ``index``-th nonlinear parameter of a model

    The current value is available (and settable) through ``value``.
    """

    __slots__ = ()
    _kind = 'parameter'

    @property
    def value(self):
        return self._model._nl_params[self._index - 1]

    @value.setter
    def value(self, val):
        self._model._nl_params[self._index - 1] = float(val)
