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

import sys


class FlagType(type):
    """Metaclass to help generate "Flag Types".

    This is useful for defining "flag types" that are default arguments
    in functions.  These types are not constructable (attempts to
    construct the class return the class) and simplify the repr(type)
    and str(type).

    """

    def __new__(mcs, name, bases, dct):
        def __new_flag__(cls, *args, **kwargs):
            return cls

        dct["__new__"] = __new_flag__
        return type.__new__(mcs, name, bases, dct)

    def __repr__(cls):
        return cls.__module__ + "." + cls.__qualname__

    def __str__(cls):
        return cls.__name__


class NOTSET(object, metaclass=FlagType):
    """
    Class to be used to indicate that an optional argument
    was not specified, if `None` may be ambiguous. Usage:

    Examples
    --------
    >>> def foo(value=NOTSET):
    ...     if value is NOTSET:
    ...         pass  # no argument was provided to `value`

    """

    pass


def building_documentation(state=NOTSET):
    """True if we are building the Sphinx documentation

    Parameters
    ----------
    state : bool or None
        If provided, sets the current state of the building environment
        flag (Setting to None reverts to looking for Sphinx in
        ``sys.modules``)

    Returns
    -------
    bool

    """
    if state is not NOTSET:
        building_documentation.state = state
    if building_documentation.state is not None:
        return bool(building_documentation.state)
    return 'sphinx' in sys.modules


building_documentation.state = None
