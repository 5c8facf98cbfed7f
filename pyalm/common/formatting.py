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

"""String generation utilities

.. autosummary::

   tostr
   format_number

"""


def tostr(value, quote_str=False):
    """Convert a value to a string

    This function is primarily used to convert the elements of index
    sets (which may be tuples, lists or strings) into strings for
    display.  Container types are converted recursively so that
    embedded numbers pass through :py:func:`format_number` and
    embedded strings are (optionally) quoted.

    Parameters
    ----------
    value
        The value to convert to a string

    quote_str: bool
        If True, and if ``value`` is a ``str``, then return a "quoted
        string" (as generated by repr()).  This is primarily used when
        recursively processing native Python containers.

    """
    if isinstance(value, list):
        # Override the generation of str(list), but only if the object
        # is using the default implementation of list.__str__
        if value.__class__.__str__ is list.__str__:
            return "[%s]" % (', '.join(tostr(v, True) for v in value))
    elif isinstance(value, tuple):
        if value.__class__.__str__ is tuple.__str__:
            if len(value) == 1:
                return "(%s,)" % (tostr(value[0], True),)
            return "(%s)" % (', '.join(tostr(v, True) for v in value))
    elif isinstance(value, str):
        if quote_str:
            return repr(value)
        return value
    elif value.__class__ is float:
        return format_number(value)

    return str(value)


def format_number(val):
    """Convert a number to its shortest unambiguous decimal string

    This is a display formatter: the result is the shortest decimal
    string that round-trips to the same double (what :py:func:`repr`
    generates for floats), except that

      - zero is always ``"0"`` (the sign of ``-0.0`` is dropped), and
      - integral values drop the trailing ``".0"`` (``1.0`` -> ``"1"``).

    No other rounding is performed.

    Examples
    --------
    >>> format_number(5.3)
    '5.3'
    >>> format_number(1.0)
    '1'
    >>> format_number(-0.0)
    '0'

    """
    if val == 0:
        return "0"
    a = repr(float(val))
    if a.endswith('.0'):
        return a[:-2]
    return a
