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

"""Human-readable string representations of pyalm modeling components

All "pretty printers" live here.  Every string builder takes the
:py:class:`RenderMode` as its first argument and pulls the literal
operators from the matching symbol table, so the same code generates
console text and notebook (LaTeX) markup.  Only :py:func:`to_string`
wraps markup in ``$$ ... $$``; the builders produce raw math content so
that they can be nested.

Simplicity trumps speed here: this code is thorny enough as it is.

Options accepted by every builder (see :py:data:`PRINT_CONFIG`):

  - ``use_ascii_fallback``: plain mode uses ASCII replacements for the
    unicode glyphs (defaults to True on Windows)
  - ``math_mode``: the caller already provides math-mode wrapping
  - ``labeler``: callable returning the display name of a variable

"""

import logging
import sys

from pyalm.common.config import ConfigDict, ConfigValue, Bool
from pyalm.common.enums import ConstraintSense
from pyalm.common.errors import DeveloperError, MouseTrap
from pyalm.common.formatting import format_number, tostr
from pyalm.common.log import is_debug_set
from pyalm.common.numeric_types import native_integer_types, native_numeric_types
from pyalm.core.expr.symbols import PrintSymbol, RenderMode, math, symbol_table
from pyalm.repn.canonical import canonicalize_linear, canonicalize_quadratic

logger = logging.getLogger('pyalm.core')

#: Coefficients (and constants) whose magnitude is below this tolerance
#: are treated as zero for printing purposes (only: this is never used
#: when building or solving models).  Coefficients within this tolerance
#: of +/-1 are printed without a magnitude.
PRINT_ZERO_TOL = 1e-10

#: Placeholder displayed for variables without a name
NONAME = "noname"

#: Names of the dummy indices used when printing indexed components
DIMS = ("i", "j", "k", "l", "m", "n")

PRINT_CONFIG = ConfigDict('printer')
PRINT_CONFIG.declare(
    'use_ascii_fallback',
    ConfigValue(
        default=sys.platform.startswith('win'),
        domain=Bool,
        description='Use ASCII replacements for unicode glyphs in plain mode',
        doc="""
        Consoles that cannot display characters outside of the
        Windows-1252 code page should print "<=" instead of "≤", etc.
        This option has no effect on markup output.""",
    ),
)
PRINT_CONFIG.declare(
    'math_mode',
    ConfigValue(
        default=False,
        domain=Bool,
        description='The output is already embedded in a math environment',
        doc="""
        If False (the default), markup output from to_string() is wrapped
        in "$$ ... $$" display-math delimiters.""",
    ),
)
PRINT_CONFIG.declare(
    'labeler',
    ConfigValue(
        default=None,
        description='Callable returning the display name of a variable',
        doc="""
        If not specified, the name registered with the variable's model
        is used.  Empty names are printed as "noname".""",
    ),
)


def _get_config(config, options):
    if config is None:
        return PRINT_CONFIG(options)
    if options:
        return config(options)
    return config


def _symbols(mode, config):
    return symbol_table(mode, config.use_ascii_fallback)


def is_negligible(coef, tol=PRINT_ZERO_TOL):
    """True if ``coef`` should not be printed"""
    return abs(coef) < tol


def is_unit(coef, tol=PRINT_ZERO_TOL):
    """True if ``coef`` should be printed without a magnitude"""
    return abs(abs(coef) - 1) < tol


#------------------------------------------------------------------------
# Variables
#------------------------------------------------------------------------


def _subscript_index(name, sym):
    # Only the first "[" and the last "]" are replaced.  This is wrong
    # for names containing more than one pair of brackets (e.g.,
    # "x[1][2]" becomes "x_{1][2}"), which is a known limitation.
    first = name.find('[')
    last = name.rfind(']')
    if first < 0 and last < 0:
        return name
    if (name.count('[') > 1 or name.count(']') > 1) and is_debug_set(logger):
        logger.debug(
            "Variable name '%s' contains multiple index brackets; "
            "the markup subscript will not be correct" % (name,)
        )
    chars = list(name)
    if last >= 0:
        chars[last] = sym[PrintSymbol.ind_close]
    if first >= 0:
        chars[first] = sym[PrintSymbol.ind_open]
    return ''.join(chars)


def var_str(mode, var, config=None, **options):
    """Return the display name of a variable

    Variables with an empty name are displayed as ``noname``.  In markup
    mode, an index in brackets is converted into a subscript
    (``x[1]`` -> ``x_{1}``).
    """
    config = _get_config(config, options)
    if config.labeler is not None:
        name = config.labeler(var)
    else:
        name = var.name
    if not name:
        return NONAME
    if RenderMode(mode) is RenderMode.markup:
        return _subscript_index(name, _symbols(mode, config))
    return name


def _bounds_str(sym, x, lb, ub):
    if lb is not None and ub is not None:
        if lb == ub:
            return f"{x} {sym[PrintSymbol.eq]} {format_number(lb)}"
        return (
            f"{format_number(lb)} {sym[PrintSymbol.leq]} {x} "
            f"{sym[PrintSymbol.leq]} {format_number(ub)}"
        )
    if lb is not None:
        return f"{x} {sym[PrintSymbol.geq]} {format_number(lb)}"
    if ub is not None:
        return f"{x} {sym[PrintSymbol.leq]} {format_number(ub)}"
    return (
        f"{x} {sym[PrintSymbol.in_]} {sym[PrintSymbol.open_rng]}"
        f"-{sym[PrintSymbol.infty]},{sym[PrintSymbol.infty]}"
        f"{sym[PrintSymbol.close_rng]}"
    )


def _domain_str(sym, x, lb, ub, integer):
    ans = _bounds_str(sym, x, lb, ub)
    if integer:
        ans += f", {x} {sym[PrintSymbol.integer]}"
    return ans


def var_domain_str(mode, var, config=None, **options):
    """Return the bounds and integrality of a variable

    Examples (plain mode): ``0 ≤ x ≤ 1``, ``x ≥ 0, x integer``,
    ``x = 3`` (fixed), ``x ∈ [-∞,∞]`` (free).
    """
    config = _get_config(config, options)
    return _domain_str(
        _symbols(mode, config),
        var_str(mode, var, config),
        var.lb,
        var.ub,
        var.is_integer(),
    )


#------------------------------------------------------------------------
# Index sets
#------------------------------------------------------------------------


def _integer_runs(values):
    # Split a sequence of integers into maximal runs of consecutive values
    runs = []
    for v in values:
        if runs and v == runs[-1][-1] + 1:
            runs[-1].append(v)
        else:
            runs.append([v])
    return runs


def index_set_str(mode, values, config=None, **options):
    """Return a set of index values in set notation

    Runs of more than three consecutive integers are abbreviated
    (``{1,2,…,10}``); several abbreviated runs are joined with the
    union symbol.  Other values are listed in order.
    """
    config = _get_config(config, options)
    sym = _symbols(mode, config)
    values = list(values)
    _open, _close = sym[PrintSymbol.open_set], sym[PrintSymbol.close_set]

    if values and all(
        v.__class__ in native_integer_types and v.__class__ is not bool
        for v in values
    ):
        runs = _integer_runs(values)
        if any(len(r) > 3 for r in runs):
            parts = []
            for r in runs:
                if len(r) > 3:
                    body = f"{r[0]},{r[1]},{sym[PrintSymbol.dots]},{r[-1]}"
                else:
                    body = ','.join(map(str, r))
                parts.append(_open + body + _close)
            return f" {sym[PrintSymbol.union]} ".join(parts)

    return _open + ','.join(tostr(v) for v in values) + _close


def indexed_str(mode, name, index_sets, lb=None, ub=None, integer=False, config=None, **options):
    """Return the declaration of a family of indexed variables

    For example, ``x[i,j] ≥ 0 ∀ i ∈ {1,2,…,10}, j ∈ {a,b}``.
    """
    config = _get_config(config, options)
    sym = _symbols(mode, config)
    index_sets = list(index_sets)
    if len(index_sets) > len(DIMS):
        raise ValueError(
            "Cannot print '%s': only %s index sets are supported (got %s)"
            % (name, len(DIMS), len(index_sets))
        )
    if not name:
        name = NONAME
    dims = DIMS[: len(index_sets)]
    x = name + sym[PrintSymbol.ind_open] + ','.join(dims) + sym[PrintSymbol.ind_close]
    ans = _domain_str(sym, x, lb, ub, integer)
    if index_sets:
        ans += f" {sym[PrintSymbol.for_all]} " + ', '.join(
            f"{d} {sym[PrintSymbol.in_]} {index_set_str(mode, s, config)}"
            for d, s in zip(dims, index_sets)
        )
    return ans


#------------------------------------------------------------------------
# Affine and quadratic expressions
#------------------------------------------------------------------------


def _terms_str(terms, key_str):
    # Returns "" if every term is negligible
    pieces = []
    for key, coef in terms:
        if is_negligible(coef):
            # e.g. x - x
            continue
        pre = "" if is_unit(coef) else format_number(abs(coef)) + " "
        if pieces:
            pieces.append(" - " if coef < 0 else " + ")
        else:
            # no " + " / " - " for the very first term
            pieces.append("-" if coef < 0 else "")
        pieces.append(pre + key_str(key))
    return ''.join(pieces)


def linear_repn_str(mode, repn, show_constant=True, config=None, **options):
    """Print a canonical (duplicate-free) affine expression

    ``repn`` is a :py:class:`~pyalm.repn.canonical.LinearCanonicalRepn`.
    If no term survives (no terms, or all cancelled), the constant is
    returned if ``show_constant`` is True, otherwise "0".
    """
    config = _get_config(config, options)
    ans = _terms_str(repn.terms(), lambda v: var_str(mode, v, config))
    if not ans:
        return format_number(repn.constant) if show_constant else "0"
    if show_constant and not is_negligible(repn.constant):
        ans += (" - " if repn.constant < 0 else " + ") + format_number(
            abs(repn.constant)
        )
    return ans


def aff_str(mode, expr, show_constant=True, config=None, **options):
    """Return the string representation of an affine expression

    Duplicate variables are merged (in the position of their first
    appearance), negligible terms are dropped, and unit coefficients
    are omitted::

        x + 2 y - x + 3 y - 1   ->   5 y - 1

    """
    config = _get_config(config, options)
    return linear_repn_str(mode, canonicalize_linear(expr), show_constant, config)


def quad_str(mode, expr, config=None, **options):
    """Return the string representation of a quadratic expression

    ``x*y`` and ``y*x`` terms are merged and displayed in the order in
    which the pair first appeared.  The affine part follows the
    quadratic terms.
    """
    config = _get_config(config, options)
    sym = _symbols(mode, config)
    repn = canonicalize_quadratic(expr)

    def pair_str(pair):
        x = var_str(mode, pair[0], config)
        if pair[0] is pair[1]:
            return x + sym[PrintSymbol.sq]
        return x + sym[PrintSymbol.times] + var_str(mode, pair[1], config)

    ans = _terms_str(repn.terms(), pair_str)
    aff = repn.linear
    if aff.constant == 0 and not aff.linear_vars:
        return ans or "0"
    aff = linear_repn_str(mode, aff, True, config)
    if not ans:
        return aff
    if aff == "0":
        return ans
    if aff[0] == '-':
        return ans + " - " + aff[1:]
    return ans + " + " + aff


#------------------------------------------------------------------------
# Constraints
#------------------------------------------------------------------------

_relation_symbol = {
    ConstraintSense.leq: PrintSymbol.leq,
    ConstraintSense.geq: PrintSymbol.geq,
    ConstraintSense.eq: PrintSymbol.eq,
}


def con_str(mode, body, sense, lb=None, ub=None, config=None, **options):
    """Return the string representation of a scalar constraint

    Parameters
    ----------
    mode: RenderMode

    body: str
        The already-printed constraint body

    sense: ConstraintSense
        ``range`` prints ``lb ≤ body ≤ ub``; ``leq`` prints
        ``body ≤ ub``; ``geq`` and ``eq`` print ``body ≥ lb`` and
        ``body = lb``.

    lb, ub: float
        The bounds

    """
    config = _get_config(config, options)
    sym = _symbols(mode, config)
    # Constraints are only built with well-formed senses and bounds
    if sense.__class__ is not ConstraintSense:
        raise DeveloperError("Unrecognized constraint sense %r" % (sense,))
    if sense is ConstraintSense.range:
        if lb is None or ub is None:
            raise DeveloperError(
                "Constraint sense 'range' requires both a lower and an upper bound"
            )
        leq = sym[PrintSymbol.leq]
        return f"{format_number(lb)} {leq} {body} {leq} {format_number(ub)}"
    if sense is ConstraintSense.leq:
        rhs, side = ub, 'an upper'
    else:
        rhs, side = lb, 'a lower'
    if rhs is None:
        raise DeveloperError(
            "Constraint sense '%s' requires %s bound" % (sense.name, side)
        )
    return f"{body} {sym[_relation_symbol[sense]]} {format_number(rhs)}"


#------------------------------------------------------------------------
# Cones
#------------------------------------------------------------------------


def _entry_str(mode, entry, config):
    if entry.__class__ in native_numeric_types:
        return format_number(entry)
    if hasattr(entry, 'is_variable_type') and entry.is_variable_type():
        return var_str(mode, entry, config)
    return entry._to_string(mode, config)


def matrix_str(mode, rows, config=None, **options):
    """Return a matrix of variables / expressions

    Plain mode prints ``[a b; c d]``; markup mode prints a ``bmatrix``.
    """
    config = _get_config(config, options)
    rows = [[_entry_str(mode, e, config) for e in row] for row in rows]
    if RenderMode(mode) is RenderMode.markup:
        return (
            "\\begin{bmatrix}\n"
            + "\\\\\n".join(" & ".join(row) for row in rows)
            + "\n\\end{bmatrix}"
        )
    return "[" + "; ".join(" ".join(row) for row in rows) + "]"


def psd_str(mode, rows, config=None, **options):
    """Return the constraint that a matrix is positive semidefinite"""
    config = _get_config(config, options)
    return matrix_str(mode, rows, config) + _symbols(mode, config)[PrintSymbol.succeq0]


def norm_str(mode, entries, bound=None, config=None, **options):
    """Return the Euclidean norm of a vector of expressions

    ``‖[x, y]‖₂``, or ``‖[x, y]‖₂ ≤ t`` if ``bound`` is specified.
    """
    config = _get_config(config, options)
    sym = _symbols(mode, config)
    vec = ", ".join(_entry_str(mode, e, config) for e in entries)
    ans = f"{sym[PrintSymbol.Vert]}[{vec}]{sym[PrintSymbol.Vert]}{sym[PrintSymbol.sub2]}"
    if bound is not None:
        ans += f" {sym[PrintSymbol.leq]} {_entry_str(mode, bound, config)}"
    return ans


#------------------------------------------------------------------------
# Nonlinear references
#------------------------------------------------------------------------


def reference_str(mode, kind, index):
    """Return the placeholder of a nonlinear expression / parameter

    e.g., ``Reference to nonlinear parameter #2``
    """
    if RenderMode(mode) is RenderMode.markup:
        return "\\text{Reference to nonlinear %s \\#%s}" % (kind, index)
    return "Reference to nonlinear %s #%s" % (kind, index)


#------------------------------------------------------------------------
# Top-level entry point
#------------------------------------------------------------------------


def to_string(obj, mode=RenderMode.plain, **options):
    """Return the string representation of a pyalm component

    This is the entry point used by ``str()`` and by the notebook
    ``_repr_latex_`` hooks.  Markup output is wrapped in ``$$ ... $$``
    unless the ``math_mode`` option is True.
    """
    config = PRINT_CONFIG(options)
    mode = RenderMode(mode)
    if obj.__class__ in native_numeric_types:
        ans = format_number(obj)
    else:
        try:
            fcn = obj._to_string
        except AttributeError:
            raise MouseTrap(
                "Printing objects of type '%s' is not supported" % (type(obj).__name__,)
            ) from None
        ans = fcn(mode, config)
    if mode is RenderMode.markup:
        return math(ans, config.math_mode)
    return ans
