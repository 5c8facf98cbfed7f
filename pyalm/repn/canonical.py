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

"""Merge duplicate terms of an expression without reordering it

Expressions are built incrementally, so the same variable (or the same
pair of variables) may appear in several terms.  The canonical forms
generated here sum the coefficients of duplicate terms into a single
entry located at the position where that term *first* appeared, so that
the printed expression keeps the order the user wrote (``y + x`` is
never silently turned into ``x + y``).

Coefficients are summed in input order.  Floating point addition is not
associative, so merging the same terms given in a different order may
differ in the last bits.
"""

import logging

from pyalm.common.log import is_debug_set

logger = logging.getLogger('pyalm.repn')


class LinearCanonicalRepn(object):
    """Canonical (duplicate-free) form of an affine expression"""

    __slots__ = (
        'constant',  # The constant term
        'linear_vars',  # Distinct variables, in order of first appearance
        'linear_coefs',  # Merged coefficients
    )

    def __init__(self, constant=0, linear_vars=(), linear_coefs=()):
        self.constant = constant
        self.linear_vars = tuple(linear_vars)
        self.linear_coefs = tuple(linear_coefs)

    def __len__(self):
        return len(self.linear_vars)

    def terms(self):
        return zip(self.linear_vars, self.linear_coefs)

    def __str__(self):  # pragma: nocover
        return "LinearCanonicalRepn(constant=%s, terms=%s)" % (
            self.constant,
            [(str(v), c) for v, c in self.terms()],
        )


class QuadraticCanonicalRepn(object):
    """Canonical (duplicate-free) form of a quadratic expression

    ``quadratic_vars`` holds the ordered ``(v1, v2)`` tuple with which
    each unordered pair was first encountered; ``linear`` is the
    :py:class:`LinearCanonicalRepn` of the embedded affine part.
    """

    __slots__ = ('quadratic_vars', 'quadratic_coefs', 'linear')

    def __init__(self, quadratic_vars=(), quadratic_coefs=(), linear=None):
        self.quadratic_vars = tuple(quadratic_vars)
        self.quadratic_coefs = tuple(quadratic_coefs)
        if linear is None:
            linear = LinearCanonicalRepn()
        self.linear = linear

    def __len__(self):
        return len(self.quadratic_vars)

    def terms(self):
        return zip(self.quadratic_vars, self.quadratic_coefs)


def unordered_pair_id(pair):
    """Return a hashable identifier for the unordered pair of components

    ``(x, y)`` and ``(y, x)`` map to the same identifier, and ``(x, x)``
    is distinct from every ``(x, y)`` with ``y is not x``.  Components
    are identified by ``id()``, never by name or value.
    """
    i1, i2 = id(pair[0]), id(pair[1])
    if i1 <= i2:
        return i1, i2
    return i2, i1


def canonicalize(terms, key_fcn=id):
    """Merge duplicate ``(key, coefficient)`` terms preserving order

    The input is walked once to accumulate the merged coefficient of
    every distinct key (as identified by ``key_fcn(key)``) and the
    position where that key first appeared.  The output is then
    generated by walking the input positions again and emitting each
    key exactly once, at its first-seen position, with its merged
    coefficient.  Later occurrences of an already-emitted key are
    skipped.

    Parameters
    ----------
    terms: Iterable
        ``(key, coefficient)`` pairs

    key_fcn: Callable
        maps a key to the (hashable) identity used to detect duplicates.
        The key returned for each bucket is the *first* key seen for
        that bucket.

    Returns
    -------
    list of ``(key, merged_coefficient)`` tuples

    """
    terms = list(terms)
    first_idx = {}
    coefs = {}
    for i, (key, coef) in enumerate(terms):
        bucket = key_fcn(key)
        if bucket in first_idx:
            # already seen, just add coefficient
            coefs[bucket] += coef
        else:
            first_idx[bucket] = i
            coefs[bucket] = coef

    ans = []
    for i, (key, coef) in enumerate(terms):
        bucket = key_fcn(key)
        if first_idx[bucket] != i:
            continue
        ans.append((key, coefs[bucket]))

    if len(ans) < len(terms) and is_debug_set(logger):
        logger.debug(
            "Merged %s duplicate terms (%s distinct of %s)"
            % (len(terms) - len(ans), len(ans), len(terms))
        )
    return ans


def canonicalize_linear(expr):
    """Generate the :py:class:`LinearCanonicalRepn` of an affine expression

    ``expr`` is any object providing ``constant``, ``linear_vars`` and
    ``linear_coefs`` (e.g., :py:class:`~pyalm.core.expr.numeric_expr.AffExpr`).
    Variables are merged by identity.
    """
    terms = canonicalize(zip(expr.linear_vars, expr.linear_coefs))
    return LinearCanonicalRepn(
        expr.constant, (v for v, _ in terms), (c for _, c in terms)
    )


def canonicalize_quadratic(expr):
    """Generate the :py:class:`QuadraticCanonicalRepn` of a quadratic expression

    ``expr`` is any object providing ``quadratic_vars`` (a sequence of
    variable pairs), ``quadratic_coefs`` and ``aff`` (the affine part).
    Pairs are merged as unordered pairs of variable identities.
    """
    terms = canonicalize(
        zip((tuple(p) for p in expr.quadratic_vars), expr.quadratic_coefs),
        key_fcn=unordered_pair_id,
    )
    return QuadraticCanonicalRepn(
        (p for p, _ in terms), (c for _, c in terms), canonicalize_linear(expr.aff)
    )
