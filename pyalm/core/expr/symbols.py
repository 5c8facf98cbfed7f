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

"""Literal symbols used when printing modeling components

The printer never embeds operators or set notation directly: it asks
for an abstract :py:class:`PrintSymbol` and looks up the literal string
for the current :py:class:`RenderMode`.  Three tables are defined (and
frozen) at import:

  - plain text (console) using unicode glyphs,
  - plain text restricted to ASCII, for terminals that cannot display
    the glyphs (see the ``use_ascii_fallback`` printer option), and
  - markup (LaTeX math, for notebooks).

"""

import enum
import types

from pyalm.common.enums import NamedIntEnum


class RenderMode(NamedIntEnum):
    """Output flavor: console text or notebook (LaTeX) markup"""

    plain = 1
    markup = 2


class PrintSymbol(enum.Enum):
    leq = 'leq'
    geq = 'geq'
    eq = 'eq'
    times = 'times'
    sq = 'sq'
    ind_open = 'ind_open'
    ind_close = 'ind_close'
    for_all = 'for_all'
    in_ = 'in'
    open_set = 'open_set'
    dots = 'dots'
    close_set = 'close_set'
    union = 'union'
    infty = 'infty'
    open_rng = 'open_rng'
    close_rng = 'close_rng'
    integer = 'integer'
    succeq0 = 'succeq0'
    Vert = 'Vert'
    sub2 = 'sub2'


_S = PrintSymbol

PLAIN_SYMBOLS = types.MappingProxyType(
    {
        _S.leq: "≤",
        _S.geq: "≥",
        _S.eq: "=",
        _S.times: "×",
        _S.sq: "²",
        _S.ind_open: "[",
        _S.ind_close: "]",
        _S.for_all: "∀",
        _S.in_: "∈",
        _S.open_set: "{",
        _S.dots: "…",
        _S.close_set: "}",
        _S.union: "∪",
        _S.infty: "∞",
        _S.open_rng: "[",
        _S.close_rng: "]",
        _S.integer: "integer",
        _S.succeq0: " is semidefinite",
        _S.Vert: "‖",
        _S.sub2: "₂",
    }
)

# Anything here should be printable on any console (including the
# Windows-1252 code page)
ASCII_SYMBOLS = types.MappingProxyType(
    {
        _S.leq: "<=",
        _S.geq: ">=",
        _S.eq: "==",
        _S.times: "*",
        _S.sq: "^2",
        _S.ind_open: "[",
        _S.ind_close: "]",
        _S.for_all: "for all",
        _S.in_: "in",
        _S.open_set: "{",
        _S.dots: "..",
        _S.close_set: "}",
        _S.union: "or",
        _S.infty: "Inf",
        _S.open_rng: "[",
        _S.close_rng: "]",
        _S.integer: "integer",
        _S.succeq0: " is semidefinite",
        _S.Vert: "||",
        _S.sub2: "_2",
    }
)

MARKUP_SYMBOLS = types.MappingProxyType(
    {
        _S.leq: "\\leq",
        _S.geq: "\\geq",
        _S.eq: "=",
        _S.times: "\\times ",
        _S.sq: "^2",
        _S.ind_open: "_{",
        _S.ind_close: "}",
        _S.for_all: "\\quad\\forall",
        _S.in_: "\\in",
        _S.open_set: "\\{",
        _S.dots: "\\dots",
        _S.close_set: "\\}",
        _S.union: "\\cup",
        _S.infty: "\\infty",
        _S.open_rng: "\\[",
        _S.close_rng: "\\]",
        _S.integer: "\\in \\mathbb{Z}",
        _S.succeq0: "\\succeq 0",
        _S.Vert: "\\Vert",
        _S.sub2: "_2",
    }
)

del _S


def symbol_table(mode, use_ascii_fallback=False):
    """Return the (read-only) symbol table for a render mode

    ``use_ascii_fallback`` only applies to :py:attr:`RenderMode.plain`;
    markup always uses LaTeX escapes.
    """
    if RenderMode(mode) is RenderMode.markup:
        return MARKUP_SYMBOLS
    if use_ascii_fallback:
        return ASCII_SYMBOLS
    return PLAIN_SYMBOLS


def lookup(mode, token, use_ascii_fallback=False):
    """Return the literal string for ``token`` in ``mode``"""
    return symbol_table(mode, use_ascii_fallback)[PrintSymbol(token)]


def math(s, math_mode):
    """Wrap markup in display-math delimiters unless already in math mode"""
    if math_mode:
        return s
    return "$$ %s $$" % (s,)
