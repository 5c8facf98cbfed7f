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

"""This module provides the :py:class:`enum.Enum` extensions used in pyalm

Utilities:

.. autosummary::

   NamedIntEnum

Standard Enums:

.. autosummary::

   ConstraintSense

"""

import enum


class NamedIntEnum(enum.IntEnum):
    """An extended version of :py:class:`enum.IntEnum` that supports
    creating members by name as well as value.

    """

    @classmethod
    def _missing_(cls, value):
        for member in cls:
            if member.name == value:
                return member
        return None

    # Members print as their bare name ("leq", not "ConstraintSense.leq")
    def __str__(self):
        return self.name


class ConstraintSense(NamedIntEnum):
    """The relation a scalar constraint imposes on its body

    ``range`` constraints carry both a lower and an upper bound; the
    other senses compare the body against a single right-hand side.

    """

    leq = 1
    geq = 2
    eq = 3
    range = 4
