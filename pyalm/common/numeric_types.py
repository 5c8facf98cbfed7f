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

import logging

logger = logging.getLogger(__name__)

# It is *significantly* faster to build the list of types we want to
# test against as a "static" set, and not to regenerate it locally for
# every call.  Plus, this allows us to dynamically augment the set
# with new "native" types (e.g., from NumPy)

#: Python set used to identify numeric constants.  This set includes
#: native Python types as well as numeric types from Python packages
#: like numpy, which may be registered by users.
#:
#: Note that :data:`native_numeric_types` does NOT include
#: :py:class:`bool` or :py:class:`complex`, as neither is a valid
#: coefficient in a pyalm expression.
native_numeric_types = {int, float}
native_integer_types = {int}
native_types = {bool, str, type(None), complex, bytes}
native_types.update(native_numeric_types)


def RegisterNumericType(new_type: type):
    """Register the specified type as a "numeric type".

    A utility function for registering new types as "native numeric
    types" that can be leaf nodes (coefficients and constants) in pyalm
    expressions.

    """
    native_numeric_types.add(new_type)
    native_types.add(new_type)


def check_if_numeric_type(obj):
    """Test if the argument behaves like a numeric type.

    We check for "numeric types" by checking if we can add zero to it
    without changing the object's type, that it converts to float, and
    that the object compares to 0 in a meaningful way.  If that works,
    then we register the type in :py:attr:`native_numeric_types`.

    """
    obj_class = obj.__class__
    # Do not re-evaluate known native types
    if obj_class in native_types:
        return obj_class in native_numeric_types

    try:
        obj_p0_class = (obj + 0).__class__
        float(obj)
        # Native numeric types *must* be hashable
        hash(obj)
    except Exception:
        return False
    if obj_p0_class is not obj_class and obj_p0_class not in native_numeric_types:
        return False
    try:
        if not ((obj < 0) ^ (obj >= 0)):
            return False
    except Exception:
        return False
    #
    # If we get here, this is a reasonably well-behaving
    # numeric type: add it to the native numeric types
    # so that future lookups will be faster.
    #
    RegisterNumericType(obj_class)
    logger.warning(
        f"""Dynamically registering the following numeric type:
    {obj_class.__module__}.{obj_class.__name__}
Dynamic registration is supported for convenience, but there are known
limitations to this approach.  We recommend explicitly registering
numeric types using RegisterNumericType()."""
    )
    return True
