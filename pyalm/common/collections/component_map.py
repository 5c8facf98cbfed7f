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

from collections.abc import Mapping, MutableMapping


class ComponentMap(MutableMapping):
    """
    This class is a replacement for dict that allows pyalm modeling
    components to be used as entry keys.  The underlying mapping is
    based on the Python id() of the object, so two components are the
    same key only if they are the same object: components are never
    compared by value (or by name).  Insertion order is preserved.

    A reference to the object is kept around as long as it
    has a corresponding entry in the container, so there is
    no need to worry about id() clashes.
    """

    __slots__ = ("_dict",)

    def __init__(self, *args, **kwds):
        # maps id(obj) -> (obj,val)
        self._dict = {}
        self.update(*args, **kwds)

    def __str__(self):
        """String representation of the mapping."""
        tmp = {f"{v[0]} (key={k})": v[1] for k, v in self._dict.items()}
        return f"ComponentMap({tmp})"

    #
    # Implement MutableMapping abstract methods
    #

    def __getitem__(self, obj):
        try:
            return self._dict[id(obj)][1]
        except KeyError:
            raise KeyError(f"{obj} (key={id(obj)})") from None

    def __setitem__(self, obj, val):
        self._dict[id(obj)] = (obj, val)

    def __delitem__(self, obj):
        try:
            del self._dict[id(obj)]
        except KeyError:
            raise KeyError(f"{obj} (key={id(obj)})") from None

    def __iter__(self):
        return (obj for obj, val in self._dict.values())

    def __len__(self):
        return self._dict.__len__()

    #
    # Overload MutableMapping default implementations
    #

    def update(self, *args, **kwargs):
        if len(args) == 1 and not kwargs and isinstance(args[0], ComponentMap):
            return self._dict.update(args[0]._dict)
        return super().update(*args, **kwargs)

    # Look up each entry from other in this dict so that keys are never
    # compared by value.
    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Mapping) or len(self) != len(other):
            return False
        for key, val in other.items():
            other_id = id(key)
            if other_id not in self._dict:
                return False
            self_val = self._dict[other_id][1]
            if self_val is not val and self_val != val:
                return False
        return True

    def __ne__(self, other):
        return not (self == other)

    #
    # The remaining methods have slow default implementations for
    # MutableMapping (they rely on KeyError catching).
    #

    def __contains__(self, obj):
        return id(obj) in self._dict

    def clear(self):
        "D.clear() -> None.  Remove all items from D."
        self._dict.clear()

    def get(self, key, default=None):
        "D.get(k[,d]) -> D[k] if k in D, else d.  d defaults to None."
        if key in self:
            return self[key]
        return default

    def setdefault(self, key, default=None):
        "D.setdefault(k[,d]) -> D.get(k,d), also set D[k]=d if k not in D"
        if key in self:
            return self[key]
        self[key] = default
        return default
