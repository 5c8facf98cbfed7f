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
#
#  This module was originally developed as part of the PyUtilib project
#  Copyright (c) 2008 Sandia Corporation.
#  This software is distributed under the BSD License.
#  Under the terms of Contract DE-AC04-94AL85000 with Sandia Corporation,
#  the U.S. Government retains certain rights in this software.
#  ___________________________________________________________________________

"""Declarative, validated option containers

A :py:class:`ConfigDict` declares a set of named :py:class:`ConfigValue`
entries, each with a default and an optional *domain* (a callable that
validates and casts incoming values).  Calling a declared ConfigDict
returns an independent copy, optionally updated from a dict of
user-supplied options.  This is the pattern used throughout pyalm to
process keyword options::

    CONFIG = ConfigDict('printer')
    CONFIG.declare('math_mode', ConfigValue(default=False, domain=Bool))

    def render(obj, **options):
        config = CONFIG(options)
        ...

"""

from collections.abc import Mapping

from pyalm.common.flags import NOTSET


def Bool(val):
    """Domain validator for bool-like objects.

    This is a more strict domain than ``bool``, as it will error on
    values that do not "look" like a Boolean value (i.e., it accepts
    ``True``, ``False``, 0, 1, and the case insensitive strings
    ``'true'``, ``'false'``, ``'yes'``, ``'no'``, ``'t'``, ``'f'``,
    ``'y'``, and ``'n'``)

    """
    if type(val) is bool:
        return val
    if isinstance(val, str):
        v = val.upper()
        if v in {'TRUE', 'YES', 'T', 'Y', '1'}:
            return True
        if v in {'FALSE', 'NO', 'F', 'N', '0'}:
            return False
    elif int(val) == float(val):
        v = int(val)
        if v in {0, 1}:
            return bool(v)
    raise ValueError("Expected Boolean, but received %s" % (val,))


def _domain_name(domain):
    if domain is None:
        return ""
    return getattr(domain, '__name__', str(domain))


class ConfigValue(object):
    """Store and manipulate a single configuration value.

    Parameters
    ----------
    default: optional
        The default value that this ConfigValue will take if no value is
        provided.

    domain: Callable, optional
        The domain can be any callable that accepts a candidate value
        and returns the value converted to the desired type, optionally
        performing any data validation.  The result will be stored into
        the ConfigValue.

    description: str, optional
        The short description of this value

    doc: str, optional
        The long documentation string for this value

    """

    __slots__ = ('_name', '_domain', '_default', '_data', '_description', '_doc')

    def __init__(self, default=None, domain=None, description=None, doc=None):
        self._name = None
        self._domain = domain
        self._default = default
        self._description = description
        self._doc = doc
        self._data = NOTSET
        self.reset()

    def __call__(self, value=NOTSET):
        # The current value becomes the default of the copy
        ans = ConfigValue(self._data, self._domain, self._description, self._doc)
        ans._name = self._name
        if value is not NOTSET:
            ans.set_value(value)
        return ans

    def domain_name(self):
        return _domain_name(self._domain)

    def value(self):
        return self._data

    def _cast(self, value):
        if self._domain is None or value is None:
            return value
        try:
            return self._domain(value)
        except Exception as e:
            raise ValueError(
                "invalid value for configuration '%s':\n"
                "\tFailed casting %s\n\tto %s\n\tError: %s"
                % (self._name, value, self.domain_name(), e)
            ) from None

    def set_value(self, value):
        self._data = self._cast(value)

    def reset(self):
        self._data = self._cast(self._default)


class ConfigDict(Mapping):
    """Store and manipulate a dictionary of configuration values.

    Parameters
    ----------
    description: str, optional
        The short description of this dictionary of values

    doc: str, optional
        The long documentation string for this dictionary

    """

    def __init__(self, description=None, doc=None):
        # Bypass __setattr__, which maps attributes onto declared values
        object.__setattr__(self, '_description', description)
        object.__setattr__(self, '_doc', doc)
        object.__setattr__(self, '_data', {})

    def __call__(self, value=NOTSET):
        """Return a copy of this ConfigDict, updated with ``value``"""
        ans = ConfigDict(self._description, self._doc)
        for name, val in self._data.items():
            ans._data[name] = val()
        if value is not NOTSET and value is not None:
            ans.set_value(value)
        return ans

    def declare(self, name, config):
        if name in self._data:
            raise ValueError(
                "duplicate config '%s' defined for ConfigDict '%s'"
                % (name, self._description)
            )
        config._name = name
        self._data[name] = config
        return config

    def set_value(self, value):
        if not isinstance(value, Mapping):
            raise ValueError(
                "Expected dict value for %s.set_value, found %s"
                % (self._description, type(value).__name__)
            )
        _unknown = [k for k in value if k not in self._data]
        if _unknown:
            raise ValueError(
                "key%s '%s' not defined for ConfigDict '%s' and implicit "
                "(undefined) keys are not allowed"
                % (
                    's' if len(_unknown) > 1 else '',
                    "', '".join(map(str, _unknown)),
                    self._description,
                )
            )
        for key, val in value.items():
            self._data[key].set_value(val)
        return self

    def value(self):
        return {name: val.value() for name, val in self._data.items()}

    #
    # Mapping interface: items are the stored (cast) values
    #

    def __getitem__(self, key):
        return self._data[key].value()

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __contains__(self, key):
        return key in self._data

    def __getattr__(self, name):
        # Note: __getattr__ is only called after all "usual" attribute
        # lookup methods have failed.
        _data = self.__dict__.get('_data', {})
        if name in _data:
            return _data[name].value()
        raise AttributeError(
            "Unknown attribute '%s' for ConfigDict '%s'" % (name, self._description)
        )

    def __setattr__(self, name, value):
        if name not in self._data:
            raise ValueError(
                "key '%s' not defined for ConfigDict '%s' and implicit "
                "(undefined) keys are not allowed" % (name, self._description)
            )
        self._data[name].set_value(value)

    def __str__(self):
        return "ConfigDict(%s)" % (', '.join(f"{k}={v!r}" for k, v in self.items()),)
