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

import inspect
import textwrap


def _fill(text, width, initial_indent, subsequent_indent):
    return textwrap.fill(
        text,
        width=width,
        initial_indent=initial_indent,
        subsequent_indent=subsequent_indent,
        break_long_words=False,
        break_on_hyphens=False,
    )


def format_exception(msg, prolog=None, epilog=None, exception=None, width=76):
    """Generate a formatted exception message

    This returns a formatted exception message, line wrapped for display
    on the console and with optional prolog and epilog messages.

    Parameters
    ----------
    msg: str
        The raw exception message

    prolog: str, optional
        A message to output before the exception message, ``msg``.  If
        this message is long enough to line wrap, the ``msg`` will be
        indented a level below the ``prolog`` message.

    epilog: str, optional
        A message to output after the exception message, ``msg``.  If
        provided, the ``msg`` will be indented a level below the
        ``prolog`` / ``epilog`` messages.

    exception: Exception, optional
        The raw exception being raised (used to improve initial line wrapping).

    width: int, optional
        The line length to wrap the exception message to.

    Returns
    -------
    str
    """
    fields = []

    indent = ' ' * (8 if epilog else 4)

    if exception is None:
        # default to the length of 'NotImplementedError: '
        initial_indent = ' ' * 21
    else:
        if not inspect.isclass(exception):
            exception = exception.__class__
        initial_indent = ' ' * (len(exception.__name__) + 2)
        if exception.__module__ != 'builtins':
            initial_indent += ' ' * (len(exception.__module__) + 1)

    if prolog is not None:
        if '\n' not in prolog:
            # Strip off the placeholder for the exception class name
            prolog = _fill(prolog, width, initial_indent, ' ' * 4).lstrip()
        if '\n' in prolog:
            indent = ' ' * 8
        fields.append(prolog)
        initial_indent = indent

    if '\n' not in msg:
        msg = _fill(msg, width, initial_indent, indent)
        if not fields:
            msg = msg.lstrip()
    fields.append(msg)

    if epilog is not None:
        if '\n' not in epilog:
            epilog = _fill(epilog, width, ' ' * 4, ' ' * 4)
        fields.append(epilog)

    return '\n'.join(fields)


class PyalmException(Exception):
    """
    Exception class for other pyalm exceptions to inherit from,
    allowing pyalm exceptions to be caught in a general way
    (e.g., in other applications that use pyalm).
    Subclasses can define a class-level `default_message` attribute.
    """

    def __init__(self, *args):
        if not args and getattr(self, 'default_message', None):
            args = (self.default_message,)
        return super().__init__(*args)


class DeveloperError(PyalmException, NotImplementedError):
    """
    Exception class used to throw errors that result from pyalm
    programming errors, rather than user modeling errors (e.g., a
    constraint built with a sense the printer does not know).
    """

    def __str__(self):
        return format_exception(
            repr(super().__str__()),
            prolog="Internal pyalm implementation error:",
            epilog="Please report this to the pyalm Developers.",
            exception=self,
        )


class MouseTrap(PyalmException, NotImplementedError):
    """
    Exception class used to throw errors for not-implemented functionality
    that might be rational to support (e.g., printing a component type
    the printer was never taught about), but that is not supported yet.
    """

    def __str__(self):
        return format_exception(
            repr(super().__str__()),
            prolog="Sorry, mouse, no cookies here!",
            epilog="This is functionality we think may be rational to "
            "support, but is not yet implemented.  Pull requests are "
            "always welcome!",
            exception=self,
        )
