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
# Utility classes for working with the logger
#
import inspect
import io
import logging
import re
import sys
import textwrap

from pyalm.common.flags import building_documentation

_indentation_re = re.compile(r'\s*')

_DEBUG = logging.DEBUG
_NOTSET = logging.NOTSET


def is_debug_set(logger):
    """A variant of Logger.isEnableFor that returns False if NOTSET

    The implementation of logging.Logger.isEnableFor() returns True
    if the effective level of the logger is NOTSET.  This variant
    only returns True if the effective level of the logger is NOTSET
    < level <= DEBUG.  This is used in pyalm to detect if the user
    explicitly requested DEBUG output.

    """
    if logger.manager.disable >= _DEBUG:
        return False
    return _NOTSET < logger.getEffectiveLevel() <= _DEBUG


class WrappingFormatter(logging.Formatter):
    _flag = "<<!MSG!>>"

    def __init__(self, **kwds):
        if 'fmt' not in kwds:
            if kwds.get('style', '%') == '%':
                kwds['fmt'] = '%(levelname)s: %(message)s'
            elif kwds['style'] == '{':
                kwds['fmt'] = '{levelname}: {message}'
            elif kwds['style'] == '$':
                kwds['fmt'] = '$levelname: $message'
            else:
                raise ValueError('unrecognized style flag "%s"' % (kwds['style'],))
        self._wrapper = textwrap.TextWrapper(width=kwds.pop('wrap', 78))
        self._wrapper.subsequent_indent = kwds.pop('hang', ' ' * 4) or ''
        super().__init__(**kwds)

    def format(self, record):
        msg = inspect.cleandoc(record.getMessage())
        _orig = {k: getattr(record, k) for k in ('msg', 'args')}
        record.msg = self._flag
        record.args = None
        try:
            raw_msg = super().format(record)
        finally:
            for k, v in _orig.items():
                setattr(record, k, v)

        # Substitute (and wrap) the message into the formatted template
        return '\n'.join(
            self._wrap_msg(line, msg) if self._flag in line else line
            for line in raw_msg.splitlines()
        )

    def _wrap_msg(self, format_line, msg):
        _init = self._wrapper.initial_indent, self._wrapper.subsequent_indent
        indent = _indentation_re.match(format_line).group()
        if indent:
            self._wrapper.initial_indent = self._wrapper.subsequent_indent = indent
        try:
            paragraphs = format_line.strip().replace(self._flag, msg).split('\n\n')
            return '\n\n'.join(
                # Preformatted (indented) blocks are passed through verbatim
                p if p[:1].isspace() else self._wrapper.fill(p)
                for p in paragraphs
            )
        finally:
            self._wrapper.initial_indent, self._wrapper.subsequent_indent = _init


class _GlobalLogFilter(object):
    def __init__(self):
        self.logger = logging.getLogger()

    def filter(self, record):
        # We will not emit messages using the default pyalm log handler
        # if someone has registered a global handler.
        return not self.logger.handlers or building_documentation()


# The main pyalm logger writes to stdout through a wrapping formatter.
# It is suppressed if any handlers have been defined at the root level.
pyalm_logger = logging.getLogger('pyalm')
pyalm_handler = logging.StreamHandler(sys.stdout)
pyalm_formatter = WrappingFormatter()
pyalm_handler.setFormatter(pyalm_formatter)
pyalm_handler.addFilter(_GlobalLogFilter())
pyalm_logger.addHandler(pyalm_handler)


class LoggingIntercept(object):
    r"""Context manager for intercepting messages sent to a log stream

    This class is designed to enable easy testing of log messages.

    The LoggingIntercept context manager will intercept messages sent to
    a log stream matching a specified level and send the messages to the
    specified output stream.  Other handlers registered to the target
    logger will be temporarily removed and the logger will be set not to
    propagate messages up to higher-level loggers.

    Parameters
    ----------
    output: io.TextIOBase
        the file stream to send log messages to

    module: str
        the target logger name to intercept. `logger` and `module` are
        mutually exclusive.

    level: int
        the logging level to intercept

    formatter: logging.Formatter
        the formatter to use when rendering the log messages.  If not
        specified, uses `'%(message)s'`

    logger: logging.Logger
        the target logger to intercept. `logger` and `module` are
        mutually exclusive.

    Examples
    --------
    >>> import io, logging
    >>> from pyalm.common.log import LoggingIntercept
    >>> buf = io.StringIO()
    >>> with LoggingIntercept(buf, 'pyalm.core', logging.WARNING):
    ...     logging.getLogger('pyalm.core').warning('a simple message')
    >>> buf.getvalue()
    'a simple message\n'

    """

    def __init__(
        self, output=None, module=None, level=logging.WARNING, formatter=None, logger=None
    ):
        self.handler = None
        self.output = output
        if logger is not None:
            if module is not None:
                raise ValueError(
                    "LoggingIntercept: only one of 'module' and 'logger' is allowed"
                )
            self._logger = logger
        else:
            self._logger = logging.getLogger(module)
        self._level = level
        if formatter is None:
            formatter = logging.Formatter('%(message)s')
        self._formatter = formatter
        self._save = None

    def __enter__(self):
        logger = self._logger
        self._save = logger.level, logger.propagate, logger.handlers
        if self._level is None:
            self._level = logger.getEffectiveLevel()
        output = self.output
        if output is None:
            output = io.StringIO()
        assert self.handler is None
        self.handler = logging.StreamHandler(output)
        self.handler.setFormatter(self._formatter)
        self.handler.setLevel(self._level)
        # Register the handler with the appropriate module scope
        logger.handlers = []
        logger.propagate = False
        logger.setLevel(self.handler.level)
        logger.addHandler(self.handler)
        return output

    def __exit__(self, et, ev, tb):
        logger = self._logger
        logger.removeHandler(self.handler)
        self.handler = None
        logger.setLevel(self._save[0])
        logger.propagate = self._save[1]
        assert not logger.handlers
        logger.handlers.extend(self._save[2])

    @property
    def module(self):
        return self._logger.name
