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

import pytest

_implicit_markers = {'default'}


def pytest_collection_modifyitems(items):
    """
    This method will mark any unmarked tests with the implicit marker ('default')

    """
    for item in items:
        try:
            next(item.iter_markers())
        except StopIteration:
            for marker in _implicit_markers:
                item.add_marker(getattr(pytest.mark, marker))


def pytest_runtest_setup(item):
    """
    This method overrides pytest's default behavior for marked tests.

    If the user asked for a specific marker using the '-m' flag, return
    to pytest's default behavior.  Otherwise, run unmarked tests and
    tests marked with the implicit markers, and skip tests that were
    only given explicit markers (e.g., "expensive").
    """
    if item.config.getoption("-m"):
        return
    item_markers = set(mark.name for mark in item.iter_markers())
    if item_markers and not _implicit_markers.issubset(item_markers):
        pytest.skip('SKIPPED: Only running default and unmarked tests.')


def pytest_configure(config):
    """
    Register the implicit markers.
    This stops pytest from printing a warning about unregistered markers.
    """
    config.addinivalue_line("markers", "default: run in the default test suite")
    config.addinivalue_line("markers", "expensive: skipped unless requested with -m")
