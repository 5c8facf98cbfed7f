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

# NOTE: releaselevel should be left at 'invalid' for trunk development
#     and set to 'final' for releases.  During development, the
#     major.minor.micro should point to the NEXT release.
major = 0
minor = 3
micro = 0
releaselevel = 'final'
serial = 0

if releaselevel not in ('final', 'invalid'):  # pragma:nocover
    releaselevel = 'devel'

version_info = (major, minor, micro, releaselevel, serial)

__version__ = '.'.join(str(x) for x in version_info[:3])
if releaselevel in ('devel', 'invalid'):
    __version__ += ".dev%d" % (serial,)

version = __version__
if releaselevel != 'final':
    version += ' (' + releaselevel + ')'
