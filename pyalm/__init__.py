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

from pyalm.version import version, version_info, __version__
from pyalm.core import *
