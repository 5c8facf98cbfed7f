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

"""pyalm: Python Algebraic Layer for Modeling

pyalm.version provides a mechanism for managing stuff that is related to
releases of the entire pyalm software.
"""

from pyalm.version.info import version, version_info, __version__
