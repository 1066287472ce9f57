# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
posemath: value types and pure functions for 3D orientations and rigid poses.

The :mod:`posemath.rotations` package holds everything.  Its contents are also available directly from the top level
package for convenience.
"""

import posemath.rotations

from posemath.rotations import *

__version__ = '1.0.0'
