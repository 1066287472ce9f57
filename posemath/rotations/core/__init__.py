"""
This package contains the value types and pure functions that make up the rotation math.  Each module only depends on
the modules below it (vector3 and euler_angles, then quaternion_math, then dcm) so there are no circular imports.
"""

import posemath.rotations.core.vector3
import posemath.rotations.core.euler_angles
import posemath.rotations.core.quaternion_math
import posemath.rotations.core.dcm

from posemath.rotations.core._helpers import wrap_angle

from posemath.rotations.core.vector3 import Vector3, vector3_create, vector3_multiply, vector3_add

from posemath.rotations.core.euler_angles import (RotationOrder, AngleUnit, EulerAngles, euler_angles_create,
                                                  euler_angles_to_radians, euler_angles_to_degrees,
                                                  euler_angles_in_radians)

from posemath.rotations.core.quaternion_math import (Quaternion, RotAxisAngle, DEGENERATE_AXIS_THRESHOLD,
                                                     CANONICAL_AXIS, quaternion_normalize, quaternion_create,
                                                     quaternion_identity, quaternion_composite, quaternion_inverse,
                                                     euler_zyx_to_quaternion, quaternion_to_euler_zyx,
                                                     euler_xyz_to_quaternion, quaternion_to_euler_xyz,
                                                     euler_to_quaternion, quaternion_to_euler,
                                                     quaternion_to_axis_angle, axis_angle_to_quaternion)

from posemath.rotations.core.dcm import (Dcm, quaternion_to_dcm, dcm_to_quaternion, dcm_transform_vector,
                                         quaternion_transform_vector)

__all__ = ['wrap_angle',
           'Vector3', 'vector3_create', 'vector3_multiply', 'vector3_add',
           'RotationOrder', 'AngleUnit', 'EulerAngles', 'euler_angles_create',
           'euler_angles_to_radians', 'euler_angles_to_degrees', 'euler_angles_in_radians',
           'Quaternion', 'RotAxisAngle', 'DEGENERATE_AXIS_THRESHOLD', 'CANONICAL_AXIS',
           'quaternion_normalize', 'quaternion_create', 'quaternion_identity', 'quaternion_composite',
           'quaternion_inverse',
           'euler_zyx_to_quaternion', 'quaternion_to_euler_zyx', 'euler_xyz_to_quaternion', 'quaternion_to_euler_xyz',
           'euler_to_quaternion', 'quaternion_to_euler', 'quaternion_to_axis_angle', 'axis_angle_to_quaternion',
           'Dcm', 'quaternion_to_dcm', 'dcm_to_quaternion', 'dcm_transform_vector', 'quaternion_transform_vector']
