r"""
This package defines value types for orientations and poses together with the routines for converting between them
and for chaining, inverting, and averaging poses.

There are a few different rotation representations used in this package and their format is described as follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A :class:`.Quaternion` of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} x \\ y \\ z \\ w\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{a}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{a}}` is the unit rotation axis and :math:`\theta` the rotation angle.
                   Quaternions are always kept at unit length.  Note that :math:`\mathbf{q}` and :math:`-\mathbf{q}`
                   represent the same rotation.
axis-angle         A :class:`.RotAxisAngle` holding the unit axis :math:`\hat{\mathbf{a}}` and the angle
                   :math:`\theta` in radians.  A zero rotation has no well defined axis so it is reported with the
                   canonical axis :math:`[1, 0, 0]` and an angle of 0.
rotation matrix    A :class:`.Dcm` holding a :math:`3\times 3` orthonormal matrix.  The matrix is stored as the
                   *transpose* of the matrix that rotates a vector by the quaternion, so multiplying a vector by it
                   expresses that vector in the rotated frame.
euler angles       An :class:`.EulerAngles` triple tagged with its rotation order (ZYX: yaw, pitch, roll or XYZ: roll,
                   pitch, yaw) and its unit (degrees or radians).  The tags travel with the numbers so the matching
                   conversion is always used.
pose               An :class:`.Hmat` combining a :class:`.Vector3` translation with a :class:`.Quaternion` rotation.
=================  =====================================================================================================

Every type is an immutable (frozen) dataclass and every routine is a pure function, so all of them can be shared
between threads freely.
"""

import posemath.rotations.core
import posemath.rotations.pose

from posemath.rotations.core import *
from posemath.rotations.pose import (Hmat, hmat_create, hmat_identity, hmat_inverse, hmat_composite, hmat_relative,
                                     hmat_transform_point, hmat_interpolate, hmat_average,
                                     PoseAveragerOptions, PoseAverager)

__all__ = ['wrap_angle',
           'Vector3', 'vector3_create', 'vector3_multiply', 'vector3_add',
           'RotationOrder', 'AngleUnit', 'EulerAngles', 'euler_angles_create',
           'euler_angles_to_radians', 'euler_angles_to_degrees', 'euler_angles_in_radians',
           'Quaternion', 'RotAxisAngle', 'DEGENERATE_AXIS_THRESHOLD', 'CANONICAL_AXIS',
           'quaternion_normalize', 'quaternion_create', 'quaternion_identity', 'quaternion_composite',
           'quaternion_inverse',
           'euler_zyx_to_quaternion', 'quaternion_to_euler_zyx', 'euler_xyz_to_quaternion', 'quaternion_to_euler_xyz',
           'euler_to_quaternion', 'quaternion_to_euler', 'quaternion_to_axis_angle', 'axis_angle_to_quaternion',
           'Dcm', 'quaternion_to_dcm', 'dcm_to_quaternion', 'dcm_transform_vector', 'quaternion_transform_vector',
           'Hmat', 'hmat_create', 'hmat_identity', 'hmat_inverse', 'hmat_composite', 'hmat_relative',
           'hmat_transform_point', 'hmat_interpolate', 'hmat_average', 'PoseAveragerOptions', 'PoseAverager']
