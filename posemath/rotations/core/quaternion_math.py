# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Unit quaternion algebra and the conversions between quaternions, euler angles, and axis-angle pairs.

Quaternions are stored vector part first, scalar part last (``[x, y, z, w]``).  Every function that builds or combines
quaternions renormalizes its result before returning it.
"""

from dataclasses import dataclass
from typing import Self

import numpy as np

from posemath._typing import ARRAY_LIKE, DOUBLE_ARRAY
from posemath.rotations.core._helpers import _check_quaternion_array_and_shape
from posemath.rotations.core.euler_angles import EulerAngles, RotationOrder, AngleUnit, euler_angles_in_radians
from posemath.rotations.core.vector3 import Vector3


__all__ = ["Quaternion", "RotAxisAngle", "DEGENERATE_AXIS_THRESHOLD", "CANONICAL_AXIS",
           "quaternion_normalize", "quaternion_create", "quaternion_identity", "quaternion_composite",
           "quaternion_inverse",
           "euler_zyx_to_quaternion", "quaternion_to_euler_zyx", "euler_xyz_to_quaternion", "quaternion_to_euler_xyz",
           "euler_to_quaternion", "quaternion_to_euler",
           "quaternion_to_axis_angle", "axis_angle_to_quaternion"]


DEGENERATE_AXIS_THRESHOLD: float = 1e-5
"""
Vector part norm below which a quaternion is treated as having no well defined rotation axis
"""

CANONICAL_AXIS: Vector3 = Vector3(1.0, 0.0, 0.0)
"""
The axis reported for the degenerate (zero angle) axis-angle representation
"""


@dataclass(frozen=True)
class Quaternion:
    r"""
    An immutable rotation quaternion of the form

    .. math::
        \mathbf{q}=\left[\begin{array}{c} x \\ y \\ z \\ w\end{array}\right]=
        \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{a}}\\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    Constructing the dataclass directly does not normalize.  Use :func:`quaternion_create` for that.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns the quaternion as a new length 4 numpy array ``[x, y, z, w]``.
        """

        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    @classmethod
    def from_array(cls, quaternion: ARRAY_LIKE) -> Self:
        """
        Builds a quaternion from a length 4 array like ``[x, y, z, w]`` without normalizing it.

        :param quaternion: the components
        :return: the quaternion
        :raises ValueError: if the input is not a length 4, one dimensional array like
        """

        x, y, z, w = _check_quaternion_array_and_shape(quaternion)

        return cls(float(x), float(y), float(z), float(w))


@dataclass(frozen=True)
class RotAxisAngle:
    """
    A rotation expressed as a unit axis and an angle in radians about that axis.
    """

    axis: Vector3 = CANONICAL_AXIS
    angle: float = 0.0


def quaternion_normalize(quaternion: Quaternion) -> Quaternion:
    """
    Scales a quaternion to unit length.

    The norm is not checked.  A zero quaternion produces ``nan`` components (and a numpy ``RuntimeWarning``) rather
    than an exception, so callers that may hold one must guard against it themselves.

    :param quaternion: the quaternion to normalize
    :return: the unit quaternion
    """

    work = quaternion.as_array()

    work /= np.linalg.norm(work)

    return Quaternion.from_array(work)


def quaternion_create(x: float, y: float, z: float, w: float) -> Quaternion:
    """
    Creates a unit quaternion from (possibly unnormalized) components.

    :param x: the first vector component
    :param y: the second vector component
    :param z: the third vector component
    :param w: the scalar component
    :return: the normalized quaternion
    """

    return quaternion_normalize(Quaternion(float(x), float(y), float(z), float(w)))


def quaternion_identity() -> Quaternion:
    """
    Returns the identity (no rotation) quaternion ``[0, 0, 0, 1]``.
    """

    return Quaternion(0.0, 0.0, 0.0, 1.0)


def quaternion_composite(quaternion_1: Quaternion, quaternion_2: Quaternion) -> Quaternion:
    r"""
    Composes two rotations using the Hamilton product :math:`\mathbf{q}_1\otimes\mathbf{q}_2`.

    With the frame transformation convention of :mod:`.dcm` this means "change frames by ``quaternion_1`` and then by
    ``quaternion_2``", which is the order :func:`.hmat_composite` chains poses in.

    :param quaternion_1: the first rotation
    :param quaternion_2: the additional rotation
    :return: the normalized composite rotation
    """

    q1 = quaternion_1
    q2 = quaternion_2

    composite = Quaternion(x=q1.w * q2.x + q1.x * q2.w + q1.y * q2.z - q1.z * q2.y,
                           y=q1.w * q2.y - q1.x * q2.z + q1.y * q2.w + q1.z * q2.x,
                           z=q1.w * q2.z + q1.x * q2.y - q1.y * q2.x + q1.z * q2.w,
                           w=q1.w * q2.w - q1.x * q2.x - q1.y * q2.y - q1.z * q2.z)

    return quaternion_normalize(composite)


def quaternion_inverse(quaternion: Quaternion) -> Quaternion:
    """
    Inverts a rotation by conjugating the quaternion (negating the vector part) and renormalizing.

    :param quaternion: the rotation to invert
    :return: the inverse rotation
    """

    return quaternion_normalize(Quaternion(-quaternion.x, -quaternion.y, -quaternion.z, quaternion.w))


def _check_order(angles: EulerAngles, order: RotationOrder):
    if angles.order is not order:
        raise ValueError(f'Expected euler angles in {order.name} order but they are tagged {angles.order.name}')


def _clamped_asin(value: float) -> float:
    # pitch at +/- 90 degrees can push the argument just past 1 through rounding
    if abs(value) >= 1:
        return float(np.copysign(np.pi / 2, value))

    return float(np.arcsin(value))


def euler_zyx_to_quaternion(angles: EulerAngles) -> Quaternion:
    """
    Converts yaw-pitch-roll (ZYX order) euler angles into a unit quaternion.

    Degree tagged angles are converted to radians first.

    :param angles: the ZYX tagged angles
    :return: the normalized quaternion
    :raises ValueError: if the angles are tagged with a different rotation order
    """

    _check_order(angles, RotationOrder.ZYX)
    angles = euler_angles_in_radians(angles)

    cy = np.cos(angles.z * 0.5)
    sy = np.sin(angles.z * 0.5)
    cp = np.cos(angles.y * 0.5)
    sp = np.sin(angles.y * 0.5)
    cr = np.cos(angles.x * 0.5)
    sr = np.sin(angles.x * 0.5)

    return quaternion_create(x=sr * cp * cy - cr * sp * sy,
                             y=cr * sp * cy + sr * cp * sy,
                             z=cr * cp * sy - sr * sp * cy,
                             w=cr * cp * cy + sr * sp * sy)


def quaternion_to_euler_zyx(quaternion: Quaternion) -> EulerAngles:
    """
    Converts a quaternion into yaw-pitch-roll (ZYX order) euler angles in radians.

    When the rotation is at gimbal lock (pitch of +/- 90 degrees) the pitch is set to exactly +/- pi/2.

    :param quaternion: the rotation to convert
    :return: ZYX tagged angles in radians
    """

    q = quaternion

    roll = np.arctan2(2.0 * (q.w * q.x + q.y * q.z), 1.0 - 2.0 * (q.x * q.x + q.y * q.y))

    pitch = _clamped_asin(2.0 * (q.w * q.y - q.z * q.x))

    yaw = np.arctan2(2.0 * (q.w * q.z + q.x * q.y), 1.0 - 2.0 * (q.y * q.y + q.z * q.z))

    return EulerAngles(float(roll), pitch, float(yaw), RotationOrder.ZYX, AngleUnit.RADIANS)


def euler_xyz_to_quaternion(angles: EulerAngles) -> Quaternion:
    """
    Converts roll-pitch-yaw (XYZ order) euler angles into a unit quaternion.

    Degree tagged angles are converted to radians first.

    :param angles: the XYZ tagged angles
    :return: the normalized quaternion
    :raises ValueError: if the angles are tagged with a different rotation order
    """

    _check_order(angles, RotationOrder.XYZ)
    angles = euler_angles_in_radians(angles)

    cy = np.cos(angles.z * 0.5)
    sy = np.sin(angles.z * 0.5)
    cp = np.cos(angles.y * 0.5)
    sp = np.sin(angles.y * 0.5)
    cr = np.cos(angles.x * 0.5)
    sr = np.sin(angles.x * 0.5)

    return quaternion_create(x=sr * cp * cy + cr * sp * sy,
                             y=cr * sp * cy - sr * cp * sy,
                             z=cr * cp * sy + sr * sp * cy,
                             w=cr * cp * cy - sr * sp * sy)


def quaternion_to_euler_xyz(quaternion: Quaternion) -> EulerAngles:
    """
    Converts a quaternion into roll-pitch-yaw (XYZ order) euler angles in radians.

    When the rotation is at gimbal lock (pitch of +/- 90 degrees) the pitch is set to exactly +/- pi/2.

    :param quaternion: the rotation to convert
    :return: XYZ tagged angles in radians
    """

    q = quaternion

    roll = np.arctan2(2.0 * (q.w * q.x - q.y * q.z), 1.0 - 2.0 * (q.x * q.x + q.y * q.y))

    pitch = _clamped_asin(2.0 * (q.w * q.y + q.z * q.x))

    yaw = np.arctan2(2.0 * (q.w * q.z - q.x * q.y), 1.0 - 2.0 * (q.y * q.y + q.z * q.z))

    return EulerAngles(float(roll), pitch, float(yaw), RotationOrder.XYZ, AngleUnit.RADIANS)


def euler_to_quaternion(angles: EulerAngles) -> Quaternion:
    """
    Converts euler angles into a quaternion using the closed form matching their order tag.

    :param angles: the tagged angles
    :return: the normalized quaternion
    """

    if angles.order is RotationOrder.ZYX:
        return euler_zyx_to_quaternion(angles)

    elif angles.order is RotationOrder.XYZ:
        return euler_xyz_to_quaternion(angles)

    else:
        raise ValueError('Invalid order')


def quaternion_to_euler(quaternion: Quaternion, order: RotationOrder = RotationOrder.ZYX) -> EulerAngles:
    """
    Converts a quaternion into euler angles in the requested order.

    :param quaternion: the rotation to convert
    :param order: the rotation sequence to express the angles in
    :return: the tagged angles in radians
    """

    order = RotationOrder(order)

    if order is RotationOrder.ZYX:
        return quaternion_to_euler_zyx(quaternion)

    return quaternion_to_euler_xyz(quaternion)


def quaternion_to_axis_angle(quaternion: Quaternion,
                             threshold: float = DEGENERATE_AXIS_THRESHOLD) -> RotAxisAngle:
    r"""
    Converts a quaternion into an axis and an angle.

    The angle and axis are given by

    .. math::
        \theta = 2\text{cos}^{-1}(w) \\
        \hat{\mathbf{a}} = \frac{\left[\begin{array}{ccc}x & y & z\end{array}\right]^T}{\text{sin}(\theta/2)}

    so the angle lies in :math:`[0, 2\pi]`.  For a unit quaternion :math:`\text{sin}(\theta/2)` is the norm of the vector
    part, so the axis is divided by that norm and the angle is evaluated as
    :math:`2\text{tan}^{-1}(\|[x, y, z]\|, w)`.  When that norm is below ``threshold`` the axis is not well
    defined and :data:`CANONICAL_AXIS` is returned with an angle of 0.

    :param quaternion: the unit quaternion to convert
    :param threshold: the vector part norm below which the rotation is treated as degenerate
    :return: the axis-angle representation
    """

    q_vector = quaternion.as_array()[:3]
    q_vector_norm = np.linalg.norm(q_vector)

    if q_vector_norm < threshold:
        return RotAxisAngle(CANONICAL_AXIS, 0.0)

    # same angle as 2 acos(w) for unit quaternions, but accurate for small angles and defined for any w
    angle = 2 * np.arctan2(q_vector_norm, quaternion.w)

    return RotAxisAngle(Vector3.from_array(q_vector / q_vector_norm), float(angle))


def axis_angle_to_quaternion(axis_angle: RotAxisAngle) -> Quaternion:
    """
    Converts an axis and an angle into a unit quaternion.

    The axis is expected to be unit length.  This is not checked.

    :param axis_angle: the rotation to convert
    :return: the normalized quaternion
    """

    half_angle = axis_angle.angle / 2
    scale = np.sin(half_angle)

    return quaternion_create(axis_angle.axis.x * scale,
                             axis_angle.axis.y * scale,
                             axis_angle.axis.z * scale,
                             np.cos(half_angle))
