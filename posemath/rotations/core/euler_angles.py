# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Euler angle triples tagged with their rotation sequence and angle unit.

The tags are not decoration.  The :attr:`EulerAngles.order` tag says which closed form was used to produce the angles
and therefore which one has to be used to turn them back into a rotation, and the :attr:`EulerAngles.unit` tag says how
the stored numbers are scaled.  The conversions in :mod:`.quaternion_math` dispatch and validate on both.
"""

import warnings

from dataclasses import dataclass, replace
from enum import Enum

import numpy as np


__all__ = ["RotationOrder", "AngleUnit", "EulerAngles", "euler_angles_create",
           "euler_angles_to_radians", "euler_angles_to_degrees", "euler_angles_in_radians"]


class RotationOrder(Enum):
    """
    The rotation sequence an :class:`EulerAngles` triple belongs to.
    """

    ZYX = 'zyx'
    """
    Yaw about z, then pitch about y, then roll about x (``q = q_z ⊗ q_y ⊗ q_x``)
    """

    XYZ = 'xyz'
    """
    Roll about x, then pitch about y, then yaw about z (``q = q_x ⊗ q_y ⊗ q_z``)
    """


class AngleUnit(Enum):
    """
    The scale of the numbers stored in an :class:`EulerAngles` triple.
    """

    DEGREES = 'degrees'
    RADIANS = 'radians'


@dataclass(frozen=True)
class EulerAngles:
    """
    An immutable triple of euler angles.

    ``x`` is the rotation about the x axis (roll), ``y`` the rotation about the y axis (pitch) and ``z`` the rotation
    about the z axis (yaw), regardless of :attr:`order`.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    order: RotationOrder = RotationOrder.ZYX
    unit: AngleUnit = AngleUnit.RADIANS

    def __post_init__(self):
        # accept the enum values ('zyx', 'radians', ...) as well as the members themselves
        object.__setattr__(self, 'order', RotationOrder(self.order))
        object.__setattr__(self, 'unit', AngleUnit(self.unit))


def euler_angles_create(x: float, y: float, z: float,
                        order: RotationOrder = RotationOrder.ZYX,
                        unit: AngleUnit = AngleUnit.RADIANS) -> EulerAngles:
    """
    Creates a tagged euler angle triple.

    :param x: the angle about x
    :param y: the angle about y
    :param z: the angle about z
    :param order: the rotation sequence the angles belong to
    :param unit: the unit the angles are expressed in
    :return: the euler angles
    """

    return EulerAngles(float(x), float(y), float(z), order, unit)


def euler_angles_to_radians(angles: EulerAngles) -> EulerAngles:
    """
    Toggles degree tagged angles into radians.

    Degrees are rescaled and retagged as radians.  Angles that are already tagged as radians keep their values but are
    retagged as degrees, which mislabels them.  Existing callers rely on this toggle so it is left in place, but a
    ``UserWarning`` is issued whenever it happens.  Use :func:`euler_angles_in_radians` when you just want radians.

    :param angles: the angles to convert
    :return: the toggled angles
    """

    if angles.unit is AngleUnit.DEGREES:
        return replace(angles,
                       x=float(np.deg2rad(angles.x)), y=float(np.deg2rad(angles.y)), z=float(np.deg2rad(angles.z)),
                       unit=AngleUnit.RADIANS)

    warnings.warn('euler_angles_to_radians was given angles already in radians.  The values are unchanged but they are '
                  'now tagged as degrees.')

    return replace(angles, unit=AngleUnit.DEGREES)


def euler_angles_to_degrees(angles: EulerAngles) -> EulerAngles:
    """
    Toggles radian tagged angles into degrees.

    This is the mirror of :func:`euler_angles_to_radians` and has the same toggle behaviour: angles already in degrees
    keep their values but are retagged as radians (with a ``UserWarning``).

    :param angles: the angles to convert
    :return: the toggled angles
    """

    if angles.unit is AngleUnit.RADIANS:
        return replace(angles,
                       x=float(np.rad2deg(angles.x)), y=float(np.rad2deg(angles.y)), z=float(np.rad2deg(angles.z)),
                       unit=AngleUnit.DEGREES)

    warnings.warn('euler_angles_to_degrees was given angles already in degrees.  The values are unchanged but they are '
                  'now tagged as radians.')

    return replace(angles, unit=AngleUnit.RADIANS)


def euler_angles_in_radians(angles: EulerAngles) -> EulerAngles:
    """
    Returns the angles expressed in radians without the toggle behaviour.

    :param angles: the angles in either unit
    :return: the same rotation tagged (and scaled) as radians
    """

    if angles.unit is AngleUnit.RADIANS:
        return angles

    return euler_angles_to_radians(angles)
