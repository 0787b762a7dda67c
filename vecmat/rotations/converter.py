"""
This module provides a configurable euler angle converter.

:class:`.EulerOrder` members are stateless and always behave the same way.  When the same conversion settings need to
be used in many places (the order, whether to clamp the arcsine argument for nearly orthonormal matrices, and the
precision of the quaternions produced) they can be bundled into an :class:`EulerConverter` instead::

    >>> from vecmat.rotations import EulerConverter, EulerConverterOptions
    >>> converter = EulerConverter(EulerConverterOptions(order='zyx', clamp_asin=True))
    >>> angles = converter.to_euler_angles(converter.to_quaternion([0.1, 0.2, 0.3]))
"""

import logging

from dataclasses import dataclass

import numpy as np

from vecmat._typing import ARRAY_LIKE
from vecmat.vectors import Vector3
from vecmat.utilities.options import UserOptions
from vecmat.utilities.mixin_classes import UserOptionConfigured
from vecmat.rotations.euler_order import EulerOrder
from vecmat.rotations.matrix import Matrix3
from vecmat.rotations.quaternion import Quaternion


__all__ = ['EulerConverterOptions', 'EulerConverter']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


@dataclass
class EulerConverterOptions(UserOptions):
    """
    This dataclass serves as one way to control the settings for the :class:`.EulerConverter` class.

    You can set any of the options on an instance of this dataclass and pass it to the :class:`.EulerConverter` at
    initialization (or through the method :meth:`.EulerConverter.reset_settings`) to set the settings on the class.
    """

    order: EulerOrder | str = EulerOrder.XYZ
    """
    The order the rotations are applied in.  Strings are interpreted case insensitively.
    """

    clamp_asin: bool = False
    """
    Whether to clip the arcsine argument to [-1, 1] when decomposing.

    Leaving this ``False`` reproduces the plain decomposition, where a matrix that is only nearly orthonormal can give a
    NaN middle angle.  Setting it to ``True`` changes that behavior and returns +/- pi/2 instead.
    """

    quaternion_type: type[Quaternion] = Quaternion
    """
    The quaternion type (and therefore precision) produced by :meth:`.EulerConverter.to_quaternion`.
    """

    def override_options(self):
        self.order = EulerOrder.parse(self.order)


class EulerConverter(UserOptionConfigured[EulerConverterOptions], EulerConverterOptions):
    """
    Converts between euler angles and rotations using a fixed set of options.

    All of the settings on :class:`.EulerConverterOptions` are available as attributes of this class and may be changed
    directly.  :meth:`reset_settings` restores the settings the instance was created with.
    """

    def __init__(self, options: EulerConverterOptions | None = None):
        """
        :param options: the options to configure the converter with.  If ``None`` the defaults are used.
        """

        super().__init__(EulerConverterOptions, options=options)

    def to_euler_angles(self, rotation: Matrix3 | Quaternion) -> Vector3:
        """
        Decomposes a rotation matrix or quaternion into axis labeled euler angles in the configured order.

        :param rotation: the rotation to decompose
        :return: the ``(x, y, z)`` angles in radians
        """

        order = EulerOrder.parse(self.order)

        angles = order.to_euler_angles(rotation, clamp=self.clamp_asin)

        if np.isnan(angles.as_array()).any():
            _LOGGER.warning(f'Decomposing {rotation!r} for order {order} produced NaN angles.  The input is probably '
                            'not an orthonormal rotation (consider clamp_asin)')

        return angles

    def to_quaternion(self, angles: Vector3 | ARRAY_LIKE) -> Quaternion:
        """
        Composes axis labeled euler angles into a rotation quaternion in the configured order.

        :param angles: the ``(x, y, z)`` angles in radians
        :return: the rotation quaternion of type :attr:`quaternion_type`
        """

        return EulerOrder.parse(self.order).to_quaternion(angles, quaternion_type=self.quaternion_type)

    def round_trip(self, angles: Vector3 | ARRAY_LIKE) -> Vector3:
        """
        Composes the angles into a quaternion and decomposes them again.

        Away from gimbal lock this returns the input angles (up to round off).  At gimbal lock it returns the
        equivalent decomposition this converter would produce, which is useful for canonicalizing angle triples.

        :param angles: the ``(x, y, z)`` angles in radians
        :return: the canonical ``(x, y, z)`` angles
        """

        _LOGGER.debug(f'Round tripping {angles!r} through order {self.order}')

        return self.to_euler_angles(self.to_quaternion(angles))
