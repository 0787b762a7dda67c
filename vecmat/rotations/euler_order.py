r"""
This module provides the :class:`EulerOrder` enumeration, the hub for converting between rotation matrices, rotation
quaternions, and euler angles.

Euler angles are carried as a :class:`.Vector3` of ``(x, y, z)`` radians, one rotation per coordinate axis.  The
vector itself does not say which axis is applied first, so the same angles describe different rotations under
different orders.  For an order named ``IJK`` the rotation is the product
:math:`\mathbf{q}_I(\theta_I)\otimes\mathbf{q}_J(\theta_J)\otimes\mathbf{q}_K(\theta_K)` (equivalently
:math:`\mathbf{R}_I\mathbf{R}_J\mathbf{R}_K`), so the rightmost axis is applied to a vector first.

All six orders share the same decomposition and composition routines in :mod:`vecmat.rotations.core.conversions`,
selected by the axis indices and parity of the order.
"""

from enum import Enum
from typing import Self

import numpy as np

from vecmat._typing import ARRAY_LIKE
from vecmat.vectors import Vector3
from vecmat.rotations.core._helpers import _euler_axes, _euler_parity
from vecmat.rotations.core.conversions import euler_to_quaternion, rotmat_to_euler
from vecmat.rotations.matrix import Matrix3, RotationMatrix3, RotationMatrix3F
from vecmat.rotations.quaternion import Quaternion


__all__ = ['EulerOrder']


class EulerOrder(str, Enum):
    """
    The six orders euler angles can be applied in.

    Each member is a stateless converter::

        >>> from vecmat import EulerOrder
        >>> q = EulerOrder.ZYX.to_quaternion(0.1, 0.2, 0.3)
        >>> EulerOrder.ZYX.to_euler_angles(q)
        Vector3(0.1, 0.2, 0.3)

    (up to round off).  Members compare equal to their lowercase axis strings, so ``EulerOrder.XYZ == 'xyz'``.
    """

    XYZ = 'xyz'
    XZY = 'xzy'
    YXZ = 'yxz'
    YZX = 'yzx'
    ZXY = 'zxy'
    ZYX = 'zyx'

    @classmethod
    def parse(cls, order: 'EulerOrder | str') -> Self:
        """
        Interprets ``order`` as an :class:`EulerOrder`, ignoring case for strings.

        :param order: the order or its name
        :return: the matching member
        :raises ValueError: if ``order`` does not name one of the six orders
        """

        if isinstance(order, cls):
            return order

        try:
            return cls(str(order).lower())
        except ValueError:
            raise ValueError(f'Invalid order {order!r}.  Must be one of {", ".join(m.name for m in cls)}') from None

    @property
    def axes(self) -> tuple[int, int, int]:
        """
        The axis indices (0 for x, 1 for y, 2 for z) in the order they appear in the rotation product.
        """

        return _euler_axes(self.value)

    @property
    def parity(self) -> int:
        """
        +1 for the cyclic orders (XYZ, YZX, ZXY) and -1 for the others.
        """

        return _euler_parity(self.axes)

    def to_euler_angles(self, rotation: Matrix3 | Quaternion, clamp: bool = False) -> Vector3:
        """
        Decomposes a rotation matrix or a rotation quaternion into axis labeled euler angles for this order.

        A quaternion is first converted with :meth:`.RotationMatrix3.from_quaternion`.  The matrix must be a proper
        rotation; this is not checked.  At gimbal lock the outer two angles are not unique and one valid choice is
        returned.  A middle angle whose sine drifts outside of ``[-1, 1]`` is NaN unless ``clamp`` is ``True``.  That
        includes rotations composed at exactly +/- pi/2 for the middle axis, where round off in the quaternion to matrix
        conversion often pushes the sine just past 1, so use ``clamp=True`` near gimbal lock.  See
        :func:`.rotmat_to_euler`.

        :param rotation: the rotation to decompose
        :param clamp: whether to clip the arcsine argument to ``[-1, 1]`` first
        :return: the ``(x, y, z)`` angles in radians, in the precision of the input
        :raises TypeError: if ``rotation`` is neither a matrix nor a quaternion
        """

        if isinstance(rotation, Quaternion):
            matrix_type = RotationMatrix3F if rotation.dtype == np.float32 else RotationMatrix3
            rotation = matrix_type.from_quaternion(rotation)

        elif not isinstance(rotation, Matrix3):
            raise TypeError(f'Expected a Matrix3 or a Quaternion, not {type(rotation).__name__}')

        return rotation.vector_type.from_array(rotmat_to_euler(rotation.as_array(), self.value, clamp=clamp))

    def to_quaternion(self, x: float | Vector3 | ARRAY_LIKE, y: float | None = None, z: float | None = None,
                      quaternion_type: type[Quaternion] = Quaternion) -> Quaternion:
        """
        Composes axis labeled euler angles into a rotation quaternion for this order.

        The angles can be given either as 3 scalars or as a single 3 element vector.  See
        :func:`.euler_to_quaternion`.

        :param x: the rotation about the x axis in radians, or all three angles
        :param y: the rotation about the y axis in radians
        :param z: the rotation about the z axis in radians
        :param quaternion_type: the quaternion type (precision) to return
        :return: the rotation quaternion
        :raises ValueError: if only some of ``y`` and ``z`` are given or the vector does not have 3 elements
        """

        if y is None and z is None:
            angles = np.asarray(list(x) if isinstance(x, Vector3) else x, dtype=np.float64).ravel()

            if angles.size != 3:
                raise ValueError(f'Exactly 3 euler angles are required, not {angles.size}')

        elif y is None or z is None:
            raise ValueError('Either all three angles or a single angle vector must be given')

        else:
            angles = np.array([x, y, z], dtype=np.float64)

        return quaternion_type.from_array(euler_to_quaternion(angles, self.value))

    def __str__(self) -> str:
        return self.name
