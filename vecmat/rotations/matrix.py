"""
This module provides the 3x3 matrix value types used by the rotation conversions.

:class:`Matrix3` is a plain row major 3x3 matrix.  :class:`RotationMatrix3` is the same matrix restricted, by caller
contract, to proper rotations (orthonormal with a determinant of +1).  The restriction is never checked; decomposing a
matrix that is not a rotation gives a well defined but meaningless result.
"""

from typing import ClassVar, Self

import numpy as np

from vecmat._typing import ARRAY_LIKE, DOUBLE_ARRAY, EULER_ORDERS
from vecmat.scalar import EPSILON, EPSILON_F, equals_approx
from vecmat.vectors import Vector3, Vector3F
from vecmat.rotations.core.conversions import euler_to_rotmat, quaternion_to_rotmat
from vecmat.rotations.quaternion import Quaternion


__all__ = ['Matrix3', 'Matrix3D', 'Matrix3F', 'RotationMatrix3', 'RotationMatrix3D', 'RotationMatrix3F']


class Matrix3:
    """
    An immutable 3x3 matrix stored row major.

    Elements are read with :meth:`m` (or by indexing with a ``(row, col)`` tuple)::

        >>> from vecmat import Matrix3
        >>> Matrix3.identity().m(1, 1)
        np.float64(1.0)
    """

    dtype: ClassVar[type] = np.float64
    """
    The floating point type the elements are stored as
    """

    epsilon: ClassVar[float] = EPSILON
    """
    The tolerance used by :meth:`equals_approx`
    """

    vector_type: ClassVar[type[Vector3]] = Vector3
    """
    The vector type returned by rows, columns, and matrix-vector products
    """

    __slots__ = ('_data',)

    def __init__(self,
                 m00: float, m01: float, m02: float,
                 m10: float, m11: float, m12: float,
                 m20: float, m21: float, m22: float):

        data = np.array([[m00, m01, m02], [m10, m11, m12], [m20, m21, m22]], dtype=self.dtype)
        data.flags.writeable = False

        self._data = data

    @classmethod
    def from_array(cls, data: ARRAY_LIKE) -> Self:
        """
        Creates a matrix from a 3x3 (or 9 element) array like in row major order.

        :param data: the matrix elements
        :return: the new matrix
        :raises ValueError: if ``data`` does not have exactly 9 elements
        """

        values = np.asarray(data).ravel()

        if values.size != 9:
            raise ValueError(f'A 3x3 matrix needs exactly 9 elements, not {values.size}')

        return cls(*values)

    @classmethod
    def from_rows(cls, row0: ARRAY_LIKE, row1: ARRAY_LIKE, row2: ARRAY_LIKE) -> Self:
        return cls.from_array([np.asarray(row0).ravel(), np.asarray(row1).ravel(), np.asarray(row2).ravel()])

    @classmethod
    def identity(cls) -> Self:
        return cls.from_array(np.eye(3))

    def m(self, row: int, col: int):
        """
        Returns the element at ``row``, ``col`` (both zero based).
        """

        return self._data[row, col]

    def row(self, index: int) -> Vector3:
        return self.vector_type.from_array(self._data[index])

    def column(self, index: int) -> Vector3:
        return self.vector_type.from_array(self._data[:, index])

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns a writeable 3x3 copy of the elements.
        """

        return self._data.copy()

    def transposed(self) -> Self:
        return type(self).from_array(self._data.T)

    def determinant(self) -> float:
        return self.dtype(np.linalg.det(self._data))

    def equals_approx(self, other: 'Matrix3') -> bool:
        """
        Checks if each element is within :attr:`epsilon` of the corresponding element of ``other``.
        """

        return equals_approx(self._data, other._data, self.epsilon)

    def __getitem__(self, index: tuple[int, int]):
        return self._data[index]

    def __matmul__(self, other):
        if isinstance(other, Matrix3):
            return type(self).from_array(self._data @ other._data)

        elif isinstance(other, Vector3):
            return self.vector_type.from_array(self._data @ other.as_array())

        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented

        return bool((self._data == other._data).all())

    def __hash__(self) -> int:
        return hash(tuple(self._data.ravel().tolist()))

    def __repr__(self) -> str:
        return '{}({})'.format(type(self).__name__, ', '.join(repr(v) for v in self._data.ravel().tolist()))


Matrix3D = Matrix3
"""
The double precision 3x3 matrix
"""


class Matrix3F(Matrix3):
    """
    A single precision :class:`Matrix3`.
    """

    dtype = np.float32
    epsilon = EPSILON_F
    vector_type = Vector3F


class RotationMatrix3(Matrix3):
    """
    A 3x3 matrix that represents a rotation.

    Being a rotation (orthonormal with a determinant of +1) is a contract on the caller and is never checked.  The
    matrix rotates column vectors actively, so ``RotationMatrix3.from_quaternion(q) @ v`` rotates ``v`` by ``q``.
    """

    @classmethod
    def from_quaternion(cls, quaternion: Quaternion) -> Self:
        """
        Builds the rotation matrix equivalent to a unit quaternion.

        See :func:`.quaternion_to_rotmat`.

        :param quaternion: the rotation quaternion
        :return: the rotation matrix
        """

        return cls.from_array(quaternion_to_rotmat(quaternion.as_array()))

    @classmethod
    def from_euler(cls, angles: Vector3 | ARRAY_LIKE, order: EULER_ORDERS | str = 'xyz') -> Self:
        """
        Builds the rotation matrix for axis labeled euler angles applied in ``order``.

        The matrix is the product of the elemental rotations (see :func:`.euler_to_rotmat`), so it matches
        ``from_quaternion(Quaternion.from_euler(angles, order))`` up to round off.

        :param angles: the ``(x, y, z)`` rotation angles in radians
        :param order: the order the rotations are applied in
        :return: the rotation matrix
        :raises ValueError: if the order is not recognized or there are not 3 angles
        """

        angles = np.asarray(angles.as_array() if isinstance(angles, Vector3) else angles, dtype=np.float64).ravel()

        return cls.from_array(euler_to_rotmat(angles, order))

    def euler(self, order: EULER_ORDERS | str = 'xyz', clamp: bool = False) -> Vector3:
        """
        Decomposes this rotation into axis labeled euler angles.

        See :meth:`.EulerOrder.to_euler_angles`.
        """

        from vecmat.rotations.euler_order import EulerOrder

        return EulerOrder.parse(order).to_euler_angles(self, clamp=clamp)


RotationMatrix3D = RotationMatrix3
"""
The double precision rotation matrix
"""


class RotationMatrix3F(RotationMatrix3):
    """
    A single precision :class:`RotationMatrix3`.
    """

    dtype = np.float32
    epsilon = EPSILON_F
    vector_type = Vector3F
