"""
This module provides the 3 element vector value type used to carry euler angles and rotated vectors.

Only the pieces the rotation code consumes are provided here: construction, component access, the dot product, and
comparison.
"""

from typing import ClassVar, Iterator, Self

import numpy as np

from vecmat._typing import ARRAY_LIKE, DOUBLE_ARRAY
from vecmat.scalar import EPSILON, EPSILON_F, equals_approx


__all__ = ['Vector3', 'Vector3D', 'Vector3F']


class Vector3:
    """
    An immutable 3 element vector.

    The components are stored as numpy scalars of :attr:`dtype` so that arithmetic follows IEEE-754 semantics.  Every
    operation returns a new instance of the same type as the receiver.

        >>> from vecmat import Vector3
        >>> Vector3(1, 2, 3).dot(Vector3(4, 5, 6))
        np.float64(32.0)
    """

    dtype: ClassVar[type] = np.float64
    """
    The floating point type the components are stored as
    """

    epsilon: ClassVar[float] = EPSILON
    """
    The tolerance used by :meth:`equals_approx`
    """

    __slots__ = ('_data',)

    def __init__(self, x: float, y: float, z: float):
        """
        :param x: the x component
        :param y: the y component
        :param z: the z component
        """

        data = np.array([x, y, z], dtype=self.dtype)
        data.flags.writeable = False

        self._data = data

    @classmethod
    def from_array(cls, data: ARRAY_LIKE) -> Self:
        """
        Creates a vector from any 3 element array like.

        :param data: the 3 components
        :return: the new vector
        :raises ValueError: if ``data`` does not have exactly 3 elements
        """

        values = np.asarray(data).ravel()

        if values.size != 3:
            raise ValueError(f'A Vector3 needs exactly 3 components, not {values.size}')

        return cls(*values)

    @property
    def x(self):
        return self._data[0]

    @property
    def y(self):
        return self._data[1]

    @property
    def z(self):
        return self._data[2]

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns a writeable copy of the components as a numpy array.
        """

        return self._data.copy()

    def dot(self, other: 'Vector3') -> float:
        """
        Computes the dot product between this vector and ``other``.

        :param other: the other vector
        :return: the dot product
        """

        return self.dtype(np.dot(self._data, other._data))

    def equals(self, x: float, y: float, z: float) -> bool:
        """
        Checks if the components of this vector are exactly equal to the given values.
        """

        return bool(self._data[0] == x and self._data[1] == y and self._data[2] == z)

    def equals_approx(self, other: 'Vector3') -> bool:
        """
        Checks if each component of this vector is within :attr:`epsilon` of the corresponding component of ``other``.

        NaN components never compare equal.
        """

        return equals_approx(self._data, other._data, self.epsilon)

    def __getitem__(self, index: int):
        return self._data[index]

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return 3

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented

        return bool((self._data == other._data).all())

    def __hash__(self) -> int:
        return hash(tuple(self._data.tolist()))

    def __repr__(self) -> str:
        return '{}({!r}, {!r}, {!r})'.format(type(self).__name__, *self._data.tolist())


Vector3D = Vector3
"""
The double precision 3 element vector
"""


class Vector3F(Vector3):
    """
    A single precision :class:`Vector3`.
    """

    dtype = np.float32
    epsilon = EPSILON_F
