"""
This module provides the :class:`Quaternion` value type in double and single precision.

Quaternions are stored scalar first as ``(w, x, y, z)`` and the algebra here is a thin object wrapper around the
array routines in :mod:`vecmat.rotations.core.quaternion_math`.
"""

from typing import Any, ClassVar, Iterator, Self

import numpy as np

from vecmat._typing import ARRAY_LIKE, DOUBLE_ARRAY, EULER_ORDERS
from vecmat.scalar import EPSILON, EPSILON_F, equals_approx
from vecmat.vectors import Vector3
from vecmat.rotations.core.quaternion_math import (quaternion_conjugate, quaternion_division, quaternion_inverse,
                                                   quaternion_multiplication)


__all__ = ['Quaternion', 'QuaternionD', 'QuaternionF']


def _is_real_scalar(value: Any) -> bool:
    # python and numpy real numbers as well as 0-d real arrays
    if np.ndim(value) != 0:
        return False

    dtype = np.asarray(value).dtype

    return np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)


class Quaternion:
    r"""
    An immutable quaternion :math:`w + x\mathbf{i} + y\mathbf{j} + z\mathbf{k}`.

    A quaternion represents a rotation when it has unit length, but none of the algebraic operations here require
    (or preserve) that.  The components are stored as numpy scalars of :attr:`dtype`, so numeric edge cases such as
    dividing by zero produce infinities or NaN instead of raising.

    Most operations accept either another quaternion or the 4 components of one::

        >>> from vecmat import Quaternion
        >>> q = Quaternion(1.2, 1.4, -2.1, 3.0)
        >>> q.multiply(0.3, -1.5, 1.1, 0.0) == q.multiply(Quaternion(0.3, -1.5, 1.1, 0.0))
        True

    The operators ``+``, ``-``, ``*``, and ``/`` are overloaded as well.  Multiplication by another quaternion is the
    Hamilton product (see :func:`.quaternion_multiplication`) and, for rotations, ``q * p`` applies ``p`` first and
    then ``q``.  Every operation returns a new instance of the receiver's type.
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

    # make numpy scalars on the left of an operator defer to the reflected methods here
    __array_ufunc__ = None

    def __init__(self, w: float, x: float, y: float, z: float):
        """
        :param w: the scalar (real) component
        :param x: the i component
        :param y: the j component
        :param z: the k component
        """

        data = np.array([w, x, y, z], dtype=self.dtype)
        data.flags.writeable = False

        self._data = data

    @classmethod
    def from_array(cls, data: ARRAY_LIKE) -> Self:
        """
        Creates a quaternion from a scalar first 4 element array like.

        :param data: the components ``[w, x, y, z]``
        :return: the new quaternion
        :raises ValueError: if ``data`` does not have exactly 4 elements
        """

        values = np.asarray(data).ravel()

        if values.size != 4:
            raise ValueError(f'A quaternion needs exactly 4 components, not {values.size}')

        return cls(*values)

    @classmethod
    def identity(cls) -> Self:
        """
        Returns the identity quaternion ``(1, 0, 0, 0)``, which represents no rotation.
        """

        return cls(1, 0, 0, 0)

    @classmethod
    def from_euler(cls, angles: Vector3 | ARRAY_LIKE, order: EULER_ORDERS | str = 'xyz') -> Self:
        """
        Creates a rotation quaternion from axis labeled euler angles.

        See :meth:`.EulerOrder.to_quaternion`.

        :param angles: the ``(x, y, z)`` rotation angles in radians
        :param order: the order the rotations are applied in
        :return: the rotation quaternion
        """

        from vecmat.rotations.euler_order import EulerOrder

        return EulerOrder.parse(order).to_quaternion(angles, quaternion_type=cls)

    @property
    def w(self):
        return self._data[0]

    @property
    def x(self):
        return self._data[1]

    @property
    def y(self):
        return self._data[2]

    @property
    def z(self):
        return self._data[3]

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns a writeable copy of the components as a scalar first numpy array.
        """

        return self._data.copy()

    def _new(self, data: ARRAY_LIKE) -> Self:
        return type(self).from_array(data)

    def _operand(self, args: tuple) -> DOUBLE_ARRAY:
        # a quaternion, a 4 element array like, or 4 separate components
        if len(args) == 1:
            other = args[0]

            if isinstance(other, Quaternion):
                return other._data

            values = np.asarray(other, dtype=self.dtype).ravel()

        elif len(args) == 4:
            values = np.asarray(args, dtype=self.dtype)

        else:
            raise TypeError(f'Expected a quaternion or 4 components, got {len(args)} arguments')

        if values.size != 4:
            raise ValueError(f'A quaternion needs exactly 4 components, not {values.size}')

        return values

    def plus(self, *other) -> Self:
        """
        Adds a quaternion (or 4 components) to this one component wise.
        """

        return self._new(self._data + self._operand(other))

    def minus(self, *other) -> Self:
        """
        Subtracts a quaternion (or 4 components) from this one component wise.
        """

        return self._new(self._data - self._operand(other))

    def negated(self) -> Self:
        """
        Returns the quaternion with every component negated.
        """

        return self._new(-self._data)

    def multiplied_by(self, scalar: float) -> Self:
        """
        Multiplies every component by ``scalar``.
        """

        return self._new(self._data * self.dtype(scalar))

    def divided_by(self, scalar: float) -> Self:
        """
        Divides every component by ``scalar``.

        This is the same as multiplying by ``1/scalar``.  A zero scalar results in infinite or NaN components.
        """

        with np.errstate(divide='ignore', invalid='ignore'):
            return self.multiplied_by(self.dtype(1) / self.dtype(scalar))

    def multiply(self, *other) -> Self:
        """
        Computes the Hamilton product of this quaternion (on the left) and a quaternion (or 4 components).

        See :func:`.quaternion_multiplication`.
        """

        return self._new(quaternion_multiplication(self._data, self._operand(other)))

    def divide(self, *other) -> Self:
        r"""
        Divides this quaternion by a quaternion (or 4 components) from the right.

        The result :math:`\mathbf{r}` satisfies ``self == r * other``.  Dividing by a zero quaternion results in NaN
        components.  See :func:`.quaternion_division`.
        """

        return self._new(quaternion_division(self._data, self._operand(other)))

    def conjugate(self) -> Self:
        """
        Returns the conjugate, which negates the vector portion.
        """

        return self._new(quaternion_conjugate(self._data))

    def inverse(self) -> Self:
        """
        Returns the multiplicative inverse.

        See :func:`.quaternion_inverse`.
        """

        return self._new(quaternion_inverse(self._data))

    def dot(self, *other) -> float:
        """
        Computes the 4 dimensional dot product with a quaternion (or 4 components).
        """

        return self.dtype(np.dot(self._data, self._operand(other)))

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return self.dtype(np.sqrt(self.length_squared()))

    def normalized(self) -> Self:
        """
        Returns this quaternion scaled to unit length.  The zero quaternion normalizes to NaN.
        """

        return self.divided_by(self.length())

    def is_normalized(self) -> bool:
        return equals_approx(self.length_squared(), 1, self.epsilon)

    def euler(self, order: EULER_ORDERS | str = 'xyz') -> Vector3:
        """
        Returns the axis labeled euler angles of the rotation this quaternion represents.

        See :meth:`.EulerOrder.to_euler_angles`.

        :param order: the order the rotations are applied in
        :return: the ``(x, y, z)`` angles in radians
        """

        from vecmat.rotations.euler_order import EulerOrder

        return EulerOrder.parse(order).to_euler_angles(self)

    def equals(self, *other) -> bool:
        """
        Checks if this quaternion is exactly equal to a quaternion (or 4 components).
        """

        return bool((self._data == self._operand(other)).all())

    def equals_approx(self, other: 'Quaternion') -> bool:
        """
        Checks if each component is within :attr:`epsilon` of the corresponding component of ``other``.

        NaN components never compare equal.
        """

        return equals_approx(self._data, self._operand((other,)), self.epsilon)

    def __add__(self, other) -> Self:
        if isinstance(other, Quaternion):
            return self.plus(other)

        return NotImplemented

    def __sub__(self, other) -> Self:
        if isinstance(other, Quaternion):
            return self.minus(other)

        return NotImplemented

    def __neg__(self) -> Self:
        return self.negated()

    def __mul__(self, other) -> Self:
        if isinstance(other, Quaternion):
            return self.multiply(other)

        elif _is_real_scalar(other):
            return self.multiplied_by(other)

        return NotImplemented

    def __rmul__(self, other) -> Self:
        if _is_real_scalar(other):
            return self.multiplied_by(other)

        return NotImplemented

    def __truediv__(self, other) -> Self:
        if isinstance(other, Quaternion):
            return self.divide(other)

        elif _is_real_scalar(other):
            return self.divided_by(other)

        return NotImplemented

    def __getitem__(self, index: int):
        return self._data[index]

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return 4

    def __eq__(self, other) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented

        return self.equals(other)

    def __hash__(self) -> int:
        return hash(tuple(self._data.tolist()))

    def __repr__(self) -> str:
        return '{}({!r}, {!r}, {!r}, {!r})'.format(type(self).__name__, *self._data.tolist())


QuaternionD = Quaternion
"""
The double precision quaternion
"""


class QuaternionF(Quaternion):
    """
    A single precision :class:`Quaternion`.
    """

    dtype = np.float32
    epsilon = EPSILON_F
