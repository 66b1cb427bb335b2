"""
Vector3 class for 3D math operations.

The same type is used for:
- Points in 3D space
- Direction vectors
- Linear RGB color values

Components are stored in single precision. Division by a zero scalar and
normalization of the zero vector raise ZeroDivisionError instead of producing
inf/NaN; every other operation follows plain IEEE semantics.
"""

from __future__ import annotations
from typing import Optional, Union
import numpy as np

DTYPE = np.float32


class Vec3:
    """A 3D vector backed by a small numpy array."""

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=DTYPE)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from a copy of a numpy array."""
        v = cls.__new__(cls)
        v._data = np.array(arr, dtype=DTYPE)
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data))

    __hash__ = None

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3.from_array(self._data + other._data)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3.from_array(self._data - other._data)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data * other._data)
        return Vec3.from_array(self._data * other)

    def __rmul__(self, other: float) -> Vec3:
        return Vec3.from_array(other * self._data)

    def __truediv__(self, other: float) -> Vec3:
        if other == 0.0:
            raise ZeroDivisionError("Vec3 division by zero")
        return Vec3.from_array(self._data / other)

    # In-place variants mutate the receiver's buffer
    def __iadd__(self, other: Vec3) -> Vec3:
        self._data += other._data
        return self

    def __isub__(self, other: Vec3) -> Vec3:
        self._data -= other._data
        return self

    def __imul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            self._data *= other._data
        else:
            self._data *= other
        return self

    def __itruediv__(self, other: float) -> Vec3:
        if other == 0.0:
            raise ZeroDivisionError("Vec3 division by zero")
        self._data /= other
        return self

    def length(self) -> float:
        """Return the Euclidean norm of the vector."""
        return float(np.sqrt(self.length_squared()))

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        return float(np.dot(self._data, self._data))

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction.

        Raises:
            ZeroDivisionError: if this is the zero vector
        """
        length = self.length()
        if length == 0.0:
            raise ZeroDivisionError("cannot normalize the zero vector")
        return self / length

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vec3) -> Vec3:
        """Compute the right-handed cross product with another vector."""
        ax, ay, az = self._data
        bx, by, bz = other._data
        return Vec3.from_array(np.array([
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        ]))

    def entrywise(self, other: Vec3) -> Vec3:
        """Componentwise product, used to tint colors."""
        return self * other

    def copy(self) -> Vec3:
        """Return an independent vector with the same components."""
        return Vec3.from_array(self._data)

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()

    @staticmethod
    def random(
        min_val: float = 0.0,
        max_val: float = 1.0,
        rng: Optional[np.random.Generator] = None
    ) -> Vec3:
        """Generate a random vector with components uniform in [min_val, max_val).

        Args:
            min_val: Lower bound for every component
            max_val: Upper bound for every component
            rng: Generator to draw from (process-wide numpy state if None)
        """
        source = rng if rng is not None else np.random
        return Vec3.from_array(source.uniform(min_val, max_val, 3))

    @staticmethod
    def random_in_unit_sphere(rng: Optional[np.random.Generator] = None) -> Vec3:
        """Generate a random point strictly inside the unit sphere.

        Rejection sampling from the enclosing cube; about two draws on average.
        """
        while True:
            p = Vec3.random(-1.0, 1.0, rng)
            if p.length_squared() < 1.0:
                return p


# Convenience type aliases
Point3 = Vec3
Color = Vec3
