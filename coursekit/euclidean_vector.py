"""Fixed-dimension Euclidean vectors with arithmetic, norms and unit vectors."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real


class EuclideanVectorError(Exception):
    """Raised when an operation on a Euclidean vector is not valid."""


class EuclideanVector:
    """A vector of floating-point magnitudes with a fixed number of dimensions."""

    __slots__ = ("_magnitudes",)
    __hash__ = None  # mutable

    def __init__(self, dimensions: int = 1, magnitude: float = 0.0) -> None:
        if dimensions < 0:
            raise ValueError(f"dimensions must not be negative, got {dimensions}")
        self._magnitudes: list[float] = [float(magnitude)] * dimensions

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> EuclideanVector:
        """Build a vector whose magnitudes are the given values, in order."""
        vector = cls(0)
        vector._magnitudes = [float(value) for value in values]
        return vector

    @property
    def dimensions(self) -> int:
        """The number of dimensions."""
        return len(self._magnitudes)

    def __len__(self) -> int:
        return len(self._magnitudes)

    def __iter__(self) -> Iterator[float]:
        return iter(self._magnitudes)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._magnitudes):
            raise IndexError(f"index {index} out of range for {len(self._magnitudes)} dimensions")

    def __getitem__(self, index: int) -> float:
        self._check_index(index)
        return self._magnitudes[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._check_index(index)
        self._magnitudes[index] = float(value)

    def _checked_at(self, index: int) -> None:
        if not 0 <= index < len(self._magnitudes):
            raise EuclideanVectorError(
                f"Index {index} is not valid for this EuclideanVector object"
            )

    def at(self, index: int) -> float:
        """Return the magnitude at ``index``, raising EuclideanVectorError if out of range."""
        self._checked_at(index)
        return self._magnitudes[index]

    def set_at(self, index: int, value: float) -> None:
        """Set the magnitude at ``index``, raising EuclideanVectorError if out of range."""
        self._checked_at(index)
        self._magnitudes[index] = float(value)

    def copy(self) -> EuclideanVector:
        """Return an independent copy."""
        return EuclideanVector.from_iterable(self._magnitudes)

    def move(self) -> EuclideanVector:
        """Transfer the contents to a new vector, leaving this one with no dimensions."""
        moved = EuclideanVector(0)
        moved._magnitudes, self._magnitudes = self._magnitudes, []
        return moved

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        return self._magnitudes == other._magnitudes

    def _require_same_dimensions(self, other: EuclideanVector) -> None:
        if self.dimensions != other.dimensions:
            raise EuclideanVectorError(
                f"Dimensions of LHS({self.dimensions}) and RHS({other.dimensions}) do not match"
            )

    def __add__(self, other: EuclideanVector) -> EuclideanVector:
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        self._require_same_dimensions(other)
        return EuclideanVector.from_iterable(a + b for a, b in zip(self, other))

    def __sub__(self, other: EuclideanVector) -> EuclideanVector:
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        self._require_same_dimensions(other)
        return EuclideanVector.from_iterable(a - b for a, b in zip(self, other))

    def __iadd__(self, other: EuclideanVector) -> EuclideanVector:
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        self._require_same_dimensions(other)
        self._magnitudes = [a + b for a, b in zip(self, other)]
        return self

    def __isub__(self, other: EuclideanVector) -> EuclideanVector:
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        self._require_same_dimensions(other)
        self._magnitudes = [a - b for a, b in zip(self, other)]
        return self

    def __mul__(self, other):
        """Dot product with another vector, or scaling by a number."""
        if isinstance(other, EuclideanVector):
            self._require_same_dimensions(other)
            return sum(a * b for a, b in zip(self, other))
        if isinstance(other, Real):
            return EuclideanVector.from_iterable(a * other for a in self)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return EuclideanVector.from_iterable(a * other for a in self)
        return NotImplemented

    def __imul__(self, scalar: float) -> EuclideanVector:
        if not isinstance(scalar, Real):
            return NotImplemented
        self._magnitudes = [a * scalar for a in self._magnitudes]
        return self

    def __truediv__(self, scalar: float) -> EuclideanVector:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise EuclideanVectorError("Invalid vector division by 0")
        return EuclideanVector.from_iterable(a / scalar for a in self)

    def __itruediv__(self, scalar: float) -> EuclideanVector:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise EuclideanVectorError("Invalid vector division by 0")
        self._magnitudes = [a / scalar for a in self._magnitudes]
        return self

    def __str__(self) -> str:
        return "[" + " ".join(format(a, "g") for a in self._magnitudes) + "]"

    def __repr__(self) -> str:
        return f"EuclideanVector.from_iterable({self._magnitudes!r})"

    def to_list(self) -> list[float]:
        """Return the magnitudes as a new list."""
        return list(self._magnitudes)

    def norm(self) -> float:
        """Return the Euclidean norm."""
        if not self._magnitudes:
            raise EuclideanVectorError("EuclideanVector with no dimensions does not have a norm")
        return math.sqrt(sum(a * a for a in self._magnitudes))

    def unit_vector(self) -> EuclideanVector:
        """Return the vector scaled to a norm of 1."""
        if not self._magnitudes:
            raise EuclideanVectorError(
                "EuclideanVector with no dimensions does not have a unit vector"
            )
        length = self.norm()
        if length == 0:
            raise EuclideanVectorError(
                "EuclideanVector with euclidean normal of 0 does not have a unit vector"
            )
        return EuclideanVector.from_iterable(a / length for a in self._magnitudes)