# unitalg.core.rational

from __future__ import annotations

from dataclasses import dataclass


def _gcd(a: int, b: int) -> int:
    # Euclid; gcd(0, d) == d so 0/d reduces to 0/1
    while b != 0:
        a, b = b, a % b
    return a


def _is_int(x: object) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


@dataclass(frozen=True, slots=True)
class Rational:
    """
    Exact non-negative fraction, always held in lowest terms.

    Construction reduces immediately, so two rationals with the same value
    compare (and hash) equal regardless of how they were written. Plain
    ``int`` operands are promoted and stay exact; ``float`` operands give a
    ``float``.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        if not (_is_int(self.numerator) and _is_int(self.denominator)):
            raise TypeError(
                "Rational components must be int, got "
                f"{type(self.numerator).__name__}/{type(self.denominator).__name__}"
            )
        if self.denominator == 0:
            raise ZeroDivisionError("Zero is an invalid denominator.")
        if self.numerator < 0 or self.denominator < 0:
            raise ValueError(
                f"Rational must be non-negative, got {self.numerator}/{self.denominator}"
            )
        g = _gcd(self.numerator, self.denominator)
        object.__setattr__(self, "numerator", self.numerator // g)
        object.__setattr__(self, "denominator", self.denominator // g)

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: Rational | int | float) -> Rational | float:
        if _is_int(other):
            other = Rational(other)
        if isinstance(other, Rational):
            return Rational(
                self.numerator * other.numerator,
                self.denominator * other.denominator,
            )
        if isinstance(other, float):
            return self.numerator / self.denominator * other
        return NotImplemented

    def __rmul__(self, other: int | float) -> Rational | float:
        if _is_int(other):
            return Rational(other) * self
        if isinstance(other, float):
            return other * self.numerator / self.denominator
        return NotImplemented

    def __truediv__(self, other: Rational | int | float) -> Rational | float:
        if _is_int(other):
            other = Rational(other)
        if isinstance(other, Rational):
            if other.numerator == 0:
                raise ZeroDivisionError("Cannot divide by a zero-valued Rational.")
            return Rational(
                self.numerator * other.denominator,
                self.denominator * other.numerator,
            )
        if isinstance(other, float):
            return self.numerator / self.denominator / other
        return NotImplemented

    def __rtruediv__(self, other: int | float) -> Rational | float:
        if _is_int(other):
            return Rational(other) / self
        if isinstance(other, float):
            return other * self.denominator / self.numerator
        return NotImplemented

    # Named aliases for the operators above
    def multiply(self, other: Rational) -> Rational:
        return self * other

    def divide(self, other: Rational) -> Rational:
        return self / other

    # --- Conversions ---
    def to_float(self) -> float:
        """Lossy conversion, meant for display and output boundaries only."""
        return self.numerator / self.denominator

    def __float__(self) -> float:
        return self.to_float()

    @property
    def is_one(self) -> bool:
        return self.numerator == self.denominator

    def __str__(self) -> str:
        # same spelling the definition table uses for exact coefficients
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}|{self.denominator}"


ONE = Rational(1, 1)

__all__ = ["Rational", "ONE"]
