# SPDX-FileCopyrightText: 2025 fixedrational contributors
# SPDX-License-Identifier: Apache-2.0

import logging
import operator
from numbers import Integral
import numpy as np
from public import public

log = logging.getLogger(__name__)

#: Integer type of the stored numerator and denominator.
storage_dtype = np.int32
#: Integer type of all intermediate results. Must hold the product of two
#: storage_dtype values.
wide_dtype = np.int64

@public
class InvalidRational(ZeroDivisionError):
    """Raised when a rational number would get a zero denominator."""
    pass

@public
def gcd(a, b):
    """
    Greatest common divisor of the non-negative integers a and b
    (Euclidean algorithm). gcd(0, b) is b.
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd is defined for non-negative integers only, got {a}, {b}.")
    while a != 0:
        a, b = b % a, a
    return b

def _narrow(value):
    info = np.iinfo(storage_dtype)
    if not info.min <= value <= info.max:
        log.debug("Rejected %s: outside of %s range.", value, info.dtype)
        raise OverflowError(f"{value} does not fit into {info.dtype}.")
    return int(value)

def _widen(value):
    if not isinstance(value, Integral):
        raise TypeError(f"Expected integer, got {type(value).__name__}.")
    return wide_dtype(_narrow(value))

def _normalize(n, d):
    """
    Reduces the wide_dtype pair (n, d) to lowest terms with positive
    denominator and narrows both components to storage_dtype.
    """
    if d == 0:
        log.debug("Rejected %s/%s: zero denominator.", n, d)
        raise InvalidRational(f"Denominator of {n}/{d} is zero.")
    g = gcd(abs(n), abs(d))
    n = n // g
    d = d // g
    if d < 0:
        n = -n
        d = -d
    return _narrow(n), _narrow(d)

def _ordering(op):
    def method(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return op(self.compare(other), 0)
    method.__name__ = f"__{op.__name__}__"
    return method

@public
class Rational:
    """
    Exact rational number with fixed-width components.

    Values are immutable and always kept in canonical form: numerator and
    denominator share no common factor and the denominator is positive.
    Both components must fit into :data:`storage_dtype` (32 bit signed).

    - Rational(3, 6) and Rational(-1, -2) are both stored as 1/2.
    - Rational(5) is 5/1.
    - +, -, * and / accept another Rational or an int on the right hand side.
      int + Rational and int * Rational work as well; int - Rational and
      int / Rational do not.
    - All intermediate results are computed in :data:`wide_dtype` (64 bit).
      A result that does not fit into :data:`storage_dtype` after reduction
      raises OverflowError.
    - Equality with anything that is not a Rational (including int) is False.
    - str() yields "numerator/denominator", e.g. "-3/4".
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator, denominator=1):
        self._numerator, self._denominator = _normalize(_widen(numerator), _widen(denominator))

    @classmethod
    def from_integer(cls, value):
        """Returns value/1."""
        return cls(value, 1)

    @classmethod
    def _from_wide(cls, n, d):
        obj = cls.__new__(cls)
        obj._numerator, obj._denominator = _normalize(n, d)
        return obj

    @classmethod
    def _coerce(cls, value):
        if isinstance(value, Rational):
            return value
        elif isinstance(value, Integral):
            return cls.from_integer(value)
        else:
            raise TypeError(f"Unsupported operand type: {type(value).__name__}.")

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def _lcm(self, other):
        d1 = wide_dtype(self._denominator)
        d2 = wide_dtype(other._denominator)
        return (d1 // gcd(d1, d2)) * d2

    def _scaled(self, other):
        """
        Returns (a, b, l): l is the lcm of both denominators, a and b are the
        numerators of self and other scaled to denominator l.
        """
        l = self._lcm(other)
        a = (l // self._denominator) * wide_dtype(self._numerator)
        b = (l // other._denominator) * wide_dtype(other._numerator)
        return a, b, l

    def lcm(self, other) -> int:
        """Least common multiple of the denominators of self and other."""
        return int(self._lcm(self._coerce(other)))

    def add(self, other) -> 'Rational':
        a, b, l = self._scaled(self._coerce(other))
        return self._from_wide(a + b, l)

    def subtract(self, other) -> 'Rational':
        a, b, l = self._scaled(self._coerce(other))
        return self._from_wide(a - b, l)

    def multiply(self, other) -> 'Rational':
        other = self._coerce(other)
        return self._from_wide(
            wide_dtype(self._numerator) * other._numerator,
            wide_dtype(self._denominator) * other._denominator,
        )

    def divide(self, other) -> 'Rational':
        """Raises InvalidRational if other is zero."""
        other = self._coerce(other)
        return self._from_wide(
            wide_dtype(self._numerator) * other._denominator,
            wide_dtype(self._denominator) * other._numerator,
        )

    def compare(self, other) -> int:
        """Returns -1, 0 or 1 if self is less than, equal to or greater than other."""
        a, b, _ = self._scaled(self._coerce(other))
        return int(a > b) - int(a < b)

    def __add__(self, other):
        if not isinstance(other, (Rational, Integral)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        # Addition commutes: i + r == r + i.
        if not isinstance(other, Integral):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, (Rational, Integral)):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, (Rational, Integral)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not isinstance(other, Integral):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, (Rational, Integral)):
            return NotImplemented
        return self.divide(other)

    def __neg__(self):
        return self._from_wide(-wide_dtype(self._numerator), wide_dtype(self._denominator))

    __lt__ = _ordering(operator.lt)
    __le__ = _ordering(operator.le)
    __gt__ = _ordering(operator.gt)
    __ge__ = _ordering(operator.ge)

    def __eq__(self, other):
        if not isinstance(other, Rational):
            return False
        return self.compare(other) == 0

    def __hash__(self):
        return hash((self._numerator, self._denominator))

    def __str__(self):
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self):
        return f"{type(self).__name__}({self._numerator}, {self._denominator})"

public(R = Rational) # alias
