# SPDX-FileCopyrightText: 2025 fixedrational contributors
# SPDX-License-Identifier: Apache-2.0

import pytest
from fixedrational import Rational

@pytest.fixture
def samples():
    """Rationals covering both signs, zero, integers and mixed denominators."""
    return [
        Rational(0),
        Rational(1),
        Rational(-1),
        Rational(1, 2),
        Rational(-1, 3),
        Rational(5, 6),
        Rational(7, -4),
        Rational(-22, -7),
        Rational(1000, 999),
    ]

def pytest_assertrepr_compare(op, left, right):
    if isinstance(left, Rational) and isinstance(right, Rational) and op == "==":
        ret = [f"{left!r} == {right!r}"]
        if left.numerator != right.numerator:
            ret.append(f"Mismatch numerator: {left.numerator} != {right.numerator}")
        if left.denominator != right.denominator:
            ret.append(f"Mismatch denominator: {left.denominator} != {right.denominator}")
        ret.append(f"compare: {left.compare(right)}")
        return ret
