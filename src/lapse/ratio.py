""" exact ordering of rational tick periods """

import numbers
from fractions import Fraction
from functools import lru_cache


def as_ratio(r):
    """normalize a Fraction, int or (num, den) tuple of ints into a positive (num, den) pair"""
    if isinstance(r, tuple):
        num, den = r
        assert isinstance(num, numbers.Integral) and isinstance(den, numbers.Integral), \
            f"period tuple must hold integers, got {r!r}"
    else:
        # floats only approximate decimal periods like 0.001
        assert isinstance(r, numbers.Rational), f"period must be a Fraction or int, got {r!r}"
        r = Fraction(r)
        num, den = r.numerator, r.denominator
    assert num > 0 and den > 0, f"period must be positive, got {num}/{den}"
    return int(num), int(den)


@lru_cache(maxsize=1024)
def _less(r1, r2):
    (n1, d1), (n2, d2) = r1, r2
    return n1 * d2 < n2 * d1


# R1 op R2 <==> n1/d1 op n2/d2 <==> n1*d2 op n2*d1, everything derived from 'less'

def ratio_less(r1, r2):
    return _less(as_ratio(r1), as_ratio(r2))


def ratio_less_equal(r1, r2):
    return not ratio_less(r2, r1)


def ratio_greater(r1, r2):
    return ratio_less(r2, r1)


def ratio_greater_equal(r1, r2):
    return not ratio_less(r1, r2)


def ratio_equal(r1, r2):
    return not ratio_less(r1, r2) and not ratio_less(r2, r1)


def ratio_not_equal(r1, r2):
    return not ratio_equal(r1, r2)
