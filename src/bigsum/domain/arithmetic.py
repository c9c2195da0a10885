"""Schoolbook arithmetic on decimal digit sequences.

Magnitudes are plain strings of ASCII digits, most significant first,
with no leading zero unless the value is exactly ``"0"``.  No operand is
ever converted to a machine integer; each routine walks the digits from
the least-significant end, carrying or borrowing one place at a time.
"""

from __future__ import annotations

from itertools import zip_longest

from bigsum.domain.integers import ZERO, SignedInteger, strip_leading_zeros
from bigsum.domain.types import Ordering, Sign

_ZERO_ORD = ord("0")


def compare_magnitudes(a: str, b: str) -> Ordering:
    """Order two normalized magnitudes.

    Without leading zeros a longer sequence is always larger; equal-length
    sequences compare character by character at the same place value.
    """
    if len(a) != len(b):
        return Ordering.GREATER if len(a) > len(b) else Ordering.LESS
    if a == b:
        return Ordering.EQUAL
    return Ordering.GREATER if a > b else Ordering.LESS


def add_magnitudes(a: str, b: str) -> str:
    """Sum two magnitudes with right-to-left carry propagation."""
    out: list[str] = []
    carry = 0
    for da, db in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = (ord(da) - _ZERO_ORD) + (ord(db) - _ZERO_ORD) + carry
        carry, digit = divmod(total, 10)
        out.append(chr(_ZERO_ORD + digit))
    if carry:
        out.append(chr(_ZERO_ORD + carry))
    return "".join(reversed(out))


def sub_magnitudes(minuend: str, subtrahend: str) -> str:
    """Difference ``minuend - subtrahend`` with right-to-left borrow.

    The caller guarantees ``compare_magnitudes(minuend, subtrahend)`` is not
    ``LESS``.  The result is re-normalized, collapsing to ``"0"``.
    """
    out: list[str] = []
    borrow = 0
    for dm, ds in zip_longest(reversed(minuend), reversed(subtrahend), fillvalue="0"):
        diff = (ord(dm) - _ZERO_ORD) - (ord(ds) - _ZERO_ORD) - borrow
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        out.append(chr(_ZERO_ORD + diff))
    return strip_leading_zeros("".join(reversed(out)))


def add_signed(a: SignedInteger, b: SignedInteger) -> SignedInteger:
    """Add two signed values.

    Equal signs add magnitudes under the common sign.  Differing signs
    subtract the smaller magnitude from the larger, and the operand whose
    magnitude compares ``GREATER`` supplies the sign.  Equal magnitudes
    with opposite signs cancel to :data:`ZERO`.
    """
    if a.sign is b.sign:
        magnitude = add_magnitudes(a.magnitude, b.magnitude)
        if magnitude == "0":
            return ZERO
        return SignedInteger(sign=a.sign, magnitude=magnitude)

    ordering = compare_magnitudes(a.magnitude, b.magnitude)
    if ordering is Ordering.EQUAL:
        return ZERO
    larger, smaller = (a, b) if ordering is Ordering.GREATER else (b, a)
    return SignedInteger(
        sign=larger.sign,
        magnitude=sub_magnitudes(larger.magnitude, smaller.magnitude),
    )


def compare_signed(a: SignedInteger, b: SignedInteger) -> Ordering:
    """Order two signed values.

    Any positive value (zero included) is greater than any negative one;
    between two negatives the larger magnitude is the smaller value.
    """
    if a.sign is not b.sign:
        return Ordering.GREATER if a.sign is Sign.POSITIVE else Ordering.LESS
    ordering = compare_magnitudes(a.magnitude, b.magnitude)
    if a.sign is Sign.NEGATIVE:
        return ordering.reversed()
    return ordering
