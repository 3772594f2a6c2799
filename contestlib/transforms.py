"""Fast Fourier transform over complex numbers and number-theoretic transform."""

from __future__ import annotations

from collections.abc import Sequence

NTT_MODULUS = 479 * (1 << 21) + 1
NTT_GENERATOR = 3


def _check_power_of_two(n: int) -> None:
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")


def fft(values: Sequence[complex], root: complex) -> list[complex]:
    """Evaluate ``sum(values[k] * root**(i*k))`` for every i, recursively.

    ``root`` should be a primitive n-th root of unity, n = len(values), a power of two.
    """
    n = len(values)
    _check_power_of_two(n)
    if n == 1:
        return [complex(values[0])]
    squared = root * root
    even = fft(values[0::2], squared)
    odd = fft(values[1::2], squared)
    half = n // 2
    out = [0j] * n
    x = 1 + 0j
    for i, (e, o) in enumerate(zip(even, odd)):
        out[i] = e + x * o
        out[i + half] = e - x * o
        x *= root
    return out


def ntt(values: Sequence[int], invert: bool = False) -> list[int]:
    """Number-theoretic transform modulo ``NTT_MODULUS``; ``invert`` applies the inverse."""
    a = [v % NTT_MODULUS for v in values]
    n = len(a)
    _check_power_of_two(n)
    if (NTT_MODULUS - 1) % n:
        raise ValueError("length exceeds the largest supported transform size")
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            a[i], a[j] = a[j], a[i]
    length = 2
    while length <= n:
        step = pow(NTT_GENERATOR, (NTT_MODULUS - 1) // length, NTT_MODULUS)
        if invert:
            step = pow(step, NTT_MODULUS - 2, NTT_MODULUS)
        half = length // 2
        for start in range(0, n, length):
            w = 1
            for k in range(start, start + half):
                u = a[k]
                v = a[k + half] * w % NTT_MODULUS
                a[k] = (u + v) % NTT_MODULUS
                a[k + half] = (u - v) % NTT_MODULUS
                w = w * step % NTT_MODULUS
        length <<= 1
    if invert:
        n_inv = pow(n, NTT_MODULUS - 2, NTT_MODULUS)
        a = [x * n_inv % NTT_MODULUS for x in a]
    return a


def multiply_polynomials(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the coefficients of ``a * b`` modulo ``NTT_MODULUS``."""
    if not a or not b:
        return []
    size = 1
    while size <= len(a) + len(b):
        size *= 2
    fa = ntt(list(a) + [0] * (size - len(a)))
    fb = ntt(list(b) + [0] * (size - len(b)))
    product = ntt([x * y % NTT_MODULUS for x, y in zip(fa, fb)], invert=True)
    return product[: len(a) + len(b) - 1]