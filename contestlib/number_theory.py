"""Number theory: sieves, modular arithmetic, primality and factorisation."""

from __future__ import annotations

import math
import random

_MILLER_RABIN_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_RHO_ITERATIONS = 2000


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _tdiv(a, b)


def sieve(limit: int = 10_000_000) -> list[int]:
    """Return the primes below ``limit`` (2 is always included)."""
    half = limit // 2
    flags = bytearray([1]) * max(half, 0)
    primes = [2]
    for i in range(1, half):
        if not flags[i]:
            continue
        p = 2 * i + 1
        primes.append(p)
        start = 3 * i + 1
        flags[start::p] = bytes(len(range(start, half, p)))
    return primes


def smallest_prime_factors(limit: int) -> list[int]:
    """Return a table ``spf`` of length ``limit`` with the least prime factor of each n.

    ``spf[0]`` is 0 and ``spf[1]`` is 1; a prime maps to itself.
    """
    spf = list(range(max(limit, 0)))
    for i in range(2, math.isqrt(max(limit - 1, 0)) + 1):
        if spf[i] != i:
            continue
        for j in range(i * i, limit, i):
            if spf[j] == j:
                spf[j] = i
    return spf


def extended_euclid(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(s, t, g)`` with ``s*a + t*b == g == gcd(a, b)``."""
    s, old_s = 0, 1
    t, old_t = 1, 0
    r, old_r = b, a
    while r:
        q = _tdiv(old_r, r)
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
        old_r, r = r, _tmod(old_r, r)
    if a < 0:
        old_s, old_t, old_r = -old_s, -old_t, -old_r
    return old_s, old_t, old_r


def mod(a: int, n: int) -> int:
    """Return ``a`` reduced modulo ``n`` into a non-negative residue."""
    r = _tmod(a, n)
    return r + n if r < 0 else r


def modmul(a: int, b: int, n: int) -> int:
    """Return ``a * b`` modulo ``n``."""
    return mod(mod(a, n) * mod(b, n), n)


def modpow(base: int, exponent: int, n: int) -> int:
    """Return ``base ** exponent`` modulo ``n``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(mod(base, n), exponent, n)


def mod_inverse(a: int, n: int) -> int:
    """Return the inverse of ``a`` modulo ``n``; raise ValueError if none exists."""
    b, _, g = extended_euclid(a, n)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {n}")
    return mod(b, n)


def chinese_remainder_theorem(x: int, a: int, y: int, b: int) -> tuple[int, int]:
    """Find ``(z, m)`` with ``z = a (mod x)``, ``z = b (mod y)``, unique modulo ``m``.

    Raises ValueError when the congruences are inconsistent.
    """
    s, t, d = extended_euclid(x, y)
    if _tmod(a, d) != _tmod(b, d):
        raise ValueError("congruences have no common solution")
    m = x * y
    z = (modmul(modmul(s, b, m), x, m) + modmul(modmul(t, a, m), y, m)) % m
    return _tdiv(z, d), _tdiv(m, d)


def linear_diophantine(a: int, b: int, c: int) -> tuple[int, int]:
    """Return integers ``(x, y)`` with ``a*x + b*y == c``; raise ValueError if none."""
    d = math.gcd(a, b)
    if d == 0 or c % d:
        raise ValueError(f"{a}x + {b}y = {c} has no integer solution")
    x = (c // d) * mod_inverse(a // d, b // d)
    y = (c - a * x) // b
    return x, y


def modular_linear_equation_solver(a: int, b: int, n: int) -> list[int]:
    """Return every ``x`` in ``[0, n)`` with ``a*x = b (mod n)``, in increasing order."""
    x, _, d = extended_euclid(a, n)
    if _tmod(b, d) != 0:
        return []
    step = _tdiv(n, d)
    x0 = mod(x * _tdiv(b, d), step)
    return [x0 + i * step for i in range(d)]


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for all n below 2**64."""
    if n <= 1:
        return False
    for p in _MILLER_RABIN_BASES:
        if p == n:
            return True
        if n % p == 0:
            return False
    c, g = n - 1, 0
    while c % 2 == 0:
        c //= 2
        g += 1
    for p in _MILLER_RABIN_BASES:
        k = pow(p, c, n)
        for _ in range(g):
            kk = k * k % n
            if kk == 1 and k != 1 and k != n - 1:
                return False
            k = kk
        if k != 1:
            return False
    return True


def pollard_rho(n: int, rng: random.Random | None = None) -> int:
    """Try to find a divisor of ``n``; may return 1 or ``n`` when the attempt fails."""
    if n % 2 == 0:
        return 2
    rng = rng or random.Random()
    x = xx = rng.randrange(n)
    c = rng.randrange(n)
    d = 1
    for _ in range(_RHO_ITERATIONS):
        x = (x * x + c) % n
        xx = (xx * xx + c) % n
        xx = (xx * xx + c) % n
        d = math.gcd(abs(x - xx), n)
        if d != 1 and d != n:
            break
    return d


def factorize(n: int, rng: random.Random | None = None) -> list[int]:
    """Return the prime factors of ``n`` with multiplicity, in ascending order."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    rng = rng or random.Random()
    factors: list[int] = []
    pending = [n]
    while pending:
        m = pending.pop()
        if m == 1:
            continue
        if is_prime(m):
            factors.append(m)
            continue
        d = pollard_rho(m, rng)
        while d in (1, m):
            d = pollard_rho(m, rng)
        pending.extend((d, m // d))
    return sorted(factors)


def partition_count(n: int) -> int:
    """Return the number of integer partitions of ``n`` (pentagonal number theorem)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    dp = [1] + [0] * n
    for i in range(1, n + 1):
        total = 0
        j, sign = 1, 1
        while (k := (3 * j * j - j) // 2) <= i:
            total += sign * dp[i - k]
            k2 = (3 * j * j + j) // 2
            if k2 <= i:
                total += sign * dp[i - k2]
            j += 1
            sign = -sign
        dp[i] = total
    return dp[n]