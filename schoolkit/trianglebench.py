"""Triangle benchmark: count integer triangles with a 60 degree angle."""

from __future__ import annotations

import math


def _smallest_prime_factors(limit: int) -> list[int]:
    factors = list(range(limit + 1))
    for prime in range(2, math.isqrt(limit) + 1):
        if factors[prime] == prime:
            for multiple in range(prime * prime, limit + 1, prime):
                if factors[multiple] == multiple:
                    factors[multiple] = prime
    return factors


def _exponents_of_three_squared(value: int, factors: list[int]) -> dict[int, int]:
    """Prime exponents of 3 * value**2."""
    exponents = {3: 1}
    while value > 1:
        prime = factors[value]
        value //= prime
        exponents[prime] = exponents.get(prime, 0) + 2
    return exponents


def _divisors(exponents: dict[int, int]) -> list[int]:
    divisors = [1]
    for prime, exponent in exponents.items():
        powers = [prime**power for power in range(exponent + 1)]
        divisors = [divisor * power for divisor in divisors for power in powers]
    return divisors


def run(calc: int) -> int:
    """Count pairs a <= b <= min(a*a, calc) where a*a - a*b + b*b is a square.

    Every b equal to a counts. For b > a the identity
    (2b - a)**2 + 3a**2 = (2c)**2 turns each solution into a factor pair
    u * v = 3a**2, so solutions are found from the divisors of 3a**2.
    """
    if calc < 1:
        return 0
    factors = _smallest_prime_factors(calc)
    count = 0
    for a in range(1, calc + 1):
        upper = min(a * a, calc)
        count += 1
        product = 3 * a * a
        for u in _divisors(_exponents_of_three_squared(a, factors)):
            v = product // u
            if u >= v or (u + v) % 4:
                continue
            d = (v - u) // 2
            if d <= a or (d - a) % 2:
                continue
            if (d + a) // 2 <= upper:
                count += 1
    return count