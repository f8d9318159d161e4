"""
Number Theory Primitives

Implements the integer arithmetic RSA key generation is built on:
- Primality testing (trial division over the 6k±1 wheel)
- Greatest common divisor (Euclidean algorithm)
- Extended Euclidean Algorithm with a row-by-row trace
- Modular inverse

Note: Inputs are small didactic numbers. Trial division is exact, which
      keeps the classroom examples deterministic.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EuclideanStep:
    """
    One row of the extended Euclidean algorithm table.

    Invariants: r = r1 - q*r2 and t = t1 - q*t2.
    """
    q: int   # Quotient
    r1: int  # First remainder
    r2: int  # Second remainder
    r: int   # New remainder
    t1: int  # First coefficient
    t2: int  # Second coefficient
    t: int   # New coefficient


def is_prime(n: int) -> bool:
    """
    Deterministic primality test by trial division.

    Multiples of 2 and 3 are rejected up front; the remaining candidate
    divisors are 6k-1 and 6k+1 up to floor(sqrt(n)).

    Time complexity: O(sqrt(n))

    Args:
        n: Number to test

    Returns:
        True if n is prime, False otherwise (always False for n <= 1)
    """
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6

    return True


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by Euclidean recursion.

    Args:
        a: First integer
        b: Second integer

    Returns:
        GCD of a and b (gcd(a, 0) = a)
    """
    if b == 0:
        return a
    return gcd(b, a % b)


def extended_euclid(a: int, m: int) -> Tuple[int, List[EuclideanStep]]:
    """
    Modular inverse of a modulo m via the extended Euclidean algorithm.

    Starting from r1 = m, r2 = a, t1 = 0, t2 = 1, each iteration computes
    q = r1 // r2, r = r1 - q*r2, t = t1 - q*t2, records the row and then
    shifts (r1, r2) <- (r2, r) and (t1, t2) <- (t2, t). The loop stops
    when r2 reaches 0; the inverse is the final t1.

    The result is only a true inverse when gcd(a, m) = 1. Callers that
    cannot guarantee this should use mod_inverse().

    Args:
        a: The number to invert
        m: The modulus

    Returns:
        Tuple (inverse, steps) with inverse normalized into [0, m)
    """
    if m == 1:
        return 0, []

    r1, r2 = m, a
    t1, t2 = 0, 1
    steps: List[EuclideanStep] = []

    while r2 > 0:
        q = r1 // r2
        r = r1 - q * r2
        t = t1 - q * t2

        steps.append(EuclideanStep(q=q, r1=r1, r2=r2, r=r, t1=t1, t2=t2, t=t))

        r1, r2 = r2, r
        t1, t2 = t2, t

    inverse = t1 % m
    logger.debug("extended_euclid(%d, %d) = %d in %d steps", a, m, inverse, len(steps))
    return inverse, steps


def mod_inverse(a: int, m: int) -> int:
    """
    Compute the modular multiplicative inverse of a modulo m.

    Raises:
        ValueError: If the inverse doesn't exist (gcd(a, m) != 1)
    """
    g = gcd(a % m, m)
    if g != 1:
        raise ValueError(f"Modular inverse doesn't exist (gcd({a}, {m}) = {g})")

    inverse, _ = extended_euclid(a % m, m)
    return inverse
