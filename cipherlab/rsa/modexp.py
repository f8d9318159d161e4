"""
Fast Modular Exponentiation

Square-and-multiply over the binary digits of the exponent, recording
one step per digit so the whole computation can be tabulated.

Algorithm (per binary digit, starting at bit 0):
1. Record the current power p = base^(2^i) mod modulus
2. Square it: p_squared = p * p, p_mod = p_squared mod modulus
3. If the bit is 1, multiply it into the running result
4. Continue with p <- p_mod

Note: Python's built-in pow(a, b, mod) is not used here; the
      point is to expose every intermediate value.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModExpStep:
    """One bit-processing step of square-and-multiply."""
    bit_index: int  # Position of the bit, 0 = least significant
    bit: int
    p: int  # Power before squaring
    p_squared: int
    p_mod: int
    multiply_product: Optional[int]  # result * p, only when bit == 1
    running_result: int


def to_binary(exponent: int) -> str:
    """Binary digits of a non-negative exponent, most significant first."""
    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    return format(exponent, "b")


def mod_exp_with_steps(base: int, exponent: int, modulus: int) -> Tuple[int, List[ModExpStep]]:
    """
    Modular exponentiation with a full step trace.

    The trace has exactly one step per binary digit of the exponent,
    including the leading 1 bit, whose squaring is recorded even though
    its result is never used.

    Example:
        >>> result, steps = mod_exp_with_steps(9, 17, 77)
        >>> result, len(steps)
        (4, 5)

    Args:
        base: The base number
        exponent: The exponent (must be non-negative)
        modulus: The modulus (must be positive)

    Returns:
        Tuple (base^exponent mod modulus, steps). A modulus of 1 yields
        (0, []).

    Raises:
        ValueError: If exponent < 0 or modulus <= 0
    """
    if modulus <= 0:
        raise ValueError("Modulus must be positive")
    bits = to_binary(exponent)
    if modulus == 1:
        return 0, []

    result = 1
    p = base % modulus
    steps: List[ModExpStep] = []

    # Consume bits from the least significant end so p is always base^(2^i)
    for bit_index, digit in enumerate(reversed(bits)):
        bit = int(digit)
        p_squared = p * p
        p_mod = p_squared % modulus

        multiply_product = None
        if bit == 1:
            multiply_product = result * p
            result = multiply_product % modulus

        steps.append(ModExpStep(
            bit_index=bit_index,
            bit=bit,
            p=p,
            p_squared=p_squared,
            p_mod=p_mod,
            multiply_product=multiply_product,
            running_result=result,
        ))
        p = p_mod

    logger.debug("%d^%d mod %d = %d (%d steps)", base, exponent, modulus, result, len(steps))
    return result, steps


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """Compute (base^exponent) mod modulus, discarding the trace."""
    result, _ = mod_exp_with_steps(base, exponent, modulus)
    return result
