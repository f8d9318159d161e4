"""
RSA Cipher Operations

Textbook RSA on small didactic numbers, with the calculation steps of
every operation:
- Key pair generation from two primes (and an optional public exponent)
- Encryption / decryption (confidentiality)
- Signing / verification (authenticity)
- Sign-then-encrypt and its inverse (confidentiality + authenticity)

Security Note:
    There is no padding and the key sizes are tiny. This module exists to
    show the arithmetic, not to protect anything.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..errors import (
    DuplicatePrimesError,
    ExponentNotCoprimeError,
    InvalidParameterError,
    MessageOutOfRangeError,
    ModulusMismatchError,
    NoValidExponentFoundError,
    NonPrimeInputError,
)
from .modexp import ModExpStep, mod_exp_with_steps
from .number_theory import EuclideanStep, extended_euclid, gcd, is_prime

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

DEFAULT_EXPONENT_LIMIT = 10  # How many candidate e values to suggest
FIRST_EXPONENT_CANDIDATE = 3


# ============================================================================
# Key Structures (Immutable)
# ============================================================================

@dataclass(frozen=True)
class PublicKey:
    """Public key (e, n)."""
    e: int
    n: int


@dataclass(frozen=True)
class PrivateKey:
    """Private key (d, n)."""
    d: int
    n: int


@dataclass(frozen=True)
class KeyPair:
    public: PublicKey
    private: PrivateKey


@dataclass(frozen=True)
class RsaParameters:
    """
    Complete RSA parameter set.

    n = p*q, totient = (p-1)(q-1), gcd(e, totient) = 1 and
    d*e = 1 (mod totient) with d in [0, totient).
    """
    p: int
    q: int
    n: int
    totient: int
    e: int
    d: int

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(e=self.e, n=self.n)

    @property
    def private_key(self) -> PrivateKey:
        return PrivateKey(d=self.d, n=self.n)

    @property
    def key_pair(self) -> KeyPair:
        return KeyPair(public=self.public_key, private=self.private_key)


@dataclass(frozen=True)
class KeyGenResult:
    """Key generation output, including the trace used to derive d."""
    params: RsaParameters
    key_pair: KeyPair
    euclidean_steps: List[EuclideanStep]


@dataclass(frozen=True)
class OperationResult:
    """
    Result of an RSA operation.

    steps is the square-and-multiply trace of the exponentiation that
    produced output_value. For the combined modes, intermediate_value
    holds the value between the two exponentiations (the signature when
    encrypting, the decrypted signature when decrypting).
    """
    input_value: int
    output_value: int
    steps: List[ModExpStep]
    intermediate_value: Optional[int] = None


# ============================================================================
# Key Generation
# ============================================================================

def _find_public_exponent(totient: int) -> int:
    """First odd e >= 3 below the totient that is coprime with it."""
    for candidate in range(FIRST_EXPONENT_CANDIDATE, totient, 2):
        if gcd(candidate, totient) == 1:
            return candidate
    raise NoValidExponentFoundError(totient)


def generate_key_pair(p: int, q: int, e: Optional[int] = None) -> KeyGenResult:
    """
    Generate an RSA key pair from two primes.

    Computes n = p*q and the totient (p-1)(q-1), picks (or checks) the
    public exponent and derives d with the extended Euclidean algorithm.

    Args:
        p: First prime
        q: Second prime (must differ from p)
        e: Public exponent; when None the smallest odd exponent >= 3
           coprime with the totient is chosen

    Returns:
        KeyGenResult with the parameters, key pair and Euclidean steps

    Raises:
        NonPrimeInputError: If p or q is not prime
        DuplicatePrimesError: If p == q
        NoValidExponentFoundError: If e is None and no exponent exists
        ExponentNotCoprimeError: If gcd(e, totient) != 1
        InvalidParameterError: If e < 1
    """
    if not is_prime(p):
        raise NonPrimeInputError("p", p)
    if not is_prime(q):
        raise NonPrimeInputError("q", q)
    if p == q:
        raise DuplicatePrimesError(p)

    n = p * q
    totient = (p - 1) * (q - 1)

    if e is None:
        e = _find_public_exponent(totient)
    elif e < 1:
        raise InvalidParameterError(f"Public exponent must be positive (got {e})")
    elif gcd(e, totient) != 1:
        raise ExponentNotCoprimeError(e, totient)

    d, steps = extended_euclid(e, totient)

    params = RsaParameters(p=p, q=q, n=n, totient=totient, e=e, d=d)
    logger.debug("Generated RSA parameters %s", params)
    return KeyGenResult(params=params, key_pair=params.key_pair, euclidean_steps=steps)


def get_valid_public_exponents(p: int, q: int, limit: int = DEFAULT_EXPONENT_LIMIT) -> List[int]:
    """
    List the smallest valid public exponents for p and q.

    Scans e = 2 .. totient-1 and keeps values coprime with the totient,
    stopping once limit values are found.

    Returns:
        Up to limit exponents, or [] if p or q is not prime
    """
    if not is_prime(p) or not is_prime(q):
        return []

    totient = (p - 1) * (q - 1)
    valid: List[int] = []
    if limit <= 0:
        return valid

    for candidate in range(2, totient):
        if gcd(candidate, totient) == 1:
            valid.append(candidate)
            if len(valid) >= limit:
                break

    return valid


# ============================================================================
# Operations
# ============================================================================

def _check_range(label: str, value: int, n: int) -> None:
    if value < 0 or value >= n:
        raise MessageOutOfRangeError(label, value, n)


def _check_same_modulus(private_key: PrivateKey, public_key: PublicKey) -> None:
    if private_key.n != public_key.n:
        raise ModulusMismatchError(private_key.n, public_key.n)


def encrypt(message: int, public_key: PublicKey) -> OperationResult:
    """
    RSA encryption: ciphertext = message^e mod n.

    Raises:
        MessageOutOfRangeError: If message is outside [0, n)
    """
    _check_range("Message", message, public_key.n)
    result, steps = mod_exp_with_steps(message, public_key.e, public_key.n)
    return OperationResult(input_value=message, output_value=result, steps=steps)


def decrypt(ciphertext: int, private_key: PrivateKey) -> OperationResult:
    """
    RSA decryption: message = ciphertext^d mod n.

    Raises:
        MessageOutOfRangeError: If ciphertext is outside [0, n)
    """
    _check_range("Ciphertext", ciphertext, private_key.n)
    result, steps = mod_exp_with_steps(ciphertext, private_key.d, private_key.n)
    return OperationResult(input_value=ciphertext, output_value=result, steps=steps)


def sign(message: int, private_key: PrivateKey) -> OperationResult:
    """
    RSA signature: signature = message^d mod n.

    Raises:
        MessageOutOfRangeError: If message is outside [0, n)
    """
    _check_range("Message", message, private_key.n)
    result, steps = mod_exp_with_steps(message, private_key.d, private_key.n)
    return OperationResult(input_value=message, output_value=result, steps=steps)


def verify(signature: int, public_key: PublicKey) -> OperationResult:
    """
    RSA verification: recovered message = signature^e mod n.

    The caller compares output_value with the expected message.

    Raises:
        MessageOutOfRangeError: If signature is outside [0, n)
    """
    _check_range("Signature", signature, public_key.n)
    result, steps = mod_exp_with_steps(signature, public_key.e, public_key.n)
    return OperationResult(input_value=signature, output_value=result, steps=steps)


def encrypt_with_both(message: int, private_key: PrivateKey, public_key: PublicKey) -> OperationResult:
    """
    Sign-then-encrypt: C = (M^d mod n)^e mod n.

    Args:
        message: Message to protect
        private_key: Sender's private key (signing)
        public_key: Public key used to encrypt the signature

    Returns:
        OperationResult whose steps are those of the encryption of the
        signature; intermediate_value is the signature

    Raises:
        ModulusMismatchError: If the two keys have different moduli
        MessageOutOfRangeError: If message is outside [0, n)
    """
    _check_same_modulus(private_key, public_key)
    signature = sign(message, private_key)
    result, steps = mod_exp_with_steps(signature.output_value, public_key.e, public_key.n)
    return OperationResult(
        input_value=message,
        output_value=result,
        steps=steps,
        intermediate_value=signature.output_value,
    )


def decrypt_with_both(ciphertext: int, private_key: PrivateKey, public_key: PublicKey) -> OperationResult:
    """
    Inverse of encrypt_with_both: P = (C^d mod n)^e mod n.

    Decrypts with d to recover the signature, then applies e to verify it.

    Raises:
        ModulusMismatchError: If the two keys have different moduli
        MessageOutOfRangeError: If ciphertext is outside [0, n)
    """
    _check_same_modulus(private_key, public_key)
    decrypted = decrypt(ciphertext, private_key)
    result, steps = mod_exp_with_steps(decrypted.output_value, public_key.e, public_key.n)
    return OperationResult(
        input_value=ciphertext,
        output_value=result,
        steps=steps,
        intermediate_value=decrypted.output_value,
    )
