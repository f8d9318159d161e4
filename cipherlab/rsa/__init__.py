# RSA Module
"""
RSA implementations including:
- Primality test, GCD and extended Euclidean algorithm - number_theory.py
- Square-and-multiply modular exponentiation - modexp.py
- Key generation and RSA operations - rsa_cipher.py
"""

from .number_theory import (
    EuclideanStep,
    is_prime,
    gcd,
    extended_euclid,
    mod_inverse,
)

from .modexp import (
    ModExpStep,
    mod_exp,
    mod_exp_with_steps,
    to_binary,
)

from .rsa_cipher import (
    DEFAULT_EXPONENT_LIMIT,
    PublicKey,
    PrivateKey,
    KeyPair,
    RsaParameters,
    KeyGenResult,
    OperationResult,
    generate_key_pair,
    get_valid_public_exponents,
    encrypt,
    decrypt,
    sign,
    verify,
    encrypt_with_both,
    decrypt_with_both,
)

__all__ = [
    # Number theory
    'EuclideanStep',
    'is_prime',
    'gcd',
    'extended_euclid',
    'mod_inverse',
    # Modular exponentiation
    'ModExpStep',
    'mod_exp',
    'mod_exp_with_steps',
    'to_binary',
    # RSA
    'DEFAULT_EXPONENT_LIMIT',
    'PublicKey',
    'PrivateKey',
    'KeyPair',
    'RsaParameters',
    'KeyGenResult',
    'OperationResult',
    'generate_key_pair',
    'get_valid_public_exponents',
    'encrypt',
    'decrypt',
    'sign',
    'verify',
    'encrypt_with_both',
    'decrypt_with_both',
]
