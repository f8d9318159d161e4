"""
Error taxonomy for the cipher engines.

All errors derive from CipherError, which is a ValueError: every failure
is caused by an input the caller can correct and resubmit.
"""


class CipherError(ValueError):
    """Base class for recoverable cipher input errors."""
    pass


# RSA

class NonPrimeInputError(CipherError):
    """A parameter that must be prime failed the primality test."""

    def __init__(self, name: str, value: int):
        self.name = name
        self.value = value
        super().__init__(f"{name.upper()} must be a prime number (got {value})")


class DuplicatePrimesError(CipherError):
    """The two RSA primes are equal."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"P and Q must be different prime numbers (both are {value})")


class ExponentNotCoprimeError(CipherError):
    """The public exponent shares a factor with the totient."""

    def __init__(self, e: int, totient: int):
        self.e = e
        self.totient = totient
        super().__init__(f"The selected e={e} is not coprime with φ(n)={totient}")


class NoValidExponentFoundError(CipherError):
    """No candidate public exponent is coprime with the totient."""

    def __init__(self, totient: int):
        self.totient = totient
        super().__init__(f"Could not find a valid public exponent e for φ(n)={totient}")


class MessageOutOfRangeError(CipherError):
    """An RSA operand falls outside [0, n)."""

    def __init__(self, label: str, value: int, n: int):
        self.label = label
        self.value = value
        self.n = n
        super().__init__(f"{label} must be between 0 and {n - 1} (got {value})")


class ModulusMismatchError(CipherError):
    """The private and public keys of a combined operation use different moduli."""

    def __init__(self, private_n: int, public_n: int):
        self.private_n = private_n
        self.public_n = public_n
        super().__init__(
            f"Private key modulus {private_n} does not match public key modulus {public_n}"
        )


# Classical ciphers

class InvalidPlayfairInputError(CipherError):
    """Blank key or text, bad separator, or an unpaired trailing letter."""
    pass


class LetterNotFoundError(CipherError):
    """A letter is missing from the Playfair matrix."""

    def __init__(self, letter: str):
        self.letter = letter
        super().__init__(f"Letter {letter!r} not found in matrix")


class InvalidParameterError(CipherError):
    """Any other parameter outside its accepted domain."""
    pass
