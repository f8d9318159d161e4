"""
Playfair Cipher

Digraph substitution over a 5x5 key square:
- The key square holds the unique key letters followed by the rest of
  the alphabet, with I and J sharing one cell
- Plaintext is split into letter pairs; equal adjacent letters are kept
  apart by a separator letter
- Each pair is replaced using the row, column or rectangle rule

This is for EDUCATIONAL/DEMONSTRATION purposes only.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Tuple

from ..errors import InvalidPlayfairInputError, LetterNotFoundError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MATRIX_SIZE = 5
MATRIX_ALPHABET = "abcdefghiklmnopqrstuvwxyz"  # no j
DEFAULT_SEPARATOR = "x"

_NON_LETTERS = re.compile(r"[^a-z]")

Matrix = Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class Digraph:
    plaintext_pair: str
    ciphertext_pair: str


@dataclass(frozen=True)
class PlayfairResult:
    """
    Output of a Playfair encryption or decryption.

    processed_text is the normalized input that was actually split into
    digraphs; output_text is the concatenation of the substituted pairs.
    """
    matrix: Matrix
    processed_text: str
    output_text: str
    digraphs: List[Digraph]


def normalize(text: str) -> str:
    """Lowercase, drop everything but a-z, and fold j into i."""
    return _NON_LETTERS.sub("", text.lower()).replace("j", "i")


# ============================================================================
# Key Square
# ============================================================================

def build_matrix(key: str) -> Matrix:
    """
    Build the 5x5 key square.

    Example:
        >>> build_matrix("monarchy")[0]
        ('m', 'o', 'n', 'a', 'r')
    """
    letters = list(dict.fromkeys(normalize(key)))
    letters.extend(ch for ch in MATRIX_ALPHABET if ch not in letters)

    return tuple(
        tuple(letters[row * MATRIX_SIZE:(row + 1) * MATRIX_SIZE])
        for row in range(MATRIX_SIZE)
    )


def locate(matrix: Matrix, letter: str) -> Tuple[int, int]:
    """
    Find the (row, column) of a letter in the key square.

    Raises:
        LetterNotFoundError: If the letter is not in the square
    """
    target = letter.lower()
    if target == "j":
        target = "i"

    for row in range(MATRIX_SIZE):
        for col in range(MATRIX_SIZE):
            if matrix[row][col] == target:
                return row, col

    raise LetterNotFoundError(letter)


# ============================================================================
# Plaintext Preparation
# ============================================================================

def prepare_plaintext(text: str, separator: str = DEFAULT_SEPARATOR, pad_if_odd: bool = True) -> str:
    """
    Normalize plaintext for digraph splitting.

    Inserts the separator between every two equal adjacent letters and,
    if pad_if_odd is set, appends one more separator when the result has
    odd length.
    """
    letters = normalize(text)

    prepared = []
    for i, ch in enumerate(letters):
        prepared.append(ch)
        if i + 1 < len(letters) and letters[i + 1] == ch:
            prepared.append(separator)

    if len(prepared) % 2 != 0 and pad_if_odd:
        prepared.append(separator)

    return "".join(prepared)


def digraphs(text: str) -> List[str]:
    """
    Split text into consecutive pairs.

    An odd-length text yields a final one-letter residual, which the
    substitution rules cannot handle.
    """
    return [text[i:i + 2] for i in range(0, len(text), 2)]


# ============================================================================
# Digraph Substitution
# ============================================================================

def _substitute(matrix: Matrix, pair: str, step: int) -> str:
    if len(pair) != 2:
        raise InvalidPlayfairInputError(
            f"Digraph must have exactly two letters (got {pair!r})"
        )

    row1, col1 = locate(matrix, pair[0])
    row2, col2 = locate(matrix, pair[1])

    if row1 == row2:
        col1 = (col1 + step) % MATRIX_SIZE
        col2 = (col2 + step) % MATRIX_SIZE
    elif col1 == col2:
        row1 = (row1 + step) % MATRIX_SIZE
        row2 = (row2 + step) % MATRIX_SIZE
    else:
        col1, col2 = col2, col1

    return matrix[row1][col1] + matrix[row2][col2]


def encrypt_digraph(matrix: Matrix, pair: str) -> str:
    """
    Encrypt one digraph.

    Rules (exactly one applies):
    - Same row: each letter moves one column right, wrapping
    - Same column: each letter moves one row down, wrapping
    - Otherwise: the letters swap columns, keeping their rows
    """
    return _substitute(matrix, pair, 1)


def decrypt_digraph(matrix: Matrix, pair: str) -> str:
    """Decrypt one digraph (row: left, column: up, rectangle: swap)."""
    return _substitute(matrix, pair, -1)


# ============================================================================
# Cipher
# ============================================================================

def _validate(key: str, text: str) -> None:
    if not key.strip():
        raise InvalidPlayfairInputError("Key is required")
    if not text.strip():
        raise InvalidPlayfairInputError("Text is required")


def encrypt(
    key: str,
    plaintext: str,
    separator: str = DEFAULT_SEPARATOR,
    pad_if_odd: bool = True,
) -> PlayfairResult:
    """
    Encrypt plaintext with the Playfair cipher.

    Args:
        key: Keyword used to build the key square
        plaintext: Text to encrypt (non-letters are dropped)
        separator: Single letter inserted between doubled letters and
                   used as padding
        pad_if_odd: Append the separator when the prepared text is odd

    Returns:
        PlayfairResult with the key square, prepared plaintext,
        ciphertext and digraph trace

    Raises:
        InvalidPlayfairInputError: On a blank key or plaintext, a
            separator that is not one ASCII letter, or an unpaired final
            letter when pad_if_odd is False
    """
    _validate(key, plaintext)
    if len(separator) != 1 or not ("a" <= separator.lower() <= "z"):
        raise InvalidPlayfairInputError(
            f"Separator must be a single letter (got {separator!r})"
        )

    matrix = build_matrix(key)
    processed = prepare_plaintext(plaintext, normalize(separator), pad_if_odd)
    if not processed:
        raise InvalidPlayfairInputError("Plaintext must contain at least one letter")
    if len(processed) % 2 != 0:
        raise InvalidPlayfairInputError(
            f"Prepared plaintext {processed!r} has odd length; enable padding"
        )

    trace = [Digraph(pair, encrypt_digraph(matrix, pair)) for pair in digraphs(processed)]
    ciphertext = "".join(d.ciphertext_pair for d in trace)

    logger.debug("Playfair encrypted %d digraphs", len(trace))
    return PlayfairResult(
        matrix=matrix,
        processed_text=processed,
        output_text=ciphertext,
        digraphs=trace,
    )


def decrypt(key: str, ciphertext: str) -> PlayfairResult:
    """
    Decrypt Playfair ciphertext.

    Separator letters inserted during encryption are left in place; the
    digraph trace records (plaintext pair, ciphertext pair) as for
    encryption.

    Raises:
        InvalidPlayfairInputError: On a blank key or ciphertext, or a
            ciphertext with an odd number of letters
    """
    _validate(key, ciphertext)

    matrix = build_matrix(key)
    processed = normalize(ciphertext)
    if not processed:
        raise InvalidPlayfairInputError("Ciphertext must contain at least one letter")
    if len(processed) % 2 != 0:
        raise InvalidPlayfairInputError(
            f"Ciphertext must contain an even number of letters (got {len(processed)})"
        )

    trace = [Digraph(decrypt_digraph(matrix, pair), pair) for pair in digraphs(processed)]
    plaintext = "".join(d.plaintext_pair for d in trace)

    logger.debug("Playfair decrypted %d digraphs", len(trace))
    return PlayfairResult(
        matrix=matrix,
        processed_text=processed,
        output_text=plaintext,
        digraphs=trace,
    )
