"""
Caesar Cipher

Shift substitution over a fixed, ordered alphabet. Each letter is mapped
to its position in the alphabet, shifted modulo the alphabet size, and
mapped back.

Two alphabets are provided:
- LATIN: the 26 letters A-Z
- VIETNAMESE: the 29 letters of the Vietnamese alphabet
  (A Ă Â B C D Đ E Ê G H I K L M N O Ô Ơ P Q R S T U V Ư X Y)

Vietnamese tone marks (sắc, huyền, hỏi, ngã, nặng) are stripped before
lookup, so "ế" is enciphered as "ê". Tones are not restored on output.

This is for EDUCATIONAL/DEMONSTRATION purposes only.
"""

import logging
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..errors import InvalidParameterError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

DEFAULT_SHIFT = 13

LATIN_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
VIETNAMESE_SYMBOLS = "AĂÂBCDĐEÊGHIKLMNOÔƠPQRSTUVƯXY"

# Combining acute, grave, hook above, tilde, dot below
TONE_MARKS = ("\u0301", "\u0300", "\u0309", "\u0303", "\u0323")
TONE_BASES = "aăâeêioôơuưy"


def _build_tone_map() -> Dict[str, str]:
    """Map every precomposed toned vowel to its toneless base vowel."""
    tone_map = {}
    for base in TONE_BASES + TONE_BASES.upper():
        for mark in TONE_MARKS:
            composed = unicodedata.normalize("NFC", base + mark)
            if len(composed) == 1:
                tone_map[composed] = base
    return tone_map


# ============================================================================
# Alphabets
# ============================================================================

class Direction(Enum):
    ENCODE = "encode"
    DECODE = "decode"


class Alphabet:
    """
    Ordered symbol set used for value <-> symbol mapping.

    Symbols are stored in upper case; lookup accepts either case.
    """

    def __init__(self, name: str, symbols: str, tone_map: Optional[Dict[str, str]] = None):
        self._name = name
        self._symbols = symbols
        self._tone_map = tone_map or {}
        self._values: Dict[str, int] = {}
        for value, symbol in enumerate(symbols):
            self._values[symbol] = value
            self._values[symbol.lower()] = value

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbols(self) -> str:
        return self._symbols

    @property
    def size(self) -> int:
        return len(self._symbols)

    def normalize(self, char: str) -> str:
        """Strip tone marks, keeping the letter and its case."""
        return self._tone_map.get(char, char)

    def value_of(self, char: str) -> Optional[int]:
        """Position of char in the alphabet, or None if it is not a member."""
        return self._values.get(self.normalize(char))

    def symbol_at(self, value: int) -> str:
        return self._symbols[value % self.size]

    def __repr__(self) -> str:
        return f"Alphabet(name={self._name!r}, size={self.size})"


LATIN = Alphabet("latin", LATIN_SYMBOLS)
VIETNAMESE = Alphabet("vietnamese", VIETNAMESE_SYMBOLS, _build_tone_map())

ALPHABETS = {
    LATIN.name: LATIN,
    VIETNAMESE.name: VIETNAMESE,
}


def get_alphabet(name: str) -> Alphabet:
    """Look up an alphabet by name ('latin' or 'vietnamese')."""
    try:
        return ALPHABETS[name.lower()]
    except KeyError:
        raise InvalidParameterError(
            f"Unknown alphabet {name!r}. Available: {sorted(ALPHABETS)}"
        ) from None


# ============================================================================
# Step Records
# ============================================================================

@dataclass(frozen=True)
class CaesarStep:
    """Trace of one enciphered letter."""
    input_char: str
    numeric_value: int
    formula: str  # e.g. "(07 + 3) mod 26"
    result_value: int
    result_char: str


@dataclass(frozen=True)
class CaesarResult:
    text: str
    steps: List[CaesarStep]


# ============================================================================
# Cipher
# ============================================================================

def map_char(
    char: str,
    shift: int,
    alphabet: Alphabet = LATIN,
    direction: Direction = Direction.ENCODE,
) -> Tuple[str, Optional[CaesarStep]]:
    """
    Shift a single character.

    Encoding computes (value + shift) mod size, decoding
    (value - shift) mod size. The case of the input is preserved.

    Args:
        char: Character to map
        shift: Shift amount
        alphabet: Alphabet to shift within
        direction: Direction.ENCODE or Direction.DECODE

    Returns:
        Tuple (mapped character, step). Characters outside the alphabet
        are returned unchanged with a step of None.
    """
    value = alphabet.value_of(char)
    if value is None:
        return char, None

    size = alphabet.size
    if direction is Direction.ENCODE:
        new_value = (value + shift) % size
        formula = f"({value:02d} + {shift}) mod {size}"
        shown = char.lower()
    else:
        new_value = (value - shift) % size
        formula = f"({value:02d} - {shift}) mod {size}"
        shown = char.upper()

    new_char = alphabet.symbol_at(new_value)
    step = CaesarStep(
        input_char=shown,
        numeric_value=value,
        formula=formula,
        result_value=new_value,
        result_char=new_char,
    )

    if char == char.upper():
        return new_char.upper(), step
    return new_char.lower(), step


def transform(
    text: str,
    shift: int,
    alphabet: Alphabet = LATIN,
    direction: Direction = Direction.ENCODE,
) -> CaesarResult:
    """Map every character of text, collecting the steps of mapped letters."""
    chars = []
    steps = []
    for char in text:
        mapped, step = map_char(char, shift, alphabet, direction)
        chars.append(mapped)
        if step is not None:
            steps.append(step)

    logger.debug(
        "Caesar %s over %s alphabet, shift %d: %d of %d characters mapped",
        direction.value, alphabet.name, shift, len(steps), len(text),
    )
    return CaesarResult(text="".join(chars), steps=steps)


def encode(text: str, shift: int, alphabet: Alphabet = LATIN) -> str:
    """Encode text with a Caesar shift."""
    return transform(text, shift, alphabet, Direction.ENCODE).text


def decode(text: str, shift: int, alphabet: Alphabet = LATIN) -> str:
    """Decode text with a Caesar shift."""
    return transform(text, shift, alphabet, Direction.DECODE).text


def solve_encode(text: str, shift: int, alphabet: Alphabet = LATIN) -> List[CaesarStep]:
    """Step-by-step encoding, one step per alphabet letter."""
    return transform(text, shift, alphabet, Direction.ENCODE).steps


def solve_decode(text: str, shift: int, alphabet: Alphabet = LATIN) -> List[CaesarStep]:
    """Step-by-step decoding, one step per alphabet letter."""
    return transform(text, shift, alphabet, Direction.DECODE).steps
