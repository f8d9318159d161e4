"""
Rail Fence (Columnar Transposition) Cipher

The key defines one column per character. The text is written into the
columns row by row, then read out column by column in alphabetical key
order. The transposition can be repeated for several rounds.

Repeated key characters are allowed: each occurrence gets its own column
(identified as "a", "a1", "a2", ...), and equal characters are ordered
left to right.

Example (key "CAB"):
    C A B          rank:  C=3 A=1 B=2
    -----
    H E L          ciphertext: "EO" + "L" + "HL" = "EOLHL"
    L O
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

from ..errors import InvalidParameterError

logger = logging.getLogger(__name__)


DEFAULT_ROUNDS = 1


@dataclass(frozen=True)
class KeyColumn:
    """One key character and the column it controls."""
    column_id: str  # Unique id, e.g. "a1" for the second "a"
    display_char: str
    index: int  # Position in the key
    order: int  # 1-based alphabetical rank


@dataclass(frozen=True)
class RailFenceRoundTrace:
    """Snapshot of one transposition round."""
    columns: Dict[str, str]  # column_id -> column contents
    key_order: List[KeyColumn]  # Columns in alphabetical order
    headers: List[KeyColumn]  # Columns in key order
    table: List[List[str]]  # Row-major layout, "" for empty cells
    text: str  # Text produced by this round


@dataclass(frozen=True)
class RailFenceResult:
    text: str
    rounds: List[RailFenceRoundTrace]


def key_columns(key: str) -> List[KeyColumn]:
    """
    Build the column list for a key, in key order.

    Example:
        >>> [c.column_id for c in key_columns("hello")]
        ['h', 'e', 'l', 'l1', 'o']
    """
    counts: Dict[str, int] = {}
    raw = []
    for index, char in enumerate(key):
        seen = counts.get(char, 0)
        counts[char] = seen + 1
        column_id = f"{char}{seen}" if seen else char
        raw.append((column_id, char, index))

    ranked = sorted(raw, key=lambda item: (item[1], item[2]))
    rank = {item[2]: position for position, item in enumerate(ranked, start=1)}

    return [
        KeyColumn(column_id=column_id, display_char=char, index=index, order=rank[index])
        for column_id, char, index in raw
    ]


def alphabetical_order(columns: List[KeyColumn]) -> List[KeyColumn]:
    """Columns sorted by character, ties broken by key position."""
    return sorted(columns, key=lambda c: (c.display_char, c.index))


def _strip_whitespace(text: str) -> str:
    return "".join(text.split())


def _validate(key: str, rounds: int) -> None:
    if not key.strip():
        raise InvalidParameterError("Key must not be empty")
    if rounds < 1:
        raise InvalidParameterError(f"Rounds must be a positive integer (got {rounds})")


def _build_trace(columns: List[KeyColumn], contents: List[str], text: str) -> RailFenceRoundTrace:
    rows = max((len(c) for c in contents), default=0)
    table = [
        [column[row] if row < len(column) else "" for column in contents]
        for row in range(rows)
    ]
    return RailFenceRoundTrace(
        columns={col.column_id: contents[col.index] for col in columns},
        key_order=alphabetical_order(columns),
        headers=list(columns),
        table=table,
        text=text,
    )


def _encrypt_round(text: str, columns: List[KeyColumn]) -> RailFenceRoundTrace:
    width = len(columns)
    # Row-major fill: column i receives characters i, i+width, i+2*width, ...
    contents = [text[i::width] for i in range(width)]
    result = "".join(contents[col.index] for col in alphabetical_order(columns))
    return _build_trace(columns, contents, result)


def _decrypt_round(text: str, columns: List[KeyColumn]) -> RailFenceRoundTrace:
    width = len(columns)
    per_column, extra = divmod(len(text), width)

    # The last row is partial: only the leftmost `extra` columns reach it
    contents = [""] * width
    position = 0
    for col in alphabetical_order(columns):
        length = per_column + (1 if col.index < extra else 0)
        contents[col.index] = text[position:position + length]
        position += length

    result = "".join(
        column[row]
        for row in range(per_column + 1)
        for column in contents
        if row < len(column)
    )
    return _build_trace(columns, contents, result)


def encrypt(plaintext: str, key: str, rounds: int = DEFAULT_ROUNDS) -> RailFenceResult:
    """
    Encrypt with columnar transposition.

    Whitespace is removed from the plaintext first. Each round feeds its
    output into the next.

    Args:
        plaintext: Text to encrypt
        key: Column key (repeated characters allowed)
        rounds: Number of transposition rounds (>= 1)

    Returns:
        RailFenceResult with the ciphertext and one trace per round

    Raises:
        InvalidParameterError: If the key is blank or rounds < 1
    """
    _validate(key, rounds)
    columns = key_columns(key)

    text = _strip_whitespace(plaintext)
    traces = []
    for _ in range(rounds):
        trace = _encrypt_round(text, columns)
        traces.append(trace)
        text = trace.text

    logger.debug("Rail fence encrypted %d chars with %d columns, %d rounds",
                 len(text), len(columns), rounds)
    return RailFenceResult(text=text, rounds=traces)


def decrypt(ciphertext: str, key: str, rounds: int = DEFAULT_ROUNDS) -> RailFenceResult:
    """
    Decrypt columnar transposition.

    Every round uses the same key, so the inverse rounds are simply
    applied the same number of times.

    Raises:
        InvalidParameterError: If the key is blank or rounds < 1
    """
    _validate(key, rounds)
    columns = key_columns(key)

    text = _strip_whitespace(ciphertext)
    traces = []
    for _ in range(rounds):
        trace = _decrypt_round(text, columns)
        traces.append(trace)
        text = trace.text

    logger.debug("Rail fence decrypted %d chars with %d columns, %d rounds",
                 len(text), len(columns), rounds)
    return RailFenceResult(text=text, rounds=traces)
