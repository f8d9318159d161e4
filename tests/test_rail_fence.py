"""
Unit tests for the Rail Fence (columnar transposition) cipher.

Tests:
- Key column ids and alphabetical ranks, including repeated characters
- Single and multi-round encryption traces
- Decryption of partial last rows
- Input validation
"""

import pytest
from cipherlab.classical.rail_fence import (
    KeyColumn, alphabetical_order, decrypt, encrypt, key_columns,
)
from cipherlab.errors import InvalidParameterError


class TestKeyColumns:
    """Unit tests for key column construction."""

    def test_distinct_characters(self):
        assert key_columns("CAB") == [
            KeyColumn(column_id="C", display_char="C", index=0, order=3),
            KeyColumn(column_id="A", display_char="A", index=1, order=1),
            KeyColumn(column_id="B", display_char="B", index=2, order=2),
        ]

    def test_repeated_characters(self):
        columns = key_columns("hello")
        assert [c.column_id for c in columns] == ["h", "e", "l", "l1", "o"]
        assert [c.order for c in columns] == [2, 1, 3, 4, 5]

    def test_many_repeats(self):
        assert [c.column_id for c in key_columns("aaa")] == ["a", "a1", "a2"]

    def test_alphabetical_order(self):
        ordered = alphabetical_order(key_columns("banana"))
        assert [c.column_id for c in ordered] == ["a", "a1", "a2", "b", "n", "n1"]
        assert [c.order for c in ordered] == [1, 2, 3, 4, 5, 6]


class TestEncrypt:
    """Unit tests for encryption and its trace."""

    def test_single_round(self):
        result = encrypt("HELLO", "CAB")
        assert result.text == "EOLHL"
        assert len(result.rounds) == 1

        trace = result.rounds[0]
        assert trace.columns == {"C": "HL", "A": "EO", "B": "L"}
        assert trace.table == [["H", "E", "L"], ["L", "O", ""]]
        assert [c.column_id for c in trace.key_order] == ["A", "B", "C"]
        assert [c.column_id for c in trace.headers] == ["C", "A", "B"]
        assert trace.text == "EOLHL"

    def test_two_rounds(self):
        result = encrypt("HELLO", "CAB", 2)
        assert [r.text for r in result.rounds] == ["EOLHL", "OLLEH"]
        assert result.text == "OLLEH"

    def test_rounds_chain(self):
        once = encrypt("WEAREDISCOVERED", "zebras").text
        assert encrypt(once, "zebras").text == encrypt("WEAREDISCOVERED", "zebras", 2).text

    def test_whitespace_removed(self):
        assert encrypt("HE LL\tO\n", "CAB").text == "EOLHL"

    def test_key_longer_than_text(self):
        result = encrypt("HI", "dcba")
        assert result.text == "IH"
        assert result.rounds[0].table == [["H", "I", "", ""]]

    def test_empty_text(self):
        result = encrypt("", "CAB")
        assert result.text == ""
        assert result.rounds[0].table == []


class TestDecrypt:
    """Unit tests for decryption."""

    def test_single_round(self):
        result = decrypt("EOLHL", "CAB")
        assert result.text == "HELLO"
        assert result.rounds[0].columns == {"C": "HL", "A": "EO", "B": "L"}

    def test_partial_row_follows_key_position(self):
        """The long columns are the leftmost ones, not the first in rank."""
        assert decrypt("EOLHL", "CAB").text == "HELLO"
        assert decrypt("IH", "dcba").text == "HI"

    def test_two_rounds(self):
        result = decrypt("OLLEH", "CAB", 2)
        assert [r.text for r in result.rounds] == ["EOLHL", "HELLO"]

    @pytest.mark.parametrize("key", ["hello", "banana", "aaa", "CAB", "k", "zebras"])
    @pytest.mark.parametrize("rounds", [1, 2, 3])
    def test_round_trip(self, key, rounds):
        for length in range(0, 20):
            text = "ABCDEFGHIJKLMNOPQRST"[:length]
            encrypted = encrypt(text, key, rounds).text
            assert decrypt(encrypted, key, rounds).text == text


class TestValidation:
    """Unit tests for invalid parameters."""

    def test_blank_key(self):
        with pytest.raises(InvalidParameterError):
            encrypt("HELLO", "")
        with pytest.raises(InvalidParameterError):
            decrypt("HELLO", "   ")

    def test_non_positive_rounds(self):
        with pytest.raises(InvalidParameterError):
            encrypt("HELLO", "CAB", 0)
        with pytest.raises(InvalidParameterError):
            decrypt("HELLO", "CAB", -1)
