"""
Unit tests for the Caesar cipher.

Tests:
- Latin alphabet encode / decode and step records
- Vietnamese alphabet, including tone-mark normalization
- Pass-through of characters outside the alphabet
"""

import pytest
from cipherlab.classical.caesar import (
    LATIN, VIETNAMESE, CaesarStep, Direction, get_alphabet, map_char,
    encode, decode, solve_encode, solve_decode, transform,
)
from cipherlab.errors import InvalidParameterError


class TestLatin:
    """Unit tests for the 26-letter alphabet."""

    def test_encode(self):
        assert encode("Hello, World!", 3) == "Khoor, Zruog!"

    def test_decode(self):
        assert decode("Khoor, Zruog!", 3) == "Hello, World!"

    def test_wraps_around(self):
        assert encode("xyz", 3) == "abc"
        assert decode("ABC", 3) == "XYZ"

    def test_negative_shift(self):
        assert encode("a", -1) == "z"

    def test_rot13_is_involution(self):
        text = "The Quick Brown Fox"
        assert encode(encode(text, 13), 13) == text

    @pytest.mark.parametrize("shift", range(1, 26))
    def test_round_trip(self, shift):
        text = "Attack at Dawn! 42 times."
        assert decode(encode(text, shift), shift) == text

    def test_non_letters_unchanged(self):
        text = "123 !? ¿é ß"
        assert encode(text, 5) == text
        assert decode(text, 5) == text
        assert solve_encode(text, 5) == []

    def test_solve_encode(self):
        steps = solve_encode("Hi!", 3)
        assert steps == [
            CaesarStep(input_char="h", numeric_value=7, formula="(07 + 3) mod 26",
                       result_value=10, result_char="K"),
            CaesarStep(input_char="i", numeric_value=8, formula="(08 + 3) mod 26",
                       result_value=11, result_char="L"),
        ]

    def test_solve_decode(self):
        steps = solve_decode("k", 3)
        assert steps == [
            CaesarStep(input_char="K", numeric_value=10, formula="(10 - 3) mod 26",
                       result_value=7, result_char="H"),
        ]

    def test_case_preserved(self):
        assert encode("aBc", 1) == "bCd"


class TestVietnamese:
    """Unit tests for the 29-letter Vietnamese alphabet."""

    def test_alphabet_sizes(self):
        assert LATIN.size == 26
        assert VIETNAMESE.size == 29

    def test_special_letters(self):
        assert VIETNAMESE.value_of("Đ") == 6
        assert VIETNAMESE.value_of("đ") == 6
        assert encode("Đ", 1, VIETNAMESE) == "E"
        assert encode("a", 1, VIETNAMESE) == "ă"
        assert encode("Y", 1, VIETNAMESE) == "A"

    def test_tone_marks_stripped(self):
        """ế is looked up as ê (value 8); the tone is not restored."""
        assert VIETNAMESE.normalize("ế") == "ê"
        assert VIETNAMESE.normalize("Ặ") == "Ă"
        assert VIETNAMESE.normalize("ự") == "ư"
        assert encode("ế", 1, VIETNAMESE) == "g"
        assert encode("Ế", 1, VIETNAMESE) == "G"

    def test_step_formula(self):
        steps = solve_encode("ê", 1, VIETNAMESE)
        assert steps[0].formula == "(08 + 1) mod 29"
        assert steps[0].result_char == "G"

    def test_letters_outside_alphabet(self):
        """F, J, W and Z are not Vietnamese letters."""
        assert encode("fjwz", 4, VIETNAMESE) == "fjwz"
        assert solve_decode("fjwz", 4, VIETNAMESE) == []

    @pytest.mark.parametrize("shift", range(1, 29))
    def test_round_trip(self, shift):
        text = "Đâu ơi, Ưng ăn êm ôm BAN"
        assert decode(encode(text, shift, VIETNAMESE), shift, VIETNAMESE) == text

    def test_toned_text_loses_tones(self):
        encoded = encode("Việt", 2, VIETNAMESE)
        assert decode(encoded, 2, VIETNAMESE) == "Viêt"


class TestHelpers:
    """Unit tests for alphabet lookup and map_char."""

    def test_get_alphabet(self):
        assert get_alphabet("latin") is LATIN
        assert get_alphabet("Vietnamese") is VIETNAMESE

    def test_unknown_alphabet(self):
        with pytest.raises(InvalidParameterError):
            get_alphabet("greek")

    def test_map_char_passthrough(self):
        assert map_char(" ", 3) == (" ", None)

    def test_map_char_decode(self):
        char, step = map_char("D", 3, LATIN, Direction.DECODE)
        assert char == "A"
        assert step.result_value == 0

    def test_transform_collects_steps(self):
        result = transform("ab c", 1)
        assert result.text == "bc d"
        assert [s.result_char for s in result.steps] == ["B", "C", "D"]
