"""Tests for alphabet editing and symbol statistics."""

import math

import numpy as np
import pytest

from ans_visualizer.config import DEFAULT_COLORS, MAX_SYMBOLS
from ans_visualizer.encoders.ans import color_for_index as engine_color_for_index
from ans_visualizer.models import (
    Symbol,
    add_symbol,
    alphabet_from_message,
    color_for_index,
    count_symbols,
    default_alphabet,
    entropy,
    format_alphabet,
    parse_alphabet,
    probabilities,
    remove_symbol,
    set_frequency,
    symbol_costs,
    validate_alphabet,
)


class TestDefaultAlphabet:
    """Tests for the starting alphabet."""

    def test_contents(self):
        alphabet = default_alphabet()
        assert [(s.name, s.frequency) for s in alphabet] == [("A", 3), ("B", 2), ("C", 1)]
        assert [s.color for s in alphabet] == list(DEFAULT_COLORS[:3])


class TestAddSymbol:
    """Tests for appending symbols."""

    def test_next_letter(self, abc):
        extended = add_symbol(abc)
        assert extended[-1] == Symbol("D", 1, DEFAULT_COLORS[3])
        assert extended[:3] == abc
        assert len(abc) == 3

    def test_from_empty(self):
        assert add_symbol(()) == (Symbol("A", 1, DEFAULT_COLORS[0]),)

    def test_skips_used_letters(self, abc):
        extended = add_symbol(remove_symbol(abc, 0))
        assert [s.name for s in extended] == ["B", "C", "A"]
        validate_alphabet(extended)

    def test_limit(self):
        alphabet = ()
        for _ in range(MAX_SYMBOLS):
            alphabet = add_symbol(alphabet)
        assert alphabet[-1].name == "Z"
        assert alphabet[-1].color == DEFAULT_COLORS[25 % len(DEFAULT_COLORS)]
        with pytest.raises(ValueError):
            add_symbol(alphabet)


class TestRemoveSymbol:
    """Tests for removing symbols."""

    def test_remove_middle(self, abc):
        assert [s.name for s in remove_symbol(abc, 1)] == ["A", "C"]
        assert len(abc) == 3

    def test_negative_index(self, abc):
        assert [s.name for s in remove_symbol(abc, -1)] == ["A", "B"]

    def test_keeps_last_symbol(self, single):
        with pytest.raises(ValueError):
            remove_symbol(single, 0)

    def test_bad_index(self, abc):
        with pytest.raises(IndexError):
            remove_symbol(abc, 3)


class TestSetFrequency:
    """Tests for editing frequencies like form input."""

    @pytest.mark.parametrize("value, expected", [
        (7, 7),
        ("5", 5),
        (" 4 ", 4),
        ("0", 1),
        ("-3", 1),
        ("abc", 1),
        ("3x", 3),
        ("2.5", 2),
        ("-2.5", 1),
        ("", 1),
        (None, 1),
    ])
    def test_parsing(self, abc, value, expected):
        assert set_frequency(abc, 0, value)[0].frequency == expected

    def test_keeps_name_and_color(self, abc):
        updated = set_frequency(abc, 2, 9)
        assert updated[2] == Symbol("C", 9, abc[2].color)
        assert abc[2].frequency == 1


class TestParseAlphabet:
    """Tests for the NAME:FREQUENCY text form."""

    def test_parse(self):
        alphabet = parse_alphabet(" A:3 , B:2,C:1 ")
        assert format_alphabet(alphabet) == "A:3,B:2,C:1"
        assert alphabet[1].color == DEFAULT_COLORS[1]

    def test_empty(self):
        assert parse_alphabet("") == ()

    @pytest.mark.parametrize("text", ["A3", ":3", "A:x", "A:0", "A:-1", "A:1,A:2"])
    def test_rejects(self, text):
        with pytest.raises(ValueError):
            parse_alphabet(text)

    def test_too_many_symbols(self):
        text = ",".join(f"S{i}:1" for i in range(MAX_SYMBOLS + 1))
        with pytest.raises(ValueError):
            parse_alphabet(text)


class TestValidateAlphabet:
    """Tests for the alphabet invariants."""

    def test_valid(self, abc):
        validate_alphabet(abc)

    def test_bool_frequency(self):
        with pytest.raises(ValueError):
            validate_alphabet([Symbol("A", True)])


class TestStatistics:
    """Tests for counting and information measures."""

    def test_count_symbols(self):
        counts = count_symbols("ABACAB")
        assert list(counts.items()) == [("A", 3), ("B", 2), ("C", 1)]

    def test_alphabet_from_message(self):
        alphabet = alphabet_from_message("ABACAB")
        assert format_alphabet(alphabet) == "A:3,B:2,C:1"

    def test_palette_colors(self):
        alphabet = alphabet_from_message("ABACAB")
        assert [s.color for s in alphabet] == [color_for_index(i) for i in range(3)]
        assert engine_color_for_index is color_for_index

    def test_first_appearance_order(self):
        assert format_alphabet(alphabet_from_message("CABBB")) == "C:1,A:1,B:3"

    def test_sort_by_frequency(self):
        assert format_alphabet(alphabet_from_message("CABBB", sort_by_frequency=True)) == "B:3,C:1,A:1"

    def test_empty_message(self):
        with pytest.raises(ValueError):
            alphabet_from_message("")

    def test_entropy(self):
        assert entropy(np.array([0.5, 0.5])) == pytest.approx(1.0)
        assert entropy(np.array([1.0, 0.0])) == pytest.approx(0.0)

    def test_probabilities(self, abc):
        np.testing.assert_allclose(probabilities(abc), [0.5, 1 / 3, 1 / 6])
        assert probabilities([]).size == 0

    def test_symbol_costs(self, abc):
        costs = symbol_costs(abc)
        assert costs["A"] == pytest.approx(1.0)
        assert costs["B"] == pytest.approx(math.log2(3))
        assert costs["C"] == pytest.approx(math.log2(6))
