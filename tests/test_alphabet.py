"""
Tests for Alphabets
===================
Predefined constants, name resolution and the Alphabet value type.
"""

import copy
import pickle
import string

import pytest

from secure_randstr import (
    DEFAULT_ALPHABET,
    DIGITS,
    LOWER_CASE_LETTERS,
    PREDEFINED_ALPHABETS,
    SPECIAL_CHARACTERS,
    UPPER_CASE_LETTERS,
    Alphabet,
    InvalidAlphabet,
    StringGenerator,
    resolve_alphabet,
)


class TestConstants:
    def test_letters_and_digits(self):
        assert UPPER_CASE_LETTERS == string.ascii_uppercase
        assert LOWER_CASE_LETTERS == string.ascii_lowercase
        assert DIGITS == string.digits

    def test_special_characters(self):
        assert SPECIAL_CHARACTERS == "!#$%&'()*+,-./:;<=>?@[]^_`{|}~\""
        assert len(SPECIAL_CHARACTERS) == 31
        assert "\\" not in SPECIAL_CHARACTERS

    def test_default_alphabet(self):
        assert DEFAULT_ALPHABET == UPPER_CASE_LETTERS + LOWER_CASE_LETTERS + DIGITS
        assert len(DEFAULT_ALPHABET) == 62

    def test_registry_read_only(self):
        with pytest.raises(TypeError):
            PREDEFINED_ALPHABETS["upper"] = "abc"
        assert set(PREDEFINED_ALPHABETS) == {
            "upper",
            "lower",
            "digits",
            "special",
            "default",
        }


class TestResolveAlphabet:
    def test_single_name(self):
        assert resolve_alphabet("digits") == DIGITS

    def test_combination(self):
        assert resolve_alphabet("upper+digits") == UPPER_CASE_LETTERS + DIGITS

    def test_case_and_spaces(self):
        assert resolve_alphabet(" Lower + DIGITS ") == LOWER_CASE_LETTERS + DIGITS

    def test_unknown_name(self):
        with pytest.raises(InvalidAlphabet, match="emoji"):
            resolve_alphabet("upper+emoji")

    @pytest.mark.parametrize("names", ["", "+", " + "])
    def test_empty(self, names):
        with pytest.raises(InvalidAlphabet):
            resolve_alphabet(names)


class TestAlphabet:
    def test_from_string(self):
        alpha = Alphabet("abc")
        assert len(alpha) == 3
        assert alpha[1] == "b"
        assert list(alpha) == ["a", "b", "c"]
        assert "c" in alpha
        assert "d" not in alpha

    def test_from_iterable(self):
        assert Alphabet(["x", "y"]).symbols == ("x", "y")

    def test_from_alphabet(self):
        alpha = Alphabet("abc")
        assert Alphabet(alpha) == alpha

    def test_repeats_allowed(self):
        assert len(Alphabet("aaab")) == 4

    def test_immutable(self):
        alpha = Alphabet("abc")
        with pytest.raises(AttributeError):
            alpha._symbols = ("z",)

    def test_hashable(self):
        assert hash(Alphabet("ab")) == hash(Alphabet(["a", "b"]))

    @pytest.mark.parametrize("bad", ["", [], ["ab"], [1, 2], 42])
    def test_invalid(self, bad):
        with pytest.raises(InvalidAlphabet):
            Alphabet(bad)

    def test_repr_truncates(self):
        assert "size=62" in repr(Alphabet(DEFAULT_ALPHABET))
        assert "..." in repr(Alphabet(DEFAULT_ALPHABET))


class TestAlphabetCopy:
    """Immutable alphabets survive copy, deepcopy and pickle."""

    def test_copy(self):
        alpha = Alphabet("ab")
        assert copy.copy(alpha) == alpha

    def test_deepcopy(self):
        alpha = Alphabet("ab")
        assert copy.deepcopy(alpha) == alpha

    def test_pickle(self):
        alpha = Alphabet("αb🙂")
        restored = pickle.loads(pickle.dumps(alpha))
        assert restored == alpha
        assert restored.symbols == ("α", "b", "🙂")

    def test_deepcopy_generator(self):
        gen = StringGenerator(6, alphabet="xyz")
        clone = copy.deepcopy(gen)
        assert clone.alphabet == gen.alphabet
        assert clone._buffer is not gen._buffer
        result = clone.next()
        assert len(result) == 6
        assert set(result) <= {"x", "y", "z"}

    def test_shallow_copy_generator(self):
        gen = StringGenerator(4, alphabet="q")
        assert copy.copy(gen).next() == "qqqq"
