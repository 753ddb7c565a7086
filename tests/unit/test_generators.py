"""
Unit tests for the character and passphrase generators.

Tests verify:
- Character pool composition and order
- Length bounds of generated strings and passphrases
- Catalog filtering and the empty-candidate error
- Capitalization and separator handling
- Mode dispatch
"""

import string

import pytest

from core.domain.errors import EmptyCandidateListError
from core.domain.models import GenerationMode, GenerationOptions
from core.services.generators import (
    SYMBOLS,
    WORD_CATALOG,
    build_character_pool,
    filter_catalog,
    generate_chars,
    generate_secret,
    generate_words,
)


class TestCharacterPool:
    """Test suite for pool construction."""

    def test_lowercase_only_by_default(self):
        assert build_character_pool() == string.ascii_lowercase

    def test_all_classes_in_fixed_order(self):
        pool = build_character_pool(uppercase=True, numbers=True, symbols=True)

        assert pool == string.ascii_lowercase + string.ascii_uppercase + string.digits + "@!$#%^&*"
        assert len(pool) == 70

    def test_symbols_without_uppercase(self):
        pool = build_character_pool(symbols=True)

        assert pool == string.ascii_lowercase + SYMBOLS


class TestGenerateChars:
    """Test suite for character generation."""

    def test_picks_by_index_in_order(self, scripted_rng):
        rng = scripted_rng(5, 0, 1, 2, 3, 25)

        result = generate_chars(min_length=5, max_length=5, rng=rng)

        assert result == "abcdz"
        assert rng.calls[0] == (5, 5)
        assert rng.calls[1:] == [(0, 25)] * 5

    def test_length_draw_uses_bounds(self, scripted_rng):
        rng = scripted_rng(3)

        result = generate_chars(min_length=2, max_length=9, rng=rng)

        assert rng.calls[0] == (2, 9)
        assert len(result) == 3

    def test_zero_length_is_empty_string(self, scripted_rng):
        assert generate_chars(min_length=0, max_length=0, rng=scripted_rng()) == ""

    def test_exact_length_lowercase_only(self, seeded_rng):
        for _ in range(50):
            result = generate_chars(min_length=5, max_length=5, rng=seeded_rng)

            assert len(result) == 5
            assert all(ch in string.ascii_lowercase for ch in result)

    def test_length_within_bounds(self, seeded_rng):
        lengths = {len(generate_chars(min_length=8, max_length=16, rng=seeded_rng)) for _ in range(300)}

        assert lengths <= set(range(8, 17))
        assert len(lengths) > 1

    def test_characters_come_from_enabled_pool(self, seeded_rng):
        allowed = set(string.ascii_lowercase + string.digits)
        for _ in range(100):
            result = generate_chars(min_length=10, max_length=20, numbers=True, rng=seeded_rng)

            assert set(result) <= allowed

    def test_last_symbol_reachable(self, scripted_rng):
        pool_size = len(build_character_pool(uppercase=True, numbers=True, symbols=True))
        rng = scripted_rng(1, pool_size - 1)

        result = generate_chars(
            min_length=1, max_length=1, uppercase=True, numbers=True, symbols=True, rng=rng
        )

        assert result == "*"


class TestFilterCatalog:
    """Test suite for catalog filtering."""

    def test_catalog_is_lowercase_ascii(self):
        assert len(WORD_CATALOG) == 27
        for word in WORD_CATALOG:
            assert word.isascii() and word.islower()

    def test_exact_length(self):
        assert filter_catalog(3, 3) == ["fig", "yam"]

    def test_longest_words(self):
        assert filter_catalog(10, 10) == ["elderberry", "strawberry", "watermelon", "neologians"]

    def test_preserves_catalog_order(self):
        assert filter_catalog(3, 4) == ["date", "fig", "kiwi", "ugli", "yam", "ramp", "marc"]

    @pytest.mark.parametrize("bounds", [(2, 2), (0, 0), (11, 20), (100, 200)])
    def test_no_match(self, bounds):
        assert filter_catalog(*bounds) == []


class TestGenerateWords:
    """Test suite for passphrase generation."""

    def test_joins_picked_words(self, scripted_rng):
        rng = scripted_rng(3, 0, 1, 2)

        assert generate_words(min_length=3, max_length=4, rng=rng) == "date-fig-kiwi"

    def test_count_draw_uses_length_bounds(self, scripted_rng):
        rng = scripted_rng(3, 0, 1, 2)

        generate_words(min_length=3, max_length=4, rng=rng)

        assert rng.calls[0] == (3, 4)
        assert rng.calls[1:] == [(0, 6)] * 3

    def test_uppercase_capitalizes_each_word(self, scripted_rng):
        rng = scripted_rng(3, 0, 1, 2)

        result = generate_words(min_length=3, max_length=4, uppercase=True, rng=rng)

        assert result == "Date-Fig-Kiwi"

    def test_custom_separator(self, scripted_rng):
        rng = scripted_rng(3, 0, 1, 2)

        result = generate_words(min_length=3, max_length=4, separator=",", rng=rng)

        assert result == "date,fig,kiwi"

    def test_empty_separator(self, scripted_rng):
        rng = scripted_rng(3, 4, 4, 4)

        assert generate_words(min_length=3, max_length=4, separator="", rng=rng) == "yamyamyam"

    def test_word_count_overrides_draw(self, scripted_rng):
        rng = scripted_rng(0, 6)

        result = generate_words(min_length=3, max_length=4, separator=",", word_count=2, rng=rng)

        assert result == "date,marc"
        assert rng.calls == [(0, 6), (0, 6)]

    @pytest.mark.parametrize("bounds", [(100, 200), (2, 2)])
    def test_no_candidates_raises(self, bounds, scripted_rng):
        rng = scripted_rng()

        with pytest.raises(EmptyCandidateListError, match="No words found"):
            generate_words(min_length=bounds[0], max_length=bounds[1], rng=rng)
        assert rng.calls == []

    def test_count_and_word_lengths_within_bounds(self, seeded_rng):
        for _ in range(200):
            words = generate_words(min_length=3, max_length=6, rng=seeded_rng).split("-")

            assert 3 <= len(words) <= 6
            assert all(3 <= len(word) <= 6 for word in words)
            assert all(word in WORD_CATALOG for word in words)


class TestGenerateSecret:
    """Test suite for mode dispatch."""

    def test_dispatches_chars(self, scripted_rng):
        options = GenerationOptions(mode=GenerationMode.CHARS, min_length=2, max_length=2)

        assert generate_secret(options, scripted_rng(2, 1, 1)) == "bb"

    def test_dispatches_words(self, scripted_rng):
        options = GenerationOptions(
            mode=GenerationMode.WORDS, min_length=3, max_length=4, separator="_", uppercase=True
        )

        assert generate_secret(options, scripted_rng(3, 1, 4, 1)) == "Fig_Yam_Fig"

    def test_words_ignore_character_flags(self, scripted_rng):
        options = GenerationOptions(
            mode=GenerationMode.WORDS, min_length=3, max_length=3, numbers=True, symbols=True
        )

        assert generate_secret(options, scripted_rng(3, 0, 1, 0)) == "fig-yam-fig"
