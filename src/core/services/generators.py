"""Character and passphrase generation.

Both generators are pure functions of their options and an injected
`RandomSource`; nothing here touches I/O.
"""

from __future__ import annotations

import string
from typing import Callable

import structlog

from core.domain.errors import EmptyCandidateListError
from core.domain.models import GenerationMode, GenerationOptions
from core.interfaces.random_source import RandomSource

logger = structlog.get_logger()

SYMBOLS = "@!$#%^&*"

WORD_CATALOG: tuple[str, ...] = (
    "apple", "banana", "cherry", "date", "elderberry", "fig", "grape",
    "honeydew", "kiwi", "lemon", "mango", "nectarine", "orange", "papaya",
    "quince", "raspberry", "strawberry", "tangerine", "ugli", "watermelon",
    "xigua", "yam", "zucchini", "ramp", "collapse", "marc", "neologians",
)


def build_character_pool(*, uppercase: bool = False, numbers: bool = False, symbols: bool = False) -> str:
    """Lowercase letters, then uppercase, digits and symbols when enabled."""

    pool = string.ascii_lowercase
    if uppercase:
        pool += string.ascii_uppercase
    if numbers:
        pool += string.digits
    if symbols:
        pool += SYMBOLS
    return pool


def _pick(rng: RandomSource, items: str | tuple[str, ...] | list[str]) -> str:
    return items[rng.randint(0, len(items) - 1)]


def generate_chars(
    *,
    min_length: int,
    max_length: int,
    uppercase: bool = False,
    numbers: bool = False,
    symbols: bool = False,
    rng: RandomSource,
) -> str:
    length = rng.randint(min_length, max_length)
    pool = build_character_pool(uppercase=uppercase, numbers=numbers, symbols=symbols)
    logger.debug("chars_generated", length=length, pool_size=len(pool))
    return "".join(_pick(rng, pool) for _ in range(length))


def filter_catalog(min_length: int, max_length: int, catalog: tuple[str, ...] = WORD_CATALOG) -> list[str]:
    """Catalog words whose length lies in `[min_length, max_length]`, in catalog order."""

    return [word for word in catalog if min_length <= len(word) <= max_length]


def generate_words(
    *,
    min_length: int,
    max_length: int,
    uppercase: bool = False,
    separator: str = "-",
    word_count: int | None = None,
    rng: RandomSource,
) -> str:
    """Join random catalog words.

    Without `word_count`, the number of words is drawn from the same
    `[min_length, max_length]` range that bounds each word's length.
    """

    candidates = filter_catalog(min_length, max_length)
    if not candidates:
        raise EmptyCandidateListError(min_length=min_length, max_length=max_length)

    num_words = word_count if word_count is not None else rng.randint(min_length, max_length)
    logger.debug("words_generated", num_words=num_words, candidates=len(candidates))

    words = []
    for _ in range(num_words):
        word = _pick(rng, candidates)
        words.append(word.capitalize() if uppercase else word)
    return separator.join(words)


def _chars_from_options(options: GenerationOptions, rng: RandomSource) -> str:
    return generate_chars(
        min_length=options.min_length,
        max_length=options.max_length,
        uppercase=options.uppercase,
        numbers=options.numbers,
        symbols=options.symbols,
        rng=rng,
    )


def _words_from_options(options: GenerationOptions, rng: RandomSource) -> str:
    return generate_words(
        min_length=options.min_length,
        max_length=options.max_length,
        uppercase=options.uppercase,
        separator=options.separator,
        word_count=options.word_count,
        rng=rng,
    )


_GENERATORS: dict[GenerationMode, Callable[[GenerationOptions, RandomSource], str]] = {
    GenerationMode.CHARS: _chars_from_options,
    GenerationMode.WORDS: _words_from_options,
}


def generate_secret(options: GenerationOptions, rng: RandomSource) -> str:
    """Dispatch to the generator registered for `options.mode`."""

    return _GENERATORS[options.mode](options, rng)
