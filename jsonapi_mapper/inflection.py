"""Relation name to resource type inflection strategies."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable

import inflect

TypeInflector = Callable[[str], str]

_engine = inflect.engine()
_LAST_TOKEN = re.compile(r"^(.*[-_])?([^-_]+)$")


def _is_plural(word: str) -> bool:
    singular = _engine.singular_noun(word)
    if not singular or _engine.plural_noun(singular) != word:
        return False
    # singular nouns ending in a sibilant (bus, gas) inflect with "es"
    return _engine.plural_noun(word) != f"{word}es"


@lru_cache(maxsize=1024)
def _plural_word(word: str) -> str:
    if _is_plural(word):
        return word
    return _engine.plural_noun(word)


def pluralize(name: str) -> str:
    """Derive a resource type from a relation name.

    Only the last ``-`` or ``_`` separated token is pluralized, so
    ``related-model`` becomes ``related-models`` while ``related-models``
    is left as is. Casing is preserved.
    """
    match = _LAST_TOKEN.match(name)
    if match is None:
        return name
    prefix, word = match.group(1) or "", match.group(2)
    return f"{prefix}{_plural_word(word)}"


def identity(name: str) -> str:
    """Use the relation name unchanged as the resource type."""
    return name
