"""
Word list loading.

The dictionary resource is a plain-text file with one word per line. When it
cannot be read, a small built-in seed list is used instead so that a round can
always start.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from .trie import Lexicon


FALLBACK_WORDS: Tuple[str, ...] = ("tree", "clear", "enter", "water", "huis", "boom")


class WordListSource(BaseModel):
    """Words loaded from a word list resource."""
    words: List[str] = Field(default_factory=list)
    source: str
    fallback_reason: Optional[str] = None

    @property
    def used_fallback(self) -> bool:
        return self.fallback_reason is not None


def parse_word_list(text: str) -> List[str]:
    """Split newline-separated text into trimmed, lower-cased, unique words."""
    words: List[str] = []
    seen = set()
    for line in text.splitlines():
        word = line.strip().lower()
        if word and word not in seen:
            seen.add(word)
            words.append(word)
    return words


def _fallback(reason: str) -> WordListSource:
    return WordListSource(
        words=list(FALLBACK_WORDS),
        source="fallback",
        fallback_reason=reason
    )


def load_word_list(path: Optional[Union[str, Path]]) -> WordListSource:
    """
    Load a word list from disk, falling back to the seed list.

    Args:
        path: Path to the word list, or None if none is configured

    Returns:
        WordListSource with the words and, when the fallback was used, why
    """
    if path is None:
        return _fallback("no word list configured")

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return _fallback(f"could not read {path}: {e}")

    words = parse_word_list(text)
    if not words:
        return _fallback(f"{path} contains no words")

    return WordListSource(words=words, source=str(path))


def build_lexicon(source: WordListSource) -> Lexicon:
    """Build the game lexicon from loaded words."""
    return Lexicon(source.words)
