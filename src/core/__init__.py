"""Gameplay core: lexicon, selection paths and scoring."""

from .models import GridCell
from .trie import Lexicon, TrieNode
from .path import is_adjacent, is_valid_path, path_to_word
from .scoring import score_word, SCORE_TABLE, MAX_SCORE
from .wordlist import (
    FALLBACK_WORDS,
    WordListSource,
    parse_word_list,
    load_word_list,
    build_lexicon,
)
from .solver import find_words

__all__ = [
    # Models
    "GridCell",
    # Lexicon
    "Lexicon",
    "TrieNode",
    # Paths
    "is_adjacent",
    "is_valid_path",
    "path_to_word",
    # Scoring
    "score_word",
    "SCORE_TABLE",
    "MAX_SCORE",
    # Word lists
    "FALLBACK_WORDS",
    "WordListSource",
    "parse_word_list",
    "load_word_list",
    "build_lexicon",
    # Solver
    "find_words",
]
