"""Tests for word list loading and the board solver."""

from src.core import (
    FALLBACK_WORDS,
    Lexicon,
    build_lexicon,
    find_words,
    is_valid_path,
    load_word_list,
    parse_word_list,
    path_to_word,
)


class TestParseWordList:
    """Test newline-separated word parsing."""

    def test_trims_and_lowercases(self):
        assert parse_word_list("  Tree \nWATER\r\nboom") == ["tree", "water", "boom"]

    def test_skips_blank_lines(self):
        assert parse_word_list("\n\ncat\n   \ndog\n") == ["cat", "dog"]

    def test_drops_duplicates_keeping_order(self):
        assert parse_word_list("cat\nDog\nCAT\ndog") == ["cat", "dog"]


class TestLoadWordList:
    """Test loading from disk with fallback."""

    def test_loads_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("Cat\ncats\n")
        source = load_word_list(path)
        assert source.words == ["cat", "cats"]
        assert source.source == str(path)
        assert source.used_fallback is False

    def test_missing_file_falls_back(self, tmp_path):
        source = load_word_list(tmp_path / "nope.txt")
        assert source.words == list(FALLBACK_WORDS)
        assert source.used_fallback is True
        assert "nope.txt" in source.fallback_reason

    def test_empty_file_falls_back(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("\n  \n")
        source = load_word_list(path)
        assert source.used_fallback is True
        assert "no words" in source.fallback_reason

    def test_undecodable_file_falls_back(self, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\x00\x81")
        assert load_word_list(path).used_fallback is True

    def test_no_path_falls_back(self):
        source = load_word_list(None)
        assert source.source == "fallback"
        assert source.words == ["tree", "clear", "enter", "water", "huis", "boom"]

    def test_fallback_builds_usable_lexicon(self):
        lexicon = build_lexicon(load_word_list(None))
        assert len(lexicon) == 6
        assert lexicon.has_word("huis") is True
        assert lexicon.has_word("house") is False


class TestFindWords:
    """Test exhaustive search of a grid."""

    GRID = [
        ["C", "A", "T"],
        ["X", "X", "S"],
    ]

    def test_finds_traceable_words(self):
        lexicon = Lexicon(["cat", "cats", "act", "tax"])
        found = find_words(self.GRID, lexicon)
        # "act" needs C next to T, which it is not
        assert set(found) == {"cat", "cats", "tax"}

    def test_paths_are_valid_and_spell_the_word(self):
        lexicon = Lexicon(["cat", "cats", "tax"])
        for word, path in find_words(self.GRID, lexicon).items():
            assert is_valid_path(path)
            assert path_to_word(path, self.GRID).lower() == word

    def test_respects_min_length(self):
        lexicon = Lexicon(["at", "cat"])
        assert set(find_words(self.GRID, lexicon)) == {"cat"}
        assert set(find_words(self.GRID, lexicon, min_length=2)) == {"at", "cat"}

    def test_no_reuse_of_tiles(self):
        lexicon = Lexicon(["tat"])
        assert find_words(self.GRID, lexicon) == {}

    def test_empty_lexicon(self):
        assert find_words(self.GRID, Lexicon()) == {}
