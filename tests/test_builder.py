"""
Unit tests for edit distance and word-graph construction.
"""

import random
import string

import pytest

from wordgraph import build_from_lines, levenshtein, load_word_file


class TestLevenshtein:
    """Edit distance."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("cat", "cot", 1),
            ("cat", "cat", 0),
            ("", "abc", 3),
            ("abc", "", 3),
            ("", "", 0),
            ("cat", "cats", 1),
            ("cats", "cat", 1),
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("cat", "dog", 3),
        ],
    )
    def test_known_distances(self, a, b, expected):
        assert levenshtein(a, b) == expected

    def test_symmetric(self):
        rng = random.Random(3)
        for _ in range(50):
            a = "".join(rng.choice("abc") for _ in range(rng.randrange(6)))
            b = "".join(rng.choice("abc") for _ in range(rng.randrange(6)))
            assert levenshtein(a, b) == levenshtein(b, a)


class TestBuildFromLines:
    """Construction edge rule."""

    def test_cat_cot_dog(self):
        g = build_from_lines(["cat", "cot", "dog"])
        assert g.node_ids() == [1, 2, 3]
        assert g.get_label(1) == "cat"
        assert g.edge_exists(1, 2)
        assert not g.edge_exists(1, 3)
        assert not g.edge_exists(2, 3)
        assert g.edge_count() == 1

    def test_strips_line_breaks_only(self):
        g = build_from_lines(["cat\n", "cot\r\n", " cot\n", "\n"])
        assert g.get_label(1) == "cat"
        assert g.get_label(2) == "cot"
        assert g.get_label(3) == " cot"
        assert g.get_label(4) == ""
        assert g.edge_exists(2, 3)

    def test_identical_words_are_not_linked(self):
        g = build_from_lines(["same", "same", "sane"])
        assert not g.edge_exists(1, 2)
        assert g.edge_exists(1, 3)
        assert g.edge_exists(2, 3)

    def test_empty_word_links_to_single_letters(self):
        g = build_from_lines(["", "a", "ab"])
        assert g.edge_exists(1, 2)
        assert g.edge_exists(2, 3)
        assert not g.edge_exists(1, 3)

    def test_sample_words(self, sample_words):
        g = build_from_lines(sample_words, name="sample")
        assert g.name == "sample"
        assert g.node_count() == 12
        assert list(g.edges()) == [
            (1, 2), (2, 3), (2, 6), (3, 4), (4, 5), (4, 6),
            (5, 7), (6, 7), (9, 10), (9, 11), (10, 11), (10, 12), (11, 12),
        ]

    def test_strategies_agree(self):
        rng = random.Random(11)
        words = [
            "".join(rng.choice("abcd") for _ in range(rng.randint(0, 4)))
            for _ in range(300)
        ]
        indexed  = build_from_lines(words, strategy="indexed")
        pairwise = build_from_lines(words, strategy="pairwise")
        assert list(indexed.edges()) == list(pairwise.edges())
        assert indexed.edge_count() == pairwise.edge_count()

    def test_strategies_agree_on_realistic_words(self):
        rng = random.Random(5)
        words = ["".join(rng.choice(string.ascii_lowercase[:6]) for _ in range(4)) for _ in range(400)]
        assert list(build_from_lines(words).edges()) == list(
            build_from_lines(words, strategy="pairwise").edges()
        )

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            build_from_lines(["a"], strategy="magic")

    def test_empty_input(self):
        g = build_from_lines([])
        assert g.node_count() == 0
        assert g.edge_count() == 0


class TestLoadWordFile:
    """Reading word files."""

    def test_load(self, word_file):
        g = load_word_file(word_file)
        assert g.name == "words"
        assert g.node_count() == 12
        assert g.edge_count() == 13

    def test_explicit_name(self, word_file):
        assert load_word_file(word_file, name="custom").name == "custom"

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_word_file(tmp_path / "absent.txt")
