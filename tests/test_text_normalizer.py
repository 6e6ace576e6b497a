"""
Тесты для компонента TextNormalizer.
"""

import pytest

from text_analyser.components.normalizer import TextNormalizer


class TestTextNormalizer:
    """Тесты для TextNormalizer."""

    def test_normalize_basic(self):
        """Тест базовой нормализации."""
        normalizer = TextNormalizer()

        assert normalizer.normalize("HELLO World") == "hello world"
        assert normalizer.normalize(
            "The Quick brown fox jumps over the lazy dog. The dog barks!"
        ) == "the quick brown fox jumps over the lazy dog the dog barks"

    def test_punctuation_becomes_separator(self):
        """Пунктуация заменяется пробелом и не склеивает слова."""
        normalizer = TextNormalizer()

        assert normalizer.normalize("don't") == "don t"
        assert normalizer.normalize("end.Start") == "end start"
        assert normalizer.normalize("e-mail,address;here") == "e mail address here"

    def test_whitespace_collapsed_and_trimmed(self):
        """Тест нормализации пробелов."""
        normalizer = TextNormalizer()

        assert normalizer.normalize("  hello   world  ") == "hello world"
        assert normalizer.normalize("\t\tline one\nline two\r\n") == "line one line two"

    def test_digits_are_kept(self):
        """Цифры остаются частью слов."""
        normalizer = TextNormalizer()

        assert normalizer.normalize("Python3 in 2024!") == "python3 in 2024"

    def test_non_ascii_letters_are_kept(self):
        """Буквы с диакритикой и не-латинские буквы не удаляются."""
        normalizer = TextNormalizer()

        assert normalizer.normalize("Café NIÑO, Привет!") == "café niño привет"

    @pytest.mark.parametrize("raw", ["", None, "   ", "...!!!", "-- ,, ??\n\t"])
    def test_normalize_empty(self, raw):
        """Тест нормализации пустых значений и текста без слов."""
        assert TextNormalizer().normalize(raw) == ""

    def test_normalize_is_idempotent(self, sample_texts):
        """Повторная нормализация ничего не меняет."""
        normalizer = TextNormalizer()

        for text in sample_texts.values():
            once = normalizer.normalize(text)
            assert normalizer.normalize(once) == once

    def test_normalize_batch(self):
        """Тест батчевой нормализации."""
        normalizer = TextNormalizer()

        assert normalizer.normalize_batch(["A.B", "  C  "]) == ["a b", "c"]
        assert normalizer.normalize_batch([]) == []
        assert normalizer.normalize_batch(None) == []
