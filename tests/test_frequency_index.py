"""
Тесты для компонента FrequencyIndex.
"""

import pytest

from text_analyser.components.frequency_analyzer import FrequencyIndex
from text_analyser.components.normalizer import TextNormalizer
from text_analyser.components.tokenizer import FilterPolicy
from text_analyser.interfaces.text_processor import AnalysisNotPerformedError


def _ingest(text: str, policy: FilterPolicy = None) -> FrequencyIndex:
    index = FrequencyIndex(policy)
    index.ingest(TextNormalizer().normalize(text))
    return index


class TestFrequencyIndexScenario:
    """Проверка известного примера с лисой и собакой."""

    def test_counts(self, fox_index):
        assert fox_index.snapshot.kept_words == (
            "quick", "brown", "fox", "jumps", "over", "lazy", "dog", "dog", "barks"
        )
        assert fox_index.total_word_count() == 9
        assert fox_index.unique_word_count() == 8
        assert fox_index.word_count("dog") == 2
        assert fox_index.word_count("DOG") == 2
        assert fox_index.word_count("fox") == 1
        assert fox_index.word_count("the") == 0

    def test_most_frequent(self, fox_index):
        assert fox_index.most_frequent_word() == "dog"
        assert fox_index.most_frequent_word_count() == 2

    def test_top_n(self, fox_index):
        assert fox_index.top_n(3) == [("dog", 2), ("barks", 1), ("brown", 1)]

    def test_average_and_longest(self, fox_index):
        assert fox_index.average_word_length() == pytest.approx(37 / 9)
        # quick, brown, jumps, barks — длина 5, побеждает лексикографически меньшее
        assert fox_index.longest_word() == "barks"

    def test_length_distribution(self, fox_index):
        assert fox_index.length_distribution() == {3: 3, 4: 2, 5: 4}


class TestFrequencyIndexProperties:
    """Инварианты индекса на разных текстах."""

    def test_sum_of_counts_equals_total(self, sample_texts):
        for text in sample_texts.values():
            index = _ingest(text)
            assert sum(index.word_frequencies().values()) == index.total_word_count()
            assert sum(index.length_distribution().values()) == index.total_word_count()

    def test_filtered_tokens_never_indexed(self, sample_texts):
        index = _ingest(sample_texts["prose"])
        for word in index.word_frequencies():
            assert len(word) >= 3
            assert word not in index.stop_words()

    def test_top_n_ordering(self, sample_texts):
        index = _ingest(sample_texts["prose"])
        ranked = index.top_n(100)

        assert len(ranked) == index.unique_word_count()
        for (word_a, count_a), (word_b, count_b) in zip(ranked, ranked[1:]):
            assert count_a >= count_b
            if count_a == count_b:
                assert word_a < word_b

    @pytest.mark.parametrize("n, expected", [(0, 0), (-3, 0), (1, 1), (5, 5), (1000, 16)])
    def test_top_n_length(self, sample_texts, n, expected):
        index = _ingest(sample_texts["prose"])
        assert index.unique_word_count() == 16
        assert len(index.top_n(n)) == expected

    def test_words_with_prefix(self, sample_texts):
        index = _ingest(sample_texts["prose"])

        assert index.words_with_prefix("pro") == ["process", "programmers", "programming", "programs"]
        assert index.words_with_prefix("PRO") == index.words_with_prefix("pro")
        assert index.words_with_prefix("dev") == ["develop", "developers"]
        assert index.words_with_prefix("tech") == []

    def test_most_frequent_tie_break(self):
        """При равной частоте выбирается лексикографически меньшее слово."""
        index = _ingest("zebra apple mango zebra apple mango")
        assert index.most_frequent_word() == "apple"
        assert index.most_frequent_word_count() == 2

    def test_longest_tie_break(self):
        index = _ingest("wxyz abcd lmno")
        assert index.longest_word() == "abcd"

    def test_custom_policy(self):
        index = _ingest("a bb ccc dddd the", FilterPolicy(min_word_length=2, stop_words=frozenset({"ccc"})))
        assert index.word_frequencies() == {"bb": 1, "dddd": 1, "the": 1}

    def test_kept_words_match_token_filter(self, sample_texts):
        """Индекс хранит ровно то, что пропустил фильтр токенов."""
        normalized = TextNormalizer().normalize(sample_texts["prose"])
        index = FrequencyIndex()
        index.ingest(normalized)

        assert list(index.snapshot.kept_words) == index.token_filter.tokenize(normalized)


class TestFrequencyIndexLifecycle:
    """Тесты жизненного цикла индекса."""

    def test_queries_before_ingest_fail(self):
        """Запросы до ingest() — ошибка программиста."""
        index = FrequencyIndex()
        assert index.is_analyzed is False

        with pytest.raises(AnalysisNotPerformedError):
            index.total_word_count()
        with pytest.raises(AnalysisNotPerformedError):
            index.top_n(5)
        with pytest.raises(AnalysisNotPerformedError):
            index.words_with_prefix("a")

    def test_empty_document(self):
        index = FrequencyIndex()
        index.ingest("")

        assert index.is_analyzed is True
        assert index.total_word_count() == 0
        assert index.unique_word_count() == 0
        assert index.average_word_length() == 0.0
        assert index.longest_word() == ""
        assert index.most_frequent_word() == ""
        assert index.most_frequent_word_count() == 0
        assert index.top_n(5) == []
        assert index.length_distribution() == {}

    def test_reingest_replaces_statistics(self, fox_index):
        """Повторный ingest() полностью заменяет статистику."""
        first = fox_index.snapshot
        fox_index.ingest("alpha beta alpha")

        assert fox_index.word_frequencies() == {"alpha": 2, "beta": 1}
        assert fox_index.word_count("dog") == 0
        assert fox_index.total_word_count() == 3
        # Старый снимок не изменился
        assert first.frequencies["dog"] == 2

    def test_returned_collections_are_copies(self, fox_index):
        """Снаружи нельзя изменить внутреннее состояние."""
        fox_index.word_frequencies()["dog"] = 100
        fox_index.stop_words().add("dog")

        assert fox_index.word_count("dog") == 2
        assert "dog" not in fox_index.stop_words()
        with pytest.raises(TypeError):
            fox_index.snapshot.frequencies["dog"] = 100
