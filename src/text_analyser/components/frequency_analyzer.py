"""
Компонент частотного индекса слов.

Отвечает за подсчёт частоты слов одного документа, производные
агрегаты (средняя длина, самое длинное и самое частое слово) и
запросы по рейтингу и префиксу.

Каждый вызов ingest() строит новый неизменяемый снимок и целиком
заменяет предыдущий. При равенстве длины или частоты побеждает
лексикографически меньшее слово.
"""

from collections import Counter, defaultdict
from typing import Dict, List, Optional, Set, Tuple
import logging

from ..interfaces.text_processor import (
    AnalysisNotPerformedError,
    AnalysisSnapshot,
    FrequencyIndexInterface,
)
from .tokenizer import FilterPolicy, TokenFilter

logger = logging.getLogger(__name__)


class FrequencyIndex(FrequencyIndexInterface):
    """Частотный индекс слов одного документа."""

    def __init__(self, policy: Optional[FilterPolicy] = None):
        """
        Инициализирует пустой индекс.

        Args:
            policy: Политика фильтрации токенов
        """
        self.token_filter = TokenFilter(policy)
        self._snapshot: Optional[AnalysisSnapshot] = None

    @property
    def policy(self) -> FilterPolicy:
        return self.token_filter.policy

    @property
    def is_analyzed(self) -> bool:
        """Был ли выполнен хотя бы один ingest()."""
        return self._snapshot is not None

    @property
    def snapshot(self) -> AnalysisSnapshot:
        """Текущий снимок статистики."""
        if self._snapshot is None:
            raise AnalysisNotPerformedError("Text has not been analyzed yet. Call ingest() first.")
        return self._snapshot

    def ingest(self, normalized_text: str) -> AnalysisSnapshot:
        """
        Пересчитывает статистику по нормализованному тексту.

        Args:
            normalized_text: Текст после TextNormalizer

        Returns:
            Новый снимок статистики
        """
        kept_words = self.token_filter.tokenize(normalized_text or "")
        counts = Counter(kept_words)

        # Снимок подменяется целиком, частичного состояния не бывает
        self._snapshot = AnalysisSnapshot.build(counts, kept_words)

        logger.debug(f"Проиндексировано слов: {len(kept_words)}, уникальных: {len(counts)}")
        return self._snapshot

    def total_word_count(self) -> int:
        return len(self.snapshot.kept_words)

    def unique_word_count(self) -> int:
        return len(self.snapshot.frequencies)

    def average_word_length(self) -> float:
        """
        Средняя длина слова с учётом повторов.

        Returns:
            Средняя длина или 0.0 для пустого документа
        """
        kept_words = self.snapshot.kept_words
        if not kept_words:
            return 0.0
        return sum(len(word) for word in kept_words) / len(kept_words)

    def longest_word(self) -> str:
        """Самое длинное слово; при равной длине — лексикографически меньшее."""
        frequencies = self.snapshot.frequencies
        if not frequencies:
            return ""
        return min(frequencies, key=lambda word: (-len(word), word))

    def most_frequent_word(self) -> str:
        """Самое частое слово; при равной частоте — лексикографически меньшее."""
        top = self.top_n(1)
        return top[0][0] if top else ""

    def most_frequent_word_count(self) -> int:
        frequencies = self.snapshot.frequencies
        return max(frequencies.values()) if frequencies else 0

    def top_n(self, n: int) -> List[Tuple[str, int]]:
        """
        Возвращает n самых частых слов.

        Args:
            n: Количество слов для возврата

        Returns:
            Список кортежей (слово, частота): частота по убыванию,
            при равенстве — слово по возрастанию
        """
        frequencies = self.snapshot.frequencies
        if n <= 0 or not frequencies:
            return []

        ranked = sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:n]

    def words_with_prefix(self, prefix: str) -> List[str]:
        """
        Возвращает слова, начинающиеся с префикса.

        Args:
            prefix: Префикс (регистр не важен)

        Returns:
            Отсортированный список слов; пустой, если совпадений нет
        """
        lower_prefix = (prefix or "").lower()
        return sorted(word for word in self.snapshot.frequencies if word.startswith(lower_prefix))

    def word_count(self, word: str) -> int:
        """
        Возвращает частоту конкретного слова.

        Args:
            word: Слово для проверки (регистр не важен)

        Returns:
            Частота появления слова или 0
        """
        return self.snapshot.frequencies.get((word or "").lower(), 0)

    def stop_words(self) -> Set[str]:
        """Копия набора исключаемых стоп-слов."""
        return set(self.policy.stop_words)

    def word_frequencies(self) -> Dict[str, int]:
        """
        Экспортирует частотности в обычный словарь.

        Returns:
            Копия таблицы частот
        """
        return dict(self.snapshot.frequencies)

    def length_distribution(self) -> Dict[int, int]:
        """
        Возвращает распределение слов по длине.

        Returns:
            Словарь {длина: количество вхождений слов такой длины}
        """
        distribution: Dict[int, int] = defaultdict(int)
        for word, count in self.snapshot.frequencies.items():
            distribution[len(word)] += count
        return dict(distribution)
