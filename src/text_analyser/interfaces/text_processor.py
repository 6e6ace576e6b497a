"""
Абстрактные интерфейсы для компонентов анализа текста.

Определяет контракты, которые должны реализовывать все компоненты
пайплайна (нормализация → частотный индекс → отчёт), а также
общие структуры данных, которыми компоненты обмениваются.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Set, Tuple, Union
from pathlib import Path


class AnalysisNotPerformedError(RuntimeError):
    """Запрос статистики до того, как документ был проанализирован."""

    def __init__(self, message: str = "Analysis has not been performed. Call analyze() first."):
        super().__init__(message)


@dataclass(frozen=True)
class Document:
    """Исходный документ: метка источника и сырой текст."""
    source: str
    text: str


@dataclass(frozen=True)
class AnalysisSnapshot:
    """
    Результат одной индексации: таблица частот и последовательность
    оставленных слов в порядке документа.

    Обе части строятся вместе из одного нормализованного текста и
    никогда не изменяются после создания.
    """
    frequencies: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    kept_words: Tuple[str, ...] = ()

    @classmethod
    def build(cls, counts: Dict[str, int], kept_words: List[str]) -> "AnalysisSnapshot":
        """Создаёт снимок, закрывая внутренние коллекции от изменений."""
        return cls(frequencies=MappingProxyType(dict(counts)), kept_words=tuple(kept_words))


class TextNormalizerInterface(ABC):
    """Интерфейс для нормализации сырого текста."""

    @abstractmethod
    def normalize(self, raw_text: str) -> str:
        """Приводит текст к каноническому виду."""
        pass


class TokenFilterInterface(ABC):
    """Интерфейс для фильтрации токенов."""

    @abstractmethod
    def split(self, normalized_text: str) -> List[str]:
        """Разбивает нормализованный текст на токены."""
        pass

    @abstractmethod
    def is_kept(self, token: str) -> bool:
        """Проверяет, проходит ли токен фильтры."""
        pass

    @abstractmethod
    def filter_tokens(self, tokens: List[str]) -> List[str]:
        """Фильтрует токены, сохраняя порядок документа."""
        pass

    @abstractmethod
    def tokenize(self, normalized_text: str) -> List[str]:
        """Разбивает и фильтрует нормализованный текст."""
        pass


class FrequencyIndexInterface(ABC):
    """Интерфейс для частотного индекса слов."""

    @abstractmethod
    def ingest(self, normalized_text: str) -> AnalysisSnapshot:
        """Полностью пересчитывает статистику по нормализованному тексту."""
        pass

    @abstractmethod
    def total_word_count(self) -> int:
        pass

    @abstractmethod
    def unique_word_count(self) -> int:
        pass

    @abstractmethod
    def average_word_length(self) -> float:
        pass

    @abstractmethod
    def longest_word(self) -> str:
        pass

    @abstractmethod
    def most_frequent_word(self) -> str:
        pass

    @abstractmethod
    def most_frequent_word_count(self) -> int:
        pass

    @abstractmethod
    def top_n(self, n: int) -> List[Tuple[str, int]]:
        """Возвращает n самых частых слов."""
        pass

    @abstractmethod
    def words_with_prefix(self, prefix: str) -> List[str]:
        """Возвращает слова с заданным префиксом."""
        pass

    @abstractmethod
    def word_count(self, word: str) -> int:
        pass

    @abstractmethod
    def stop_words(self) -> Set[str]:
        pass

    @abstractmethod
    def length_distribution(self) -> Dict[int, int]:
        """Возвращает распределение слов по длине."""
        pass


class ReportGeneratorInterface(ABC):
    """Интерфейс для генерации отчётов."""

    @abstractmethod
    def generate_report(self) -> str:
        """Формирует полный текстовый отчёт."""
        pass

    @abstractmethod
    def print_report(self) -> None:
        """Выводит отчёт в стандартный вывод."""
        pass

    @abstractmethod
    def export_report(self, filepath: Union[str, Path]) -> None:
        """Сохраняет отчёт в файл."""
        pass

    @abstractmethod
    def summary(self) -> str:
        """Возвращает однострочную сводку."""
        pass
