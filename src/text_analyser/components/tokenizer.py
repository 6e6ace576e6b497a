"""
Компонент для фильтрации токенов.

Отвечает за разбивку нормализованного текста на токены и отсев
коротких слов и стоп-слов. Политика фильтрации неизменяема и
передаётся в компонент явно.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional

from ..interfaces.text_processor import TokenFilterInterface


DEFAULT_MIN_WORD_LENGTH = 3

DEFAULT_STOP_WORDS: FrozenSet[str] = frozenset({
    "the", "and", "is", "at", "which", "on", "a", "an", "as", "are",
    "was", "were", "been", "be", "have", "has", "had", "do", "does", "did",
    "for", "of", "to", "in", "it", "its", "this", "that", "with", "from",
})


@dataclass(frozen=True)
class FilterPolicy:
    """Политика отсева токенов: минимальная длина и набор стоп-слов."""
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    stop_words: FrozenSet[str] = field(default=DEFAULT_STOP_WORDS)

    def __post_init__(self):
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length должен быть >= 1, получено {self.min_word_length}")
        # Стоп-слова храним в нижнем регистре: токены уже приведены к нему
        object.__setattr__(self, 'stop_words', frozenset(w.lower() for w in self.stop_words))

    @classmethod
    def from_config(cls, cfg) -> "FilterPolicy":
        """
        Создаёт политику из конфигурации проекта.

        Args:
            cfg: Экземпляр Config

        Returns:
            Политика фильтрации
        """
        stop_words: Optional[Iterable[str]] = cfg.get_stop_words()
        return cls(
            min_word_length=cfg.get_min_word_length(),
            stop_words=frozenset(stop_words) if stop_words else DEFAULT_STOP_WORDS,
        )


class TokenFilter(TokenFilterInterface):
    """Фильтр токенов по длине и стоп-словам."""

    def __init__(self, policy: Optional[FilterPolicy] = None):
        """
        Инициализирует фильтр.

        Args:
            policy: Политика фильтрации (по умолчанию — стандартная)
        """
        self.policy = policy or FilterPolicy()

    def split(self, normalized_text: str) -> List[str]:
        """
        Разбивает нормализованный текст по одиночным пробелам.

        Args:
            normalized_text: Текст после TextNormalizer

        Returns:
            Список сырых токенов (возможны пустые на краях)
        """
        if not normalized_text:
            return []
        return normalized_text.split(' ')

    def is_kept(self, token: str) -> bool:
        """
        Проверяет, остаётся ли токен после фильтрации.

        Args:
            token: Токен для проверки

        Returns:
            True если токен непустой, не короче порога и не стоп-слово
        """
        if not token:
            return False

        if len(token) < self.policy.min_word_length:
            return False

        return token.lower() not in self.policy.stop_words

    def filter_tokens(self, tokens: List[str]) -> List[str]:
        """
        Фильтрует токены за один проход.

        Args:
            tokens: Список токенов в порядке документа

        Returns:
            Оставленные токены в том же порядке (с повторами)
        """
        if not tokens:
            return []

        return [token for token in tokens if self.is_kept(token)]

    def tokenize(self, normalized_text: str) -> List[str]:
        """Разбивает и фильтрует текст одним вызовом."""
        return self.filter_tokens(self.split(normalized_text))
