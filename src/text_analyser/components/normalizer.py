"""
Компонент для нормализации сырого текста.

Принципы:
- Приводим текст к нижнему регистру
- Любой символ, кроме буквы, цифры и пробела, заменяем пробелом
  («don't» → «don t», а не «dont»)
- Схлопываем серии пробелов и обрезаем края
- Никакой токенизации: на выходе одна строка, слова разделены одним пробелом
"""

import re
import unicodedata
from typing import List, Optional

from ..interfaces.text_processor import TextNormalizerInterface


class TextNormalizer(TextNormalizerInterface):
    """Нормализатор текста перед частотным анализом."""

    _space_runs = re.compile(r" {2,}")

    def normalize(self, raw_text: Optional[str]) -> str:
        """
        Нормализует текст.

        Args:
            raw_text: Исходный текст

        Returns:
            Текст в нижнем регистре, слова разделены одним пробелом
        """
        if not raw_text:
            return ""

        # NFC после lower(), чтобы повторная нормализация ничего не меняла
        text = unicodedata.normalize('NFC', raw_text.lower())

        cleaned = ''.join(ch if ch.isalnum() or ch == ' ' else ' ' for ch in text)

        return self._space_runs.sub(' ', cleaned).strip()

    def normalize_batch(self, texts: Optional[List[str]]) -> List[str]:
        """
        Нормализует список текстов.

        Args:
            texts: Список текстов для нормализации

        Returns:
            Список нормализованных текстов
        """
        if not texts:
            return []

        return [self.normalize(text) for text in texts]
