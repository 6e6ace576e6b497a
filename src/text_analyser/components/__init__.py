"""
Компоненты пайплайна анализа текста.

Каждый компонент отвечает за одну конкретную задачу:
- TextNormalizer - нормализация сырого текста
- TokenFilter - отсев коротких слов и стоп-слов
- FrequencyIndex - подсчёт частотности и производные показатели
- ReportGenerator - формирование и экспорт отчёта
"""

from .normalizer import TextNormalizer
from .tokenizer import TokenFilter, FilterPolicy, DEFAULT_STOP_WORDS, DEFAULT_MIN_WORD_LENGTH
from .frequency_analyzer import FrequencyIndex
from .exporter import ReportGenerator

__all__ = [
    'TextNormalizer',
    'TokenFilter',
    'FilterPolicy',
    'DEFAULT_STOP_WORDS',
    'DEFAULT_MIN_WORD_LENGTH',
    'FrequencyIndex',
    'ReportGenerator',
]
