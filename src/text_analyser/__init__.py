"""
Text Analyser - модуль для лексического анализа текстовых документов

Этот модуль предоставляет инструменты для:
- Нормализации сырого текста
- Подсчёта частотности слов с отсевом стоп-слов
- Построения рейтингов и выборок по префиксу
- Формирования и экспорта текстового отчёта
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .text_analyzer import TextAnalyzer
from .document_reader import DocumentReader
from .interfaces.text_processor import AnalysisNotPerformedError
from . import cli

__all__ = [
    "TextAnalyzer",
    "DocumentReader",
    "AnalysisNotPerformedError",
    "cli"
]
