"""
Модуль для анализа текстового документа

Связывает компоненты в пайплайн для одного документа:
чтение → нормализация → частотный индекс → отчёт.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union
import logging

from .config import config
from .components.normalizer import TextNormalizer
from .components.tokenizer import FilterPolicy
from .components.frequency_analyzer import FrequencyIndex
from .components.exporter import ReportGenerator
from .document_reader import DocumentReader
from .interfaces.text_processor import AnalysisNotPerformedError, Document

logger = logging.getLogger(__name__)


class TextAnalyzer:
    """Класс для анализа одного текстового документа"""

    def __init__(self,
                 input_path: Union[str, Path],
                 policy: Optional[FilterPolicy] = None,
                 reader: Optional[DocumentReader] = None):
        """
        Инициализация анализатора

        Args:
            input_path: Путь к анализируемому файлу
            policy: Политика фильтрации (по умолчанию из config)
            reader: Читатель документов
        """
        self.input_path = Path(input_path)
        self.reader = reader or DocumentReader()
        self.normalizer = TextNormalizer()
        self.index = FrequencyIndex(policy or FilterPolicy.from_config(config))
        self.document: Optional[Document] = None
        self._report: Optional[ReportGenerator] = None

    @property
    def report(self) -> ReportGenerator:
        """Генератор отчёта для проанализированного документа."""
        if self._report is None:
            raise AnalysisNotPerformedError()
        return self._report

    def analyze(self) -> ReportGenerator:
        """
        Читает документ, нормализует его и строит статистику.

        Returns:
            Генератор отчёта, привязанный к индексу

        Raises:
            OSError: если документ не удалось прочитать
        """
        document = self.reader.read(self.input_path)
        normalized = self.normalizer.normalize(document.text)
        snapshot = self.index.ingest(normalized)

        self.document = document
        self._report = ReportGenerator(
            self.index,
            document.source,
            top_words=config.get_top_words_count(),
            word_column_width=config.get_word_column_width(),
            histogram_min_length=config.get_histogram_min_length(),
            histogram_max_length=config.get_histogram_max_length(),
        )
        logger.info(
            f"Анализ {document.source} завершён: {len(snapshot.kept_words)} слов, "
            f"{len(snapshot.frequencies)} уникальных"
        )
        return self._report

    def get_top_n_words(self, n: int) -> List[Tuple[str, int]]:
        return self.index.top_n(n)

    def get_words_starting_with(self, prefix: str) -> List[str]:
        return self.index.words_with_prefix(prefix)

    def print_report(self) -> None:
        self.report.print_report()

    def export_report(self, output_path: Union[str, Path]) -> None:
        self.report.export_report(output_path)
