"""
Компонент для формирования и экспорта отчёта по анализу текста.

Отвечает за текстовое представление статистики частотного индекса:
полный отчёт, краткую сводку, рейтинг и выборку по префиксу,
а также за вывод отчёта в консоль и сохранение в файл.
"""

from pathlib import Path
from typing import List, Union
import logging

from ..interfaces.text_processor import FrequencyIndexInterface, ReportGeneratorInterface

logger = logging.getLogger(__name__)


REPORT_WIDTH = 60
SECTION_WIDTH = 40


class ReportGenerator(ReportGeneratorInterface):
    """Генератор отчёта, привязанный к одному индексу и источнику."""

    def __init__(self,
                 index: FrequencyIndexInterface,
                 source: str,
                 top_words: int = 10,
                 word_column_width: int = 20,
                 histogram_min_length: int = 3,
                 histogram_max_length: int = 19):
        """
        Инициализирует генератор отчёта.

        Args:
            index: Заполненный частотный индекс (только чтение)
            source: Метка источника (обычно путь к файлу)
            top_words: Размер рейтинга в полном отчёте
            word_column_width: Ширина колонки со словом в рейтинге
            histogram_min_length: Минимальная длина в гистограмме
            histogram_max_length: Максимальная длина в гистограмме (включительно)
        """
        self.index = index
        self.source = source
        self.top_words = top_words
        self.word_column_width = word_column_width
        self.histogram_min_length = histogram_min_length
        self.histogram_max_length = histogram_max_length

    @staticmethod
    def _section(title: str) -> List[str]:
        rule = "-" * SECTION_WIDTH
        return [rule, title, rule]

    def generate_report(self) -> str:
        """
        Формирует полный текстовый отчёт.

        Returns:
            Отчёт в виде одной строки
        """
        index = self.index
        banner = "=" * REPORT_WIDTH
        lines: List[str] = [
            banner,
            "           TEXT DOCUMENT ANALYSIS REPORT",
            banner,
            "",
            f"Source File: {self.source}",
            "",
        ]

        # Базовая статистика
        longest = index.longest_word()
        lines += self._section("BASIC STATISTICS")
        lines += [
            f"Total Word Count:      {index.total_word_count()}",
            f"Unique Word Count:     {index.unique_word_count()}",
            f"Average Word Length:   {index.average_word_length():.2f} characters",
            f"Longest Word:          {longest} ({len(longest)} characters)",
            f"Most Frequent Word:    {index.most_frequent_word()} "
            f"(appears {index.most_frequent_word_count()} times)",
            "",
        ]

        # Рейтинг
        width = self.word_column_width
        lines += self._section(f"TOP {self.top_words} MOST FREQUENT WORDS")
        for rank, (word, count) in enumerate(index.top_n(self.top_words), 1):
            # Хотя бы один пробел между словом и счётчиком
            lines.append(f"{rank:2d}. {word[:width - 1]:<{width}}{count}")
        lines.append("")

        # Гистограмма длин: слова длиннее histogram_max_length не учитываются
        lines += self._section("WORD LENGTH DISTRIBUTION")
        distribution = index.length_distribution()
        for length in range(self.histogram_min_length, self.histogram_max_length + 1):
            count = distribution.get(length, 0)
            if count > 0:
                lines.append(f"{length:2d} characters: {count} words")
        lines.append("")

        lines += self._section("STOP WORDS EXCLUDED")
        lines += [
            "The following stop words were excluded from analysis:",
            ", ".join(sorted(index.stop_words())),
            "",
            banner,
            "                 END OF REPORT",
            banner,
        ]

        return "\n".join(lines) + "\n"

    def print_report(self) -> None:
        """Выводит отчёт в стандартный вывод."""
        print(self.generate_report())

    def export_report(self, filepath: Union[str, Path]) -> None:
        """
        Сохраняет отчёт в файл, перезаписывая его.

        Args:
            filepath: Путь для сохранения файла

        Raises:
            OSError: если файл не удалось записать
        """
        report = self.generate_report()
        filepath = Path(filepath)

        try:
            with open(filepath, 'w', encoding='utf-8') as report_file:
                report_file.write(report)
        except OSError as e:
            logger.error(f"Ошибка экспорта отчёта в {filepath}: {e}")
            raise

        logger.info(f"Отчёт сохранён: {filepath}")
        print(f"Report exported to: {filepath}")

    def summary(self) -> str:
        """Однострочная сводка по ключевым показателям."""
        index = self.index
        return (
            f"Summary: {index.total_word_count()} total words, "
            f"{index.unique_word_count()} unique words, "
            f"avg length {index.average_word_length():.2f}, "
            f"most frequent: '{index.most_frequent_word()}' "
            f"({index.most_frequent_word_count()} times)"
        )

    def top_words_formatted(self, n: int) -> str:
        """
        Рейтинг n самых частых слов в читаемом виде.

        Args:
            n: Количество слов

        Returns:
            Многострочный текст
        """
        lines = [f"Top {n} Words:"]
        for rank, (word, count) in enumerate(self.index.top_n(n), 1):
            lines.append(f"  {rank}. {word} ({count})")
        return "\n".join(lines) + "\n"

    def words_with_prefix_formatted(self, prefix: str) -> str:
        """
        Слова с заданным префиксом в читаемом виде.

        Args:
            prefix: Префикс для поиска

        Returns:
            Многострочный текст; «No words found.», если совпадений нет
        """
        lines = [f"Words starting with '{prefix}':"]
        words = self.index.words_with_prefix(prefix)
        if not words:
            lines.append("  No words found.")
        for word in words:
            lines.append(f"  - {word} ({self.index.word_count(word)})")
        return "\n".join(lines) + "\n"
