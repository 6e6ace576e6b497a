#!/usr/bin/env python3
"""
Основной скрипт Text Analyser

Простая точка входа для демонстрации возможностей проекта.
Для анализа файлов используйте: python -m text_analyser.cli
"""

import sys
from pathlib import Path

# Добавляем путь к модулям
sys.path.insert(0, str(Path(__file__).parent))

from text_analyser.components import TextNormalizer, FrequencyIndex, FilterPolicy, ReportGenerator
from text_analyser.config import config


SAMPLE_TEXT = """
Programming is the process of creating a set of instructions that tell a computer
how to perform a task. Programming can be done using a variety of computer
programming languages. Developers write programs, test programs and deploy them.
Technology moves fast, and a good developer keeps learning new technology.
"""


def demo_analysis():
    """Демонстрация основных возможностей анализа"""
    print("=== Демонстрация Text Analyser ===\n")

    normalizer = TextNormalizer()
    index = FrequencyIndex(FilterPolicy.from_config(config))

    print("🔧 Нормализация текста...")
    normalized = normalizer.normalize(SAMPLE_TEXT)
    print(f"   {normalized[:70]}...")

    index.ingest(normalized)
    report = ReportGenerator(index, "<demo>")

    print(f"\n📊 {report.summary()}")

    print()
    print(report.top_words_formatted(5))

    for prefix in ("pro", "dev", "tech"):
        print(report.words_with_prefix_formatted(prefix))

    print("=" * 50)
    print("🚀 Для анализа файлов используйте:")
    print("   python -m text_analyser.cli <input> [output]")
    print("=" * 50)


def main():
    """Основная функция"""
    try:
        demo_analysis()
    except KeyboardInterrupt:
        print("\n\n👋 Работа прервана пользователем")


if __name__ == "__main__":
    main()
