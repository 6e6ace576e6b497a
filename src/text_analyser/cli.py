#!/usr/bin/env python3
"""
Интерфейс командной строки для Text Analyser

Анализирует один текстовый документ:
1. Читает и нормализует файл
2. Печатает полный отчёт в stdout
3. Сохраняет отчёт в файл
4. Показывает рейтинг слов и выборки по префиксам

Ход работы и ошибки выводятся в stderr. Код возврата 1 при любой
ошибке ввода-вывода или непредвиденной ошибке, иначе 0.
"""

import sys
import argparse
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 5
DEFAULT_PREFIXES = ["pro", "dev", "tech"]


def _progress(message: str) -> None:
    """Сообщение о ходе работы (stderr, не смешивается с отчётом)."""
    print(message, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    """Создаёт парсер аргументов командной строки."""
    parser = argparse.ArgumentParser(
        prog="text-analyser",
        description="Text Analyser - лексический анализ текстового документа",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m text_analyser.cli                         # sample_text.txt → output_report.txt
  python -m text_analyser.cli book.txt report.txt     # Явные пути
  python -m text_analyser.cli book.txt --top 10       # Топ 10 слов после отчёта
  python -m text_analyser.cli book.txt --prefix anal  # Слова на «anal»
        """
    )

    parser.add_argument(
        'input',
        nargs='?',
        help='Путь к анализируемому файлу (по умолчанию из config.yaml)'
    )

    parser.add_argument(
        'output',
        nargs='?',
        help='Путь к файлу отчёта (по умолчанию из config.yaml)'
    )

    parser.add_argument(
        '--top',
        type=int,
        default=DEFAULT_TOP_N,
        help=f'Сколько самых частых слов показать после отчёта (по умолчанию {DEFAULT_TOP_N})'
    )

    parser.add_argument(
        '--prefix',
        action='append',
        dest='prefixes',
        help='Префикс для выборки слов (можно указать несколько раз)'
    )

    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Не печатать полный отчёт в консоль'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Подробное логирование (уровень DEBUG)'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    # Инициализируем логирование из конфигурации в самом начале
    from .config import config
    from .text_analyzer import TextAnalyzer

    args = build_parser().parse_args(argv)

    if args.debug:
        config._set_nested(config.config_data, 'logging.console_level', 'DEBUG')
        config._configure_logging_if_needed(force=True)

    input_path = args.input or config.get_default_input()
    output_path = args.output or config.get_default_output()
    prefixes = args.prefixes or DEFAULT_PREFIXES

    _progress("📊 Text Analyser - анализ текстового документа")
    _progress("=" * 50)
    _progress(f"📄 Входной файл: {input_path}")

    try:
        analyzer = TextAnalyzer(input_path)
        report = analyzer.analyze()
    except OSError as e:
        _progress(f"❌ Ошибка чтения файла {input_path}: {e}")
        _progress("Проверьте, что входной файл существует и доступен для чтения")
        return 1
    except Exception as e:
        logger.exception("Непредвиденная ошибка при анализе")
        _progress(f"❌ Непредвиденная ошибка: {e}")
        return 1

    try:
        if not args.quiet:
            report.print_report()

        _progress(f"📁 Сохраняю отчёт: {output_path}")
        report.export_report(output_path)

        print()
        print(report.top_words_formatted(args.top))
        for prefix in prefixes:
            print(report.words_with_prefix_formatted(prefix))

        _progress(f"✅ {report.summary()}")

    except OSError as e:
        _progress(f"❌ Ошибка записи отчёта в {output_path}: {e}")
        return 1
    except Exception as e:
        logger.exception("Непредвиденная ошибка при формировании отчёта")
        _progress(f"❌ Непредвиденная ошибка: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
