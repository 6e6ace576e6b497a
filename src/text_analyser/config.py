"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (поиск от текущей директории вверх)
- Значения по умолчанию, если файла нет или он повреждён
- Валидация параметров анализа
- Настройка логирования
"""

import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
import logging
from datetime import datetime

logger = logging.getLogger(__name__)


class Config:
    """Класс для работы с конфигурацией проекта"""

    # Числовые параметры отчёта и их значения по умолчанию
    REPORT_INT_DEFAULTS = {
        'report.top_words': 10,
        'report.word_column_width': 20,
        'report.histogram_min_length': 3,
        'report.histogram_max_length': 19,
    }

    def __init__(self, config_path: str = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в корне проекта
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            # Если не найден в текущей директории, ищем в родительских
            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data = {}

        self._load_config()
        self._validate()
        # Настраиваем логирование согласно конфигу (идемпотентно, с возможностью переинициализации)
        self._configure_logging_if_needed()

    def _load_config(self):
        """Загружает конфигурацию из YAML файла"""
        try:
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.warning(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
                self.config_data = self._get_default_config()
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = self._get_default_config()

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _validate(self) -> None:
        """Проверяет диапазоны параметров анализа и отчёта."""
        try:
            min_len = int(self.get('text_analysis.min_word_length', 3))
            if min_len < 1:
                logger.warning("min_word_length < 1 — принудительно установлено в 1")
                self._set_nested(self.config_data, 'text_analysis.min_word_length', 1)
        except (TypeError, ValueError):
            logger.warning("min_word_length не является числом — используется 3")
            self._set_nested(self.config_data, 'text_analysis.min_word_length', 3)

        stop_words = self.get('text_analysis.stop_words')
        if stop_words is not None and not isinstance(stop_words, list):
            logger.warning("text_analysis.stop_words должен быть списком — используется встроенный набор")
            self._set_nested(self.config_data, 'text_analysis.stop_words', None)
        elif stop_words == []:
            logger.warning("text_analysis.stop_words пуст — используется встроенный набор")
            self._set_nested(self.config_data, 'text_analysis.stop_words', None)

        for key, default in self.REPORT_INT_DEFAULTS.items():
            try:
                int(self.get(key, default))
            except (TypeError, ValueError):
                logger.warning(f"{key} не является числом — используется {default}")
                self._set_nested(self.config_data, key, default)

        low = self.get_histogram_min_length()
        high = self.get_histogram_max_length()
        if low > high:
            logger.warning(f"histogram_min_length ({low}) > histogram_max_length ({high}) — границы переставлены")
            self._set_nested(self.config_data, 'report.histogram_min_length', high)
            self._set_nested(self.config_data, 'report.histogram_max_length', low)

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        # Получаем раздельные уровни для консоли и файла
        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_text_analyser_configured", False) and not force:
            # Проверим, не изменились ли параметры
            current_console_level = getattr(root, "_text_analyser_console_level", None)
            current_file_level = getattr(root, "_text_analyser_file_level", None)
            current_fmt = getattr(root, "_text_analyser_format", None)
            current_file = getattr(root, "_text_analyser_file", None)
            if (
                current_console_level == console_level_name and
                current_file_level == file_level_name and
                current_fmt == desired_fmt and
                current_file == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        # Консоль (stderr): отчёт в stdout не смешивается с логами
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        # Файл при необходимости с уровнем для техники (DEBUG)
        if desired_file:
            # Очищаем старые логи перед созданием нового
            self.cleanup_old_log_files()

            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        # Минимальный уровень для root logger (DEBUG для файла)
        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_text_analyser_configured", True)
        setattr(root, "_text_analyser_console_level", console_level_name)
        setattr(root, "_text_analyser_file_level", file_level_name)
        setattr(root, "_text_analyser_format", desired_fmt)
        setattr(root, "_text_analyser_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'text_analysis': {
                'min_word_length': 3,
                # None — встроенный набор стоп-слов
                'stop_words': None
            },
            'report': {
                'top_words': 10,
                'word_column_width': 20,
                'histogram_min_length': 3,
                'histogram_max_length': 19
            },
            'files': {
                'default_input': "sample_text.txt",
                'default_output': "output_report.txt",
                'input_encoding': "utf-8"
            },
            'logging': {
                'level': "WARNING",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/text_analyser.log"
            }
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            keys = key.split('.')
            value = self.config_data

            for k in keys:
                value = value[k]

            return value
        except (KeyError, TypeError):
            return default

    def get_min_word_length(self) -> int:
        """Получает минимальную длину слова"""
        return int(self.get('text_analysis.min_word_length', 3))

    def get_stop_words(self) -> Optional[List[str]]:
        """Получает список стоп-слов (None — использовать встроенный набор)"""
        return self.get('text_analysis.stop_words', None)

    def get_top_words_count(self) -> int:
        """Получает размер рейтинга слов в отчёте"""
        return int(self.get('report.top_words', 10))

    def get_word_column_width(self) -> int:
        """Получает ширину колонки со словом в рейтинге"""
        return int(self.get('report.word_column_width', 20))

    def get_histogram_min_length(self) -> int:
        return int(self.get('report.histogram_min_length', 3))

    def get_histogram_max_length(self) -> int:
        return int(self.get('report.histogram_max_length', 19))

    def get_default_input(self) -> str:
        """Получает путь к входному файлу по умолчанию"""
        return self.get('files.default_input', "sample_text.txt")

    def get_default_output(self) -> str:
        """Получает путь к файлу отчёта по умолчанию"""
        return self.get('files.default_output', "output_report.txt")

    def get_input_encoding(self) -> str:
        """Получает кодировку входных файлов"""
        return self.get('files.input_encoding', "utf-8")

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        # Поддержка старого формата logging.level для обратной совместимости
        return self.get('logging.console_level', self.get('logging.level', "WARNING"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов"""
        log_file_template = self.get('logging.log_file', "logs/text_analyser.log")
        # Для файла сессии заменяем {timestamp} на реальную временную метку
        if "{timestamp}" in log_file_template:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            return log_file_template.replace("{timestamp}", timestamp)
        return log_file_template

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get_logging_file()).parent
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("text_analyser_*.log"))
        max_files = self.get_max_log_files()

        if len(log_files) <= max_files:
            return

        # Сортируем по времени модификации (самые новые последними)
        log_files.sort(key=lambda f: f.stat().st_mtime)

        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
