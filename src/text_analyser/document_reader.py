"""
Модуль для чтения исходных документов

Содержит функции для:
- Чтения текстового файла целиком
- Удаления HTML тегов из HTML-документов
"""

from pathlib import Path
from typing import Optional, Union
import logging

from bs4 import BeautifulSoup

from .config import config
from .interfaces.text_processor import Document

logger = logging.getLogger(__name__)


HTML_SUFFIXES = {'.html', '.htm'}


class DocumentReader:
    """Класс для чтения документа с диска"""

    def __init__(self, encoding: Optional[str] = None) -> None:
        # Кодировка берётся из конфигурации, если не передана явно
        self.encoding = encoding or config.get_input_encoding()

    def remove_html_tags(self, text: str) -> str:
        """
        Удаляет HTML теги из текста используя BeautifulSoup

        Args:
            text: HTML текст

        Returns:
            Очищенный текст без HTML тегов
        """
        if not text:
            return ""

        # Проверяем, содержит ли текст HTML теги
        if '<' in text and '>' in text:
            soup = BeautifulSoup(text, "html.parser")
            # Разделитель не даёт склеить слова из соседних блоков
            return soup.get_text(separator=" ")
        return text

    def read(self, path: Union[str, Path]) -> Document:
        """
        Читает документ целиком.

        Args:
            path: Путь к файлу

        Returns:
            Документ с меткой источника и сырым текстом

        Raises:
            OSError: если файл не найден или не читается
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding=self.encoding) as f:
                text = f.read()
        except OSError as e:
            logger.error(f"Не удалось прочитать файл {path}: {e}")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"Файл {path} не декодируется как {self.encoding}: {e}")
            raise OSError(f"Cannot decode {path} as {self.encoding}: {e.reason}") from e

        if path.suffix.lower() in HTML_SUFFIXES:
            text = self.remove_html_tags(text)

        logger.info(f"Прочитан документ {path}: {len(text)} символов")
        return Document(source=str(path), text=text)
