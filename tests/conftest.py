import sys
from pathlib import Path
from typing import Dict

import pytest

# Пакет лежит в src/, добавляем путь для запуска тестов без установки
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from text_analyser.components import FrequencyIndex, TextNormalizer  # noqa: E402


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts() -> Dict[str, str]:
    """Наборы текстов для тестирования."""
    from fixtures.sample_texts import (
        SAMPLE_FOX_TEXT,
        SAMPLE_PROSE_TEXT,
        SAMPLE_HTML_TEXT,
        SAMPLE_PUNCTUATION_ONLY,
    )

    return {
        "fox": SAMPLE_FOX_TEXT,
        "prose": SAMPLE_PROSE_TEXT,
        "html": SAMPLE_HTML_TEXT,
        "punctuation": SAMPLE_PUNCTUATION_ONLY,
    }


@pytest.fixture
def fox_index(sample_texts) -> FrequencyIndex:
    """Индекс, заполненный текстом про лису и собаку."""
    index = FrequencyIndex()
    index.ingest(TextNormalizer().normalize(sample_texts["fox"]))
    return index


@pytest.fixture
def sample_file(tmp_path: Path, sample_texts) -> Path:
    """Текстовый файл с прозой для сквозных тестов."""
    path = tmp_path / "sample_text.txt"
    path.write_text(sample_texts["prose"], encoding="utf-8")
    return path


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
