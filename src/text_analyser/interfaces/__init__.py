"""
Интерфейсы для компонентов анализа текста.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .text_processor import (
    AnalysisNotPerformedError,
    AnalysisSnapshot,
    Document,
    TextNormalizerInterface,
    TokenFilterInterface,
    FrequencyIndexInterface,
    ReportGeneratorInterface
)

__all__ = [
    'AnalysisNotPerformedError',
    'AnalysisSnapshot',
    'Document',
    'TextNormalizerInterface',
    'TokenFilterInterface',
    'FrequencyIndexInterface',
    'ReportGeneratorInterface'
]
