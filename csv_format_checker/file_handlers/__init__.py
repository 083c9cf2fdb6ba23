"""
フォーマットチェックパッケージ
"""

from .basic_checks import BasicCheckPipeline
from .format_checker_base import CsvFormatCheckerBase

__all__ = ['BasicCheckPipeline', 'CsvFormatCheckerBase']
