"""
CSVフォーマットチェック共通パッケージ
"""

from .constants import CsvCheckConstants
from .messages import CheckMessages
from .data_models import CsvFormatCheckResult, FormatCheckErrorMessage
from .error_handling.exceptions import (
    FileProcessingError,
    DataValidationError,
    ConfigurationError,
    EncodingDetectionError
)
from .error_handling.error_handler import ErrorHandler
from .logging.unified_logger import UnifiedLogger
from .config.config_manager import ConfigManager
from .utils.csv_stream import CsvStream
from .utils.encoding_detector import CharsetDetector, ChardetCharsetDetector, EncodingDetector
from .file_handlers.basic_checks import BasicCheckPipeline
from .file_handlers.format_checker_base import CsvFormatCheckerBase

__all__ = [
    'CsvCheckConstants',
    'CheckMessages',
    'CsvFormatCheckResult',
    'FormatCheckErrorMessage',
    'FileProcessingError',
    'DataValidationError',
    'ConfigurationError',
    'EncodingDetectionError',
    'ErrorHandler',
    'UnifiedLogger',
    'ConfigManager',
    'CsvStream',
    'CharsetDetector',
    'ChardetCharsetDetector',
    'EncodingDetector',
    'BasicCheckPipeline',
    'CsvFormatCheckerBase'
]
