"""
エラーハンドリングパッケージ
"""

from .exceptions import (
    FileProcessingError,
    DataValidationError,
    ConfigurationError,
    EncodingDetectionError
)
from .error_handler import ErrorHandler

__all__ = [
    'FileProcessingError',
    'DataValidationError',
    'ConfigurationError',
    'EncodingDetectionError',
    'ErrorHandler'
]
