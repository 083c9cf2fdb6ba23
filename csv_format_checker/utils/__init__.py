"""
ユーティリティパッケージ
"""

from .csv_stream import CsvStream
from .encoding_detector import CharsetDetector, ChardetCharsetDetector, EncodingDetector

__all__ = ['CsvStream', 'CharsetDetector', 'ChardetCharsetDetector', 'EncodingDetector']
