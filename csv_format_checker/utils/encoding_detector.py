"""
文字コード判定ユーティリティ

UTF-8 BOM が付いていれば即座に妥当と判断し、
それ以外は chardet による統計的な推定結果で判定する。
"""
import asyncio
import codecs
from typing import Optional, Protocol, Tuple

from chardet import UniversalDetector

from ..constants import CsvCheckConstants
from ..error_handling.exceptions import EncodingDetectionError
from ..messages import CheckMessages
from .csv_stream import CsvStream


class CharsetDetector(Protocol):
    """バイト列から文字コード名を推定するエンジン"""

    def detect(self, data: bytes) -> Optional[str]:
        ...


class ChardetCharsetDetector:
    """chardet の UniversalDetector を用いた推定エンジン"""

    def __init__(self, chunk_size: int = CsvCheckConstants.DETECTION_CHUNK_SIZE, logger=None):
        self.chunk_size = chunk_size
        self.logger = logger

    def detect(self, data: bytes) -> Optional[str]:
        """
        文字コード名を推定

        chardet が判定できなかった場合（数行程度の短い Shift-JIS など）は
        try_encodings() で厳密デコードできる文字コードを返す。
        """
        detector = UniversalDetector()
        try:
            for offset in range(0, len(data), self.chunk_size):
                if detector.done:
                    break
                detector.feed(data[offset:offset + self.chunk_size])
            detector.close()
        except Exception as e:
            raise EncodingDetectionError(f"文字コード判定に失敗: {str(e)}") from e

        result = detector.result
        if result.get('encoding'):
            if self.logger:
                self.logger.debug(f"文字コード推定: {result['encoding']} (信頼度: {result['confidence']:.2f})")
            return result['encoding']

        encoding = self.try_encodings(data)
        if self.logger:
            if encoding:
                self.logger.debug(f"文字コード推定失敗、デコード可能な文字コードを採用: {encoding}")
            else:
                self.logger.debug("文字コード推定失敗")
        return encoding

    @staticmethod
    def try_encodings(data: bytes) -> Optional[str]:
        """候補の文字コードで順に厳密デコードし、最初に成功したものを返す"""
        if not data:
            return None

        for encoding in CsvCheckConstants.FALLBACK_ENCODINGS:
            try:
                data.decode(encoding, errors='strict')
            except UnicodeDecodeError:
                continue
            return encoding

        return None


class EncodingDetector:
    """CSVの文字コードが UTF-8（BOMあり/なし）または Shift-JIS かを判定するクラス"""

    def __init__(self, charset_detector: Optional[CharsetDetector] = None, logger=None):
        self.logger = logger
        self.charset_detector = charset_detector or ChardetCharsetDetector(logger=logger)

    async def is_valid_encoding(self, stream: CsvStream) -> Tuple[bool, str]:
        """
        文字コードの妥当性を判定

        Returns:
            (妥当か, エラーメッセージ) のタプル。妥当な場合のメッセージは空文字列。
        """
        bom = CsvCheckConstants.UTF8_BOM
        async with stream.rewound():
            head = await stream.read_chunk(len(bom))

        if head == bom:
            if self.logger:
                self.logger.debug("UTF-8 BOMを検出")
            return True, ""

        charset = await self.detect_charset(stream)
        encoding = self.resolve_encoding(charset)
        if encoding is None or encoding not in CsvCheckConstants.ACCEPTED_ENCODINGS:
            if self.logger:
                self.logger.info(f"許可されていない文字コード: {charset} -> {encoding}")
            return False, CheckMessages.INVALID_ENCODING

        return True, ""

    async def detect_charset(self, stream: CsvStream) -> Optional[str]:
        """ストリーム全体から文字コード名を推定（推定処理はワーカースレッドで実行）"""
        async with stream.rewound():
            data = await stream.read_all()
        return await asyncio.to_thread(self.charset_detector.detect, data)

    @staticmethod
    def resolve_encoding(charset: Optional[str]) -> Optional[str]:
        """
        推定された文字コード名を codecs の正規名（小文字）に解決

        許可セットに合わせるため ENCODING_ALIASES で次の別名を寄せる。

        - ascii -> utf-8: chardet は英数字のみのCSVを ascii と報告する。
          ASCII は UTF-8 の部分集合なので、BOMなしUTF-8として扱う。
        - cp932 -> shift_jis: Windows で保存された Shift-JIS（機種依存文字を含む）。

        解決できない名前の場合は None を返す。
        """
        if not charset:
            return None

        try:
            name = codecs.lookup(charset).name.lower()
        except LookupError:
            return None

        return CsvCheckConstants.ENCODING_ALIASES.get(name, name)
