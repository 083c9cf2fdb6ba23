"""
基本チェックパイプライン

空ファイル → 文字コード → レコード数 の順にチェックし、最初のエラーで打ち切る。
"""
from ..constants import CsvCheckConstants
from ..data_models import CsvFormatCheckResult
from ..messages import CheckMessages
from ..utils.csv_stream import CsvStream
from ..utils.encoding_detector import EncodingDetector


class BasicCheckPipeline:
    """全フォーマット共通の基本チェック"""

    def __init__(self, stream: CsvStream, encoding_detector: EncodingDetector, logger=None):
        self.stream = stream
        self.encoding_detector = encoding_detector
        self.logger = logger

    async def run(self) -> CsvFormatCheckResult:
        """基本チェックを実行し、最初に見つかったエラーのみを結果に格納する"""
        result = CsvFormatCheckResult()

        if await self.is_empty_file():
            self._debug("空ファイルチェックNG")
            result.add_error(None, CheckMessages.EMPTY_FILE)
            return result

        is_valid_encoding, encoding_error_message = await self.encoding_detector.is_valid_encoding(self.stream)
        if not is_valid_encoding:
            self._debug("文字コードチェックNG")
            result.add_error(None, encoding_error_message)
            return result

        if not await self.is_valid_record_count():
            self._debug("レコード数チェックNG")
            result.add_error(None, CheckMessages.RECORD_COUNT_EXCEEDED)
            return result

        return result

    async def is_empty_file(self) -> bool:
        """長さ0、または1行目が空の場合に空ファイルとみなす"""
        if await self.stream.length() == 0:
            return True

        async with self.stream.rewound():
            first_line = await self.stream.read_first_line()
        return not first_line

    async def is_valid_record_count(self) -> bool:
        """行数が上限以内か（上限を超えた時点で読み込みを打ち切る）"""
        async with self.stream.rewound():
            line_count = await self.stream.count_lines(CsvCheckConstants.MAX_RECORDS)
        return line_count <= CsvCheckConstants.MAX_RECORDS

    def _debug(self, message: str) -> None:
        if self.logger:
            self.logger.debug(message)
