"""
CSVフォーマットチェックの基底クラス
"""
from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

from ..data_models import CsvFormatCheckResult
from ..error_handling.error_handler import ErrorHandler
from ..messages import CheckMessages
from ..utils.csv_stream import CsvStream
from ..utils.encoding_detector import EncodingDetector
from .basic_checks import BasicCheckPipeline


class CsvFormatCheckerBase(ABC):
    """
    CSVファイルの基本的なフォーマットチェックを行う基底クラス

    基本チェック（空ファイル、文字コード、レコード数）が通った場合のみ、
    サブクラスで実装する perform_specific_checks() を実行する。
    渡されたストリームはこのインスタンスが所有し、close() で閉じる。
    """

    def __init__(self, csv_stream: Optional[BinaryIO], encoding_detector: Optional[EncodingDetector] = None,
                 logger=None, error_handler: Optional[ErrorHandler] = None, name: Optional[str] = None):
        self.logger = logger
        self.error_handler = error_handler or ErrorHandler(logger)
        self.csv_stream = CsvStream(csv_stream, logger)
        self.encoding_detector = encoding_detector or EncodingDetector(logger=logger)
        self.basic_check_pipeline = BasicCheckPipeline(self.csv_stream, self.encoding_detector, logger)
        self.name = name or str(getattr(csv_stream, 'name', type(self).__name__))

    async def check_format(self) -> CsvFormatCheckResult:
        """
        フォーマットチェックを実行

        基本チェックでエラーがあればその結果を返し、個別チェックは実行しない。
        どちらの段階で例外が発生しても「予期せぬエラー」1件の結果に変換して返す。
        """
        if self.logger:
            self.logger.info(f"フォーマットチェック開始: {self.name}")

        try:
            result = await self.perform_basic_checks()
            if not result.has_errors:
                result = CsvFormatCheckResult()
                await self.csv_stream.reset_to_start()
                await self.perform_specific_checks(result)

        except Exception as e:
            self.error_handler.handle_unexpected_error(e, self.name)
            result = CsvFormatCheckResult()
            result.add_error(None, CheckMessages.UNEXPECTED_ERROR)

        finally:
            self.csv_stream.reset_quietly()

        self._log_result(result)
        return result

    def _log_result(self, result: CsvFormatCheckResult) -> None:
        """チェック結果のログ出力"""
        if not self.logger:
            return

        if not result.has_errors:
            self.logger.info(f"フォーマットチェック成功: {self.name}")
            return

        self.logger.warning(f"フォーマットチェック失敗: {self.name} ({result.error_count}件)")
        for message in result.format_check_error_messages:
            row = f"{message.row_number}行目" if message.row_number is not None else "ファイル全体"
            self.logger.warning(f"  [{row}] {message.error_message}")

    async def perform_basic_checks(self) -> CsvFormatCheckResult:
        """全フォーマット共通の基本チェック"""
        return await self.basic_check_pipeline.run()

    @abstractmethod
    async def perform_specific_checks(self, result: CsvFormatCheckResult) -> None:
        """
        フォーマット固有のチェック（サブクラスで実装）

        エラーは引数の result に追記すること。ストリームは先頭位置で渡される。
        """
        pass

    def close(self) -> None:
        """所有するストリームを閉じる"""
        self.csv_stream.close()

    def __enter__(self) -> 'CsvFormatCheckerBase':
        return self

    def __exit__(self, exc_type, exc_value, tb) -> None:
        self.close()

    async def __aenter__(self) -> 'CsvFormatCheckerBase':
        return self

    async def __aexit__(self, exc_type, exc_value, tb) -> None:
        self.close()
