"""
統一エラーハンドリングシステム
"""
import logging
import traceback
from typing import Dict, Any, Optional


fallback_logger = logging.getLogger(__name__)


class ErrorHandler:
    """エラーハンドリングの統一クラス"""

    def __init__(self, logger=None):
        self.logger = logger

    def _format_traceback(self, error: Exception) -> str:
        return "".join(traceback.format_exception(type(error), error, error.__traceback__))

    def handle_unexpected_error(self, error: Exception, target: Optional[str] = None) -> None:
        """フォーマットチェック中の予期せぬエラーを処理"""
        error_context = {
            'error_type': type(error).__name__,
            'target': target or 'Unknown',
            'error_message': str(error)
        }

        self.log_error_with_context(error, error_context)

    def log_error_with_context(self, error: Exception, context: Dict[str, Any]) -> None:
        """コンテキスト情報付きでエラーをログ出力"""
        context_str = ", ".join([f"{k}={v}" for k, v in context.items()])
        if self.logger:
            self.logger.error(f"エラー詳細: {context_str}")
            self.logger.debug(f"スタックトレース: {self._format_traceback(error)}")
        else:
            # logger利用不可時のフォールバック
            fallback_logger.error(f"エラー: {context_str}")
            fallback_logger.debug(f"スタックトレース: {self._format_traceback(error)}")
