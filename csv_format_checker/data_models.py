"""
フォーマットチェック結果のデータモデル
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Tuple

from .error_handling.exceptions import DataValidationError


@dataclass(frozen=True)
class FormatCheckErrorMessage:
    """
    フォーマットチェックエラーメッセージ

    row_number が None の場合はファイル全体に関わるエラーを表す。
    """
    error_message: str
    row_number: Optional[int] = None

    def __post_init__(self):
        if not self.error_message:
            raise DataValidationError("エラーメッセージは空にできません")

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式で出力"""
        return {
            'row_number': self.row_number,
            'error_message': self.error_message
        }


@dataclass
class CsvFormatCheckResult:
    """フォーマットチェック結果（エラーメッセージの追記のみ可能）"""
    _messages: List[FormatCheckErrorMessage] = field(default_factory=list, init=False)

    @property
    def format_check_error_messages(self) -> Tuple[FormatCheckErrorMessage, ...]:
        """エラーメッセージ一覧（読み取り専用）"""
        return tuple(self._messages)

    @property
    def has_errors(self) -> bool:
        return len(self._messages) > 0

    @property
    def error_count(self) -> int:
        return len(self._messages)

    def add_error(self, row_number: Optional[int], message: str) -> None:
        """エラーを追加"""
        self._messages.append(
            FormatCheckErrorMessage(error_message=message, row_number=row_number)
        )

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式で出力"""
        return {
            'has_errors': self.has_errors,
            'error_count': self.error_count,
            'errors': [message.to_dict() for message in self._messages]
        }
