"""
チェック結果メッセージ定義
"""

from .constants import CsvCheckConstants


class CheckMessages:
    """利用者向けエラーメッセージ"""

    EMPTY_FILE = "CSVファイルが空です。1行以上のデータが必要です。"
    INVALID_ENCODING = "文字コードが不正です。UTF-8（BOMあり/なし）またはShift-JISで保存してください。"
    RECORD_COUNT_EXCEEDED = (
        f"レコード数が上限を超えています。{CsvCheckConstants.MAX_RECORDS}件以内にしてください。"
    )
    UNEXPECTED_ERROR = "予期せぬエラーが発生しました。"
