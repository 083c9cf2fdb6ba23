"""
フォーマットチェック用例外クラス定義
"""


class FileProcessingError(Exception):
    """ストリームの受け渡し・読み込み関連のエラー"""
    pass


class DataValidationError(Exception):
    """チェック結果データの検証エラー"""
    pass


class ConfigurationError(Exception):
    """設定関連のエラー"""
    pass


class EncodingDetectionError(Exception):
    """文字コード判定エンジン関連のエラー"""
    pass
