"""
統一ロギングシステム
"""
import logging
from pathlib import Path
from typing import Optional

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class UnifiedLogger:
    """統一ロギングシステムクラス"""

    def __init__(self, name: str = __name__, level: str = "INFO", log_file: Optional[Path] = None,
                 log_format: Optional[str] = None):
        self.logger = self.setup_logger(name, level, log_file, log_format)

    @classmethod
    def from_config(cls, config_manager, name: str = "csv_format_checker") -> 'UnifiedLogger':
        """ConfigManagerのログ設定からロガーを生成"""
        settings = config_manager.get_logging_settings()
        log_file = settings.get('log_file')
        return cls(
            name=name,
            level=settings.get('log_level') or "INFO",
            log_file=Path(log_file) if log_file else None,
            log_format=settings.get('log_format')
        )

    def setup_logger(self, name: str, level: str = "INFO", log_file: Optional[Path] = None,
                     log_format: Optional[str] = None) -> logging.Logger:
        """ロガーをセットアップ"""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))

        # 既存のハンドラーをクリア
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        formatter = logging.Formatter(
            log_format or DEFAULT_LOG_FORMAT,
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # ファイルハンドラーを追加（指定されている場合）
        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        return logger

    # 既存のロガーメソッドのプロキシ
    def info(self, message: str) -> None:
        """情報レベルのログ出力"""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """警告レベルのログ出力"""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """エラーレベルのログ出力"""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """デバッグレベルのログ出力"""
        self.logger.debug(message)
