"""
設定管理システム

ログ出力などの周辺設定のみを扱う。
レコード数上限と許可する文字コードは constants.py の固定値であり、設定では変更できない。
"""
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from ..error_handling.exceptions import ConfigurationError

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigManager:
    """設定管理の統一クラス"""

    DEFAULT_CONFIG_FILES = [
        'csv_format_checker_config.json',
        'config.json'
    ]

    def __init__(self, config_path: Optional[Path] = None, logger=None):
        self.logger = logger
        self.config_path = config_path
        self.config_data = {}
        self.load_config(config_path)

    def load_config(self, config_path: Optional[Path] = None) -> Dict[str, Any]:
        """設定ファイルを読み込み"""
        if config_path:
            self.config_data = self._load_single_config(config_path)
        else:
            # デフォルトの設定ファイルを順次試行
            for config_file in self.DEFAULT_CONFIG_FILES:
                try:
                    candidate = Path(config_file)
                    if candidate.exists():
                        self.config_data = self._load_single_config(candidate)
                        self.config_path = candidate
                        break
                except ConfigurationError as e:
                    if self.logger:
                        self.logger.debug(f"設定ファイル読み込み失敗: {config_file} - {str(e)}")
                    continue

            if not self.config_data:
                if self.logger:
                    self.logger.warning("設定ファイルが見つかりません。デフォルト設定を使用します。")
                self.config_data = self._get_default_config()

        return self.config_data

    def _load_single_config(self, config_path: Path) -> Dict[str, Any]:
        """単一の設定ファイルを読み込み"""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)

            if self.logger:
                self.logger.info(f"設定ファイル読み込み成功: {config_path.name}")

            return config_data

        except FileNotFoundError:
            raise ConfigurationError(f"設定ファイルが見つかりません: {config_path}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"設定ファイルの形式が無効です: {config_path} - {str(e)}")
        except OSError as e:
            raise ConfigurationError(f"設定ファイル読み込みエラー: {config_path} - {str(e)}")

    def _get_default_config(self) -> Dict[str, Any]:
        """デフォルト設定を取得"""
        return {
            'log_level': 'INFO',
            'log_file': None,
            'log_format': None
        }

    def get(self, key: str, default: Any = None) -> Any:
        """設定値を取得"""
        return self.config_data.get(key, default)

    def get_logging_settings(self) -> Dict[str, Any]:
        """ログ関連の設定を取得"""
        return {
            'log_level': self.get('log_level', 'INFO'),
            'log_file': self.get('log_file'),
            'log_format': self.get('log_format')
        }

    def validate_configuration(self) -> bool:
        """設定の妥当性を検証"""
        log_level = str(self.get('log_level', 'INFO')).upper()
        if log_level not in VALID_LOG_LEVELS:
            error_msg = f"log_levelが不正です: {self.get('log_level')}"
            if self.logger:
                self.logger.error(error_msg)
            raise ConfigurationError(error_msg)

        log_format = self.get('log_format')
        if log_format:
            try:
                logging.Formatter(log_format, validate=True)
            except ValueError as e:
                error_msg = f"log_formatが不正です: {log_format} - {str(e)}"
                if self.logger:
                    self.logger.error(error_msg)
                raise ConfigurationError(error_msg)

        if self.logger:
            self.logger.info("設定の妥当性検証完了")

        return True

    def update_config(self, updates: Dict[str, Any]) -> None:
        """設定を更新"""
        self.config_data.update(updates)

        if self.logger:
            self.logger.info(f"設定更新: {list(updates.keys())}")

    def get_all_settings(self) -> Dict[str, Any]:
        """すべての設定を取得"""
        return self.config_data.copy()
