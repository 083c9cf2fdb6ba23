"""
共通コンポーネントのテスト
"""
import json
import logging
import shutil
import tempfile
import unittest
from pathlib import Path
import sys

# プロジェクトルートをパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent))

from csv_format_checker import (
    UnifiedLogger,
    ErrorHandler,
    ConfigManager,
    ConfigurationError,
    DataValidationError,
    CsvFormatCheckResult,
    FormatCheckErrorMessage
)


class TestDataModels(unittest.TestCase):
    """チェック結果データモデルのテスト"""

    def test_new_result_has_no_errors(self):
        result = CsvFormatCheckResult()

        self.assertFalse(result.has_errors)
        self.assertEqual(result.error_count, 0)
        self.assertEqual(result.format_check_error_messages, ())

    def test_add_error_appends_in_order(self):
        """add_errorは追記のみで順序を保持する"""
        result = CsvFormatCheckResult()
        result.add_error(None, "ファイル全体のエラー")
        result.add_error(5, "5行目のエラー")

        self.assertTrue(result.has_errors)
        self.assertEqual(result.error_count, 2)
        self.assertIsNone(result.format_check_error_messages[0].row_number)
        self.assertEqual(result.format_check_error_messages[1].row_number, 5)
        self.assertEqual(result.format_check_error_messages[1].error_message, "5行目のエラー")

    def test_error_messages_cannot_be_changed_from_outside(self):
        """公開されるエラー一覧は読み取り専用で、追記はadd_errorのみ"""
        result = CsvFormatCheckResult()
        result.add_error(None, "ファイル全体のエラー")

        messages = result.format_check_error_messages
        self.assertIsInstance(messages, tuple)
        with self.assertRaises(AttributeError):
            messages.append(FormatCheckErrorMessage(error_message="外部からの追加"))
        with self.assertRaises(AttributeError):
            result.format_check_error_messages = ()

        messages = messages + (FormatCheckErrorMessage(error_message="別のエラー"),)
        self.assertEqual(result.error_count, 1)
        self.assertEqual(result.format_check_error_messages[0].error_message, "ファイル全体のエラー")

    def test_error_message_is_immutable(self):
        message = FormatCheckErrorMessage(error_message="エラー", row_number=1)

        with self.assertRaises(AttributeError):
            message.row_number = 2

    def test_empty_error_message_is_rejected(self):
        with self.assertRaises(DataValidationError):
            FormatCheckErrorMessage(error_message="")

        result = CsvFormatCheckResult()
        with self.assertRaises(DataValidationError):
            result.add_error(1, "")
        self.assertFalse(result.has_errors)

    def test_to_dict(self):
        result = CsvFormatCheckResult()
        result.add_error(3, "3行目のエラー")

        self.assertEqual(result.to_dict(), {
            'has_errors': True,
            'error_count': 1,
            'errors': [{'row_number': 3, 'error_message': "3行目のエラー"}]
        })


class TestCommonComponents(unittest.TestCase):
    """ロギング・エラーハンドリング・設定管理のテスト"""

    def setUp(self):
        """テスト前の準備"""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.logger = UnifiedLogger("test_logger")
        self.error_handler = ErrorHandler(self.logger.logger)

    def tearDown(self):
        """テスト後のクリーンアップ"""
        for handler in list(self.logger.logger.handlers):
            handler.close()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_error_handler_logs_unexpected_error(self):
        """予期せぬエラーがコンテキスト付きでログ出力されること"""
        with self.assertLogs("test_logger", level="ERROR") as captured:
            self.error_handler.handle_unexpected_error(RuntimeError("テストエラー"), "sample.csv")

        self.assertIn("error_type=RuntimeError", captured.output[0])
        self.assertIn("target=sample.csv", captured.output[0])

    def test_error_handler_without_logger_uses_fallback(self):
        handler = ErrorHandler()

        with self.assertLogs("csv_format_checker.error_handling.error_handler", level="ERROR") as captured:
            handler.handle_unexpected_error(ValueError("テストエラー"), "sample.csv")

        self.assertIn("error_type=ValueError", captured.output[0])

    def test_config_manager_defaults(self):
        """設定ファイルがない場合はデフォルト設定"""
        config_manager = ConfigManager(config_path=None)
        if config_manager.config_path is None:
            self.assertEqual(config_manager.get('log_level'), 'INFO')

        logging_settings = config_manager.get_logging_settings()
        self.assertIn('log_level', logging_settings)
        self.assertIn('log_file', logging_settings)

    def test_config_manager_loads_json(self):
        config_file = self.temp_dir / "csv_format_checker_config.json"
        log_file = self.temp_dir / "logs" / "checker.log"
        config_file.write_text(
            json.dumps({'log_level': 'DEBUG', 'log_file': str(log_file)}),
            encoding='utf-8'
        )

        config_manager = ConfigManager(config_file)

        self.assertEqual(config_manager.get('log_level'), 'DEBUG')
        self.assertTrue(config_manager.validate_configuration())

        file_logger = UnifiedLogger.from_config(config_manager, name="config_test_logger")
        file_logger.info("ファイル出力テスト")
        for handler in file_logger.logger.handlers:
            handler.flush()
            handler.close()

        self.assertEqual(file_logger.logger.level, logging.DEBUG)
        self.assertTrue(log_file.exists())
        self.assertIn("ファイル出力テスト", log_file.read_text(encoding='utf-8'))

    def test_config_manager_invalid_json(self):
        config_file = self.temp_dir / "broken.json"
        config_file.write_text("{not json", encoding='utf-8')

        with self.assertRaises(ConfigurationError):
            ConfigManager(config_file)

    def test_config_manager_invalid_log_level(self):
        config_file = self.temp_dir / "config.json"
        config_file.write_text(json.dumps({'log_level': 'LOUD'}), encoding='utf-8')

        config_manager = ConfigManager(config_file)

        with self.assertRaises(ConfigurationError):
            config_manager.validate_configuration()

    def test_config_manager_update(self):
        config_manager = ConfigManager(config_path=None)
        config_manager.update_config({'log_level': 'WARNING'})

        self.assertEqual(config_manager.get_logging_settings()['log_level'], 'WARNING')
        self.assertEqual(config_manager.get_all_settings()['log_level'], 'WARNING')


if __name__ == '__main__':
    unittest.main()
