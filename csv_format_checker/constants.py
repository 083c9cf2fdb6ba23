"""
定数定義モジュール
"""

from typing import Tuple


class CsvCheckConstants:
    """基本チェックに関する固定値"""
    MAX_RECORDS = 40_000

    # 許可する文字コード（codecs の正規名を小文字化したもの）
    ACCEPTED_ENCODINGS: Tuple[str, ...] = ('utf-8', 'shift_jis')

    # 判定結果を許可セットへ寄せるための別名
    ENCODING_ALIASES = {
        'ascii': 'utf-8',
        'cp932': 'shift_jis',
    }

    # chardet が判定できない短い入力に対して厳密デコードを試す順序
    FALLBACK_ENCODINGS: Tuple[str, ...] = ('utf-8', 'shift_jis', 'cp932')

    UTF8_BOM = b'\xef\xbb\xbf'
    DETECTION_CHUNK_SIZE = 4096
