"""
チェック対象ストリームのアダプター

各チェックは rewound() の中で読み込みを行い、終了時に必ず先頭位置へ戻す。
"""
import asyncio
import contextlib
import io
from typing import AsyncIterator, BinaryIO, Optional

from ..error_handling.exceptions import FileProcessingError

LINE_ENCODING = 'utf-8-sig'


class CsvStream:
    """シーク可能なバイナリストリームを非同期に読み込むラッパー"""

    def __init__(self, stream: Optional[BinaryIO], logger=None):
        if stream is None:
            raise FileProcessingError("チェック対象のストリームが指定されていません")

        try:
            usable = stream.readable() and stream.seekable()
        except ValueError as e:
            # クローズ済みストリーム
            raise FileProcessingError(f"ストリームを利用できません: {str(e)}") from e

        if not usable:
            raise FileProcessingError("ストリームは読み込み・シーク可能である必要があります")

        self._stream = stream
        self.logger = logger

    @property
    def raw(self) -> BinaryIO:
        return self._stream

    @property
    def closed(self) -> bool:
        return self._stream.closed

    async def length(self) -> int:
        """ストリーム全体のバイト数を取得（位置は変更しない）"""
        return await asyncio.to_thread(self._length)

    def _length(self) -> int:
        current = self._stream.tell()
        try:
            return self._stream.seek(0, io.SEEK_END)
        finally:
            self._stream.seek(current)

    async def reset_to_start(self) -> None:
        self._stream.seek(0)

    def reset_quietly(self) -> None:
        """可能であれば先頭へ戻す（失敗はログのみ）"""
        if self._stream.closed:
            return
        try:
            self._stream.seek(0)
        except (OSError, ValueError) as e:
            if self.logger:
                self.logger.debug(f"ストリーム位置の初期化に失敗: {str(e)}")

    @contextlib.asynccontextmanager
    async def rewound(self) -> AsyncIterator['CsvStream']:
        """先頭から読み込み、抜ける際に先頭へ戻すスコープ"""
        await self.reset_to_start()
        try:
            yield self
        finally:
            self.reset_quietly()

    async def read_chunk(self, size: int) -> bytes:
        return await asyncio.to_thread(self._stream.read, size)

    async def read_all(self) -> bytes:
        return await asyncio.to_thread(self._stream.read)

    async def read_first_line(self) -> Optional[str]:
        """
        現在位置（通常は先頭）から1行を読み込む

        UTF-8として解釈し、BOMは読み飛ばし、不正なバイトは置換文字とする。
        改行コードは取り除く。終端に達している場合はNoneを返す。
        """
        return await asyncio.to_thread(self._read_first_line)

    def _read_first_line(self) -> Optional[str]:
        reader = self._text_reader()
        try:
            line = reader.readline()
        finally:
            reader.detach()

        if line == '':
            return None
        return line.rstrip('\n')

    async def count_lines(self, limit: int) -> int:
        """
        行数を数える

        limit を超えた時点で読み込みを打ち切るため、戻り値の最大は limit + 1。
        """
        return await asyncio.to_thread(self._count_lines, limit)

    def _count_lines(self, limit: int) -> int:
        line_count = 0
        reader = self._text_reader()
        try:
            for _ in reader:
                line_count += 1
                if line_count > limit:
                    break
        finally:
            reader.detach()
        return line_count

    def _text_reader(self) -> io.TextIOWrapper:
        # newline=None で \n, \r\n, \r をいずれも行末として扱う
        return io.TextIOWrapper(self._stream, encoding=LINE_ENCODING, errors='replace', newline=None)

    def close(self) -> None:
        if not self._stream.closed:
            self._stream.close()
