"""
どこで: `figures.reader`
何を: 行指向のテキストストリームから空白区切りトークンを必要数だけ取り出す `TokenReader`。
なぜ: 1 つの入力（標準入力など）から複数の図形を順番に読むとき、行の途中で読み終えた残りの
トークンを次の図形へ引き継ぐため。
"""

from __future__ import annotations

import io
from collections import deque
from typing import TextIO

from common.errors import Defect, InvalidShapeError
from common.types import Scalar, ScalarType


class TokenReader:
    """テキストストリームを包むトークン読み取り器。

    - `take(n)` は必要に応じて次の行を読み、ちょうど n 個のトークンを返す。
    - 行の残りはバッファに保持され、次回の `take` で使われる。
    """

    def __init__(self, stream: TextIO | str) -> None:
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        self._stream = stream
        self._pending: deque[str] = deque()

    @property
    def stream(self) -> TextIO:
        return self._stream

    def _fill(self) -> bool:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return False
            self._pending.extend(line.split())
        return True

    def take(self, count: int) -> list[str]:
        """トークンを `count` 個取り出す。

        Raises
        ------
        EOFError
            入力が `count` 個に満たないまま終端に達した場合（取り出し済みのトークンは失われる）。
        """
        out: list[str] = []
        while len(out) < count:
            if not self._fill():
                raise EOFError(f"トークンが不足しています: need={count}, got={len(out)}")
            out.append(self._pending.popleft())
        return out

    def read_numbers(self, count: int, scalar: ScalarType, *, kind: str) -> list[Scalar]:
        """数値を `count` 個読む。失敗は `InvalidShapeError(MALFORMED_INPUT)` に変換する。"""
        try:
            tokens = self.take(count)
        except EOFError as exc:
            raise InvalidShapeError(kind, Defect.MALFORMED_INPUT, str(exc)) from exc
        try:
            return [scalar(tok) for tok in tokens]
        except ValueError as exc:
            raise InvalidShapeError(kind, Defect.MALFORMED_INPUT, str(exc)) from exc

    def has_pending(self) -> bool:
        return bool(self._pending)


def as_reader(source: "TokenReader | TextIO | str") -> TokenReader:
    """`str` / テキストストリーム / 既存の `TokenReader` を `TokenReader` へ揃える。"""
    if isinstance(source, TokenReader):
        return source
    return TokenReader(source)


__all__ = ["TokenReader", "as_reader"]
