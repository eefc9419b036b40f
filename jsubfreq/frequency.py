"""頻度集計テーブル。

- 正規化済みトークン -> 出現回数
- 最大出現回数 / 最長トークン長(コードポイント数)を逐次更新
- 挿入順 = 出現順 (単語リストモードで利用)
- freeze() 以降は record() できない(描画前に確定させる)
"""
from __future__ import annotations
from typing import Dict, Iterable, Iterator


class FrequencyTable:
    def __init__(self) -> None:
        self.counts: Dict[str, int] = {}
        self.max_count = 0
        self.longest = 0
        self.frozen = False

    def record(self, token: str) -> int:
        if self.frozen:
            raise RuntimeError("frequency table is frozen")
        if not token:
            raise ValueError("cannot record an empty token")
        n = self.counts.get(token, 0) + 1
        self.counts[token] = n
        if n > self.max_count:
            self.max_count = n
        if len(token) > self.longest:
            self.longest = len(token)
        return n

    def update(self, tokens: Iterable[str]) -> None:
        for tok in tokens:
            self.record(tok)

    def merge(self, other: "FrequencyTable") -> None:
        """他のテーブル(例: ファイル単位の部分集計)を取り込む。"""
        if self.frozen:
            raise RuntimeError("frequency table is frozen")
        for tok, n in other.counts.items():
            total = self.counts.get(tok, 0) + n
            self.counts[tok] = total
            if total > self.max_count:
                self.max_count = total
            if len(tok) > self.longest:
                self.longest = len(tok)

    def freeze(self) -> "FrequencyTable":
        self.frozen = True
        return self

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def __len__(self) -> int:
        return len(self.counts)

    def __contains__(self, token: object) -> bool:
        return token in self.counts

    def __getitem__(self, token: str) -> int:
        return self.counts[token]

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)

    def __repr__(self) -> str:
        return f"FrequencyTable(vocab={len(self)}, total={self.total}, max_count={self.max_count}, longest={self.longest})"


__all__ = ["FrequencyTable"]
