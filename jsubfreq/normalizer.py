"""トークン正規化: 生トークンからノイズ文字を取り除き、無意味なものは破棄する。

破棄は None で表す。
"""
from __future__ import annotations
from typing import Iterable, Iterator

from .classifier import classify, STANDALONE, VALID


def normalize(token: str) -> str | None:
    if not token:
        return None
    if len(token) == 1 and classify(token, standalone=True) == STANDALONE:
        return None
    cleaned = token
    # 不正な文字は位置ではなく文字単位で、全出現をまとめて除去する
    for ch in set(token):
        if classify(ch) != VALID:
            cleaned = cleaned.replace(ch, "")
    return cleaned or None


def normalize_all(tokens: Iterable[str]) -> Iterator[str]:
    for tok in tokens:
        cleaned = normalize(tok)
        if cleaned is not None:
            yield cleaned


__all__ = ["normalize", "normalize_all"]
