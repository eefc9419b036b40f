"""コードポイント単位の文字分類。

トークンを構成する1文字が「語の構成要素(valid)」か「ノイズ(noise)」かを
静的なコードポイント範囲表で判定する。

- valid: ひらがな/カタカナ/漢字(拡張A・互換漢字含む)/々〆〇/半角カタカナ
- noise: 上記以外すべて(ASCII, 全角英数, 約物, 記号, 未割当など)
- standalone: 単独1文字のトークンとしては意味を持たない文字
  (ひらがな全般, 中黒, 促音)。語の一部としては valid のまま。
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

VALID = "valid"
NOISE = "noise"
STANDALONE = "standalone"

# CodeRange.tag
TAG_VALID = "valid"
TAG_STANDALONE_KANA = "standalone-kana"
TAG_LONE_PUNCT = "lone-punct"


@dataclass(frozen=True)
class CodeRange:
    start: int
    end: int  # inclusive
    tag: str
    name: str = ""

    def __contains__(self, ch: object) -> bool:
        if not isinstance(ch, str) or len(ch) != 1:
            return False
        return self.start <= ord(ch) <= self.end


VALID_RANGES: Tuple[CodeRange, ...] = (
    CodeRange(0x3005, 0x3007, TAG_VALID, "ideographic iteration mark, closing mark, number zero"),
    CodeRange(0x3040, 0x309F, TAG_VALID, "hiragana"),
    CodeRange(0x30A0, 0x30FF, TAG_VALID, "katakana"),
    CodeRange(0x31F0, 0x31FF, TAG_VALID, "katakana phonetic extensions"),
    CodeRange(0x3400, 0x4DBF, TAG_VALID, "cjk extension a"),
    CodeRange(0x4E00, 0x9FFF, TAG_VALID, "cjk unified ideographs"),
    CodeRange(0xF900, 0xFAFF, TAG_VALID, "cjk compatibility ideographs"),
    CodeRange(0xFF66, 0xFF9F, TAG_VALID, "halfwidth katakana"),
)

STANDALONE_RANGES: Tuple[CodeRange, ...] = (
    CodeRange(0x3040, 0x309F, TAG_STANDALONE_KANA, "hiragana"),
    CodeRange(0x30C3, 0x30C3, TAG_STANDALONE_KANA, "katakana small tsu"),
    CodeRange(0x30FB, 0x30FB, TAG_LONE_PUNCT, "katakana middle dot"),
    CodeRange(0xFF6F, 0xFF6F, TAG_STANDALONE_KANA, "halfwidth small tsu"),
)


def _lookup(ch: str, ranges: Iterable[CodeRange]) -> CodeRange | None:
    for r in ranges:
        if ch in r:
            return r
    return None


def is_valid(ch: str) -> bool:
    return _lookup(ch, VALID_RANGES) is not None


def is_noise(ch: str) -> bool:
    return not is_valid(ch)


def is_standalone_invalid(ch: str) -> bool:
    return _lookup(ch, STANDALONE_RANGES) is not None


def classify(ch: str, standalone: bool = False) -> str:
    """1文字を VALID / NOISE / STANDALONE のいずれかに分類する。

    standalone=True はその文字が1文字だけのトークンであることを表し、
    このときに限り STANDALONE が返りうる。
    """
    if standalone and is_standalone_invalid(ch):
        return STANDALONE
    return VALID if is_valid(ch) else NOISE


__all__ = [
    "VALID",
    "NOISE",
    "STANDALONE",
    "CodeRange",
    "VALID_RANGES",
    "STANDALONE_RANGES",
    "is_valid",
    "is_noise",
    "is_standalone_invalid",
    "classify",
]
