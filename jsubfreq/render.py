"""頻度テーブルの並べ替えと固定幅テキストへの描画。

表モード:
    |------|-----|
    |Token |Freq |
    |------|-----|
    |猫    |2    |
    |可愛い|1    |

- トークン列幅 = 最長トークン長 x 2 (全文字が全角でも揃うように)
- 頻度列幅 = 最大頻度の桁数 + 4
- 行ごとに全角(East Asian Wide/Fullwidth)文字数だけトークン列幅を縮める

単語リストモード: 出現順に1行1語、頻度なし。
"""
from __future__ import annotations
from dataclasses import dataclass
import unicodedata
from typing import List, Tuple

from .frequency import FrequencyTable

MODE_TABLE = "table"
MODE_WORDS = "words"

OUTPUT_NAMES = {
    MODE_TABLE: "freq.txt",
    MODE_WORDS: "words.txt",
}

_WIDE = {"W", "F"}


@dataclass(frozen=True)
class RenderRow:
    token: str
    count: int
    deficit: int


def display_deficit(token: str) -> int:
    return sum(1 for ch in token if unicodedata.east_asian_width(ch) in _WIDE)


def token_column_width(longest: int) -> int:
    return 2 * longest


def freq_column_width(max_count: int) -> int:
    return len(str(max_count)) + 4


def rank(table: FrequencyTable) -> List[Tuple[str, int]]:
    # 同数は辞書順で固定
    return sorted(table.counts.items(), key=lambda kv: (-kv[1], kv[0]))


def rows(table: FrequencyTable) -> List[RenderRow]:
    return [RenderRow(tok, n, display_deficit(tok)) for tok, n in rank(table)]


def _border(tw: int, fw: int) -> str:
    return "|" + "-" * tw + "|" + "-" * fw + "|\n"


def render_table(table: FrequencyTable) -> str:
    tw = token_column_width(table.longest)
    fw = freq_column_width(table.max_count)
    out = [
        _border(tw, fw),
        "|" + "Token".ljust(tw) + "|" + "Freq".ljust(fw) + "|\n",
        _border(tw, fw),
    ]
    for row in rows(table):
        out.append("|" + row.token.ljust(tw - row.deficit) + "|" + str(row.count).ljust(fw) + "|\n")
    return "".join(out)


def render_words(table: FrequencyTable) -> str:
    return "".join(tok + "\n" for tok in table)


def render(table: FrequencyTable, mode: str = MODE_TABLE) -> str:
    if mode not in OUTPUT_NAMES:
        raise ValueError(f"unknown render mode: {mode!r}")
    table.freeze()
    if mode == MODE_WORDS:
        return render_words(table)
    return render_table(table)


__all__ = [
    "MODE_TABLE",
    "MODE_WORDS",
    "OUTPUT_NAMES",
    "RenderRow",
    "display_deficit",
    "token_column_width",
    "freq_column_width",
    "rank",
    "rows",
    "render_table",
    "render_words",
    "render",
]
