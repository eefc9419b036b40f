"""jsubfreq
字幕ファイルから日本語の語彙頻度表を作るライブラリ。

主な提供機能:
- ディレクトリ配下の字幕ファイル(SRT/ASS/VTT など)の走査と読込
- 形態素解析器(fugashi/janome)による分かち書き
- 文字範囲に基づくノイズ除去と頻度集計
- 全角文字幅を考慮した固定幅の頻度表 / 単語リストの出力
- CLI インターフェース
"""
from .normalizer import normalize
from .frequency import FrequencyTable
from .render import render
from .pipeline import run, build_report

__all__ = [
    "normalize",
    "FrequencyTable",
    "render",
    "run",
    "build_report",
]

__version__ = "0.1.0"
