"""字幕ファイルの読込 (pysubs2)。

対応形式は pysubs2 の自動判定に従う: SRT, ASS/SSA, WebVTT, MicroDVD, MPL2, TMP など。
パースできないファイルは字幕ではないものとして扱う。
"""
from __future__ import annotations
from pathlib import Path
from typing import Callable, Iterable, List

import pysubs2
from pysubs2.exceptions import Pysubs2Error

from .file_scanner import iter_files, read_text


class SubtitleParseError(Exception):
    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = str(path)
        self.reason = reason


def load_cues(path: str | Path) -> List[str]:
    """字幕の各イベントのプレーンテキストを出現順に返す。

    ASS の上書きタグは除去され、\\N は改行になる。コメント行は含めない。
    """
    p = Path(path)
    text = read_text(p)
    if text is None:
        raise SubtitleParseError(p, "unreadable or binary file")
    if not text.strip():
        raise SubtitleParseError(p, "empty file")
    try:
        subs = pysubs2.SSAFile.from_string(text)
    except (Pysubs2Error, ValueError, KeyError, IndexError) as e:
        raise SubtitleParseError(p, e) from e
    return [ev.plaintext for ev in subs if not ev.is_comment]


def find_subtitle_files(
    root: str | Path,
    recurse: bool = True,
    log: Callable[[str], None] | None = None,
) -> List[Path]:
    found: List[Path] = []
    for f in iter_files(root, recurse=recurse):
        try:
            load_cues(f)
        except SubtitleParseError as e:
            if log is not None:
                log(f"[info] skip {e}")
            continue
        found.append(f)
    return found


def join_cues(cues: Iterable[str]) -> str:
    return "\n".join(cues)


__all__ = ["SubtitleParseError", "load_cues", "find_subtitle_files", "join_cues"]
