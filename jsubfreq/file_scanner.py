"""入力ファイルの走査とテキスト読込ユーティリティ。

- 拡張子フィルタは行わない(字幕かどうかは subtitles 側でパースして判定)
- バイナリらしいものは除外(ヒューリスティック)
- 走査順はディレクトリごとにファイル名順
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Iterator

BINARY_BYTES = set(range(0, 9)) | {11, 12} | set(range(14, 32))

ENCODING_CANDIDATES = ("utf-8", "utf-8-sig", "cp932", "shift_jis")
# BOM なしの UTF-16 は任意のバイト列をデコードできてしまうので BOM があるときだけ試す
_UTF16_BOMS = (b"\xff\xfe", b"\xfe\xff")


def is_probably_text(data: bytes, threshold: float = 0.30) -> bool:
    if not data:
        return True
    # UTF-16 は NUL を多く含むので BOM があれば文字列扱い
    if data[:2] in _UTF16_BOMS:
        return True
    non_text = sum(b in BINARY_BYTES for b in data)
    ratio = non_text / len(data)
    return ratio < threshold


def read_text(path: Path, encoding_candidates=ENCODING_CANDIDATES) -> str | None:
    try:
        raw = path.read_bytes()
    except OSError:
        return None
    if not is_probably_text(raw):
        return None
    if raw[:2] in _UTF16_BOMS:
        encoding_candidates = ("utf-16",) + tuple(encoding_candidates)
    for enc in encoding_candidates:
        try:
            text = raw.decode(enc)
        except UnicodeDecodeError:
            continue
        return text.lstrip("\ufeff")
    return None


def iter_files(root: str | os.PathLike[str], recurse: bool = True) -> Iterator[Path]:
    """root がファイルならそれ自身、ディレクトリなら配下のファイルを返す。

    recurse=False の場合は直下のファイルのみ。
    """
    path = Path(root)
    if path.is_file():
        yield path
        return
    if not path.is_dir():
        raise FileNotFoundError(str(root))
    if not recurse:
        for child in sorted(path.iterdir()):
            if child.is_file():
                yield child
        return
    for dirpath, dirs, files in os.walk(path):
        dirs.sort()
        for f in sorted(files):
            yield Path(dirpath) / f


__all__ = ["iter_files", "read_text", "is_probably_text", "ENCODING_CANDIDATES"]
