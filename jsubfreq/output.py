"""出力先の解決とレポートの書き込み。

書き込みは同じディレクトリの一時ファイルに書いてから os.replace で差し替える。
途中で失敗しても既存のレポートは壊れない。
"""
from __future__ import annotations
import os
import tempfile
from pathlib import Path

from .render import OUTPUT_NAMES, MODE_TABLE


class OutputPathError(OSError):
    pass


def resolve_output_path(out: str | os.PathLike[str] | None, root: str | os.PathLike[str], mode: str = MODE_TABLE) -> Path:
    """出力ファイルの絶対パスを返す。

    out 未指定なら入力 root。通常ファイルが指定されたらその親ディレクトリ。
    そこにモードごとのファイル名(freq.txt / words.txt)を付ける。
    """
    base = Path(out if out else root).resolve()
    if not base.exists():
        raise OutputPathError(f"output path does not exist: {base}")
    if base.is_file():
        base = base.parent
    elif not base.is_dir():
        raise OutputPathError(f"output path is neither a file nor a directory: {base}")
    return base / OUTPUT_NAMES[mode]


def write_report(path: str | os.PathLike[str], content: str) -> Path:
    dest = Path(path)
    fd, tmp = tempfile.mkstemp(prefix="." + dest.name + ".", suffix=".tmp", dir=str(dest.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, dest)
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise
    return dest


__all__ = ["OutputPathError", "resolve_output_path", "write_report"]
