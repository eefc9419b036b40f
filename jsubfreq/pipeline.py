"""高レベル API: 字幕 -> 分かち書き -> 正規化 -> 集計 -> 描画 -> 書き込み

実行中の状態(頻度テーブル, フラグ, ログ出力先)は RunContext にまとめて明示的に渡す。
処理は単一スレッドで、ファイルを1つずつ最後まで処理してから次へ進む。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import sys
from typing import Callable, Iterable, List

from .frequency import FrequencyTable
from .morph import Tokenizer, load_tokenizer
from .normalizer import normalize
from .output import resolve_output_path, write_report
from .render import MODE_TABLE, render
from .subtitles import SubtitleParseError, find_subtitle_files, join_cues, load_cues


def _stderr(msg: str) -> None:
    print(msg, file=sys.stderr)


@dataclass
class RunContext:
    mode: str = MODE_TABLE
    verbose: bool = False
    log: Callable[[str], None] = _stderr
    table: FrequencyTable = field(default_factory=FrequencyTable)
    discarded: int = 0

    def debug(self, msg: str) -> None:
        if self.verbose:
            self.log(msg)


@dataclass
class RunResult:
    files: List[Path]
    table: FrequencyTable
    report: str | None = None
    output: Path | None = None
    skipped: List[Path] = field(default_factory=list)


def count_tokens(tokens: Iterable[str], ctx: RunContext) -> int:
    """生トークン列を正規化して集計し、採用したトークン数を返す。"""
    kept = 0
    for tok in tokens:
        cleaned = normalize(tok)
        if cleaned is None:
            ctx.discarded += 1
            continue
        ctx.table.record(cleaned)
        kept += 1
    return kept


def process_text(text: str, tokenizer: Tokenizer, ctx: RunContext) -> int:
    return count_tokens(tokenizer.wakati(text), ctx)


def process_file(path: str | Path, tokenizer: Tokenizer, ctx: RunContext) -> bool:
    ctx.debug(f"Processing {path}")
    try:
        cues = load_cues(path)
    except SubtitleParseError as e:
        ctx.debug(f"[warn] {e}")
        return False
    process_text(join_cues(cues), tokenizer, ctx)
    return True


def build_report(tokens: Iterable[str], mode: str = MODE_TABLE) -> str:
    """トークン列から直接レポート文字列を作る(テスト/ライブラリ利用向け)。"""
    ctx = RunContext(mode=mode)
    count_tokens(tokens, ctx)
    return render(ctx.table, ctx.mode)


def run(
    root: str | Path,
    out: str | Path | None = None,
    recurse: bool = True,
    mode: str = MODE_TABLE,
    verbose: bool = False,
    backend: str = "auto",
    tokenizer: Tokenizer | None = None,
    write: bool = True,
    log: Callable[[str], None] = _stderr,
) -> RunResult:
    ctx = RunContext(mode=mode, verbose=verbose, log=log)
    if not Path(root).exists():
        raise FileNotFoundError(str(root))

    # 出力先は集計前に解決しておく(失敗時に作業を無駄にしない)
    dest = resolve_output_path(out, root, ctx.mode) if write else None

    files = find_subtitle_files(root, recurse=recurse, log=ctx.debug)
    result = RunResult(files=files, table=ctx.table)
    if not files:
        return result

    if tokenizer is None:
        tokenizer = load_tokenizer(backend)
    ctx.debug(f"[info] tokenizer: {tokenizer.name}")

    for f in files:
        if not process_file(f, tokenizer, ctx):
            result.skipped.append(f)

    result.report = render(ctx.table, ctx.mode)
    if dest is not None:
        result.output = write_report(dest, result.report)
    return result


__all__ = [
    "RunContext",
    "RunResult",
    "count_tokens",
    "process_text",
    "process_file",
    "build_report",
    "run",
]
