from __future__ import annotations
import argparse
import sys
from pathlib import Path
import tomllib

from .morph import BACKENDS, TokenizerUnavailable
from .output import OutputPathError
from .pipeline import run
from .render import MODE_TABLE, MODE_WORDS


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jsubfreq",
        description="字幕ファイルから日本語の単語を抽出し、出現頻度表(freq.txt)または単語リスト(words.txt)を出力します"
    )
    p.add_argument("-i", "--in", dest="root", help="入力ファイル/ルートディレクトリ (必須)")
    p.add_argument("-o", "--out", help="出力先ディレクトリ(ファイル指定時はその親) (既定: 入力と同じ場所)")
    p.add_argument("--no-recurse", dest="recurse", action="store_false", default=None, help="サブディレクトリを走査しない")
    p.add_argument("-v", "--verbose", action="store_true", default=None, help="処理中のファイルやスキップしたファイルを表示")
    p.add_argument("-w", "--words", action="store_true", default=None, help="頻度なしの単語リスト(words.txt)を出力")
    p.add_argument("--backend", choices=list(BACKENDS), default=None, help="形態素解析器 (既定: auto = fugashi優先, なければjanome)")
    p.add_argument("--config", help="設定ファイル(TOML: pyproject.toml など)の [tool.jsubfreq] で未指定の項目を補完")
    p.add_argument("--stdout", action="store_true", help="ファイルに書かず標準出力へ表示")
    return p


def _apply_config(args: argparse.Namespace, cfg_path: Path) -> None:
    # CLI引数が最優先。未指定(None)の項目だけ設定で補完する。
    if not cfg_path.is_file() or cfg_path.suffix.lower() != ".toml":
        print(f"[warn] config not loaded: {cfg_path}", file=sys.stderr)
        return
    try:
        with cfg_path.open("rb") as f:
            cfg = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"[warn] failed to load config {cfg_path}: {e}", file=sys.stderr)
        return
    tool = cfg.get("tool", {}) if isinstance(cfg, dict) else {}
    conf = tool.get("jsubfreq", {}) if isinstance(tool, dict) else {}
    for key, attr in [("in", "root"), ("out", "out"), ("backend", "backend")]:
        if key in conf and getattr(args, attr) is None:
            setattr(args, attr, str(conf[key]))
    for key in ("recurse", "verbose", "words"):
        if key in conf and getattr(args, key) is None:
            setattr(args, key, bool(conf[key]))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.config:
        _apply_config(args, Path(args.config))
    if not args.root:
        parser.error("入力パスを -i/--in で指定してください")
    args.backend = args.backend or "auto"
    if args.backend not in BACKENDS:
        parser.error(f"invalid backend: {args.backend}")
    mode = MODE_WORDS if args.words else MODE_TABLE
    recurse = True if args.recurse is None else args.recurse

    try:
        result = run(
            args.root,
            out=args.out,
            recurse=recurse,
            mode=mode,
            verbose=bool(args.verbose),
            backend=args.backend,
            write=not args.stdout,
        )
    except FileNotFoundError as e:
        print(f"[error] input not found: {e}", file=sys.stderr)
        return 1
    except OutputPathError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    except TokenizerUnavailable as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"[error] failed to write report: {e}", file=sys.stderr)
        return 1

    if not result.files:
        print("No subtitle files found.")
        return 0
    if args.stdout:
        sys.stdout.write(result.report or "")
        return 0
    table = result.table
    print(f"Wrote {len(table)} token(s) ({table.total} occurrence(s), {len(result.files) - len(result.skipped)} file(s)) to {result.output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
