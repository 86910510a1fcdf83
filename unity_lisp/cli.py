"""Command-line interface: watch a folder, or translate files once."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from unity_lisp.debug_utils.console import setup_logging
from unity_lisp.translator import Translator
from unity_lisp.types.errors import UnityUsageError
from unity_lisp.watch.processor import process_files
from unity_lisp.watch.watcher import FileWatcher

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unity-lisp", description="Translate Lisp source files to UnityScript.")
    parser.add_argument("path", nargs="?", default="./", help="file or folder to translate (default: ./)")
    parser.add_argument("--once", action="store_true", help="translate every matching file once and exit")
    parser.add_argument("--stdout", action="store_true", help="print the translation of PATH instead of writing it")
    parser.add_argument("--interval", type=float, default=None, help="poll interval in seconds")
    parser.add_argument("--out-dir", default=None, help="output sub-folder name")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(args: argparse.Namespace, translator: Translator) -> int:
    root = Path(args.path)
    if not root.exists():
        raise UnityUsageError(f"No such file or folder: {root}")

    if args.stdout:
        if not root.is_file():
            raise UnityUsageError("--stdout needs a single file")
        print(translator.translate(root.read_text(encoding="utf-8")))
        return 0

    if args.once:
        files = sorted(FileWatcher(root, lambda changed: None, out_dir=args.out_dir).scan())
        written = process_files(files, translator, args.out_dir)
        return 0 if len(written) == len(files) else 1

    watcher = FileWatcher(
        root,
        lambda changed: process_files(changed, translator, args.out_dir),
        interval=args.interval,
        out_dir=args.out_dir,
    )
    try:
        watcher.run()
    except KeyboardInterrupt:
        watcher.stop()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    # One session for the whole run: macros carry over between files
    translator = Translator()
    try:
        return run(args, translator)
    except UnityUsageError as e:
        logger.error("%s", e)
        return 2
