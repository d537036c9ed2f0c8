from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

from .config import find_config, load_config
from .errors import RDocUserError
from .filtering import iter_source_files
from .jsonic import dumps as jdumps
from .processor import RustdocProcessor
from .textlint.tester import AstValidationError, check_ast
from .version import tool_version

_LOG = logging.getLogger("rdoc")


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug or os.environ.get("RDOC_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rdoc",
        description="Rust doc comments → textlint AST",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--debug", action="store_true", help="verbose logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_ast = sub.add_parser("ast", help="JSON AST of one file")
    sp_ast.add_argument("path", help="path to a .rs file")
    sp_ast.add_argument("--check", action="store_true", help="validate the AST before printing")

    sp_scan = sub.add_parser("scan", help="paragraph/Str counts for every source file under ROOT (JSON)")
    sp_scan.add_argument("root", nargs="?", default=".", help="directory to scan (default: cwd)")

    sp_list = sub.add_parser("list", help="lists (JSON)")
    sp_list.add_argument("what", choices=["extensions"], help="what to list")

    return p


def _read_source(path: Path) -> str:
    if not path.is_file():
        raise RDocUserError(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RDocUserError(f"Failed to read {path}: {e}") from e


def _cmd_ast(path: Path, check: bool) -> Dict[str, Any]:
    cfg = load_config(find_config(path))
    processor = RustdocProcessor({"extensions": cfg.extensions})
    handlers = processor.processor(path.suffix.lower())
    document = handlers.pre_process(_read_source(path), str(path))
    if check:
        check_ast(document)
    return document.to_dict()


def _cmd_scan(root: Path) -> Dict[str, Any]:
    if not root.is_dir():
        raise RDocUserError(f"Not a directory: {root}")
    cfg = load_config(find_config(root))
    processor = RustdocProcessor({"extensions": cfg.extensions})

    files: List[Dict[str, Any]] = []
    for fp in iter_source_files(root, cfg):
        handlers = processor.processor(fp.suffix.lower())
        document = handlers.pre_process(_read_source(fp), str(fp))
        files.append({
            "path": fp.relative_to(root).as_posix(),
            "paragraphs": len(document.children),
            "strs": sum(len(p.children) for p in document.children),
        })
    _LOG.debug("scanned %d file(s) under %s", len(files), root)
    return {"files": files}


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.debug)

    try:
        if ns.cmd == "ast":
            sys.stdout.write(jdumps(_cmd_ast(Path(ns.path), ns.check)))
            return 0

        if ns.cmd == "scan":
            sys.stdout.write(jdumps(_cmd_scan(Path(ns.root))))
            return 0

        if ns.cmd == "list":
            cfg = load_config(find_config(Path.cwd()))
            data = {"extensions": RustdocProcessor({"extensions": cfg.extensions}).available_extensions()}
            sys.stdout.write(jdumps(data))
            return 0

    except RDocUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except AstValidationError as e:
        sys.stderr.write(f"Invalid AST: {e}\n")
        return 1

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
