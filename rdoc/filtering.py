"""
Source file discovery for directory scans.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

import pathspec

from .config import RDocConfig


def compile_excludes(cfg: RDocConfig) -> pathspec.PathSpec:
    return pathspec.PathSpec.from_lines("gitwildmatch", cfg.exclude)


def iter_source_files(root: Path, cfg: RDocConfig) -> Iterator[Path]:
    """
    Yield files under root with a configured extension (names sorted per directory).

    Excluded directories are pruned without being descended into.
    """
    spec = compile_excludes(cfg)
    extensions = set(cfg.extensions)

    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root)
        dirnames[:] = sorted(
            d for d in dirnames
            if not spec.match_file((rel_dir / d).as_posix() + "/")
        )
        for name in sorted(filenames):
            rel = (rel_dir / name).as_posix()
            if Path(name).suffix.lower() not in extensions:
                continue
            if spec.match_file(rel):
                continue
            yield Path(dirpath) / name


__all__ = ["iter_source_files", "compile_excludes"]
