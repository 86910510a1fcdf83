from __future__ import annotations
from pathlib import Path

from unity_lisp.config import get_out_dir, get_target_extension


def output_path_for(path: str | Path, out_dir: str | None = None, target_ext: str | None = None) -> Path:
    """`src/player.clj` -> `src/out/player.js`: same folder, fixed sub-folder, target extension."""
    p = Path(path)
    return p.parent / (out_dir or get_out_dir()) / p.with_suffix(target_ext or get_target_extension()).name


def is_hidden(path: Path, root: Path | None = None) -> bool:
    """True when any segment below `root` starts with a dot."""
    parts = path.relative_to(root).parts if root is not None else path.parts
    return any(part.startswith('.') and part not in ('.', '..') for part in parts)


def has_extension(path: Path, extensions) -> bool:
    return path.suffix in extensions
