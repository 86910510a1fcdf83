from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from unity_lisp.config import get_header
from unity_lisp.translator import Translator
from unity_lisp.types.errors import UnityUsageError
from unity_lisp.watch.paths import output_path_for

logger = logging.getLogger(__name__)


def with_header(code: str, header: str | None = None) -> str:
    header = get_header() if header is None else header
    return f"{header}\n\n{code}" if header else code


def process_file(
    path: str | Path | None,
    translator: Translator,
    out_dir: str | None = None,
    header: str | None = None,
) -> Path:
    """
    Translate one source file and write it below the output sub-folder.
    Parse failures are written too (as a comment), so the artifact always
    reflects the latest attempt.
    """
    if path is None:
        raise UnityUsageError("Path was None.")
    src = Path(path)
    if not src.is_file():
        raise UnityUsageError(f"Not a file: {src}")

    code = src.read_text(encoding='utf-8')
    out_path = output_path_for(src, out_dir)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(with_header(translator.translate(code), header), encoding='utf-8')
    logger.info("Saved %s", out_path)
    return out_path


def process_files(
    paths: Iterable[str | Path],
    translator: Translator,
    out_dir: str | None = None,
    header: str | None = None,
) -> list[Path]:
    written = []
    for path in paths:
        try:
            written.append(process_file(path, translator, out_dir, header))
        except (OSError, UnityUsageError) as e:
            # The rest of the batch is still processed
            logger.error("Failed to process %s: %s", path, e)
        except Exception:
            # A watch session outlives any one file
            logger.exception("Failed to translate %s", path)
    return written
