"""File Batch — print every file named in a manifest, each under a header line.

Given files.txt containing the lines "a.txt", "b.txt", the output is:

    ============ a.txt
    <contents of a.txt>
    ============ b.txt
    <contents of b.txt>

Invariants:
    - Blank manifest lines are ignored; names are stripped
    - Names resolve relative to the manifest's directory
    - All files are read before anything is printed: a missing file prints nothing
    - Any OSError or non-UTF-8 file surfaces as FileBatchError (code FILE_READ_ERROR)
    - main() exits 0 on success, 1 on FileBatchError; argparse exits 2 on bad usage

Design Decisions:
    - Read, then print: the IO is split so the reading half is testable without stdout
"""

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from listzipper.config import get_settings
from listzipper.core.errors import FileBatchError
from listzipper.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def get_file(path: str | Path) -> tuple[str, str]:
    try:
        return str(path), Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise FileBatchError(str(path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise FileBatchError(str(path), f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc


def read_manifest(path: str | Path) -> list[str]:
    _, text = get_file(path)
    return [line.strip() for line in text.splitlines() if line.strip()]


def get_files(
    names: Iterable[str], base_dir: str | Path | None = None,
) -> list[tuple[str, str]]:
    base = Path(base_dir) if base_dir is not None else Path(".")
    files = []
    for name in names:
        _, text = get_file(base / name)
        files.append((name, text))
    return files


def print_files(
    files: Iterable[tuple[str, str]], out: TextIO | None = None, header: str | None = None,
) -> None:
    out = out or sys.stdout
    header = header if header is not None else get_settings().batch_header
    for name, text in files:
        print(f"{header} {name}", file=out)
        print(text, file=out)


def run(manifest: str | Path, out: TextIO | None = None) -> None:
    manifest = Path(manifest)
    names = read_manifest(manifest)
    logger.info(f"Manifest {manifest} lists {len(names)} file(s)", extra={"path": str(manifest)})
    print_files(get_files(names, manifest.parent), out)


def main(argv: list[str] | None = None) -> int:
    """Print the files a manifest names. Exit 0 on success, 1 if any file is unreadable."""
    parser = argparse.ArgumentParser(
        prog="python -m listzipper.services.file_batch",
        description="Print every file named in MANIFEST under a header line.",
    )
    parser.add_argument("manifest", help="text file listing one path per line")
    ns = parser.parse_args(sys.argv[1:] if argv is None else argv)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        run(ns.manifest)
    except FileBatchError as exc:
        logger.error(
            f"FileBatchError: {exc.message}",
            extra={"error_code": exc.code, "path": exc.path},
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
