"""Finding, writing, backing up and comparing environment files."""

from __future__ import annotations

import os
import shutil
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from envlint.entries import LineEntry

PathLike = str | os.PathLike


@dataclass
class CompareWarning:
    """A file that lacks keys which other compared files define."""

    path: Path
    missing_keys: list[str] = field(default_factory=list)


def get_relative_path(target_path: PathLike, base_path: PathLike) -> Path:
    """Return ``target_path`` expressed relative to ``base_path``."""
    target_parts = Path(target_path).parts
    base_parts = Path(base_path).parts

    common = 0
    for base_part, target_part in zip(base_parts, target_parts):
        if base_part != target_part:
            break
        common += 1

    ups = [".."] * (len(base_parts) - common)
    return Path(*ups, *target_parts[common:])


def write_file(path: PathLike, lines: list[LineEntry]) -> None:
    """Write the lines to ``path``, each ending with a line feed.

    The last entry is not written: it is the blank line that stands for the
    final line feed of the file.
    """
    with open(path, "w", encoding="utf-8", newline="") as handle:
        for line in lines[:-1]:
            handle.write(f"{line.raw_string}\n")


def backup_file(path: PathLike) -> Path:
    """Copy ``path`` next to itself as ``<name>_<timestamp>.bak``."""
    source = Path(path)
    timestamp = int(time.time())
    backup = source.with_name(f"{source.name}_{timestamp}.bak")
    shutil.copyfile(source, backup)
    return backup


def _canonical(paths: Iterable[PathLike]) -> list[Path]:
    result = []
    for path in paths:
        try:
            result.append(Path(path).resolve(strict=True))
        except (OSError, RuntimeError):
            continue
    return result


def _file_paths(
    entries: list[Path],
    excludes: list[Path],
    recursive: bool,
    is_env_file: Callable[[Path], bool],
) -> list[Path]:
    nested: list[Path] = []
    for directory in entries:
        if not directory.is_dir() or directory in excludes:
            continue
        try:
            children = list(directory.iterdir())
        except OSError:
            continue
        wanted = [
            child
            for child in children
            if is_env_file(child)
            or (recursive and child.is_dir() and not child.is_symlink())
        ]
        nested.extend(_file_paths(wanted, excludes, recursive, is_env_file))

    files = [entry for entry in entries if entry.is_file() and entry not in excludes]
    files.extend(nested)
    return sorted(set(files))


def collect_file_paths(
    inputs: Iterable[PathLike],
    excludes: Iterable[PathLike],
    recursive: bool,
    is_env_file: Callable[[Path], bool],
) -> list[Path]:
    """Find the files to lint among ``inputs``, sorted and without repeats.

    Files given directly are always taken. Directories contribute the files
    that ``is_env_file`` accepts, and with ``recursive`` their subdirectories
    too, symbolic links excepted. Paths that do not exist are ignored, and
    anything in ``excludes`` is left out.
    """
    excluded = _canonical(excludes)
    return _file_paths(_canonical(inputs), excluded, recursive, is_env_file)


def compare_keys(
    files: Iterable[tuple[PathLike, Iterable[LineEntry]]],
) -> list[CompareWarning]:
    """Report, for each file, the keys that other files have and it lacks."""
    all_keys: dict[str, None] = {}
    file_keys: list[tuple[Path, set[str]]] = []

    for path, lines in files:
        keys = set()
        for line in lines:
            key = line.key
            if key is not None:
                all_keys.setdefault(key, None)
                keys.add(key)
        file_keys.append((Path(path), keys))

    warnings = []
    for path, keys in file_keys:
        missing = [key for key in all_keys if key not in keys]
        if missing:
            warnings.append(CompareWarning(path=path, missing_keys=missing))
    return warnings