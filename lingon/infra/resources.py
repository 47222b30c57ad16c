"""Import bundled ``languages/*.json`` resources into a writable directory.

The owner is a package (name or module) whose ``languages`` resource folder is
read through :mod:`importlib.resources`, which also covers packages imported
from zip archives, or a filesystem path to a directory or an archive that
contains a top level ``languages/`` folder.
"""

from __future__ import annotations

import logging
import os
import zipfile
from contextlib import ExitStack
from importlib import resources
from pathlib import Path, PurePosixPath
from types import ModuleType
from typing import TYPE_CHECKING, Iterator, List, Tuple, Union

from ..core.errors import ResourceImportError

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

log = logging.getLogger(__name__)

LANGUAGES_DIRECTORY = "languages"
ARCHIVE_SUFFIXES = (".zip", ".whl", ".jar", ".egg")

Owner = Union[str, ModuleType, "os.PathLike[str]"]


def contains_path_traversal(relative_path: str) -> bool:
    return ".." in PurePosixPath(relative_path.replace("\\", "/")).parts


def _languages_root(owner: Owner, stack: ExitStack) -> Traversable | None:
    if isinstance(owner, os.PathLike):
        location = Path(owner)
        if location.is_file() and location.suffix.lower() in ARCHIVE_SUFFIXES:
            archive = stack.enter_context(zipfile.ZipFile(location))
            root: Traversable = zipfile.Path(archive)
        else:
            root = location
    else:
        root = resources.files(owner)

    languages = root.joinpath(LANGUAGES_DIRECTORY)
    return languages if languages.is_dir() else None


def _walk_json(root: Traversable, prefix: Tuple[str, ...] = ()) -> Iterator[Tuple[str, Traversable]]:
    for entry in sorted(root.iterdir(), key=lambda e: e.name):
        parts = prefix + (entry.name,)
        if entry.is_dir():
            yield from _walk_json(entry, parts)
        elif entry.is_file() and entry.name.lower().endswith(".json"):
            yield "/".join(parts), entry


def import_from_owner(owner: Owner, target_directory: Path) -> List[Path]:
    """Copy bundled language files to ``target_directory``.

    Existing files are never overwritten, so running it again is a no-op.
    Returns the files written by this call.
    """
    if owner is None:
        raise ResourceImportError("owner cannot be None")
    target_directory = Path(target_directory)

    imported: List[Path] = []
    try:
        target_directory.mkdir(parents=True, exist_ok=True)
        with ExitStack() as stack:
            source = _languages_root(owner, stack)
            if source is None:
                log.debug("No bundled %s/ found for %s", LANGUAGES_DIRECTORY, owner)
                return imported

            for relative_path, entry in _walk_json(source):
                if contains_path_traversal(relative_path):
                    log.warning("Skipping %s: path traversal", relative_path)
                    continue

                target_file = target_directory.joinpath(*relative_path.split("/"))
                if target_file.exists():
                    continue

                target_file.parent.mkdir(parents=True, exist_ok=True)
                target_file.write_bytes(entry.read_bytes())
                imported.append(target_file)
    except (ImportError, TypeError, OSError, zipfile.BadZipFile) as e:
        raise ResourceImportError(
            f"Failed to import languages from {owner!r}: {e}", owner
        ) from e

    if imported:
        log.info("Imported %d language file(s) into %s", len(imported), target_directory)
    return imported
