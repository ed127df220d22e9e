"""
Filesystem operations for the generator — clear, create, write.

Every function here catches ``OSError`` at the call that can fail and
reports it in the returned value instead of raising:

    {"ok": True, ...}  or  {"error": "...", ...}

That includes the stat calls: a path that cannot even be inspected
(permission denied on a parent, I/O error) is a failure, not a crash.
The caller decides whether a failure stops anything (it never does for
a single bucket).
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from dimensgen.core.config.settings import MAX_DELETE_DEPTH
from dimensgen.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


def _kind(path: Path) -> str | None:
    """``"dir"``, ``"other"`` or None when nothing is there.

    Uses lstat, so a symlink is ``"other"`` whatever it points to.

    Raises:
        OSError: If *path* cannot be inspected.
    """
    try:
        mode = path.lstat().st_mode
    except (FileNotFoundError, NotADirectoryError):
        return None
    return "dir" if stat.S_ISDIR(mode) else "other"


def delete_tree(path: Path, max_depth: int = MAX_DELETE_DEPTH, _depth: int = 0) -> bool:
    """Delete *path* and everything below it, depth-first.

    Symlinks are removed, never followed. Gives up as soon as one delete
    fails or the tree is deeper than *max_depth* levels; whatever was
    already deleted stays deleted.

    Returns:
        True if *path* no longer exists.
    """
    try:
        kind = _kind(path)
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e, exc_info=True)
        return False

    if kind is None:
        return True

    if kind == "other":
        try:
            path.unlink()
        except OSError as e:
            logger.debug("Cannot remove %s: %s", path, e, exc_info=True)
            return False
        return True

    if _depth > max_depth:
        logger.debug("Depth limit %d reached at %s", max_depth, path)
        return False

    try:
        children = list(path.iterdir())
    except OSError as e:
        logger.debug("Cannot list %s: %s", path, e, exc_info=True)
        return False

    for child in children:
        if not delete_tree(child, max_depth, _depth + 1):
            return False

    try:
        path.rmdir()
    except OSError as e:
        logger.debug("Cannot remove directory %s: %s", path, e, exc_info=True)
        return False
    return True


def clear_dir(
    path: Path,
    max_depth: int = MAX_DELETE_DEPTH,
    *,
    remove_files: bool = False,
) -> dict:
    """Remove a previously generated directory, if there is one.

    By default only directories are cleared: a regular file at *path*
    is left in place and creating the directory will then fail. With
    ``remove_files=True`` whatever sits at *path* is removed.

    Returns:
        {"ok": True, "cleared": bool} or {"error": "..."}
    """
    try:
        kind = _kind(path)
    except OSError as e:
        return {"error": f"Cannot stat {path}: {e}"}

    if kind is None or (kind == "other" and not remove_files):
        return {"ok": True, "cleared": False}

    if not delete_tree(path, max_depth):
        return {"error": f"Could not delete stale {path}"}

    logger.debug("Cleared %s", path)
    return {"ok": True, "cleared": True}


def make_dir(path: Path) -> dict:
    """Create *path* (and parents). An existing path is a failure.

    Returns:
        {"ok": True, "path": "..."} or {"error": "..."}
    """
    try:
        path.mkdir(parents=True)
    except FileExistsError:
        return {"error": f"mkdir {path} failed: path already exists"}
    except OSError as e:
        return {"error": f"mkdir {path} failed: {e}"}

    return {"ok": True, "path": str(path)}


def write_generated_file(output_root: Path, generated: GeneratedFile) -> dict:
    """Write a GeneratedFile under *output_root*, replacing any existing file.

    The parent directory must already exist.

    Returns:
        {"ok": True, "path": "...", "bytes": int} or {"error": "..."}
    """
    target = output_root / generated.path
    data = generated.to_bytes()

    try:
        target.write_bytes(data)
    except OSError as e:
        return {"error": f"write {target} failed: {e}", "path": generated.path}

    logger.info("Wrote generated file: %s (%d bytes) — %s", target, len(data), generated.reason)
    return {"ok": True, "path": generated.path, "bytes": len(data)}
