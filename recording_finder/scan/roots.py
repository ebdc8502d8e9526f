"""Discovery of the scan roots available on this host."""

import getpass
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

# Directories whose children are mount points on POSIX hosts
POSIX_VOLUME_PARENTS = ("/Volumes", "/mnt")


def available_roots() -> list[str]:
    """Return the filesystem roots that can be offered in the root menu.

    On Windows these are the drive letters. Elsewhere the filesystem root
    comes first, followed by the mounted volumes found under ``/Volumes``,
    ``/media/<user>`` and ``/mnt``.
    """
    if sys.platform == "win32":
        return _windows_drives()
    return _posix_roots()


def _windows_drives() -> list[str]:
    listdrives = getattr(os, "listdrives", None)
    if listdrives is not None:
        return list(listdrives())
    return [f"{letter}:\\" for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ" if os.path.exists(f"{letter}:\\")]


def _posix_roots() -> list[str]:
    roots = ["/"]
    parents = [Path(parent) for parent in POSIX_VOLUME_PARENTS]
    try:
        parents.append(Path("/media") / getpass.getuser())
    except (KeyError, OSError):
        pass
    for parent in parents:
        try:
            children = sorted(parent.iterdir())
        except OSError:
            continue
        for child in children:
            if child.is_dir() and str(child) not in roots:
                roots.append(str(child))
    logger.debug(f"Available roots: {roots}")
    return roots
