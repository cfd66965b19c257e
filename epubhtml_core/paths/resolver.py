"""
Archive Path Resolution
=======================

Pure functions for archive-internal paths. Archive paths always use forward
slashes regardless of the host OS, contain no ``.`` segments and resolve
``..`` lexically against preceding segments. The empty string stands for the
archive root.

Resolution deliberately allows ``..`` to walk above the base it is applied
to; rejecting paths that escape the archive root is left to the archive
accessor (see ``is_escaping``).
"""

import posixpath
from typing import Iterable


def normalize(path: str) -> str:
    """
    Normalize an archive path.

    Backslashes become forward slashes, then the path is cleaned lexically.
    ``""`` and ``"."`` both normalize to ``""``.

    Example:
        >>> normalize("OEBPS\\\\text\\\\..\\\\images/./a.jpg")
        'OEBPS/images/a.jpg'
    """
    if not path:
        return ""
    path = path.replace("\\", "/")
    cleaned = posixpath.normpath(path)
    # POSIX keeps a leading "//"; archive paths never need it
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    if cleaned == ".":
        return ""
    return cleaned


def join(*parts: str) -> str:
    """
    Join path parts with ``/`` and normalize the result.

    Empty parts are ignored, so ``join()`` and ``join("", "")`` yield ``""``
    and ``join("a", "")`` yields ``"a"``. Unlike ``posixpath.join`` a part
    starting with ``/`` does not discard the parts before it.
    """
    return _join_parts(parts)


def _join_parts(parts: Iterable[str]) -> str:
    kept = [part for part in parts if part]
    if not kept:
        return ""
    return normalize("/".join(kept))


def directory_of(path: str) -> str:
    """Return the parent directory of ``path``, or ``""`` for a bare name."""
    normalized = normalize(path)
    if not normalized:
        return ""
    parent = posixpath.dirname(normalized)
    if parent in ("", "."):
        return ""
    return parent


def resolve(base: str, relative: str) -> str:
    """
    Resolve ``relative`` against the directory ``base``.

    Example:
        >>> resolve("OEBPS/text", "../images/x.jpg")
        'OEBPS/images/x.jpg'
        >>> resolve("a/b/nested", "../../images/x.jpg")
        'a/images/x.jpg'
    """
    return join(normalize(base), normalize(relative))


def is_escaping(path: str) -> bool:
    """True if the normalized ``path`` climbs above the archive root."""
    normalized = normalize(path)
    return normalized == ".." or normalized.startswith("../")
