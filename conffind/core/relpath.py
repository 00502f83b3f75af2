"""Lexical relative-path computation.

Works on path text only: nothing is looked up on disk and symlinks are not
resolved, so the result is the same whether or not either path exists.
"""

import os
from collections.abc import Iterable

from conffind.core.constants import CURRENT_DIR, PARENT_DIR


class _NotComputable(Exception):
    """Raised internally when ``base`` has a ``..`` component that would need resolving."""


def split_components(path: str) -> list[str]:
    """Split ``path`` into its anchor (drive + root, if any) and its segments.

    Empty segments from repeated separators are dropped; ``.`` and ``..`` are kept.
    """
    drive, rest = os.path.splitdrive(path)
    if os.altsep:
        rest = rest.replace(os.altsep, os.sep)
    anchor = drive
    if rest.startswith(os.sep):
        anchor += os.sep
    components = [anchor] if anchor else []
    components.extend(segment for segment in rest.split(os.sep) if segment)
    return components


def _parent_steps(base_rest: Iterable[str]) -> list[str]:
    steps: list[str] = []
    for component in base_rest:
        if component == CURRENT_DIR:
            continue
        if component == PARENT_DIR:
            raise _NotComputable(component)
        steps.append(PARENT_DIR)
    return steps


def _diff(target: list[str], base: list[str]) -> list[str]:
    result: list[str] = []
    it_target = iter(target)
    it_base = iter(base)
    while True:
        a = next(it_target, None)
        b = next(it_base, None)
        if a is None and b is None:
            break
        if b is None:
            result.append(a)
            result.extend(it_target)
            break
        if a is None:
            result.extend(_parent_steps([b]))
            continue
        if not result and a == b:
            continue
        if b == CURRENT_DIR:
            result.append(a)
            continue
        if b == PARENT_DIR:
            raise _NotComputable(b)
        # Diverged: climb out of what is left of base, then descend into target.
        result.append(PARENT_DIR)
        result.extend(_parent_steps(it_base))
        result.append(a)
        result.extend(it_target)
        break
    return result


def relativize(target: str | os.PathLike[str], base: str | os.PathLike[str]) -> str | None:
    """Return ``target`` expressed relative to ``base``, or None if that is not computable.

    Both paths must be of the same kind (absolute or relative). An absolute
    ``target`` against a relative ``base`` is returned unchanged; a relative
    ``target`` against an absolute ``base`` gives None. Identical paths give
    an empty string.

    Examples:
        relativize("/a/b/c", "/a/b")   -> "c"
        relativize("/a/x", "/a/b")     -> "../x"
        relativize("/a/b/c", "/a/x/y") -> "../../b/c"
    """
    target_str = os.fspath(target)
    base_str = os.fspath(base)

    target_abs = os.path.isabs(target_str)
    if target_abs != os.path.isabs(base_str):
        return target_str if target_abs else None

    try:
        components = _diff(split_components(target_str), split_components(base_str))
    except _NotComputable:
        return None
    return os.path.join(*components) if components else ""
