"""Indented text rendering of virtual trees."""

from virtualdir.models.directory import VirtualDirectory
from virtualdir.models.file import VirtualFile

__all__ = ["render", "INDENT", "ELLIPSIS"]

INDENT = "  "
ELLIPSIS = "..."


def render(directory: VirtualDirectory, max_depth: int = -1) -> str:
    """Render ``directory`` one entry per line, in insertion order.

    Directories get a trailing ``/`` and their contents one indent deeper.
    Once ``max_depth`` nested levels have been shown, a directory's contents
    are replaced by a single ``...`` line. ``-1`` means no limit.
    """
    lines: list[str] = []
    _render_into(directory, lines, max_depth, prefix="")
    return "".join(f"{line}\n" for line in lines)


def _render_into(
    directory: VirtualDirectory, lines: list[str], depth: int, prefix: str
):
    for name, child in directory.list().items():
        lines.append(f"{prefix}{name}{child.kind.suffix}")
        match child:
            case VirtualFile():
                pass
            case VirtualDirectory():
                if depth == 0:
                    lines.append(f"{prefix}{INDENT}{ELLIPSIS}")
                else:
                    _render_into(child, lines, depth - 1, prefix + INDENT)
