"""Structural operations on virtual trees.

Every function here is pure: inputs are never modified and each result is a
new :class:`VirtualDirectory` (or an existing node reached by navigation).
Paths are split on ``/`` and every segment is used verbatim as a name.
"""

from virtualdir.errors import (
    ExpectedDirectoryError,
    MergeConflictError,
    NoSuchPathError,
)
from virtualdir.models.directory import Node, VirtualDirectory
from virtualdir.models.file import VirtualFile

__all__ = ["wrap", "unwrap", "merged", "SEPARATOR"]

SEPARATOR = "/"


def wrap(path: str, node: Node) -> VirtualDirectory:
    """Nest ``node`` under ``path``; the last segment becomes the node's name."""
    head, sep, rest = path.partition(SEPARATOR)
    if sep:
        return (
            VirtualDirectory.builder().add_directory(head, wrap(rest, node)).build()
        )
    return VirtualDirectory.builder().add_child(path, node).build()


def unwrap(path: str, root: VirtualDirectory) -> Node:
    """Return the node found at ``path`` inside ``root``."""
    head, sep, rest = path.partition(SEPARATOR)
    if not sep:
        child = root.get(path)
        if child is None:
            raise NoSuchPathError(path, terminal=True)
        return child

    match root.get(head):
        case VirtualDirectory() as child:
            return unwrap(rest, child)
        case VirtualFile():
            raise ExpectedDirectoryError(head)
        case None:
            raise NoSuchPathError(head)


def merged(*directories: VirtualDirectory) -> VirtualDirectory:
    """Combine directories left to right.

    Files from later directories replace earlier ones with the same name,
    directories with the same name are merged recursively. A name that is a
    file in one input and a directory in another raises
    :class:`MergeConflictError`.
    """
    children: dict[str, Node] = {}
    for directory in directories:
        for name, child in directory.list().items():
            previous = children.get(name)
            match child:
                case VirtualFile():
                    match previous:
                        case VirtualDirectory():
                            raise MergeConflictError(child.kind, previous.kind)
                        case VirtualFile() | None:
                            children[name] = child
                case VirtualDirectory():
                    match previous:
                        case VirtualFile():
                            raise MergeConflictError(child.kind, previous.kind)
                        case VirtualDirectory():
                            children[name] = merged(previous, child)
                        case None:
                            children[name] = child
    return VirtualDirectory(children)
