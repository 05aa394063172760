from __future__ import annotations

from collections.abc import Iterator, Mapping

from virtualdir.errors import NameConflictError, UnsupportedEntryError
from virtualdir.models.file import VirtualFile
from virtualdir.models.kind import NodeKind

__all__ = ["VirtualDirectory", "DirectoryBuilder", "Node"]


class VirtualDirectory:
    """Immutable mapping of names to files and nested directories.

    The children mapping is copied on construction and on ``list()``, so no
    container handed in or out can change what the directory holds. Build
    instances with :meth:`builder` or :meth:`from_mapping`.
    """

    __slots__ = ("_children",)

    def __init__(self, children: Mapping[str, Node] | None = None):
        self._children = dict(children or {})

    @staticmethod
    def builder() -> DirectoryBuilder:
        return DirectoryBuilder()

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DIRECTORY

    def list(self) -> dict[str, Node]:
        return dict(self._children)

    def get(self, name: str, default=None) -> Node | None:
        return self._children.get(name, default)

    def __contains__(self, name) -> bool:
        return name in self._children

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._children))

    def __len__(self):
        return len(self._children)

    def __eq__(self, other):
        if not isinstance(other, VirtualDirectory):
            return NotImplemented
        return self._children == other._children

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self._children!r})"

    def __str__(self):
        return self.inspect()

    def inspect(self, max_depth: int = -1) -> str:
        from virtualdir.models.render import render

        return render(self, max_depth)

    def merged(self, *others: VirtualDirectory) -> VirtualDirectory:
        from virtualdir.models.tree import merged

        return merged(self, *others)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> VirtualDirectory:
        """Build a directory from ``{name: text | nested mapping}``."""
        match mapping:
            case Mapping():
                pass
            case _:
                raise UnsupportedEntryError(None, mapping)
        builder = cls.builder()
        for name, entry in mapping.items():
            match entry:
                case str():
                    builder.add_file(name, entry)
                case Mapping():
                    builder.add_directory(name, cls.from_mapping(entry))
                case _:
                    raise UnsupportedEntryError(name, entry)
        return builder.build()

    def to_mapping(self) -> dict:
        result = {}
        for name, child in self._children.items():
            match child:
                case VirtualFile():
                    result[name] = child.text
                case VirtualDirectory():
                    result[name] = child.to_mapping()
        return result


class DirectoryBuilder:
    """Mutable staging area for a :class:`VirtualDirectory`."""

    def __init__(self):
        self._children: dict[str, Node] = {}

    def add_file(self, name: str, file: VirtualFile | str | bytes) -> DirectoryBuilder:
        match file:
            case VirtualFile():
                return self.add_child(name, file)
            case _:
                return self.add_child(name, VirtualFile(file))

    def add_directory(
        self, name: str, directory: VirtualDirectory | DirectoryBuilder
    ) -> DirectoryBuilder:
        match directory:
            case VirtualDirectory():
                return self.add_child(name, directory)
            case DirectoryBuilder():
                return self.add_child(name, directory.build())
            case _:
                raise TypeError(f"Not a directory: {type(directory).__name__}")

    def add_child(self, name: str, child: Node) -> DirectoryBuilder:
        match child:
            case VirtualFile() | VirtualDirectory():
                pass
            case _:
                raise TypeError(f"Not a file or directory: {type(child).__name__}")
        if name in self._children:
            raise NameConflictError(name)
        self._children[name] = child
        return self

    def build(self) -> VirtualDirectory:
        return VirtualDirectory(self._children)


Node = VirtualFile | VirtualDirectory
