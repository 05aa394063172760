from dataclasses import dataclass

from virtualdir.models.kind import NodeKind

__all__ = ["VirtualFile", "ENCODING"]

ENCODING = "utf-8"


@dataclass(frozen=True)
class VirtualFile:
    """Immutable file content, held fully in memory."""

    content: bytes

    def __post_init__(self):
        match self.content:
            case str():
                object.__setattr__(self, "content", self.content.encode(ENCODING))
            case bytes():
                pass
            case bytearray() | memoryview():
                object.__setattr__(self, "content", bytes(self.content))
            case _:
                kind = type(self.content).__name__
                raise TypeError(f"File content must be str or bytes, not {kind}")

    @property
    def kind(self) -> NodeKind:
        return NodeKind.FILE

    @property
    def text(self) -> str:
        return self.content.decode(ENCODING)

    def __len__(self):
        return len(self.content)
