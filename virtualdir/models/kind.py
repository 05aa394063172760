from enum import StrEnum, auto

__all__ = ["NodeKind"]


class NodeKind(StrEnum):
    FILE = auto()
    DIRECTORY = auto()

    @property
    def suffix(self):
        match self:
            case NodeKind.FILE:
                return ""
            case NodeKind.DIRECTORY:
                return "/"
            case _:
                raise ValueError(f"Invalid NodeKind: {self}")
