__all__ = [
    "VirtualDirError",
    "NameConflictError",
    "NoSuchPathError",
    "ExpectedDirectoryError",
    "MergeConflictError",
    "UnsupportedEntryError",
    "DestinationExistsError",
    "SourceNotFoundError",
    "UnsupportedPathError",
]


class VirtualDirError(Exception):
    """Base class for every error raised by virtualdir."""


class NameConflictError(VirtualDirError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Conflicting names: {name}")
        self.name = name


class NoSuchPathError(VirtualDirError, LookupError):
    def __init__(self, name: str, *, terminal: bool = False):
        expected = "file or directory" if terminal else "directory"
        super().__init__(f"No such {expected}: '{name}'")
        self.name = name
        self.terminal = terminal


class ExpectedDirectoryError(VirtualDirError, LookupError):
    def __init__(self, name: str):
        super().__init__(f"Expected a directory, found a file: '{name}'")
        self.name = name


class MergeConflictError(VirtualDirError, ValueError):
    def __init__(self, incoming: str, existing: str):
        super().__init__(f"Cannot merge {incoming} into {existing}")
        self.incoming = incoming
        self.existing = existing


class UnsupportedEntryError(VirtualDirError, TypeError):
    def __init__(self, name: str | None, entry):
        where = "top level" if name is None else f"'{name}'"
        super().__init__(f"Unsupported entry for {where}: {type(entry).__name__}")
        self.name = name


class DestinationExistsError(VirtualDirError, FileExistsError):
    def __init__(self, path):
        super().__init__(f"Destination path already exists: {path}")
        self.path = path


class SourceNotFoundError(VirtualDirError, FileNotFoundError):
    def __init__(self, path):
        super().__init__(f"No file at {path}")
        self.path = path


class UnsupportedPathError(VirtualDirError, ValueError):
    def __init__(self, path):
        super().__init__(f"Unsupported path: {path}")
        self.path = path
