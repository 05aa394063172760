from virtualdir import fs
from virtualdir.errors import (
    DestinationExistsError,
    ExpectedDirectoryError,
    MergeConflictError,
    NameConflictError,
    NoSuchPathError,
    SourceNotFoundError,
    UnsupportedPathError,
    VirtualDirError,
)
from virtualdir.fs import SyncReport, generate, read
from virtualdir.models import (
    DirectoryBuilder,
    Node,
    NodeKind,
    VirtualDirectory,
    VirtualFile,
    merged,
    unwrap,
    wrap,
)

__version__ = "0.1.0"

__all__ = [
    "fs",
    "generate",
    "read",
    "SyncReport",
    "VirtualDirectory",
    "DirectoryBuilder",
    "VirtualFile",
    "Node",
    "NodeKind",
    "wrap",
    "unwrap",
    "merged",
    "VirtualDirError",
    "NameConflictError",
    "NoSuchPathError",
    "ExpectedDirectoryError",
    "MergeConflictError",
    "DestinationExistsError",
    "SourceNotFoundError",
    "UnsupportedPathError",
]
