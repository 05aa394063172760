from virtualdir.models.kind import NodeKind
from virtualdir.models.file import VirtualFile
from virtualdir.models.directory import DirectoryBuilder, Node, VirtualDirectory
from virtualdir.models.tree import merged, unwrap, wrap

__all__ = [
    "NodeKind",
    "VirtualFile",
    "VirtualDirectory",
    "DirectoryBuilder",
    "Node",
    "wrap",
    "unwrap",
    "merged",
]
