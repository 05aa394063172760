"""Materialize virtual trees onto disk and scan disk back into virtual trees.

``generate`` reconciles in place: existing directories are reused, entries of
the wrong kind are deleted, and files whose content is unchanged are left
untouched. Both directions recurse depth-first with blocking I/O; nothing is
atomic across concurrent changes made by other processes.
"""

import logging
import os
import pathlib
import shutil
import stat
from dataclasses import dataclass, field

from virtualdir.errors import (
    DestinationExistsError,
    SourceNotFoundError,
    UnsupportedPathError,
)
from virtualdir.models import VirtualDirectory, VirtualFile
from virtualdir.models.file import ENCODING

__all__ = ["SyncReport", "generate", "read", "delete_recursively"]

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class SyncReport:
    created: list[pathlib.Path] = field(default_factory=list)
    written: list[pathlib.Path] = field(default_factory=list)
    skipped: list[pathlib.Path] = field(default_factory=list)
    deleted: list[pathlib.Path] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.created or self.written or self.deleted)

    def summary(self) -> str:
        return (
            f"{len(self.created)} created, {len(self.written)} written, "
            f"{len(self.skipped)} unchanged, {len(self.deleted)} deleted"
        )


def _lstat(path: pathlib.Path) -> os.stat_result | None:
    try:
        return path.lstat()
    except FileNotFoundError:
        return None


def delete_recursively(path: os.PathLike | str):
    """Remove a file, link or directory tree. Missing paths are ignored."""
    path = pathlib.Path(path)
    st = _lstat(path)
    if st is None:
        return
    if stat.S_ISDIR(st.st_mode):
        shutil.rmtree(path)
    else:
        path.unlink()


def _same_text(existing: bytes, file: VirtualFile) -> bool:
    # surrogateescape keeps undecodable bytes distinct
    return existing.decode(ENCODING, "surrogateescape") == file.content.decode(
        ENCODING, "surrogateescape"
    )


def _remove(path: pathlib.Path, report: SyncReport):
    logger.debug("Deleting %s", path)
    delete_recursively(path)
    report.deleted.append(path)


def generate(
    directory: VirtualDirectory,
    destination: os.PathLike | str,
    replace: bool = False,
    *,
    report: SyncReport | None = None,
) -> SyncReport:
    """Write ``directory`` to ``destination``, touching only what differs.

    An existing directory at ``destination`` is reused. Any other existing
    entry raises :class:`DestinationExistsError` unless ``replace`` is set,
    in which case it is deleted first.
    """
    destination = pathlib.Path(destination)
    if report is None:
        report = SyncReport()

    st = _lstat(destination)
    if st is not None and not stat.S_ISDIR(st.st_mode):
        if not replace:
            raise DestinationExistsError(destination)
        _remove(destination, report)
        st = None
    if st is None:
        logger.debug("Creating directory %s", destination)
        destination.mkdir()
        report.created.append(destination)

    for name, child in directory.list().items():
        child_destination = destination / name
        match child:
            case VirtualDirectory():
                generate(child, child_destination, replace=True, report=report)
            case VirtualFile():
                _generate_file(child, child_destination, report)
    return report


def _generate_file(file: VirtualFile, destination: pathlib.Path, report: SyncReport):
    st = _lstat(destination)
    if st is not None:
        if stat.S_ISREG(st.st_mode):
            if _same_text(destination.read_bytes(), file):
                logger.debug("Unchanged %s", destination)
                report.skipped.append(destination)
                return
        else:
            _remove(destination, report)
    logger.debug("Writing %s (%d bytes)", destination, len(file))
    destination.write_bytes(file.content)
    report.written.append(destination)


def read(source: os.PathLike | str) -> VirtualDirectory | VirtualFile | None:
    """Scan ``source`` into a virtual node.

    Symbolic links are not followed and yield ``None``; inside a directory
    they are left out. Directory entries are visited sorted by name.
    """
    source = pathlib.Path(source)
    st = _lstat(source)
    if st is None:
        raise SourceNotFoundError(source)

    mode = st.st_mode
    if stat.S_ISDIR(mode):
        builder = VirtualDirectory.builder()
        for entry in sorted(source.iterdir()):
            child = read(entry)
            if child is None:
                logger.debug("Skipping symbolic link %s", entry)
                continue
            builder.add_child(entry.name, child)
        return builder.build()
    if stat.S_ISREG(mode):
        return VirtualFile(source.read_bytes())
    if stat.S_ISLNK(mode):
        return None
    raise UnsupportedPathError(source)
