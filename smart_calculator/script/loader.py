"""Load statement scripts from plain text files or archives."""
from pathlib import Path, PurePosixPath
import tarfile
from typing import Callable, Dict, Iterable, Optional, Tuple
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath, validate_call

from smart_calculator.common.logger import logger

SCRIPT_SUFFIX = ".txt"

# An archive reader returns the chosen member name and its raw bytes
ArchiveReader = Callable[[Path], Tuple[str, bytes]]


class Script(BaseModel):
    """Statements of a script together with where they were read from."""

    model_config = ConfigDict(frozen=True)

    source: Path = Field(..., description="File given on the command line")
    member: Optional[str] = Field(default=None, description="Archive member holding the statements")
    content: str = Field(..., description="Script text")


def _archive_stem(archive_path: Path) -> str:
    suffixes = "".join(archive_path.suffixes)
    return archive_path.name[: len(archive_path.name) - len(suffixes)] or archive_path.name


def choose_member(names: Iterable[str], archive_path: Path) -> str:
    """
    Pick the script member of an archive.

    A member named after the archive (``ops.txt`` inside ``ops.zip``, in any
    folder) wins; otherwise the first .txt member in name order is used.

    :param Iterable[str] names: Names of the regular files in the archive
    :param Path archive_path: Archive the names come from

    :return: Chosen member name
    :rtype: str
    :raises ValueError: If the archive holds no .txt file
    """
    candidates = sorted(name for name in names if name.endswith(SCRIPT_SUFFIX))
    if not candidates:
        raise ValueError(f"📄❌ No {SCRIPT_SUFFIX} script in {archive_path.name}")
    preferred = _archive_stem(archive_path) + SCRIPT_SUFFIX
    return next((name for name in candidates if PurePosixPath(name).name == preferred), candidates[0])


def _read_zip(archive_path: Path) -> Tuple[str, bytes]:
    with zipfile.ZipFile(archive_path) as zf:
        names = [info.filename for info in zf.infolist() if not info.is_dir()]
        member = choose_member(names, archive_path)
        return member, zf.read(member)


def _read_tar_xz(archive_path: Path) -> Tuple[str, bytes]:
    with tarfile.open(archive_path, "r:xz") as tf:
        files = {info.name: info for info in tf.getmembers() if info.isfile()}
        member = choose_member(files, archive_path)
        stream = tf.extractfile(files[member])
        return member, stream.read()


def _read_7z(archive_path: Path) -> Tuple[str, bytes]:
    with py7zr.SevenZipFile(archive_path, mode="r") as archive:
        names = [info.filename for info in archive.list() if not info.is_directory]
        member = choose_member(names, archive_path)
        # read() decompresses into memory, keyed by member name
        return member, archive.read(targets=[member])[member].read()


ARCHIVE_READERS: Dict[str, ArchiveReader] = {
    ".zip": _read_zip,
    ".tar.xz": _read_tar_xz,
    ".7z": _read_7z,
}


def archive_reader(path: Path) -> Optional[ArchiveReader]:
    """Return the reader matching the extension(s) of ``path``, if any."""
    suffixes = "".join(path.suffixes).lower()
    for extension, reader in ARCHIVE_READERS.items():
        if suffixes.endswith(extension):
            return reader
    return None


@validate_call
def load_script(input_file: FilePath) -> Script:
    """
    Read the statements of a script file.

    A .txt file is read directly. A .zip, .tar.xz or .7z archive is read in
    memory and the member picked by ``choose_member`` is decoded as UTF-8.

    :param FilePath input_file: Path to the script or archive

    :return: Script content and origin
    :rtype: Script
    :raises ValueError: If the format is unsupported or the archive holds no .txt file
    """
    if input_file.suffix.lower() == SCRIPT_SUFFIX:
        return Script(source=input_file, content=input_file.read_text(encoding="utf-8"))

    reader = archive_reader(input_file)
    if reader is None:
        raise ValueError(f"📄❌ Unsupported script format: {''.join(input_file.suffixes) or input_file.name}")

    member, data = reader(input_file)
    logger.info(f"📦 Reading statements from {member!r} in {input_file.name}")
    return Script(source=input_file, member=member, content=data.decode("utf-8"))
