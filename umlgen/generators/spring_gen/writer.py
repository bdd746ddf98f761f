"""File writer and zip packaging for generated projects."""
import io
import zipfile
from pathlib import Path
from typing import Iterable, Mapping, Union

from umlgen.generators.spring_gen.types import GeneratedFile

Files = Union[Mapping[str, str], Iterable[GeneratedFile]]


def _as_generated_files(files: Files):
    if isinstance(files, Mapping):
        return [GeneratedFile(path=path, content=content) for path, content in files.items()]
    return list(files)


def write_files(files: Files, out_dir: Path) -> None:
    """
    Write generated files to the output directory.

    Args:
        files: Path -> content mapping or GeneratedFile objects
        out_dir: Base output directory path
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    for file in _as_generated_files(files):
        file_path = out_dir / file.path
        # Create parent directories if needed
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(file.content, encoding="utf-8")


def build_archive(files: Files) -> bytes:
    """Zip the generated files in memory, sorted by path."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for file in sorted(_as_generated_files(files), key=lambda f: f.path):
            zf.writestr(file.path, file.content)
    return buffer.getvalue()


def write_archive(files: Files, archive_path: Path) -> Path:
    archive_path.parent.mkdir(parents=True, exist_ok=True)
    archive_path.write_bytes(build_archive(files))
    return archive_path


def archive_directory(src_dir: Path, archive_path: Path) -> Path:
    """Zip every file under ``src_dir`` with paths relative to it."""
    files = {
        path.relative_to(src_dir).as_posix(): path.read_text(encoding="utf-8")
        for path in sorted(src_dir.rglob("*"))
        if path.is_file()
    }
    return write_archive(files, archive_path)
