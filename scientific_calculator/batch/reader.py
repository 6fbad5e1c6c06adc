"""Read expressions from a text file or an archive."""
from pathlib import Path
import tarfile
import tempfile
from typing import List
import zipfile

import py7zr


def read_expressions(input_file: Path) -> List[str]:
    """
    Read one expression per line from a plain text file or an archive.

    Blank lines are dropped and surrounding whitespace is stripped.

    :param Path input_file: Path to a ``.txt`` file or a supported archive

    :return: List of non-empty expression lines
    :rtype: List[str]
    :raises ValueError: If the archive format is unsupported or contains no .txt file
    """
    if input_file.suffix == ".txt":
        content = input_file.read_text(encoding="utf-8")
    else:
        content = extract_archive(input_file)

    return [line.strip() for line in content.splitlines() if line.strip()]


def extract_archive(archive_path: Path) -> str:
    """
    Extract the first .txt file found in a supported archive and return its content as a string.

    Supported formats:
    - .zip
    - .tar.xz
    - .7z

    :param Path archive_path: Path to the archive file

    :return: Content of the extracted .txt file
    :rtype: str
    :raises ValueError: If no .txt file is found or format is unsupported
    """
    # Extract into a temporary directory so nothing is left behind
    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir_path = Path(tmpdir)
        if archive_path.suffix == ".zip":
            with zipfile.ZipFile(archive_path, "r") as zf:
                txt_files = [f for f in zf.namelist() if f.endswith(".txt")]
                if not txt_files:
                    raise ValueError("No .txt file found in zip archive")
                zf.extract(txt_files[0], path=tmpdir_path)
                return (tmpdir_path / txt_files[0]).read_text(encoding="utf-8")

        elif archive_path.suffixes[-2:] == [".tar", ".xz"]:
            with tarfile.open(archive_path, "r:xz") as tf:
                txt_members = [m for m in tf.getmembers() if m.isfile() and m.name.endswith(".txt")]
                if not txt_members:
                    raise ValueError("No .txt file found in tar.xz archive")
                tf.extract(txt_members[0], path=tmpdir_path, filter="data")
                return (tmpdir_path / txt_members[0].name).read_text(encoding="utf-8")

        elif archive_path.suffix == ".7z":
            with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                txt_files = [f for f in archive.getnames() if f.endswith(".txt")]
                if not txt_files:
                    raise ValueError("No .txt file found in 7z archive")
                archive.extract(targets=[txt_files[0]], path=tmpdir_path)
                return (tmpdir_path / txt_files[0]).read_text(encoding="utf-8")

        else:
            raise ValueError(f"Unsupported archive format: {archive_path.suffix}")
