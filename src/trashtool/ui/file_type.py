"""File classification used to colour trash listings."""

from __future__ import annotations

import os
import stat
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_EXTENSIONS = {
    "toml", "yaml", "yml", "json", "conf", "ini", "env", "gradle", "xml", "cfg",
}

CONFIG_FILENAMES = {
    "makefile", "cargo.toml", "package.json", "package-lock.json", "yarn.lock",
    "pnpm-lock.yaml", "composer.json", "pom.xml", "build.gradle", "gemfile",
    "pipfile", "pipfile.lock", "requirements.txt", "pyproject.toml", "setup.py",
    "setup.cfg", "dockerfile", "docker-compose.yml", "license", "license.txt",
    ".editorconfig", ".gitignore", ".gitattributes", ".gitmodules", ".prettierrc",
    "tsconfig.json", "jsconfig.json", "webpack.config.js", "vite.config.js",
    "rollup.config.js", "vagrantfile",
}

CONFIG_SUFFIXES = (".config.js", ".config.mjs", ".config.ts", "rc")

ARCHIVE_EXTENSIONS = {
    "zip", "tar", "gz", "bz2", "xz", "tgz", "tbz2", "7z", "rar", "deb", "iso", "zst",
}
DOCUMENT_EXTENSIONS = {
    "md", "txt", "doc", "docx", "pdf", "xls", "xlsx", "ppt", "pptx", "odt", "ods",
    "odp", "rtf", "epub", "csv",
}
IMAGE_EXTENSIONS = {
    "jpg", "jpeg", "png", "gif", "bmp", "svg", "webp", "heic", "heif", "tiff", "tif",
    "ico", "avif",
}
VIDEO_EXTENSIONS = {"mp4", "mkv", "mov", "avi", "webm", "mpeg", "mpg", "flv", "wmv", "3gp"}
MUSIC_EXTENSIONS = {"mp3", "flac", "m4a", "wav", "ogg", "aac", "alac", "aiff", "opus"}


class FileType(str, Enum):
    """Display category of a file or directory."""

    DIRECTORY = "directory"
    EXECUTABLE = "executable"
    ARCHIVE = "archive"
    CONFIG = "config"
    DOCUMENT = "document"
    IMAGE = "image"
    VIDEO = "video"
    MUSIC = "music"
    OTHER = "other"


def is_executable(path: Path) -> bool:
    """True for a regular file with any execute bit set."""
    try:
        st = os.stat(path)
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & 0o111)


def get_file_type(path: Path) -> FileType:
    """Classify *path*: directory, executable, then by name and extension."""
    if path.is_dir():
        return FileType.DIRECTORY
    if is_executable(path):
        return FileType.EXECUTABLE

    filename = path.name.lower()
    extension = path.suffix.lower().lstrip(".")

    if (
        extension in CONFIG_EXTENSIONS
        or filename in CONFIG_FILENAMES
        or filename.startswith(".env")
        or filename.endswith(CONFIG_SUFFIXES)
    ):
        return FileType.CONFIG
    if extension in ARCHIVE_EXTENSIONS:
        return FileType.ARCHIVE
    if extension in DOCUMENT_EXTENSIONS:
        return FileType.DOCUMENT
    if extension in IMAGE_EXTENSIONS:
        return FileType.IMAGE
    if extension in VIDEO_EXTENSIONS:
        return FileType.VIDEO
    if extension in MUSIC_EXTENSIONS:
        return FileType.MUSIC
    return FileType.OTHER
