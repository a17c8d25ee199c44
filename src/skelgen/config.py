"""Configuration helpers for skelgen.

Provides:
- The source extension used for target files and default output names
- The project directory relative CLI paths are resolved against
"""

import os
from pathlib import Path

DEFAULT_SOURCE_EXTENSION = ".php"

# Inserted between a target's base name and its extension
TEST_INFIX = ".test"


def get_project_dir() -> Path:
    """Get the project directory.

    Uses SKELGEN_PROJECT_DIR if set, otherwise falls back to cwd.
    """
    env_dir = os.environ.get("SKELGEN_PROJECT_DIR")
    if env_dir:
        return Path(env_dir)
    return Path.cwd()


def get_source_extension() -> str:
    """Get the source file extension, always with a leading dot.

    Uses SKELGEN_SOURCE_EXTENSION if set, otherwise ".php".
    """
    extension = os.environ.get("SKELGEN_SOURCE_EXTENSION", "").strip()
    if not extension:
        return DEFAULT_SOURCE_EXTENSION
    if not extension.startswith("."):
        extension = "." + extension
    return extension
