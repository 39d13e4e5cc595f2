"""Expose the installed tenanttools version."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

PACKAGE_NAME: Final = "tenanttools"
PYPROJECT_PATH: Final = Path(__file__).resolve().parents[3] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the distribution version, reading ``pyproject.toml`` for source checkouts."""

    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return _project_field("version")


def _project_field(key: str) -> str:
    """Return a quoted scalar from the ``[project]`` table of ``pyproject.toml``."""

    if not PYPROJECT_PATH.exists():  # pragma: no cover - repository invariant
        raise RuntimeError(f"Unable to locate project metadata at {PYPROJECT_PATH}")

    in_project = False
    for raw_line in PYPROJECT_PATH.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line.startswith("["):
            in_project = line == "[project]"
            continue
        if not in_project or "=" not in line:
            continue
        name, _, value = line.partition("=")
        if name.strip() == key:
            found = value.strip().strip('"')
            if found:
                return found
            break

    raise RuntimeError(f"Unable to determine project {key} from pyproject.toml")


__all__ = ["get_project_version"]
