"""JSON document shared by every pipeline stage."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any


class LinksFileNotFoundError(FileNotFoundError):
    """The links document has not been created yet."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(
            f"{self.path} not found. Run 'link-archive fetch-links' first."
        )


def load_links(path: str | Path) -> list[dict[str, Any]]:
    """Read the whole links document."""
    path = Path(path)
    if not path.exists():
        raise LinksFileNotFoundError(path)

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of link records")
    return data


def save_links(path: str | Path, links: list[dict[str, Any]]) -> None:
    """Rewrite the whole links document.

    The payload is written to a temporary file next to the target and then
    moved over it, so readers never see a half-written document.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(links, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
