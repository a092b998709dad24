"""Local file storage for pipeline artifacts."""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any

from common.errors import CorruptArtifactError

logger = logging.getLogger(__name__)

# Artifact paths, relative to a site's output directory.
SITE_ANALYSIS_FILE = "site-analysis.json"
INVENTORY_FILE = "existing-articles.json"
PLAN_FILE = "article-plan.json"
BLOG_PLAN_FILE = "blog-plan.md"
ARTICLES_DIR = "output"


class Store:
    """Reads and writes JSON and Markdown artifacts under a root directory.

    Relative paths are resolved against `root`; absolute paths are used as-is.
    Reads of a missing file return None instead of raising.
    """

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def path(self, relative: str | Path) -> Path:
        return self.root / relative

    def exists(self, relative: str | Path) -> bool:
        return self.path(relative).exists()

    def ensure_dir(self, relative: str | Path = ".") -> Path:
        directory = self.path(relative)
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def read_json(self, relative: str | Path) -> Any:
        text = self.read_text(relative)
        if text is None:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise CorruptArtifactError(str(relative), str(e)) from e

    def write_json(self, relative: str | Path, data: Any) -> Path:
        text = json.dumps(data, indent=2, ensure_ascii=False, default=str) + "\n"
        return self.write_text(relative, text)

    def read_text(self, relative: str | Path) -> str | None:
        path = self.path(relative)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write_text(self, relative: str | Path, text: str) -> Path:
        """Write `text` atomically, creating parent directories."""
        path = self.path(relative)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Wrote %s", path)
        return path


def slugify(text: str) -> str:
    """Lowercase `text` and turn it into a hyphen-separated URL slug."""
    slug = text.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")
