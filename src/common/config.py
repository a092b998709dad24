"""Configuration loading for blog-builder commands."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import yaml
from dotenv import load_dotenv

from common.errors import ConfigError

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_ARTICLE_COUNT = 10
DEFAULT_RATE_LIMIT_MS = 1000
DEFAULT_MAX_ARTICLES = 20
DEFAULT_TIMEOUT = 30.0


@dataclass
class Config:
    output_dir: Path
    openai_api_key: str
    article_count: int = DEFAULT_ARTICLE_COUNT
    topics: list[str] = field(default_factory=list)
    verbose: bool = False
    rate_limit: float = DEFAULT_RATE_LIMIT_MS / 1000
    model: str = DEFAULT_MODEL
    max_articles: int = DEFAULT_MAX_ARTICLES
    timeout: float = DEFAULT_TIMEOUT


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return data


def _parse_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc


def split_csv(value: str | list[str] | None) -> list[str]:
    """Split a comma-separated string (topics, brief ids) into trimmed, non-empty items."""
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [t.strip() for t in value if t and t.strip()]


def load_config(
    overrides: dict[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> Config:
    """Build a Config from a YAML file, the environment and CLI overrides.

    Later sources win: YAML file, then environment variables, then any
    override whose value is not None.

    Args:
        overrides: Values from the command line, keyed by Config field name.
        config_path: Optional YAML file; falls back to BLOG_BUILDER_CONFIG.

    Raises:
        ConfigError: If the API key is missing or a value is malformed.
    """
    load_dotenv()

    values: dict[str, Any] = {}

    config_path = config_path or os.environ.get("BLOG_BUILDER_CONFIG")
    if config_path:
        file_values = load_yaml(Path(config_path).expanduser())
        known = {f.name for f in fields(Config)}
        unknown = sorted(set(file_values) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        values.update(file_values)

    env = os.environ
    if env.get("OPENAI_API_KEY"):
        values["openai_api_key"] = env["OPENAI_API_KEY"]
    if env.get("BLOG_BUILDER_OUTPUT"):
        values["output_dir"] = env["BLOG_BUILDER_OUTPUT"]
    if env.get("BLOG_BUILDER_ARTICLE_COUNT"):
        values["article_count"] = env["BLOG_BUILDER_ARTICLE_COUNT"]
    if env.get("BLOG_BUILDER_RATE_LIMIT"):
        values["rate_limit"] = (
            _parse_int(env["BLOG_BUILDER_RATE_LIMIT"], "BLOG_BUILDER_RATE_LIMIT") / 1000
        )
    if env.get("BLOG_BUILDER_MODEL"):
        values["model"] = env["BLOG_BUILDER_MODEL"]

    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value

    if not values.get("openai_api_key"):
        raise ConfigError(
            "OPENAI_API_KEY environment variable is required.\n"
            "Set it with: export OPENAI_API_KEY=sk-..."
        )

    return Config(
        output_dir=Path(values.get("output_dir") or Path.home() / ".blog-builder").expanduser(),
        openai_api_key=values["openai_api_key"],
        article_count=_parse_int(values.get("article_count", DEFAULT_ARTICLE_COUNT), "article_count"),
        topics=split_csv(values.get("topics")),
        verbose=bool(values.get("verbose", False)),
        rate_limit=float(values.get("rate_limit", DEFAULT_RATE_LIMIT_MS / 1000)),
        model=values.get("model") or DEFAULT_MODEL,
        max_articles=_parse_int(values.get("max_articles", DEFAULT_MAX_ARTICLES), "max_articles"),
        timeout=float(values.get("timeout", DEFAULT_TIMEOUT)),
    )


def domain_from_url(url: str) -> str:
    """Return the hostname of `url` with a leading "www." stripped."""
    try:
        hostname = urlsplit(url).hostname
    except ValueError:
        hostname = None
    if not hostname:
        raise ConfigError(f"Invalid URL: {url}")
    return hostname[4:] if hostname.startswith("www.") else hostname


def site_output_dir(config: Config, url: str) -> Path:
    """Directory holding every artifact for the site at `url`."""
    return config.output_dir / domain_from_url(url)
