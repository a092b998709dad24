"""Exceptions raised by the blog-builder pipeline."""

from __future__ import annotations

from typing import Any, Optional


class BlogBuilderError(Exception):
    """Base exception carrying a human-readable message and optional details."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigError(BlogBuilderError):
    """Raised when configuration is missing or invalid."""


class FetchError(BlogBuilderError):
    """Raised when a page cannot be fetched after retries."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(
            f"Failed to fetch {url}: {message}",
            details={"url": url, "status_code": status_code},
        )


class MissingArtifactError(BlogBuilderError):
    """Raised when a stage needs the output of an earlier stage that has not run."""

    def __init__(self, artifact: str, command: str):
        self.artifact = artifact
        self.command = command
        super().__init__(
            f"{artifact} not found. Run `blog-builder {command}` first.",
            details={"artifact": artifact, "command": command},
        )


class CorruptArtifactError(BlogBuilderError):
    """Raised when a stored artifact is not valid JSON."""

    def __init__(self, artifact: str, reason: str):
        self.artifact = artifact
        super().__init__(
            f"{artifact} is not valid JSON ({reason}). Re-run the stage that writes it.",
            details={"artifact": artifact},
        )


class GenerationError(BlogBuilderError):
    """Raised when the LLM returns no usable text."""


class JsonParseError(BlogBuilderError):
    """Raised when an LLM response cannot be parsed as JSON."""

    def __init__(self, preview: str):
        self.preview = preview
        super().__init__(
            f"Failed to parse LLM response as JSON: {preview}...",
            details={"preview": preview},
        )


class ValidationError(BlogBuilderError):
    """Raised when a record holds a value outside its allowed set."""


class InvalidStatusTransition(ValidationError):
    """Raised when a brief status would move backwards."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot move brief status from {current} to {target}",
            details={"current": current, "target": target},
        )
