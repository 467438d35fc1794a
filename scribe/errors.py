"""Error taxonomy for Scribe.

Every error names the resource it concerns (a file path or a route) so that
the CLI can report it without further context.
"""

from __future__ import annotations

from pathlib import Path


class ScribeError(Exception):
    """Base class for all Scribe errors."""


class ConfigError(ScribeError):
    """Site metadata is missing required fields or is malformed.

    Attributes:
        path: Config file the error came from, if any.
        message: Human-readable error message.
    """

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)


class ContentLoadError(ScribeError):
    """A content file could not be parsed or lacks a required field.

    Attributes:
        source_path: Path to the offending content file.
        message: Human-readable error message.
    """

    def __init__(self, source_path: Path, message: str):
        self.source_path = source_path
        self.message = message
        super().__init__(f"{source_path}: {message}")


class RouteCollisionError(ScribeError):
    """Two documents resolve to the same route.

    Attributes:
        route: The contested route.
        first: Source of the document that claimed the route first.
        second: Source of the colliding document, or a description of the
            built-in page reserving the route.
    """

    def __init__(self, route: str, first: Path, second: Path | str):
        self.route = route
        self.first = first
        self.second = second
        super().__init__(f"Route {route} is produced by both {first} and {second}")


class WriteError(ScribeError):
    """The output target rejected a write.

    Attributes:
        route: Route of the page that failed to write.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        route: str,
        message: str,
        original_error: Exception | None = None,
    ):
        self.route = route
        self.message = message
        self.original_error = original_error
        super().__init__(f"{route}: {message}")
