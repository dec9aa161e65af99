"""Error types raised by NPCForge."""

from typing import Any, Optional


class NPCForgeError(Exception):
    """Base class for all NPCForge errors."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConstraintValidationError(NPCForgeError):
    """Invalid combination of user constraints. Aborts the whole run."""

    kind = "validation"


class ModelConnectionError(NPCForgeError, ConnectionError):
    """The model service could not be reached."""

    kind = "connection"

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class TransportParseError(NPCForgeError):
    """The response envelope was not JSON or had no ``response`` text field."""

    kind = "transport"

    def __init__(self, message: str, excerpt: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.excerpt = excerpt
        self.status_code = status_code


class SchemaParseError(NPCForgeError):
    """The model output did not match the character schema."""

    kind = "schema"

    def __init__(
        self,
        message: str,
        excerpt: str,
        errors: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.excerpt = excerpt
        self.errors = errors or []


class FileWriteError(NPCForgeError):
    """A generated character could not be written to disk."""

    kind = "file"

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path
