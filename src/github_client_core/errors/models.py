"""Models for the API's structured error body.

GitHub reports failures as::

    {
      "message": "Validation Failed",
      "errors": [{"resource": "Label", "field": "name", "code": "already_exists"}],
      "documentation_url": "https://docs.github.com/rest"
    }
"""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True)
class FieldError:
    """A single entry of the ``errors`` array."""

    resource: str
    code: str
    field: str | None = None
    message: str | None = None
    documentation_url: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "FieldError":
        return cls(
            resource=data["resource"],
            code=data["code"],
            field=data.get("field"),
            message=data.get("message"),
            documentation_url=data.get("documentation_url"),
        )


@dataclass(frozen=True)
class ClientError:
    """Structured error body returned with non-2xx responses."""

    message: str
    errors: list[FieldError] | None = None
    documentation_url: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> "ClientError":
        """Build from decoded JSON.

        Raises:
            KeyError, TypeError: If ``data`` does not have the error shape.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")

        message = data["message"]
        if not isinstance(message, str):
            raise TypeError("'message' must be a string")

        errors = data.get("errors")
        return cls(
            message=message,
            errors=[FieldError.from_json(e) for e in errors] if errors is not None else None,
            documentation_url=data.get("documentation_url"),
        )

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ClientError | None":
        """Parse the error body of an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ClientError or None if the body is empty or not the error shape
        """
        if not response.content:
            return None
        try:
            return cls.from_json(response.json())
        except (ValueError, TypeError, KeyError):
            return None

    @classmethod
    def synthesize(cls, response: httpx.Response) -> "ClientError":
        """Build a best-effort error from the status line of an unparseable response."""
        reason = response.reason_phrase
        message = f"HTTP {response.status_code} {reason}" if reason else f"HTTP {response.status_code}"
        return cls(message=message)

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        lines = [self.message]

        for error in self.errors or []:
            target = f"{error.resource}.{error.field}" if error.field else error.resource
            detail = f"  - {target}: {error.code}"
            if error.message:
                detail += f" ({error.message})"
            lines.append(detail)

        if self.documentation_url:
            lines.append(f"Documentation: {self.documentation_url}")

        return "\n".join(lines)
