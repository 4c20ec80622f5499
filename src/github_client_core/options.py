"""Generic option accumulator for list filters and request bodies.

Resource facades describe their recognized options as plain keys instead of
one builder class per resource::

    options = Options().set("state", "open").set("labels", ["bug", "ui"])
    client.paginate("/repos/acme/widgets/issues", params=options.query())
"""

from collections.abc import Iterable
from datetime import date, datetime
from enum import Enum
from typing import Any


class Options:
    """Ordered key/value accumulator; unset (None) values are never serialized."""

    def __init__(self, **values: Any):
        self._values: dict[str, Any] = {}
        self.update(**values)

    def set(self, key: str, value: Any) -> "Options":
        if value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = value
        return self

    def update(self, **values: Any) -> "Options":
        for key, value in values.items():
            self.set(key, value)
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Options):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Options({self._values!r})"

    def query(self) -> dict[str, str]:
        """Serialize for a query string.

        Booleans become ``true``/``false``, sequences are comma-joined and
        dates use ISO-8601, matching what GitHub list endpoints accept.
        """
        return {key: _query_value(value) for key, value in self._values.items()}

    def body(self) -> dict[str, Any]:
        """Serialize for a JSON request body."""
        return {key: _body_value(value) for key, value in self._values.items()}


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, Iterable) and not isinstance(value, str | bytes):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def _body_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, Options):
        return value.body()
    if isinstance(value, list | tuple):
        return [_body_value(v) for v in value]
    if isinstance(value, dict):
        return {k: _body_value(v) for k, v in value.items()}
    return value
