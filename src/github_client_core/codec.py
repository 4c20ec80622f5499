"""Decoding of response bodies into caller-supplied shapes.

A ``model`` is whatever the call site wants back: a class with a
``from_json`` classmethod, any callable taking the decoded JSON value, or
``None`` for the raw JSON.
"""

from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from github_client_core.errors import CodecError

T = TypeVar("T")

Model = Callable[[Any], T] | type[T] | None


def decode_json(response: httpx.Response) -> Any:
    """Parse the response body as JSON.

    Raises:
        CodecError: If the body is empty or not valid JSON
    """
    if not response.content:
        raise CodecError(
            f"Expected a JSON body, got an empty response (HTTP {response.status_code})",
            status_code=response.status_code,
            response=response,
        )
    try:
        return response.json()
    except ValueError as e:
        raise CodecError(f"Response body is not valid JSON: {e}", status_code=response.status_code, response=response) from e


def decode_model(model: Model, data: Any) -> Any:
    """Convert decoded JSON into ``model``.

    Raises:
        CodecError: If the data does not fit the model's shape
    """
    if model is None:
        return data

    factory = getattr(model, "from_json", model)
    try:
        return factory(data)
    except (KeyError, TypeError, ValueError, AttributeError, IndexError) as e:
        name = getattr(model, "__name__", repr(model))
        raise CodecError(f"Could not decode {name}: {e!r}") from e


def decode_page(response: httpx.Response, model: Model) -> list[Any]:
    """Decode one page of a list endpoint into an ordered list of items.

    A zero-length body counts as an empty page.

    Raises:
        CodecError: If the body is not a JSON array or an element does not fit ``model``
    """
    if not response.content:
        return []

    data = decode_json(response)
    if not isinstance(data, list):
        raise CodecError(
            f"Expected a JSON array for a paginated resource, got {type(data).__name__}",
            status_code=response.status_code,
            response=response,
        )
    return [decode_model(model, item) for item in data]
