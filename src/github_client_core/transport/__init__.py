"""Transport layer components.

The client core treats the HTTP transport as an external collaborator: any
``httpx.AsyncBaseTransport`` works, including ``httpx.MockTransport`` in tests.
Transports here wrap another transport to add cross-cutting behaviour.

Modules:
    logging_transport: Request/response logging with credential redaction

Example:
    ```python
    from github_client_core.transport import LoggingTransport

    transport = LoggingTransport(wrapped_transport=httpx.AsyncHTTPTransport())
    ```
"""

from github_client_core.transport.logging_transport import LoggingTransport, redact_headers

__all__ = ["LoggingTransport", "redact_headers"]
