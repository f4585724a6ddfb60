"""HTTP transport repository."""

import httpx


class HttpConnectionError(Exception):
    """Raised when the target server cannot be reached."""

    def __init__(self, url: str, original_error: Exception | None = None):
        self.url = url
        self.original_error = original_error
        message = f"""Cannot connect to {url}

Possible causes:
  • the server is not running
  • the host name or port is wrong
  • a proxy or firewall is blocking the connection"""
        if original_error is not None:
            message += f"\n\nDetails: {original_error}"
        super().__init__(message)


class HttpRepository:
    """Repository for building and sending requests."""

    def __init__(self, timeout: float = 10.0, transport: httpx.BaseTransport | None = None):
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HttpRepository":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def build_request(
        self,
        method: str,
        url: str,
        headers: list[tuple[str, str]] | None = None,
        body: bytes | None = None,
    ) -> httpx.Request:
        """Build a request without sending it.

        Args:
            method: HTTP method
            url: Target URL
            headers: Extra headers, in order
            body: Raw request body

        Returns:
            The prepared request
        """
        return self._client.build_request(method.upper(), url, headers=headers, content=body)

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request, leaving the response body unread.

        The caller must close the returned response.

        Args:
            request: The request to send

        Returns:
            The response, with its body still streaming
        """
        try:
            return self._client.send(request, stream=True)
        except httpx.ConnectError as e:
            raise HttpConnectionError(str(request.url), e) from e
