"""Header block formatting."""

from hxprint.models.messages import HeaderList, RequestView, ResponseView

# Host reported instead of the real one when output must be deterministic
TEST_MODE_HOST = "http.mock"


def format_header_value(value: bytes) -> str:
    """Render a raw header value for display.

    Visible ASCII is shown as-is. Anything else is shown as a quoted,
    escaped string so the header is never dropped.

    Args:
        value: The raw header value

    Returns:
        Display string for the value
    """
    if all(32 <= b < 127 or b == 9 for b in value):
        return value.decode("ascii")

    escaped: list[str] = []
    for b in value:
        if b == 34:
            escaped.append('\\"')
        elif 32 <= b < 127 or b == 9:
            escaped.append(chr(b))
        else:
            escaped.append(f"\\x{b:x}")
    return '"' + "".join(escaped) + '"'


def format_headers(headers: HeaderList, sort: bool) -> str:
    """Format headers as ``name: value`` lines.

    Args:
        headers: Header pairs in wire order
        sort: Whether to order by header name

    Returns:
        Newline-joined header lines, without a trailing newline
    """
    if sort:
        # sorted() is stable, so repeated names keep their relative order
        headers = sorted(headers, key=lambda header: header[0].lower())
    return "\n".join(f"{name}: {format_header_value(value)}" for name, value in headers)


def _has_header(headers: HeaderList, name: str) -> bool:
    return any(key.lower() == name.lower() for key, _ in headers)


def complete_request_headers(request: RequestView, test_mode: bool = False) -> HeaderList:
    """Add the headers the client only attaches while sending.

    Content-Length and Host are added when missing; existing headers are
    never overwritten.

    Args:
        request: The request about to be printed
        test_mode: Report a fixed Host instead of the real one

    Returns:
        The request headers, with any missing ones appended
    """
    headers = request.headers

    body = request.body
    if body is not None and not _has_header(headers, "Content-Length"):
        headers.append(("Content-Length", str(len(body)).encode("ascii")))

    if request.url.raw_host and not _has_header(headers, "Host"):
        # netloc is the IDNA-encoded host, with the port only when non-default
        value = TEST_MODE_HOST.encode("ascii") if test_mode else request.url.netloc
        headers.append(("Host", value))

    return headers


def request_line(request: RequestView) -> str:
    """Build the ``METHOD path?query VERSION`` line."""
    target = request.url.raw_path.decode("ascii")
    return f"{request.method} {target} {request.version}"


def status_line(response: ResponseView) -> str:
    """Build the ``VERSION status`` line."""
    return f"{response.version} {response.status}"
