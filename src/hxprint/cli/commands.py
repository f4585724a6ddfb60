"""CLI command definitions."""

import re
import sys
from pathlib import Path
from urllib.parse import urlsplit

import httpx
import typer
from rich.console import Console

from hxprint.cli.options import (
    DebugOption,
    DownloadOption,
    OfflineOption,
    OutputOption,
    PrettyOption,
    PrintOption,
    RawOption,
    RequestArgs,
    StreamOption,
    StyleOption,
    TimeoutOption,
    VerboseOption,
)
from hxprint.models.messages import RequestView, ResponseView
from hxprint.repositories.http import HttpConnectionError, HttpRepository
from hxprint.services.buffer import Buffer
from hxprint.services.printer import Printer
from hxprint.settings import settings

err_console = Console(stderr=True)

METHOD_PATTERN = re.compile(r"^[A-Za-z]+$")
HEADER_ITEM_PATTERN = re.compile(r"^([^:\s]+):(.*)$")
PRINT_PARTS = frozenset("HBhb")
# Added by httpx when the request is built; printed as the client would send them
IMPLICIT_HEADERS = ("Host", "Content-Length")


def _parse_request_args(
    args: list[str],
    has_body: bool = False,
) -> tuple[str, str, list[tuple[str, str]]]:
    """Split positional arguments into method, URL and headers.

    Args:
        args: ``[METHOD] URL [Name:Value ...]``
        has_body: Whether a body was given, which makes POST the default method

    Returns:
        Method, URL and header pairs
    """
    if not args:
        raise ValueError("Missing URL")

    if len(args) > 1 and METHOD_PATTERN.match(args[0]):
        method, url, items = args[0].upper(), args[1], args[2:]
    else:
        method, url, items = ("POST" if has_body else "GET"), args[0], args[1:]

    if "://" not in url:
        url = f"http://{url}"

    headers: list[tuple[str, str]] = []
    for item in items:
        match = HEADER_ITEM_PATTERN.match(item)
        if not match:
            raise ValueError(f"Invalid request item: {item}. Use Name:Value for headers")
        headers.append((match.group(1), match.group(2).strip()))

    return method, url, headers


def _resolve_print(
    print_: str | None,
    verbose: bool,
    offline: bool,
    download: bool,
) -> str:
    """Work out which parts of the exchange to print."""
    if print_ is not None:
        unknown = set(print_) - PRINT_PARTS
        if unknown:
            raise ValueError(f"Invalid --print value: {print_}. Use a combination of HBhb")
        return print_
    if verbose:
        return "HBhb"
    if offline:
        return "HB"
    if download:
        return "h"
    return "hb"


def _filename_from_url(url: str) -> Path:
    """Derive a download file name from the last URL path segment."""
    name = urlsplit(url).path.rstrip("/").rsplit("/", 1)[-1]
    return Path(name or "index")


def _save_body(response: httpx.Response, path: Path) -> int:
    """Stream a response body to a file, returning the bytes written."""
    written = 0
    with open(path, "wb") as f:
        for chunk in response.iter_bytes():
            f.write(chunk)
            written += len(chunk)
    return written


def send_request(
    args: RequestArgs,
    raw: RawOption = None,
    offline: OfflineOption = False,
    timeout: TimeoutOption = None,
    pretty: PrettyOption = None,
    style: StyleOption = None,
    stream: StreamOption = False,
    output: OutputOption = None,
    download: DownloadOption = False,
    print_: PrintOption = None,
    verbose: VerboseOption = False,
    debug: DebugOption = False,
) -> None:
    """Send an HTTP request and print the exchange."""
    debug = debug or settings.debug
    try:
        body = raw.encode("utf-8") if raw is not None else None
        method, url, headers = _parse_request_args(args, has_body=body is not None)
        parts = _resolve_print(print_, verbose, offline, download)

        if debug:
            err_console.print("[dim]\\[DEBUG] Debug mode enabled[/dim]")
            err_console.print(f"[dim]\\[DEBUG] {method} {url}, printing {parts!r}[/dim]")

        buffer = Buffer.new(download, output, sys.stdout.isatty())
        with buffer, HttpRepository(timeout=timeout or settings.timeout) as repo:
            printer = Printer(
                buffer,
                pretty=pretty,
                theme=style or settings.theme,
                stream=stream,
                test_mode=settings.test_mode,
                debug=debug,
            )
            if debug:
                err_console.print(
                    f"[dim]\\[DEBUG] Output to {buffer.kind.value}, "
                    f"color={printer.color}, stream={stream}[/dim]"
                )

            request = repo.build_request(method, url, headers=headers, body=body)
            given = {name.lower() for name, _ in headers}
            implicit = [name for name in IMPLICIT_HEADERS if name.lower() not in given]
            request_view = RequestView(request, implicit=implicit)
            if "H" in parts:
                printer.print_request_headers(request_view)
            if "B" in parts:
                printer.print_request_body(request_view)
            if offline:
                return

            response = repo.send(request)
            try:
                response_view = ResponseView(response)
                if "h" in parts:
                    printer.print_response_headers(response_view)
                if download:
                    path = output or _filename_from_url(url)
                    written = _save_body(response, path)
                    err_console.print(f"Saved {written} bytes to {path}")
                elif "b" in parts:
                    printer.print_response_body(response_view)
            finally:
                response.close()

    except HttpConnectionError as e:
        err_console.print(str(e), markup=False)
        raise typer.Exit(1) from None
    except (ValueError, httpx.InvalidURL, httpx.HTTPError) as e:
        # httpx failures other than a refused connection
        err_console.print(f"Error: {e}", markup=False)
        raise typer.Exit(1) from None
