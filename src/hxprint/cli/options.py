"""Reusable CLI option definitions."""

from pathlib import Path
from typing import Annotated

import typer

from hxprint.models.output import Pretty, Theme

RequestArgs = Annotated[
    list[str],
    typer.Argument(
        help="[METHOD] URL [Name:Value ...]",
        show_default=False,
    ),
]

# Request options
RawOption = Annotated[
    str | None,
    typer.Option(
        "--raw",
        help="Send TEXT as the raw request body",
    ),
]

OfflineOption = Annotated[
    bool,
    typer.Option(
        "--offline",
        help="Print the request without sending it",
    ),
]

TimeoutOption = Annotated[
    float | None,
    typer.Option(
        "--timeout",
        help="Seconds to wait for the server",
        envvar="HXPRINT_TIMEOUT",
    ),
]

# Output options
PrettyOption = Annotated[
    Pretty | None,
    typer.Option(
        "--pretty",
        help="Formatting and coloring (default: all on a terminal, none otherwise)",
        case_sensitive=False,
    ),
]

StyleOption = Annotated[
    Theme | None,
    typer.Option(
        "--style",
        help="Syntax highlighting theme",
        case_sensitive=False,
    ),
]

StreamOption = Annotated[
    bool,
    typer.Option(
        "--stream",
        "-S",
        help="Print the response body as it arrives",
    ),
]

OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write output (or the downloaded body) to FILE",
    ),
]

DownloadOption = Annotated[
    bool,
    typer.Option(
        "--download",
        "-d",
        help="Save the response body to a file instead of printing it",
    ),
]

PrintOption = Annotated[
    str | None,
    typer.Option(
        "--print",
        "-p",
        help="Parts to print: H request headers, B request body, h response headers, b response body",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Print the request as well as the response",
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Enable debug logging to stderr",
    ),
]
