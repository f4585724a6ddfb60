"""Main Typer application."""

import typer

from hxprint.cli.commands import send_request

app = typer.Typer(
    name="hxprint",
    help="Send HTTP requests and print readable, colorized exchanges.",
    no_args_is_help=True,
    add_completion=False,
)

# A single command, so it runs without a subcommand name
app.command(help="Send an HTTP request and print the exchange")(send_request)


if __name__ == "__main__":
    app()
