from __future__ import annotations

import click
import typer
from typer.core import TyperCommand

from hfr.cli.commands.release_cmd import release
from hfr.core.errors import ErrorCode


class ReleaseCommand(TyperCommand):
    """Exits with USER_ERROR on an unparseable command line instead of click's 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = int(ErrorCode.USER_ERROR)
            raise


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command(cls=ReleaseCommand)(release)


def main() -> None:
    app()
