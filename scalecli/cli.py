"""ScaleCLI entry point."""

import logging

import click

from scalecli import __version__
from scalecli.notes import InvalidNoteError, Note, parse_note

logger = logging.getLogger(__name__)


class NoteParamType(click.ParamType):
    """Click parameter type that converts option values into Note objects."""

    name = "note"

    def convert(
        self,
        value: str | Note,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Note:
        if isinstance(value, Note):
            return value
        try:
            return parse_note(value)
        except InvalidNoteError as exc:
            self.fail(str(exc), param, ctx)


NOTE = NoteParamType()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("scalecli").setLevel(level)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="scalecli")
@click.option(
    "--scale",
    "-s",
    type=NOTE,
    required=True,
    metavar="NOTE",
    help="The original scale to convert, e.g. 'A', 'F#' or 'Bb3'.",
)
@click.option(
    "--key",
    "-k",
    type=NOTE,
    default=None,
    metavar="NOTE",
    help="Transpose the scale to this key.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(scale: Note, key: Note | None, verbose: bool) -> None:
    """
    Converting scales and generating chords.

    Note names are a letter A-G, an optional '#' or 'b', and an optional
    register such as 4 or -1. Enharmonic spellings are shown normalized
    (E# is printed as F, Cb as B).

    \b
    Examples:
      scalecli --scale C
      scalecli -s A#4 -k Bb
    """
    _configure_logging(verbose)
    logger.debug("scale=%r key=%r", scale, key)

    click.echo(f"scalecli v{__version__}")
    click.echo(f"  Scale : {scale}")
    click.echo(f"  Key   : {key if key is not None else '-'}")
