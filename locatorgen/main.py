"""locatorgen command line entrypoint."""

from __future__ import annotations

import click
import structlog

from locatorgen.config.logging import setup_logging
from locatorgen.config.settings import get_settings
from locatorgen.exceptions import InvalidSelectorError
from locatorgen.locator import as_locator
from locatorgen.types import Language

logger = structlog.get_logger(__name__)


@click.command()
@click.argument("selectors", nargs=-1, required=True)
@click.option(
    "--lang",
    "-l",
    type=click.Choice([lang.value for lang in Language]),
    default=lambda: get_settings().default_language.value,
    help="Target language (defaults to LOCATORGEN_DEFAULT_LANGUAGE)",
)
@click.option("--all-languages", is_flag=True, help="Print the locator for every language")
@click.option("--frame", is_flag=True, help="Selectors start inside a frame locator")
@click.option(
    "--tolerant/--strict",
    default=lambda: get_settings().tolerant,
    help="Echo selectors that cannot be translated instead of failing",
)
def cli(
    selectors: tuple[str, ...],
    lang: str,
    all_languages: bool,
    frame: bool,
    tolerant: bool,
) -> None:
    """Print the locator code for each SELECTOR."""
    settings = get_settings()
    setup_logging(log_level=settings.log_level, json_output=settings.json_logs)

    languages = list(Language) if all_languages else [Language(lang)]
    for selector in selectors:
        for language in languages:
            try:
                locator = as_locator(language, selector, is_frame_locator=frame, tolerant=tolerant)
            except InvalidSelectorError as e:
                logger.warning("locator_failed", language=language.value, selector=selector)
                raise click.ClickException(str(e)) from e
            if all_languages:
                click.echo(f"{language.value}: {locator}")
            else:
                click.echo(locator)


if __name__ == "__main__":
    cli()
