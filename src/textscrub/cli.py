"""Command line interface for textscrub."""

import logging
import random
import sys
from dataclasses import replace
from pathlib import Path

import click
import yaml

from .config import MarkupConfig, load_config
from .dictionary import DictionaryStore, available_variants
from .engine import TextSanitizer
from .errors import DictionaryLoadError, TextScrubError


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group()
@click.version_option(version="0.1.0")
def main():
    """Textscrub - replace flagged words and report text statistics."""
    pass


@main.command()
@click.argument("input_path", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file path (default: stdout)"
)
@click.option(
    "--variant",
    type=str,
    default=None,
    help="Dictionary variant: default or buzzwords (default: from config)"
)
@click.option(
    "--dictionary", "dictionary_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Load replacements from this JSON word list instead of a variant"
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML configuration file"
)
@click.option(
    "--plain",
    is_flag=True,
    help="Do not wrap replacements in markup"
)
@click.option(
    "--stats",
    is_flag=True,
    help="Print text statistics to stderr"
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for replacement selection (reproducible output)"
)
@click.option(
    "--progress", "-p",
    is_flag=True,
    help="Show progress bar during processing"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable debug logging"
)
def scrub(
    input_path: Path | None,
    output: Path | None,
    variant: str | None,
    dictionary_path: Path | None,
    config_path: Path | None,
    plain: bool,
    stats: bool,
    seed: int | None,
    progress: bool,
    verbose: bool,
):
    """
    Replace flagged words in a text file.

    INPUT_PATH is the text file to process (default: stdin).
    """
    _setup_logging(verbose)

    try:
        config = load_config(config_path)
        if plain:
            config = replace(config, markup=MarkupConfig(open_tag="", close_tag=""))

        store = DictionaryStore(config.dictionary.data_dir)
        if dictionary_path:
            store.load_path(dictionary_path)
        else:
            store.load(variant or config.dictionary.variant)

        rng = random.Random(seed) if seed is not None else None
        sanitizer = TextSanitizer(store, config=config, rng=rng)

        if input_path:
            text = input_path.read_text(encoding="utf-8")
        else:
            text = click.get_text_stream("stdin").read()

        if progress:
            with click.progressbar(length=100, label="Scrubbing", file=sys.stderr) as bar:
                done = 0

                def progress_callback(fraction: float):
                    nonlocal done
                    step = int(fraction * 100) - done
                    if step > 0:
                        bar.update(step)
                        done += step

                processed, statistics = sanitizer.process(text, on_progress=progress_callback)
        else:
            processed, statistics = sanitizer.process(text)

        if output:
            output.write_text(processed, encoding="utf-8")
            click.echo(
                f"Replaced {statistics.replaced_words_count} of {statistics.total_words} words, "
                f"wrote {output}",
                err=True,
            )
        else:
            click.echo(processed, nl=False)

        if stats:
            click.echo("", err=True)
            click.echo(f"Dictionary: {store.active_variant} ({len(store)} words)", err=True)
            click.echo(statistics.summary(), err=True)

    except (TextScrubError, OSError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML configuration file"
)
def variants(config_path: Path | None):
    """List dictionary variants and their sizes."""
    try:
        config = load_config(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    store = DictionaryStore(config.dictionary.data_dir)

    click.echo("Dictionary variants:")
    click.echo("-" * 40)
    for name in available_variants():
        try:
            store.load(name)
            click.echo(f"{name:<12} {len(store):>6} words")
        except DictionaryLoadError as e:
            click.echo(f"{name:<12} UNAVAILABLE ({e})")


if __name__ == "__main__":
    main()
