"""Command line interface for kwx."""

import logging
import sys
from pathlib import Path

import click

from .config import load_kwx_config
from .extractor import KeywordExtractor
from .output import format_output
from .tokenizer import Tokenizer, generate_search_strings
from .vocabulary import filter_thesaurus, load_contextual, load_thesaurus


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """kwx - fuzzy thesaurus keyword extraction."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("content_path", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--thesaurus", "-t",
    type=click.Path(exists=True, path_type=Path),
    help="Thesaurus file (CSV/TSV with label,uri[,topic] header, or JSON)"
)
@click.option("--atx", type=click.Path(exists=True, path_type=Path), help="Acronym/topic vocabulary")
@click.option("--country", type=click.Path(exists=True, path_type=Path), help="Geographic name vocabulary")
@click.option("--euroscivoc", type=click.Path(exists=True, path_type=Path), help="Topic cross-reference vocabulary")
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="YAML config file (default: config/kwx.yaml)"
)
@click.option("--max-n", type=int, default=None, help="Largest n-gram window (default: from config, 4)")
@click.option("--detailed", "-d", is_flag=True, help="Report keywords per line")
@click.option(
    "--format", "-f",
    type=click.Choice(["json", "csv"]),
    default="json",
    help="Output format (default: json)"
)
@click.option(
    "-o", "--output",
    type=click.Path(path_type=Path),
    help="Output file path (default: stdout)"
)
@click.option("--progress", "-p", is_flag=True, help="Show progress bar during extraction")
def extract(
    content_path: Path,
    thesaurus: Path | None,
    atx: Path | None,
    country: Path | None,
    euroscivoc: Path | None,
    config_path: Path | None,
    max_n: int | None,
    detailed: bool,
    format: str,
    output: Path | None,
    progress: bool,
):
    """
    Extract thesaurus keywords from a text file.

    CONTENT_PATH is the path to a newline-delimited text file.
    """
    try:
        config = load_kwx_config(config_path)
        vocab = config.vocabularies

        thesaurus = thesaurus or vocab.thesaurus
        if not thesaurus:
            click.echo("Error: a thesaurus is required (--thesaurus or config)", err=True)
            sys.exit(1)

        tokenizer = Tokenizer(config.extraction.extract_exceptions, config.extraction.language)
        keywords = filter_thesaurus(
            load_thesaurus(thesaurus, tokenizer),
            max_length=config.extraction.max_length,
            ignore=vocab.ignore,
        )

        atx = atx or vocab.atx
        country = country or vocab.country
        euroscivoc = euroscivoc or vocab.euroscivoc

        content = content_path.read_text(encoding="utf-8")

        progress_bar = None
        if progress:
            progress_bar = click.progressbar(
                length=100,
                label="Extracting",
                file=sys.stderr,
            )
            progress_bar.__enter__()

        def progress_callback(counter, total, percent):
            if progress_bar:
                progress_bar.update(percent - progress_bar.pos)

        overrides = {}
        if max_n is not None:
            overrides["max_n"] = max_n

        options = config.to_options(
            keywords,
            atx=load_contextual(atx) if atx else None,
            country=load_contextual(country) if country else None,
            euroscivoc=load_contextual(euroscivoc) if euroscivoc else None,
            detailed_output=detailed,
            progress_function=progress_callback if progress else None,
            **overrides,
        )

        result = KeywordExtractor(tokenizer).extract(content, options)

        if progress_bar:
            progress_bar.__exit__(None, None, None)

        if output:
            format_output(result, output, format=format)
            click.echo(
                f"Found {result.keyword_count} keywords in {result.elapsed:.2f}s, written to {output}",
                err=True,
            )
        else:
            format_output(result, sys.stdout, format=format)
            if format == "json":
                click.echo()

    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("text")
@click.option("--max-n", type=int, default=4, help="Largest n-gram window (default: 4)")
@click.option("--language", default="english", help="Stopword profile (default: english)")
@click.option("--thesaurus-mode", is_flag=True, help="Tokenize as a thesaurus label")
def tokenize(text: str, max_n: int, language: str, thesaurus_mode: bool):
    """Show the tokens and search strings generated for TEXT."""
    try:
        tokens = Tokenizer(language=language).tokenize(text, thesaurus=thesaurus_mode)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Tokens: {' '.join(tokens)}")
    click.echo("Search strings:")
    for s in generate_search_strings(tokens, max_n):
        click.echo(f"  {s}")


@main.command()
@click.option(
    "--host",
    default="127.0.0.1",
    help="Host to bind to (default: 127.0.0.1)"
)
@click.option(
    "--port",
    default=8000,
    type=int,
    help="Port to bind to (default: 8000)"
)
@click.option(
    "--reload",
    is_flag=True,
    help="Enable auto-reload for development"
)
def serve(host: str, port: int, reload: bool):
    """Start the FastAPI REST server."""
    import uvicorn

    click.echo(f"Starting kwx API server at http://{host}:{port}")
    click.echo("API docs available at /docs")

    uvicorn.run(
        "kwx.api:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    main()
