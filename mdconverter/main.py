from __future__ import annotations

import argparse
import asyncio
import functools
import logging
import sys
from dataclasses import dataclass

from mdconverter.config import AppConfig, ConfigError, load_config, load_theme, save_theme
from mdconverter.file_handler import FileHandler
from mdconverter.log_setup import setup_logging
from mdconverter.parsing import convert
from mdconverter.rendering import to_html

logger = logging.getLogger(__name__)

STDIN = "-"

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


@dataclass
class Conversion:
    """Outcome of converting one input."""

    source: str
    document: str = ""
    output_path: str | None = None
    error: str | None = None


def resolve_theme(args: argparse.Namespace, config: AppConfig) -> str:
    """Pick the effective theme: command line, then config, then stored preference."""
    if args.dark:
        return "dark"
    if args.light:
        return "light"
    if config.theme:
        return config.theme
    return load_theme(config.theme_path)


def render_document(text: str, *, is_markdown: bool, html: bool, is_dark: bool) -> str:
    """Turn raw input text into the final document.

    Markdown inputs skip the terminal classifier and are only rendered.
    """
    document = text if is_markdown else convert(text)
    if html:
        return to_html(document, is_dark=is_dark)
    return document


def _convert_one(
    source: str,
    file_handler: FileHandler,
    *,
    html: bool,
    is_dark: bool,
    to_stdout: bool,
) -> Conversion:
    """Read, convert and (unless writing to stdout) save one input file."""
    result = Conversion(source=source)
    try:
        text = file_handler.read_text(source)
        result.document = render_document(
            text,
            is_markdown=file_handler.is_markdown(source),
            html=html,
            is_dark=is_dark,
        )
        if not to_stdout:
            path = file_handler.output_path_for(source, ".html" if html else ".md")
            file_handler.write_text(path, result.document + "\n")
            result.output_path = path
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to convert %s: %s", source, exc)
        result.error = str(exc)
    return result


def _convert_stdin(output_dir: str | None, *, html: bool, is_dark: bool, to_stdout: bool) -> int:
    """Convert stdin, writing to stdout or to a timestamp-named file in ``output_dir``."""
    document = render_document(sys.stdin.read(), is_markdown=False, html=html, is_dark=is_dark)
    if not output_dir or to_stdout:
        sys.stdout.write(document + "\n")
        return EXIT_OK

    file_handler = FileHandler(output_dir)
    try:
        path = file_handler.output_path_for(None, ".html" if html else ".md")
        file_handler.write_text(path, document + "\n")
    except OSError as exc:
        logger.error("Failed to write stdin conversion to %s: %s", output_dir, exc)
        return EXIT_FAILED
    logger.info("stdin -> %s", path)
    return EXIT_OK


async def convert_files(
    sources: list[str],
    file_handler: FileHandler,
    *,
    html: bool,
    is_dark: bool,
    to_stdout: bool,
) -> list[Conversion]:
    """Convert several input files concurrently on the default executor.

    Results are returned in the order of ``sources``.
    """
    loop = asyncio.get_running_loop()
    job = functools.partial(
        _convert_one, file_handler=file_handler, html=html, is_dark=is_dark, to_stdout=to_stdout,
    )
    tasks = [loop.run_in_executor(None, job, source) for source in sources]
    return list(await asyncio.gather(*tasks))


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="mdconverter",
        description="Convert terminal output to Markdown or themed HTML",
    )
    parser.add_argument("inputs", nargs="*",
                        help="Text files to convert; '-' or nothing reads stdin")
    parser.add_argument("-c", "--config", default=None,
                        help="Path to YAML config file")
    parser.add_argument("-o", "--output-dir", default=None,
                        help="Directory for converted files (default: next to input;"
                             " stdin is written here under a timestamp name)")
    parser.add_argument("--html", action="store_true",
                        help="Render a self-contained HTML page instead of Markdown")
    theme = parser.add_mutually_exclusive_group()
    theme.add_argument("--dark", action="store_true", help="Use the dark HTML theme")
    theme.add_argument("--light", action="store_true", help="Use the light HTML theme")
    parser.add_argument("--save-theme", action="store_true",
                        help="Remember the effective theme for later runs")
    parser.add_argument("--stdout", action="store_true",
                        help="Print converted files to stdout instead of writing them")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug mode (verbose logging)")
    parser.add_argument("--trace", action="store_true",
                        help="Enable trace mode (writes trace file to debug/)")
    parser.add_argument("--verbose", action="store_true",
                        help="With --trace, also send trace output to terminal")
    args = parser.parse_args(argv)
    if STDIN in args.inputs and len(args.inputs) > 1:
        parser.error("'-' (stdin) cannot be combined with file inputs")
    return args


async def main(argv: list[str] | None = None) -> int:
    """Entry point for the mdconverter command line."""
    args = _parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        setup_logging(debug=args.debug, trace=args.trace, verbose=args.verbose)
        logger.error("%s", exc)
        return EXIT_CONFIG

    root = setup_logging(
        debug=args.debug or config.debug.enabled,
        trace=args.trace or config.debug.trace,
        verbose=args.verbose or config.debug.verbose,
    )

    theme = resolve_theme(args, config)
    if args.save_theme:
        save_theme(theme, config.theme_path)
    html = args.html or config.is_html
    is_dark = theme == "dark"
    root.debug("theme=%s html=%s inputs=%s", theme, html, args.inputs)

    output_dir = args.output_dir or config.output.directory
    if not args.inputs or args.inputs == [STDIN]:
        return _convert_stdin(output_dir, html=html, is_dark=is_dark, to_stdout=args.stdout)

    file_handler = FileHandler(output_dir)
    results = await convert_files(
        args.inputs, file_handler, html=html, is_dark=is_dark, to_stdout=args.stdout,
    )

    for result in results:
        if result.error is not None:
            continue
        if args.stdout:
            sys.stdout.write(result.document + "\n")
        else:
            logger.info("%s -> %s", result.source, result.output_path)

    failed = sum(1 for r in results if r.error is not None)
    if failed:
        logger.error("%d of %d inputs failed", failed, len(results))
        return EXIT_FAILED
    return EXIT_OK


def cli() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
