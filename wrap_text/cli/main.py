#!/usr/bin/env python3

"""Command-line interface for paragraph wrapping.

Reads text from direct input, a file, or stdin and prints (or saves) it
wrapped, filled, shortened, dedented or indented.

Examples:
    Fill a file to 60 columns:
        $ wrap-text fill -i notes.txt -w 60

    Wrap inline text with a hanging indent:
        $ wrap-text wrap -t "Some long text" --subsequent-indent "    "

    Shorten piped text to one line:
        $ echo "Hello   world!" | wrap-text shorten -w 11
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

import click
from halo import Halo

from wrap_text.cli.io import read_input_source, split_paragraphs, write_output
from wrap_text.core.exceptions import WrapTextError
from wrap_text.core.options import (
    DEFAULT_PLACEHOLDER,
    DEFAULT_WIDTH,
    ShortenOptions,
    WrapOptions,
)
from wrap_text.core.wrapper import TextWrapper, shorten
from wrap_text.utils.margins import dedent, indent

# Define custom context settings
CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

_WRAP_OPTION_NAMES = (
    "initial_indent",
    "subsequent_indent",
    "expand_tabs",
    "tabsize",
    "replace_whitespace",
    "fix_sentence_endings",
    "break_long_words",
    "break_on_hyphens",
    "drop_whitespace",
    "placeholder",
)


def _input_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared input/output options to a command."""
    decorators = [
        click.option(
            "--text",
            "-t",
            type=str,
            help="Text to format. Use this for direct text input.",
            metavar="<text>",
        ),
        click.option(
            "--input",
            "-i",
            "input_path",
            type=click.Path(exists=True, dir_okay=False),
            help="Path to input file containing text to format.",
            metavar="<file>",
        ),
        click.option(
            "--output",
            "-o",
            type=click.Path(writable=True, dir_okay=False),
            help="Path to output file. Prints to stdout when omitted.",
            metavar="<file>",
        ),
        click.option(
            "--verbose",
            "-v",
            is_flag=True,
            help="Log wrapping decisions and print a summary to stderr.",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _wrap_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the wrapping toggles shared by wrap, fill and shorten."""
    decorators = [
        click.option(
            "--width",
            "-w",
            type=int,
            default=DEFAULT_WIDTH,
            show_default=True,
            help="Maximum line width, indents included.",
        ),
        click.option(
            "--initial-indent",
            type=str,
            default="",
            help="Prefix for the first line.",
        ),
        click.option(
            "--subsequent-indent",
            type=str,
            default="",
            help="Prefix for every later line.",
        ),
        click.option("--tabsize", type=int, default=8, show_default=True, help="Tab stop width."),
        click.option(
            "--expand-tabs/--no-expand-tabs",
            default=True,
            show_default=True,
            help="Expand tabs before wrapping.",
        ),
        click.option(
            "--replace-whitespace/--no-replace-whitespace",
            default=True,
            show_default=True,
            help="Turn every whitespace character into a space.",
        ),
        click.option(
            "--fix-sentence-endings",
            is_flag=True,
            help="Put two spaces after sentence-ending punctuation.",
        ),
        click.option(
            "--break-long-words/--no-break-long-words",
            default=True,
            show_default=True,
            help="Split words longer than the width.",
        ),
        click.option(
            "--break-on-hyphens/--no-break-on-hyphens",
            default=True,
            show_default=True,
            help="Prefer breaking compound words after hyphens.",
        ),
        click.option(
            "--placeholder",
            type=str,
            default=DEFAULT_PLACEHOLDER,
            show_default=True,
            help="Marker appended when truncating.",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


_drop_whitespace_option = click.option(
    "--drop-whitespace/--no-drop-whitespace",
    default=True,
    show_default=True,
    help="Drop whitespace at line starts and ends.",
)


def _collect_options(params: dict[str, Any]) -> dict[str, Any]:
    """Return the wrapping toggles found in a command's parameters."""
    return {name: params[name] for name in _WRAP_OPTION_NAMES if name in params}


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.WARNING, format="%(name)s: %(message)s")
        logging.getLogger("wrap_text").setLevel(logging.DEBUG)


def _run(
    *,
    text: str | None,
    input_path: str | None,
    output: str | None,
    verbose: bool,
    transform: Callable[[str], str],
    label: str,
) -> None:
    """Read input, apply ``transform`` and emit the result.

    Args:
        text: Inline text from ``--text``.
        input_path: Input file from ``--input``.
        output: Optional output path. The result goes to stdout without it.
        verbose: Whether to log details and print a summary.
        transform: Callable producing the formatted text.
        label: Human-readable action name used in spinner messages.
    """
    _configure_logging(verbose)

    try:
        input_text = read_input_source(text=text, input_path=input_path)
    except (OSError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # The spinner writes to stdout, so only run it when the result goes to a file.
    spinner = None
    if output is not None and not verbose:
        spinner = Halo(text=f"{label} text", spinner="dots")
        spinner.start()

    try:
        result = transform(input_text)
    except (WrapTextError, ValueError, TypeError) as exc:
        if spinner:
            spinner.fail(f"{label} failed")
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    else:
        if spinner:
            spinner.succeed(f"{label} completed")

    if verbose:
        line_count = len(result.splitlines())
        click.echo(
            f"[{label}: {len(input_text)} characters in, {line_count} lines out]",
            err=True,
        )

    if output is None:
        click.echo(result)
        return

    try:
        out_path = write_output(text=result, output=output)
    except OSError as exc:  # pragma: no cover
        click.echo(f"Error writing output: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Formatted text saved to {out_path}")


@click.group(context_settings=CONTEXT_SETTINGS)
def main() -> None:
    r"""Wrap, fill, shorten and re-indent plain text.

    \b
    Input Sources (in order of precedence):
    1. --text: Direct text input
    2. --input: Text file
    3. stdin: Piped input
    """


@main.command("wrap")
@_input_options
@_wrap_options
@_drop_whitespace_option
@click.option("--max-lines", type=click.IntRange(min=1), help="Truncate after this many lines.")
def wrap_cmd(
    *,
    text: str | None,
    input_path: str | None,
    output: str | None,
    verbose: bool,
    width: int,
    max_lines: int | None,
    **toggles: Any,
) -> None:
    """Wrap a single paragraph and print one output line per line."""
    options = WrapOptions.from_mapping({**_collect_options(toggles), "max_lines": max_lines})
    wrapper = TextWrapper(width, options)
    _run(
        text=text,
        input_path=input_path,
        output=output,
        verbose=verbose,
        transform=lambda source: "\n".join(wrapper.wrap(source)),
        label="Wrapping",
    )


@main.command("fill")
@_input_options
@_wrap_options
@_drop_whitespace_option
@click.option("--max-lines", type=click.IntRange(min=1), help="Truncate each paragraph.")
@click.option(
    "--paragraphs/--single-paragraph",
    default=True,
    show_default=True,
    help="Fill each blank-line separated paragraph on its own.",
)
def fill_cmd(
    *,
    text: str | None,
    input_path: str | None,
    output: str | None,
    verbose: bool,
    width: int,
    max_lines: int | None,
    paragraphs: bool,
    **toggles: Any,
) -> None:
    """Fill text, keeping blank lines between paragraphs."""
    options = WrapOptions.from_mapping({**_collect_options(toggles), "max_lines": max_lines})
    wrapper = TextWrapper(width, options)

    def _fill(source: str) -> str:
        if not paragraphs:
            return wrapper.fill(source)
        return "\n\n".join(wrapper.fill(para) for para in split_paragraphs(source))

    _run(
        text=text,
        input_path=input_path,
        output=output,
        verbose=verbose,
        transform=_fill,
        label="Filling",
    )


@main.command("shorten")
@_input_options
@_wrap_options
def shorten_cmd(
    *,
    text: str | None,
    input_path: str | None,
    output: str | None,
    verbose: bool,
    width: int,
    **toggles: Any,
) -> None:
    """Collapse whitespace and truncate the text to a single line."""
    options = ShortenOptions(**_collect_options(toggles))
    _run(
        text=text,
        input_path=input_path,
        output=output,
        verbose=verbose,
        transform=lambda source: shorten(source, width, options),
        label="Shortening",
    )


@main.command("dedent")
@_input_options
def dedent_cmd(
    *,
    text: str | None,
    input_path: str | None,
    output: str | None,
    verbose: bool,
) -> None:
    """Remove whitespace common to the start of every line."""
    _run(
        text=text,
        input_path=input_path,
        output=output,
        verbose=verbose,
        transform=dedent,
        label="Dedenting",
    )


@main.command("indent")
@_input_options
@click.option("--prefix", "-p", required=True, help="String added to the start of lines.")
@click.option(
    "--all-lines",
    is_flag=True,
    help="Also prefix lines that are empty or whitespace only.",
)
def indent_cmd(
    *,
    text: str | None,
    input_path: str | None,
    output: str | None,
    verbose: bool,
    prefix: str,
    all_lines: bool,
) -> None:
    """Add a prefix to the start of every non-blank line."""
    predicate = (lambda _line: True) if all_lines else None
    _run(
        text=text,
        input_path=input_path,
        output=output,
        verbose=verbose,
        transform=lambda source: indent(source, prefix, predicate),
        label="Indenting",
    )


if __name__ == "__main__":
    main()
