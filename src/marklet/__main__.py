"""
The ``marklet`` command compiles a single Markdown file into HTML.

Basic usage
===========

.. code:: text

    $ marklet SOURCE [OUTPUT]

SOURCE may be ``-`` to read standard input. Without OUTPUT the HTML is
written to standard output.

By default the output is the bare HTML fragment. ``--page`` wraps it in a
complete preview document; ``--title`` sets that document's title.

List nesting
============

``--list-indent N`` sets how many leading spaces make one list nesting
level (default 2).
"""

import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

from marklet import Compiler
from marklet.config import DEFAULT_LIST_INDENT_SIZE, CompileConfig
from marklet.errors import MarkdownSyntaxError
from marklet.page import DEFAULT_TITLE, wrap_page
from marklet.utils.logger import ROOT_LOGGER_NAME


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise ValueError(value)
    return number


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(
        prog="marklet",
        description="""
            Compile a Markdown file into an HTML fragment or preview page.
        """,
    )

    parser.add_argument(
        "source",
        metavar="SOURCE",
        help="""
            The Markdown file to compile, or '-' to read standard input.
        """,
    )
    parser.add_argument(
        "output",
        metavar="OUTPUT",
        type=Path,
        nargs="?",
        default=None,
        help="""
            The file to write the HTML to. Defaults to standard output.
        """,
    )
    parser.add_argument(
        "--page",
        "-p",
        action="store_true",
        help="""
            Wrap the compiled fragment in a complete HTML preview document.
        """,
    )
    parser.add_argument(
        "--title",
        "-t",
        default=DEFAULT_TITLE,
        help="""
            Title of the preview document (only used with --page).
        """,
    )
    parser.add_argument(
        "--list-indent",
        type=_positive_int,
        metavar="N",
        default=DEFAULT_LIST_INDENT_SIZE,
        help="""
            Number of leading spaces per list nesting level.
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="""
            Log debugging information to standard error.
        """,
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)

    if args.source == "-":
        source = sys.stdin.read()
        source_file = "<stdin>"
    else:
        try:
            source = Path(args.source).read_text(encoding="utf-8")
        except OSError as e:
            parser.error(f"cannot read {args.source}: {e.strerror}")
        source_file = args.source

    compiler = Compiler(CompileConfig(list_indent_size=args.list_indent))
    try:
        html = compiler(source, source_file=source_file)
    except MarkdownSyntaxError as e:
        sys.stderr.write(f"marklet: error: {e}\n")
        return 1

    if args.page:
        html = wrap_page(html, title=args.title)
    elif not html.endswith("\n"):
        html += "\n"

    if args.output is None:
        sys.stdout.write(html)
    else:
        args.output.write_text(html, encoding="utf-8")

    return 0


if __name__ == "__main__":
    sys.exit(main())
