#!/usr/bin/env python3
# Copyright 2022 Jon Seager
# See LICENSE file for licensing details.

"""Render template files against JSON data.

Usage:
    tmpl [-data <json>|-data @<path>] [-v] <path>...

Each <path> is rendered to the same path without its template suffix, e.g.
"server.go.tmpl" is written to "server.go" with the permissions of the template.
"""

import argparse
import logging
import sys

from datasource import DataError, parse_data
from renderer import TEMPLATE_SUFFIXES, RenderError, render_file

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Raised when the command line does not name anything to render."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the tmpl command line."""
    parser = argparse.ArgumentParser(
        prog="tmpl",
        description="Render template files against JSON data.",
        epilog=f"Recognised template suffixes: {' '.join(TEMPLATE_SUFFIXES)}",
    )
    parser.add_argument(
        "-data", "--data", default="", help="template data as JSON, or @path to a data file"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log each rendered file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("paths", nargs="*", metavar="path", help="template files to render")
    return parser


class Main:
    """The tmpl program: a list of template paths and the data to render them with."""

    def __init__(self, stdin=None, stderr=None):
        self.paths = []
        self.data = None
        self.verbose = False

        self.stdin = stdin if stdin is not None else sys.stdin
        self.stderr = stderr if stderr is not None else sys.stderr

    def parse_flags(self, args):
        """Parse command line arguments into paths and decoded data."""
        opts = build_parser().parse_args(args)
        self.paths = list(opts.paths)
        self.verbose = opts.verbose
        self.setup_logging()
        self.data = parse_data(opts.data, stdin=self.stdin)

    def setup_logging(self):
        """Send log output to stderr, at debug level when running verbosely."""
        logging.basicConfig(
            stream=self.stderr,
            level=logging.DEBUG if self.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    def run(self):
        """Render every path in order, stopping at the first failure."""
        if not self.paths:
            raise UsageError("path required")

        for path in self.paths:
            render_file(path, self.data)


def main(args=None, *, stdin=None, stderr=None) -> int:
    """Run tmpl with the given arguments. Returns the exit code."""
    m = Main(stdin=stdin, stderr=stderr)
    try:
        m.parse_flags(sys.argv[1:] if args is None else args)
        m.run()
    except (UsageError, DataError, RenderError) as e:
        logger.debug(e, exc_info=True)
        print(f"tmpl: {e.message}", file=m.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: nocover
    sys.exit(main())
