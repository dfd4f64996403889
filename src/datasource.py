# Copyright 2022 Jon Seager
# See LICENSE file for licensing details.

"""Decode the value of the -data flag into template data."""

import json
import logging
import sys
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class DataError(Exception):
    """Raised when template data cannot be read or decoded."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)


def _decode_json(text: str, source: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DataError(f"invalid json data ({source}): {e}") from e


def _decode_yaml(text: str, source: str):
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DataError(f"invalid yaml data ({source}): {e}") from e


def read_data_file(path: str, stdin=None):
    """Read and decode a data file. A path of "-" reads from stdin."""
    if path == "-":
        stdin = stdin if stdin is not None else sys.stdin
        return _decode_json(stdin.read(), "<stdin>")

    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DataError(f"cannot read data file: {e}") from e

    if path.endswith(YAML_SUFFIXES):
        return _decode_yaml(text, path)
    return _decode_json(text, path)


def parse_data(value, stdin=None):
    """Decode a -data flag value.

    A value starting with "@" names a file holding the data; anything else is
    decoded as inline JSON. An empty value means no data.
    """
    if not value:
        return None
    if value.startswith("@"):
        logger.debug("reading data from %s", value[1:])
        return read_data_file(value[1:], stdin=stdin)
    return _decode_json(value, "-data")
