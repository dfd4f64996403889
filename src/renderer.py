# Copyright 2022 Jon Seager
# See LICENSE file for licensing details.

"""Helpers for rendering template files to their output paths.

A template file is named after the file it produces plus a template suffix, so
``server.go.tmpl`` renders to ``server.go``. Generated source files are given a
comment header naming the template they came from:

```python
from renderer import render_file

render_file("server.go.tmpl", {"name": "bob"})
```
"""

import logging
import os
import stat
from pathlib import Path

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError

logger = logging.getLogger(__name__)

TOOL_NAME = "tmpl"
PROJECT_URL = "https://github.com/benbjohnson/tmpl"

# Longest first, so that ".jinja2" is not mistaken for ".jinja"
TEMPLATE_SUFFIXES = (".jinja2", ".jinja", ".tmpl", ".j2")

COMMENT_PREFIXES = {
    ".go": "//",
    ".c": "//",
    ".h": "//",
    ".cc": "//",
    ".cpp": "//",
    ".hpp": "//",
    ".java": "//",
    ".js": "//",
    ".ts": "//",
    ".rs": "//",
    ".swift": "//",
    ".kt": "//",
    ".py": "#",
    ".sh": "#",
    ".rb": "#",
    ".pl": "#",
}


class RenderError(Exception):
    """Raised when a single template path cannot be rendered."""

    def __init__(self, path, message):
        self.path = str(path)
        self.message = message
        super().__init__(message)


class ReadError(RenderError):
    """Raised when a template file cannot be read."""


class TemplateParseError(RenderError):
    """Raised when a template file is not valid template syntax."""


class TemplateExecError(RenderError):
    """Raised when a template fails while being evaluated against its data."""


class WriteError(RenderError):
    """Raised when rendered output cannot be written."""


def output_path(path) -> str:
    """Return the path a template renders to, by stripping its template suffix."""
    path = str(path)
    for suffix in TEMPLATE_SUFFIXES:
        if path.endswith(suffix) and len(path) > len(suffix):
            return path[: -len(suffix)]
    raise RenderError(path, f"{path}: no template suffix ({', '.join(TEMPLATE_SUFFIXES)})")


class GeneratedHeader:
    """Class representing the comment block placed on top of generated source files."""

    def __init__(self, source, *, comment="//"):
        self._source = str(source)
        self._comment = comment

    @property
    def _lines(self) -> list:
        return [
            f"Generated by {TOOL_NAME}",
            PROJECT_URL,
            "",
            "DO NOT EDIT!",
            f"Source: {self._source}",
        ]

    def to_list(self) -> list:
        """Returns the header as a list of commented lines."""
        return [f"{self._comment} {line}".rstrip() for line in self._lines]

    def __str__(self) -> str:
        """Return the header followed by the blank line separating it from the body."""
        return "\n".join(self.to_list()) + "\n\n"


def add_header(source, target, body: str) -> str:
    """Prepend a generated-file header to body if target is a recognised source file."""
    comment = COMMENT_PREFIXES.get(os.path.splitext(str(target))[1])
    if comment is None:
        return body
    return str(GeneratedHeader(source, comment=comment)) + body


def _context(data) -> dict:
    # Mapping keys are exposed as top-level names; the whole value is always "data"
    context = {}
    if isinstance(data, dict):
        context.update((k, v) for k, v in data.items() if isinstance(k, str))
    context.setdefault("data", data)
    return context


def render_template(text: str, data, *, source="<template>") -> str:
    """Render template text against data, returning the rendered string."""
    env = Environment(undefined=StrictUndefined, keep_trailing_newline=True, autoescape=False)
    try:
        template = env.from_string(text)
    except TemplateSyntaxError as e:
        raise TemplateParseError(source, f"{source}:{e.lineno}: {e.message}") from e

    try:
        return template.render(_context(data))
    except Exception as e:
        raise TemplateExecError(source, f"{source}: {e}") from e


def read_file(path):
    """Read a template file, returning its text and permission bits."""
    try:
        mode = stat.S_IMODE(os.stat(path).st_mode)
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read(), mode
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, f"{path}: {e}") from e


def write_file(path, content: str, mode: int):
    """Write content to path and give it exactly the permission bits in mode."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(path, mode)
    except OSError as e:
        raise WriteError(path, f"{path}: {e}") from e


def render_file(path, data) -> Path:
    """Render the template at path to its output path, with a given context.

    Returns the output path.
    """
    target = output_path(path)
    text, mode = read_file(path)
    rendered = render_template(text, data, source=path)
    write_file(target, add_header(path, target, rendered), mode)
    logger.debug("rendered %s to %s (mode %o)", path, target, mode)
    return Path(target)
