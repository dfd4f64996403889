# Copyright 2022 Jon Seager
# See LICENSE file for licensing details.

import os
import stat


def file_content_equals_string(filename: str, expected: str):
    """Check if the contents of file 'filename' equal the 'expected' param."""
    with open(filename, newline="") as f:
        return f.read() == expected


def write_template(filename, content, mode=0o644):
    """Write a template file with the given content and permission bits."""
    with open(filename, "w+", newline="") as f:
        f.write(content)
    os.chmod(filename, mode)


def file_mode(filename) -> int:
    """Return the permission bits of filename."""
    return stat.S_IMODE(os.stat(filename).st_mode)
