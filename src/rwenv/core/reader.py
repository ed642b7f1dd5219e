"""Whole-file reading of env files."""

import os
from pathlib import Path
from typing import List, Union

from rwenv.exceptions import FileReadError


def read_lines(path: Union[str, Path]) -> List[str]:
    """Read *path* and split its content on ``\\n``.

    Bytes are decoded the way the OS decodes environment variables, so
    anything that is not valid UTF-8 survives as surrogate escapes and is
    written back unchanged when the program is launched.

    A trailing newline yields a final empty string; callers treat it like
    any other line that does not parse.

    Raises:
        FileReadError: If the file cannot be opened or read
    """
    try:
        content = os.fsdecode(Path(path).read_bytes())
    except OSError as e:
        raise FileReadError(str(path), e.strerror or str(e)) from e
    return content.split("\n")
