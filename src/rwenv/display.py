"""Human-readable listing of an environment.

Variables are sorted by name, long values are clipped to
``head...tail`` and names are padded so the ``=`` signs line up::

    HOME  = "/home/user"
    PATH  = "/usr/local/bin:/usr/bin:/bin"
    SHELL = "/bin/bash"
"""

import json
import sys
from typing import List, Mapping, Optional, TextIO

DEFAULT_MAX_VALUE_LEN = 100


def clip_value(value: str, max_value_len: int = DEFAULT_MAX_VALUE_LEN) -> str:
    """Shorten *value* to ``head...tail`` when longer than *max_value_len*.

    Thresholds below 4 leave no room for a head and a tail, so the value
    is returned unchanged.
    """
    keep = max_value_len // 2 - 1
    if keep < 1 or len(value) <= max_value_len:
        return value
    return f"{value[:keep]}...{value[-keep:]}"


def _escape_undecodable(text: str) -> str:
    # bytes that were not valid UTF-8 are shown as \xNN
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return raw.decode("utf-8", "backslashreplace")


def format_environment(
    env: Mapping[str, str],
    max_value_len: int = DEFAULT_MAX_VALUE_LEN,
    clip: bool = True,
) -> List[str]:
    """Render *env* as aligned ``NAME = "VALUE"`` lines sorted by name."""
    if not env:
        return []
    width = max(len(name) for name in env)
    lines = []
    for name in sorted(env):
        value = env[name]
        if clip:
            value = clip_value(value, max_value_len)
        line = f"{name.ljust(width)} = {json.dumps(value, ensure_ascii=False)}"
        lines.append(_escape_undecodable(line))
    return lines


def print_environment(
    env: Mapping[str, str],
    stream: Optional[TextIO] = None,
    max_value_len: int = DEFAULT_MAX_VALUE_LEN,
    clip: bool = True,
) -> None:
    """Write the listing of *env* to *stream* (default: stdout)."""
    out = stream if stream is not None else sys.stdout
    for line in format_environment(env, max_value_len=max_value_len, clip=clip):
        print(line, file=out)
