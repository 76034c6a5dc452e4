"""Shell configuration: prompt format and colour theme."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path

from kalishell.utils import trim_whitespace

PROMPT_MAX_LEN = 256
CONFIG_FILENAME = ".kali_shellrc"
DEFAULT_PROMPT_FORMAT = "\\u@\\h:\\w\\$ "


class Theme(enum.Enum):
    """Colour theme used when rendering the prompt."""

    LIGHT = 0
    DARK = 1
    DEFAULT = 0


@dataclass
class ShellConfig:
    """Settings read from the user's configuration file."""

    prompt_format: str = DEFAULT_PROMPT_FORMAT
    theme: Theme = Theme.DEFAULT

    def load(self, path: str | os.PathLike[str]) -> None:
        """Apply every setting found in the file at *path*.

        Raises OSError if the file cannot be read.
        """
        with open(path, encoding="utf-8", errors="surrogateescape") as handle:
            for line in handle:
                self.apply_line(line)

    def apply_line(self, line: str) -> None:
        """Apply one configuration line; unknown lines are ignored."""
        line = trim_whitespace(line)
        if not line or line.startswith("#"):
            return
        if line.startswith("prompt="):
            value = trim_whitespace(line[len("prompt="):])
            if value:
                self.prompt_format = value[: PROMPT_MAX_LEN - 1]
        elif line.startswith("theme="):
            value = trim_whitespace(line[len("theme="):])
            if value == "dark":
                self.theme = Theme.DARK
            elif value == "light":
                self.theme = Theme.LIGHT


def default_config_path() -> Path | None:
    """Return the configuration file in the home directory, or None without HOME."""
    home = os.environ.get("HOME")
    if home is None:
        return None
    return Path(home) / CONFIG_FILENAME