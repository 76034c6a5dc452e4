"""Rendering of the interactive prompt from its format string."""

from __future__ import annotations

import os
import socket

from kalishell.config import ShellConfig, Theme

PROMPT_BUFFER_SIZE = 512

COLOR_RESET = "\033[0m"
_PALETTES = {
    Theme.LIGHT: ("\033[1;32m", "\033[1;34m", "\033[1;35m"),
    Theme.DARK: ("\033[0;32m", "\033[0;34m", "\033[0;35m"),
}


def current_user() -> str:
    """Return the login name of the current user, or "user" if unknown."""
    try:
        import pwd
    except ImportError:
        return "user"
    try:
        return pwd.getpwuid(os.getuid()).pw_name
    except KeyError:
        return "user"


def current_cwd() -> str:
    """Return the working directory, or "unknown" if it cannot be read."""
    try:
        return os.getcwd()
    except OSError:
        return "unknown"


def _running_as_root() -> bool:
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def render_prompt(
    config: ShellConfig,
    user: str | None = None,
    hostname: str | None = None,
    cwd: str | None = None,
    is_root: bool | None = None,
    max_length: int = PROMPT_BUFFER_SIZE,
) -> str:
    """Expand \\u, \\h, \\w, \\$ and \\\\ in the configured prompt format.

    The result holds at most ``max_length - 1`` characters.
    """
    if max_length < 1:
        raise ValueError("max_length must be positive")
    user = current_user() if user is None else user
    hostname = socket.gethostname() if hostname is None else hostname
    cwd = current_cwd() if cwd is None else cwd
    is_root = _running_as_root() if is_root is None else is_root

    c_user, c_host, c_path = _PALETTES[config.theme]
    parts: list[str] = []
    remaining = max_length

    def emit(text: str) -> None:
        nonlocal remaining
        text = text[: remaining - 1]
        parts.append(text)
        remaining -= len(text)

    chars = iter(config.prompt_format)
    for ch in chars:
        if remaining <= 1:
            break
        if ch != "\\":
            emit(ch)
            continue
        code = next(chars, None)
        if code == "u":
            emit(f"{c_user}{user}{COLOR_RESET}")
        elif code == "h":
            emit(f"{c_host}{hostname}{COLOR_RESET}")
        elif code == "w":
            emit(f"{c_path}{cwd}{COLOR_RESET}")
        elif code == "$":
            emit("#" if is_root else "$")
        elif code == "\\" or code is None:
            emit("\\")
        elif remaining > 2:
            emit("\\" + code)
    return "".join(parts)