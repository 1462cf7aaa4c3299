"""
Destination path negotiation.

Provides a filename to write to. A preferred name is used as given unless the
file already exists, in which case the user is asked before it is handed
out. Without a preferred name a timestamp is used.

Example:
    path_get()                  => "261019.1402" or "261019.140233"
    path_get("test.txt")        => "test.txt" or "" if overwrite declined
    path_get(post=".log")       => "261019.1402.log"
"""

import os
from typing import Final
from rich.console import Console
from optkit.config.settings import appsettings
from optkit.lib.formatting import date_get
from optkit.lib.log import LOG

console: Final[Console] = Console()


def file_exists(path: str) -> bool:
    """Check if a file exists."""
    return os.access(path, os.F_OK)


def overwrite_confirm(path: str) -> bool:
    """Ask whether path may be overwritten; only "y" or "Y" accepts."""
    try:
        answer: str = console.input(
            f"File {path} exists, overwrite [y/N]? ", markup=False
        )
    except EOFError:
        LOG(f"No answer for overwrite prompt on {path}")
        return False
    return answer.strip() in ("y", "Y")


def path_get(pref: str = "", post: str = "") -> str:
    """Provide a path to write to.

    Args:
        pref: The preferred filename
        post: A string appended to the resulting path

    Returns:
        pref + post, or "" if it exists and overwriting was declined.
        Without pref, a timestamp + post, using seconds resolution when the
        minute-resolution name is already taken.
    """
    if pref:
        path: str = pref + post
        if file_exists(path) and appsettings.overwritePrompt:
            if overwrite_confirm(path):
                return path
            LOG(f"Overwrite of {path} declined")
            return ""
        return path

    path = date_get(appsettings.timestampFormat) + post
    if file_exists(path):
        path = date_get(appsettings.timestampFormatFine) + post
    return path
