"""Locating the TikZ/PGF manual."""

from __future__ import annotations

import locale
import subprocess
from typing import MutableMapping

SETTINGS_KEY = "TikzDocumentation"
DEFAULT_DOCUMENTATION_PATH = "/usr/share/doc/texmf/pgf/pgfmanual.pdf.gz"

_KPSEWHICH_COMMAND = [
    "kpsewhich",
    "--format",
    "TeX system documentation",
    "pgfmanual.pdf",
    "pgfmanual.pdf.gz",
    "pgfmanual.ps",
    "pgfmanual.ps.gz",
]


def tikz_documentation_path(settings: MutableMapping[str, str]) -> str:
    """Return the path of the TikZ manual.

    Uses the stored setting, else searches the TeX tree, else falls back to
    the default path. A path found without a stored setting is stored.
    """
    stored = settings.get(SETTINGS_KEY) or ""
    path = stored
    if not stored:
        path = search_tikz_documentation_in_tex_tree()
    if not path:
        path = DEFAULT_DOCUMENTATION_PATH
    if not stored and path:
        store_tikz_documentation_path(settings, path)
    return path


def store_tikz_documentation_path(settings: MutableMapping[str, str], path: str) -> None:
    """Store the path of the TikZ manual in settings."""
    settings[SETTINGS_KEY] = path


def search_tikz_documentation_in_tex_tree() -> str:
    """Ask kpsewhich for the manual; return its first answer or ''."""
    try:
        result = subprocess.run(_KPSEWHICH_COMMAND, capture_output=True, check=False)
    except OSError:
        return ""
    output = result.stdout or b""
    text = output.decode(locale.getpreferredencoding(False), errors="replace")
    return text.split("\n", 1)[0].strip()