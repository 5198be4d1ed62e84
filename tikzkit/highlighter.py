"""Syntax highlighting of TikZ code: formats, rules and block highlighting."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from .rules import HighlightingRule
from .rules import highlight_type_names as _command_type_names
from .rules import translated_highlight_type_names as _translated_command_type_names

_ENVIRONMENT_PATTERNS = (r"\\begin\{[^\}]*\}", r"\\end\{[^\}]*\}")
_COMMENT_PATTERN = r"%[^\n]*"

_SETTINGS_GROUP = "Highlighting/"


@dataclass(frozen=True)
class HighlightFormat:
    """How a highlighted piece of text is drawn."""

    foreground: str = ""
    font: Optional[str] = None
    bold: bool = False


def highlight_type_names() -> list[str]:
    """Return the untranslated names of all highlighting types."""
    return _command_type_names() + ["Environments", "Comments"]


def translated_highlight_type_names() -> list[str]:
    """Return the names of all highlighting types as shown to the user."""
    return _translated_command_type_names() + ["Environments", "Comments"]


def default_highlight_formats() -> dict[str, HighlightFormat]:
    """Return the default format for every highlighting type."""
    names = highlight_type_names()
    return {
        names[0]: HighlightFormat(foreground="#004080", bold=True),
        names[1]: HighlightFormat(foreground="#800000"),
        names[2]: HighlightFormat(foreground="#004000"),
        names[3]: HighlightFormat(foreground="#000080", bold=True),
        names[4]: HighlightFormat(foreground="#a0a0a4"),
    }


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false")
    return bool(value)


def _to_int(value: Any) -> int:
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


def _font_is_bold(font: str) -> bool:
    """Tell whether a serialized font description carries a bold weight."""
    fields = font.split(",")
    if len(fields) < 5:
        return False
    weight = _to_int(fields[4])
    # the weight scale is either 0..99 (normal 50) or 1..1000 (normal 400)
    return weight >= 600 if weight > 100 else weight >= 63


def _scan_index(text: str, tag: str, start: int = 0) -> int:
    """Find tag in text from start with the editor's simple scanner.

    After a mismatch the scan resumes with the next character, so the
    mismatching character is never tried as the start of a match.
    """
    tag_length = len(tag)
    j = 0
    for i in range(start, len(text)):
        if j >= tag_length:
            break
        if text[i] != tag[j]:
            j = 0
            continue
        if j == tag_length - 1:
            return i - tag_length + 1
        j += 1
    return -1


class TikzHighlighter:
    """Finds the pieces of a line of TikZ code to highlight and their formats."""

    def __init__(self) -> None:
        self.rules: list[HighlightingRule] = []
        self.formats: dict[str, HighlightFormat] = {}

    def set_highlighting_rules(self, rules: Iterable[HighlightingRule]) -> None:
        """Add rules, followed by the rules for environments and comments."""
        self.rules.extend(rules)
        names = highlight_type_names()
        environments, comments = names[-2], names[-1]
        for pattern in _ENVIRONMENT_PATTERNS:
            self.rules.append(
                HighlightingRule(type=environments, pattern=re.compile(pattern), is_regexp=True)
            )
        self.rules.append(
            HighlightingRule(type=comments, pattern=re.compile(_COMMENT_PATTERN), is_regexp=True)
        )

    def apply_settings(self, settings: Mapping[str, Any]) -> None:
        """Reset the formats to the defaults and apply customized ones from settings.

        Keys follow the layout ``Highlighting/Customize``, ``Highlighting/Number``
        and ``Highlighting/Item<i>/Name``, ``/Color``, ``/Font``.
        """
        self.formats = default_highlight_formats()
        if not _to_bool(settings.get(_SETTINGS_GROUP + "Customize", True)):
            return
        count = _to_int(settings.get(_SETTINGS_GROUP + "Number", 0))
        for i in range(count):
            item = f"{_SETTINGS_GROUP}Item{i}/"
            name = str(settings.get(item + "Name", ""))
            color = str(settings.get(item + "Color", ""))
            font = str(settings.get(item + "Font", ""))
            self.formats[name] = HighlightFormat(
                foreground=color, font=font or None, bold=_font_is_bold(font)
            )

    def _format(self, type_name: str) -> HighlightFormat:
        return self.formats.get(type_name, HighlightFormat())

    @staticmethod
    def _is_escaped(text: str, index: int) -> bool:
        return index > 0 and text[index - 1] == "\\"

    def highlight_block(self, text: str) -> list[tuple[int, int, HighlightFormat]]:
        """Return ``(start, length, format)`` spans in the order they are applied.

        A later span overrides an earlier one where they overlap. Matches
        directly preceded by a backslash are not formatted.
        """
        spans: list[tuple[int, int, HighlightFormat]] = []
        for rule in self.rules:
            if not rule.is_regexp:
                length = len(rule.match_string)
                index = _scan_index(text, rule.match_string)
                while index >= 0:
                    if not self._is_escaped(text, index):
                        spans.append((index, length, self._format(rule.type)))
                    index = _scan_index(text, rule.match_string, index + length)
            elif rule.pattern is not None:
                pos = 0
                while pos <= len(text):
                    match = rule.pattern.search(text, pos)
                    if match is None:
                        break
                    start, end = match.span()
                    if not self._is_escaped(text, start):
                        spans.append((start, end - start, self._format(rule.type)))
                    pos = end if end > start else end + 1
        return spans