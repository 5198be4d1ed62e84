"""Highlighting rules, tag insertion and list entries derived from a command catalog."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .commands import CommandCatalog, CommandType, TikzCommandList

PLACEHOLDER = "\u2022"

_OPTION_RE = re.compile(r"<[^<>]*>")
_NEVER_MATCHES = re.compile(r"(?!)")

_HIGHLIGHT_TYPE_NAMES = ("Commands", "Draw to", "Options")


@dataclass
class HighlightingRule:
    """A rule telling the highlighter what to format and with which format type.

    When ``is_regexp`` is true, ``pattern`` is used; otherwise ``match_string``.
    """

    type: str
    match_string: str = ""
    pattern: Optional[re.Pattern] = None
    is_regexp: bool = False


def highlight_type_names() -> list[str]:
    """Return the untranslated names of the rule types provided by commands."""
    return list(_HIGHLIGHT_TYPE_NAMES)


def translated_highlight_type_names() -> list[str]:
    """Return the names of the rule types as shown in a user interface."""
    return list(_HIGHLIGHT_TYPE_NAMES)


def _compile(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error:
        # an invalid expression never matches anything
        return _NEVER_MATCHES


def _command_match_string(command: str) -> str:
    ends = [i for i in (command.find(c) for c in " [{") if i >= 0]
    return command[: min(ends)] if ends else command


def _draw_to_match_string(command: str) -> str:
    command = command.replace("+", "")
    for fragment in (" ()", " (,)", " (:::)", " {} "):
        command = command.replace(fragment, "")
    return command


def _option_match_string(command: str) -> str:
    end = command.find("=") + 1
    return command[:end] if end > 0 else command


def highlighting_rules(catalog: CommandCatalog) -> list[HighlightingRule]:
    """Return the highlighting rules for the commands, draw-to operations and options."""
    names = highlight_type_names()
    builders = {
        CommandType.COMMAND: (names[0], _command_match_string),
        CommandType.DRAW_TO: (names[1], _draw_to_match_string),
        CommandType.OPTION: (names[2], _option_match_string),
    }
    rules = []
    for cmd in catalog.commands:
        try:
            kind = CommandType(cmd.type)
        except ValueError:
            continue
        if kind not in builders:
            continue
        type_name, build = builders[kind]
        text = cmd.command or cmd.description
        rule = HighlightingRule(type=type_name, match_string=build(text))
        if cmd.highlight_string:
            rule.pattern = _compile(cmd.highlight_string)
            rule.is_regexp = True
        rules.append(rule)
    return rules


def insert_tag(text: str, position: int, tag: str, dx: int = 0, dy: int = 0) -> tuple[str, int, int]:
    """Insert tag into text at position, options becoming placeholders.

    Returns ``(new_text, anchor, cursor)``. When the inserted text holds a
    placeholder, the first one is selected; otherwise the cursor is moved dy
    lines down (to the start of that line) and dx characters right of the
    insertion point, or left after the inserted text when both are zero.
    """
    if not 0 <= position <= len(text):
        raise IndexError(f"position out of range: {position}")
    word = _OPTION_RE.sub(PLACEHOLDER, tag)
    new_text = text[:position] + word + text[position:]

    if PLACEHOLDER in word:
        found = new_text.find(PLACEHOLDER, position)
        return new_text, found, found + 1

    if dx > 0 or dy > 0:
        cursor = position
        if dy > 0:
            lines = new_text.split("\n")
            line = new_text.count("\n", 0, position)
            target = min(line + dy, len(lines) - 1)
            cursor = sum(len(part) + 1 for part in lines[:target])
        if dx > 0:
            cursor = min(cursor + dx, len(new_text))
        return new_text, cursor, cursor

    end = position + len(word)
    return new_text, end, end


def list_entries(command_list: TikzCommandList, add_children: bool = True) -> list[tuple[str, Optional[int]]]:
    """Return the entries of a commands list widget.

    Each entry is ``(text, number)``; section titles carry ``None`` as number.
    Accelerator ampersands are removed from the texts.
    """
    entries: list[tuple[str, Optional[int]]] = [
        (cmd.name.replace("&", ""), cmd.number)
        for cmd in command_list.commands
        if cmd.type != CommandType.SECTION and cmd.name
    ]
    if add_children:
        for child in command_list.children:
            entries.append((child.title.replace("&", ""), None))
            entries.extend(list_entries(child))
    return entries