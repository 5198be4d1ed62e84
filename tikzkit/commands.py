"""TikZ command catalog: data model and loaders for JSON and XML command files."""

from __future__ import annotations

import json
import unicodedata
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any, Callable, Union


class CommandType(IntEnum):
    """Kinds of entries in a command list."""

    SECTION = -1
    PLAIN = 0
    COMMAND = 1
    DRAW_TO = 2
    OPTION = 3


@dataclass
class TikzCommand:
    """One insertable TikZ command, a separator or a submenu placeholder."""

    name: str = ""
    description: str = ""
    command: str = ""
    highlight_string: str = ""
    dx: int = 0
    dy: int = 0
    type: int = CommandType.PLAIN
    number: int = -1

    @property
    def is_separator(self) -> bool:
        return not self.name and self.type == CommandType.PLAIN

    @property
    def is_section(self) -> bool:
        return not self.name and self.type == CommandType.SECTION


@dataclass
class TikzCommandList:
    """A titled section holding commands and nested sections.

    The i-th command of type SECTION corresponds to the i-th child.
    """

    title: str = ""
    commands: list[TikzCommand] = field(default_factory=list)
    children: list["TikzCommandList"] = field(default_factory=list)


@dataclass
class CommandCatalog:
    """The tree of sections together with the flat, numbered list of commands."""

    sections: TikzCommandList = field(default_factory=TikzCommandList)
    commands: list[TikzCommand] = field(default_factory=list)

    def command(self, number: int) -> TikzCommand:
        """Return the command with the given number."""
        if number < 0:
            raise IndexError(f"command number out of range: {number}")
        return self.commands[number]

    def insertion_for(self, number: int) -> str:
        """Return the text to insert for a command: its command, else its description."""
        cmd = self.command(number)
        return cmd.command or cmd.description

    def command_words(self) -> list[str]:
        """Return the completion words derived from all commands."""
        words = []
        for cmd in self.commands:
            word = cmd.description or cmd.command
            word = remove_options_and_special_characters(word)
            if word:
                words.append(word)
        return words


def _translate(text: str) -> str:
    return text


def translate_options(text: str) -> str:
    """Translate every option written between '<' and '>' in text."""
    parts = []
    pos = 0
    while True:
        start = text.find("<", pos)
        if start < 0:
            if pos == 0:
                # no options at all
                return text
            parts.append(text[pos:])
            break
        parts.append(text[pos:start + 1])
        end = text.find(">", start)
        if end < 0:
            parts.append(_translate(text[start + 1:]))
            break
        parts.append(_translate(text[start + 1:end]))
        pos = end
    return "".join(parts) or text


def restore_new_lines(text: str) -> str:
    """Replace every literal backslash-n not preceded by a backslash by a newline."""
    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if (
            char == "\\"
            and i + 1 < length
            and text[i + 1] == "n"
            and (not out or out[-1] != "\\")
        ):
            out.append("\n")
            i += 2
        else:
            out.append(char)
            i += 1
    return "".join(out)


def remove_options_and_special_characters(text: str) -> str:
    """Strip leading special characters; an option before the first letter yields ''."""
    for i, char in enumerate(text):
        if char == "\\" or unicodedata.category(char) in ("Ll", "Lu"):
            return text[i:]
        if char == "<":
            # once inside an option nothing further is kept
            return ""
    return ""


def _qt_int(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return 0


def _json_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _json_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _build_command(
    name: str,
    description: str,
    insertion: str,
    highlight: str,
    dx: int,
    dy: int,
    kind: int,
    registry: list[TikzCommand],
) -> TikzCommand:
    description = translate_options(description.replace("\\\\", "\\"))
    insertion = restore_new_lines(insertion).replace("\\\\", "\\")
    if not description:
        description = insertion
    if not name:
        name = description
        description = description.replace("&", "")
    cmd = TikzCommand(
        name=name,
        description=description,
        command=insertion,
        highlight_string=highlight,
        dx=dx,
        dy=dy,
        type=kind,
        number=len(registry),
    )
    registry.append(cmd)
    return cmd


def _separator() -> TikzCommand:
    return TikzCommand(type=CommandType.PLAIN)


def _section_placeholder() -> TikzCommand:
    return TikzCommand(type=CommandType.SECTION)


def _json_section(obj: dict, registry: list[TikzCommand]) -> TikzCommandList:
    section = TikzCommandList()
    if "title" in obj:
        section.title = _translate(_json_str(obj["title"]))
    entries = obj.get("commands")
    if not isinstance(entries, list):
        return section
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        kind = _json_int(entry.get("type"))
        if "commands" in entry:
            section.commands.append(_section_placeholder())
            section.children.append(_json_section(entry, registry))
        elif kind == CommandType.SECTION:
            section.commands.append(_separator())
        else:
            section.commands.append(
                _build_command(
                    _translate(_json_str(entry.get("name"))),
                    _json_str(entry.get("description")),
                    _json_str(entry.get("insert")),
                    _json_str(entry.get("highlight")),
                    _json_int(entry.get("dx")),
                    _json_int(entry.get("dy")),
                    kind,
                    registry,
                )
            )
    return section


def parse_commands_json(data: Union[str, bytes]) -> CommandCatalog:
    """Parse a JSON commands document into a catalog.

    Raises ValueError when the document is not valid JSON.
    """
    try:
        document = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError(
            f"parse error in TikZ commands at offset {exc.pos}: {exc.msg}"
        ) from exc
    registry: list[TikzCommand] = []
    if not isinstance(document, dict):
        return CommandCatalog()
    sections = _json_section(document, registry)
    return CommandCatalog(sections=sections, commands=registry)


def _xml_section(element: ET.Element, registry: list[TikzCommand]) -> TikzCommandList:
    section = TikzCommandList(title=_translate(element.get("title", "")))
    for child in element:
        if child.tag == "item":
            kind = child.get("type", "") or "0"
            section.commands.append(
                _build_command(
                    _translate(child.get("name", "")),
                    child.get("description", ""),
                    child.get("insert", ""),
                    child.get("highlight", ""),
                    _qt_int(child.get("dx", "")),
                    _qt_int(child.get("dy", "")),
                    _qt_int(kind),
                    registry,
                )
            )
        elif child.tag == "separator":
            section.commands.append(_separator())
        elif child.tag == "section":
            section.commands.append(_section_placeholder())
            section.children.append(_xml_section(child, registry))
    return section


def parse_commands_xml(text: Union[str, bytes]) -> CommandCatalog:
    """Parse an XML commands document (root element is the top section).

    Raises ValueError when the document is not well-formed.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ValueError(f"parse error in TikZ commands: {exc}") from exc
    registry: list[TikzCommand] = []
    sections = _xml_section(root, registry)
    return CommandCatalog(sections=sections, commands=registry)


def load_catalog(path: Union[str, Path]) -> CommandCatalog:
    """Load a commands file; an unreadable file gives an empty catalog."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError:
        return CommandCatalog()
    parser: Callable[[bytes], CommandCatalog]
    parser = parse_commands_xml if path.suffix.lower() == ".xml" else parse_commands_json
    return parser(raw)