import pytest

from tikzkit.commands import CommandCatalog, CommandType, TikzCommand, TikzCommandList
from tikzkit.rules import (
    PLACEHOLDER,
    HighlightingRule,
    highlight_type_names,
    highlighting_rules,
    insert_tag,
    list_entries,
    translated_highlight_type_names,
)


def _catalog(*commands):
    numbered = []
    for i, cmd in enumerate(commands):
        cmd.number = i
        numbered.append(cmd)
    return CommandCatalog(sections=TikzCommandList(commands=numbered), commands=numbered)


def test_type_names():
    assert highlight_type_names() == ["Commands", "Draw to", "Options"]
    assert len(translated_highlight_type_names()) == len(highlight_type_names())


def test_command_rule_cut_at_bracket():
    catalog = _catalog(TikzCommand(name="draw", command="\\draw[<options>] (0,0);", type=CommandType.COMMAND))
    rules = highlighting_rules(catalog)
    assert len(rules) == 1
    assert rules[0].type == "Commands"
    assert rules[0].match_string == "\\draw"
    assert rules[0].is_regexp is False


def test_command_rule_without_delimiter_keeps_whole():
    catalog = _catalog(TikzCommand(name="x", command="\\tikzstyle", type=CommandType.COMMAND))
    assert highlighting_rules(catalog)[0].match_string == "\\tikzstyle"


def test_draw_to_rule_removes_fragments():
    catalog = _catalog(TikzCommand(name="line", command="-- ()", type=CommandType.DRAW_TO))
    rule = highlighting_rules(catalog)[0]
    assert rule.type == "Draw to"
    assert rule.match_string == "--"


def test_option_rule_cut_after_equals():
    catalog = _catalog(TikzCommand(name="lw", command="line width=<w>", type=CommandType.OPTION))
    rule = highlighting_rules(catalog)[0]
    assert rule.type == "Options"
    assert rule.match_string == "line width="


def test_option_without_equals_and_description_fallback():
    catalog = _catalog(TikzCommand(name="thick", description="thick", command="", type=CommandType.OPTION))
    assert highlighting_rules(catalog)[0].match_string == "thick"


def test_plain_commands_produce_no_rule():
    catalog = _catalog(TikzCommand(name="text", command="hello", type=CommandType.PLAIN))
    assert highlighting_rules(catalog) == []


def test_highlight_string_makes_regexp_rule():
    catalog = _catalog(
        TikzCommand(name="b", command="\\begin{x}", highlight_string=r"\\begin\{[^}]*\}", type=CommandType.COMMAND)
    )
    rule = highlighting_rules(catalog)[0]
    assert isinstance(rule, HighlightingRule)
    assert rule.is_regexp is True
    assert rule.pattern.search("a \\begin{tikzpicture}").group(0) == "\\begin{tikzpicture}"


def test_invalid_regexp_never_matches():
    catalog = _catalog(TikzCommand(name="b", command="x", highlight_string="(", type=CommandType.OPTION))
    rule = highlighting_rules(catalog)[0]
    assert rule.is_regexp is True
    assert rule.pattern.search("((((") is None


def test_insert_tag_selects_first_placeholder():
    new_text, anchor, cursor = insert_tag("ab", 1, "x<opt>y<z>", 0, 0)
    assert new_text == "a" + "x" + PLACEHOLDER + "y" + PLACEHOLDER + "b"
    assert new_text[anchor:cursor] == PLACEHOLDER
    assert cursor == anchor + 1
    assert anchor > 1


def test_insert_tag_plain_cursor_after_insertion():
    new_text, anchor, cursor = insert_tag("xy", 1, "abc", 0, 0)
    assert new_text == "xabcy"
    assert anchor == cursor
    assert new_text[:cursor] == "xabc"


def test_insert_tag_dx_dy():
    tag = "a\n  b"
    new_text, anchor, cursor = insert_tag("", 0, tag, 2, 1)
    assert new_text == tag
    assert anchor == cursor
    assert new_text[cursor] == "b"


def test_insert_tag_dy_clamped_to_last_line():
    new_text, _, cursor = insert_tag("", 0, "one\ntwo", 0, 5)
    assert new_text[cursor:] == "two"


def test_insert_tag_dx_clamped_to_end():
    new_text, _, cursor = insert_tag("", 0, "ab", 10, 0)
    assert cursor == len(new_text)


def test_insert_tag_bad_position():
    with pytest.raises(IndexError):
        insert_tag("ab", 5, "x")


def test_list_entries_with_children():
    child_cmd = TikzCommand(name="C&ircle", command="circle", number=1)
    child = TikzCommandList(title="&Shapes", commands=[child_cmd])
    top_cmd = TikzCommand(name="&Node", command="\\node", number=0)
    top = TikzCommandList(
        title="Top",
        commands=[top_cmd, TikzCommand(type=CommandType.PLAIN), TikzCommand(type=CommandType.SECTION)],
        children=[child],
    )
    entries = list_entries(top)
    assert entries == [("Node", 0), ("Shapes", None), ("Circle", 1)]
    assert list_entries(top, add_children=False) == [("Node", 0)]