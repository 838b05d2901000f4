from __future__ import annotations

from module.File.RenPy.RenPyAst import BlockKind
from module.File.RenPy.RenPyAst import Slot
from module.File.RenPy.RenPyParser import parse_document
from module.File.RenPy.RenPyParser import walk_document
from tests.module.file.conftest import SCRIPT_LINES


def collect(lines: list[str], language: str | None = "french") -> list[Slot]:
    slots: list[Slot] = []
    walk_document(lines, language, slots.append)
    return slots


def test_walk_document_reports_slots_in_file_order() -> None:
    slots = collect(SCRIPT_LINES)

    assert [(s.kind, s.source_line_no, s.slot_line_no) for s in slots] == [
        (BlockKind.DIALOGUE, 5, 6),
        (BlockKind.DIALOGUE, 12, 14),
        (BlockKind.STRINGS, 25, 26),
        (BlockKind.STRINGS, 33, 34),
    ]
    assert [s.command for s in slots] == ["sh_i neutral", "n", "new", "new"]
    assert [s.text for s in slots] == [
        "Hello",
        "After a wonderful night.",
        "Yes",
        "Maybe",
    ]


def test_two_comment_block_with_quoted_first_line() -> None:
    lines = [
        "# game/a.rpy:1",
        "translate french a_1:",
        "",
        "    # voice \"a1.ogg\"",
        '    # e "Hi"',
        '    e ""',
    ]

    slots = collect(lines)

    assert len(slots) == 1
    assert slots[0].slot_line_no == 5
    assert slots[0].command == "e"
    assert slots[0].text == "Hi"


def test_truncated_blocks_do_not_raise() -> None:
    assert collect(["# game/a.rpy:1", "translate french a_1:"]) == []
    assert collect(["# game/a.rpy:1", "translate french a_1:", "", '    # e "Hi"']) == []
    assert (
        collect(["# game/a.rpy:1", "translate french a_1:", "", "    # nvl clear", '    # n "Hi"'])
        == []
    )
    assert (
        collect(
            [
                "# game/a.rpy:1",
                "translate french a_1:",
                "",
                "    # nvl clear",
                '    # n "Hi"',
                "    nvl clear",
            ]
        )
        == []
    )
    assert collect(["translate french strings:", '    old "Yes"']) == []


def test_unrecognized_dialogue_block_is_skipped() -> None:
    lines = ["# game/a.rpy:1", "translate french a_1:", "", '    e ""', '    e ""']

    assert collect(lines) == []


def test_empty_source_text_is_not_a_slot() -> None:
    lines = [
        "# game/a.rpy:1",
        "translate french a_1:",
        "",
        '    # e ""',
        '    e ""',
        "translate french strings:",
        '    old ""',
        '    new ""',
    ]

    assert collect(lines) == []


def test_strings_block_ends_at_next_translate_header() -> None:
    lines = [
        "translate french strings:",
        '    old "Yes"',
        '    new ""',
        "# game/a.rpy:1",
        "translate french a_1:",
        "",
        '    # e "Hi"',
        '    e ""',
    ]

    slots = collect(lines)

    assert [s.kind for s in slots] == [BlockKind.STRINGS, BlockKind.DIALOGUE]
    assert slots[1].slot_line_no == 7


def test_strings_block_followed_by_strings_block() -> None:
    lines = [
        "translate french strings:",
        '    old "Yes"',
        '    new ""',
        "translate french strings:",
        '    old "No"',
        '    new ""',
    ]

    assert [s.text for s in collect(lines)] == ["Yes", "No"]


def test_other_languages_are_ignored_unless_any_language() -> None:
    lines = ["translate german strings:", '    old "Yes"', '    new ""']

    assert collect(lines, "french") == []
    assert [s.text for s in collect(lines, None)] == ["Yes"]


def test_parse_document_handles_empty_input() -> None:
    assert len(parse_document("", "french")) == 0
    assert len(parse_document(None, "french")) == 0


def test_parse_document_keeps_texts_and_fills_in_step() -> None:
    result = parse_document("\n".join(SCRIPT_LINES), "french")

    assert len(result.texts) == len(result.fills) == len(result.slots) == 4
    assert result.fills == ['sh_i neutral ""', 'n ""', 'new ""', 'new ""']
