from typing import Callable

from module.File.RenPy.RenPyAst import BlockKind
from module.File.RenPy.RenPyAst import ScanResult
from module.File.RenPy.RenPyAst import Slot
from module.File.RenPy.RenPyLexer import STRINGS_COMMAND
from module.File.RenPy.RenPyLexer import extract_command
from module.File.RenPy.RenPyLexer import extract_old_text
from module.File.RenPy.RenPyLexer import extract_text
from module.File.RenPy.RenPyLexer import get_stripped
from module.File.RenPy.RenPyLexer import has_empty_slot
from module.File.RenPy.RenPyLexer import is_dialogue_start
from module.File.RenPy.RenPyLexer import is_empty_new_line
from module.File.RenPy.RenPyLexer import is_strings_header

# # game/script.rpy:10
# translate french block_1:
#
#     # sh_i neutral "Hello"
#     sh_i neutral ""
#
# # game/routes/n_11.rpy:3
# translate french n_11_f9190bc9:
#
#     # nvl clear
#     # n "After a wonderful night..."
#     nvl clear
#     n ""
#
# translate french strings:
#
#     # game/script.rpy:307
#     old "Accompany her to the inn"
#     new ""

OnSlot = Callable[[Slot], None]


def walk_document(lines: list[str], language: str | None, on_slot: OnSlot) -> None:
    """Single left-to-right pass over the block grammar.

    on_slot is invoked once per empty slot, in file order. Lines outside a
    recognized block are skipped; the index never moves backwards.
    """
    i = 0
    while i < len(lines):
        if is_dialogue_start(lines, i, language):
            i = walk_dialogue_block(lines, i, on_slot)
        elif is_strings_header(lines[i], language):
            i = walk_strings_block(lines, i + 1, language, on_slot)
        else:
            i += 1


def walk_dialogue_block(lines: list[str], i: int, on_slot: OnSlot) -> int:
    comment_1 = get_stripped(lines, i + 3)
    comment_2 = get_stripped(lines, i + 4)

    if comment_1.startswith("#") and comment_2.startswith("#"):
        if i + 5 >= len(lines):
            return i + 6

        # A quote-less line after the comments is a pass-through command (nvl clear).
        if '"' not in lines[i + 5]:
            emit_dialogue_slot(lines, i + 4, i + 6, on_slot)
            return i + 7
        else:
            emit_dialogue_slot(lines, i + 4, i + 5, on_slot)
            return i + 6
    elif comment_1.startswith("#"):
        emit_dialogue_slot(lines, i + 3, i + 4, on_slot)
        return i + 5

    return i + 5


def emit_dialogue_slot(
    lines: list[str], source_line_no: int, slot_line_no: int, on_slot: OnSlot
) -> None:
    if slot_line_no >= len(lines):
        return
    if not has_empty_slot(lines[slot_line_no]):
        return

    source = lines[source_line_no]
    text = extract_text(source)
    command = extract_command(source)
    if text == "" or command == "":
        return

    on_slot(
        Slot(
            kind=BlockKind.DIALOGUE,
            source_line_no=source_line_no,
            slot_line_no=slot_line_no,
            command=command,
            text=text,
        )
    )


def walk_strings_block(
    lines: list[str], i: int, language: str | None, on_slot: OnSlot
) -> int:
    while i < len(lines):
        stripped = lines[i].strip()

        # "# game/..." followed by a translate header opens the next dialogue block
        if is_dialogue_start(lines, i, language):
            break

        # Blank lines and "# game/..." location comments sit between pairs.
        if stripped == "" or stripped.startswith("#"):
            i += 1
            continue

        if not stripped.startswith('old "'):
            break

        slot_line_no = i + 1
        if slot_line_no < len(lines) and is_empty_new_line(lines[slot_line_no]):
            text = extract_old_text(stripped)
            if text != "":
                on_slot(
                    Slot(
                        kind=BlockKind.STRINGS,
                        source_line_no=i,
                        slot_line_no=slot_line_no,
                        command=STRINGS_COMMAND,
                        text=text,
                    )
                )

        i += 2

    return i


def parse_document(text: str | None, language: str | None) -> ScanResult:
    result = ScanResult()
    if not text:
        return result

    walk_document(text.split("\n"), language, result.add)
    return result
