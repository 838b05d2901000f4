from typing import Callable

from base.Base import Base
from module.File.RenPy.RenPyAst import BlockKind
from module.File.RenPy.RenPyAst import Slot
from module.File.RenPy.RenPyLexer import INDENT
from module.File.RenPy.RenPyLexer import STRINGS_COMMAND
from module.File.RenPy.RenPyLexer import escape_renpy_string
from module.File.RenPy.RenPyLexer import get_command_of_filled_line
from module.File.RenPy.RenPyParser import walk_document


class RenPyRewriter(Base):

    def __init__(self, language: str | None = None) -> None:
        super().__init__()

        # None matches any "translate <lang>" header
        self.language = language

    def create_filled_lines(
        self, fills: list[str], translations: list[str]
    ) -> list[str]:
        if len(fills) != len(translations):
            self.warning(
                f"Number of lines to fill ({len(fills)}) differs from "
                f"number of translations ({len(translations)})"
            )

        filled_lines: list[str] = []
        for fill, translation in zip(fills, translations):
            command = get_command_of_filled_line(fill)
            escaped = escape_renpy_string(translation)

            # narration has no speaker, the line is the bare string
            if command == "":
                filled_lines.append(f'"{escaped}"')
            else:
                filled_lines.append(f'{command} "{escaped}"')

        return filled_lines

    @classmethod
    def find_filled_line_index(cls, available: list[str | None], command: str) -> int:
        for i, filled_line in enumerate(available):
            if filled_line is None:
                continue
            if get_command_of_filled_line(filled_line) == command:
                return i

        # strings slots only take an exact "new" match
        if command == STRINGS_COMMAND:
            return -1

        # TODO: repeated speakers may pick a translation meant for a later slot,
        # a per-slot source check would need the source text in the filled line.
        for i, filled_line in enumerate(available):
            if filled_line is not None:
                return i

        return -1

    def replace_lines(
        self,
        text: str | None,
        filled_lines: list[str],
        extract_command: Callable[[str], str],
    ) -> str:
        output, _ = self.rewrite(text, filled_lines, extract_command)
        return output

    def rewrite(
        self,
        text: str | None,
        filled_lines: list[str],
        extract_command: Callable[[str], str],
    ) -> tuple[str, int]:
        """Fill every empty slot that has a matching filled line.

        Returns the new text and the number of filled lines consumed. Lines
        that are not filled are copied unchanged.
        """
        if not text:
            return "", 0

        source = text.split("\n")
        output = list(source)
        available: list[str | None] = list(filled_lines)
        consumed = 0

        def on_slot(slot: Slot) -> None:
            nonlocal consumed

            raw_line = source[slot.slot_line_no]
            if slot.kind == BlockKind.STRINGS:
                command = STRINGS_COMMAND
            else:
                command = extract_command(raw_line)

            index = self.find_filled_line_index(available, command)
            if index == -1:
                return

            # CRLF input keeps its line ending on the replaced line
            eol = "\r" if raw_line.endswith("\r") else ""
            output[slot.slot_line_no] = f"{INDENT}{available[index]}{eol}"
            available[index] = None
            consumed += 1

        walk_document(source, self.language, on_slot)

        return "\n".join(output), consumed
