import dataclasses
from enum import StrEnum


class BlockKind(StrEnum):
    DIALOGUE = "DIALOGUE"  # "# game/..." + "translate <lang> <id>:" unit
    STRINGS = "STRINGS"  # "translate <lang> strings:" old/new pairs


@dataclasses.dataclass(frozen=True)
class Slot:
    kind: BlockKind
    source_line_no: int  # 0-based, commented dialogue line or "old" line
    slot_line_no: int  # 0-based, line holding the empty "" payload
    command: str
    text: str

    @property
    def fill_descriptor(self) -> str:
        return f'{self.command} ""'


@dataclasses.dataclass
class ScanResult:
    texts: list[str] = dataclasses.field(default_factory=list)
    fills: list[str] = dataclasses.field(default_factory=list)
    slots: list[Slot] = dataclasses.field(default_factory=list)

    def add(self, slot: Slot) -> None:
        self.texts.append(slot.text)
        self.fills.append(slot.fill_descriptor)
        self.slots.append(slot)

    def __len__(self) -> int:
        return len(self.slots)
