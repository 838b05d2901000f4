from base.Base import Base
from module.File.RenPy.RenPyAst import ScanResult
from module.File.RenPy.RenPyLexer import extract_command
from module.File.RenPy.RenPyParser import parse_document


class RenPyScanner(Base):
    """Finds the untranslated slots of a Ren'Py translation script.

    texts[i] is the source text of the i-th empty slot and fills[i] its
    fill descriptor (command + ' ""'). Both come from the same pass, so their
    lengths always agree.
    """

    def __init__(self, language: str | None = None) -> None:
        super().__init__()

        # None matches any "translate <lang>" header
        self.language = language

    def scan(self, text: str | None) -> ScanResult:
        return parse_document(text, self.language)

    def extract_texts(self, text: str | None) -> list[str]:
        return self.scan(text).texts

    def find_slots(self, text: str | None) -> list[str]:
        return self.scan(text).fills

    def extract_command(self, line: str) -> str:
        return extract_command(line)
