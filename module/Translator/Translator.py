from abc import ABC
from abc import abstractmethod


class Translator(ABC):
    """Batch translation capability consumed by the Ren'Py workflow.

    Implementations return exactly one translation per input string, in the
    same order, or raise TranslatorError.
    """

    @abstractmethod
    def translate(self, texts: list[str], target_language: str) -> list[str]:
        pass

    @classmethod
    def get_character_count(cls, texts: list[str]) -> int:
        return sum(len(v) for v in texts)
