class TranslatorError(Exception):
    """翻译服务失败（网络、鉴权、配额等），由调用方决定是否跳过当前文件。"""


class TranslatorLengthError(TranslatorError):
    """翻译服务返回的条目数与请求不一致，无法按位置对应。"""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected {expected} translations, got {actual}")

        self.expected = expected
        self.actual = actual
