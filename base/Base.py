from base.LogManager import LogManager


class Base:

    # 构造函数
    def __init__(self) -> None:
        pass

    # PRINT
    def print(
        self, msg: str, e: Exception = None, file: bool = True, console: bool = True
    ) -> None:
        LogManager.get().print(msg, e, file, console)

    # DEBUG
    def debug(
        self, msg: str, e: Exception = None, file: bool = True, console: bool = True
    ) -> None:
        LogManager.get().debug(msg, e, file, console)

    # INFO
    def info(
        self, msg: str, e: Exception = None, file: bool = True, console: bool = True
    ) -> None:
        LogManager.get().info(msg, e, file, console)

    # ERROR
    def error(
        self, msg: str, e: Exception = None, file: bool = True, console: bool = True
    ) -> None:
        LogManager.get().error(msg, e, file, console)

    # WARNING
    def warning(
        self, msg: str, e: Exception = None, file: bool = True, console: bool = True
    ) -> None:
        LogManager.get().warning(msg, e, file, console)
