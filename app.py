import sys
import traceback

from base.CLIManager import CLIManager
from base.LogManager import LogManager


# 捕获全局异常
def excepthook(exc_type, exc_value, exc_traceback) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    LogManager.get().error(
        f"Crashed\n{''.join(traceback.format_exception(exc_type, exc_value, exc_traceback)).strip()}"
    )


def main(argv: list[str] | None = None) -> int:
    sys.excepthook = excepthook
    return CLIManager.get().run(argv)


if __name__ == "__main__":
    sys.exit(main())
