import logging
import os
import threading
import traceback
from logging.handlers import TimedRotatingFileHandler
from typing import Self

from rich.console import Console
from rich.logging import RichHandler


class LogManager:

    # 日志目录
    LOG_DIR = "./log"

    # 单例锁
    LOCK = threading.Lock()

    def __init__(self) -> None:
        super().__init__()

        # 专家模式
        self.expert_mode: bool = False

        # 控制台实例
        self.console = Console()

        # 文件日志实例
        self.file_logger = logging.getLogger("renpyfiller_file")
        self.file_logger.propagate = False
        self.file_logger.setLevel(logging.DEBUG)
        if not self.file_logger.handlers:
            try:
                os.makedirs(__class__.LOG_DIR, exist_ok=True)
                handler = TimedRotatingFileHandler(
                    os.path.join(__class__.LOG_DIR, "app.log"),
                    when="midnight",
                    interval=1,
                    encoding="utf-8",
                    backupCount=3,
                )
                handler.setFormatter(
                    logging.Formatter(
                        "[%(asctime)s] [%(levelname)s] %(message)s",
                        datefmt="%Y-%m-%d %H:%M:%S",
                    )
                )
                self.file_logger.addHandler(handler)
            except OSError:
                # 只读目录下仍然保留控制台输出
                self.file_logger.addHandler(logging.NullHandler())

        # 控制台日志实例
        self.console_logger = logging.getLogger("renpyfiller_console")
        self.console_logger.propagate = False
        self.console_logger.setLevel(logging.INFO)
        if not self.console_logger.handlers:
            self.console_logger.addHandler(
                RichHandler(
                    console=self.console,
                    markup=False,
                    show_path=False,
                    rich_tracebacks=True,
                    log_time_format="[%X]",
                    omit_repeated_times=False,
                )
            )

    @classmethod
    def get(cls) -> Self:
        with cls.LOCK:
            if getattr(cls, "__instance__", None) is None:
                cls.__instance__ = cls()

        return cls.__instance__

    # 设置专家模式
    def set_expert_mode(self, expert_mode: bool) -> None:
        self.expert_mode = expert_mode
        self.console_logger.setLevel(logging.DEBUG if expert_mode else logging.INFO)

    def is_expert_mode(self) -> bool:
        return self.expert_mode

    def print(
        self, msg: str, e: Exception = None, file: bool = True, console: bool = True
    ) -> None:
        msg_e, msg_console = self.build(msg, e)
        if file:
            self.file_logger.info(msg_e)
        if console:
            self.console.print(msg_console, markup=False, highlight=False)

    def debug(
        self, msg: str, e: Exception = None, file: bool = True, console: bool = True
    ) -> None:
        self.log(logging.DEBUG, msg, e, file, console)

    def info(
        self, msg: str, e: Exception = None, file: bool = True, console: bool = True
    ) -> None:
        self.log(logging.INFO, msg, e, file, console)

    def warning(
        self, msg: str, e: Exception = None, file: bool = True, console: bool = True
    ) -> None:
        self.log(logging.WARNING, msg, e, file, console)

    def error(
        self, msg: str, e: Exception = None, file: bool = True, console: bool = True
    ) -> None:
        self.log(logging.ERROR, msg, e, file, console)

    def log(
        self, level: int, msg: str, e: Exception | None, file: bool, console: bool
    ) -> None:
        msg_file, msg_console = self.build(msg, e)
        if file:
            self.file_logger.log(level, msg_file)
        if console:
            self.console_logger.log(level, msg_console)

    # 文件日志总是带上堆栈，控制台只在专家模式下带上堆栈
    def build(self, msg: str, e: Exception | None) -> tuple[str, str]:
        if e is None:
            return msg, msg

        msg_file = f"{msg}\n{self.get_trackback(e)}\n"
        if self.is_expert_mode():
            return msg_file, msg_file
        else:
            return msg_file, f"{msg} {e}"

    def get_trackback(self, e: Exception) -> str:
        return f"{e}\n{(''.join(traceback.format_exception(None, e, e.__traceback__))).strip()}"
