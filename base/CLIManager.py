import argparse
import os
from typing import Self

from base.Base import Base
from base.LogManager import LogManager
from module.Config import Config
from module.File.RENPY import RENPY


class CLIManager(Base):

    def __init__(self) -> None:
        super().__init__()

    @classmethod
    def get(cls) -> Self:
        if getattr(cls, "__instance__", None) is None:
            cls.__instance__ = cls()

        return cls.__instance__

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="renpyfiller",
            description="Extract and fill untranslated lines of Ren'Py translation scripts.",
        )
        parser.add_argument("--input", type=str, help="a .rpy file or a folder")
        parser.add_argument("--output", type=str, help="output folder")
        parser.add_argument("--config", type=str, help="config file path")
        parser.add_argument("--language", type=str, help="Ren'Py language name, e.g. french")
        group = parser.add_mutually_exclusive_group()
        group.add_argument("--export", type=str, metavar="JSON", help="export texts to translate")
        group.add_argument("--import", type=str, metavar="JSON", dest="import_path", help="apply a translated export")
        return parser

    def run(self, argv: list[str] | None = None, config: Config | None = None) -> int:
        args = self.build_parser().parse_args(argv)

        if config is None:
            config = Config().load(args.config)
        LogManager.get().set_expert_mode(config.expert_mode)
        if isinstance(args.language, str) and args.language != "":
            config.renpy_language = args.language

        input_path: str = args.input if args.input is not None else config.input_folder
        output_path: str = args.output if args.output is not None else config.output_folder
        if not os.path.exists(input_path):
            self.error(f"Input path does not exist: {input_path}")
            return 1

        handler = RENPY(config)
        try:
            if args.export is not None:
                handler.save_export(input_path, args.export)
            elif args.import_path is not None:
                data = handler.load_import(args.import_path)
                counts = handler.apply_translations(input_path, output_path, data)
                self.info(f"Filled {sum(counts.values())} lines in {len(counts)} files")
            else:
                self.print_summary(handler, input_path)
        except (OSError, ValueError) as e:
            self.error("Command failed", e)
            return 1

        return 0

    # 只扫描，不写入
    def print_summary(self, handler: RENPY, input_path: str) -> None:
        total = 0
        for abs_path in handler.collect_paths(input_path):
            rel_path = handler.get_rel_path(abs_path, input_path)
            count = len(handler.scanner.scan(handler.read_text(abs_path)))
            total = total + count
            self.print(f"{rel_path}: {count}")

        self.print(f"Total: {total}")
