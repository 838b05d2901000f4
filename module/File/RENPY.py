import codecs
import os
from typing import Any

from base.Base import Base
from module.Config import Config
from module.File.RenPy.RenPyAst import ScanResult
from module.File.RenPy.RenPyRewriter import RenPyRewriter
from module.File.RenPy.RenPyScanner import RenPyScanner
from module.Text.TextHelper import TextHelper
from module.Translator.Translator import Translator
from module.Translator.TranslatorErrors import TranslatorError
from module.Translator.TranslatorErrors import TranslatorLengthError
from module.Utils.JSONTool import JSONTool


class RENPY(Base):

    EXTENSION = ".rpy"

    def __init__(self, config: Config, translator: Translator | None = None) -> None:
        super().__init__()

        # 初始化
        self.config = config
        self.translator = translator
        self.target_language: str = config.target_language
        self.renpy_language: str | None = config.get_renpy_language()
        self.scanner = RenPyScanner(self.renpy_language)
        self.rewriter = RenPyRewriter(self.renpy_language)

    # 收集文件
    def collect_paths(self, input_path: str) -> list[str]:
        if os.path.isfile(input_path):
            if input_path.lower().endswith(__class__.EXTENSION):
                return [input_path]
            return []

        paths: list[str] = []
        for root, _, files in os.walk(input_path):
            paths.extend(
                f"{root}/{file}".replace("\\", "/")
                for file in files
                if file.lower().endswith(__class__.EXTENSION)
            )

        return sorted(paths)

    # 获取相对路径
    def get_rel_path(self, abs_path: str, input_path: str) -> str:
        base_path = input_path
        if os.path.isfile(input_path):
            base_path = os.path.dirname(input_path)

        return os.path.relpath(abs_path, base_path).replace("\\", "/")

    # 读取，同时返回写回时使用的编码
    def read_file(self, abs_path: str) -> tuple[str, str]:
        with open(abs_path, "rb") as reader:
            content = reader.read()

        encoding = TextHelper.get_encoding(content=content, add_sig_to_utf8=True)
        text = content.decode(encoding)

        # utf-8-sig 解码时会去掉 BOM，写回时只在原文件带有 BOM 时恢复
        if codecs.lookup(encoding).name == "utf-8-sig" and not content.startswith(
            codecs.BOM_UTF8
        ):
            encoding = "utf-8"

        return text, encoding

    def read_text(self, abs_path: str) -> str:
        return self.read_file(abs_path)[0]

    # 写入，换行符保持原样，未配置输出编码时沿用原文件编码
    def write_text(self, abs_path: str, text: str, encoding: str = "utf-8") -> None:
        if self.config.output_encoding != "":
            encoding = self.config.output_encoding

        os.makedirs(os.path.dirname(os.path.abspath(abs_path)), exist_ok=True)
        with open(abs_path, "w", encoding=encoding, newline="") as writer:
            writer.write(text)

    # 回填译文
    def fill_text(
        self, text: str, result: ScanResult, translations: list[str]
    ) -> tuple[str, int]:
        filled_lines = self.rewriter.create_filled_lines(result.fills, translations)
        return self.rewriter.rewrite(text, filled_lines, self.scanner.extract_command)

    # 翻译单个文本
    def translate_text(self, text: str) -> tuple[str, int]:
        result = self.scanner.scan(text)
        if len(result) == 0:
            return text, 0

        if self.translator is None:
            raise TranslatorError("No translator configured")

        self.debug(
            f"Translating {len(result.texts)} lines "
            f"({Translator.get_character_count(result.texts)} characters) "
            f"to {self.target_language}"
        )
        translations = self.translator.translate(result.texts, self.target_language)
        if len(translations) != len(result.texts):
            raise TranslatorLengthError(len(result.texts), len(translations))

        return self.fill_text(text, result, translations)

    # 翻译文件或目录
    def translate_path(self, input_path: str, output_path: str) -> dict[str, int]:
        counts: dict[str, int] = {}
        for abs_path in self.collect_paths(input_path):
            rel_path = self.get_rel_path(abs_path, input_path)
            try:
                text, encoding = self.read_file(abs_path)
                text, count = self.translate_text(text)
                self.write_text(os.path.join(output_path, rel_path), text, encoding)
            except (TranslatorError, OSError, UnicodeError) as e:
                self.error(f"Failed to translate {rel_path}", e)
                continue

            counts[rel_path] = count
            self.info(f"{rel_path}: {count} lines filled")

        return counts

    # 导出待翻译文本
    def export_texts(self, input_path: str) -> dict[str, list[dict[str, str]]]:
        data: dict[str, list[dict[str, str]]] = {}
        for abs_path in self.collect_paths(input_path):
            rel_path = self.get_rel_path(abs_path, input_path)
            try:
                texts = self.scanner.extract_texts(self.read_text(abs_path))
            except (OSError, UnicodeDecodeError) as e:
                self.error(f"Failed to read {rel_path}", e)
                continue

            if len(texts) > 0:
                data[rel_path] = [{"src": v, "dst": ""} for v in texts]

        return data

    def save_export(self, input_path: str, json_path: str) -> int:
        data = self.export_texts(input_path)
        os.makedirs(os.path.dirname(os.path.abspath(json_path)), exist_ok=True)
        JSONTool.save_file(json_path, data, indent=4)

        total = sum(len(v) for v in data.values())
        self.info(f"Exported {total} lines from {len(data)} files to {json_path}")
        return total

    def load_import(self, json_path: str) -> dict[str, list[Any]]:
        data = JSONTool.load_file(json_path, repair=True)
        if not isinstance(data, dict):
            self.warning(f"Ignoring {json_path}: top level is not an object")
            return {}

        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, list)}

    # 条目可以是译文字符串，也可以是导出的 {"src": ..., "dst": ...}
    def get_translations(
        self, rel_path: str, entries: list[Any], texts: list[str]
    ) -> list[str]:
        translations: list[str] = []
        for i, entry in enumerate(entries):
            if isinstance(entry, str):
                translations.append(entry)
                continue

            if not isinstance(entry, dict):
                translations.append("")
                continue

            src = entry.get("src")
            if isinstance(src, str) and i < len(texts) and src != texts[i]:
                self.warning(f"{rel_path}: line {i} source changed since export")

            dst = entry.get("dst")
            translations.append(dst if isinstance(dst, str) else "")

        return translations

    # 导入译文
    def apply_translations(
        self, input_path: str, output_path: str, data: dict[str, list[Any]]
    ) -> dict[str, int]:
        counts: dict[str, int] = {}
        for abs_path in self.collect_paths(input_path):
            rel_path = self.get_rel_path(abs_path, input_path)
            try:
                text, encoding = self.read_file(abs_path)
                count = 0
                entries = data.get(rel_path)
                if entries is not None:
                    text, count = self.apply_entries(rel_path, text, entries)
                self.write_text(os.path.join(output_path, rel_path), text, encoding)
            except (OSError, UnicodeError) as e:
                self.error(f"Failed to write {rel_path}", e)
                continue

            counts[rel_path] = count

        return counts

    def apply_entries(
        self, rel_path: str, text: str, entries: list[Any]
    ) -> tuple[str, int]:
        result = self.scanner.scan(text)
        translations = self.get_translations(rel_path, entries, result.texts)

        # 空译文也参与回填（写回 ""），保证按指令匹配时不会错位
        filled_lines = self.rewriter.create_filled_lines(result.fills, translations)
        text, _ = self.rewriter.rewrite(text, filled_lines, self.scanner.extract_command)

        return text, len(result) - len(self.scanner.scan(text))
