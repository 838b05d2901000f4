import codecs
import json
from pathlib import Path
from typing import Any

import json_repair
import orjson


class JSONTool:
    """JSON helpers shared by config and the export/import workflow.

    - orjson first, stdlib as fallback for inputs orjson rejects.
    - json_repair for hand-edited translation documents.
    """

    @classmethod
    def loads(cls, obj: str | bytes) -> Any:
        if isinstance(obj, bytes) and obj.startswith(codecs.BOM_UTF8):
            obj = obj.removeprefix(codecs.BOM_UTF8)
        try:
            return orjson.loads(obj)
        except orjson.JSONDecodeError:
            return json.loads(obj)

    @classmethod
    def repair_loads(cls, obj: str | bytes) -> Any:
        if isinstance(obj, bytes):
            obj = obj.removeprefix(codecs.BOM_UTF8).decode("utf-8", errors="replace")
        try:
            return orjson.loads(obj)
        except orjson.JSONDecodeError:
            return json_repair.loads(obj, skip_json_loads=True)

    @classmethod
    def dumps_bytes(cls, obj: Any, *, indent: int = 0) -> bytes:
        """Serialize to UTF-8 bytes.

        Lone surrogates make orjson raise TypeError, in that case the stdlib
        encoder writes them back as escapes.
        """
        option = orjson.OPT_INDENT_2 if indent == 2 else None
        if indent in (0, 2):
            try:
                return orjson.dumps(obj, option=option)
            except TypeError as e:
                try:
                    text = json.dumps(
                        obj,
                        ensure_ascii=False,
                        indent=indent if indent > 0 else None,
                        separators=(",", ":") if indent == 0 else None,
                    )
                except TypeError:
                    raise e from None
                return text.encode("utf-8", errors="backslashreplace")

        text = json.dumps(obj, ensure_ascii=False, indent=indent)
        return text.encode("utf-8", errors="backslashreplace")

    @classmethod
    def load_file(cls, path: str | Path, *, repair: bool = False) -> Any:
        with open(path, "rb") as reader:
            content = reader.read()

        if repair:
            return cls.repair_loads(content)
        return cls.loads(content)

    @classmethod
    def save_file(cls, path: str | Path, obj: Any, *, indent: int = 4) -> None:
        # Serialize before opening so a failure never truncates the target.
        data = cls.dumps_bytes(obj, indent=indent)

        with open(path, "wb") as writer:
            writer.write(data)
