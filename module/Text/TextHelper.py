import charset_normalizer


class TextHelper:

    # 检测文本编码
    @classmethod
    def get_encoding(
        cls,
        path: str | None = None,
        content: bytes | None = None,
        add_sig_to_utf8: bool = True,
    ) -> str:
        encoding = "utf-8-sig"
        try:
            if path is not None:
                result = charset_normalizer.from_path(path).best()
            elif content is not None:
                result = charset_normalizer.from_bytes(content).best()
            else:
                result = None

            if result is not None:
                encoding = result.encoding
        except Exception:
            return "utf-8-sig"

        # ascii 是 utf-8 的子集，统一按 utf-8 处理
        if encoding.lower() in ("ascii", "utf_8", "utf-8"):
            return "utf-8-sig" if add_sig_to_utf8 else encoding

        return encoding
