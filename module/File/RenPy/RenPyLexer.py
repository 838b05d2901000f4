import re

INDENT = "    "
STRINGS_COMMAND = "new"

RE_COMMENT_PREFIX = re.compile(r"^#\s*")
RE_COMMAND = re.compile(r'^([^"]+)\s*"')
RE_TEXT = re.compile(r'"(.*)"')
RE_OLD_TEXT = re.compile(r'old\s+"([^"]+)"')
# Known Ren'Py escapes stay as-is
RE_ESCAPE_TOKEN = re.compile(r'\\[\\"\'nt%]|\\|"|\n')
RE_ANY_LANGUAGE = r"[A-Za-z0-9_]+"


def build_language_pattern(language: str | None) -> str:
    if language is None or language == "":
        return RE_ANY_LANGUAGE
    return re.escape(language)


def is_translate_header(line: str, language: str | None) -> bool:
    lang = build_language_pattern(language)
    return re.match(rf"^translate\s+{lang}(?![A-Za-z0-9_])", line.strip()) is not None


def is_strings_header(line: str, language: str | None) -> bool:
    lang = build_language_pattern(language)
    return re.match(rf"^translate\s+{lang}\s+strings\s*:", line.strip()) is not None


def is_dialogue_start(lines: list[str], i: int, language: str | None) -> bool:
    if i + 1 >= len(lines):
        return False
    if not lines[i].strip().startswith("# "):
        return False

    header = lines[i + 1]
    return is_translate_header(header, language) and not is_strings_header(
        header, language
    )


def get_stripped(lines: list[str], i: int) -> str:
    if i < 0 or i >= len(lines):
        return ""
    return lines[i].strip()


def extract_command(line: str) -> str:
    cleaned = RE_COMMENT_PREFIX.sub("", line.strip(), count=1)

    m = RE_COMMAND.match(cleaned)
    if m is not None:
        return m.group(1).strip()

    # Lines such as "nvl clear" carry no quote at all.
    tokens = cleaned.split()
    if len(tokens) > 0:
        return tokens[0]

    return ""


def extract_text(line: str) -> str:
    m = RE_TEXT.search(line)
    if m is None:
        return ""
    return m.group(1)


def extract_old_text(line: str) -> str:
    m = RE_OLD_TEXT.search(line.strip())
    if m is None:
        return ""
    return m.group(1)


def has_empty_slot(line: str) -> bool:
    return '""' in line


def is_empty_new_line(line: str) -> bool:
    stripped = line.strip()
    if not stripped.startswith('new "'):
        return False
    return stripped == 'new ""' or stripped.endswith('""')


def get_command_of_filled_line(filled_line: str) -> str:
    return filled_line.split('"', 1)[0].strip()


def escape_renpy_token(m: re.Match[str]) -> str:
    token = m.group(0)
    if token == "\\":
        return "\\\\"
    if token == '"':
        return '\\"'
    if token == "\n":
        return "\\n"
    return token


def escape_renpy_string(text: str) -> str:
    """Make a translation safe inside a double-quoted Ren'Py literal.

    Lone backslashes, quotes and newlines are escaped. Escapes already present
    in the translation (\\", \\\\, \\n ...) are kept.
    """
    return RE_ESCAPE_TOKEN.sub(escape_renpy_token, text)
