from __future__ import annotations

import pytest

from module.Config import Config

SCRIPT_LINES = [
    "# TODO: Translation updated at 2024-01-01 10:00",
    "",
    "# game/script.rpy:10",
    "translate french block_1:",
    "",
    '    # sh_i neutral "Hello"',
    '    sh_i neutral ""',
    "",
    "# game/script.rpy:12",
    "translate french block_2:",
    "",
    "    # nvl clear",
    '    # n "After a wonderful night."',
    "    nvl clear",
    '    n ""',
    "",
    "# game/script.rpy:14",
    "translate french block_3:",
    "",
    '    # e "Already done"',
    '    e "Déjà fait"',
    "",
    "translate french strings:",
    "",
    "    # game/script.rpy:307",
    '    old "Yes"',
    '    new ""',
    "",
    "    # game/script.rpy:308",
    '    old "No"',
    '    new "Non"',
    "",
    "    # game/script.rpy:309",
    '    old "Maybe"',
    '    new ""',
    "",
]

SCRIPT = "\n".join(SCRIPT_LINES)


@pytest.fixture
def script() -> str:
    return SCRIPT


@pytest.fixture
def config() -> Config:
    cfg = Config()
    cfg.target_language = "FR"
    cfg.renpy_language = "french"
    return cfg
