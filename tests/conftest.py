from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from base.LogManager import LogManager


@pytest.fixture(autouse=True)
def logger(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    # 测试期间不写日志文件
    mock = MagicMock()
    monkeypatch.setattr(LogManager, "__instance__", mock, raising=False)
    return mock
