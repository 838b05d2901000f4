import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from base.CLIManager import CLIManager
from module.Config import Config
from tests.module.file.conftest import SCRIPT

INPUT = "/workspace/input"
OUTPUT = "/workspace/output"


@pytest.fixture
def project(fs, monkeypatch: pytest.MonkeyPatch) -> Config:
    del fs
    monkeypatch.setattr(
        "module.File.RENPY.TextHelper.get_encoding", lambda **kwargs: "utf-8"
    )

    path = Path(INPUT) / "tl" / "french" / "script.rpy"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(SCRIPT, encoding="utf-8")

    config = Config()
    config.renpy_language = "french"
    config.input_folder = INPUT
    config.output_folder = OUTPUT
    return config


class TestCLIManagerParser:
    def test_export_and_import_are_exclusive(self) -> None:
        parser = CLIManager().build_parser()

        with pytest.raises(SystemExit):
            parser.parse_args(["--export", "a.json", "--import", "b.json"])

    def test_import_uses_dedicated_dest(self) -> None:
        args = CLIManager().build_parser().parse_args(["--import", "b.json"])

        assert args.import_path == "b.json"
        assert args.export is None


class TestCLIManagerRun:
    def test_missing_input_returns_error(self, project: Config, logger: MagicMock) -> None:
        code = CLIManager().run(["--input", "/workspace/missing"], config=project)

        assert code == 1
        assert logger.error.call_count == 1

    def test_summary_prints_counts(self, project: Config, logger: MagicMock) -> None:
        code = CLIManager().run([], config=project)

        assert code == 0
        printed = [call.args[0] for call in logger.print.call_args_list]
        assert printed == ["tl/french/script.rpy: 4", "Total: 4"]

    def test_language_flag_overrides_config(self, project: Config, logger: MagicMock) -> None:
        code = CLIManager().run(["--language", "german"], config=project)

        assert code == 0
        assert project.renpy_language == "german"
        printed = [call.args[0] for call in logger.print.call_args_list]
        assert printed[-1] == "Total: 0"

    def test_export_writes_json(self, project: Config) -> None:
        code = CLIManager().run(["--export", "/workspace/export.json"], config=project)

        assert code == 0
        data = json.loads(Path("/workspace/export.json").read_text(encoding="utf-8"))
        assert [v["src"] for v in data["tl/french/script.rpy"]] == [
            "Hello",
            "After a wonderful night.",
            "Yes",
            "Maybe",
        ]

    def test_import_fills_output(self, project: Config) -> None:
        Path("/workspace/import.json").write_text(
            json.dumps(
                {"tl/french/script.rpy": ["Bonjour", "Après une nuit merveilleuse.", "Oui", "Peut-être"]},
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )

        code = CLIManager().run(["--import", "/workspace/import.json"], config=project)

        assert code == 0
        output = Path(OUTPUT, "tl", "french", "script.rpy").read_text(encoding="utf-8")
        assert '    sh_i neutral "Bonjour"' in output
        assert '    n "Après une nuit merveilleuse."' in output
        assert '    new "Oui"' in output
        assert '    new "Peut-être"' in output

    def test_import_missing_json_returns_error(self, project: Config, logger: MagicMock) -> None:
        code = CLIManager().run(["--import", "/workspace/absent.json"], config=project)

        assert code == 1
        assert logger.error.call_count == 1

    def test_config_expert_mode_is_applied(self, project: Config, logger: MagicMock) -> None:
        project.expert_mode = True

        CLIManager().run([], config=project)

        logger.set_expert_mode.assert_called_once_with(True)
