import json
from pathlib import Path
from unittest.mock import patch

import pytest

from health_insight.config.settings import Settings
from health_insight.main import build_request, main, parse_args, run
from health_insight.policy.models import CallerRole


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_args(["--text", "Glucose 88"])
        assert args.text == "Glucose 88"
        assert args.file is None
        assert args.role is CallerRole.USER
        assert not args.json

    def test_role_is_case_insensitive(self) -> None:
        assert parse_args(["--role", "hc"]).role is CallerRole.HC

    def test_unknown_role_exits(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--role", "nurse"])

    def test_missing_file_exits_with_usage_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        missing = tmp_path / "absent.pdf"
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--file", str(missing)])
        assert exc_info.value.code == 2
        assert f"file not found: {missing}" in capsys.readouterr().err


class TestBuildRequest:
    def test_guesses_media_type_from_file_name(self, tmp_path: Path) -> None:
        path = tmp_path / "report.png"
        path.write_bytes(b"png")
        request = build_request(parse_args(["--file", str(path)]))
        assert request.file_bytes == b"png"
        assert request.file_media_type == "image/png"
        assert request.raw_text is None


class TestRun:
    @pytest.mark.asyncio
    async def test_prints_sanitized_report(
        self, settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = await run(parse_args(["--text", "Hemoglobin 11.4 g/dL"]), settings)
        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("📊 **Blood & Metabolic Panel**")

    @pytest.mark.asyncio
    async def test_json_output(
        self,
        settings: Settings,
        sample_pdf_bytes: bytes,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "report.pdf"
        path.write_bytes(sample_pdf_bytes)
        code = await run(parse_args(["--file", str(path), "--json"]), settings)
        payload = json.loads(capsys.readouterr().out)
        assert code == 0
        assert payload["succeeded"] is True
        assert len(payload["parameters"]) == 3

    @pytest.mark.asyncio
    async def test_analysis_error_goes_to_stderr(
        self, settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = await run(parse_args([]), settings)
        captured = capsys.readouterr()
        assert code == 1
        assert captured.out == ""
        assert "Report text or file is required." in captured.err

    @pytest.mark.asyncio
    async def test_unsupported_file_type(
        self, settings: Settings, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "scan.gif"
        path.write_bytes(b"GIF89a")
        code = await run(parse_args(["--file", str(path)]), settings)
        assert code == 1
        assert "image/gif" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_missing_api_key_is_reported_without_traceback(
        self, settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        settings.llm_provider = "openrouter"
        settings.llm_api_key = ""
        code = await run(parse_args(["--text", "Hemoglobin 11.4 g/dL"]), settings)
        assert code == 1
        assert "llm_api_key is required" in capsys.readouterr().err


class TestMain:
    def test_main_configures_logging_and_runs(
        self, settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with (
            patch("health_insight.main.Settings", return_value=settings),
            patch("health_insight.main.Log") as log,
        ):
            code = main(["--text", "Hemoglobin 11.4 g/dL", "--role", "ADMIN"])
        assert code == 0
        log.configure.assert_called_once_with(settings.log_level)
        assert "• **Hemoglobin**: 11.4 g/dL - LOW" in capsys.readouterr().out
