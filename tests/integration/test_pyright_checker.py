# tests/integration/test_pyright_checker.py
import json
import sys
import pytest
from unittest.mock import AsyncMock, call, patch
from pyright_review.checkers.workspace import Workspace
from pyright_review.checkers.base import ReportParseError
from pyright_review.checkers.pyright import CommandError, PyrightChecker, parse_report, run_command


OUTPUT = json.dumps({
    "version": "1.1.354",
    "generalDiagnostics": [
        {"file": "/w/proj/proj/main.py", "severity": "warning", "message": "Unused variable"}
    ],
    "summary": {"filesAnalyzed": 1, "errorCount": 0, "warningCount": 1, "informationCount": 0, "timeInSec": 0.2},
})


@pytest.mark.asyncio
async def test_run_passes_files_and_ignores_exit_code():
    with patch("pyright_review.checkers.pyright.run_command", AsyncMock(return_value=(1, OUTPUT))) as mock_run:
        report = await PyrightChecker().run(["main.py", "pkg/a.py"])

    mock_run.assert_called_once_with("pyright", "--outputjson", "main.py", "pkg/a.py", check=False)
    assert report.summary.warning_count == 1


@pytest.mark.asyncio
async def test_run_without_paths_checks_whole_project():
    with patch("pyright_review.checkers.pyright.run_command", AsyncMock(return_value=(0, OUTPUT))) as mock_run:
        await PyrightChecker().run(None)

    mock_run.assert_called_once_with("pyright", "--outputjson", check=False)


@pytest.mark.asyncio
async def test_install_pins_version():
    with patch("pyright_review.checkers.pyright.run_command", AsyncMock(return_value=(0, ""))) as mock_run:
        await PyrightChecker(version="1.1.354").install()

    mock_run.assert_called_once_with("npm", "install", "-g", "pyright@1.1.354")


def test_parse_report_rejects_garbage():
    with pytest.raises(ReportParseError):
        parse_report("Error: pyright crashed")


def test_parse_report_rejects_wrong_shape():
    with pytest.raises(ReportParseError):
        parse_report(json.dumps({"generalDiagnostics": [], "summary": {"errorCount": "many"}}))


@pytest.mark.asyncio
async def test_run_command_returns_stdout():
    code, output = await run_command(sys.executable, "-c", "print('hello')")

    assert code == 0
    assert output.strip() == "hello"


@pytest.mark.asyncio
async def test_run_command_raises_on_failure():
    with pytest.raises(CommandError):
        await run_command(sys.executable, "-c", "import sys; sys.exit(3)")


@pytest.mark.asyncio
async def test_checkout_fetches_then_checks_out():
    with patch("pyright_review.checkers.workspace.run_command", AsyncMock(return_value=(0, ""))) as mock_run:
        await Workspace().checkout("base-sha")

    assert mock_run.call_args_list == [
        call("git", "fetch", "--no-tags", "--depth=1", "origin", "base-sha"),
        call("git", "checkout", "--detach", "base-sha"),
    ]


@pytest.mark.asyncio
async def test_current_commit_reads_head():
    with patch("pyright_review.checkers.workspace.run_command", AsyncMock(return_value=(0, "abc123\n"))) as mock_run:
        assert await Workspace().current_commit() == "abc123"

    mock_run.assert_called_once_with("git", "rev-parse", "HEAD")


@pytest.mark.asyncio
async def test_restore_checks_out_without_fetching():
    with patch("pyright_review.checkers.workspace.run_command", AsyncMock(return_value=(0, ""))) as mock_run:
        await Workspace().restore("merge-sha")

    assert mock_run.call_args_list == [call("git", "checkout", "--detach", "merge-sha")]
