# src/pyright_review/checkers/pyright.py
import asyncio
import json
import logging
from collections.abc import Sequence
from pydantic import ValidationError
from .base import ReportParseError, TypeChecker
from pyright_review.models.report import Report


logger = logging.getLogger(__name__)


class CommandError(Exception):
    """An external command exited with a non-zero status."""


async def run_command(*args: str, check: bool = True) -> tuple[int, str]:
    """Run a command and return (exit code, stdout)."""
    logger.info(f"Running: {' '.join(args)}")
    process = await asyncio.create_subprocess_exec(
        *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    if check and process.returncode != 0:
        raise CommandError(
            f"{args[0]} exited with {process.returncode}: {stderr.decode(errors='replace').strip()}"
        )
    return process.returncode, stdout.decode(errors="replace")


def parse_report(output: str) -> Report:
    """Parse `pyright --outputjson` output, ignoring fields we do not use."""
    try:
        return Report.model_validate(json.loads(output))
    except json.JSONDecodeError as e:
        raise ReportParseError(f"Pyright output is not valid JSON: {e}") from e
    except ValidationError as e:
        raise ReportParseError(f"Pyright output does not match the report schema: {e}") from e


class PyrightChecker(TypeChecker):
    extensions = (".py", ".pyi")

    def __init__(self, version: str = "latest", executable: str = "pyright"):
        self.version = version
        self.executable = executable

    async def install(self) -> None:
        await run_command("npm", "install", "-g", f"pyright@{self.version}")

    async def run(self, paths: Sequence[str] | None = None) -> Report:
        # Pyright exits 1 when it reports errors, the JSON is still complete
        _, output = await run_command(
            self.executable, "--outputjson", *(paths or ()), check=False
        )
        logger.debug(f"Pyright output: {output}")
        report = parse_report(output)
        logger.info(
            f"Pyright: {report.summary.error_count} errors, "
            f"{report.summary.warning_count} warnings in {report.summary.files_analyzed} files"
        )
        return report
