# src/pyright_review/checkers/base.py
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pyright_review.models.report import Report


class ReportParseError(Exception):
    """Checker output could not be read as a report."""


class TypeChecker(ABC):
    extensions: tuple[str, ...] = ()

    async def install(self) -> None:
        """Make the checker available on the runner. Nothing to do by default."""

    @abstractmethod
    async def run(self, paths: Sequence[str] | None = None) -> Report:
        """Check the given files, or the whole project when paths is None."""
        pass
