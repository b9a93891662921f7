# src/pyright_review/checkers/__init__.py
from .base import ReportParseError, TypeChecker
from .pyright import CommandError, PyrightChecker, parse_report

__all__ = ["ReportParseError", "TypeChecker", "CommandError", "PyrightChecker", "parse_report"]
