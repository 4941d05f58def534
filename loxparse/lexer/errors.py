"""
Diagnostics shared by the loxparse front end.

Defines the diagnostic record, the reporting interface the parser talks to,
and a call-local collector that hosts can use as that interface.

Author: xwest
"""

from typing import List, Optional, Protocol
from dataclasses import dataclass

from .tokens import SourceLocation, Token


@dataclass
class Diagnostic:
    """A single reported problem (error, warning, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info"
    where: str = ""
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"[line {self.location.line}] {self.severity.capitalize()}{self.where}: {self.message}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class ErrorReporter(Protocol):
    """
    Diagnostics sink consumed by the parser.

    The parser calls ``report`` once per problem and never formats output
    itself; rendering and delivery belong to the implementation.
    """

    def report(self, token: Token, message: str) -> None:
        ...


class DiagnosticCollector:
    """
    Default reporter that records diagnostics in memory.

    One collector per parse keeps parses free of shared mutable state.
    """

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def report(self, token: Token, message: str) -> None:
        """Record an error located at ``token``."""
        where = " at end" if token.is_eof else f" at '{token.lexeme}'"
        self.diagnostics.append(Diagnostic(
            message=message,
            location=token.location,
            severity="error",
            where=where,
        ))

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == "error"]

    def has_errors(self) -> bool:
        return bool(self.errors)

    def clear(self) -> None:
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __str__(self) -> str:
        return "\n".join(str(d) for d in self.diagnostics)
