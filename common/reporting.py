import logging
from dataclasses import dataclass, field
from typing import Protocol


class Reporter(Protocol):
    def info(self, msg: str) -> None: ...

    def warning(self, msg: str) -> None: ...


@dataclass(frozen=True, slots=True)
class PrintReporter:
    def info(self, msg: str) -> None:
        print(msg)

    def warning(self, msg: str) -> None:
        print(f"WARNING: {msg}")


@dataclass(frozen=True, slots=True)
class NullReporter:
    def info(self, msg: str) -> None:
        return

    def warning(self, msg: str) -> None:
        return


@dataclass(frozen=True, slots=True)
class LoggingReporter:
    """Routes pipeline messages through the stdlib logging tree."""

    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("benchprep")
    )

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)
