from pathlib import Path


class PrepError(Exception):
    """Base class for every failure raised by the prep pipeline."""


class ConfigError(PrepError, ValueError):
    pass


class MissingInputError(PrepError, FileNotFoundError):
    def __init__(self, path: Path | str, detail: str = "") -> None:
        self.path = Path(path)
        msg = f"Missing input: {self.path}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class MalformedRowError(PrepError, ValueError):
    def __init__(self, path: Path, lineno: int, reason: str) -> None:
        self.path = path
        self.lineno = lineno
        super().__init__(f"{path}:{lineno}: {reason}")


class UnsortedInputError(PrepError, ValueError):
    pass


class EmptyInputError(PrepError, ValueError):
    pass


class DependencyError(PrepError):
    """An upstream stage of the same (workers, size) pair did not produce output."""
