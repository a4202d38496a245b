import os
import subprocess
import sys
from pathlib import Path

from common.reporting import NullReporter, Reporter


def _viewer_command(path: Path) -> list[str] | None:
    """
    argv for the platform viewer; None on Windows, where os.startfile is used.
    """
    if sys.platform == "darwin":
        return ["open", str(path)]
    if os.name == "nt":
        return None
    return ["xdg-open", str(path)]


def open_file(path: Path, *, reporter: Reporter | None = None) -> bool:
    """
    Best-effort, non-blocking: open a generated plot in the default viewer.
    Returns False (after reporting) instead of raising.
    """
    rep: Reporter = reporter if reporter is not None else NullReporter()

    if not path.is_file():
        rep.warning(f"nothing to open, file not found: {path}")
        return False

    try:
        cmd = _viewer_command(path)
        if cmd is None:
            getattr(os, "startfile")(str(path))  # type: ignore[misc]
        else:
            subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError as e:
        rep.warning(f"failed to open file: {path} ({e})")
        return False

    return True
