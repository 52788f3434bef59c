"""File opener for committed entries.

Runs ``$EDITOR`` on the chosen path after the navigator has left raw mode.
Returns an error message string instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def launch_editor(target: Path) -> str | None:
    editor_env = os.environ.get("VISUAL", "").strip() or os.environ.get("EDITOR", "").strip()
    if not editor_env:
        return "Cannot open: neither $VISUAL nor $EDITOR is set."
    cmd = shlex.split(editor_env)
    if not cmd:
        return "Cannot open: $EDITOR is empty."

    logger.debug("opening %s with %s", target, cmd)
    try:
        subprocess.run([*cmd, str(target)], check=False)
    except OSError as exc:
        return f"Failed to launch editor: {exc}"
    return None


__all__ = ["launch_editor"]
