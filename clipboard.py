import subprocess
from typing import Optional, Sequence

from logger import get_logger

log = get_logger(__name__)


class ClipboardTransport:
    """Moves plain text to and from the system clipboard.

    Text is piped through the configured commands (for example `wl-copy` /
    `wl-paste`). Without a command the text stays in an in-process register.
    Transport failures are logged and otherwise ignored.
    """

    def __init__(
        self,
        copy_command: Optional[Sequence[str]] = None,
        paste_command: Optional[Sequence[str]] = None,
        timeout: float = 5.0,
    ):
        self.copy_command = list(copy_command) if copy_command else None
        self.paste_command = list(paste_command) if paste_command else None
        self.timeout = timeout
        self.register = ""

    def copy(self, text: str) -> bool:
        if not text:
            return False
        self.register = text
        if not self.copy_command:
            return True
        try:
            subprocess.run(
                self.copy_command,
                input=text,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            log.debug("Clipboard copy via %s failed: %s", self.copy_command, e)
            return False
        return True

    def paste(self) -> str:
        if not self.paste_command:
            return self.register
        try:
            result = subprocess.run(
                self.paste_command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            log.debug("Clipboard paste via %s failed: %s", self.paste_command, e)
            return self.register
        return result.stdout or ""
