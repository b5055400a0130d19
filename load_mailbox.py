import threading
from typing import Optional, Tuple

from logger import get_logger

log = get_logger(__name__)


class LoadMailbox:
    """Single slot holding at most one pending (bytes, name) pair."""

    def __init__(self):
        self._lock = threading.Lock()
        self._slot: Optional[Tuple[bytes, str]] = None
        self.error: Optional[str] = None

    def put(self, data: bytes, name: str) -> bool:
        with self._lock:
            if self._slot is not None:
                return False
            self._slot = (data, name)
            return True

    def take(self) -> Optional[Tuple[bytes, str]]:
        with self._lock:
            item, self._slot = self._slot, None
            return item

    def fail(self, message: str):
        with self._lock:
            self.error = message

    def take_error(self) -> Optional[str]:
        with self._lock:
            msg, self.error = self.error, None
            return msg

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._slot is not None


def read_into(path: str, mailbox: LoadMailbox) -> bool:
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        log.error("Cannot read %s: %s", path, e)
        mailbox.fail(f"Load failed: {e}")
        return False
    if not mailbox.put(data, path):
        log.warning("Dropped load of %s: a load is already pending", path)
        mailbox.fail(f"Load of {path} skipped: another load is pending")
        return False
    return True


def start_background_read(path: str, mailbox: LoadMailbox) -> threading.Thread:
    t = threading.Thread(target=read_into, args=(path, mailbox), daemon=True)
    t.start()
    return t
