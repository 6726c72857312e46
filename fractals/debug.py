import time
from pathlib import Path

DEBUG_LOG = Path(__file__).resolve().parent.parent / "debug.log"


def debug(msg: str) -> None:
    """Append a timestamped line to debug.log; a read-only install just skips it."""
    try:
        with DEBUG_LOG.open("a", encoding="utf-8") as f:
            ts = time.strftime("%H:%M:%S")
            f.write(f"[{ts}] {msg}\n")
    except OSError:
        pass


def clear_debug_log() -> None:
    try:
        DEBUG_LOG.write_text("", encoding="utf-8")
    except OSError:
        pass
