"""Utility functions for logging."""

from pathlib import Path


def _log_debug(message: str, log_file: Path | None = None) -> None:
    """Append a simple debug line to the tinycli debug log.

    This is intentionally very small and best-effort so it never interferes
    with the host program.  It records dispatch decisions so a host can see
    which command a given argv resolved to.

    Writes timestamped lines to *log_file*, or to the path from the resolved
    settings (``TINYCLI_LOG_FILE``) when *log_file* is None.  Does nothing
    when no path is configured.  Any IO error is silently ignored.
    """
    try:
        import time

        if log_file is None:
            from ..core.config import log_path

            log_file = log_path()
        if log_file is None:
            return
        log_file.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
