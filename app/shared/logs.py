# app/shared/logs.py
import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def configure_logging(level: str = "INFO") -> None:
    """Install a single stdout handler on the root logger (safe to call twice)."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(getattr(h, "_memo_notes", False) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._memo_notes = True  # marker so reconfiguring doesn't duplicate output
    root.addHandler(handler)
