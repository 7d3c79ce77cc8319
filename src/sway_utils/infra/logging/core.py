from __future__ import annotations

"""
Logging Core.

Idempotent setup of the root logger for tools embedding sway_utils. Records
go through a QueueHandler and are written by a QueueListener thread, so a
slow log file never stalls a directory scan.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from sway_utils.infra.logging.config import _LEVEL_MAP, LoggingConfig
from sway_utils.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_sway_utils_configured"
_QUEUE_LISTENER_ATTR: str = "_sway_utils_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, using non-blocking I/O.

    Later calls are no-ops unless 'force' is set, in which case the handlers
    and listener created by a previous call are replaced. Handlers installed
    by anyone else are left untouched.

    If no requested handler can be built (e.g. the log file cannot be
    opened and the console is disabled) or the listener fails to start, a
    plain stderr handler is attached instead and the root logger is left
    unconfigured, so a later call retries.

    Args:
        cfg: Logging settings.
        force: Re-create handlers even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    _remove_our_handlers(root)
    _stop_existing_listener(root)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        handlers_list.append(
            _create_console_handler(level_int, logging.Formatter(cfg.console_fmt))
        )

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        if cfg.log_file:
            return _install_fallback(root, level_int)
        # Nothing requested: leave the host application's handlers alone
        setattr(root, _CONFIGURED_FLAG_ATTR, True)
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    try:
        listener.start()
    except Exception:
        for h in handlers_list:
            h.close()
        return _install_fallback(root, level_int)

    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)

    return root


def get_logger(name: str) -> logging.Logger:
    """Return the named logger (usually called with __name__)."""
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a level name to its numeric constant, defaulting to INFO."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating one that was already stopped.

    QueueListener.stop() fails once its thread has been joined, which
    happens when both a forced reconfiguration and atexit stop it.
    """
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()


def _install_fallback(root: logging.Logger, level_int: int) -> logging.Logger:
    """Attach an emergency stderr handler after a failed configuration."""
    sh = _create_console_handler(
        level_int, logging.Formatter("FALLBACK | %(levelname)s | %(name)s | %(message)s")
    )
    root.addHandler(sh)
    root.warning("Logging infrastructure failed. Switched to emergency console.")
    return root
