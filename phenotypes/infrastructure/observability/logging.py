"""
Logging for applications that use phenotypes.

Records emitted while a cohort is processed carry a `cohort` attribute. The tag
lives in a context variable, so threads and asyncio tasks keep their own.
Handlers are attached to the `phenotypes` package logger only; the root
logger is left to the application.
"""

import contextvars
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler

from phenotypes.infrastructure.config.models import LoggingConfig

PACKAGE_LOGGER = "phenotypes"
NO_COHORT = "-"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [cohort=%(cohort)s] %(message)s"

cv_cohort: contextvars.ContextVar[str] = contextvars.ContextVar("cohort", default=NO_COHORT)


class CohortTagFilter(logging.Filter):
    """Set `record.cohort` from the current cohort context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.cohort = cv_cohort.get()
        return True


def current_cohort() -> str:
    return cv_cohort.get()


@contextmanager
def cohort_context(cohort_id: str | None) -> Iterator[None]:
    """
    Tag records emitted inside the block with `cohort_id`.

    Nested blocks restore the outer tag on exit. `None` leaves the current tag as is.
    """
    if cohort_id is None:
        yield
        return
    token = cv_cohort.set(str(cohort_id))
    try:
        yield
    finally:
        cv_cohort.reset(token)


def _is_ours(handler: logging.Handler) -> bool:
    return any(isinstance(f, CohortTagFilter) for f in handler.filters)


def _prepare(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(CohortTagFilter())
    return handler


def configure_logging(cfg: LoggingConfig | None = None) -> logging.Logger:
    """
    Attach a console handler (and a rotating file handler if `cfg.log_file` is set)
    to the `phenotypes` logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        cfg: Logging settings; defaults to `LoggingConfig()`

    Returns:
        The configured package logger
    """
    cfg = cfg or LoggingConfig()
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in [h for h in pkg_logger.handlers if _is_ours(h)]:
        pkg_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    levels = [cfg.console_level_no]
    pkg_logger.addHandler(_prepare(logging.StreamHandler(), cfg.console_level_no, formatter))

    if cfg.log_file is not None:
        cfg.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
        pkg_logger.addHandler(_prepare(file_handler, cfg.file_level_no, formatter))
        levels.append(cfg.file_level_no)

    pkg_logger.setLevel(min(levels))
    pkg_logger.debug("Logging configured (console=%s, file=%s)", cfg.console_level, cfg.log_file)
    return pkg_logger
