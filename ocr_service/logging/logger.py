import logging
import sys

_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class _ContextFormatter(logging.Formatter):
    """Appends `key=value` pairs passed as logging extras to the message."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{line} | {pairs}"


class Log:
    """Centralized service logging.

    Keyword arguments given to any level method are attached to the record
    and rendered after the message, e.g. ``Log.info("Rendered", pages=3)``.
    """

    _logger: logging.Logger = logging.getLogger("ocr_service")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                _ContextFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=context)

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=context)

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=context)

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=context)

    @classmethod
    def exception(cls, message: str, **context: object) -> None:
        """Log at error level with the active exception's traceback."""
        cls._logger.exception(message, extra=context)
