"""
Logging configuration for the application.

The registration payload carries a password, so every root handler gets a
filter that masks password values in the rendered message.
"""
import logging
import re
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SENSITIVE_KEYS = ("password",)
REDACTED = "***"

# password=..., "password": "...", 'Password': '...'
_SECRET_VALUE = re.compile(
    r"""(?P<key>["']?(?:%s)["']?\s*[:=]\s*)"""
    r"""(?:(?P<quote>["'])(?:\\.|(?!(?P=quote)).)*(?P=quote)|[^\s,}]*)"""
    % "|".join(SENSITIVE_KEYS),
    re.IGNORECASE,
)


def _mask(match: re.Match) -> str:
    quote = match["quote"] or ""
    return f"{match['key']}{quote}{REDACTED}{quote}"


class RedactSecretsFilter(logging.Filter):
    """Rewrite records whose message contains a password value."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _SECRET_VALUE.sub(_mask, message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(RedactSecretsFilter())
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
