"""structlog processors that keep secrets and personal data out of logs.

- Values under sensitive keys (tokens, keys, secrets, authorization) are
  replaced with ``***``
- E-mail addresses anywhere in string values are masked to ``a**@domain``
"""

from __future__ import annotations

import re
from typing import Any

from structlog.types import EventDict, WrappedLogger

REDACTED = "***"

SENSITIVE_KEY_PARTS = (
    "token",
    "secret",
    "password",
    "authorization",
    "api_key",
    "apikey",
)

EMAIL_PATTERN = re.compile(
    r"([A-Za-z0-9._%+-])[A-Za-z0-9._%+-]*@([A-Za-z0-9.-]+\.[A-Za-z]{2,})"
)


def mask_email(value: str) -> str:
    """Mask every e-mail address in a string.

    Args:
        value: Text that may contain addresses.

    Returns:
        str: Text with each local part reduced to its first character.

    Example:
        >>> mask_email("sent to ana.souza@example.com")
        'sent to a**@example.com'
    """
    return EMAIL_PATTERN.sub(r"\1**@\2", value)


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(part in lowered for part in SENSITIVE_KEY_PARTS)


def _scrub(key: str, value: Any) -> Any:
    if _is_sensitive(key) and value is not None:
        return REDACTED
    if isinstance(value, str):
        return mask_email(value)
    if isinstance(value, dict):
        return {k: _scrub(str(k), v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_scrub(key, item) for item in value]
    return value


def redact_sensitive_data(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """structlog processor applying key redaction and e-mail masking.

    The ``event`` message itself is masked for e-mails but never redacted.
    """
    scrubbed: EventDict = {}
    for key, value in event_dict.items():
        if key == "event" and isinstance(value, str):
            scrubbed[key] = mask_email(value)
        else:
            scrubbed[key] = _scrub(key, value)
    return scrubbed
