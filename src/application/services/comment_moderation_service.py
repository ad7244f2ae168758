"""Comment moderation for emociograma submissions.

Strategy:
    - Urgent patterns (self-harm, harassment) flag the comment for human
      review without changing it.
    - Blocked words are masked with ``*`` (one per character) and also flag
      the comment.
    - The result is HTML escaped before storage.
"""

import html
import re
from dataclasses import dataclass, field

from src.domain.protocols import LoggerProtocol

URGENT_REASON = "Conteúdo sensível detectado - requer atenção"
FILTERED_REASON = "Conteúdo inadequado filtrado"

BLOCKED_PATTERNS: tuple[re.Pattern[str], ...] = (
    # offensive
    re.compile(r"\b(idiota|estúpido|imbecil)\b", re.IGNORECASE),
    # threats
    re.compile(r"\b(matar|morrer|suicid\w*)\b", re.IGNORECASE),
    # hate
    re.compile(r"\b(odi[oa]r?|nojo)\b", re.IGNORECASE),
)

URGENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # mental health risk
    re.compile(r"\b(suicid\w*|autolesão|me machucar|acabar com tudo)\b", re.IGNORECASE),
    # harassment or abuse
    re.compile(r"\b(assédio|abuso|perseguição)\b", re.IGNORECASE),
)


@dataclass(frozen=True, kw_only=True)
class ModerationResult:
    """Outcome of moderating one comment.

    Attributes:
        sanitized_comment: Masked and HTML-escaped comment.
        is_flagged: Whether the comment needs human review.
        flag_reasons: Why it was flagged (empty when not flagged).
    """

    sanitized_comment: str
    is_flagged: bool
    flag_reasons: list[str] = field(default_factory=list)


class CommentModerationService:
    """Masks blocked words and flags sensitive comments.

    Args:
        logger: Structured logger.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def moderate(self, comment: str | None) -> ModerationResult:
        """Moderate a comment.

        Args:
            comment: Raw comment from the employee.

        Returns:
            ModerationResult. Blank input yields an empty, unflagged result.
        """
        if comment is None or not comment.strip():
            return ModerationResult(sanitized_comment="", is_flagged=False)

        text = comment.strip()
        reasons: list[str] = []

        # Urgent content is flagged but kept verbatim for the reviewer.
        if any(pattern.search(text) for pattern in URGENT_PATTERNS):
            reasons.append(URGENT_REASON)
            self._logger.warning("Comment matched urgent pattern")

        masked = False
        for pattern in BLOCKED_PATTERNS:
            text, count = pattern.subn(lambda m: "*" * len(m.group(0)), text)
            masked = masked or count > 0
        if masked:
            reasons.append(FILTERED_REASON)

        sanitized = html.escape(text, quote=True)

        if reasons:
            self._logger.info("Comment flagged for review", reasons=reasons)

        return ModerationResult(
            sanitized_comment=sanitized,
            is_flagged=bool(reasons),
            flag_reasons=reasons,
        )
