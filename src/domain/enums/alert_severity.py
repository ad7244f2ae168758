"""Emotional alert severity and type enums."""

from enum import Enum


class AlertSeverity(str, Enum):
    """Alert severity derived from the submission emotion level.

    Mapping:
        level >= 9 -> CRITICAL
        level >= 7 -> HIGH
        level >= 6 -> MEDIUM
        otherwise  -> LOW
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def from_emotion_level(cls, level: int) -> "AlertSeverity":
        """Map an emotion level (1-10) to a severity.

        Args:
            level: Emotion level reported by the employee.

        Returns:
            AlertSeverity: Severity bucket for the level.
        """
        if level >= 9:
            return cls.CRITICAL
        if level >= 7:
            return cls.HIGH
        if level >= 6:
            return cls.MEDIUM
        return cls.LOW

    @property
    def email_prefix(self) -> str:
        """Subject prefix used in manager notification emails."""
        return {
            AlertSeverity.CRITICAL: "[CRÍTICO]",
            AlertSeverity.HIGH: "[URGENTE]",
            AlertSeverity.MEDIUM: "[ATENÇÃO]",
            AlertSeverity.LOW: "[INFO]",
        }[self]

    @property
    def urgency(self) -> int:
        """Sort key, higher first (critical 4 .. low 1)."""
        return list(AlertSeverity).index(self) + 1


class AlertType(str, Enum):
    """What produced the alert."""

    THRESHOLD_EXCEEDED = "threshold_exceeded"
    PATTERN_DETECTED = "pattern_detected"
