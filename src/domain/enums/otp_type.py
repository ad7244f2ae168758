"""One-time password types accepted by the magic link callback."""

from enum import Enum


class OtpType(str, Enum):
    """OTP verification types supported by the identity provider."""

    MAGICLINK = "magiclink"
    RECOVERY = "recovery"
    INVITE = "invite"
    EMAIL_CHANGE = "email_change"
