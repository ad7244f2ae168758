"""LGPD data subject right commands.

Each command targets the authenticated user's own data inside one
organization and leaves an audit entry behind.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ExportUserData:
    """Export profile and submissions (LGPD Art. 18, IV).

    Attributes:
        user_id: Data subject.
        organization_id: Organization whose submissions are exported.
        ip_address: Client IP for the audit trail.
        user_agent: Client user agent for the audit trail.
    """

    user_id: UUID
    organization_id: UUID
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class AnonymizeUserData:
    """Irreversibly detach submissions from the user (LGPD Art. 18, II)."""

    user_id: UUID
    organization_id: UUID
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class RequestDataDeletion:
    """Email a confirmation link for data erasure."""

    user_id: UUID
    organization_id: UUID
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class ConfirmDataDeletion:
    """Erase submissions after the emailed token is confirmed (LGPD Art. 18, VI).

    Attributes:
        user_id: Authenticated user (must own the token).
        token: Confirmation token from the email.
    """

    user_id: UUID
    token: str
    ip_address: str | None = None
    user_agent: str | None = None
