"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (SendMagicLink, ResolveAlert).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.auth_commands import (
    Logout,
    RefreshToken,
    SendMagicLink,
    SyncUserWithProvider,
    VerifyMagicLink,
)
from src.application.commands.emociograma_commands import (
    CreateCategory,
    DeactivateCategory,
    ResolveAlert,
    SubmitEmociograma,
    UpdateCategory,
)
from src.application.commands.lgpd_commands import (
    AnonymizeUserData,
    ConfirmDataDeletion,
    ExportUserData,
    RequestDataDeletion,
)
from src.application.commands.maintenance_commands import PurgeExpiredData
from src.application.commands.user_commands import CreateUser, DeleteUser, UpdateUser

__all__ = [
    # Auth commands
    "Logout",
    "RefreshToken",
    "SendMagicLink",
    "SyncUserWithProvider",
    "VerifyMagicLink",
    # User commands
    "CreateUser",
    "DeleteUser",
    "UpdateUser",
    # LGPD commands
    "AnonymizeUserData",
    "ConfirmDataDeletion",
    "ExportUserData",
    "RequestDataDeletion",
    # Emociograma commands
    "CreateCategory",
    "DeactivateCategory",
    "ResolveAlert",
    "SubmitEmociograma",
    "UpdateCategory",
    # Maintenance commands
    "PurgeExpiredData",
]
