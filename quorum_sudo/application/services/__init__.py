"""Application services for Quorum Sudo."""

from quorum_sudo.application.services.sudo_authorization_service import (
    AuthorizationState,
    AuthoritySnapshot,
    SudoAuthorizationService,
)

__all__: list[str] = [
    "AuthorizationState",
    "AuthoritySnapshot",
    "SudoAuthorizationService",
]
