"""Sudo API dependencies.

Resolves the shared authorization engine from bootstrap wiring so the
API and any other entry point in the process share one nonce.
"""

from quorum_sudo.application.services.sudo_authorization_service import (
    SudoAuthorizationService,
)
from quorum_sudo.bootstrap.sudo import get_authorization_service


def get_sudo_authorization_service() -> SudoAuthorizationService:
    """Get the authorization service for request handlers."""
    return get_authorization_service()
