"""Infrastructure adapters for Quorum Sudo.

Adapters implement the ports defined in the application layer,
providing concrete implementations for external services.
"""

from quorum_sudo.infrastructure.adapters.http_authority_directory import (
    HttpAuthorityDirectory,
)
from quorum_sudo.infrastructure.adapters.secp256k1_signer_recovery import (
    Secp256k1SignerRecovery,
    address_from_public_key,
)

__all__: list[str] = [
    "HttpAuthorityDirectory",
    "Secp256k1SignerRecovery",
    "address_from_public_key",
]
