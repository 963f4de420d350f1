"""
Domain layer - Pure authorization logic for Quorum Sudo.

This layer contains:
- Operation requests and signature value objects
- Authorized command events
- The signature codec, operation hasher and threshold matcher
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
"""

from quorum_sudo.domain.exceptions import SudoGateError

__all__: list[str] = ["SudoGateError"]
