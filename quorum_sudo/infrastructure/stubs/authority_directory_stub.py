"""In-memory authority directory stub for development and testing.

Holds an ordered authority list that tests (or a local deployment) can
rotate at will. It can be configured to fail or hang so the engine's
failure and timeout paths can be exercised.

Usage in tests:
    stub = AuthorityDirectoryStub(["0xaa...", "0xbb...", "0xcc..."])
    service = SudoAuthorizationService(directory=stub, ...)

    stub.set_authorities(["0xbb...", "0xcc..."])  # rotate
    stub.fail_exception = DirectoryUnavailableError("oracle down")
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from quorum_sudo.application.ports.authority_directory import (
    AuthorityDirectoryProtocol,
)


class AuthorityDirectoryStub(AuthorityDirectoryProtocol):
    """Configurable in-memory implementation of AuthorityDirectoryProtocol.

    Attributes:
        query_count: Number of get_authorities() calls served.
        fail_exception: If set, get_authorities() raises this exception.
        delay_seconds: If set, get_authorities() sleeps this long first.
    """

    def __init__(self, authorities: Sequence[str] | None = None) -> None:
        """Initialize the stub.

        Args:
            authorities: Initial ordered authority list (default: empty).
        """
        self._authorities: list[str] = list(authorities or [])
        self.query_count: int = 0
        self.fail_exception: Exception | None = None
        self.delay_seconds: float | None = None

    def set_authorities(self, authorities: Sequence[str]) -> None:
        """Replace the authority list (simulates a set rotation)."""
        self._authorities = list(authorities)

    async def get_authorities(self) -> list[str]:
        """Return a copy of the configured authority list.

        Raises:
            Exception: If fail_exception is set.
        """
        self.query_count += 1
        if self.delay_seconds is not None:
            await asyncio.sleep(self.delay_seconds)
        if self.fail_exception is not None:
            raise self.fail_exception
        return list(self._authorities)
