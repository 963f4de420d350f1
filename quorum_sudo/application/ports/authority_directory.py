"""Authority Directory port definition.

Defines the abstract interface for querying the current authority set.
Membership is established and rotated elsewhere; this port only answers
"who are the authorities right now, in order".

Constraints:
- The list is fetched fresh for every authorization attempt (no caching)
- A failed query is an engine failure, never an empty or stale list
- Order matters: signatures are matched against it with a forward scan
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AuthorityDirectoryProtocol(ABC):
    """Abstract interface for authority set queries.

    Implementations may call a remote validator-set oracle or hold the
    set in memory. Either way, duplicate entries are passed through as
    given; the engine does not enforce uniqueness.
    """

    @abstractmethod
    async def get_authorities(self) -> list[str]:
        """Get the current ordered list of authority addresses.

        Returns:
            Ordered list of 20-byte hex addresses.

        Raises:
            DirectoryUnavailableError: If the directory cannot be queried
                or returned malformed data.
        """
        ...
