"""HTTP adapter for the authority directory.

Queries a validator-set oracle over HTTP for the current ordered list of
authority addresses. The oracle is expected to answer

    GET {base_url}{path}  ->  {"authorities": ["0x...", "0x...", ...]}

(a bare JSON array is accepted too).

Identity format: each entry must be the address recovered signers map to,
namely the last 20 bytes of BLAKE3-256 over the 64-byte uncompressed
secp256k1 public key (X || Y), as hex. Keccak-derived chain addresses for
the same keys will never match a recovered signer. See
address_from_public_key in secp256k1_signer_recovery.

Every transport, status or decoding failure is reported as
DirectoryUnavailableError; nothing is retried or cached here.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from structlog import get_logger

from quorum_sudo.application.ports.authority_directory import (
    AuthorityDirectoryProtocol,
)
from quorum_sudo.domain.errors import DirectoryUnavailableError

logger = get_logger()

DEFAULT_AUTHORITIES_PATH = "/v1/authorities"


class HttpAuthorityDirectory(AuthorityDirectoryProtocol):
    """Authority directory backed by an HTTP endpoint.

    Example:
        async with HttpAuthorityDirectory("http://oracle:8080") as directory:
            authorities = await directory.get_authorities()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        path: str = DEFAULT_AUTHORITIES_PATH,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            base_url: Oracle base URL.
            timeout: Request timeout in seconds.
            path: Path of the authority list endpoint.
            client: Pre-built client (tests inject a mock transport here).
        """
        self.base_url = base_url
        self.path = path
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "HttpAuthorityDirectory":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def get_authorities(self) -> list[str]:
        """Fetch the current ordered authority list.

        Returns:
            Ordered list of address strings as served by the oracle.

        Raises:
            DirectoryUnavailableError: On transport errors, non-2xx status,
                undecodable JSON, or an unexpected response shape.
        """
        log = logger.bind(operation="get_authorities", base_url=self.base_url)
        try:
            response = await self._client.get(self.path)
            response.raise_for_status()
            data: Any = response.json()
        except httpx.HTTPStatusError as e:
            log.warning("authority_directory_http_status", status_code=e.response.status_code)
            raise DirectoryUnavailableError(
                f"oracle returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            log.warning("authority_directory_transport_error", error=str(e))
            raise DirectoryUnavailableError(f"transport error: {e}") from e
        except ValueError as e:
            log.warning("authority_directory_invalid_json", error=str(e))
            raise DirectoryUnavailableError("oracle returned invalid JSON") from e

        if isinstance(data, dict):
            data = data.get("authorities")
        if not isinstance(data, list) or not all(isinstance(a, str) for a in data):
            log.warning("authority_directory_unexpected_shape")
            raise DirectoryUnavailableError("oracle response has no authority list")

        return list(data)
