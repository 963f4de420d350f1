"""Tests for the HTTP authority directory adapter."""

import hashlib
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from quorum_sudo.application.services.sudo_authorization_service import (
    SudoAuthorizationService,
)
from quorum_sudo.domain.errors import (
    DirectoryUnavailableError,
    InsufficientSignaturesError,
)
from quorum_sudo.infrastructure.adapters.http_authority_directory import (
    HttpAuthorityDirectory,
)
from quorum_sudo.infrastructure.adapters.secp256k1_signer_recovery import (
    Secp256k1SignerRecovery,
)
from quorum_sudo.infrastructure.stubs import SudoCommandEmitterStub
from tests.helpers import batch_for, make_signers

TARGET = "0x" + "11" * 20
AUTHORITIES = ["0x" + "01" * 20, "0x" + "02" * 20]


def _response(payload) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status = MagicMock()
    return response


class TestHttpAuthorityDirectoryInit:
    """Tests for adapter initialization."""

    def test_custom_base_url(self):
        directory = HttpAuthorityDirectory(base_url="http://oracle:8080")
        assert directory.base_url == "http://oracle:8080"
        assert directory.path == "/v1/authorities"

    def test_custom_timeout(self):
        directory = HttpAuthorityDirectory(base_url="http://oracle", timeout=2.5)
        assert directory._client.timeout.read == 2.5


class TestHttpAuthorityDirectoryGetAuthorities:
    """Tests for get_authorities."""

    @pytest.mark.asyncio
    async def test_reads_wrapped_list(self):
        """Verify {"authorities": [...]} responses are unwrapped in order."""
        directory = HttpAuthorityDirectory(base_url="http://test")

        with patch.object(directory._client, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = _response({"authorities": AUTHORITIES})
            authorities = await directory.get_authorities()

        assert authorities == AUTHORITIES
        mock_get.assert_called_once_with("/v1/authorities")

    @pytest.mark.asyncio
    async def test_reads_bare_list(self):
        directory = HttpAuthorityDirectory(base_url="http://test")

        with patch.object(directory._client, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = _response(AUTHORITIES)
            authorities = await directory.get_authorities()

        assert authorities == AUTHORITIES

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload", [{"validators": AUTHORITIES}, {"authorities": [1, 2]}, "0xabc"]
    )
    async def test_unexpected_shape_rejected(self, payload):
        directory = HttpAuthorityDirectory(base_url="http://test")

        with patch.object(directory._client, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = _response(payload)
            with pytest.raises(DirectoryUnavailableError):
                await directory.get_authorities()

    @pytest.mark.asyncio
    async def test_http_status_error(self):
        """Verify non-2xx responses become DirectoryUnavailableError."""
        transport = httpx.MockTransport(lambda request: httpx.Response(503))
        client = httpx.AsyncClient(base_url="http://test", transport=transport)
        directory = HttpAuthorityDirectory(base_url="http://test", client=client)

        with pytest.raises(DirectoryUnavailableError) as exc_info:
            await directory.get_authorities()

        assert "503" in exc_info.value.reason
        await directory.close()

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.AsyncClient(
            base_url="http://test", transport=httpx.MockTransport(handler)
        )
        directory = HttpAuthorityDirectory(base_url="http://test", client=client)

        with pytest.raises(DirectoryUnavailableError) as exc_info:
            await directory.get_authorities()

        assert "transport error" in exc_info.value.reason
        await directory.close()

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, content=b"not json")
        )
        client = httpx.AsyncClient(base_url="http://test", transport=transport)

        async with HttpAuthorityDirectory(base_url="http://test", client=client) as directory:
            with pytest.raises(DirectoryUnavailableError):
                await directory.get_authorities()

    @pytest.mark.asyncio
    async def test_end_to_end_with_mock_transport(self):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"authorities": AUTHORITIES})
        )
        client = httpx.AsyncClient(base_url="http://test", transport=transport)

        async with HttpAuthorityDirectory(base_url="http://test", client=client) as directory:
            assert await directory.get_authorities() == AUTHORITIES


class TestIdentityFormat:
    """Served addresses must use the recovered-signer derivation."""

    @staticmethod
    def _service(addresses: list[str]) -> SudoAuthorizationService:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"authorities": addresses})
        )
        client = httpx.AsyncClient(base_url="http://test", transport=transport)
        return SudoAuthorizationService(
            directory=HttpAuthorityDirectory(base_url="http://test", client=client),
            recovery=Secp256k1SignerRecovery(),
            emitter=SudoCommandEmitterStub(),
        )

    @pytest.mark.asyncio
    async def test_blake3_addresses_match(self):
        signers = make_signers(3)
        service = self._service([s.address for s in signers])
        op_hash = service.set_balance_op_hash(TARGET, 1)

        await service.set_balance(TARGET, 1, batch_for(op_hash, signers[:2]))

        assert service.nonce == 1

    @pytest.mark.asyncio
    async def test_other_derivation_never_matches(self):
        """Same keys, addresses hashed with SHA3 instead of BLAKE3."""
        signers = make_signers(3)
        foreign = [
            "0x"
            + hashlib.sha3_256(
                s.private_key.public_key.format(compressed=False)[1:]
            ).digest()[-20:].hex()
            for s in signers
        ]
        service = self._service(foreign)
        op_hash = service.set_balance_op_hash(TARGET, 1)

        with pytest.raises(InsufficientSignaturesError):
            await service.set_balance(TARGET, 1, batch_for(op_hash, signers[:2]))

        assert service.nonce == 0
