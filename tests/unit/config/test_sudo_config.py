"""Unit tests for SudoGateConfig."""

import pytest

from quorum_sudo.config.sudo_config import (
    DEFAULT_SUDO_GATE_CONFIG,
    DIRECTORY_TIMEOUT_ENV,
    DIRECTORY_URL_ENV,
    ENVIRONMENT_ENV,
    INITIAL_NONCE_ENV,
    TEST_SUDO_GATE_CONFIG,
    SudoGateConfig,
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in (ENVIRONMENT_ENV, DIRECTORY_URL_ENV, DIRECTORY_TIMEOUT_ENV, INITIAL_NONCE_ENV):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestSudoGateConfigDefaults:
    """Tests for default values."""

    def test_defaults(self) -> None:
        config = DEFAULT_SUDO_GATE_CONFIG

        assert config.environment == "production"
        assert config.directory_url is None
        assert config.directory_timeout_seconds == 5.0
        assert config.initial_nonce == 0

    def test_test_config(self) -> None:
        assert TEST_SUDO_GATE_CONFIG.environment == "development"
        assert TEST_SUDO_GATE_CONFIG.directory_timeout_seconds == 0.5


class TestSudoGateConfigValidation:
    """Tests for __post_init__ validation."""

    def test_unknown_environment_rejected(self) -> None:
        with pytest.raises(ValueError, match="environment"):
            SudoGateConfig(environment="staging")

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_non_positive_timeout_rejected(self, timeout: float) -> None:
        with pytest.raises(ValueError, match="directory_timeout_seconds"):
            SudoGateConfig(directory_timeout_seconds=timeout)

    def test_negative_nonce_rejected(self) -> None:
        with pytest.raises(ValueError, match="initial_nonce"):
            SudoGateConfig(initial_nonce=-1)


class TestSudoGateConfigFromEnvironment:
    """Tests for from_environment."""

    def test_reads_all_variables(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(ENVIRONMENT_ENV, "development")
        clean_env.setenv(DIRECTORY_URL_ENV, "http://oracle:8080")
        clean_env.setenv(DIRECTORY_TIMEOUT_ENV, "2.5")
        clean_env.setenv(INITIAL_NONCE_ENV, "12")

        config = SudoGateConfig.from_environment()

        assert config == SudoGateConfig(
            environment="development",
            directory_url="http://oracle:8080",
            directory_timeout_seconds=2.5,
            initial_nonce=12,
        )

    def test_unset_gives_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        assert SudoGateConfig.from_environment() == DEFAULT_SUDO_GATE_CONFIG

    def test_invalid_timeout_falls_back(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(DIRECTORY_TIMEOUT_ENV, "soon")

        config = SudoGateConfig.from_environment()

        assert config.directory_timeout_seconds == 5.0

    @pytest.mark.parametrize("value", ["42x", "many", "", "4.2"])
    def test_unparseable_nonce_rejected(
        self, clean_env: pytest.MonkeyPatch, value: str
    ) -> None:
        """A typo must not silently resume from nonce 0."""
        clean_env.setenv(INITIAL_NONCE_ENV, value)

        with pytest.raises(ValueError, match=INITIAL_NONCE_ENV):
            SudoGateConfig.from_environment()

    def test_negative_nonce_env_rejected(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(INITIAL_NONCE_ENV, "-3")

        with pytest.raises(ValueError, match="initial_nonce"):
            SudoGateConfig.from_environment()

    def test_empty_url_is_unset(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(DIRECTORY_URL_ENV, "")

        assert SudoGateConfig.from_environment().directory_url is None
