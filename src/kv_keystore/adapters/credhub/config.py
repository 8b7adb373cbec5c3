"""CredHub adapter – CredHubConfig."""
from __future__ import annotations

import dataclasses
import ssl
from typing import ClassVar

from kv_keystore.config.settings.base import Settings
from kv_keystore.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclasses.dataclass
class CredHubConfig(Settings):
    """Connection settings for a CredHub server.

    Loaded from ``CREDHUB_*`` environment variables by
    :class:`~kv_keystore.config.settings.loaders.EnvSettingsLoader`, e.g.
    ``CREDHUB_BASE_URL`` and ``CREDHUB_NAMESPACE``.
    """

    _prefix: ClassVar[str] = "CREDHUB"

    base_url: str = ""
    namespace: str = ""
    enable_mutual_tls: bool = False
    client_cert_file_path: str = ""
    client_key_file_path: str = ""
    server_ca_cert_file_path: str = ""
    server_insecure_skip_verify: bool = False
    force_base64_values_encoding: bool = False

    def _validate(self) -> None:
        if not self.base_url:
            raise MissingRequiredSettingError("base_url")
        if not self.namespace:
            raise MissingRequiredSettingError("namespace")
        if not self.server_insecure_skip_verify and not self.server_ca_cert_file_path:
            raise InvalidSettingValueError(
                "server_ca_cert_file_path",
                self.server_ca_cert_file_path,
                "can't be empty when server_insecure_skip_verify is false",
            )
        if self.enable_mutual_tls and not (self.client_cert_file_path and self.client_key_file_path):
            raise InvalidSettingValueError(
                "client_cert_file_path",
                self.client_cert_file_path,
                "client_cert_file_path and client_key_file_path can't be empty when enable_mutual_tls is true",
            )

    def ssl_context(self) -> ssl.SSLContext:
        """Build the TLS context from the configured PEM files."""
        if self.server_insecure_skip_verify:
            context = ssl.create_default_context()
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        else:
            try:
                context = ssl.create_default_context(cafile=self.server_ca_cert_file_path)
            except (OSError, ssl.SSLError) as exc:
                raise ConfigError(
                    f"credhub config: failed to load 'server_ca_cert_file_path': {exc}", cause=exc
                ) from exc
        if self.enable_mutual_tls:
            try:
                context.load_cert_chain(self.client_cert_file_path, self.client_key_file_path)
            except (OSError, ssl.SSLError) as exc:
                raise ConfigError(
                    f"credhub config: failed to load the client key pair: {exc}", cause=exc
                ) from exc
        return context


__all__ = ["CredHubConfig"]
