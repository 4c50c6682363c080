"""Exporter configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, field_validator

from switchexporter.base.transport import DEFAULT_TIMEOUT

PASSWORD_ENV = "SWITCH_PASSWORD"
DEFAULT_LISTEN_ADDRESS = ":9108"
ANY_HOST = "::"


class ExporterConfig(BaseModel):
    """Settings for one exporter process scraping one switch."""

    listen_address: str = DEFAULT_LISTEN_ADDRESS
    switch_hostname: str
    switch_username: str = "admin"
    switch_password: str
    switch_timeout: float | None = DEFAULT_TIMEOUT

    @field_validator("switch_hostname")
    @classmethod
    def _hostname_set(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("no switch-hostname set")
        return v

    @field_validator("switch_password")
    @classmethod
    def _password_set(cls, v: str) -> str:
        if not v:
            raise ValueError("no switch-password set")
        return v

    @field_validator("switch_timeout")
    @classmethod
    def _timeout_positive(cls, v: float | None) -> float | None:
        if v is None or v == 0:
            return None
        if v < 0:
            raise ValueError("switch-timeout must not be negative")
        return v

    @field_validator("listen_address")
    @classmethod
    def _listen_address_has_port(cls, v: str) -> str:
        _, sep, port = v.rpartition(":")
        if not sep or not port.isdigit():
            raise ValueError(f"listen-address '{v}' must be of the form [host]:port")
        return v

    @property
    def listen_host(self) -> str:
        """Bind address; empty means all interfaces of both address families."""
        host = self.listen_address.rpartition(":")[0]
        return host.strip("[]") or ANY_HOST

    @property
    def listen_port(self) -> int:
        return int(self.listen_address.rpartition(":")[2])

    @property
    def display_address(self) -> str:
        host = self.listen_host
        if ":" in host:
            host = f"[{host}]"
        return f"{host}:{self.listen_port}"


def password_from_env(password: str | None) -> str:
    """Return ``password`` or fall back to the trimmed ``SWITCH_PASSWORD`` variable."""
    if password:
        return password
    return os.getenv(PASSWORD_ENV, "").strip()
