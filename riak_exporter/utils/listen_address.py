"""Parsing of ``[host]:port`` listen addresses."""

from __future__ import annotations

from dataclasses import dataclass

_ALL_INTERFACES = "0.0.0.0"


@dataclass(frozen=True, slots=True)
class ListenAddress:
    host: str
    port: int

    @property
    def bind_host(self) -> str:
        """Host for the Flask development server, which binds a single address."""
        return self.host or _ALL_INTERFACES

    @property
    def waitress_listen(self) -> str:
        """``listen`` value for waitress; ``*`` binds every IPv4 and IPv6 address."""
        if not self.host:
            return f"*:{self.port}"
        return str(self)

    def __str__(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"


def parse_listen_address(raw: str) -> ListenAddress:
    """Parse ``:9104``, ``127.0.0.1:9104`` or ``[::1]:9104``.

    Raises:
        ValueError: If the address has no port or the port is out of range.
    """
    value = raw.strip()
    host, sep, port_text = value.rpartition(":")
    if not sep:
        raise ValueError(f"listen address '{raw}' is missing a port")

    if host.startswith("["):
        if not host.endswith("]"):
            raise ValueError(f"listen address '{raw}' has an unterminated IPv6 host")
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"listen address '{raw}' must bracket IPv6 hosts")

    try:
        port = int(port_text)
    except ValueError as exc:
        raise ValueError(f"listen address '{raw}' has an invalid port") from exc
    if not 1 <= port <= 65535:
        raise ValueError(f"listen address '{raw}' port must be between 1 and 65535")

    return ListenAddress(host=host, port=port)
