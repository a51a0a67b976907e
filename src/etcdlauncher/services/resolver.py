"""Host resolution for the etcd endpoint handed to the container."""

import ipaddress
import socket
from typing import Optional

from etcdlauncher.constants import DEFAULT_ADDRESS
from etcdlauncher.errors import LauncherError


class HostResolver:
    """Turns the configured etcd host into an address the container can use.

    Resolution never fails: when both lookups come back empty the
    unresolved host is returned and a warning is logged.
    """

    def __init__(self, command_runner, logger, socket_module=socket):
        self.command_runner = command_runner
        self.logger = logger
        self.socket = socket_module

    def lookup(self, host: str, resolve: bool = False) -> str:
        if not host:
            return DEFAULT_ADDRESS

        if not resolve:
            return host

        address = self.lookup_system(host) or self.lookup_dns(host)
        if address:
            self.logger.debug("Resolved host '%s' to %s", host, address)
            return address

        self.logger.warning("Could not look up host '%s'.", host)
        return host

    def lookup_system(self, host: str) -> Optional[str]:
        """First stream address from the hosts file or DNS, like ``getent ahosts``."""
        try:
            infos = self.socket.getaddrinfo(host, None, type=self.socket.SOCK_STREAM)
        except (self.socket.gaierror, UnicodeError) as exc:
            self.logger.debug("System lookup failed for '%s': %s", host, exc)
            return None

        for info in infos:
            sockaddr = info[4]
            if sockaddr and sockaddr[0]:
                return sockaddr[0]
        return None

    def lookup_dns(self, host: str) -> Optional[str]:
        """First IPv4 ``has address`` answer from the ``host`` utility."""
        try:
            result = self.command_runner.run(["host", host], check=False, capture_output=True)
        except LauncherError as exc:
            self.logger.debug("DNS lookup unavailable for '%s': %s", host, exc)
            return None

        if result.returncode != 0:
            return None

        for line in (result.stdout or "").splitlines():
            if "has address" not in line:
                continue
            fields = line.split()
            if len(fields) < 4:
                continue
            if self.is_ipv4(fields[3]):
                return fields[3]
            return None
        return None

    @staticmethod
    def is_ipv4(value: str) -> bool:
        try:
            ipaddress.IPv4Address(value)
        except ValueError:
            return False
        return True
