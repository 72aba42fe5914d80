"""Non-blocking UDP socket with address lookup and matching helpers."""

import errno
import logging
import select
import socket
from enum import Enum

logger = logging.getLogger(__name__)

Address = tuple[int, tuple]
"""A socket family paired with the socket-module address tuple."""

_INADDR_NONE = b"\xff\xff\xff\xff"


class IPMatchType(Enum):
    """How much of two addresses must agree for them to match."""

    ADDRESS_AND_PORT = "address_and_port"
    ADDRESS_ONLY = "address_only"


def lookup(
    hostname: str,
    port: int,
    family: int = socket.AF_UNSPEC,
    flags: int = 0,
) -> Address:
    """Resolve a host name and port to the first matching datagram address.

    An empty host name resolves to the wildcard or loopback address.
    Raises socket.gaierror when nothing is found.
    """
    try:
        infos = socket.getaddrinfo(
            hostname or None, port, family, socket.SOCK_DGRAM, 0, flags
        )
    except socket.gaierror:
        logger.error("Cannot find address for host %s", hostname)
        raise
    found_family, _, _, _, sockaddr = infos[0]
    return found_family, sockaddr


def _host_bytes(family: int, sockaddr: tuple) -> bytes:
    host = str(sockaddr[0]).split("%", 1)[0]
    return socket.inet_pton(family, host)


def match(
    addr1: Address,
    addr2: Address,
    match_type: IPMatchType = IPMatchType.ADDRESS_AND_PORT,
) -> bool:
    """Compare two addresses by host, and by port too unless ADDRESS_ONLY."""
    family1, sockaddr1 = addr1
    family2, sockaddr2 = addr2
    if family1 != family2:
        return False
    if family1 not in (socket.AF_INET, socket.AF_INET6):
        return False
    if _host_bytes(family1, sockaddr1) != _host_bytes(family2, sockaddr2):
        return False
    if match_type is IPMatchType.ADDRESS_AND_PORT:
        return sockaddr1[1] == sockaddr2[1]
    return match_type is IPMatchType.ADDRESS_ONLY


def is_none(addr: Address) -> bool:
    """True for the IPv4 "no address" value 255.255.255.255."""
    family, sockaddr = addr
    return family == socket.AF_INET and _host_bytes(family, sockaddr) == _INADDR_NONE


class UDPSocket:
    """A UDP socket bound to an optional local address and port.

    The socket is bound only when a non-zero local port is given.
    """

    def __init__(self, address: str = "", port: int = 0) -> None:
        self._local_address = address
        self._local_port = port
        self._family = socket.AF_UNSPEC
        self._sock: socket.socket | None = None

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    def open(self, address: Address | None = None) -> None:
        """Create the socket, using the family of ``address`` if one is given."""
        if self._sock is not None:
            raise RuntimeError("socket is already open")
        if address is not None:
            self._family = address[0]

        try:
            family, sockaddr = lookup(
                self._local_address, self._local_port, self._family, socket.AI_PASSIVE
            )
        except socket.gaierror:
            logger.error("The local address is invalid - %s", self._local_address)
            raise

        self._family = family
        try:
            self._sock = socket.socket(family, socket.SOCK_DGRAM)
        except OSError as err:
            logger.error("Cannot create the UDP socket, err: %s", err.errno)
            raise

        if self._local_port > 0:
            try:
                self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            except OSError as err:
                logger.error("Cannot set the UDP socket option, err: %s", err.errno)
                self.close()
                raise
            try:
                self._sock.bind(sockaddr)
            except OSError as err:
                logger.error("Cannot bind the UDP address, err: %s", err.errno)
                self.close()
                raise
            logger.info("Opening UDP port on %d", self._local_port)

    def read(self, length: int) -> tuple[bytes, Address] | None:
        """Return a waiting datagram and its sender, or None if none is waiting."""
        if length <= 0:
            raise ValueError("length must be positive")
        if self._sock is None:
            return None

        try:
            readable, _, _ = select.select([self._sock], [], [], 0)
        except (OSError, ValueError) as err:
            logger.error("Error returned from UDP poll, err: %s", getattr(err, "errno", err))
            raise
        if not readable:
            return None

        try:
            data, sockaddr = self._sock.recvfrom(length)
        except OSError as err:
            logger.error("Error returned from recvfrom, err: %s", err.errno)
            if err.errno == errno.ENOTSOCK:
                logger.info("Re-opening UDP port on %d", self._local_port)
                self.close()
                self.open()
            raise
        if not data:
            logger.error("Error returned from recvfrom, empty datagram")
            return None
        return data, (self._family, sockaddr)

    def write(self, data: bytes, address: Address) -> bool:
        """Send a datagram; True when every byte was sent."""
        if not data:
            raise ValueError("data must not be empty")
        if self._sock is None:
            raise RuntimeError("socket is not open")
        try:
            sent = self._sock.sendto(data, address[1])
        except OSError as err:
            logger.error("Error returned from sendto, err: %s", err.errno)
            raise
        return sent == len(data)

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> "UDPSocket":
        if self._sock is None:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()