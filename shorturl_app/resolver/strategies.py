"""
Resolver strategies using Strategy Pattern.
Allows switching between real DNS resolution and a fixed host table.
"""

import asyncio
import logging
import socket
from abc import ABC, abstractmethod
from typing import Iterable, List

from shorturl_app.exceptions import HostResolutionError

logger = logging.getLogger(__name__)


class ResolverStrategy(ABC):
    """
    Abstract base class for hostname resolvers.
    
    Resolution is only a cheap "does this host plausibly exist" check;
    nothing is ever fetched from the resolved address.
    """
    
    @abstractmethod
    async def resolve(self, hostname: str) -> List[str]:
        """
        Resolve a hostname to its addresses.
        
        Args:
            hostname: Bare hostname (no port, no IPv6 brackets)
            
        Returns:
            Non-empty list of addresses
            
        Raises:
            HostResolutionError: lookup failed, timed out, or found nothing
        """
        pass


class SystemResolver(ResolverStrategy):
    """
    Resolver backed by the operating system (A/AAAA via getaddrinfo).
    
    The lookup runs in the event loop's executor, so a slow DNS server
    suspends only the request that asked. Each lookup is bounded by
    `timeout` and is never retried.
    """
    
    def __init__(self, timeout: float = 5.0):
        """
        Args:
            timeout: Seconds to wait before treating the lookup as failed
        """
        self.timeout = timeout
    
    async def resolve(self, hostname: str) -> List[str]:
        try:
            infos = await asyncio.wait_for(self._lookup(hostname), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise HostResolutionError(hostname, f"timed out after {self.timeout}s") from e
        except (socket.gaierror, UnicodeError, OSError) as e:
            raise HostResolutionError(hostname, str(e)) from e
        
        addresses = []
        for _family, _type, _proto, _canonname, sockaddr in infos:
            if sockaddr[0] not in addresses:
                addresses.append(sockaddr[0])
        
        if not addresses:
            raise HostResolutionError(hostname, "no addresses returned")
        
        logger.debug(f"Resolved {hostname} -> {addresses}")
        return addresses
    
    async def _lookup(self, hostname: str):
        """Raw getaddrinfo call (separate so the timeout path is testable)"""
        loop = asyncio.get_running_loop()
        return await loop.getaddrinfo(hostname, None, type=socket.SOCK_STREAM)


class StaticResolver(ResolverStrategy):
    """
    Resolver with a fixed table of known hosts.
    
    Used for:
    - Testing (no network access needed)
    - Offline development
    
    Hostnames are matched case-insensitively; every known host
    resolves to the loopback address.
    """
    
    def __init__(self, hosts: Iterable[str] = ()):
        self.hosts = {host.lower() for host in hosts}
    
    def add(self, hostname: str) -> None:
        self.hosts.add(hostname.lower())
    
    async def resolve(self, hostname: str) -> List[str]:
        if hostname.lower() not in self.hosts:
            raise HostResolutionError(hostname, "not in static host table")
        return ["127.0.0.1"]
