"""Host environment backed by configuration: connectivity, credentials, client."""

import asyncio
import hashlib
import logging
import re
from typing import Optional
from urllib.parse import urlparse

from trakt_actions.adapters.trakt.client import TraktClient
from trakt_actions.config import AppConfig, TraktConfig

log = logging.getLogger(__name__)

_SHA1_RE = re.compile(r"^[0-9a-fA-F]{40}$")


class TraktEnvironment:
    """Implements the Environment port for a configured trakt account."""

    def __init__(self, config: Optional[TraktConfig] = None):
        self.config = config or AppConfig.from_env().trakt

    def _probe_address(self):
        parsed = urlparse(self.config.api_base)
        port = parsed.port or (443 if parsed.scheme == "https" else 80)
        return parsed.hostname, port

    async def is_network_reachable(self) -> bool:
        host, port = self._probe_address()
        if not host:
            return False
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(host, port),
                timeout=self.config.network_probe_timeout,
            )
        except (OSError, asyncio.TimeoutError) as e:
            log.info("trakt unreachable at %s:%s: %s", host, port, e)
            return False
        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass
        return True

    async def has_valid_credentials(self) -> bool:
        return bool(self.config.username and (self.config.password or self.config.password_sha1))

    def _password_sha1(self) -> Optional[str]:
        if self.config.password_sha1:
            if not _SHA1_RE.match(self.config.password_sha1):
                return None
            return self.config.password_sha1.lower()
        if self.config.password:
            return hashlib.sha1(self.config.password.encode("utf-8")).hexdigest()
        return None

    async def acquire_authenticated_client(self) -> Optional[TraktClient]:
        """Build a fresh client; None if the key or stored password is unusable."""
        if not self.config.api_key:
            log.warning("TRAKT_API_KEY is not set")
            return None
        password = self._password_sha1()
        if password is None:
            log.warning("stored trakt password could not be read")
            return None
        return TraktClient(
            api_key=self.config.api_key,
            username=self.config.username,
            password_sha1=password,
            api_base=self.config.api_base,
            timeout=self.config.timeout,
        )
