"""
Centralized Configuration
=========================
Configuration values and constants for dblpbib.

This module provides:
- DBLP server selection (dblp.org, the Trier mirror or a custom domain)
- HTTP timeout configuration
- Batch resolver concurrency defaults
"""

import os
from dataclasses import dataclass
from typing import Optional


DBLP_ORG = "https://dblp.org"
DBLP_TRIER = "https://dblp.uni-trier.de"

# Citekeys in LaTeX sources carry this namespace marker; it is stripped
# before any lookup and re-added in BibTeX output.
DBLP_KEY_PREFIX = "DBLP:"


@dataclass(frozen=True)
class DblpServerConfig:
    """Which DBLP server to talk to and how to identify ourselves."""

    domain: str = os.getenv("DBLPBIB_DOMAIN", DBLP_ORG)
    user_agent: str = "dblpbib/0.1"

    @classmethod
    def for_args(cls, *, trier: bool = False, domain: Optional[str] = None) -> "DblpServerConfig":
        """Build a server config from command line style switches.

        A custom domain wins over the Trier mirror.
        """
        if domain:
            return cls(domain=domain.rstrip("/"))
        if trier:
            return cls(domain=DBLP_TRIER)
        return cls()


@dataclass(frozen=True)
class TimeoutConfig:
    """HTTP timeouts in seconds."""

    REQUEST: float = float(os.getenv("DBLPBIB_REQUEST_TIMEOUT", "30"))
    CONNECT: float = float(os.getenv("DBLPBIB_CONNECT_TIMEOUT", "10"))


@dataclass(frozen=True)
class ResolverConfig:
    """Batch resolution configuration."""

    # Maximum number of DBLP requests in flight
    CONCURRENT_REQUESTS: int = int(os.getenv("DBLPBIB_CONCURRENCY", "8"))


@dataclass(frozen=True)
class LoggingConfig:
    """Log sink configuration used by the command line."""

    LEVEL: str = os.getenv("DBLPBIB_LOG_LEVEL", "WARNING").upper()


# Global singleton instances
DEFAULT_SERVER = DblpServerConfig()
TIMEOUTS = TimeoutConfig()
RESOLVER = ResolverConfig()
LOGGING = LoggingConfig()
