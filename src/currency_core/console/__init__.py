"""API-key ping console.

Public API:
  - models: LogLevel, LogEntry, PingConfig, PublicProbe, PingOutcome, mask_key
  - exchanges: build_exchange_ping_config, build_exchange_public_probe
  - ipfs: build_ipfs_ping_config
  - llm: build_llm_ping_config
  - session: PingConsole
"""

from currency_core.console.exchanges import build_exchange_ping_config, build_exchange_public_probe
from currency_core.console.ipfs import build_ipfs_ping_config
from currency_core.console.llm import build_llm_ping_config
from currency_core.console.models import LogEntry, LogLevel, PingConfig, PingOutcome, PublicProbe, mask_key
from currency_core.console.session import PingConsole

__all__ = [
    "LogEntry",
    "LogLevel",
    "PingConfig",
    "PingConsole",
    "PingOutcome",
    "PublicProbe",
    "build_exchange_ping_config",
    "build_exchange_public_probe",
    "build_ipfs_ping_config",
    "build_llm_ping_config",
    "mask_key",
]
