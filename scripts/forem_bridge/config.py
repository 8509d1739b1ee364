from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from forem_bridge.client import DEFAULT_TIMEOUT
from forem_bridge.http import BASE_URL

API_KEY_URL = "https://dev.to/settings/extensions"

class ConfigError(ValueError):
   """Raised when the bridge cannot be configured from its inputs."""

_TRUTHY = {"1", "true", "yes", "on"}

@dataclass(slots=True)
class BridgeConfig:
   api_key: str
   base_url: str = BASE_URL
   timeout: float = DEFAULT_TIMEOUT   # seconds, per attempt
   enable_reactions: bool = False     # toggle_reaction answers 401 for many keys

   def __post_init__(self):
      if not self.api_key or not self.api_key.strip():
         raise ConfigError(f"DEVTO_API_KEY environment variable is required. Get your API key from: {API_KEY_URL}")
      if self.timeout <= 0:
         raise ConfigError(f"timeout must be positive, got {self.timeout}")

   @classmethod
   def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "BridgeConfig":
      env = os.environ if environ is None else environ
      raw_timeout = env.get("DEVTO_TIMEOUT")
      timeout = DEFAULT_TIMEOUT
      if raw_timeout:
         try:
            timeout = float(raw_timeout)
         except ValueError:
            raise ConfigError(f"DEVTO_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from None
      values = {
         "api_key": env.get("DEVTO_API_KEY", ""),
         "base_url": env.get("DEVTO_BASE_URL") or BASE_URL,
         "timeout": timeout,
         "enable_reactions": env.get("DEVTO_ENABLE_REACTIONS", "").strip().lower() in _TRUTHY,
      }
      values.update({k: v for k, v in overrides.items() if v is not None})
      return cls(**values)
