"""Resilient bridge between MCP tool calls and the Forem (DEV.to) REST API."""
from forem_bridge.client import ForemClient  # noqa: F401
from forem_bridge.config import BridgeConfig, ConfigError  # noqa: F401
from forem_bridge.errors import ApiError, ErrorKind  # noqa: F401
from forem_bridge.models import RateLimitInfo, RequestDescriptor  # noqa: F401
from forem_bridge.retry import RetryPolicy  # noqa: F401

__version__ = "1.0.0"
