from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastmcp import FastMCP

from forem_bridge.client import ForemClient
from forem_bridge.config import BridgeConfig
from forem_bridge.tools import register_all

SERVER_NAME = "forem-bridge"

log = logging.getLogger("forem.serve")

def create_server(config: BridgeConfig, *, client: Optional[ForemClient] = None) -> FastMCP:
   """
   Build the MCP server exposing the Forem API as tools.

   The client's connection pool lives for the server's lifespan; pass *client*
   to substitute a preconfigured one (tests inject a mocked transport this way).
   """
   client = client or ForemClient(config.api_key, config.timeout, base_url=config.base_url)

   @asynccontextmanager
   async def lifespan(_server: FastMCP):
      async with client:
         log.info("%s ready (base_url=%s timeout=%.1fs)", SERVER_NAME, client.base_url, client.timeout)
         yield

   mcp = FastMCP(SERVER_NAME, lifespan=lifespan)
   register_all(mcp, client, enable_reactions=config.enable_reactions)
   return mcp
