from __future__ import annotations
import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from forem_bridge.config import BridgeConfig, ConfigError
from forem_bridge.server import create_server

log = logging.getLogger("forem.serve")

def main(argv=None) -> int:
   ap = argparse.ArgumentParser(description="Serve the Forem (DEV.to) API as MCP tools over stdio.")
   ap.add_argument("--log-level", type=str, default="INFO", help="Logging level (e.g., INFO, DEBUG)")
   ap.add_argument("--timeout", type=float, default=None, help="Per-attempt request timeout in seconds (default: DEVTO_TIMEOUT or 30)")
   ap.add_argument("--base-url", type=str, default=None, help="API base URL (default: DEVTO_BASE_URL or https://dev.to/api)")
   ap.add_argument("--enable-reactions", action="store_true", default=None, help="Also expose the toggle_reaction tool")
   args = ap.parse_args(argv)

   # stdout carries the MCP stdio transport, so logs go to stderr
   logging.basicConfig(
      level=getattr(logging, args.log_level.upper(), logging.INFO),
      format="%(message)s",
      datefmt="[%X]",
      handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False)],
   )

   try:
      config = BridgeConfig.from_env(
         timeout=args.timeout,
         base_url=args.base_url,
         enable_reactions=args.enable_reactions,
      )
   except ConfigError as exc:
      print(f"Error: {exc}", file=sys.stderr)
      return 1

   server = create_server(config)
   log.info("Starting stdio transport")
   server.run()
   return 0

if __name__ == "__main__":
   sys.exit(main())
