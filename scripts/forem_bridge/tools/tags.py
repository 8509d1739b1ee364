from fastmcp import FastMCP

from forem_bridge.client import ForemClient
from forem_bridge.tools.base import Page, PerPage, call_api

def register_tag_tools(mcp: FastMCP, client: ForemClient) -> None:

   @mcp.tool()
   async def get_tags(page: Page = None, per_page: PerPage = None) -> str:
      """List available tags from DEV Community with pagination."""
      return await call_api("get_tags", client.get("/tags", {"page": page, "per_page": per_page}))

   @mcp.tool()
   async def get_followed_tags() -> str:
      """Get the tags followed by the authenticated user."""
      return await call_api("get_followed_tags", client.get("/follows/tags"))
