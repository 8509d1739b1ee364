from fastmcp import FastMCP

from forem_bridge.client import ForemClient
from forem_bridge.tools.base import Page, PerPage, call_api

def register_reading_list_tools(mcp: FastMCP, client: ForemClient) -> None:

   @mcp.tool()
   async def get_reading_list(page: Page = None, per_page: PerPage = None) -> str:
      """Get the authenticated user's reading list (bookmarked articles). Supports pagination."""
      return await call_api("get_reading_list", client.get("/readinglist", {"page": page, "per_page": per_page}))
