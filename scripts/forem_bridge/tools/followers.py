from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from forem_bridge.client import ForemClient
from forem_bridge.tools.base import Page, PerPage, call_api

def register_follower_tools(mcp: FastMCP, client: ForemClient) -> None:

   @mcp.tool()
   async def get_followers(
      page: Page = None,
      per_page: PerPage = None,
      sort: Annotated[Optional[Literal["created_at"]], Field(description="Sort followers by field")] = None,
   ) -> str:
      """Get the authenticated user's followers on DEV Community. Supports pagination with sort by creation date."""
      return await call_api("get_followers", client.get("/followers/users", {
         "page": page,
         "per_page": per_page,
         "sort": sort,
      }))
