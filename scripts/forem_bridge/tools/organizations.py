from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from forem_bridge.client import ForemClient
from forem_bridge.tools.base import Page, PerPage, call_api, segment

OrgName = Annotated[str, Field(description="Organization username or slug")]

def register_organization_tools(mcp: FastMCP, client: ForemClient) -> None:

   @mcp.tool()
   async def get_organization(username: OrgName) -> str:
      """Get details about a DEV Community organization by its username/slug."""
      return await call_api("get_organization", client.get(f"/organizations/{segment(username)}"))

   @mcp.tool()
   async def get_organization_articles(username: OrgName, page: Page = None, per_page: PerPage = None) -> str:
      """Get articles published by an organization on DEV Community."""
      return await call_api("get_organization_articles", client.get(
         f"/organizations/{segment(username)}/articles", {"page": page, "per_page": per_page},
      ))

   @mcp.tool()
   async def get_organization_users(username: OrgName, page: Page = None, per_page: PerPage = None) -> str:
      """Get users who belong to a DEV Community organization."""
      return await call_api("get_organization_users", client.get(
         f"/organizations/{segment(username)}/users", {"page": page, "per_page": per_page},
      ))
