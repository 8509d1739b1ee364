from typing import Annotated, List, Literal, Optional

from fastmcp import FastMCP
from pydantic import AnyHttpUrl, Field, ValidationError

from forem_bridge.client import ForemClient
from forem_bridge.models import ArticleChanges, ArticleDraft
from forem_bridge.tools.base import Page, PerPage, call_api, fail

ArticleId = Annotated[int, Field(ge=1, description="The numeric ID of the article")]
Tags = Annotated[Optional[List[str]], Field(max_length=4, description="List of tags (max 4)")]

_MY_ARTICLE_PATHS = {
   "published": "/articles/me/published",
   "unpublished": "/articles/me/unpublished",
   "all": "/articles/me/all",
}

def register_article_tools(mcp: FastMCP, client: ForemClient) -> None:

   @mcp.tool()
   async def get_articles(
      page: Page = None,
      per_page: PerPage = None,
      tag: Annotated[Optional[str], Field(description="Filter by tag name")] = None,
      tags: Annotated[Optional[str], Field(description="Comma-separated list of tags to filter by (any match)")] = None,
      tags_exclude: Annotated[Optional[str], Field(description="Comma-separated list of tags to exclude")] = None,
      username: Annotated[Optional[str], Field(description="Filter by author username")] = None,
      state: Annotated[Optional[Literal["fresh", "rising", "all"]], Field(description="Article state filter")] = None,
      top: Annotated[Optional[int], Field(ge=1, description="Return most popular articles in the last N days")] = None,
      collection_id: Annotated[Optional[int], Field(description="Filter by collection ID")] = None,
   ) -> str:
      """List published articles from DEV Community with optional filters. Returns articles ordered by descending popularity by default."""
      return await call_api("get_articles", client.get("/articles", {
         "page": page,
         "per_page": per_page,
         "tag": tag,
         "tags": tags,
         "tags_exclude": tags_exclude,
         "username": username,
         "state": state,
         "top": top,
         "collection_id": collection_id,
      }))

   @mcp.tool()
   async def get_article_by_id(id: ArticleId) -> str:
      """Get a published article by its numeric ID. Returns full article details including body content."""
      return await call_api("get_article_by_id", client.get(f"/articles/{id}"))

   @mcp.tool()
   async def create_article(
      title: Annotated[str, Field(description="Title of the article")],
      body_markdown: Annotated[Optional[str], Field(description="Article content in markdown format")] = None,
      published: Annotated[Optional[bool], Field(description="Whether to publish immediately (false = draft)")] = None,
      tags: Tags = None,
      series: Annotated[Optional[str], Field(description="Article series name")] = None,
      canonical_url: Annotated[Optional[AnyHttpUrl], Field(description="Original URL if cross-posting")] = None,
      description: Annotated[Optional[str], Field(description="Short description for the article")] = None,
      main_image: Annotated[Optional[AnyHttpUrl], Field(description="Main cover image URL")] = None,
      organization_id: Annotated[Optional[int], Field(description="Organization ID to publish under")] = None,
   ) -> str:
      """Create a new article on DEV Community. Set published to false to save as draft."""
      try:
         draft = ArticleDraft(
            title=title, body_markdown=body_markdown, published=published, tags=tags,
            series=series, canonical_url=canonical_url, description=description,
            main_image=main_image, organization_id=organization_id,
         )
      except ValidationError as exc:
         raise fail(str(exc)) from exc
      return await call_api("create_article", client.post("/articles", draft.payload()))

   @mcp.tool()
   async def update_article(
      id: Annotated[int, Field(ge=1, description="The numeric ID of the article to update")],
      title: Annotated[Optional[str], Field(description="New title")] = None,
      body_markdown: Annotated[Optional[str], Field(description="New content in markdown")] = None,
      published: Annotated[Optional[bool], Field(description="Publish or unpublish the article")] = None,
      tags: Tags = None,
      series: Annotated[Optional[str], Field(description="New series name")] = None,
      clear_series: Annotated[bool, Field(description="Remove the article from its series")] = False,
      canonical_url: Annotated[Optional[AnyHttpUrl], Field(description="New canonical URL")] = None,
      description: Annotated[Optional[str], Field(description="New description")] = None,
      main_image: Annotated[Optional[AnyHttpUrl], Field(description="New cover image URL")] = None,
      organization_id: Annotated[Optional[int], Field(description="Organization ID")] = None,
   ) -> str:
      """Update an existing article by its ID. Only include fields you want to change."""
      supplied = {
         "title": title,
         "body_markdown": body_markdown,
         "published": published,
         "tags": tags,
         "series": series,
         "canonical_url": canonical_url,
         "description": description,
         "main_image": main_image,
         "organization_id": organization_id,
      }
      fields = {k: v for k, v in supplied.items() if v is not None}
      if clear_series:
         fields["series"] = None
      try:
         changes = ArticleChanges(**fields)
      except ValidationError as exc:
         raise fail(str(exc)) from exc
      return await call_api("update_article", client.put(f"/articles/{id}", changes.payload()))

   @mcp.tool()
   async def get_my_articles(
      page: Page = None,
      per_page: PerPage = None,
      status: Annotated[Literal["published", "unpublished", "all"],
                        Field(description="Filter by article status (default: all)")] = "all",
   ) -> str:
      """Get the authenticated user's own articles. Can filter by published, unpublished, or all."""
      path = _MY_ARTICLE_PATHS.get(status, _MY_ARTICLE_PATHS["all"])
      return await call_api("get_my_articles", client.get(path, {"page": page, "per_page": per_page}))
