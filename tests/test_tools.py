import asyncio
import json

import httpx
import pytest
from fastmcp import Client

from forem_bridge.client import ForemClient
from forem_bridge.config import BridgeConfig
from forem_bridge.server import create_server
from forem_bridge.tools.base import call_api
from forem_bridge.errors import ApiError, ErrorKind

from conftest import API_KEY, Script, json_response

DEFAULT_TOOLS = {
   "get_articles", "get_article_by_id", "create_article", "update_article", "get_my_articles",
   "get_comments", "get_comment_by_id",
   "get_authenticated_user", "get_user_by_username",
   "get_tags", "get_followed_tags",
   "get_organization", "get_organization_articles", "get_organization_users",
   "get_reading_list",
   "get_followers",
}

async def _no_sleep(_seconds):
   return None

def _session(script, fn, *, enable_reactions=False):
   async def go():
      async with httpx.AsyncClient(transport=httpx.MockTransport(script)) as http:
         client = ForemClient(API_KEY, http=http, sleep=_no_sleep)
         mcp = create_server(BridgeConfig(API_KEY, enable_reactions=enable_reactions), client=client)
         async with Client(mcp) as session:
            return await fn(session)
   return asyncio.run(go())

def _call(script, name, args=None):
   return _session(script, lambda s: s.call_tool_mcp(name, args or {}))

def _text(result):
   return result.content[0].text

def test_default_tool_catalogue():
   tools = _session(Script(json_response({})), lambda s: s.list_tools())
   assert {t.name for t in tools} == DEFAULT_TOOLS

def test_reactions_are_opt_in():
   tools = _session(Script(json_response({})), lambda s: s.list_tools(), enable_reactions=True)
   assert {t.name for t in tools} == DEFAULT_TOOLS | {"toggle_reaction"}

def test_get_articles_forwards_filters_and_serializes():
   script = Script(json_response([{"id": 1, "title": "Hello"}]))
   result = _call(script, "get_articles", {"per_page": 2, "tag": "python", "state": "rising"})
   assert not result.isError
   assert json.loads(_text(result)) == [{"id": 1, "title": "Hello"}]
   url = str(script.requests[0].url)
   assert "per_page=2" in url and "tag=python" in url and "state=rising" in url
   assert "page=" not in url.replace("per_page=", "")

def test_api_error_becomes_error_result():
   script = Script(json_response({"error": "not found"}, 404, {"x-request-id": "req-9"}))
   result = _call(script, "get_article_by_id", {"id": 999})
   assert result.isError
   text = _text(result)
   assert "Error:" in text
   assert "404" in text and "not found" in text and "req-9" in text
   assert script.attempts == 1

def test_schema_violation_never_reaches_the_api():
   script = Script(json_response([]))
   result = _call(script, "get_tags", {"per_page": 5000})
   assert result.isError
   assert script.attempts == 0

def test_get_comments_requires_an_id():
   script = Script(json_response([]))
   result = _call(script, "get_comments", {})
   assert result.isError
   assert "a_id" in _text(result)
   assert script.attempts == 0

def test_get_my_articles_maps_status_to_path():
   script = Script(json_response([]))
   _call(script, "get_my_articles", {"status": "unpublished", "page": 2})
   url = str(script.requests[0].url)
   assert "/articles/me/unpublished?" in url and "page=2" in url

def test_create_article_wraps_fields():
   script = Script(json_response({"id": 5}, 201))
   result = _call(script, "create_article", {"title": "T", "published": False, "tags": ["a", "b"]})
   assert not result.isError
   body = json.loads(script.requests[0].content)
   assert body == {"article": {"title": "T", "published": False, "tags": ["a", "b"]}}

def test_create_article_rejects_malformed_urls_locally():
   script = Script(json_response({"id": 5}, 201))
   result = _call(script, "create_article", {"title": "T", "canonical_url": "not a url"})
   assert result.isError
   assert script.attempts == 0

def test_create_article_sends_urls_as_plain_strings():
   script = Script(json_response({"id": 5}, 201))
   result = _call(script, "create_article", {
      "title": "T",
      "canonical_url": "https://blog.example.com/post-1",
      "main_image": "https://cdn.example.com/cover.png",
   })
   assert not result.isError
   article = json.loads(script.requests[0].content)["article"]
   assert article["canonical_url"] == "https://blog.example.com/post-1"
   assert article["main_image"] == "https://cdn.example.com/cover.png"

def test_update_article_sends_only_supplied_fields():
   script = Script(json_response({"id": 5}))
   _call(script, "update_article", {"id": 5, "title": "New", "clear_series": True})
   req = script.requests[0]
   assert req.method == "PUT"
   assert str(req.url).endswith("/articles/5")
   assert json.loads(req.content) == {"article": {"title": "New", "series": None}}

def test_user_by_username_uses_url_param():
   script = Script(json_response({"username": "ben"}))
   _call(script, "get_user_by_username", {"username": "ben"})
   assert "/users/by_username?url=ben" in str(script.requests[0].url)

def test_organization_path_segment_is_encoded():
   script = Script(json_response({}))
   _call(script, "get_organization_users", {"username": "a/b c"})
   assert script.requests[0].url.raw_path.startswith(b"/api/organizations/a%2Fb%20c/users")

def test_toggle_reaction_posts_query_only():
   script = Script(json_response({"result": "create"}))
   _session(script, lambda s: s.call_tool_mcp("toggle_reaction", {
      "reactable_id": 3, "reactable_type": "Article", "category": "unicorn",
   }), enable_reactions=True)
   req = script.requests[0]
   assert req.method == "POST"
   assert req.content == b""
   assert "category=unicorn" in str(req.url)

def test_call_api_converts_failures():
   from fastmcp.exceptions import ToolError

   async def boom():
      raise ApiError(kind=ErrorKind.TERMINAL, status=400, message="bad", endpoint="/x", method="GET")

   async def crash():
      raise RuntimeError("kaput")

   async def ok():
      return {"a": 1}

   with pytest.raises(ToolError, match=r"^Error: Forem API Error \(400 GET /x\): bad$"):
      asyncio.run(call_api("t", boom()))
   with pytest.raises(ToolError, match="kaput"):
      asyncio.run(call_api("t", crash()))
   assert json.loads(asyncio.run(call_api("t", ok()))) == {"a": 1}
