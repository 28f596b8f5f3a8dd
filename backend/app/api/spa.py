"""SPA Static Files — serves the built frontend, falling back to index.html.

Unknown non-API paths return the entry page so client-side routing can resolve
them; unknown /api paths keep their 404.
"""

from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

ENTRY_PAGE = "index.html"


class SPAStaticFiles(StaticFiles):
    """StaticFiles with single-page-app fallback."""

    async def get_response(self, path: str, scope: Scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404 or path.split("/", 1)[0] == "api":
                raise
            return await super().get_response(ENTRY_PAGE, scope)
