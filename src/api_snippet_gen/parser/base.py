"""Data models for request examples extracted from OpenAPI documents.

The extractor turns every renderable operation into a ``RequestExample``;
renderers only ever read these models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class RequestParams(BaseModel):
    """Resolved example values for one operation."""

    model_config = ConfigDict(frozen=True)

    path: dict[str, Any] = {}  # {param_name: example}
    query: dict[str, Any] = {}
    body: Any = None  # application/json body example, None when absent


class RequestExample(BaseModel):
    """A single normalized request descriptor."""

    model_config = ConfigDict(frozen=True)

    method: str  # GET / POST / PUT / DELETE
    path: str  # /users/{id}, unresolved
    params: RequestParams

    @property
    def path_params(self) -> dict[str, Any]:
        return self.params.path

    @property
    def query_params(self) -> dict[str, Any]:
        return self.params.query

    @property
    def body(self) -> Any:
        return self.params.body
