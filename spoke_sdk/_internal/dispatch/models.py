"""Pydantic models for Spoke request dispatch."""

from typing import Any, Literal

from pydantic import BaseModel, field_validator, model_validator

HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]


class RequestContext(BaseModel):
    """Everything one dispatch needs, built fresh for each call.

    Required fields:
        method: HTTP verb
        path: Endpoint path relative to the API base URL (e.g. 'requests/123')

    Optional fields:
        params: Query parameters (list endpoints)
        json_body: JSON payload (create/update endpoints)

    At most one of params/json_body is set.
    """

    method: HttpMethod
    path: str
    params: dict[str, Any] | None = None
    json_body: Any = None

    model_config = {"frozen": True}

    @field_validator("method", mode="before")
    @classmethod
    def method_upper(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("path")
    @classmethod
    def path_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("path must not be empty")
        return v

    @field_validator("json_body", mode="before")
    @classmethod
    def dump_models(cls, v: Any) -> Any:
        if isinstance(v, BaseModel):
            return v.model_dump(mode="json", exclude_none=True)
        return v

    @model_validator(mode="after")
    def query_or_body(self) -> "RequestContext":
        if self.params is not None and self.json_body is not None:
            raise ValueError("a request carries query params or a JSON body, not both")
        return self
