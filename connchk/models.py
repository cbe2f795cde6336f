from __future__ import annotations

import logging
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)

TargetKind = Literal["Tcp", "Http"]
RequestMode = Literal["form", "json", "get"]


class HttpOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    params: Optional[Dict[str, str]] = None
    json_body: Any = Field(default=None, alias="json")
    ok: int = Field(..., ge=100, le=599)

    @model_validator(mode="after")
    def _warn_on_ambiguous_body(self) -> "HttpOptions":
        if self.params is not None and self.json_body is not None:
            logger.warning("custom block sets both params and json; posting params as a form")
        elif self.params is None and self.json_body is None:
            logger.warning("custom block sets neither params nor json; falling back to GET/200 and ignoring ok")
        return self

    @property
    def request_mode(self) -> RequestMode:
        # params take precedence over json
        if self.params is not None:
            return "form"
        if self.json_body is not None:
            return "json"
        return "get"


class Target(BaseModel):
    """
    A single endpoint to check.

    Everything except ``result`` is frozen once the model is built. ``result``
    is filled exactly once by the runner via ``record``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    description: str = Field(..., alias="desc", min_length=1, frozen=True)
    address: str = Field(..., alias="addr", min_length=1, frozen=True)
    kind: TargetKind = Field(..., frozen=True)
    http_options: Optional[HttpOptions] = Field(default=None, alias="custom", frozen=True)
    result: Optional[str] = None

    @model_validator(mode="after")
    def _note_ignored_options(self) -> "Target":
        if self.kind == "Tcp" and self.http_options is not None:
            logger.debug("ignoring custom HTTP options on TCP target %r", self.description)
        return self

    @property
    def request_mode(self) -> RequestMode | None:
        if self.kind != "Http":
            return None
        if self.http_options is None:
            return "get"
        return self.http_options.request_mode

    def record(self, outcome: str) -> None:
        if self.result is not None:
            raise RuntimeError(f"target {self.description!r} was already checked")
        self.result = outcome


class NetworkResources(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target: List[Target]
