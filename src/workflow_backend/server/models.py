"""Pydantic models for the REST server.

These are response/request *shapes* only: nothing here is persisted, and no field
is constrained beyond its JSON type (e.g. task status is any string).

Scalars are strict so a request body decodes like a plain struct: `"5"` is not an
int and `"yes"` is not a bool.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr, model_validator


class ApiModel(BaseModel):
    # Unknown request fields are ignored, like a plain struct decode.
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_means_zero_value(cls, data: Any) -> Any:
        # An explicit JSON null leaves the field at its default.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_json(self) -> dict[str, Any]:
        """Serialise, omitting optional fields that were left empty."""

        return self.model_dump(mode="json", exclude_none=True)


class Repository(ApiModel):
    id: StrictInt = 0
    name: StrictStr = ""
    full_name: StrictStr = ""
    description: StrictStr | None = None
    private: StrictBool = False
    language: StrictStr | None = None
    url: StrictStr = ""
    html_url: StrictStr = ""
    clone_url: StrictStr = ""
    stars: StrictInt = 0
    forks: StrictInt = 0
    is_connected: StrictBool = False
    last_sync: StrictStr | None = None
    created_at: StrictStr = ""
    updated_at: StrictStr = ""
    topics: list[StrictStr] | None = None


class Task(ApiModel):
    id: StrictStr = ""
    title: StrictStr = ""
    description: StrictStr = ""
    status: StrictStr = ""
    repository: StrictStr = ""
    epic: StrictStr = ""
    branch: StrictStr | None = None
    created_at: StrictStr = ""
    updated_at: StrictStr = ""
    started_at: StrictStr | None = None
    completed_at: StrictStr | None = None
    tokens_used: StrictInt = 0
    metadata: dict[StrictStr, StrictStr] | None = None


class ErrorEnvelope(BaseModel):
    status: str = "error"
    message: str
