"""Minimal projection of a document: its schema-version declarations."""

from pydantic import BaseModel, ConfigDict, StrictStr


class Header(BaseModel):
    """The ``openapi`` (modern) and ``swagger`` (legacy) version fields."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    openapi: StrictStr | None = None
    swagger: StrictStr | None = None
