from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class ResponseEnvelope(BaseModel):
    """Fixed-shape wrapper returned by the document endpoints."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Absent ``ok`` decodes as False and is treated as a rejection
    ok: StrictBool = False
    index: str = Field(default="", alias="_index")
    type: str = Field(default="", alias="_type")
    id: str = Field(default="", alias="_id")
    found: StrictBool = False
    # 0.x servers answer reads with ``exists`` instead of ``found``
    exists: StrictBool | None = None
    source: dict[str, Any] | None = Field(default=None, alias="_source")
