from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class TaskCreate(BaseModel):
    """Incoming task body. Unknown fields are dropped, numbers and booleans become strings."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    title: Optional[str] = None
    description: Optional[str] = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def bool_to_str(cls, v: Any) -> Any:
        if isinstance(v, bool):
            return "true" if v else "false"
        return v


class TaskOut(BaseModel):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
