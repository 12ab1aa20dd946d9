from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AthleteRecord(BaseModel):
    """An athlete as stored in the data file."""

    id: int
    name: str
    plan: Any = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow")


class Dataset(BaseModel):
    athletes: list[AthleteRecord] = Field(default_factory=list)
    next_id: int = Field(default=1, alias="nextId")

    model_config = ConfigDict(populate_by_name=True)


class AthleteCreate(BaseModel):
    name: str = Field(min_length=1)
    plan: Any = None


class AthleteUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    plan: Any = None


class AthleteRead(BaseModel):
    id: str
    name: str
    plan: Any = None

    model_config = {"from_attributes": True}

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> str:
        return str(value)
