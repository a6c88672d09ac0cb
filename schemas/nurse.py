from datetime import date
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer, field_validator, model_validator
from core.age import calculate_age, parse_dob


class Nurse(BaseModel):
    """A nurse record as returned by ``GET /nurses``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Union[int, str]
    name: str = Field(min_length=1)
    license_number: str = Field(min_length=1)
    dob: date
    age: int

    @model_validator(mode="before")
    @classmethod
    def derive_missing_age(cls, values: Any) -> Any:
        if isinstance(values, dict) and values.get("age") in (None, "") and values.get("dob"):
            values = {**values, "age": calculate_age(values["dob"])}
        return values

    @field_validator("dob", mode="before")
    @classmethod
    def keep_calendar_date(cls, value: Any) -> date:
        return parse_dob(value)


class NurseDraft(BaseModel):
    """
    Values held by the add/edit form.

    ``age`` is derived from ``dob`` on every read and cannot be set, so the
    payload sent to the backend always carries the age matching the date of
    birth.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    license_number: str = ""
    dob: Optional[date] = None

    @field_validator("dob", mode="before")
    @classmethod
    def empty_dob_is_none(cls, value: Any) -> Optional[date]:
        if value in (None, ""):
            return None
        return parse_dob(value)

    @computed_field
    @property
    def age(self) -> Optional[int]:
        if self.dob is None:
            return None
        return calculate_age(self.dob)

    @field_serializer("dob")
    def serialize_dob(self, dob: Optional[date]) -> Optional[str]:
        return dob.isoformat() if dob else None

    @classmethod
    def from_nurse(cls, nurse: Nurse) -> "NurseDraft":
        return cls(name=nurse.name, license_number=nurse.license_number, dob=nurse.dob)

    def payload(self) -> dict:
        """ JSON body for ``POST /nurses`` and ``PUT /nurses/{id}``. """
        return self.model_dump(mode="json")
