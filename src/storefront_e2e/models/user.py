"""User record models consumed by the workflow commands.

This module contains:
- Gender enum matching the signup form radios
- UserRecord, the immutable fixture record
- SignupStatus / SignupOutcome, the tagged result of a signup attempt
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool, StrictStr


def _number_to_str(value: Any) -> Any:
    # bool is an int subclass; leave it for the strict str check to reject
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


# Fixture values the site renders as numbers (day, year, zipcode, mobile)
NumericText = Annotated[StrictStr, BeforeValidator(_number_to_str)]


class Gender(str, Enum):
    """Title radio on the account information form."""

    MALE = "male"
    FEMALE = "female"


class UserRecord(BaseModel):
    """One storefront user as loaded from the fixture file.

    Field names in the JSON fixture follow the site's camelCase
    (``firstName``, ``lastName``); both spellings are accepted. Date of birth
    stays as three independent select values. Only day, year, zipcode and
    mobile may be written as JSON numbers; every other text field must be a
    string and the checkboxes must be real booleans.

    Records are frozen: derive variants with :meth:`with_overrides`.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
    )

    name: StrictStr = Field(..., min_length=1)
    email: StrictStr = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    gender: Gender
    password: StrictStr = Field(..., min_length=1)
    day: NumericText
    month: StrictStr
    year: NumericText
    newsletter: StrictBool = False
    optin: StrictBool = False
    first_name: StrictStr = Field(..., alias="firstName")
    last_name: StrictStr = Field(..., alias="lastName")
    company: StrictStr = ""
    address: StrictStr
    address2: StrictStr = ""
    country: StrictStr
    state: StrictStr
    city: StrictStr
    zipcode: NumericText
    mobile: NumericText

    def with_overrides(self, **changes: Any) -> UserRecord:
        """Return a validated copy with ``changes`` applied.

        Changes may use either the fixture names (``firstName``) or the
        attribute names (``first_name``). The source record is left
        untouched, e.g. to reuse another record's email and force an
        "already exists" signup.
        """
        data = self.model_dump(by_alias=True)
        for key, value in changes.items():
            field = UserRecord.model_fields.get(key)
            data[(field.alias or key) if field is not None else key] = value
        return UserRecord.model_validate(data)


class SignupStatus(str, Enum):
    """Branch taken by a signup attempt."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class SignupOutcome:
    """Result of ``signup_user``.

    Attributes:
        status: Which branch the signup took.
        user: The record that was submitted, returned unchanged.
    """

    status: SignupStatus
    user: UserRecord

    @property
    def created(self) -> bool:
        """True when a new account now exists and is logged in."""
        return self.status is SignupStatus.CREATED
