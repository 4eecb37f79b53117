"""Website form submissions.

Field names arrive camelCase from the Next.js forms (``firstName``) and are
exposed snake_case in Python. Blank strings are treated as absent, since
HTML forms post ``""`` for untouched inputs.
"""

from __future__ import annotations

from datetime import date, time
from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class EnquiryForm(BaseModel):
    """Base for the form schemas: camelCase aliases and blank-to-None."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    required_fields: ClassVar[tuple[str, ...]] = ()

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @classmethod
    def missing_fields(cls, data: Mapping[str, Any]) -> list[str]:
        """Names (as posted) of required fields absent or blank in a raw body.

        Runs before type parsing, so an incomplete form is reported as such
        even when another field would fail to parse.
        """
        missing = []
        for name in cls.required_fields:
            alias = to_camel(name)
            value = data.get(alias, data.get(name))
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(alias)
        return missing


class AppraisalRequest(EnquiryForm):
    """Property appraisal request from the /property-appraisal page."""

    required_fields: ClassVar[tuple[str, ...]] = (
        "first_name",
        "last_name",
        "email",
        "property_address",
    )

    # Contact
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    preferred_contact_method: str | None = None
    preferred_contact_time: str | None = None

    # Property
    property_address: str | None = None
    suburb: str | None = None
    city: str | None = None
    property_type: str | None = None
    bedrooms: int | None = None
    bathrooms: float | None = None
    land_size: float | None = None  # square metres
    year_built: str | None = None  # free text, e.g. "1998" or "circa 1920"
    current_value: str | None = None  # free text, e.g. "$850,000"

    # Appraisal
    reason_for_appraisal: str | None = None  # e.g. "selling", "rental_appraisal"
    additional_info: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class ViewingRequest(EnquiryForm):
    """Viewing request submitted from a property detail page."""

    required_fields: ClassVar[tuple[str, ...]] = (
        "viewer_name",
        "viewer_email",
        "preferred_date",
        "preferred_time",
    )

    viewer_name: str | None = None
    viewer_email: str | None = None
    viewer_phone: str | None = None
    number_of_viewers: int | None = None

    property_title: str | None = None
    property_address: str | None = None

    preferred_date: date | None = None  # YYYY-MM-DD
    preferred_time: time | None = None  # HH:MM, 24-hour
    alternative_date: date | None = None
    alternative_time: time | None = None

    message: str | None = None

    @property
    def has_alternative(self) -> bool:
        """The alternative slot is only meaningful when both halves are given."""
        return self.alternative_date is not None and self.alternative_time is not None


class MaintenanceRequest(EnquiryForm):
    """Tenant maintenance request from the /maintenance-request page."""

    required_fields: ClassVar[tuple[str, ...]] = (
        "tenant_name",
        "tenant_email",
        "property_address",
        "issue_title",
        "issue_description",
    )

    tenant_name: str | None = None
    tenant_email: str | None = None
    tenant_phone: str | None = None
    property_address: str | None = None

    issue_title: str | None = None
    issue_description: str | None = None
    category: str | None = None  # e.g. "plumbing", "heating_cooling"
    priority: str = "medium"  # urgent | high | medium | low
    is_emergency: bool = False

    preferred_contact_time: str | None = None
    additional_notes: str | None = None

    # Filenames of uploaded photos; the files themselves are not attached.
    image_names: list[str] = []

    @field_validator("priority", mode="before")
    @classmethod
    def default_priority(cls, value: Any) -> Any:
        if value is None or not str(value).strip():
            return "medium"
        return str(value).strip().lower()

    @field_validator("is_emergency", mode="before")
    @classmethod
    def emergency_flag(cls, value: Any) -> Any:
        if value is None:
            return False
        if isinstance(value, str):
            return value.lower() == "true"
        return value
