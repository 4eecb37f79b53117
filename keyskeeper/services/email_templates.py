"""Jinja2 rendering for the notification emails.

Templates live in ``keyskeeper/templates`` and extend ``_layout.html``.
Autoescaping is on, so form text can never inject markup into an email.
"""

from __future__ import annotations

from datetime import date, time
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from keyskeeper.models.enquiry import AppraisalRequest, MaintenanceRequest, ViewingRequest

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

NOT_SPECIFIED = "Not specified"

PRIORITY_COLORS = {
    "urgent": "#dc2626",
    "high": "#ea580c",
    "medium": "#ca8a04",
    "low": "#16a34a",
}
DEFAULT_PRIORITY_COLOR = "#6b7280"

# Inline styles shared by every template
STYLES = {
    "h2": "color: #374151; font-size: 20px; margin-bottom: 15px; border-bottom: 2px solid #504746; padding-bottom: 5px;",
    "label": "padding: 8px 0; color: #6b7280; font-weight: 600;",
    "cell": "padding: 8px 0; color: #374151;",
}

PRIORITY_LABELS = {
    "urgent": "URGENT - Same Day",
    "high": "HIGH - Within 24 Hours",
    "medium": "MEDIUM - Within Few Days",
    "low": "LOW - Can Wait a Week",
}


def or_not_specified(value: object) -> object:
    """Placeholder for optional fields the submitter left out."""
    if value is None or value == "":
        return NOT_SPECIFIED
    return value


def number(value: int | float) -> str:
    """Render 3.0 as '3' but keep 2.5 as '2.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def humanize(token: str | None) -> str:
    """'rental_appraisal' -> 'rental appraisal'. Every underscore is replaced."""
    if not token:
        return NOT_SPECIFIED
    return token.replace("_", " ")


def long_date(value: date) -> str:
    """NZ long form, e.g. 'Wednesday, 15 January 2025'."""
    return f"{value:%A}, {value.day} {value:%B} {value.year}"


def clock_time(value: time) -> str:
    """12-hour clock, e.g. 14:30 -> '2:30 PM'."""
    hour = value.hour % 12 or 12
    marker = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {marker}"


def priority_color(priority: str) -> str:
    """Badge colour for a priority, grey when unknown."""
    return PRIORITY_COLORS.get(priority, DEFAULT_PRIORITY_COLOR)


def priority_label(priority: str) -> str:
    """Response-time label for a priority, or the raw value when unknown."""
    return PRIORITY_LABELS.get(priority, priority)


def _build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters.update(
        or_not_specified=or_not_specified,
        number=number,
        humanize=humanize,
        long_date=long_date,
        clock_time=clock_time,
        priority_color=priority_color,
        priority_label=priority_label,
    )
    env.globals["style"] = STYLES
    return env


env = _build_environment()


def render_appraisal_email(req: AppraisalRequest) -> str:
    """HTML body for an appraisal request."""
    return env.get_template("appraisal_request.html").render(req=req)


def render_viewing_email(req: ViewingRequest) -> str:
    """HTML body for a viewing request."""
    return env.get_template("viewing_request.html").render(req=req)


def render_maintenance_email(req: MaintenanceRequest) -> str:
    """HTML body for a maintenance request."""
    return env.get_template("maintenance_request.html").render(req=req)
