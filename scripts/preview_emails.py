"""Render sample enquiry emails to HTML files for a visual check.

Run: python3 scripts/preview_emails.py
Output: previews/*.html
"""

from datetime import date, time
from pathlib import Path

from keyskeeper.models.enquiry import AppraisalRequest, MaintenanceRequest, ViewingRequest
from keyskeeper.services.email_templates import (
    render_appraisal_email,
    render_maintenance_email,
    render_viewing_email,
)

ROOT = Path(__file__).resolve().parent.parent
OUTPUT_DIR = ROOT / "previews"


def sample_appraisal() -> AppraisalRequest:
    return AppraisalRequest(
        first_name="Jane",
        last_name="Doe",
        email="jane@example.com",
        phone="021 555 0199",
        preferred_contact_method="email",
        preferred_contact_time="afternoon",
        property_address="12 Queen St",
        suburb="Auckland Central",
        city="Auckland",
        property_type="apartment",
        bedrooms=2,
        bathrooms=1,
        reason_for_appraisal="rental_appraisal",
        additional_info="Currently owner-occupied, available from next month.",
    )


def sample_viewing() -> ViewingRequest:
    return ViewingRequest(
        viewer_name="Sam Lee",
        viewer_email="sam@example.com",
        number_of_viewers=2,
        property_title="Sunny two-bedroom flat",
        property_address="4 Karangahape Rd, Auckland",
        preferred_date=date(2025, 1, 15),
        preferred_time=time(14, 30),
        alternative_date=date(2025, 1, 16),
        alternative_time=time(9, 0),
        message="We have a small, well-behaved dog.",
    )


def sample_maintenance() -> MaintenanceRequest:
    return MaintenanceRequest(
        tenant_name="Aroha Smith",
        tenant_email="aroha@example.com",
        property_address="7 Hill Rd, Wellington",
        issue_title="Burst pipe under the kitchen sink",
        issue_description="Water is pooling on the floor and reaching the hallway carpet.",
        category="plumbing",
        priority="urgent",
        is_emergency=True,
        image_names=["sink.jpg", "hallway.jpg"],
    )


def main():
    OUTPUT_DIR.mkdir(exist_ok=True)
    previews = {
        "appraisal_request.html": render_appraisal_email(sample_appraisal()),
        "viewing_request.html": render_viewing_email(sample_viewing()),
        "maintenance_request.html": render_maintenance_email(sample_maintenance()),
    }
    for name, html in previews.items():
        path = OUTPUT_DIR / name
        path.write_text(html, encoding="utf-8")
        print(f"Wrote {path}")


if __name__ == "__main__":
    main()
