"""Composes enquiry notifications and hands them to the gateway.

Every enquiry goes to the single business inbox, with reply-to set to the
person who submitted the form so staff can answer straight from the email.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from keyskeeper.config import Settings
from keyskeeper.errors import DispatchError
from keyskeeper.models.email import OutboundEmail
from keyskeeper.models.enquiry import AppraisalRequest, MaintenanceRequest, ViewingRequest
from keyskeeper.services.email_gateway import EmailGateway
from keyskeeper.services.email_templates import (
    render_appraisal_email,
    render_maintenance_email,
    render_viewing_email,
)


def compose_appraisal_email(req: AppraisalRequest, settings: Settings) -> OutboundEmail:
    """Appraisal notification, replying to the submitter."""
    return OutboundEmail(
        from_address=settings.appraisal_sender,
        to=[settings.notification_recipient],
        subject=f"New Property Appraisal Request - {req.property_address}",
        html=render_appraisal_email(req),
        reply_to=req.email,
    )


def compose_viewing_email(req: ViewingRequest, settings: Settings) -> OutboundEmail:
    """Viewing notification; the subject falls back to "Property" without a title."""
    return OutboundEmail(
        from_address=settings.viewing_sender,
        to=[settings.notification_recipient],
        subject=f"New Viewing Request - {req.property_title or 'Property'}",
        html=render_viewing_email(req),
        reply_to=req.viewer_email,
    )


def maintenance_subject(req: MaintenanceRequest) -> str:
    """'🚨 EMERGENCY Maintenance Request - ...' or e.g. 'HIGH Maintenance Request - ...'."""
    prefix = "🚨 EMERGENCY" if req.is_emergency else req.priority.upper()
    return f"{prefix} Maintenance Request - {req.issue_title}"


def compose_maintenance_email(req: MaintenanceRequest, settings: Settings) -> OutboundEmail:
    """Maintenance notification, subject prefixed by emergency or priority."""
    return OutboundEmail(
        from_address=settings.maintenance_sender,
        to=[settings.notification_recipient],
        subject=maintenance_subject(req),
        html=render_maintenance_email(req),
        reply_to=req.tenant_email,
    )


async def dispatch(gateway: EmailGateway, email: OutboundEmail) -> dict[str, Any]:
    """Send one email and build the success envelope.

    Raises:
        DispatchError: The provider rejected the email or was unreachable.
    """
    result = await gateway.send(email)

    if not result.ok:
        err = result.error
        logger.error(
            "Resend error for '{}': {} ({}): {}",
            email.subject,
            err.name,
            err.status_code,
            err.message,
        )
        raise DispatchError(err.message)

    return {"success": True, "data": result.data}
