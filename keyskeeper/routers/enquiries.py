"""Website enquiry endpoints.

Each route checks the email configuration first, then checks required fields
on the raw body, parses it into its schema, renders the notification and sends it
through the shared gateway. Every failure leaves as an ``EnquiryError`` so
the client always gets ``{"error": ...}`` and never a traceback.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Mapping, TypeVar

from fastapi import APIRouter, Depends, Request
from loguru import logger
from starlette.datastructures import UploadFile

from keyskeeper.config import settings
from keyskeeper.errors import ConfigurationError, EnquiryError, InternalError, ValidationError
from keyskeeper.models.enquiry import (
    AppraisalRequest,
    EnquiryForm,
    MaintenanceRequest,
    ViewingRequest,
)
from keyskeeper.services.email_gateway import EmailGateway, get_email_gateway
from keyskeeper.services.email_sender import (
    compose_appraisal_email,
    compose_maintenance_email,
    compose_viewing_email,
    dispatch,
)

router = APIRouter(prefix="/api", tags=["enquiries"])

MAX_IMAGES = 5

FormT = TypeVar("FormT", bound=EnquiryForm)


@contextmanager
def _handler_boundary(route: str) -> Iterator[None]:
    """Let EnquiryErrors through; turn anything else into InternalError."""
    try:
        yield
    except EnquiryError:
        raise
    except Exception as e:
        logger.exception("{} failed unexpectedly", route)
        raise InternalError(f"{type(e).__name__}: {e}") from e


def _require_configured(gateway: EmailGateway) -> None:
    if not gateway.configured:
        logger.error("RESEND_API_KEY is not configured")
        raise ConfigurationError()


def _parse_form(schema: type[FormT], data: object) -> FormT:
    """Check required fields on the raw body, then parse it into ``schema``.

    Schema mismatches on a complete body surface as InternalError.
    """
    if isinstance(data, Mapping):
        missing = schema.missing_fields(data)
        if missing:
            logger.info("Rejected {}: missing {}", schema.__name__, ", ".join(missing))
            raise ValidationError(f"Missing: {', '.join(missing)}")
    return schema.model_validate(data)


async def _read_json(request: Request, schema: type[FormT]) -> FormT:
    # Malformed JSON surfaces as InternalError
    body = await request.json()
    return _parse_form(schema, body)


async def _read_maintenance_form(request: Request) -> MaintenanceRequest:
    form = await request.form()
    fields = {key: value for key, value in form.items() if isinstance(value, str)}

    image_names = []
    for i in range(MAX_IMAGES):
        upload = form.get(f"image_{i}")
        if isinstance(upload, UploadFile) and upload.filename:
            image_names.append(upload.filename)

    return _parse_form(MaintenanceRequest, {**fields, "imageNames": image_names})


@router.post("/send-appraisal-email")
async def send_appraisal_email(
    request: Request,
    gateway: EmailGateway = Depends(get_email_gateway),
):
    """Email a property appraisal request to the business inbox."""
    with _handler_boundary("send-appraisal-email"):
        _require_configured(gateway)
        req = await _read_json(request, AppraisalRequest)

        logger.info("Appraisal request for {} from {}", req.property_address, req.email)
        return await dispatch(gateway, compose_appraisal_email(req, settings))


@router.post("/send-viewing-request-email")
async def send_viewing_request_email(
    request: Request,
    gateway: EmailGateway = Depends(get_email_gateway),
):
    """Email a property viewing request to the business inbox."""
    with _handler_boundary("send-viewing-request-email"):
        _require_configured(gateway)
        req = await _read_json(request, ViewingRequest)

        logger.info(
            "Viewing request for '{}' from {} on {} {}",
            req.property_title,
            req.viewer_email,
            req.preferred_date,
            req.preferred_time,
        )
        return await dispatch(gateway, compose_viewing_email(req, settings))


@router.post("/send-maintenance-email")
async def send_maintenance_email(
    request: Request,
    gateway: EmailGateway = Depends(get_email_gateway),
):
    """Email a tenant maintenance request (multipart form) to the business inbox."""
    with _handler_boundary("send-maintenance-email"):
        _require_configured(gateway)
        req = await _read_maintenance_form(request)

        logger.info(
            "Maintenance request '{}' ({}, emergency={}) from {}",
            req.issue_title,
            req.priority,
            req.is_emergency,
            req.tenant_email,
        )
        return await dispatch(gateway, compose_maintenance_email(req, settings))
