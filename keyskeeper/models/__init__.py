from .enquiry import (
    EnquiryForm,
    AppraisalRequest,
    ViewingRequest,
    MaintenanceRequest,
)
from .email import OutboundEmail, ProviderError, SendResult

__all__ = [
    "EnquiryForm",
    "AppraisalRequest",
    "ViewingRequest",
    "MaintenanceRequest",
    "OutboundEmail",
    "ProviderError",
    "SendResult",
]
