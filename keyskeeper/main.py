import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from keyskeeper.config import settings
from keyskeeper.errors import EnquiryError
from keyskeeper.routers import enquiries, health
from keyskeeper.services.email_gateway import EmailGateway

logger.remove()
logger.add(sys.stderr, level=settings.log_level)

app = FastAPI(
    title="Keyskeeper Enquiry API",
    description="Appraisal, viewing and maintenance enquiry emails for the Keyskeeper website",
    version="0.1.0",
)

# CORS: allow the Next.js frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["*"],
)

# One gateway per process; the credential is read once here
app.state.email_gateway = EmailGateway.from_settings(settings)
if not app.state.email_gateway.configured:
    logger.warning("RESEND_API_KEY is not set; enquiry endpoints will return 500")


@app.exception_handler(EnquiryError)
async def enquiry_error_handler(request: Request, exc: EnquiryError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# Register routers
app.include_router(health.router)
app.include_router(enquiries.router)

logger.info("Keyskeeper Enquiry API started")
