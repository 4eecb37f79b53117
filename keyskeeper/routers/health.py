from fastapi import APIRouter, Depends

from keyskeeper.services.email_gateway import EmailGateway, get_email_gateway

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health(gateway: EmailGateway = Depends(get_email_gateway)):
    """Liveness check; also reports whether the Resend key is set."""
    return {"status": "ok", "email_configured": gateway.configured}
