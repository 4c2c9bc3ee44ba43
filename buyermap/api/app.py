"""
BuyerMap FastAPI Application.

Gate endpoints for the private beta:
- Beta password verification
- Slack webhook connectivity test
- Supabase auth webhook (new user signup notifications)
- Health check and read-only content endpoint

Run with:
    uvicorn buyermap.api.app:app --reload
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Depends, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..content import content_as_dict
from ..core.config import Config, get_config
from ..core.observability import setup_logging, setup_logfire
from ..services.beta_access_service import BetaAccessService
from ..services.slack_service import NewUserSlackContent, SlackService
from .models import (
    BetaPasswordRequest,
    BetaPasswordResponse,
    ErrorResponse,
    HealthResponse,
    SupabaseWebhookPayload,
    WebhookAck,
    WebhookTestResponse,
)

# ============================================================================
# Logging Configuration
# ============================================================================

setup_logging()
logger = logging.getLogger(__name__)

# ============================================================================
# FastAPI Application Setup
# ============================================================================

app = FastAPI(
    title="BuyerMap API",
    description="Beta access and webhook endpoints for BuyerMap",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.from_env().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_logfire(app=app, service_name="buyermap-api")


def _error(message: str, success: Optional[bool] = None) -> JSONResponse:
    """500 response in the gate endpoints' error shape."""
    content = {"error": message}
    if success is not None:
        content = {"success": success, "error": message}
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


# ============================================================================
# Beta Password Gate
# ============================================================================

@app.post(
    "/api/auth/verify-beta-password",
    response_model=BetaPasswordResponse,
    responses={500: {"model": BetaPasswordResponse, "description": "Configuration or internal error"}},
    tags=["Auth"],
    summary="Verify the beta access password"
)
async def verify_beta_password(request: Request, config: Config = Depends(get_config)):
    """
    Compare the submitted password with BETA_ACCESS_PASSWORD.

    A wrong password is a normal ``200 {"success": false}``; every failure
    is reported as a 500.
    """
    try:
        body = BetaPasswordRequest.model_validate(await request.json())

        service = BetaAccessService(config.beta_access_password)
        if not service.configured:
            logger.error("BETA_ACCESS_PASSWORD not set in environment variables")
            return _error("Server configuration error", success=False)

        is_valid = service.verify(body.password)
        logger.info(f"Beta password check: {'accepted' if is_valid else 'rejected'}")
        return JSONResponse(content=BetaPasswordResponse(success=is_valid).model_dump(exclude_none=True))

    except Exception as e:
        logger.error(f"Error verifying beta password: {e}", exc_info=True)
        return _error("Internal server error", success=False)


# ============================================================================
# Webhooks
# ============================================================================

@app.get(
    "/api/auth/webhook/test",
    response_model=WebhookTestResponse,
    responses={500: {"model": ErrorResponse, "description": "Not configured or Slack rejected"}},
    tags=["Webhooks"],
    summary="Send a test notification to Slack"
)
async def test_webhook(config: Config = Depends(get_config)):
    """Post one test message to SLACK_WEBHOOK_URL and report the outcome."""
    try:
        if not config.slack_webhook_url:
            return _error("SLACK_WEBHOOK_URL not configured")

        result = await SlackService(config.slack_webhook_url).send_test_notification()

        if result.success:
            return WebhookTestResponse(success=True, message="Test notification sent to Slack!")
        if result.status_code is not None:
            return _error(f"Slack API error: {result.status_code}")
        return _error("Test failed")

    except Exception as e:
        logger.error(f"Test webhook error: {e}", exc_info=True)
        return _error("Test failed")


def _parse_timestamp(value) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        logger.warning(f"Unparseable created_at: {value}")
        return None


@app.post(
    "/api/auth/webhook",
    response_model=WebhookAck,
    responses={500: {"model": ErrorResponse, "description": "Webhook processing failed"}},
    tags=["Webhooks"],
    summary="Supabase auth webhook"
)
async def supabase_webhook(request: Request, config: Config = Depends(get_config)):
    """
    Receive Supabase database webhooks.

    New rows in ``users`` are announced in Slack. Slack problems are logged
    and do not fail the webhook.
    """
    try:
        payload = SupabaseWebhookPayload.model_validate(await request.json())

        if payload.is_user_signup:
            record = payload.record or {}
            content = NewUserSlackContent(
                email=str(record.get("email", "")),
                user_id=str(record.get("id", "")),
                created_at=_parse_timestamp(record.get("created_at")),
            )
            result = await SlackService(config.slack_webhook_url).send_new_user_notification(content)
            if not result.success:
                logger.error(f"Slack notification failed: {result.error}")

        return WebhookAck(success=True)

    except Exception as e:
        logger.error(f"Webhook error: {e}", exc_info=True)
        return _error("Webhook processing failed")


# ============================================================================
# Content / System
# ============================================================================

@app.get("/api/content", tags=["Content"], summary="UI display copy")
async def get_content():
    """Return the read-only UI copy as nested JSON."""
    return content_as_dict()


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["System"],
    summary="Health check endpoint"
)
async def health_check(config: Config = Depends(get_config)):
    """Report which integrations are configured."""
    configured = config.summary()
    services = {
        "beta_gate": "configured" if configured["BETA_ACCESS_PASSWORD"] else "not_configured",
        "slack": "configured" if configured["SLACK_WEBHOOK_URL"] else "not_configured",
        "supabase": "configured" if configured["SUPABASE_URL"] else "not_configured",
    }

    overall_status = "healthy" if services["beta_gate"] == "configured" else "degraded"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        timestamp=datetime.now(),
        services=services
    )


@app.get("/", tags=["System"])
async def root():
    """API root endpoint with basic information."""
    return {
        "name": "BuyerMap API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "endpoints": {
            "verify_beta_password": "/api/auth/verify-beta-password",
            "webhook_test": "/api/auth/webhook/test",
            "supabase_webhook": "/api/auth/webhook",
            "content": "/api/content",
        }
    }


# ============================================================================
# Error Handlers
# ============================================================================

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error").model_dump()
    )


# ============================================================================
# Startup/Shutdown Events
# ============================================================================

@app.on_event("startup")
async def startup_event():
    """Log startup information."""
    config = Config.from_env()
    logger.info("=" * 60)
    logger.info("BuyerMap API Starting...")
    logger.info(f"API Version: {__version__}")
    logger.info("Docs available at: /docs")
    for name, present in config.summary().items():
        logger.info(f"  {name}: {'set' if present else 'NOT SET'}")
    logger.info("=" * 60)


@app.on_event("shutdown")
async def shutdown_event():
    """Log shutdown information."""
    logger.info("BuyerMap API Shutting down...")
