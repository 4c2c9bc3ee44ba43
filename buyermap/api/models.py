"""
API Request and Response Models.

Pydantic models for validating request bodies before use and for the
OpenAPI documentation of the gate endpoints.
"""

from pydantic import BaseModel, Field, StrictStr
from typing import Optional, Dict, Any
from datetime import datetime


# ============================================================================
# Beta Password Gate
# ============================================================================

class BetaPasswordRequest(BaseModel):
    """
    Request body for beta password verification.

    A missing password is accepted and simply never matches; a non-string
    password fails validation.
    """
    password: Optional[StrictStr] = Field(None, description="Submitted beta password")

    class Config:
        json_schema_extra = {
            "example": {"password": "let-me-in"}
        }


class BetaPasswordResponse(BaseModel):
    """Result of a beta password check."""
    success: bool = Field(..., description="Whether the password matched")
    error: Optional[str] = Field(None, description="Error message on failure")


# ============================================================================
# Webhooks
# ============================================================================

class WebhookTestResponse(BaseModel):
    """Successful Slack webhook test."""
    success: bool = Field(..., description="Always true on success")
    message: str = Field(..., description="Human-readable result")


class SupabaseWebhookPayload(BaseModel):
    """
    Supabase database webhook body.

    Only ``INSERT`` events on the ``users`` table trigger a notification.
    """
    type: str = Field(..., description="Event type: INSERT, UPDATE or DELETE")
    table: str = Field(..., description="Table the event fired on")
    schema_name: Optional[str] = Field(None, alias="schema", description="Database schema")
    record: Optional[Dict[str, Any]] = Field(None, description="New row")
    old_record: Optional[Dict[str, Any]] = Field(None, description="Previous row")

    @property
    def is_user_signup(self) -> bool:
        return self.type == "INSERT" and self.table == "users"


class WebhookAck(BaseModel):
    success: bool = True


# ============================================================================
# Errors / System
# ============================================================================

class ErrorResponse(BaseModel):
    """Error body used by the webhook endpoints and the global handler."""
    error: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    """Service health."""
    status: str = Field(..., description="healthy or degraded")
    version: str = Field(..., description="API version")
    timestamp: datetime = Field(default_factory=datetime.now)
    services: Dict[str, str] = Field(default_factory=dict, description="Configuration status per integration")
