"""
Response schemas for the content API.
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class InstitutionResponse(BaseModel):
    """Public projection of an institution."""
    id: int
    name: Optional[str] = None
    slug: Optional[str] = None
    banner_title: Optional[str] = Field(default=None, alias="bannerTitle")
    banner_subtitle: Optional[str] = Field(default=None, alias="bannerSubtitle")
    banner_image: Optional[Dict[str, Any]] = Field(default=None, alias="bannerImage")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")

    class Config:
        populate_by_name = True


class InstitutionEnvelope(BaseModel):
    data: InstitutionResponse


class InstitutionListEnvelope(BaseModel):
    data: List[InstitutionResponse]
    meta: Dict[str, Any] = Field(default_factory=dict)


class ResponseMetadata(BaseModel):
    """Metadata included in error responses."""
    request_id: str = Field(..., alias="requestId", description="Request ID for tracing")

    class Config:
        populate_by_name = True


class ErrorDetail(BaseModel):
    """Error details for failed requests."""
    code: Literal[
        "UNAUTHORIZED",
        "FORBIDDEN",
        "BAD_REQUEST",
        "VALIDATION_ERROR",
        "SCHEMA_ERROR",
        "NOT_FOUND",
        "INTERNAL_ERROR"
    ] = Field(
        ...,
        description="Error code"
    )
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Error response."""
    success: Literal[False] = False
    error: ErrorDetail = Field(..., description="Error details")
    metadata: ResponseMetadata = Field(..., description="Response metadata")

    class Config:
        populate_by_name = True
