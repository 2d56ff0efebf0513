from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from typing import Optional


class ContactSubmission(BaseModel):
    """Contact form payload as posted by the site's contact form.

    Required-ness is checked by the contact service rather than here, so
    that a missing field produces the form's own 400 message instead of a
    validation error listing.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    phone: Optional[StrictStr] = None
    company: Optional[StrictStr] = None
    budget: Optional[StrictStr] = None
    project_type: Optional[StrictStr] = Field(None, alias="projectType")
    message: Optional[StrictStr] = None
    consent: Optional[StrictBool] = None
    website: Optional[StrictStr] = Field(None, description="Honeypot, must stay empty")


class ContactSuccessResponse(BaseModel):
    """Response schema for an accepted submission"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    email_id: str = Field(..., alias="emailId")


class ContactErrorResponse(BaseModel):
    """Error body for rejected or failed submissions"""
    error: str
    details: Optional[str] = None
