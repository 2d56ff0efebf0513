from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
import logging

from digilima import messages
from digilima.config import settings
from digilima.schemas.contact import ContactErrorResponse, ContactSuccessResponse
from digilima.services.contact_service import EmailProvider, SubmissionRejected, process_submission
from digilima.utils.email_resend import get_email_provider

logger = logging.getLogger(__name__)

router = APIRouter()


@router.options("/contact")
async def contact_preflight():
    """CORS preflight; the headers come from the app middleware"""
    return Response(status_code=200)


@router.api_route("/contact", methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def contact_method_not_allowed():
    return JSONResponse(status_code=405, content={"error": messages.METHOD_NOT_ALLOWED})


@router.post(
    "/contact",
    response_model=ContactSuccessResponse,
    responses={
        400: {"model": ContactErrorResponse},
        500: {"model": ContactErrorResponse},
    },
)
async def contact_handler(request: Request, provider: EmailProvider = Depends(get_email_provider)):
    """
    Relay a contact form submission to the business inbox and send the
    visitor an auto-reply.

    - **name**, **email**, **message**: required
    - **consent**: must be `true`
    - **website**: honeypot, must be empty
    - **phone**, **company**, **budget**, **projectType**: optional
    """
    try:
        try:
            payload = await request.json()
        except ValueError:
            payload = None

        email_id = await process_submission(payload, provider)

        return ContactSuccessResponse(message=messages.SUBMISSION_ACCEPTED, email_id=email_id)

    except SubmissionRejected as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        logger.error(f"Contact form error: {e}")
        content = {"error": messages.delivery_failed()}
        if settings.ENV == "development":
            content["details"] = str(e)
        return JSONResponse(status_code=500, content=content)
