from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from contact_api.api.dependencies import get_submission_handler
from contact_api.core.submission_handler import SubmissionHandler
from contact_api.models.contact import ContactRequest, ContactResponse

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ContactResponse,
    response_model_exclude_none=True,
    summary="Submit the contact form",
    description="Saves the submission and relays it to the site mailbox by email",
)
async def create_contact(
    data: ContactRequest,
    handler: Annotated[SubmissionHandler, Depends(get_submission_handler)],
):
    result = await handler.handle(data)
    return JSONResponse(status_code=result.status_code, content=result.body)
