from fastapi import Request

from contact_api.core.submission_handler import SubmissionHandler


async def get_submission_handler(request: Request) -> SubmissionHandler:
    return request.app.state.submission_handler
