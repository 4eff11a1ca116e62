from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.models.email_models import (
    ApplicantInput,
    EmailGenerateResponse,
    ErrorResponse,
    GenerationConfig,
)
from app.services.email_service import generate_email
from app.utils.dependencies import get_generation_config

router = APIRouter()


@router.post(
    "/generate-email",
    response_model=EmailGenerateResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate_cold_email(
    req: ApplicantInput,
    config: GenerationConfig = Depends(get_generation_config),
):
    """Generate a personalized cold email from the applicant's form data."""
    try:
        email = await generate_email(req, config)
    except Exception as e:
        return JSONResponse(
            status_code=500,
            content={"error": str(e) or "Failed to generate email"},
        )
    return EmailGenerateResponse(email=email)
