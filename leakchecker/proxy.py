import logging

from fastapi import APIRouter, Depends, Request
from starlette.responses import JSONResponse, Response

from leakchecker import config
from leakchecker.errors import InvalidInput, ProxyError
from leakchecker.helpers.hibp import HIBPClient
from leakchecker.models import BreachQueryResult, ErrorBody, breach_summary_message

logger = logging.getLogger(__name__)

router = APIRouter(tags=["breach"])


def get_hibp_client() -> HIBPClient:
    return HIBPClient()


def _mask(email: str) -> str:
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}" if domain else "***"


# Pre-flight gets an empty 200; the CORS headers come from the app middleware.
@router.options(config.CHECK_PATH)
def check_email_breach_preflight():
    return Response(status_code=200)


@router.post(
    config.CHECK_PATH,
    response_model=BreachQueryResult,
    responses={400: {"model": ErrorBody}, 500: {"model": ErrorBody}},
)
async def check_email_breach(request: Request, hibp: HIBPClient = Depends(get_hibp_client)):
    try:
        data = await request.json()
        email = data.get("email") if isinstance(data, dict) else None
        if not email:
            raise InvalidInput()
        email = str(email)

        breaches = await hibp.breached_account(email)
        if not isinstance(breaches, list):
            raise ValueError("Unexpected HIBP response shape")

        logger.info("Breach lookup for %s: %d found", _mask(email), len(breaches))
        # Records are passed through exactly as HIBP sent them.
        return JSONResponse({"breaches": breaches, "message": breach_summary_message(len(breaches))})
    except ProxyError:
        raise
    except Exception as e:
        logger.exception("Error checking breach")
        raise ProxyError(str(e) or e.__class__.__name__) from e
