import logging
from fastapi import APIRouter, Depends, Request

from memoapp.shared.errors import GatewayError, SUMMARY_FAILED
from memoapp.shared.http import error_response
from .service import (
    GeminiProvider,
    ProviderFactory,
    generate_summary,
    parse_summary_request,
    require_api_key,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Summarize"])

def get_provider_factory() -> ProviderFactory:
    return GeminiProvider

@router.post("/summarize")
async def api_summarize(request: Request, make_provider: ProviderFactory = Depends(get_provider_factory)):
    try:
        api_key = require_api_key()
        req = parse_summary_request(await request.json())
        summary = await generate_summary(make_provider(api_key), req)
        return {"summary": summary}
    except GatewayError as e:
        return error_response(e.message, status=e.status_code)
    except Exception:
        logger.exception("summarize request failed")
        return error_response(SUMMARY_FAILED, status=500)
