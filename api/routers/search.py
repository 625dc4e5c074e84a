# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: search router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_search_service
from api.schemas.search import SearchRequest, SearchResponse
from services.ProductSearchService import ProductSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.post("", response_model=SearchResponse, response_model_by_alias=True)
async def post_search(
    req: SearchRequest,
    svc: ProductSearchService = Depends(get_search_service),
) -> SearchResponse:
    query = (req.query or "").strip()
    if not query:
        raise HTTPException(status_code=400, detail="query must not be empty")

    logger.info("POST /search (start) query_len=%d", len(query))

    # gateway failures come back inside the result; only configuration errors raise
    result = await svc.search(req.query)

    logger.info("POST /search (done) found=%s response_len=%d", result.found, len(result.response))
    return SearchResponse.from_result(result)
