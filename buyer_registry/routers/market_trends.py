from fastapi import APIRouter, Query, Response
from structlog import get_logger
from buyer_registry.config import settings
from buyer_registry.services.market_trends import resolve_market_trend

logger = get_logger()
router = APIRouter(tags=["market-trends"])

@router.get("/market-trends")
async def market_trends(
    response: Response,
    geo_code: str | None = Query(None, alias="geoCode"),
    geo_code_legacy: str | None = Query(None, alias="geo_code"),
    property_type: str | None = Query(None, alias="propertyType"),
    property_type_legacy: str | None = Query(None, alias="property_type"),
):
    """Benchmark price for a geography, falling back to broader geographies.
    Accepts both camelCase and snake_case query parameters.
    """
    trend = resolve_market_trend(geo_code or geo_code_legacy, property_type or property_type_legacy)
    response.headers["Cache-Control"] = f"public, max-age={settings.MARKET_TRENDS_MAX_AGE}"
    response.headers["x-source"] = f"{trend['provider']};period={trend['period']}"
    logger.info("Fetched market trends", geo_code=trend["requestedGeoCode"], provider=trend["provider"])
    return trend
