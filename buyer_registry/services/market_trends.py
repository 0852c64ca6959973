"""Market-trend lookup with geography fallback and provider precedence.

A requested geography is tried first, then any broader geographies registered
for it in ``FALLBACK_GEOS``. The primary benchmark is the ``benchmarkPrice``
series from the highest-ranked provider, preferring an exact property-type
match over the composite series.
"""

import sys
from structlog import get_logger
from buyer_registry.data.market_trends import PROVIDER_PRECEDENCE, TREND_SERIES
from buyer_registry.errors import NotFound, ValidationError
from buyer_registry.models.trend import TrendSeries

logger = get_logger()

BENCHMARK_METRIC = "benchmarkPrice"
COMPOSITE = "composite"
DEFAULT_CURRENCY = "CAD"
_UNRANKED = sys.maxsize

FALLBACK_GEOS = {
    "board:REBGV": ["cma:59933"],
    "board:TRREB": ["cma:535"],
}

DISCLOSURE_COPY = [
    "For budgeting context only — not financial advice.",
    "Sources are refreshed nightly. Licensed CREA MLS® HPI is prioritised when coverage is available.",
]


def normalize_property_type(value: str | None) -> str:
    if not value:
        return COMPOSITE
    return str(value).strip().lower()


def normalize_geo_code(value: str | None) -> str:
    return str(value or "").strip()


def provider_rank(provider: str) -> int:
    try:
        return PROVIDER_PRECEDENCE.index(provider)
    except ValueError:
        return _UNRANKED


def provider_precedence(provider: str) -> int | None:
    """1-based precedence, or None for providers outside the ranking."""
    rank = provider_rank(provider)
    return None if rank == _UNRANKED else rank + 1


def build_search_order(geo_code: str) -> list[str]:
    normalized = normalize_geo_code(geo_code)
    if not normalized:
        return []
    return [normalized, *FALLBACK_GEOS.get(normalized, [])]


def filter_series_by_geo(search_order: list[str], series: list[TrendSeries]) -> tuple[str | None, list[TrendSeries]]:
    for geo in search_order:
        matches = [item for item in series if item.geo_code == geo]
        if matches:
            return geo, matches
    return (search_order[0] if search_order else None), []


def select_primary_benchmark(matches: list[TrendSeries], property_type: str) -> TrendSeries | None:
    allowed_types = [COMPOSITE] if property_type == COMPOSITE else [property_type, COMPOSITE]
    candidates = [
        item for item in matches
        if item.metric == BENCHMARK_METRIC and item.property_type in allowed_types
    ]
    candidates.sort(key=lambda item: (provider_rank(item.provider), item.property_type != property_type))
    return candidates[0] if candidates else None


def build_trend(series: TrendSeries) -> list[dict]:
    return [{"period": point.period, "value": point.value} for point in series.meta.trend]


def build_source_list(matches: list[TrendSeries]) -> list[dict]:
    return [
        {
            "provider": item.provider,
            "metric": item.metric,
            "geoCode": item.geo_code,
            "propertyType": item.property_type,
            "period": item.period,
            "lastUpdated": item.meta.last_updated or item.period,
            "coverage": item.meta.coverage,
            "licensed": item.meta.licensed,
            "precedence": provider_precedence(item.provider),
        }
        for item in sorted(matches, key=lambda item: provider_rank(item.provider))
    ]


def build_supplementary(matches: list[TrendSeries], primary_metric: str = BENCHMARK_METRIC) -> list[dict]:
    return [
        {
            "provider": item.provider,
            "metric": item.metric,
            "propertyType": item.property_type,
            "period": item.period,
            "value": item.value,
            "yoyChangePct": item.meta.yoy_change_pct,
            "lastUpdated": item.meta.last_updated or item.period,
            "trend": build_trend(item),
            "coverage": item.meta.coverage,
            "licensed": item.meta.licensed,
        }
        for item in sorted(matches, key=lambda item: provider_rank(item.provider))
        if item.metric != primary_metric
    ]


def resolve_market_trend(
    geo_code: str | None,
    property_type: str | None = None,
    series: list[TrendSeries] | None = None,
) -> dict:
    """Resolve the benchmark series and context for a geography.

    Raises ``ValidationError`` for a blank geography and ``NotFound`` when no
    geography in the search order, or no benchmark series, has coverage.
    """
    series = TREND_SERIES if series is None else series
    requested_geo = normalize_geo_code(geo_code)
    requested_type = normalize_property_type(property_type)

    if not requested_geo:
        raise ValidationError(
            "geoCode is required",
            hint="Pass a geoCode such as board:REBGV or cma:59933 to retrieve market trends.",
        )

    search_order = build_search_order(requested_geo)
    resolved_geo, matches = filter_series_by_geo(search_order, series)
    if not matches:
        logger.info("No market trend coverage", geo_code=requested_geo, property_type=requested_type)
        raise NotFound(
            f"No trend series available for {requested_geo} ({requested_type}).",
            geoCode=requested_geo,
        )

    primary = select_primary_benchmark(matches, requested_type)
    if primary is None:
        raise NotFound(
            f"No {BENCHMARK_METRIC} metric available for {requested_geo} ({requested_type}).",
            geoCode=requested_geo,
            resolvedGeoCode=resolved_geo,
        )

    meta = primary.meta
    response = {
        "geoCode": resolved_geo,
        "requestedGeoCode": requested_geo,
        "geoName": primary.geo_name,
        "propertyType": primary.property_type,
        "requestedPropertyType": requested_type,
        "metric": primary.metric,
        "benchmarkPrice": primary.value,
        "currency": meta.currency or DEFAULT_CURRENCY,
        "yoyChangePct": meta.yoy_change_pct,
        "lastUpdated": meta.last_updated or primary.period,
        "period": primary.period,
        "provider": primary.provider,
        "trendSeries": build_trend(primary),
        "sources": build_source_list(matches),
        "disclosures": list(DISCLOSURE_COPY),
        "supplementaryMetrics": build_supplementary(matches),
    }
    if meta.range is not None:
        response["range"] = {"low": meta.range.low, "high": meta.range.high, "label": "estimate"}
    if meta.ingested_at:
        response["ingestedAt"] = meta.ingested_at
    return response
