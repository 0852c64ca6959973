"""Benchmark and supplementary housing-market series, keyed by geography."""

from buyer_registry.models.trend import TrendSeries

PROVIDER_PRECEDENCE = ["crea", "teranet", "statcan", "cmhc"]


def _points(*pairs):
    return [{"period": period, "value": value} for period, value in pairs]


TREND_SERIES = [
    TrendSeries(
        provider="crea",
        geo_code="board:REBGV",
        geo_name="Real Estate Board of Greater Vancouver",
        property_type="composite",
        metric="benchmarkPrice",
        period="2024-03",
        value=1234500,
        meta={
            "currency": "CAD",
            "yoy_change_pct": 0.068,
            "last_updated": "2024-03-31",
            "coverage": "REBGV board composite",
            "licensed": True,
            "precision": "high",
            "ingested_at": "2024-04-01T03:15:00Z",
            "source_date": "2024-03-31",
            "trend": _points(
                ("2023-04", 1085000), ("2023-05", 1092000), ("2023-06", 1101000),
                ("2023-07", 1110000), ("2023-08", 1118000), ("2023-09", 1129000),
                ("2023-10", 1142000), ("2023-11", 1150000), ("2023-12", 1163000),
                ("2024-01", 1184000), ("2024-02", 1201000), ("2024-03", 1234500),
            ),
        },
    ),
    TrendSeries(
        provider="crea",
        geo_code="board:REBGV",
        geo_name="Real Estate Board of Greater Vancouver",
        property_type="detached",
        metric="benchmarkPrice",
        period="2024-03",
        value=1527000,
        meta={
            "currency": "CAD",
            "yoy_change_pct": 0.072,
            "last_updated": "2024-03-31",
            "coverage": "REBGV detached benchmark",
            "licensed": True,
            "precision": "medium",
            "range": {"low": 1470000, "high": 1580000},
            "ingested_at": "2024-04-01T03:15:00Z",
            "source_date": "2024-03-31",
            "trend": _points(
                ("2023-04", 1380000), ("2023-05", 1388000), ("2023-06", 1399000),
                ("2023-07", 1406000), ("2023-08", 1419000), ("2023-09", 1435000),
                ("2023-10", 1458000), ("2023-11", 1462000), ("2023-12", 1479000),
                ("2024-01", 1498000), ("2024-02", 1512000), ("2024-03", 1527000),
            ),
        },
    ),
    TrendSeries(
        provider="teranet",
        geo_code="cma:59933",
        geo_name="Vancouver CMA",
        property_type="composite",
        metric="benchmarkPrice",
        period="2024-02",
        value=987000,
        meta={
            "currency": "CAD",
            "yoy_change_pct": 0.042,
            "last_updated": "2024-02-29",
            "coverage": "Teranet–National Bank HPI",
            "licensed": False,
            "precision": "medium",
            "range": {"low": 965000, "high": 1012000},
            "ingested_at": "2024-03-15T04:05:00Z",
            "source_date": "2024-02-29",
            "trend": _points(
                ("2023-03", 948000), ("2023-06", 952000), ("2023-09", 964000),
                ("2023-12", 978000), ("2024-02", 987000),
            ),
        },
    ),
    TrendSeries(
        provider="statcan",
        geo_code="cma:59933",
        geo_name="Vancouver CMA",
        property_type="new_home",
        metric="priceIndex",
        period="2024-01",
        value=119.7,
        meta={
            "yoy_change_pct": -0.008,
            "last_updated": "2024-02-15",
            "coverage": "Statistics Canada NHPI",
            "licensed": False,
            "precision": "high",
            "ingested_at": "2024-02-16T05:45:00Z",
            "source_date": "2024-01-31",
            "trend": _points(
                ("2023-02", 118.3), ("2023-05", 118.9), ("2023-08", 119.4),
                ("2023-11", 119.5), ("2024-01", 119.7),
            ),
        },
    ),
    TrendSeries(
        provider="cmhc",
        geo_code="cma:59933",
        geo_name="Vancouver CMA",
        property_type="composite",
        metric="monthsOfInventory",
        period="2024-02",
        value=3.1,
        meta={
            "last_updated": "2024-03-10",
            "coverage": "CMHC HMIP",
            "precision": "medium",
            "ingested_at": "2024-03-11T02:00:00Z",
            "source_date": "2024-02-28",
            "trend": _points(
                ("2023-11", 4.2), ("2023-12", 3.9), ("2024-01", 3.5), ("2024-02", 3.1),
            ),
        },
    ),
    TrendSeries(
        provider="crea",
        geo_code="board:TRREB",
        geo_name="Toronto Regional Real Estate Board",
        property_type="composite",
        metric="benchmarkPrice",
        period="2024-03",
        value=1138000,
        meta={
            "currency": "CAD",
            "yoy_change_pct": -0.012,
            "last_updated": "2024-03-31",
            "coverage": "TRREB composite benchmark",
            "licensed": True,
            "precision": "medium",
            "range": {"low": 1095000, "high": 1180000},
            "ingested_at": "2024-04-01T04:05:00Z",
            "source_date": "2024-03-31",
            "trend": _points(
                ("2023-04", 1169000), ("2023-07", 1152000), ("2023-10", 1148000),
                ("2024-01", 1135000), ("2024-03", 1138000),
            ),
        },
    ),
    TrendSeries(
        provider="teranet",
        geo_code="cma:535",
        geo_name="Toronto CMA",
        property_type="composite",
        metric="benchmarkPrice",
        period="2024-02",
        value=902000,
        meta={
            "currency": "CAD",
            "yoy_change_pct": -0.018,
            "last_updated": "2024-02-29",
            "coverage": "Teranet–National Bank HPI",
            "licensed": False,
            "precision": "high",
            "ingested_at": "2024-03-14T05:35:00Z",
            "source_date": "2024-02-29",
            "trend": _points(
                ("2023-03", 915000), ("2023-06", 910000), ("2023-09", 906000),
                ("2023-12", 904000), ("2024-02", 902000),
            ),
        },
    ),
    TrendSeries(
        provider="cmhc",
        geo_code="cma:535",
        geo_name="Toronto CMA",
        property_type="composite",
        metric="salesToNewListingsRatio",
        period="2024-02",
        value=0.51,
        meta={
            "last_updated": "2024-03-10",
            "coverage": "CMHC HMIP",
            "precision": "medium",
            "ingested_at": "2024-03-11T02:10:00Z",
            "source_date": "2024-02-28",
            "trend": _points(
                ("2023-11", 0.47), ("2023-12", 0.49), ("2024-01", 0.5), ("2024-02", 0.51),
            ),
        },
    ),
]
