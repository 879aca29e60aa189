"""Specific categories: fine-grained, keyword-dense topics scored by keyword coverage."""

from __future__ import annotations

from typing import List

from ..keywords import KEYWORDS
from .base import CategoryDefinition, CategoryKind, create_category
from .broad import emphasize_figures


def _specific(category_id: str, name: str, description: str, **options) -> CategoryDefinition:
    return create_category(
        category_id,
        name,
        description,
        KEYWORDS.terms(category_id),
        kind=CategoryKind.SPECIFIC,
        **options,
    )


MARKET_INTELLIGENCE = _specific(
    "market-intelligence",
    "Market Intelligence",
    "Insights on industry trends, competitive dynamics, and market positioning",
    color="#4285F4",
    icon="binoculars",
    priority=3,
    business=True,
)

GROWTH_STRATEGY = _specific(
    "growth-strategy",
    "Growth Strategy",
    "Approaches to customer acquisition, market expansion, and business growth",
    color="#0F9D58",
    icon="chart-line",
    priority=3,
    business=True,
)

INVESTMENT_STRATEGY = _specific(
    "investment-strategy",
    "Investment Strategy",
    "Approaches to capital allocation, value creation, and portfolio management",
    color="#F4B400",
    icon="money-bill-trend-up",
    priority=3,
    business=True,
)

FINANCIAL_PERFORMANCE = _specific(
    "financial-performance",
    "Financial Performance",
    "Revenue, unit economics, cost structure, and profitability metrics",
    color="#DB4437",
    icon="chart-simple",
    priority=3,
    business=True,
    format_fn=emphasize_figures,
)

VALUATION_BENCHMARKING = _specific(
    "valuation-benchmarking",
    "Valuation & Benchmarking",
    "Valuation methodologies, comparable analysis, and performance benchmarks",
    color="#4285F4",
    icon="scale-balanced",
    priority=4,
)

EXIT_LIQUIDITY = _specific(
    "exit-liquidity",
    "Exit & Liquidity",
    "Exit pathways, M&A opportunities, and liquidity options",
    color="#F4B400",
    icon="door-open",
    priority=4,
)

MA_CONSOLIDATION = _specific(
    "ma-consolidation",
    "M&A & Consolidation",
    "Market consolidation, roll-up strategies, and deal structures",
    color="#DB4437",
    icon="handshake",
    priority=4,
)

TECHNOLOGY_DIGITAL = _specific(
    "technology-digital",
    "Technology & Digital",
    "Digital transformation, technology adoption, and innovation",
    color="#0F9D58",
    icon="microchip",
    priority=4,
)

OPERATIONAL_EFFICIENCY = _specific(
    "operational-efficiency",
    "Operational Efficiency",
    "Cost optimization, margin expansion, and operational improvement",
    color="#F4B400",
    icon="gears",
    priority=5,
)

DATA_STRATEGY = _specific(
    "data-strategy",
    "Data Strategy",
    "Data governance, infrastructure, and monetization approaches",
    color="#4285F4",
    icon="database",
    priority=5,
)

PLATFORM_ECONOMICS = _specific(
    "platform-economics",
    "Platform Economics",
    "Network effects, platform strategies, and value chain positioning",
    color="#0F9D58",
    icon="network-wired",
    priority=5,
)

CUSTOMER_MARKET = _specific(
    "customer-market",
    "Customer & Market",
    "Brand strategy, customer engagement, and market differentiation",
    color="#DB4437",
    icon="users",
    priority=5,
    business=True,
)

RISK_COMPLIANCE = _specific(
    "risk-compliance",
    "Risk & Compliance",
    "Regulatory considerations, compliance requirements, and risk management",
    color="#F4B400",
    icon="shield-halved",
    priority=6,
)

SUSTAINABILITY_ESG = _specific(
    "sustainability-esg",
    "Sustainability & ESG",
    "Environmental, social, and governance considerations and reporting",
    color="#0F9D58",
    icon="leaf",
    priority=6,
)

CAPITAL_MARKETS = _specific(
    "capital-markets",
    "Capital Markets",
    "Fundraising, investor targeting, and financing strategies",
    color="#4285F4",
    icon="landmark",
    priority=6,
    business=True,
)

ECONOMIC_TRENDS = _specific(
    "economic-trends",
    "Economic Trends",
    "Macroeconomic factors, business cycles, and economic environment",
    color="#DB4437",
    icon="chart-line",
    priority=6,
    business=True,
)

PERFORMANCE_METRICS = _specific(
    "performance-metrics",
    "Performance Metrics",
    "KPIs, return metrics, and performance measurement",
    color="#F4B400",
    icon="gauge-high",
    priority=6,
)

COMPETITIVE_ADVANTAGE = _specific(
    "competitive-advantage",
    "Competitive Advantage",
    "Strategic moats, barriers to entry, and differentiation factors",
    color="#0F9D58",
    icon="trophy",
    priority=6,
)


def get_specific_categories() -> List[CategoryDefinition]:
    return [
        MARKET_INTELLIGENCE,
        GROWTH_STRATEGY,
        INVESTMENT_STRATEGY,
        FINANCIAL_PERFORMANCE,
        VALUATION_BENCHMARKING,
        EXIT_LIQUIDITY,
        MA_CONSOLIDATION,
        TECHNOLOGY_DIGITAL,
        OPERATIONAL_EFFICIENCY,
        DATA_STRATEGY,
        PLATFORM_ECONOMICS,
        CUSTOMER_MARKET,
        RISK_COMPLIANCE,
        SUSTAINABILITY_ESG,
        CAPITAL_MARKETS,
        ECONOMIC_TRENDS,
        PERFORMANCE_METRICS,
        COMPETITIVE_ADVANTAGE,
    ]
