"""Keyword sets, the shared keyword registry and the keyword matcher.

Domain keyword sets (business, market, financial) carry three weighted tiers
and score text by substring containment. Category definitions do not keep
their own copies of these terms: they reference named term lists in the
``KEYWORDS`` registry so the two never drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .logging_config import get_logger
from .models import DomainMatch, KeywordHit, MatchAllResult, MatchResult

logger = get_logger("keywords")

TIER_WEIGHTS: Dict[str, int] = {"high": 3, "medium": 2, "low": 1}

DOMAIN_PREFIX = "domain:"


@dataclass(frozen=True)
class KeywordSet:
    """Weighted keyword lists for one domain."""

    domain: str
    high: Tuple[str, ...] = ()
    medium: Tuple[str, ...] = ()
    low: Tuple[str, ...] = ()

    def tiers(self) -> List[Tuple[str, Tuple[str, ...]]]:
        return [("high", self.high), ("medium", self.medium), ("low", self.low)]

    def all_keywords(self) -> Tuple[str, ...]:
        return self.high + self.medium + self.low

    def matches(self, text: object) -> MatchResult:
        """Score text against this domain; non-string or empty text never matches."""
        if not text or not isinstance(text, str):
            return MatchResult(domain=self.domain)

        lower_text = text.lower()
        score = 0
        hits: List[KeywordHit] = []
        for priority, keywords in self.tiers():
            weight = TIER_WEIGHTS[priority]
            for keyword in keywords:
                if keyword.lower() in lower_text:
                    score += weight
                    hits.append(KeywordHit(keyword=keyword, priority=priority, weight=weight))

        return MatchResult(domain=self.domain, matched=score > 0, score=score, matches=hits)


BUSINESS_KEYWORDS = KeywordSet(
    domain="business",
    high=(
        "company", "business", "enterprise", "corporation", "organization",
        "firm", "startup", "venture", "industry", "corporate",
        "management", "executive", "leadership", "CEO", "chief",
        "strategy", "strategic", "operation", "operational", "business model",
        "competitive", "competitiveness", "advantage", "differentiation",
    ),
    medium=(
        "market", "customer", "client", "consumer", "supplier",
        "vendor", "partner", "stakeholder", "shareholder", "investor",
        "product", "service", "solution", "offering", "value proposition",
        "sales", "revenue", "profit", "growth", "expansion",
        "acquisition", "merger", "partnership", "alliance", "collaboration",
        "sector", "vertical", "segment", "niche",
    ),
    low=(
        "employee", "workforce", "talent", "team", "staff",
        "department", "division", "unit", "function", "role",
        "process", "procedure", "policy", "standard", "guideline",
        "performance", "efficiency", "effectiveness", "productivity", "output",
        "resource", "asset", "capability", "competency", "skill",
    ),
)

MARKET_KEYWORDS = KeywordSet(
    domain="market",
    high=(
        "market", "marketplace", "industry", "sector", "vertical",
        "segment", "niche", "competition", "competitor", "competitive landscape",
        "market share", "market size", "market growth", "market trend", "market analysis",
        "market forecast", "market research", "market report", "market study",
        "demand", "supply", "consumer", "customer", "buyer behavior",
    ),
    medium=(
        "target market", "market opportunity", "market entry", "market expansion",
        "market penetration", "market development", "market position", "market dynamics",
        "market segmentation", "market maturity", "market saturation", "market disruption",
        "market leader", "market follower", "market challenger", "market nicher",
        "market consolidation", "market fragmentation", "market concentration",
        "pricing", "price point", "price sensitivity", "price elasticity",
    ),
    low=(
        "market conditions", "market forces", "market factors", "market environment",
        "market cycle", "market stage", "market phase", "market performance",
        "market access", "market barrier", "market entry barrier", "market exit barrier",
        "market intelligence", "market insight", "market data", "market statistics",
        "market survey", "market poll", "market focus group", "market interview",
        "demographic", "psychographic", "geographic", "behavioral",
    ),
)

FINANCIAL_KEYWORDS = KeywordSet(
    domain="financial",
    high=(
        "financial", "finance", "revenue", "profit", "earnings",
        "income", "loss", "balance sheet", "cash flow", "statement",
        "quarterly", "annual", "fiscal", "report", "EPS",
        "P/E", "ROI", "ROE", "EBITDA", "margin", "profitability",
        "income statement", "cash flow statement",
    ),
    medium=(
        "dividend", "yield", "debt", "asset", "liability",
        "equity", "valuation", "market cap", "stock price", "shareholder",
        "investor", "investment", "return", "capital", "funding",
        "financing", "loan", "credit", "debt-to-equity", "leverage",
        "liquidity", "solvency", "gross margin", "net margin", "operating margin",
    ),
    low=(
        "budget", "forecast", "projection", "estimate", "target",
        "financial performance", "financial health", "financial condition", "financial position",
        "financial stability", "financial strength", "financial weakness", "financial risk",
        "cash", "cash reserves", "cash position", "cash balance", "cash management",
        "cost", "expense", "expenditure", "spending", "cost structure",
    ),
)

# Term lists referenced by category definitions, keyed by category id.
CATEGORY_TERMS: Dict[str, Tuple[str, ...]] = {
    "key-insights": (
        "key insight", "important finding", "critical information", "takeaway",
        "highlight", "crucial", "significant", "essential", "primary", "main point",
        "notable", "insight", "key finding", "core concept", "fundamental",
    ),
    "market-overview": (
        "market", "industry", "sector", "landscape", "overview", "trends",
        "market size", "growth rate", "market forecast", "market share",
        "competitive landscape", "market dynamics", "market structure",
        "market segments", "market analysis", "industry analysis",
    ),
    "financial-overview": (
        "financial", "finance", "money", "capital", "funding", "investment",
        "revenue", "profit", "earnings", "margins", "cash flow", "balance sheet",
        "income statement", "financial performance", "financial metrics",
        "financial ratios", "financial health", "financial analysis",
    ),
    "business-strategy": (
        "strategy", "business model", "approach", "plan", "roadmap",
        "strategic initiative", "strategic direction", "strategic planning",
        "vision", "mission", "goals", "objectives", "execution",
        "competitive strategy", "growth strategy", "market entry",
    ),
    "industry-insights": (
        "industry", "sector", "vertical", "market segment",
        "industry trends", "industry analysis", "industry outlook",
        "industry forecast", "industry dynamics", "industry structure",
        "industry participants", "industry challenges", "industry opportunities",
    ),
    "market-intelligence": (
        "industry trends", "market trends", "disruption", "competitive dynamics",
        "market positioning", "competitive landscape", "market intelligence",
        "strategic positioning", "market opportunity", "market threat",
        "competitive analysis", "competitor analysis", "market maturity",
        "emerging trends", "market shift", "industry evolution",
    ),
    "growth-strategy": (
        "TAM", "total addressable market", "market segmentation", "customer acquisition",
        "retention", "growth levers", "growth strategy", "expansion strategy",
        "market penetration", "market development", "product development",
        "diversification", "user acquisition", "customer retention",
        "churn reduction", "expansion", "scaling", "growth tactics",
    ),
    "investment-strategy": (
        "value creation", "strategic investment", "portfolio construction",
        "risk-adjusted return", "investment strategy", "capital allocation",
        "investment thesis", "investment approach", "portfolio management",
        "diversification strategy", "asset allocation", "investment focus",
        "investment criteria", "investment philosophy", "alpha generation",
    ),
    "financial-performance": (
        "revenue", "unit economics", "cost structure", "cash flow", "profitability",
        "gross margin", "operating margin", "net margin", "earnings", "EBITDA",
        "financial results", "financial metrics", "financial performance",
        "profit and loss", "income statement", "balance sheet", "cash flow statement",
    ),
    "valuation-benchmarking": (
        "DCF", "comparables", "multiples", "benchmarks", "Rule of 40", "CAC/LTV",
        "valuation", "enterprise value", "market cap", "EV/EBITDA", "P/E",
        "discounted cash flow", "terminal value", "growth rate", "discount rate",
        "comparable companies", "trading multiples", "valuation metrics",
    ),
    "exit-liquidity": (
        "M&A", "exit pathways", "strategic buyer", "IPO readiness",
        "secondary transactions", "liquidity event", "exit strategy",
        "acquisition target", "merger", "public offering", "exit valuation",
        "exit multiples", "exit timing", "buyer landscape", "exit options",
    ),
    "ma-consolidation": (
        "fragmentation", "roll-up", "consolidation", "deal structures", "synergy",
        "acquisition", "merger", "integration", "transaction", "deal value",
        "deal multiples", "acquisition strategy", "buy-and-build", "add-on acquisition",
        "platform acquisition", "acquisition target", "buyer", "seller",
    ),
    "technology-digital": (
        "AI", "automation", "digitization", "data-driven", "analytics", "infrastructure",
        "digital transformation", "technology adoption", "technology stack",
        "innovation", "machine learning", "cloud computing", "SaaS",
        "digital strategy", "tech enablement", "emerging technology",
    ),
    "operational-efficiency": (
        "cost optimization", "margin expansion", "scalability", "execution", "supply chain",
        "operational excellence", "process improvement", "efficiency gains",
        "productivity improvement", "cost reduction", "economies of scale",
        "lean operations", "operating model", "resource allocation",
    ),
    "data-strategy": (
        "data governance", "interoperability", "infrastructure", "monetization", "AI",
        "data management", "data architecture", "data security", "data privacy",
        "data analytics", "big data", "data platform", "data lake", "data warehouse",
        "data visualization", "business intelligence", "data-driven decision making",
    ),
    "platform-economics": (
        "network effects", "virality", "defensibility", "partnerships", "value chain",
        "platform strategy", "platform business model", "ecosystem", "marketplace",
        "multi-sided platform", "supply-side", "demand-side", "platform governance",
        "platform regulation", "platform monetization", "platform adoption",
    ),
    "customer-market": (
        "brand strategy", "customer engagement", "differentiation", "pricing", "market share",
        "customer experience", "customer journey", "customer loyalty", "customer satisfaction",
        "brand positioning", "brand equity", "market positioning", "value proposition",
        "competitive advantage", "price positioning", "target market", "customer segment",
    ),
    "risk-compliance": (
        "regulatory", "compliance", "downside protection", "risk hedging", "governance",
        "risk management", "regulatory compliance", "legal requirements",
        "enterprise risk", "operational risk", "financial risk", "reputational risk",
        "risk assessment", "risk mitigation", "internal controls",
    ),
    "sustainability-esg": (
        "ESG compliance", "reporting", "stakeholder", "sustainability", "impact investing",
        "environmental impact", "social responsibility", "corporate governance",
        "carbon footprint", "carbon neutral", "green initiatives", "social impact",
        "board diversity", "executive compensation", "shareholder rights",
    ),
    "capital-markets": (
        "fundraising", "investor targeting", "financing", "debt", "equity", "leverage",
        "capital raising", "investor relations", "private placement", "public offering",
        "venture capital", "private equity", "growth equity", "debt financing",
        "equity financing", "capital structure", "cost of capital",
    ),
    "economic-trends": (
        "macroeconomic", "business cycle", "interest rate", "inflation", "economic environment",
        "GDP growth", "recession", "economic expansion", "monetary policy", "fiscal policy",
        "economic outlook", "economic forecast", "economic indicators", "leading indicators",
        "consumer confidence", "business sentiment", "unemployment",
    ),
    "performance-metrics": (
        "KPIs", "IRR", "MOIC", "J-curve", "capital deployment", "attribution analysis",
        "key performance indicators", "internal rate of return", "multiple on invested capital",
        "performance measurement", "performance attribution", "fund performance",
        "investment performance", "benchmarking", "performance evaluation",
    ),
    "competitive-advantage": (
        "moats", "barriers to entry", "first-mover", "unique selling proposition", "category leadership",
        "competitive advantage", "competitive differentiation", "sustainable advantage",
        "market leadership", "innovation advantage", "cost advantage", "scale advantage",
        "network effects", "switching costs", "intellectual property", "brand equity",
    ),
}

# Query terms that mark a query as business-focused.
BUSINESS_QUERY_TERMS: Tuple[str, ...] = (
    "business", "company", "startup", "corporation", "enterprise", "industry",
    "market", "economy", "finance", "investment", "stock", "shares", "investor",
    "revenue", "profit", "sales", "growth", "strategy", "management", "ceo",
    "executive", "board", "shareholder", "stakeholder", "valuation", "funding",
    "venture capital", "private equity", "ipo", "acquisition",
    "merger", "dividend", "earnings", "quarterly", "annual report", "sec filing",
    "balance sheet", "income statement", "cash flow", "forecast", "projection",
    "trend", "analysis", "report", "research", "sector", "competition", "competitive",
    "supply chain", "logistics", "distribution", "wholesale", "retail", "b2b",
    "b2c", "commercial", "trade", "export", "import",
)


class KeywordRegistry:
    """Single source of truth for domain keyword sets and named term lists."""

    def __init__(
        self,
        keyword_sets: Iterable[KeywordSet] = (),
        term_lists: Optional[Dict[str, Sequence[str]]] = None,
    ) -> None:
        self._sets: Dict[str, KeywordSet] = {}
        self._terms: Dict[str, Tuple[str, ...]] = {}
        for keyword_set in keyword_sets:
            self.register_set(keyword_set)
        for list_id, terms in (term_lists or {}).items():
            self.register_terms(list_id, terms)

    def register_set(self, keyword_set: KeywordSet) -> None:
        self._sets[keyword_set.domain] = keyword_set

    def register_terms(self, list_id: str, terms: Sequence[str]) -> None:
        if list_id.startswith(DOMAIN_PREFIX):
            raise ValueError(f"Term list id may not use the reserved prefix {DOMAIN_PREFIX!r}: {list_id}")
        self._terms[list_id] = tuple(terms)

    def get_set(self, domain: str) -> Optional[KeywordSet]:
        return self._sets.get(domain)

    def keyword_sets(self) -> List[KeywordSet]:
        return list(self._sets.values())

    def domains(self) -> List[str]:
        return list(self._sets.keys())

    def terms(self, list_id: str) -> Tuple[str, ...]:
        """Return a term list by id; ``domain:<name>`` yields every tier of a keyword set."""
        if list_id.startswith(DOMAIN_PREFIX):
            domain = list_id[len(DOMAIN_PREFIX):]
            keyword_set = self._sets.get(domain)
            if keyword_set is None:
                raise KeyError(f"Unknown keyword domain: {domain}")
            return keyword_set.all_keywords()
        if list_id not in self._terms:
            raise KeyError(f"Unknown keyword list: {list_id}")
        return self._terms[list_id]


KEYWORDS = KeywordRegistry(
    keyword_sets=(BUSINESS_KEYWORDS, MARKET_KEYWORDS, FINANCIAL_KEYWORDS),
    term_lists=CATEGORY_TERMS,
)


class KeywordMatcher:
    """Scores text against one or all registered keyword domains."""

    def __init__(
        self,
        registry: Optional[KeywordRegistry] = None,
        *,
        additional_sets: Iterable[KeywordSet] = (),
        debug: bool = False,
    ) -> None:
        self.registry = registry or KEYWORDS
        self.matchers: Dict[str, KeywordSet] = {ks.domain: ks for ks in self.registry.keyword_sets()}
        for keyword_set in additional_sets:
            self.matchers[keyword_set.domain] = keyword_set
        self.debug = debug

    def match_domain(self, text: object, domain: str) -> MatchResult:
        """Match text against a single domain; unknown domains never match."""
        keyword_set = self.matchers.get(domain)
        if keyword_set is None:
            return MatchResult(domain=domain)
        return keyword_set.matches(text)

    def match_all(self, text: object) -> MatchAllResult:
        """Match text against every domain, best-scoring domain first."""
        if not text or not isinstance(text, str):
            return MatchAllResult()

        results = [keyword_set.matches(text) for keyword_set in self.matchers.values()]
        matched = [result for result in results if result.matched]
        matched.sort(key=lambda result: result.score, reverse=True)

        outcome = MatchAllResult(
            matched=bool(matched),
            categories=[
                DomainMatch(domain=result.domain, score=result.score, matches=result.matches)
                for result in matched
            ],
        )
        if self.debug:
            summary = ", ".join(f"{entry.domain} ({entry.score})" for entry in outcome.categories)
            logger.info(f"Keyword domains for {text[:100]!r}: {summary or 'none'}")
        return outcome

    def get_primary_domain(self, text: object) -> Optional[str]:
        return self.match_all(text).primary_domain


def is_business_query(query: object, terms: Sequence[str] = BUSINESS_QUERY_TERMS) -> bool:
    """Return True when the query mentions any business term."""
    if not query or not isinstance(query, str):
        return False
    normalized = query.strip().lower()
    if not normalized:
        return False
    return any(term in normalized for term in terms)
