"""
Seed Data Module

Resource library content loaded into an empty store at startup.
"""
from typing import List

from app.core.logging_config import logger
from app.models.kinds import EntityKind
from app.models.resource import Resource
from app.modules.storage.base import EntityStore


# ==================== Sample Data Constants ====================

BUSINESS_PLAN_TEMPLATE = """# Business Plan Template

## Executive Summary
- Business concept and current situation
- Key objectives and success factors

## Company Description
- Overview, mission and vision
- Company values

## Market Analysis
- Industry overview and target market
- Market size, growth and trends
- Competitive analysis

## Organization & Management
- Structure and key roles
- Board of directors / advisors

## Products & Services
- Description and lifecycle
- Intellectual property and R&D

## Marketing & Sales
- Marketing, sales and pricing strategy

## Financial Projections
- Revenue model and startup costs
- Break-even analysis, P&L and cash flow forecast

## Funding Request
- Current and future requirements
- Use of funds and exit strategy
"""

TECH_PLAN_TEMPLATE = """# Tech Startup Business Plan

## Executive Summary
- Problem, solution and market opportunity

## Technology
- Core technology and development status
- Intellectual property and technical roadmap

## Market Analysis
- Target segments and adoption trends
- Competitive landscape

## Business Model
- Revenue streams and pricing
- Customer acquisition and unit economics

## Growth
- Go-to-market, acquisition channels and retention
- Growth metrics

## Team
- Founders, key hires and advisors

## Financials
- Burn rate, revenue forecast and funding requirements

## Risks
- Market, technology and operational risks with mitigations
"""

MARKET_RESEARCH_GUIDE = """# Market Research Guide

## Define Objectives
- Questions the research must answer
- Timeline and budget

## Identify the Target Market
- Demographics, psychographics and personas
- Market size and segments

## Choose Methods
### Primary
- Surveys, interviews, focus groups, field trials
### Secondary
- Industry reports, government data, competitor analysis

## Collect and Analyse
- Sample design and data quality
- Quantitative and qualitative analysis

## Apply the Insights
- Feed findings into strategy, product and marketing
- Re-run research as the market shifts
"""

FINANCIAL_MODEL = """# Startup Financial Model

## Revenue Projections

| Month | Customers | Price | Revenue |
|-------|-----------|-------|---------|
| 1     | [value]   | [value] | [calc] |

## Expenses

| Category | Monthly | Annual |
|----------|---------|--------|
| Salaries | [value] | [calc] |
| Rent     | [value] | [calc] |
| Software | [value] | [calc] |

## Cash Flow

| Month | Opening | Revenue | Expenses | Closing |
|-------|---------|---------|----------|---------|
| 1     | [value] | [calc]  | [calc]   | [calc]  |

## Break-even
- Fixed costs, contribution margin per unit
- Break-even units and revenue

## Funding Rounds

| Round | Amount | Timing | Use of Funds |
|-------|--------|--------|--------------|
| Seed  | [value] | [value] | [value]     |
"""

PITCH_DECK_TEMPLATE = """# Startup Pitch Deck Template

1. Cover - name, tagline, contact
2. Problem - who has it and why it matters
3. Solution - how the product solves it
4. Market - TAM, SAM, SOM and trends
5. Product - demo, stage and roadmap
6. Business Model - pricing, channels, unit economics
7. Go-to-Market - acquisition strategy and launch plan
8. Competition - landscape and differentiation
9. Traction - users, revenue, milestones
10. Team - founders, advisors, key hires
11. Financials - 3-5 year projections
12. The Ask - amount, use of funds, next milestone
13. Vision - long-term impact and call to action
"""

LEGAL_DOCUMENTS = """# Essential Startup Legal Documents

## Incorporation
- Articles of incorporation
- Bylaws / operating agreement

## Founders
- Founder equity agreement
- Vesting schedule (commonly 4 years with a 1 year cliff)

## Intellectual Property
- Employee IP assignment
- Contractor agreement

## Investment
- SAFE: amount, valuation cap, discount
- Convertible note: principal, interest, maturity

## Customers
- Terms of service
- Privacy policy

## Employment
- Offer letter template
- Employee handbook
"""

SAMPLE_RESOURCES = [
    {
        "category": "Business Plan Templates",
        "title": "Standard Business Plan Template",
        "description": "A comprehensive business plan template suitable for most startups.",
        "content": BUSINESS_PLAN_TEMPLATE,
        "format": "markdown",
        "industry": None,
    },
    {
        "category": "Business Plan Templates",
        "title": "Tech Startup Plan Template",
        "description": "Business plan template tailored to technology startups.",
        "content": TECH_PLAN_TEMPLATE,
        "format": "markdown",
        "industry": "Technology",
    },
    {
        "category": "Market Research Guides",
        "title": "Comprehensive Market Research Guide",
        "description": "Step-by-step guide to researching your target market.",
        "content": MARKET_RESEARCH_GUIDE,
        "format": "markdown",
        "industry": None,
    },
    {
        "category": "Financial Models",
        "title": "Startup Financial Model",
        "description": "Revenue, expense and cash flow templates for early-stage planning.",
        "content": FINANCIAL_MODEL,
        "format": "markdown",
        "industry": None,
    },
    {
        "category": "Pitch Deck Templates",
        "title": "Startup Pitch Deck Template",
        "description": "Slide-by-slide outline of an investor pitch deck.",
        "content": PITCH_DECK_TEMPLATE,
        "format": "markdown",
        "industry": None,
    },
    {
        "category": "Legal Templates",
        "title": "Essential Startup Legal Documents",
        "description": "Checklist of the legal documents most startups need.",
        "content": LEGAL_DOCUMENTS,
        "format": "markdown",
        "industry": None,
    },
]


async def seed_resources(store: EntityStore) -> List[Resource]:
    """Load the resource library into an empty store; no-op when resources exist"""
    existing = await store.count(EntityKind.RESOURCE)
    if existing:
        logger.info(f"[Seed] Resource library already has {existing} entries, skipping")
        return []

    resources = []
    for data in SAMPLE_RESOURCES:
        resources.append(await store.create(EntityKind.RESOURCE, data))

    logger.info(f"[Seed] Created {len(resources)} resources")
    return resources
