"""Reference data shipped with the application: terms, stocks and FAQs."""

from __future__ import annotations

from dataclasses import dataclass

CATEGORY_BASIC = "basic"
CATEGORY_ADVANCED = "advanced"
# Older installs filed the advanced terms under this label.
LEGACY_CATEGORY = "financial_metrics"

REGION_OVERSEAS = "overseas"
REGION_DOMESTIC = "domestic"
DEFAULT_REGION = REGION_OVERSEAS

RISK_LOW = "low"
RISK_MEDIUM = "medium"
RISK_HIGH = "high"


@dataclass(frozen=True)
class TermSeed:
    term: str
    category: str
    simple_explanation: str
    detailed_explanation: str | None = None
    example: str | None = None


@dataclass(frozen=True)
class StockSeed:
    code: str
    name: str
    sector: str | None = None
    description: str | None = None
    recommendation_reason: str | None = None
    risk_level: str | None = None
    region: str | None = None


@dataclass(frozen=True)
class FaqSeed:
    question: str
    answer: str
    category: str | None = None


# ── Terms ─────────────────────────────────────────────────────────────────────

BASELINE_TERMS: tuple[TermSeed, ...] = (
    TermSeed(
        "PER",
        CATEGORY_ADVANCED,
        "Price-to-earnings ratio: share price divided by earnings per share.",
        "Shows how many years of current earnings the market price pays for. "
        "A low PER can mean the stock is cheap, or that the market expects earnings to fall.",
        "A stock at 50,000 with EPS of 5,000 has a PER of 10.",
    ),
    TermSeed(
        "Dividend",
        CATEGORY_BASIC,
        "Part of a company's profit paid out to its shareholders.",
        "Usually paid in cash once or several times a year. Mature companies tend to pay steadier dividends.",
        "A company paying 1,000 per share gives a holder of 10 shares 10,000.",
    ),
    TermSeed(
        "Market Capitalization",
        CATEGORY_BASIC,
        "Total value of a company's shares: share price times shares outstanding.",
        "Used to group companies into large, mid and small caps.",
        "1,000,000 shares at 10,000 each is a market cap of 10 billion.",
    ),
    TermSeed(
        "Stock",
        CATEGORY_BASIC,
        "A certificate of partial ownership in a company.",
        "Shareholders can vote at general meetings and receive dividends.",
        None,
    ),
    TermSeed(
        "Stock Price",
        CATEGORY_BASIC,
        "The price at which one share currently trades.",
        "Moves with supply and demand, company results and the wider economy.",
        None,
    ),
    TermSeed(
        "Listing",
        CATEGORY_BASIC,
        "Registering a company's shares so they can trade on an exchange.",
        "A company must meet the exchange's requirements before it is listed.",
        "An IPO is the first sale of shares when a company lists.",
    ),
    TermSeed(
        "Buy",
        CATEGORY_BASIC,
        "Purchasing shares of a stock.",
        "Orders can be placed at a set price (limit) or at the market price.",
        None,
    ),
    TermSeed(
        "Sell",
        CATEGORY_BASIC,
        "Disposing of shares you hold.",
        "Selling realises a gain or a loss against the purchase price.",
        None,
    ),
    TermSeed(
        "Rate of Return",
        CATEGORY_BASIC,
        "Gain or loss on an investment as a percentage of the amount invested.",
        None,
        "Buying at 10,000 and selling at 11,000 is a 10% return.",
    ),
    TermSeed(
        "Loss",
        CATEGORY_BASIC,
        "The amount by which an investment falls below its purchase price.",
        "A loss is only realised when the position is sold.",
        None,
    ),
    TermSeed(
        "Portfolio",
        CATEGORY_BASIC,
        "The full set of investments an investor holds.",
        "Its composition reflects the investor's goals and risk tolerance.",
        None,
    ),
    TermSeed(
        "Diversification",
        CATEGORY_BASIC,
        "Spreading money across several investments to reduce risk.",
        "Losses in one holding can be offset by gains in another.",
        "Holding stocks from technology, healthcare and finance instead of one sector.",
    ),
    TermSeed(
        "PBR",
        CATEGORY_ADVANCED,
        "Price-to-book ratio: share price divided by book value per share.",
        "A PBR below 1 means the market values the company below its net assets.",
        None,
    ),
    TermSeed(
        "ROE",
        CATEGORY_ADVANCED,
        "Return on equity: net income divided by shareholders' equity.",
        "Measures how efficiently a company turns shareholders' capital into profit.",
        "Net income of 10 billion on equity of 100 billion is an ROE of 10%.",
    ),
    TermSeed(
        "EPS",
        CATEGORY_ADVANCED,
        "Earnings per share: net income divided by shares outstanding.",
        "Growing EPS is a sign of growing profitability per share.",
        None,
    ),
    TermSeed(
        "Beta",
        CATEGORY_ADVANCED,
        "How strongly a stock moves relative to the overall market.",
        "A beta above 1 swings more than the market; below 1 swings less.",
        None,
    ),
    TermSeed(
        "PEG",
        CATEGORY_ADVANCED,
        "PER divided by the expected earnings growth rate.",
        "Adjusts PER for growth; values below 1 are often read as undervalued.",
        "A PER of 20 with 20% expected growth is a PEG of 1.",
    ),
    TermSeed(
        "EV/EBITDA",
        CATEGORY_ADVANCED,
        "Enterprise value divided by earnings before interest, taxes, depreciation and amortisation.",
        "Compares companies regardless of how they are financed.",
        None,
    ),
    TermSeed(
        "DuPont Analysis",
        CATEGORY_ADVANCED,
        "Breaking ROE into profit margin, asset turnover and leverage.",
        "Shows which of the three drives a company's return on equity.",
        None,
    ),
    TermSeed(
        "Cash Flow Statement",
        CATEGORY_ADVANCED,
        "Financial statement showing cash coming in and going out of a company.",
        "Split into operating, investing and financing activities.",
        None,
    ),
    TermSeed(
        "Valuation",
        CATEGORY_ADVANCED,
        "Estimating what a company or its shares are worth.",
        "Common methods include multiples such as PER and PBR and discounted cash flow.",
        None,
    ),
)

# Inserted duplicate-safe into installs that predate the advanced catalogue.
ADVANCED_TERMS: tuple[TermSeed, ...] = tuple(
    t for t in BASELINE_TERMS if t.category == CATEGORY_ADVANCED
)


# ── Stocks ────────────────────────────────────────────────────────────────────

OVERSEAS_STOCKS: tuple[StockSeed, ...] = (
    StockSeed("AAPL", "Apple Inc.", "Technology",
              "Consumer hardware and services, led by the iPhone.",
              "Large, cash-rich company suited to long-term beginners.", RISK_LOW, REGION_OVERSEAS),
    StockSeed("MSFT", "Microsoft Corporation", "Technology",
              "Software and cloud computing (Windows, Office, Azure).",
              "Recurring subscription and cloud revenue.", RISK_LOW, REGION_OVERSEAS),
    StockSeed("GOOGL", "Alphabet Inc.", "Technology",
              "Search, advertising, YouTube and Google Cloud.",
              "Dominant search advertising business.", RISK_LOW, REGION_OVERSEAS),
    StockSeed("AMZN", "Amazon.com Inc.", "E-commerce/Cloud",
              "Online retail and Amazon Web Services.",
              "Cloud margins support the retail business.", RISK_MEDIUM, REGION_OVERSEAS),
    StockSeed("NVDA", "NVIDIA Corporation", "Technology",
              "Graphics processors and AI accelerators.",
              "Leading supplier for AI workloads; volatile.", RISK_HIGH, REGION_OVERSEAS),
    StockSeed("TSLA", "Tesla Inc.", "Automotive/Energy",
              "Electric vehicles and energy storage.",
              "High growth potential with large price swings.", RISK_HIGH, REGION_OVERSEAS),
    StockSeed("META", "Meta Platforms Inc.", "Technology",
              "Facebook, Instagram and WhatsApp.",
              "Strong advertising cash flow.", RISK_MEDIUM, REGION_OVERSEAS),
    StockSeed("JPM", "JPMorgan Chase & Co.", "Financial Services",
              "Largest US bank by assets.",
              "Diversified banking with a steady dividend.", RISK_LOW, REGION_OVERSEAS),
    StockSeed("V", "Visa Inc.", "Financial Services",
              "Global card payment network.",
              "Earns fees on payment volume without credit risk.", RISK_LOW, REGION_OVERSEAS),
    StockSeed("JNJ", "Johnson & Johnson", "Healthcare",
              "Pharmaceuticals and medical devices.",
              "Defensive holding with a long dividend record.", RISK_LOW, REGION_OVERSEAS),
    StockSeed("WMT", "Walmart Inc.", "Retail",
              "Largest retailer in the world.",
              "Stable demand in any economy.", RISK_LOW, REGION_OVERSEAS),
    StockSeed("PG", "Procter & Gamble Co.", "Consumer Goods",
              "Household and personal care brands.",
              "Everyday products with steady sales.", RISK_LOW, REGION_OVERSEAS),
    StockSeed("MA", "Mastercard Inc.", "Financial Services",
              "Global card payment network.",
              "Benefits from the shift to cashless payments.", RISK_LOW, REGION_OVERSEAS),
    StockSeed("UNH", "UnitedHealth Group Inc.", "Healthcare",
              "Health insurance and health services.",
              "Large scale in a growing market.", RISK_MEDIUM, REGION_OVERSEAS),
    StockSeed("HD", "The Home Depot Inc.", "Retail",
              "Home improvement retailer.",
              "Tied to housing activity.", RISK_MEDIUM, REGION_OVERSEAS),
    StockSeed("DIS", "The Walt Disney Company", "Entertainment",
              "Studios, theme parks and streaming.",
              "Well-known brands across several businesses.", RISK_MEDIUM, REGION_OVERSEAS),
    StockSeed("NFLX", "Netflix Inc.", "Entertainment",
              "Subscription video streaming.",
              "Subscriber growth drives the price; volatile.", RISK_HIGH, REGION_OVERSEAS),
    StockSeed("AMD", "Advanced Micro Devices", "Technology",
              "CPUs and GPUs for PCs and data centres.",
              "Gaining share in data centres; volatile.", RISK_HIGH, REGION_OVERSEAS),
    StockSeed("INTC", "Intel Corporation", "Technology",
              "PC and server processors and foundry services.",
              "Turnaround story with execution risk.", RISK_MEDIUM, REGION_OVERSEAS),
    StockSeed("COST", "Costco Wholesale Corporation", "Retail",
              "Membership warehouse retailer.",
              "Membership fees give predictable income.", RISK_LOW, REGION_OVERSEAS),
)

DOMESTIC_STOCKS: tuple[StockSeed, ...] = (
    StockSeed("005930", "Samsung Electronics", "Semiconductors/Electronics",
              "Memory chips, smartphones and consumer electronics.",
              "Bellwether of the domestic market.", RISK_MEDIUM, REGION_DOMESTIC),
    StockSeed("000660", "SK hynix", "Semiconductors",
              "Memory chips, including high-bandwidth memory for AI.",
              "Leveraged to the memory cycle.", RISK_HIGH, REGION_DOMESTIC),
    StockSeed("005380", "Hyundai Motor", "Automotive",
              "Passenger cars and commercial vehicles.",
              "Growing electric vehicle line-up.", RISK_MEDIUM, REGION_DOMESTIC),
    StockSeed("066570", "LG Electronics", "Electronics",
              "Home appliances, TVs and vehicle components.",
              "Premium appliance brand.", RISK_MEDIUM, REGION_DOMESTIC),
    StockSeed("035420", "NAVER", "Internet/IT",
              "Largest domestic search portal and commerce platform.",
              "Platform business with AI investment.", RISK_MEDIUM, REGION_DOMESTIC),
    StockSeed("035720", "Kakao", "Internet/IT",
              "Messenger platform with payments, banking and content.",
              "Wide user base across services.", RISK_MEDIUM, REGION_DOMESTIC),
    StockSeed("051910", "LG Chem", "Chemicals",
              "Petrochemicals and battery materials.",
              "Exposure to the battery supply chain.", RISK_MEDIUM, REGION_DOMESTIC),
    StockSeed("028260", "Samsung C&T", "Construction/Trading",
              "Construction, trading, fashion and resorts.",
              "Holding-company style diversification.", RISK_MEDIUM, REGION_DOMESTIC),
    StockSeed("006400", "Samsung SDI", "Batteries",
              "Batteries for electric vehicles and energy storage.",
              "Growth tied to electric vehicle demand.", RISK_HIGH, REGION_DOMESTIC),
    StockSeed("003670", "POSCO Holdings", "Steel",
              "Steel production and battery materials.",
              "Cyclical steel business with new materials growth.", RISK_MEDIUM, REGION_DOMESTIC),
    StockSeed("096770", "SK Innovation", "Energy/Chemicals",
              "Refining, petrochemicals and batteries.",
              "Sensitive to oil prices.", RISK_MEDIUM, REGION_DOMESTIC),
    StockSeed("017670", "SK Telecom", "Telecommunications",
              "Largest mobile carrier.",
              "Steady cash flow and dividends.", RISK_LOW, REGION_DOMESTIC),
    StockSeed("030200", "KT", "Telecommunications",
              "Fixed-line, mobile and internet services.",
              "Defensive dividend payer.", RISK_LOW, REGION_DOMESTIC),
    StockSeed("032830", "Samsung Life Insurance", "Finance",
              "Largest life insurer.",
              "Stable earnings and dividends.", RISK_LOW, REGION_DOMESTIC),
    StockSeed("055550", "Shinhan Financial Group", "Finance",
              "Banking, cards, securities and insurance.",
              "Diversified financial group with a steady dividend.", RISK_LOW, REGION_DOMESTIC),
)

BASELINE_STOCKS: tuple[StockSeed, ...] = OVERSEAS_STOCKS + DOMESTIC_STOCKS


# ── FAQs ──────────────────────────────────────────────────────────────────────

BASELINE_FAQS: tuple[FaqSeed, ...] = (
    FaqSeed(
        "I'm new to investing. Where should I start?",
        "Learn the basic terms first, work out your investor profile, then pick "
        "stocks that match it. The profile check can help.",
        "basics",
    ),
    FaqSeed(
        "Is a stock with a low PER always a good buy?",
        "No. Compare it with the sector average and consider growth prospects. "
        "A low PER can also mean the business is struggling.",
        "metrics",
    ),
    FaqSeed(
        "When should I sell a stock?",
        "It depends on your goal. Short-term investors often sell at a target "
        "return; long-term investors sell when the company's fundamentals change.",
        "strategy",
    ),
)
