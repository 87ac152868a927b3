"""
Calculator catalogue.

Static metadata for every calculator the site lists: its slug, display name,
short description, category and SEO keywords. Whether a calculator can
actually be computed is decided by the registry, not here.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

CATEGORIES: Tuple[str, ...] = (
    "Stock Market",
    "Crypto",
    "General Investment",
    "Mutual Funds & SIP",
    "Retirement Planning",
    "Advanced Tools",
)


class CalculatorDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    category: str
    path: str
    keywords: Tuple[str, ...]


def _define(calculator_id: str, name: str, description: str, category: str, *keywords: str) -> CalculatorDefinition:
    return CalculatorDefinition(
        id=calculator_id,
        name=name,
        description=description,
        category=category,
        path=f"/calculators/{calculator_id}",
        keywords=keywords,
    )


CALCULATORS: Tuple[CalculatorDefinition, ...] = (
    # Stock Market
    _define("compound-interest", "Compound Interest Calculator", "Project future value of investments with compounding.",
            "Stock Market", "compound interest", "investment growth", "finance"),
    _define("stock-return", "Stock Return Calculator", "Calculate profit or loss from stock investments.",
            "Stock Market", "stock return", "equity profit", "investment analysis"),
    _define("dividend-yield", "Dividend Yield Calculator", "Determine the dividend yield of a stock.",
            "Stock Market", "dividend yield", "stock dividend", "passive income"),
    _define("risk-reward-ratio", "Risk/Reward Ratio Calculator", "Assess the risk vs. reward of an investment.",
            "Stock Market", "risk reward", "trade analysis", "investment strategy"),
    _define("volatility", "Volatility Calculator", "Measure the volatility of an investment.",
            "Stock Market", "volatility", "stock risk", "market fluctuation"),
    # Crypto
    _define("bitcoin-roi", "Bitcoin ROI Calculator", "Calculate Return on Investment for Bitcoin.",
            "Crypto", "bitcoin roi", "crypto return", "btc investment"),
    _define("crypto-dca", "Crypto DCA Calculator", "Simulate Dollar Cost Averaging for crypto.",
            "Crypto", "crypto dca", "dollar cost averaging", "bitcoin averaging"),
    _define("blockchain-fee", "Blockchain Fee Calculator", "Estimate blockchain transaction fees.",
            "Crypto", "blockchain fees", "crypto transaction cost", "gas fees"),
    _define("crypto-tax", "Crypto Tax Calculator", "Estimate potential taxes on crypto gains.",
            "Crypto", "crypto tax", "bitcoin tax", "cryptocurrency capital gains"),
    _define("ico-ido-roi", "ICO/IDO ROI Calculator", "Calculate ROI for ICO/IDO investments.",
            "Crypto", "ico roi", "ido return", "crypto launchpad"),
    # General Investment
    _define("portfolio-allocation", "Portfolio Allocation Calculator", "Plan your asset allocation strategy.",
            "General Investment", "portfolio allocation", "asset distribution", "investment diversification"),
    _define("loan-vs-investment", "Loan vs Investment Calculator", "Compare paying off loans vs. investing.",
            "General Investment", "loan vs investment", "debt management", "financial decisions"),
    _define("real-estate-roi", "Real Estate ROI Calculator", "Calculate ROI for real estate investments.",
            "General Investment", "real estate roi", "property investment", "rental income"),
    _define("goal-planning", "Goal Planning Calculator", "Plan investments to reach financial goals.",
            "General Investment", "goal planning", "financial goals", "investment targets"),
    _define("time-value-of-money", "Time Value of Money Calculator", "Understand the time value of money.",
            "General Investment", "time value of money", "tvm", "future value", "present value"),
    _define("currency-converter", "Currency Converter",
            "Convert amounts between currencies using placeholder exchange rates.",
            "General Investment", "currency converter", "exchange rate", "forex", "money conversion"),
    # Mutual Funds & SIP
    _define("sip-calculator", "SIP Calculator", "Project Systematic Investment Plan returns.",
            "Mutual Funds & SIP", "sip calculator", "systematic investment plan", "mutual fund returns"),
    _define("sip-vs-lumpsum", "SIP vs Lumpsum Calculator", "Compare SIP and lumpsum investment strategies.",
            "Mutual Funds & SIP", "sip vs lumpsum", "investment comparison", "mutual fund strategy"),
    _define("swp-calculator", "SWP Calculator", "Plan Systematic Withdrawal Plan from investments.",
            "Mutual Funds & SIP", "swp calculator", "systematic withdrawal plan", "retirement income"),
    _define("elss-tax-saving", "ELSS Tax Saving Calculator", "Calculate tax savings with ELSS mutual funds.",
            "Mutual Funds & SIP", "elss calculator", "tax saving mutual funds", "section 80c"),
    # Retirement Planning
    _define("retirement-corpus", "Retirement Corpus Calculator", "Estimate the corpus needed for retirement.",
            "Retirement Planning", "retirement corpus", "pension planning", "retirement fund"),
    _define("annuity-calculator", "Annuity Calculator", "Calculate potential income from annuities.",
            "Retirement Planning", "annuity calculator", "retirement annuity", "pension income"),
    # Advanced Tools
    _define("bear-market-survival", "Bear Market Survival Calculator", "Assess portfolio resilience in bear markets.",
            "Advanced Tools", "bear market", "portfolio stress test", "drawdown analysis"),
    _define("global-allocation", "Global Allocation Calculator", "Plan international investment allocation.",
            "Advanced Tools", "global allocation", "international investing", "currency risk"),
    _define("market-timing-cost", "Market Timing Cost Calculator", "Understand the cost of trying to time the market.",
            "Advanced Tools", "market timing", "investment strategy", "missed opportunity cost"),
)


def get_calculator_by_id(
    calculator_id: str, catalog: Tuple[CalculatorDefinition, ...] = CALCULATORS
) -> Optional[CalculatorDefinition]:
    for definition in catalog:
        if definition.id == calculator_id:
            return definition
    return None


def group_by_category(
    catalog: Tuple[CalculatorDefinition, ...] = CALCULATORS,
    category: Optional[str] = None,
) -> Dict[str, List[CalculatorDefinition]]:
    """Catalogue entries keyed by category, in the fixed category order."""
    grouped: Dict[str, List[CalculatorDefinition]] = OrderedDict()
    for name in CATEGORIES:
        if category is not None and name != category:
            continue
        entries = [definition for definition in catalog if definition.category == name]
        if entries:
            grouped[name] = entries
    return grouped
