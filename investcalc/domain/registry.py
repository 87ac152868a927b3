"""
Calculator registry: slug -> {request model, compute function}.

Every calculator is described by the same triple (the request schema, a pure
compute function and the result model the function returns), so a single
HTTP endpoint can drive all of them. A catalogue entry with no registered
spec is listed as "coming soon" and cannot be run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel

from investcalc.core.allocation import calculate_global_allocation, calculate_portfolio_allocation
from investcalc.core.comparisons import (
    calculate_bear_market_survival,
    calculate_loan_vs_investment,
    calculate_market_timing_cost,
    calculate_risk_reward,
)
from investcalc.core.crypto import calculate_blockchain_fee, calculate_crypto_dca
from investcalc.core.currency import convert_currency
from investcalc.core.depletion import calculate_annuity, calculate_swp
from investcalc.core.goals import calculate_goal_plan, calculate_retirement_corpus
from investcalc.core.growth import (
    calculate_compound_interest,
    calculate_sip,
    calculate_sip_vs_lumpsum,
    calculate_time_value_of_money,
)
from investcalc.core.returns import (
    calculate_bitcoin_roi,
    calculate_dividend_yield,
    calculate_ico_roi,
    calculate_real_estate_roi,
    calculate_stock_return,
    calculate_volatility,
)
from investcalc.core.taxes import calculate_crypto_tax, calculate_elss_tax_saving
from investcalc.domain.catalog import CALCULATORS, CalculatorDefinition, get_calculator_by_id
from investcalc.errors import CalculatorNotFound, CalculatorUnavailable
from investcalc.schemas.allocation import GlobalAllocationRequest, PortfolioAllocationRequest
from investcalc.schemas.comparisons import (
    BearMarketSurvivalRequest,
    LoanVsInvestmentRequest,
    MarketTimingCostRequest,
    RiskRewardRequest,
)
from investcalc.schemas.crypto import BlockchainFeeRequest, CryptoDcaRequest
from investcalc.schemas.currency import CurrencyConverterRequest
from investcalc.schemas.depletion import AnnuityRequest, SwpRequest
from investcalc.schemas.goals import GoalPlanningRequest, RetirementCorpusRequest
from investcalc.schemas.growth import (
    CompoundInterestRequest,
    SipRequest,
    SipVsLumpsumRequest,
    TimeValueOfMoneyRequest,
)
from investcalc.schemas.returns import (
    BitcoinRoiRequest,
    DividendYieldRequest,
    IcoRoiRequest,
    RealEstateRoiRequest,
    StockReturnRequest,
    VolatilityRequest,
)
from investcalc.schemas.taxes import CryptoTaxRequest, ElssTaxSavingRequest


class CalculatorStatus(str, Enum):
    AVAILABLE = "available"
    COMING_SOON = "coming_soon"


@dataclass(frozen=True)
class CalculatorSpec:
    request_model: Type[BaseModel]
    compute: Callable[[Any], BaseModel]

    def run(self, payload: Mapping[str, Any]) -> BaseModel:
        """Validate ``payload`` and compute. Raises pydantic.ValidationError on bad input."""
        request = self.request_model.model_validate(payload)
        return self.compute(request)

    def defaults(self) -> Dict[str, Any]:
        return self.request_model().model_dump(mode="json")


SPECS: Mapping[str, CalculatorSpec] = MappingProxyType(
    {
        "compound-interest": CalculatorSpec(CompoundInterestRequest, calculate_compound_interest),
        "stock-return": CalculatorSpec(StockReturnRequest, calculate_stock_return),
        "dividend-yield": CalculatorSpec(DividendYieldRequest, calculate_dividend_yield),
        "risk-reward-ratio": CalculatorSpec(RiskRewardRequest, calculate_risk_reward),
        "volatility": CalculatorSpec(VolatilityRequest, calculate_volatility),
        "bitcoin-roi": CalculatorSpec(BitcoinRoiRequest, calculate_bitcoin_roi),
        "crypto-dca": CalculatorSpec(CryptoDcaRequest, calculate_crypto_dca),
        "blockchain-fee": CalculatorSpec(BlockchainFeeRequest, calculate_blockchain_fee),
        "crypto-tax": CalculatorSpec(CryptoTaxRequest, calculate_crypto_tax),
        "ico-ido-roi": CalculatorSpec(IcoRoiRequest, calculate_ico_roi),
        "portfolio-allocation": CalculatorSpec(PortfolioAllocationRequest, calculate_portfolio_allocation),
        "loan-vs-investment": CalculatorSpec(LoanVsInvestmentRequest, calculate_loan_vs_investment),
        "real-estate-roi": CalculatorSpec(RealEstateRoiRequest, calculate_real_estate_roi),
        "goal-planning": CalculatorSpec(GoalPlanningRequest, calculate_goal_plan),
        "time-value-of-money": CalculatorSpec(TimeValueOfMoneyRequest, calculate_time_value_of_money),
        "currency-converter": CalculatorSpec(CurrencyConverterRequest, convert_currency),
        "sip-calculator": CalculatorSpec(SipRequest, calculate_sip),
        "sip-vs-lumpsum": CalculatorSpec(SipVsLumpsumRequest, calculate_sip_vs_lumpsum),
        "swp-calculator": CalculatorSpec(SwpRequest, calculate_swp),
        "elss-tax-saving": CalculatorSpec(ElssTaxSavingRequest, calculate_elss_tax_saving),
        "retirement-corpus": CalculatorSpec(RetirementCorpusRequest, calculate_retirement_corpus),
        "annuity-calculator": CalculatorSpec(AnnuityRequest, calculate_annuity),
        "bear-market-survival": CalculatorSpec(BearMarketSurvivalRequest, calculate_bear_market_survival),
        "global-allocation": CalculatorSpec(GlobalAllocationRequest, calculate_global_allocation),
        "market-timing-cost": CalculatorSpec(MarketTimingCostRequest, calculate_market_timing_cost),
    }
)


class CalculatorRegistry:
    """Read-only view joining the catalogue with the compute specs."""

    def __init__(
        self,
        catalog: Tuple[CalculatorDefinition, ...] = CALCULATORS,
        specs: Mapping[str, CalculatorSpec] = SPECS,
    ) -> None:
        self._catalog = tuple(catalog)
        self._specs = MappingProxyType(dict(specs))

    @property
    def catalog(self) -> Tuple[CalculatorDefinition, ...]:
        return self._catalog

    def __len__(self) -> int:
        return len(self._catalog)

    def get(self, slug: str) -> Optional[CalculatorDefinition]:
        return get_calculator_by_id(slug, self._catalog)

    def status(self, slug: str) -> CalculatorStatus:
        self.definition(slug)
        return CalculatorStatus.AVAILABLE if slug in self._specs else CalculatorStatus.COMING_SOON

    def definition(self, slug: str) -> CalculatorDefinition:
        definition = self.get(slug)
        if definition is None:
            raise CalculatorNotFound(slug)
        return definition

    def resolve(self, slug: str) -> Tuple[CalculatorDefinition, CalculatorSpec]:
        """
        Look up a runnable calculator.

        Raises CalculatorNotFound for an unknown slug and CalculatorUnavailable
        for a listed calculator that has no compute spec yet.
        """
        definition = self.definition(slug)
        spec = self._specs.get(slug)
        if spec is None:
            raise CalculatorUnavailable(slug)
        return definition, spec

    def run(self, slug: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        _, spec = self.resolve(slug)
        return spec.run(payload).model_dump(mode="json")

    def available_ids(self) -> List[str]:
        return [definition.id for definition in self._catalog if definition.id in self._specs]
