from __future__ import annotations

from investcalc.schemas.taxes import (
    SECTION_80C_LIMIT,
    CryptoTaxRequest,
    CryptoTaxResult,
    ElssTaxSavingRequest,
    ElssTaxSavingResult,
)


def calculate_crypto_tax(request: CryptoTaxRequest) -> CryptoTaxResult:
    tax = request.total_gains * request.tax_rate / 100
    return CryptoTaxResult(estimated_tax=tax, gains_after_tax=request.total_gains - tax)


def calculate_elss_tax_saving(request: ElssTaxSavingRequest) -> ElssTaxSavingResult:
    deduction = min(request.investment_amount, SECTION_80C_LIMIT)
    return ElssTaxSavingResult(
        eligible_deduction=deduction,
        tax_saved=deduction * request.tax_slab_rate / 100,
    )
