# tests/fixtures/scenarios.py

from relocation.domain.financing import Borrower, LoanProduct
from relocation.domain.property import CandidateProperty, SourceProperty
from relocation.domain.scenario import HoldAndRent, LiquidateAndBuy

CONVENTIONAL = LoanProduct(
    name="Conventional",
    category="conventional",
    interest_rate=0.062,
    min_down_payment=0.035,
    insurance_premium=150.0,
)

VA = LoanProduct(
    name="VA Loan",
    category="va",
    interest_rate=0.055,
    min_down_payment=0.0,
    insurance_premium=0.0,
)


def source_property() -> SourceProperty:
    """2.8M (source currency) apartment renting for 2,800, rate 7.27, 3.6% selling cost."""
    return SourceProperty(
        market_value=2_800_000,
        monthly_rent=2_800,
        exchange_rate=7.27,
        selling_cost_rate=0.036,
    )


def two_bed() -> CandidateProperty:
    return CandidateProperty(
        category="2B2B",
        price=550_000,
        rent_per_unit=1_200,
        unit_count=2,
        appreciation_rate=0.03,
        carrying_cost=850,
    )


def one_bed() -> CandidateProperty:
    return CandidateProperty(
        category="1B1B",
        price=420_000,
        rent_per_unit=1_800,
        unit_count=1,
        appreciation_rate=0.02,
        carrying_cost=750,
    )


def conventional_borrower(income: float = 9_000) -> Borrower:
    return Borrower(name="Sam", monthly_income=income, loan_products=(CONVENTIONAL,))


def dual_product_borrower(income: float = 9_000) -> Borrower:
    return Borrower(name="Alex", monthly_income=income, loan_products=(CONVENTIONAL, VA))


def buy_two_bed(
    down_payment_fraction: float = 0.20,
    units_rented: int = 2,
    borrower: Borrower | None = None,
    fallback_rent: float = 850,
) -> LiquidateAndBuy:
    return LiquidateAndBuy(
        id=f"2B2B-{round(down_payment_fraction * 100)}%-{units_rented}rooms",
        name="2B2B test purchase",
        fallback_rent=fallback_rent,
        candidate=two_bed(),
        down_payment_fraction=down_payment_fraction,
        borrower=borrower or conventional_borrower(),
        units_rented=units_rented,
    )


def hold(fallback_rent: float = 850) -> HoldAndRent:
    return HoldAndRent(id="baseline", name="hold", fallback_rent=fallback_rent)
