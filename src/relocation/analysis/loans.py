from __future__ import annotations

from relocation.domain.financing import Borrower, LoanProduct


def best_loan(borrower: Borrower, down_payment_fraction: float) -> LoanProduct | None:
    """
    Lowest-rate product the borrower qualifies for at this down payment.

    Ties keep the first product encountered. None means nothing qualifies,
    which the scenario generator treats as "skip", not as an error.
    """
    best: LoanProduct | None = None
    for product in borrower.loan_products:
        if product.min_down_payment > down_payment_fraction:
            continue
        if best is None or product.interest_rate < best.interest_rate:
            best = product
    return best
