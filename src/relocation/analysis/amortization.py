# src/relocation/analysis/amortization.py


def monthly_payment(principal: float, annual_rate: float, term_years: int = 30) -> float:
    """
    Standard fixed-rate amortization formula:
    M = P * [ r(1+r)^n / ((1+r)^n - 1) ]
    P = loan principal
    r = monthly interest rate
    n = number of payments (months)

    Caller guarantees term_years > 0.
    """
    r = annual_rate / 12.0
    n = term_years * 12

    if r == 0:
        return principal / n

    numerator = r * (1 + r) ** n
    denom = (1 + r) ** n - 1
    return principal * (numerator / denom)


def remaining_balance(
    principal: float,
    annual_rate: float,
    term_years: int,
    payments_made: int,
) -> float:
    """
    Balance left after `payments_made` level payments:
    B = P * ((1+r)^n - (1+r)^k) / ((1+r)^n - 1)
    """
    r = annual_rate / 12.0
    n = term_years * 12

    if r == 0:
        return principal - (principal / n) * payments_made

    growth_n = (1 + r) ** n
    growth_k = (1 + r) ** payments_made
    return principal * (growth_n - growth_k) / (growth_n - 1)
