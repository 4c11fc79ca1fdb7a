from relocation.domain.property import SourceProperty


def net_proceeds(source: SourceProperty) -> float:
    """
    Cash in hand, in the target currency, after selling the source property.
    exchange_rate must be non-zero.
    """
    gross = source.market_value / source.exchange_rate
    return gross * (1 - source.selling_cost_rate)
