from decimal import Decimal, ROUND_HALF_UP

from .models import TaxBreakdown
from .tables import get_tables

D = Decimal
CENT = D("1")


def qcents(x: Decimal) -> int:
    return int(x.quantize(CENT, rounding=ROUND_HALF_UP))


def split_vat_inclusive(total_cents: int, tax_rate=None) -> TaxBreakdown:
    """
    VAT-inclusive total -> net + tax.

    Net is rounded once; tax is the remainder, so net + tax == total always.
    tax_rate None = standard rate from the pricing tables.
    """
    rate = D(str(tax_rate)) if tax_rate is not None else get_tables().standard_tax_rate
    total = int(total_cents)
    net = qcents(D(total) / (D("1") + rate))
    return TaxBreakdown(total_cents=total, net_cents=net, tax_cents=total - net, tax_rate=rate)


def net_amount(total_cents: int, tax_rate=None) -> int:
    return split_vat_inclusive(total_cents, tax_rate).net_cents


def calculate_tax_from_total(total_cents: int, tax_rate=None) -> int:
    return split_vat_inclusive(total_cents, tax_rate).tax_cents
