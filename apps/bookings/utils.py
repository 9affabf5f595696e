# apps/bookings/utils.py
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

# Amounts are stored with two decimal places
PAISE = Decimal('0.01')


def parse_amount(value):
    """
    Read a money amount sent as a number or a grouped string ("5,00,000").

    Returns None for empty input.
    """
    if value is None:
        return None
    text = str(value).replace(',', '').strip()
    if not text:
        return None
    return Decimal(text)


def round_amount(amount):
    """Round half-up to paise. None, NaN and infinities pass through."""
    if amount is None or not amount.is_finite():
        return amount
    return amount.quantize(PAISE, rounding=ROUND_HALF_UP)


def format_inr(value) -> str:
    """
    Format an amount with Indian digit grouping: 500000 -> "5,00,000".

    The last three integer digits form one group and the rest are grouped
    in pairs. Amounts are rounded to paise, trailing zeros dropped.
    Empty, zero and unreadable values render as "0".
    """
    try:
        amount = round_amount(parse_amount(value))
    except InvalidOperation:
        return '0'
    if not amount or not amount.is_finite():
        return '0'

    sign = '-' if amount < 0 else ''
    amount = abs(amount)
    whole, _, fraction = f'{amount:f}'.partition('.')
    fraction = fraction.rstrip('0')

    head, tail = whole[:-3], whole[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    groups.append(tail)

    formatted = sign + ','.join(groups)
    if fraction:
        formatted += '.' + fraction
    return formatted
