"""Currency codes, display symbols and amount formatting."""

# Codes offered when adding exchange rates, in display order
CURRENCY_CODES: tuple[str, ...] = (
    "USD", "EUR", "GBP", "JPY", "CHF", "CAD", "AUD", "CNY", "HKD", "SGD",
    "INR", "MXN", "BRL", "KRW", "TRY", "RUB", "ZAR", "SEK", "NOK", "DKK",
    "PLN", "THB", "IDR", "MYR", "PHP", "VND", "AED", "SAR", "EGP", "NZD",
    "DZD",
)

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CHF": "CHF",
    "CAD": "C$",
    "AUD": "A$",
    "CNY": "¥",
    "HKD": "HK$",
    "SGD": "S$",
    "INR": "₹",
    "MXN": "MX$",
    "BRL": "R$",
    "KRW": "₩",
    "TRY": "₺",
    "RUB": "₽",
    "ZAR": "R",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr",
    "PLN": "zł",
    "THB": "฿",
    "IDR": "Rp",
    "MYR": "RM",
    "PHP": "₱",
    "VND": "₫",
    "AED": "د.إ",
    "SAR": "﷼",
    "EGP": "E£",
    "NZD": "NZ$",
    "DZD": "د.ج",
}


def get_currency_symbol(code: str) -> str:
    """Return the display symbol for a currency, or the code itself if unknown."""
    return CURRENCY_SYMBOLS.get(code, code)


def format_currency(amount: float, currency_code: str) -> str:
    """Format an amount as sign + symbol + magnitude with two decimals.

    Thousands are grouped with commas. Only strictly negative amounts get a
    sign, so -0.0 renders like 0.
    """
    symbol = get_currency_symbol(currency_code)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
