from compound_calc.core.formatting import format_currency, format_number


def test_format_currency_uses_two_decimals_and_separators():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(0) == "$0.00"
    assert format_currency(1234567.891, "€") == "€1,234,567.89"


def test_format_currency_keeps_sign_after_symbol():
    assert format_currency(-1234.5, "£") == "£-1,234.50"


def test_format_number_decimals():
    assert format_number(7) == "7.00"
    assert format_number(11.3326, 1) == "11.3"
    assert format_number(25000, 0) == "25,000"
