import pytest

from app.headers import resolve_header, resolve_header_map
from app.tokenizer import detect_delimiter, split_row


@pytest.mark.parametrize(
    "token, expected",
    [
        ("date", "date"),
        (" Fecha ", "date"),
        ("Salesperson", "salesperson"),
        ("COMERCIAL", "salesperson"),
        ("vendedor", "salesperson"),
        ("Importe", "amount"),
        ("monto", "amount"),
        ("Total", "amount"),
        ("  Notes ", "notes"),
    ],
)
def test_resolve_header(token, expected):
    assert resolve_header(token) == expected


def test_resolve_header_map_any_order():
    assert resolve_header_map(["Vendedor", "Fecha", "Total"]) == {
        "date": 1,
        "salesperson": 0,
        "amount": 2,
    }


def test_resolve_header_map_first_occurrence_wins():
    header_map = resolve_header_map(["date", "total", "comercial", "amount"])
    assert header_map == {"date": 0, "salesperson": 2, "amount": 1}


def test_resolve_header_map_incomplete():
    assert resolve_header_map(["date", "salesperson", "notes"]) is None
    assert resolve_header_map(["2024-05-01", "Ana", "100"]) is None


def test_detect_delimiter():
    assert detect_delimiter("a;b;c") == ";"
    assert detect_delimiter("a,b,c") == ","
    assert detect_delimiter("a;b,c") == ","
    assert detect_delimiter("abc") == ","


def test_split_row_trims_fields():
    assert split_row(" 2024-05-01 ; Ana ; 1.234 ") == ["2024-05-01", "Ana", "1.234"]
    assert split_row("a, b ,c") == ["a", "b", "c"]


def test_split_row_ignores_quotes():
    assert split_row('2024-05-01,"Doe, Jane",10') == ["2024-05-01", '"Doe', 'Jane"', "10"]
