import math

import pytest

from ninekit.exchange import BitcoinExchange, ExchangeError, parse_amount, parse_date


@pytest.fixture
def database(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(
        "date,exchange_rate\n"
        "2009-01-02,0\n"
        "2011-01-03,0.3\n"
        "2011-01-09,0.32\n"
        "2012-01-11,7.1\n"
    )
    return path


def write_db(tmp_path, text):
    path = tmp_path / "db.csv"
    path.write_text(text)
    return path


def test_parse_date_preserves_order():
    dates = ["2009-01-02", "2011-01-03", "2011-01-09", "2011-12-31", "2012-01-11"]
    values = [parse_date(d) for d in dates]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_parse_date_leap_years():
    assert parse_date("2024-02-28") < parse_date("2024-02-29") < parse_date("2024-03-01")
    assert parse_date("2000-02-29") < parse_date("2000-03-01")


def test_parse_date_month_lengths():
    assert parse_date("2011-07-31") < parse_date("2011-08-31")
    with pytest.raises(ExchangeError):
        parse_date("2011-09-31")
    with pytest.raises(ExchangeError):
        parse_date("2011-04-31")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "x",
        "2011-1-03",
        "2011-13-01",
        "2011-00-10",
        "2011-01-00",
        "2023-02-29",
        "1900-02-29",
        "429497-01-01",
        " 2011-01-01",
        "2011-01-01 ",
        "-2011-01-01",
    ],
)
def test_parse_date_rejects(text):
    with pytest.raises(ExchangeError) as info:
        parse_date(text)
    assert str(info.value) == f"Bad date => '{text}'"


@pytest.mark.parametrize("text,expected", [("1", 1.0), ("1000", 1000.0), ("0.5", 0.5), ("+2", 2.0)])
def test_parse_amount_accepts(text, expected):
    assert parse_amount(text) == expected


def test_parse_amount_single_precision():
    value = parse_amount("0.1")
    assert abs(value - 0.1) < 1e-7
    assert value != 0.1


def test_rate_lookup(database):
    exchanger = BitcoinExchange.from_csv(database)
    assert exchanger.rate_at("2011-01-03") == 0.3
    assert exchanger.rate_at("2011-01-05") == 0.3
    assert exchanger.rate_at("2011-01-09") == 0.32
    assert exchanger.rate_at("2020-01-01") == 7.1
    assert exchanger.rate_at("2009-01-01") == 0.0


def test_convert_is_linear(database):
    exchanger = BitcoinExchange.from_csv(database)
    assert exchanger.convert("1", "2011-01-05") == 0.3
    assert exchanger.convert("4", "2012-01-11") == pytest.approx(4 * exchanger.rate_at("2012-01-11"))
    assert exchanger.convert(1.0, "2011-01-09") == exchanger.rate_at("2011-01-09")


def test_convert_checks_date_before_amount(database):
    exchanger = BitcoinExchange.from_csv(database)
    with pytest.raises(ExchangeError, match="Bad date => 'bad'"):
        exchanger.convert("nope", "bad")
    with pytest.raises(ExchangeError, match="The value is out of range"):
        exchanger.convert("-1", "2011-01-05")


def test_empty_exchange_gives_zero():
    assert BitcoinExchange({}).convert("5", "2011-01-01") == 0.0


def test_mapping_keys_may_be_strings():
    exchanger = BitcoinExchange({"2011-01-03": 1.5})
    assert exchanger.rate_at("2011-01-04") == 1.5
    assert exchanger.rate_at("2011-01-02") == 0.0


def test_custom_delimiter(tmp_path):
    path = write_db(tmp_path, "date | exchange_rate\n2011-01-03 | 2.5\n")
    assert BitcoinExchange.from_csv(path).rate_at("2011-02-01") == 2.5


def test_hex_and_signed_zero_rates(tmp_path):
    path = write_db(tmp_path, "date,exchange_rate\n2011-01-03,-0\n2011-01-04,0x1p1\n")
    exchanger = BitcoinExchange.from_csv(path)
    assert exchanger.rate_at("2011-01-03") == 0.0
    assert exchanger.rate_at("2011-01-04") == float.fromhex("0x1p1")


@pytest.mark.parametrize(
    "text,message",
    [
        ("", "No header line in the rate database file"),
        ("value,date,exchange_rate\n", "No 'date' entry"),
        ("date,exchange_rate,x\n", "No 'exchange_rate' entry"),
        ("dateexchange_rate\n", "Empty delimeter"),
        ("date,exchange_rate\n2011-01-03;1\n", "No delimeter found"),
        ("date,exchange_rate\n2011-01-03,1\n2011-01-03,2\n", "The date duplicate => '2011-01-03'"),
        ("date,exchange_rate\n2011-01-03,\n", "The rate string is empty"),
        ("date,exchange_rate\n2011-01-03,0.3x\n", "Unrecognized symbol in the rate string => '0.3x'"),
        ("date,exchange_rate\n2011-01-03,1e5000\n", "The rate value is out of range => '1e5000'"),
        ("date,exchange_rate\n2011-01-03,nan\n", "must be a finite number"),
        ("date,exchange_rate\n2011-01-03,-1\n", "must be a non-negative number"),
        ("date,exchange_rate\n2011-02-30,1\n", "Bad date => '2011-02-30'"),
    ],
)
def test_from_csv_rejects(tmp_path, text, message):
    path = write_db(tmp_path, text)
    with pytest.raises(ExchangeError) as info:
        BitcoinExchange.from_csv(path)
    assert message in str(info.value)


def test_from_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        BitcoinExchange.from_csv(tmp_path / "absent.csv")


def test_rates_at_ends_of_range(database):
    exchanger = BitcoinExchange.from_csv(database)
    first = exchanger.rate_at("2009-01-02")
    last = exchanger.rate_at("2030-05-05")
    assert first == 0.0
    assert last == 7.1
    assert math.isfinite(last)