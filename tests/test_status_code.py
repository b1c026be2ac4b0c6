import pytest

from oasgen.status_code import StatusCode


@pytest.mark.parametrize("text", ["200", "404", "999", "100"])
def test_parse_numeric_string(text):
    assert StatusCode.parse(text) == StatusCode(int(text))


def test_parse_integer():
    assert StatusCode.parse(201) == StatusCode(201)


@pytest.mark.parametrize("text", ["2XX", "2xx", "5Xx"])
def test_parse_range(text):
    code = StatusCode.parse(text)
    assert code.is_range
    assert code.value == int(text[0])


def test_range_display():
    assert str(StatusCode(4, is_range=True)) == "4XX"


def test_code_display():
    assert str(StatusCode(404)) == "404"


@pytest.mark.parametrize("text", ["200", "3XX", "0XX", "999"])
def test_display_round_trip(text):
    assert str(StatusCode.parse(text)) == text


@pytest.mark.parametrize(
    "value", ["99", "1000", "099", "abc", "XX1", "2XY", "-12", 99, 1000, -5, "é1"]
)
def test_invalid_values(value):
    with pytest.raises(ValueError):
        StatusCode.parse(value)


@pytest.mark.parametrize("value", [None, 2.5, True, [200]])
def test_invalid_types(value):
    with pytest.raises(TypeError):
        StatusCode.parse(value)


def test_codes_sort_before_ranges():
    codes = [StatusCode(5, is_range=True), StatusCode(404), StatusCode(2, is_range=True), StatusCode(200)]
    assert sorted(codes) == [
        StatusCode(200),
        StatusCode(404),
        StatusCode(2, is_range=True),
        StatusCode(5, is_range=True),
    ]


def test_usable_as_dict_key():
    table = {StatusCode.parse("200"): "ok"}
    assert table[StatusCode(200)] == "ok"
    assert StatusCode(2, is_range=True) not in table


def test_parse_passes_status_code_through():
    code = StatusCode(3, is_range=True)
    assert StatusCode.parse(code) is code