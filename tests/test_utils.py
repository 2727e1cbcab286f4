import pytest

from phaseportrait.utils import bounded_size, parse_complex


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.3+0.5j", 0.3 + 0.5j),
        ("-0.4-0.6j", -0.4 - 0.6j),
        (" 1 - 2i ", 1 - 2j),
        ("2j", 2j),
        ("1.5", 1.5 + 0j),
    ],
)
def test_parse_complex(text, expected):
    assert parse_complex(text) == expected


def test_parse_complex_rejects_garbage():
    with pytest.raises(ValueError):
        parse_complex("")
    with pytest.raises(ValueError):
        parse_complex("one")


def test_bounded_size():
    assert bounded_size(500, 8192) == 500
    assert bounded_size(10000, 8192) == 8192
    assert bounded_size(1, 8192) == 1


@pytest.mark.parametrize("n", [0, -5])
def test_bounded_size_rejects_empty(n):
    with pytest.raises(ValueError):
        bounded_size(n, 8192)
