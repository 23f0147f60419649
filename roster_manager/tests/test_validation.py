import pytest
from roster.validation import is_valid_name, is_valid_age, is_valid_grade, split_grades, to_number

@pytest.mark.parametrize("name, expected", [
    ("Ana", True),
    ("  Ana  ", True),
    ("", False),
    ("   ", False),
    (None, False),
    (42, False),
])
def test_is_valid_name(name, expected):
    assert is_valid_name(name) is expected

@pytest.mark.parametrize("age, expected", [
    ("20", True),
    (" 20 ", True),
    ("20.0", True),
    (20, True),
    ("0", False),
    ("-3", False),
    ("20.5", False),
    ("abc", False),
    ("", False),
    ("inf", False),
    (True, False),
])
def test_is_valid_age(age, expected):
    assert is_valid_age(age) is expected

@pytest.mark.parametrize("grade, expected", [
    ("0", True),
    ("10", True),
    ("7.5", True),
    (8, True),
    ("10.1", False),
    ("-1", False),
    ("nan", False),
    ("oito", False),
])
def test_is_valid_grade(grade, expected):
    assert is_valid_grade(grade) is expected

def test_split_grades():
    assert split_grades("8, 7.5,,6 ") == ["8", "7.5", "6"]
    assert split_grades(" , ") == []

def test_to_number_keeps_integers_integral():
    assert to_number("8") == 8 and isinstance(to_number("8"), int)
    assert to_number("7.5") == 7.5
