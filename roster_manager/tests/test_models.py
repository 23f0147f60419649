import pytest
from roster.models import Student, average
from roster.errors import DataValidationError

def test_student_creation():
    s = Student(1, "Ana", 20, [8, 9])
    assert s.id == 1
    assert s.name == "Ana"
    assert s.age == 20
    assert s.grades == [8, 9]

def test_average():
    assert average([]) == 0
    assert average(None) == 0
    assert average("8,9") == 0
    assert average([8, 6, 7]) == pytest.approx(7.0)

def test_student_average():
    assert Student(1, "Ana", 20, [8, 9]).average == pytest.approx(8.5)
    assert Student(2, "Без оценок", 20, []).average == 0

def test_student_dict_conversion():
    data = {"id": 4, "name": "Ana", "age": 20, "grades": [8, 7.5]}
    s = Student.from_dict(data)
    assert s.to_dict() == data

@pytest.mark.parametrize("data", [
    {"id": 1, "name": "Ana", "age": 20},
    {"id": "1", "name": "Ana", "age": 20, "grades": [8]},
    {"id": 1, "name": 5, "age": 20, "grades": [8]},
    {"id": 1, "name": "Ana", "age": True, "grades": [8]},
    {"id": 1, "name": "Ana", "age": 20, "grades": "8"},
    {"id": 1, "name": "Ana", "age": 20, "grades": ["8"]},
    ["not", "a", "dict"],
    {"id": 0, "name": "Ana", "age": 20, "grades": [8]},
    {"id": 1, "name": "   ", "age": 20, "grades": [8]},
    {"id": 1, "name": "Ana", "age": 0, "grades": [8]},
    {"id": 1, "name": "Ana", "age": 20, "grades": [11]},
    {"id": 1, "name": "Ana", "age": 20, "grades": [-1]},
    {"id": 1, "name": "Ana", "age": 20, "grades": [float("nan")]},
    {"id": 1, "name": "Ana", "age": 20, "grades": [float("inf")]},
])
def test_student_from_dict_rejects_malformed(data):
    with pytest.raises(DataValidationError):
        Student.from_dict(data)

def test_student_str_representation(capsys):
    s = Student(5, "Анна Котова", 21, [10, 9])
    print(s)
    captured = capsys.readouterr()
    assert captured.out == "Анна Котова (возраст: 21) - средний балл: 9.50\n"
