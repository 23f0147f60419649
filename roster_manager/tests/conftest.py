# tests/conftest.py
import pytest
from typing import List
from roster.models import Student
from roster.processing import Roster

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов (средние 9.0, 6.0, 3.0)."""
    return [
        Student(1, "Ana", 20, [9, 9]),
        Student(2, "Bruno", 22, [6, 6]),
        Student(3, "Juliana", 19, [3, 3]),
    ]

@pytest.fixture
def data_file(tmp_path):
    """Путь к файлу данных во временной папке (файл ещё не создан)."""
    return str(tmp_path / "students.json")

@pytest.fixture
def roster(sample_students, data_file) -> Roster:
    return Roster(data_file, sample_students)
