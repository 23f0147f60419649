# roster/models.py
"""Модуль, определяющий модель данных Student и расчёт среднего балла."""
from typing import Any, Dict, List, Union

try:
    from .errors import DataValidationError
    from .validation import is_valid_name, is_valid_age, is_valid_grade
except (ImportError, ValueError):
    from errors import DataValidationError
    from validation import is_valid_name, is_valid_age, is_valid_grade
# -------------------------

Number = Union[int, float]


def average(grades) -> float:
    """Среднее арифметическое оценок. Возвращает 0 для пустого списка или не-списка."""
    if not isinstance(grades, (list, tuple)) or not grades:
        return 0
    return sum(float(g) for g in grades) / len(grades)


class Student:
    """Представляет студента с его ID, именем, возрастом и оценками.

    Конструктор ничего не проверяет: данные проверяются в диалогах ввода
    (см. validation) или в from_dict при чтении файла.
    """
    def __init__(self, student_id: int, name: str, age: int, grades: List[Number]):
        self.id = student_id
        self.name = name
        self.age = age
        self.grades = list(grades)

    @property
    def average(self) -> float:
        """Средний балл студента."""
        return average(self.grades)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "age": self.age, "grades": list(self.grades)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Student":
        """Создаёт студента из объекта JSON.

        Проверяются наличие и типы полей, а также те же правила, что и при
        вводе: ID и возраст больше нуля, непустое имя, оценки в [0, 10].
        """
        if not isinstance(data, dict):
            raise DataValidationError(f"Запись должна быть объектом, получено: {data!r}")

        missing = [key for key in ("id", "name", "age", "grades") if key not in data]
        if missing:
            raise DataValidationError(f"В записи {data!r} нет полей: {', '.join(missing)}")

        student_id, name, age, grades = data["id"], data["name"], data["age"], data["grades"]
        # bool - подкласс int, его отсекаем отдельно
        if not isinstance(student_id, int) or isinstance(student_id, bool):
            raise DataValidationError(f"ID '{student_id}' должен быть целым числом.")
        if student_id <= 0:
            raise DataValidationError(f"ID {student_id} должен быть положительным.")
        if not is_valid_name(name):
            raise DataValidationError(f"Имя {name!r} должно быть непустой строкой.")
        if not isinstance(age, int) or isinstance(age, bool):
            raise DataValidationError(f"Возраст '{age}' должен быть целым числом.")
        if not is_valid_age(age):
            raise DataValidationError(f"Возраст {age} должен быть больше нуля.")
        if not isinstance(grades, list):
            raise DataValidationError(f"Оценки студента {student_id} должны быть списком.")
        for grade in grades:
            if not isinstance(grade, (int, float)) or isinstance(grade, bool):
                raise DataValidationError(f"Оценка '{grade}' должна быть числом.")
            if not is_valid_grade(grade):
                raise DataValidationError(f"Оценка {grade} вне диапазона 0-10.")

        return cls(student_id, name, age, grades)

    def __repr__(self) -> str:
        return f"Student(id={self.id}, name='{self.name}', age={self.age}, average={self.average:.2f})"

    def __str__(self) -> str:
        """Строка для списка студентов: имя, возраст и средний балл."""
        return f"{self.name} (возраст: {self.age}) - средний балл: {self.average:.2f}"
