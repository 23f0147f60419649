# roster/validation.py
"""Проверка пользовательского ввода: имя, возраст, оценки."""
import math
from typing import List, Union

try:
    from . import config
except (ImportError, ValueError):
    import config
# -------------------------


def _as_float(value) -> float:
    # bool формально число, но как возраст или оценка не принимается
    if isinstance(value, bool):
        raise ValueError(f"Недопустимое значение: {value!r}")
    if isinstance(value, str):
        value = value.strip()
    return float(value)


def is_valid_name(name) -> bool:
    """Имя - строка, непустая после обрезки пробелов."""
    return isinstance(name, str) and len(name.strip()) > 0


def is_valid_age(age) -> bool:
    """Возраст приводится к целому числу больше нуля ("20", 20, "20.0")."""
    try:
        number = _as_float(age)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and number.is_integer() and number > 0


def is_valid_grade(grade) -> bool:
    """Оценка - число (не NaN) в диапазоне [GRADE_MIN, GRADE_MAX] включительно."""
    try:
        number = _as_float(grade)
    except (TypeError, ValueError):
        return False
    if math.isnan(number):
        return False
    return config.GRADE_MIN <= number <= config.GRADE_MAX


def split_grades(raw: str) -> List[str]:
    """Разбивает строку вида "8, 7.5,,6" на ['8', '7.5', '6']."""
    return [part.strip() for part in raw.split(',') if part.strip()]


def to_number(value) -> Union[int, float]:
    """Приводит проверенное значение к int, если оно целое, иначе к float."""
    number = _as_float(value)
    return int(number) if number.is_integer() else number
