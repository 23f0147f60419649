# roster/processing.py
"""Модуль для обработки данных: управление списком студентов и статистика."""
import logging
from typing import Any, Dict, Iterator, List, Optional

try:
    # 1. Относительный импорт (для pytest)
    from . import config, io_utils
    from .models import Student, average  # noqa: F401 (average - часть API модуля)
    from .validation import to_number
    from .errors import DataValidationError, StudentNotFoundError
except (ImportError, ValueError):
    # 2. Прямой импорт (для EXE)
    import config
    import io_utils
    from models import Student, average  # noqa: F401
    from validation import to_number
    from errors import DataValidationError, StudentNotFoundError
# --------------------------------------------------

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "age", "grades")


class Roster:
    """Список студентов в памяти вместе с путём к файлу, куда он сохраняется.

    Передаётся явно во все операции. После каждого изменения список
    целиком перезаписывается в файл.
    """
    def __init__(self, data_file: str, students: Optional[List[Student]] = None):
        self.data_file = data_file
        self.students: List[Student] = list(students) if students else []

    def __len__(self) -> int:
        return len(self.students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.students)

    def save(self):
        """Сохраняет весь список. При ошибке данные в памяти не откатываются."""
        io_utils.write_students_to_json(self.data_file, self.students)


def next_id(roster: Roster) -> int:
    """Следующий ID: максимальный существующий + 1, или 1 для пустого списка.

    Используется максимум, а не ID последней записи, чтобы новый ID не
    совпал ни с одним из ID, которые есть в журнале сейчас. ID удалённого
    студента с наибольшим номером может быть выдан снова.
    """
    return max((s.id for s in roster), default=0) + 1


def add_student(roster: Roster, name: str, age, grades) -> Student:
    """Добавляет студента в конец списка и сохраняет файл. Данные должны быть уже проверены."""
    student = Student(next_id(roster), name.strip(), int(to_number(age)), [to_number(g) for g in grades])
    roster.students.append(student)
    logger.info(f"Добавлен студент {student.id} ({student.name})")
    roster.save()
    return student


def class_average(roster: Roster) -> float:
    """Среднее из средних баллов всех студентов; 0 для пустого списка."""
    if not len(roster):
        return 0
    averages = [s.average for s in roster]
    return sum(averages) / len(averages)


def top_student(roster: Roster) -> Optional[Student]:
    """Студент с наибольшим средним баллом. При равенстве побеждает первый."""
    best = None
    for student in roster:
        if best is None or student.average > best.average:
            best = student
    return best


def find_by_name(roster: Roster, query: str) -> List[Student]:
    """Поиск по части имени без учёта регистра, порядок списка сохраняется."""
    q = query.strip().lower()
    return [s for s in roster if q in s.name.lower()]


def find_by_id(roster: Roster, student_id: int) -> Optional[Student]:
    return next((s for s in roster if s.id == student_id), None)


def require_student(roster: Roster, student_id: int) -> Student:
    """Как find_by_id, но бросает StudentNotFoundError, если студента нет."""
    student = find_by_id(roster, student_id)
    if student is None:
        raise StudentNotFoundError(f"Студент с ID {student_id} не найден.")
    return student


def approved_students(roster: Roster) -> List[Student]:
    return [s for s in roster if s.average >= config.PASS_THRESHOLD]


def recovery_students(roster: Roster) -> List[Student]:
    return [s for s in roster if config.RECOVERY_THRESHOLD <= s.average < config.PASS_THRESHOLD]


def failed_students(roster: Roster) -> List[Student]:
    return [s for s in roster if s.average < config.RECOVERY_THRESHOLD]


def edit_student(roster: Roster, student_id: int, patch: Dict[str, Any]) -> bool:
    """Частично обновляет студента: меняются только переданные поля.

    Возвращает False (и ничего не сохраняет), если ID не найден.
    """
    unknown = [key for key in patch if key not in EDITABLE_FIELDS]
    if unknown:
        raise DataValidationError(f"Нельзя изменить поля: {', '.join(unknown)}")

    student = find_by_id(roster, student_id)
    if student is None:
        return False

    for key, value in patch.items():
        setattr(student, key, list(value) if key == "grades" else value)
    logger.info(f"Студент {student_id} обновлён: {sorted(patch)}")
    roster.save()
    return True


def remove_student(roster: Roster, student_id: int) -> bool:
    """Удаляет студента по ID. Файл сохраняется, только если что-то удалено."""
    before = len(roster)
    roster.students = [s for s in roster if s.id != student_id]
    if len(roster) == before:
        return False
    logger.info(f"Студент {student_id} удалён")
    roster.save()
    return True
