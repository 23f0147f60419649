# roster/io_utils.py
"""Модуль для операций ввода/вывода: чтение и запись файла студентов в JSON."""
import json
import logging
import os
from typing import List

try:
    # Сначала относительный (для pytest)
    from . import config
    from .models import Student
    from .errors import FileProcessingError, DataValidationError
except (ImportError, ValueError):
    # Затем прямой (для EXE)
    import config
    from models import Student
    from errors import FileProcessingError, DataValidationError
# -------------------------

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    """NaN и Infinity не являются корректным JSON."""
    raise ValueError(f"Недопустимое значение {name}")


def read_students_from_json(filepath: str) -> List[Student]:
    """Читает список студентов из JSON-файла.

    Отсутствующий файл - это пустой список. Повреждённый файл приводит
    к FileProcessingError или DataValidationError, решение о том, как
    продолжать, принимает вызывающий код.
    """
    if not os.path.exists(filepath):
        logger.info(f"Файл {filepath} не найден, список студентов пуст")
        return []

    try:
        with open(filepath, mode='r', encoding='utf-8') as file:
            raw = json.load(file, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        # ValueError покрывает и JSONDecodeError, и UnicodeDecodeError
        logger.error(f"Файл {filepath} повреждён: {e}")
        raise FileProcessingError(f"Файл {filepath} не является корректным JSON: {e}")
    except OSError as e:
        logger.error(f"Не удалось прочитать {filepath}: {e}")
        raise FileProcessingError(f"Не удалось прочитать файл {filepath}: {e}")

    if not isinstance(raw, list):
        raise DataValidationError(f"В файле {filepath} ожидался список студентов.")

    students = []
    for index, item in enumerate(raw, start=1):
        try:
            students.append(Student.from_dict(item))
        except DataValidationError as e:
            logger.error(f"Запись №{index} в {filepath} некорректна: {e}")
            raise DataValidationError(f"Ошибка в записи №{index}: {e}")

    logger.info(f"Загружено {len(students)} студентов из {filepath}")
    return students


def write_students_to_json(filepath: str, students: List[Student]):
    """Полностью перезаписывает файл текущим списком студентов."""
    try:
        with open(filepath, mode='w', encoding='utf-8') as file:
            json.dump([s.to_dict() for s in students], file,
                      ensure_ascii=False, allow_nan=False, indent=config.JSON_INDENT)
    except (OSError, ValueError) as e:
        logger.error(f"Не удалось сохранить {filepath}: {e}")
        raise FileProcessingError(f"Ошибка записи в файл {filepath}: {e}")
    logger.info(f"Сохранено {len(students)} студентов в {filepath}")


def ensure_data_file(filepath: str):
    """Создаёт файл с пустым списком '[]', если его ещё нет."""
    if os.path.exists(filepath):
        return
    try:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filepath, mode='w', encoding='utf-8') as file:
            file.write('[]')
    except OSError as e:
        raise FileProcessingError(f"Не удалось создать файл {filepath}: {e}")
    logger.info(f"Создан пустой файл данных {filepath}")
