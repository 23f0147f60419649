# roster/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для журнала студентов."""
import sys
import os
import logging
import traceback
from typing import List, Optional

base_path = os.path.dirname(os.path.abspath(__file__))
if base_path not in sys.path:
    sys.path.append(base_path)

try:
    # 1. Попытка относительного импорта (Для pytest и запуска через python -m roster.main)
    from . import config, io_utils, processing, validation, errors
    from .models import Student
    from .processing import Roster
except (ImportError, ValueError):
    # 2. Попытка прямого импорта (Для EXE и запуска через python roster/main.py)
    import config
    import io_utils
    import processing
    import validation
    import errors
    from models import Student
    from processing import Roster
# -------------------------

logger = logging.getLogger(__name__)


def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*30)
    print("      ЖУРНАЛ СТУДЕНТОВ")
    print("="*30)
    print("1. Зарегистрировать студента")
    print("2. Показать всех студентов")
    print("3. Найти по имени")
    print("4. Средний балл группы")
    print("5. Лучший студент")
    print("6. Отчёт (аттестованы/пересдача/не аттестованы)")
    print("7. Редактировать студента")
    print("8. Удалить студента")
    print("9. Сохранить файл принудительно")
    print("0. Выход")
    print("="*30)


def print_student_detail(student: Student):
    print("\n--- Карточка студента ---")
    print(f"ID: {student.id}")
    print(f"Имя: {student.name}")
    print(f"Возраст: {student.age}")
    print(f"Оценки: {', '.join(map(str, student.grades))}")
    print(f"Средний балл: {student.average:.2f}")


def print_report(title: str, students: List[Student]):
    """Печатает одну группу отчёта с количеством студентов."""
    print(f"\n{title} ({len(students)}):")
    if not students:
        print("  - нет")
    for i, s in enumerate(students, start=1):
        print(f"  {i}. {s.name} - средний балл: {s.average:.2f}")


def parse_id(raw: str) -> Optional[int]:
    """Переводит введённый ID в число; None, если это не целое число."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


def load_roster(data_file: str) -> Roster:
    """Загружает список из файла. При повреждённом файле сообщает об ошибке и начинает с пустого."""
    try:
        students = io_utils.read_students_from_json(data_file)
    except errors.RosterAppError as e:
        print(f"❌ Не удалось загрузить файл: {e}")
        students = []
    return Roster(data_file, students)


# --- Диалоги ввода ---

def handle_add(roster: Roster):
    """Регистрация: имя, возраст, оценки. Первая же ошибка отменяет весь ввод."""
    name = input("Имя: ")
    if not validation.is_valid_name(name):
        print("❌ Некорректное имя. Регистрация отменена.")
        return

    age = input("Возраст: ")
    if not validation.is_valid_age(age):
        print(f"❌ Некорректный возраст ({age.strip()}). Регистрация отменена.")
        return

    grades = validation.split_grades(input("Оценки через запятую (напр. 8,7.5,6): "))
    if not grades:
        print("❌ Не указано ни одной оценки. Регистрация отменена.")
        return
    for grade in grades:
        if not validation.is_valid_grade(grade):
            print(f"❌ Некорректная оценка ({grade}). Регистрация отменена.")
            return

    student = processing.add_student(roster, name, age, grades)
    print("\n✅ Студент успешно зарегистрирован:")
    print_student_detail(student)


def handle_list(roster: Roster):
    if not len(roster):
        print("\nℹ️ Список студентов пуст.")
        return
    print("\n--- Список студентов ---")
    for i, s in enumerate(roster, start=1):
        print(f"{i}. {s}")


def handle_search(roster: Roster):
    query = input("Имя (поиск по части): ")
    if not validation.is_valid_name(query):
        print("❌ Пустой запрос.")
        return
    found = processing.find_by_name(roster, query)
    if not found:
        print("\nℹ️ Студенты не найдены.")
        return
    for i, s in enumerate(found, start=1):
        print(f"{i}. {s.name} - средний балл: {s.average:.2f} (ID: {s.id})")


def handle_top(roster: Roster):
    top = processing.top_student(roster)
    if top is None:
        print("\nℹ️ Список студентов пуст.")
    else:
        print_student_detail(top)


def handle_report(roster: Roster):
    print_report(f"Аттестованы (>= {config.PASS_THRESHOLD})", processing.approved_students(roster))
    print_report(f"Пересдача ({config.RECOVERY_THRESHOLD} - {config.PASS_THRESHOLD})",
                 processing.recovery_students(roster))
    print_report(f"Не аттестованы (< {config.RECOVERY_THRESHOLD})", processing.failed_students(roster))


def handle_edit(roster: Roster):
    """Редактирование по ID. Пустой ввод оставляет текущее значение поля."""
    student_id = parse_id(input("ID студента для редактирования: "))
    try:
        student = processing.require_student(roster, student_id)
    except errors.StudentNotFoundError:
        print("❌ ID не найден.")
        return

    print("Оставьте поле пустым, чтобы сохранить текущее значение.")
    patch = {}

    name = input(f"Имя [{student.name}]: ")
    if name.strip():
        if not validation.is_valid_name(name):
            print("❌ Некорректное имя. Редактирование отменено.")
            return
        patch["name"] = name.strip()

    age = input(f"Возраст [{student.age}]: ")
    if age.strip():
        if not validation.is_valid_age(age):
            print(f"❌ Некорректный возраст ({age.strip()}). Редактирование отменено.")
            return
        patch["age"] = int(validation.to_number(age))

    grades_raw = input(f"Оценки через запятую [{','.join(map(str, student.grades))}]: ")
    if grades_raw.strip():
        grades = validation.split_grades(grades_raw)
        if not grades:
            print("❌ Не указано ни одной оценки. Редактирование отменено.")
            return
        for grade in grades:
            if not validation.is_valid_grade(grade):
                print(f"❌ Некорректная оценка ({grade}). Редактирование отменено.")
                return
        patch["grades"] = [validation.to_number(g) for g in grades]

    if processing.edit_student(roster, student.id, patch):
        print("\n✅ Данные студента обновлены.")
    else:
        print("\n❌ Не удалось обновить студента.")


def handle_remove(roster: Roster):
    student_id = parse_id(input("ID студента для удаления: "))
    if student_id is not None and processing.remove_student(roster, student_id):
        print("✅ Студент удалён.")
    else:
        print("❌ ID не найден.")


def handle_save(roster: Roster):
    roster.save()
    print(f"\n✅ Файл сохранён: {roster.data_file}")


ACTIONS = {
    '1': handle_add,
    '2': handle_list,
    '3': handle_search,
    '4': lambda roster: print(f"\nСредний балл группы: {processing.class_average(roster):.2f}"),
    '5': handle_top,
    '6': handle_report,
    '7': handle_edit,
    '8': handle_remove,
    '9': handle_save,
}


def main_cli(roster: Roster):
    """Основной цикл консольного приложения."""
    while True:
        print_menu()
        choice = input("Выберите пункт меню: ").strip()

        if choice == '0':
            print("👋 До свидания!")
            break

        action = ACTIONS.get(choice)
        if action is None:
            print("❌ Неверный выбор. Пожалуйста, введите число от 0 до 9.")
            continue

        try:
            action(roster)
        except errors.FileProcessingError as e:
            print(f"❌ Ошибка файла: {e}")
        except errors.RosterAppError as e:
            print(f"❌ Ошибка логики: {e}")
        except EOFError:
            raise
        except Exception as e:
            logger.exception("Ошибка при выполнении пункта меню %s", choice)
            print(f"❌ Произошла непредвиденная ошибка: {e}")


def run():
    """Точка входа: логирование, загрузка файла, меню."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    try:
        roster = load_roster(config.DATA_FILE)
        try:
            io_utils.ensure_data_file(config.DATA_FILE)
        except errors.FileProcessingError as e:
            print(f"❌ {e}")
        main_cli(roster)
    except (KeyboardInterrupt, EOFError):
        print("\nПрограмма остановлена.")
    except Exception:
        print("\n!!! ОШИБКА ИНТЕРФЕЙСА !!!")
        traceback.print_exc()


if __name__ == '__main__':
    run()
