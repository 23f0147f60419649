# roster/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class RosterAppError(Exception):
    """Базовый класс для всех исключений журнала студентов."""
    pass

class DataValidationError(RosterAppError):
    """Запись в файле данных или набор изменений не проходит проверку полей."""
    pass

class FileProcessingError(RosterAppError):
    """Файл данных не удалось прочитать, разобрать как JSON или записать."""
    pass

class StudentNotFoundError(RosterAppError):
    """Для операции нужен студент с заданным ID, а его нет в журнале."""
    pass
