# roster/config.py
"""Настройки приложения: путь к файлу данных, пороги оценок, логирование."""
import os
import sys
import logging

# --- КОНФИГУРАЦИЯ ---

# Для EXE (PyInstaller) файл данных лежит рядом с исполняемым файлом,
# иначе - рядом с пакетом.
if getattr(sys, 'frozen', False):
    BASE_PATH = os.path.dirname(sys.executable)
else:
    BASE_PATH = os.path.dirname(os.path.abspath(__file__))

DATA_FILE = os.path.join(BASE_PATH, "students.json")
JSON_INDENT = 2

GRADE_MIN = 0
GRADE_MAX = 10

# Границы отчёта: >= PASS - аттестован, [RECOVERY, PASS) - пересдача, ниже - не аттестован
PASS_THRESHOLD = 7.0
RECOVERY_THRESHOLD = 5.0

LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
