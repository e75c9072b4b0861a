"""
Пакет spancheck
===============

Fluent-проверки для разметки текста (spans) в модульных тестах.

Этот пакет предоставляет:
    - Модель размеченного текста: SpannedText, StyleSpan, UnderlineSpan,
      ForegroundColorSpan, BackgroundColorSpan
    - Константы стилей (TypefaceStyle) и флагов (SpanFlags)
    - SpannedSubject: проверки наличия/отсутствия spans по диапазону, типу и флагам
    - Цепочки проверок флагов и цвета (with_flags / and_flags / with_color)
    - Expect: накопление ошибок вместо немедленного падения
    - Плагин pytest с фикстурой expect_spans

Пример базового использования:
    >>> from spancheck import SpannedText, StyleSpan, TypefaceStyle, SpanFlags
    >>> from spancheck.testing import assert_that
    >>>
    >>> text = SpannedText("hello world")
    >>> text.set_span(StyleSpan(TypefaceStyle.BOLD), 0, 5, SpanFlags.SPAN_EXCLUSIVE_EXCLUSIVE)
    >>> assert_that(text).has_bold_span(0, 5, SpanFlags.SPAN_EXCLUSIVE_EXCLUSIVE)

Управление логированием:
    >>> import os
    >>> os.environ['SPANCHECK_LOG_LEVEL'] = 'DEBUG'
    >>> os.environ['SPANCHECK_LOG_FILE'] = 'logs/spancheck.log'

Автор: spancheck Development Team
Версия: 0.1.0
Лицензия: MIT
Python: 3.10+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "spancheck Development Team"
__description__ = "Fluent assertions for text styling spans in unit tests"
__license__ = "MIT"
__python_requires__ = ">=3.10"

# Компоненты семантической версии
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 10):
    raise RuntimeError(
        f"spancheck требует Python 3.10 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

LOGGER_NAME = "spancheck"
LOG_LEVEL_ENV = "SPANCHECK_LOG_LEVEL"
LOG_FILE_ENV = "SPANCHECK_LOG_FILE"

_LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"


def _setup_logging(
    level_name: Optional[str] = None, log_file: Optional[str] = None
) -> None:
    """
    Инициализировать логирование пакета на логгере 'spancheck'.

    - Консольный обработчик (stderr) для WARNING и выше
    - Ротирующий файловый обработчик, если задан путь к файлу
      (аргумент или переменная окружения SPANCHECK_LOG_FILE)

    Уровень берётся из аргумента или переменной окружения
    SPANCHECK_LOG_LEVEL (по умолчанию WARNING).

    Функция идемпотентна: если у логгера уже есть обработчики,
    повторный вызов ничего не делает. Логгер продолжает передавать
    записи родителю, чтобы caplog в pytest их видел.
    """
    root_logger = logging.getLogger(LOGGER_NAME)
    if root_logger.handlers:
        return

    level_str = (level_name or os.environ.get(LOG_LEVEL_ENV, "WARNING")).upper()
    log_level = _LOG_LEVEL_MAP.get(level_str, logging.WARNING)
    root_logger.setLevel(log_level)

    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_path = log_file or os.environ.get(LOG_FILE_ENV)
    if log_path:
        try:
            path = Path(log_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=path,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Не удалось инициализировать файловое логирование (%s): %s. "
                "Используется только консоль.",
                log_path,
                e,
            )


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён 'spancheck'.

    Аргументы:
        module_name: Имя модуля, обычно `__name__`.

    Возвращает:
        logging.Logger с именем 'spancheck.<module_name>' (или самим
        module_name, если оно уже в пространстве имён пакета).

    Пример:
        >>> logger = get_logger("my_tests")
        >>> logger.name
        'spancheck.my_tests'
    """
    if module_name == LOGGER_NAME or module_name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAME}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{LOGGER_NAME}.{clean_name}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

DEFAULT_CONFIG_FILENAME = "spancheck.json"

_DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "WARNING",
    "log_file": None,
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из JSON-файла или вернуть настройки по умолчанию.

    Ключи конфигурации:
        - log_level: str - Уровень логирования
        - log_file: str | None - Путь к файлу журнала

    Аргументы:
        config_path: Путь к файлу. Если None, ищется 'spancheck.json'
                     в текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию, поверх которых наложены
        значения из файла. Ошибки чтения или разбора не пробрасываются:
        записывается предупреждение и используются значения по умолчанию.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILENAME)

    config = _DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.debug("Файл конфигурации %s не найден, используются значения по умолчанию", config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"Файл конфигурации должен содержать JSON-объект, "
                f"получен {type(user_config).__name__}"
            )

        config.update(user_config)
        logger.info("Конфигурация загружена из %s", config_path)
    except json.JSONDecodeError as e:
        logger.warning(
            "Не удалось разобрать %s: недопустимый JSON в строке %s, столбце %s. "
            "Используется конфигурация по умолчанию.",
            config_path,
            e.lineno,
            e.colno,
        )
    except OSError as e:
        logger.warning(
            "Не удалось прочитать %s: %s. Используется конфигурация по умолчанию.",
            config_path,
            e,
        )
    except ValueError as e:
        logger.warning(
            "Недопустимый формат конфигурации: %s. Используется конфигурация по умолчанию.", e
        )

    return config


# =============================================================================
# ИМПОРТЫ СЛОЯ МОДЕЛИ
# =============================================================================

# Логирование настраивается до импорта подмодулей.
_config = load_config()
_setup_logging(_config.get("log_level"), _config.get("log_file"))

from .model.enums import (  # noqa: E402
    DEFAULT_SPAN_FLAGS,
    SpanFlags,
    SpanKind,
    TypefaceStyle,
    format_color,
)
from .model.spanned import SpanEntry, SpannedText  # noqa: E402
from .model.spans import (  # noqa: E402
    BackgroundColorSpan,
    ForegroundColorSpan,
    Span,
    StyleSpan,
    UnderlineSpan,
)

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    # Модель
    "SpannedText",
    "SpanEntry",
    "Span",
    "StyleSpan",
    "UnderlineSpan",
    "ForegroundColorSpan",
    "BackgroundColorSpan",
    # Перечисления
    "TypefaceStyle",
    "SpanFlags",
    "SpanKind",
    "DEFAULT_SPAN_FLAGS",
    "format_color",
]

_logger = get_logger(__name__)
_logger.debug("spancheck v%s инициализирован", __version__)
