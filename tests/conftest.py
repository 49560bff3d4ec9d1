"""Pytest fixtures for what-the-path tests."""

import pytest
from pathlib import Path

from what_the_path.shell import logging


@pytest.fixture
def clean_logger():
    """Фикстура для сброса handlers и уровня логгера пакета между тестами.

    Сохраняет текущие handlers и уровень логгера what_the_path,
    очищает их перед тестом, закрывает добавленные тестом handlers
    и восстанавливает исходное состояние после теста.
    """
    logger = logging.get_logger()
    original_handlers = list(logger.handlers)
    original_level = logger.level

    # Сброс перед тестом
    logger.handlers.clear()

    yield logger

    # Восстановление после теста
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = original_handlers
    logger.setLevel(original_level)


@pytest.fixture
def fake_home(tmp_path) -> Path:
    """Фикстура для создания временной домашней директории.

    Возвращает Path к пустой директории внутри tmp_path.
    """
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def fake_env(fake_home) -> dict:
    """Фикстура с окружением, указывающим на временную домашнюю директорию.

    Содержит HOME, SHELL и PATH; тесты могут менять словарь напрямую.
    """
    return {
        "HOME": str(fake_home),
        "SHELL": "/bin/bash",
        "PATH": "/usr/bin:/bin",
    }


@pytest.fixture
def temp_config_file(tmp_path):
    """Фикстура для создания временного файла конфигурации.

    Создаёт YAML файл what_the_path.yaml в директории tmp_path
    и возвращает Path к файлу.
    """
    config_file = tmp_path / "what_the_path.yaml"

    config_content = """shell: zsh
paths:
  - /opt/tool/bin
  - ~/.local/bin
fish_fragment: tool.fish
"""

    config_file.write_text(config_content, encoding="utf-8")

    return config_file
