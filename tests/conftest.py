import re

import pytest

from seasoning.config import EngineSettings, SeasoningSettings, get_settings, set_settings


def remove_all_spaces(css: str) -> str:
    return re.sub(r"\s+", "", css)


def assert_css(css: str, expected: str) -> None:
    """Assert that two stylesheets are equal once all whitespace is removed."""
    assert remove_all_spaces(css) == remove_all_spaces(expected)


def verbatim_engine(filename: str = "style.css") -> EngineSettings:
    """Engine settings that keep the source layout (no minification)."""
    return EngineSettings(minify=False, filename=filename)


@pytest.fixture(autouse=True)
def reset_settings():
    """Give every test fresh default settings and restore the previous ones afterwards."""
    original_settings = get_settings()
    set_settings(SeasoningSettings())

    yield

    set_settings(original_settings)
