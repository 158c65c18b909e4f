"""Shared pytest fixtures for platform and game tests."""
import os

# Headless pygame for every test
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from playfield import logging as pf_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Silence logging for a test, restore configuration after."""
    saved_default = pf_logging._config['default_level']
    saved_modules = dict(pf_logging._config['module_levels'])
    pf_logging.disable_logging()
    yield
    pf_logging._config['default_level'] = saved_default
    pf_logging._config['module_levels'].clear()
    pf_logging._config['module_levels'].update(saved_modules)
