import os

import pytest

from jkboot._impl.support.options import _opts


@pytest.fixture(autouse=True)
def _reset_options():
    """
    Restores the launcher options changed by a test.
    """
    saved = dict(vars(_opts))
    yield
    vars(_opts).clear()
    vars(_opts).update(saved)


@pytest.fixture
def jeka_home(tmp_path, monkeypatch):
    """
    Isolates a test from the user's JeKa setup: all JEKA/jeka environment variables
    are removed and the user directory and the cache point into `tmp_path`.
    """
    for name in list(os.environ):
        if name.upper().startswith('JEKA'):
            monkeypatch.delenv(name)
    user_dir = tmp_path / 'user-jeka'
    user_dir.mkdir()
    monkeypatch.setenv('JEKA_USER_HOME', str(user_dir))
    monkeypatch.setenv('JEKA_CACHE_DIR', str(tmp_path / 'cache'))
    return user_dir


def write(path, text=''):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path
