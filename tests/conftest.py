import pytest


# ------------------------------------------------------------
# Keep the real environment from leaking into settings
# ------------------------------------------------------------
@pytest.fixture(autouse=True)
def clean_locate_env(monkeypatch):
    """
    PATHEXT and the ProgramFiles variables change which files match, and may be set
    on the machine running the tests. Remove them so every test starts from the
    defaults. PATH is left alone because tests that need it pass their own.
    """
    for name in ("PATHEXT", "ProgramFiles", "ProgramFiles(x86)", "EXELOCATE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
