import pytest

# Deep equality and deep copy run in two modes:
# 1) "safe": visited-set / memo bookkeeping that tolerates cyclic containers
# 2) "naive": plain recursion (FNKIT_CYCLE_SAFE=0), acyclic input only
# Tests that must hold in both modes request the `cycle_mode` fixture. Everything
# else runs with a clean environment so a developer's FNKIT_* settings don't leak in.


@pytest.fixture(autouse=True)
def _clean_fnkit_env(monkeypatch):
    monkeypatch.delenv("FNKIT_CYCLE_SAFE", raising=False)
    monkeypatch.delenv("FNKIT_LOG_LEVEL", raising=False)


@pytest.fixture(params=["safe", "naive"])
def cycle_mode(request, monkeypatch):
    monkeypatch.setenv("FNKIT_CYCLE_SAFE", "1" if request.param == "safe" else "0")
    return request.param


@pytest.fixture
def naive_mode(monkeypatch):
    monkeypatch.setenv("FNKIT_CYCLE_SAFE", "0")
