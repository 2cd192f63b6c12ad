import pytest
from fastapi.testclient import TestClient

from recordcanon.rules.rule_set import RuleSet


@pytest.fixture
def rules() -> RuleSet:
    """Rule set with every rule at its built-in default."""
    return RuleSet()


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, tmp_path) -> TestClient:
    monkeypatch.setenv("RULES_PATH", str(tmp_path / "missing-rules.yaml"))

    from recordcanon.core.settings import get_settings
    from recordcanon.rules.registry import get_rule_set

    get_settings.cache_clear()
    get_rule_set.cache_clear()

    from recordcanon.main import app

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    get_settings.cache_clear()
    get_rule_set.cache_clear()
