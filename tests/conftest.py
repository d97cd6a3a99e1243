from pathlib import Path

import pytest

from src.adapters.array_rules import ArrayUtilsRulesAdapter
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The real rules.yaml at the project root."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    return load_rules(rules_path)


@pytest.fixture
def rules_port(rules: Rules) -> ArrayUtilsRulesAdapter:
    return ArrayUtilsRulesAdapter(rules)
