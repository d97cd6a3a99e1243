import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

DEFAULT_RULES_PATH = "rules.yaml"
RULES_PATH_ENV = "ARRAY_UTILS_RULES_PATH"


def resolve_rules_path(path: Path | str | None = None) -> Path:
    """
    Pick the rules file: explicit path, then $ARRAY_UTILS_RULES_PATH,
    then rules.yaml in the working directory.
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    return Path(DEFAULT_RULES_PATH)


def load_rules(path: Path | str | None = None) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    rules_path = resolve_rules_path(path)
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules file not found at: {rules_path}")

    with open(rules_path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Rules validation failed:\n{e}") from e
