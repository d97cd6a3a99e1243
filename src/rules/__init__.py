"""
Rules - Load and validate rules.yaml configuration.
"""

from src.rules.loader import DEFAULT_RULES_PATH, RULES_PATH_ENV, load_rules, resolve_rules_path
from src.rules.models import ArrayUtilsRules, LogRules, ObservabilityRules, ProjectRules, Rules

__all__ = [
    "DEFAULT_RULES_PATH",
    "RULES_PATH_ENV",
    "load_rules",
    "resolve_rules_path",
    "ArrayUtilsRules",
    "LogRules",
    "ObservabilityRules",
    "ProjectRules",
    "Rules",
]
