from .registry import RuleSet

__all__ = ["RuleSet"]
