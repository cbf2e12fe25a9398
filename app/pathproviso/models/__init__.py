"""Pydantic models for pathproviso configuration files."""

from pathproviso.models.rules import PathRule, RulesFile

__all__ = ["PathRule", "RulesFile"]
