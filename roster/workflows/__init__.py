"""Data-access workflows driven by the presentation layer."""

from roster.workflows.members import MembersWorkflow
from roster.workflows.settings import SettingsWorkflow
from roster.workflows.special_days import SpecialDaysWorkflow

__all__ = [
    "MembersWorkflow",
    "SettingsWorkflow",
    "SpecialDaysWorkflow",
]
