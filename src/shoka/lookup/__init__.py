# ABOUTME: Metadata lookup dispatch: plan construction and sequential plan execution.
# ABOUTME: Exports the plan types, resolve_lookup_plan, and the LookupService executor.

from shoka.lookup.executor import LookupResult, LookupService, default_lookup_service
from shoka.lookup.plan import LookupAttempt, LookupPlan, LookupSource, resolve_lookup_plan

__all__ = [
    "LookupAttempt",
    "LookupPlan",
    "LookupResult",
    "LookupService",
    "LookupSource",
    "default_lookup_service",
    "resolve_lookup_plan",
]
