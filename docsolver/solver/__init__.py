"""
Solver Module - request construction and the provider-backed client.
"""

from .client import SolverClient, ProviderSolverClient
from .prompts import BRIEF_INSTRUCTION, DETAILED_INSTRUCTION
from .request_builder import (
    build_profiles,
    build_solver_request,
    select_profile_kind,
)

__all__ = [
    "SolverClient",
    "ProviderSolverClient",
    "BRIEF_INSTRUCTION",
    "DETAILED_INSTRUCTION",
    "build_profiles",
    "build_solver_request",
    "select_profile_kind",
]
