"""
Solver request builder.

File attachments get the Detailed profile; plain chat text gets Brief.
Empty plain text produces no request at all.
"""

from typing import Dict, Optional

from config.settings import Settings

from ..models import (
    RequestOrigin,
    SolverProfile,
    SolverProfileKind,
    SolverRequest,
)
from .prompts import BRIEF_INSTRUCTION, DETAILED_INSTRUCTION

ProfileMap = Dict[SolverProfileKind, SolverProfile]


def build_profiles(settings: Settings) -> ProfileMap:
    """Both solver profiles as configured"""
    return {
        SolverProfileKind.BRIEF: SolverProfile(
            kind=SolverProfileKind.BRIEF,
            model=settings.brief_model,
            system_instruction=settings.brief_instruction or BRIEF_INSTRUCTION,
            max_tokens=settings.solver_max_tokens,
            temperature=settings.solver_temperature,
        ),
        SolverProfileKind.DETAILED: SolverProfile(
            kind=SolverProfileKind.DETAILED,
            model=settings.detailed_model,
            system_instruction=settings.detailed_instruction or DETAILED_INSTRUCTION,
            max_tokens=settings.solver_max_tokens,
            temperature=settings.solver_temperature,
        ),
    }


def select_profile_kind(origin: RequestOrigin) -> SolverProfileKind:
    if origin == RequestOrigin.FILE_ATTACHMENT:
        return SolverProfileKind.DETAILED
    return SolverProfileKind.BRIEF


def build_solver_request(
    content: Optional[str],
    origin: RequestOrigin,
    profiles: ProfileMap,
) -> Optional[SolverRequest]:
    """
    Compose the request for the solver.

    Returns None for empty plain text (caller prompts the user instead).

    Raises:
        ValueError: Empty content for a file attachment; extraction is
            expected to have rejected it already.
    """
    text = (content or "").strip()
    if not text:
        if origin == RequestOrigin.PLAIN_TEXT:
            return None
        raise ValueError("Attachment request built with empty content")

    profile = profiles[select_profile_kind(origin)]
    return SolverRequest(
        system_instruction=profile.system_instruction,
        user_content=text,
        profile=profile,
    )
