"""
Recommendation Selector

Main entry point for mentor recommendations. Filters the candidate pool,
scores and ranks it, and guarantees a non-empty result whenever any provider
was supplied.

Pipeline flow:
1. Empty input -> []
2. Eligibility filter (approved, not paused)
3. No eligible providers -> top rated from the full list (score 0)
4. Score and explain each eligible provider
5. Rank by score, then rating
6. Take `limit`, backfill empty reasons
"""

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from .contracts import User, Provider, MatchOptions, MatchResult
from .constants import REASON_TOP_RATED_FALLBACK, REASON_HIGHLY_RATED_FALLBACK
from .scorer import calculate_match_score, score_breakdown
from .explainer import get_match_reasons

logger = logging.getLogger(__name__)

UserInput = Union[User, Mapping[str, Any]]
ProviderInput = Union[Provider, Mapping[str, Any]]


def _to_user(user: Optional[UserInput]) -> User:
    if user is None:
        raise ValueError("user is required")
    if isinstance(user, User):
        return user
    return User.model_validate(user)


def _to_providers(providers: Optional[Iterable[ProviderInput]]) -> List[Provider]:
    return [
        p if isinstance(p, Provider) else Provider.model_validate(p)
        for p in providers or []
    ]


def _to_options(options: Union[MatchOptions, Mapping[str, Any], None]) -> MatchOptions:
    if options is None:
        return MatchOptions()
    if isinstance(options, MatchOptions):
        return options
    return MatchOptions.model_validate(options)


def _rating(provider: Provider) -> float:
    return provider.rating or 0.0


def eligible_providers(providers: Sequence[Provider]) -> List[Provider]:
    """Approved providers that are not paused (vacation mode)."""
    return [p for p in providers if p.is_approved and not p.is_paused]


def rank_results(results: List[MatchResult]) -> List[MatchResult]:
    """
    Sort by score descending, rating as tiebreaker.
    Stable, so remaining ties keep input order.
    """
    return sorted(
        results,
        key=lambda r: (r.score, _rating(r.provider)),
        reverse=True,
    )


def top_rated_fallback(providers: Sequence[Provider], limit: int) -> List[MatchResult]:
    """Rating-only ranking over every provider, used when nobody is eligible."""
    ranked = sorted(providers, key=_rating, reverse=True)
    return [
        MatchResult(provider=p, score=0, reasons=[REASON_TOP_RATED_FALLBACK])
        for p in ranked[:limit]
    ]


def get_recommended_mentors(
    user: Optional[UserInput],
    providers: Optional[Iterable[ProviderInput]],
    options: Union[MatchOptions, Mapping[str, Any], None] = None,
    *,
    limit: Optional[int] = None,
    context: Optional[str] = None,
    now: Optional[datetime] = None,
) -> List[MatchResult]:
    """
    Get recommended mentors for a user.

    Args:
        user: Applicant with guidanceState, clinicalProfile, targetPrograms
        providers: Candidate mentors (models or plain dicts)
        options: {limit, context}
        limit: Overrides options.limit
        context: Overrides options.context
        now: Reference time for slot proximity, defaults to current UTC time

    Returns:
        Ranked list of MatchResult, empty only when no providers were given
    """
    user = _to_user(user)
    opts = _to_options(options)
    if limit is not None or context is not None:
        overrides = {}
        if limit is not None:
            overrides["limit"] = limit
        if context is not None:
            overrides["context"] = context
        opts = MatchOptions.model_validate({**opts.model_dump(), **overrides})
    pool = _to_providers(providers)

    if not pool:
        return []

    eligible = eligible_providers(pool)

    if not eligible:
        logger.info(
            f"No approved, unpaused mentors among {len(pool)}; falling back to top rated"
        )
        return top_rated_fallback(pool, opts.limit)

    now = now or datetime.now(timezone.utc)
    scored = []
    for provider in eligible:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Score breakdown: {score_breakdown(user, provider, opts.context, now)}")
        scored.append(MatchResult(
            provider=provider,
            score=calculate_match_score(user, provider, opts.context, now),
            reasons=get_match_reasons(user, provider),
        ))

    results = rank_results(scored)[:opts.limit]

    # Every displayed card needs at least one reason
    for result in results:
        if not result.reasons:
            result.reasons = [REASON_HIGHLY_RATED_FALLBACK]

    logger.info(
        f"Ranked {len(eligible)} eligible of {len(pool)} mentors "
        f"(context={opts.context}), returning {len(results)}"
    )
    return results


def has_available_mentors(providers: Optional[Iterable[ProviderInput]]) -> bool:
    """
    True if any provider is approved. Paused providers still count here,
    unlike the eligibility filter used for ranking.
    """
    return any(p.is_approved for p in _to_providers(providers))
