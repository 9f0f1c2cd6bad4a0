# dependencies.py
from __future__ import annotations

from typing import List, Mapping, Optional

from .errors import AmbiguousPredecessor
from .model import Deployment, Environment
from .stages import parse_environment


_PREVIOUS = {
    Environment.DEV: None,
    Environment.PREPROD: Environment.DEV,
    Environment.PROD: Environment.PREPROD,
}


def previous_environment(env: str | Environment) -> Optional[Environment]:
    """The environment a job in `env` is promoted from (None for dev)."""
    return _PREVIOUS[parse_environment(env)]


def eligible_predecessors(by_id: Mapping[str, Deployment], env: str | Environment) -> List[str]:
    """
    Ids of the jobs that may gate a job in `env`: deployments of the previous
    environment flagged pathToProd, sorted by id.
    """
    previous = previous_environment(env)
    if previous is None:
        return []

    return sorted(
        name
        for name, deployment in by_id.items()
        if deployment.path_to_prod and parse_environment(deployment.env) is previous
    )


def resolve_predecessor(
    by_id: Mapping[str, Deployment],
    env: str | Environment,
    *,
    strict: bool = False,
) -> Optional[str]:
    """
    Return the job id a job in `env` needs, or None.

    - dev jobs never need anything
    - preprod needs the dev pathToProd job, prod needs the preprod one
    - with several candidates the lexicographically smallest id wins, so the
      result does not depend on the order of the config file
    - strict=True turns several candidates into AmbiguousPredecessor
    """
    candidates = eligible_predecessors(by_id, env)
    if not candidates:
        return None
    if strict and len(candidates) > 1:
        raise AmbiguousPredecessor(parse_environment(env).value, candidates)
    return candidates[0]
