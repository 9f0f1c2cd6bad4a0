# stages.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .errors import UnknownEnvironment
from .model import Environment


STAGES: Mapping[Environment, str] = MappingProxyType({
    Environment.DEV: "Push Manifests Dev",
    Environment.PREPROD: "Push Manifests Preprod",
    Environment.PROD: "Push Manifests Prod",
})

# long spellings accepted next to the short tags
_ALIASES: Mapping[str, Environment] = MappingProxyType({
    "dev": Environment.DEV,
    "development": Environment.DEV,
    "preprod": Environment.PREPROD,
    "pre-production": Environment.PREPROD,
    "prod": Environment.PROD,
    "production": Environment.PROD,
})


def parse_environment(value: str | Environment) -> Environment:
    """Normalize an env tag from the config file, or raise UnknownEnvironment."""
    if isinstance(value, Environment):
        return value
    if isinstance(value, str):
        env = _ALIASES.get(value.strip().lower())
        if env is not None:
            return env
    raise UnknownEnvironment(value)


def stage_for(env: str | Environment) -> str:
    """Pipeline stage label for an env tag."""
    return STAGES[parse_environment(env)]
