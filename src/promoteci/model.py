# model.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Environment(str, Enum):
    """Promotion environments, in promotion order."""
    DEV = "dev"
    PREPROD = "preprod"
    PROD = "prod"


@dataclass(frozen=True)
class Deployment:
    """
    One deployment descriptor, as read from the config file.

    `env` is kept exactly as written so it can be rendered verbatim;
    use stages.parse_environment() to compare it.
    """
    value_file: str
    target_cluster: str
    instance_name: str
    env: str
    path_to_prod: bool = False


@dataclass(frozen=True)
class Job:
    """
    A push job derived from a Deployment.

    `needs` is the id of the single job gating this one, if any.
    """
    id: str
    deployment: Deployment
    stage: str
    needs: Optional[str] = None

    @property
    def env(self) -> str:
        return self.deployment.env
