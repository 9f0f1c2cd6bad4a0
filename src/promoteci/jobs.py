# jobs.py
from __future__ import annotations

from typing import Dict, Iterable

from .errors import DuplicateJobIdentity
from .model import Deployment


def job_id(deployment: Deployment) -> str:
    """push-<instanceName>-to-<targetCluster>"""
    return f"push-{deployment.instance_name}-to-{deployment.target_cluster}"


def build_job_index(deployments: Iterable[Deployment]) -> Dict[str, Deployment]:
    """
    Map each job id to its deployment.

    The returned dict keeps the order in which deployments were given; that
    order is the order jobs are rendered in.

    Raises:
        DuplicateJobIdentity: two deployments share instanceName/targetCluster.
    """
    by_id: Dict[str, Deployment] = {}
    for deployment in deployments:
        name = job_id(deployment)
        if name in by_id:
            raise DuplicateJobIdentity(name, deployment.instance_name, deployment.target_cluster)
        by_id[name] = deployment
    return by_id
