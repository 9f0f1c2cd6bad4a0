# pipeline.py
from __future__ import annotations

from typing import Dict, Iterable, List

from .dependencies import resolve_predecessor
from .jobs import build_job_index
from .model import Deployment, Environment, Job
from .render import render_pipeline
from .stages import parse_environment, stage_for


def build_jobs(deployments: Iterable[Deployment], *, strict: bool = False) -> List[Job]:
    """
    Derive the full job set from the deployment list.

    Jobs come back in config order. Every error (duplicate id, unknown env,
    ambiguous predecessor in strict mode) is raised here, before anything is
    rendered.
    """
    by_id = build_job_index(deployments)

    # map every stage first so an unknown env is reported against its own job
    stages = {name: stage_for(d.env) for name, d in by_id.items()}

    return [
        Job(
            id=name,
            deployment=d,
            stage=stages[name],
            needs=resolve_predecessor(by_id, d.env, strict=strict),
        )
        for name, d in by_id.items()
    ]


def promotion_levels(jobs: Iterable[Job]) -> List[List[str]]:
    """
    Group job ids by environment, in promotion order (dev, preprod, prod).

    Ids are sorted inside a level; environments without jobs are left out.
    """
    by_env: Dict[Environment, List[str]] = {env: [] for env in Environment}
    for job in jobs:
        by_env[parse_environment(job.env)].append(job.id)

    return [sorted(ids) for ids in by_env.values() if ids]


def generate_pipeline(deployments: Iterable[Deployment], *, strict: bool = False) -> str:
    """Build the jobs and render the pipeline text. Raises PipelineError on any invalid input."""
    return render_pipeline(build_jobs(deployments, strict=strict))
