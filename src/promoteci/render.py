# render.py
from __future__ import annotations

from typing import Iterable

from .model import Job


# Shared template project every generated pipeline includes.
HEADER = """
include:
  - project: 'digital-factory/devops/continuous-integration-delivery'
    ref: 'master'
    file:
      - 'gitlab-ci/templates/cno-apps-multistage-pipeline.gitlab-ci.yaml'

"""

JOB_TEMPLATE = ".push-to-target-cluster-repo"

_JOB_BLOCK = """
{id}:
  variables:
    VALUE_FILE: {value_file}
    TARGET_CLUSTER: {target_cluster}
    INSTANCENAME: {instance_name}
    ENV: {env}
  stage: {stage}
  extends: {template}
  when: manual
"""

_NEEDS_BLOCK = """  needs:
    - {needs}
"""


def render_job(job: Job) -> str:
    """Render one job block, with a needs section only if the job has a predecessor."""
    d = job.deployment
    text = _JOB_BLOCK.format(
        id=job.id,
        value_file=d.value_file,
        target_cluster=d.target_cluster,
        instance_name=d.instance_name,
        env=d.env,
        stage=job.stage,
        template=JOB_TEMPLATE,
    )
    if job.needs:
        text += _NEEDS_BLOCK.format(needs=job.needs)
    return text


def render_pipeline(jobs: Iterable[Job]) -> str:
    """HEADER followed by every job block, in the order given."""
    return HEADER + "".join(render_job(j) for j in jobs)
