# errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class PipelineError(Exception):
    """
    Structured pipeline error with enough context for:
      - clean CLI output
      - tests asserting on the failure kind
    """
    kind: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.kind}: {self.message}"]
        for k, v in self.details.items():
            lines.append(f"{k}={v}")
        return "\n".join(lines)


class DuplicateJobIdentity(PipelineError):
    """Two deployments map to the same job id."""

    def __init__(self, job_id: str, instance_name: str, target_cluster: str):
        super().__init__(
            kind="duplicate_job",
            message=(
                f"Job name {job_id} already exists. "
                f"Please ensure unique instanceName/targetCluster ({instance_name}/{target_cluster})."
            ),
            details={
                "job": job_id,
                "instance": instance_name,
                "cluster": target_cluster,
            },
        )
        self.job_id = job_id
        self.instance_name = instance_name
        self.target_cluster = target_cluster


class UnknownEnvironment(PipelineError):
    def __init__(self, env: Any):
        super().__init__(
            kind="unknown_env",
            message=f"Unknown environment {env!r} (expected one of: dev, preprod, prod)",
            details={"env": env},
        )
        self.env = env


class AmbiguousPredecessor(PipelineError):
    """More than one pathToProd job could gate the same promotion step."""

    def __init__(self, env: str, candidates: List[str]):
        super().__init__(
            kind="ambiguous_predecessor",
            message=f"{len(candidates)} jobs are eligible predecessors for env {env!r}",
            details={"env": env, "candidates": ", ".join(candidates)},
        )
        self.env = env
        self.candidates = list(candidates)


class ConfigError(PipelineError):
    """The deployment config file could not be read or is malformed."""

    def __init__(self, path: str, message: str, details: List[str] | None = None):
        super().__init__(
            kind="config",
            message=message,
            details={"file": path},
        )
        self.path = path
        self.lines = list(details or [])

    def __str__(self) -> str:
        text = super().__str__()
        if self.lines:
            text += "\n" + "\n".join(self.lines)
        return text
