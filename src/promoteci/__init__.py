from .model import Deployment, Environment, Job
from .errors import (
    PipelineError,
    DuplicateJobIdentity,
    UnknownEnvironment,
    AmbiguousPredecessor,
    ConfigError,
)
from .pipeline import build_jobs, generate_pipeline, promotion_levels

__all__ = [
    "Deployment",
    "Environment",
    "Job",
    "PipelineError",
    "DuplicateJobIdentity",
    "UnknownEnvironment",
    "AmbiguousPredecessor",
    "ConfigError",
    "build_jobs",
    "generate_pipeline",
    "promotion_levels",
]
