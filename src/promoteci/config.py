# config.py
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .model import Deployment


# -------------------- Schemas --------------------

class DeploymentEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    instance_name: str = Field(alias="instanceName")
    value_file: str = Field(alias="valueFile")
    target_cluster: str = Field(alias="targetCluster")
    # checked later by the stage mapper, not here
    env: str
    path_to_prod: bool = Field(default=False, alias="pathToProd")

    def to_deployment(self) -> Deployment:
        return Deployment(
            value_file=self.value_file,
            target_cluster=self.target_cluster,
            instance_name=self.instance_name,
            env=self.env,
            path_to_prod=self.path_to_prod,
        )


class DeploymentConfig(BaseModel):
    deployments: Optional[List[DeploymentEntry]] = Field(default_factory=list)


# -------------------- Loading --------------------

def parse_config(data: Any, source: str = "<memory>") -> List[Deployment]:
    """Validate already-parsed YAML data and return the deployments in file order."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(source, "Config must be a mapping with a 'deployments' list")

    try:
        config = DeploymentConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            source,
            f"Invalid deployment config ({e.error_count()} error(s))",
            details=[
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ],
        ) from e

    return [entry.to_deployment() for entry in config.deployments or []]


def load_deployments(path: str | Path) -> List[Deployment]:
    """
    Read a deployment config file.

    Raises:
        ConfigError: file missing/unreadable, invalid YAML, or schema errors.
    """
    config_path = Path(path).expanduser()
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(str(config_path), f"Error when reading config file: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(
            str(config_path),
            "Error when parsing config file",
            details=[str(e)],
        ) from e

    return parse_config(data, source=str(config_path))
