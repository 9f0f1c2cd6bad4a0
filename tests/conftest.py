from __future__ import annotations

from pathlib import Path

import pytest

from promoteci.model import Deployment


def dep(instance: str, cluster: str, env: str, path_to_prod: bool = False, value_file: str | None = None) -> Deployment:
    return Deployment(
        value_file=value_file or f"values/{instance}-{env}.yaml",
        target_cluster=cluster,
        instance_name=instance,
        env=env,
        path_to_prod=path_to_prod,
    )


@pytest.fixture
def promotion_chain() -> list[Deployment]:
    return [
        dep("app", "devCluster", "dev", True, "value-dev.yaml"),
        dep("app", "preprodCluster", "preprod", True, "value-preprod.yaml"),
        dep("app", "prodCluster", "prod", False, "value-prod.yaml"),
    ]


@pytest.fixture
def write_config(tmp_path: Path):
    def _write(content: str, name: str = "app-config-file.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
