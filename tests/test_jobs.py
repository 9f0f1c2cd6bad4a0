from __future__ import annotations

import pytest

from promoteci.errors import DuplicateJobIdentity
from promoteci.jobs import build_job_index, job_id

from conftest import dep


def test_job_id_format():
    assert job_id(dep("my-app", "dev-01", "dev")) == "push-my-app-to-dev-01"


def test_job_id_keeps_special_characters():
    assert job_id(dep("my-app-v2.0", "dev-cluster-01", "dev")) == "push-my-app-v2.0-to-dev-cluster-01"


def test_index_has_one_entry_per_deployment_in_order():
    deployments = [
        dep("app1", "cluster-01", "dev"),
        dep("app2", "cluster-01", "prod"),
        dep("app1", "cluster-02", "prod"),
    ]
    by_id = build_job_index(deployments)

    assert list(by_id) == [
        "push-app1-to-cluster-01",
        "push-app2-to-cluster-01",
        "push-app1-to-cluster-02",
    ]
    assert by_id["push-app1-to-cluster-02"] is deployments[2]


def test_empty_index():
    assert build_job_index([]) == {}


def test_duplicate_pair_fails_even_with_different_env():
    deployments = [
        dep("app", "cluster", "dev"),
        dep("app", "cluster", "prod"),
    ]
    with pytest.raises(DuplicateJobIdentity) as exc_info:
        build_job_index(deployments)

    err = exc_info.value
    assert err.job_id == "push-app-to-cluster"
    assert err.instance_name == "app"
    assert err.target_cluster == "cluster"
    assert "push-app-to-cluster" in str(err)
