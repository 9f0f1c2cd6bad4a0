from __future__ import annotations

import pytest

from promoteci.dependencies import eligible_predecessors, previous_environment, resolve_predecessor
from promoteci.errors import AmbiguousPredecessor
from promoteci.jobs import build_job_index
from promoteci.model import Environment

from conftest import dep


@pytest.fixture
def by_id():
    return build_job_index([
        dep("my-app", "dev-01", "dev", True),
        dep("my-app-feature", "dev-01", "dev", False),
        dep("my-app-preprod", "prod-01", "preprod", True),
        dep("my-app-demo", "prod-01", "preprod", False),
    ])


def test_previous_environment():
    assert previous_environment("dev") is None
    assert previous_environment("preprod") is Environment.DEV
    assert previous_environment("production") is Environment.PREPROD


def test_preprod_needs_dev(by_id):
    assert resolve_predecessor(by_id, "preprod") == "push-my-app-to-dev-01"


def test_prod_needs_preprod(by_id):
    assert resolve_predecessor(by_id, "prod") == "push-my-app-preprod-to-prod-01"


def test_dev_needs_nothing(by_id):
    assert resolve_predecessor(by_id, "dev") is None


def test_no_path_to_prod_candidate():
    by_id = build_job_index([dep("my-app-feature", "dev-01", "dev", False)])
    assert resolve_predecessor(by_id, "preprod") is None


def test_prod_without_preprod():
    by_id = build_job_index([dep("app", "prod", "prod")])
    assert resolve_predecessor(by_id, "prod") is None


def test_candidates_are_sorted_by_id():
    by_id = build_job_index([
        dep("zeta", "dev", "dev", True),
        dep("alpha", "dev", "dev", True),
        dep("beta", "dev", "development", True),
    ])
    assert eligible_predecessors(by_id, "preprod") == [
        "push-alpha-to-dev",
        "push-beta-to-dev",
        "push-zeta-to-dev",
    ]
    assert resolve_predecessor(by_id, "preprod") == "push-alpha-to-dev"


def test_result_does_not_depend_on_config_order():
    deployments = [
        dep("zeta", "dev", "dev", True),
        dep("feature", "dev", "dev", False),
        dep("alpha", "dev", "dev", True),
        dep("app", "preprod", "preprod", True),
    ]
    forward = resolve_predecessor(build_job_index(deployments), "preprod")
    backward = resolve_predecessor(build_job_index(list(reversed(deployments))), "preprod")

    assert forward == backward == "push-alpha-to-dev"


def test_repeated_calls_are_consistent():
    by_id = build_job_index([
        dep("app", "preprod", "preprod", True),
        dep("app-v1", "prod", "prod"),
        dep("app-v2", "prod", "prod"),
    ])
    assert resolve_predecessor(by_id, "prod") == resolve_predecessor(by_id, "prod") == "push-app-to-preprod"


def test_strict_mode_rejects_multiple_candidates():
    by_id = build_job_index([
        dep("a", "dev", "dev", True),
        dep("b", "dev", "dev", True),
    ])
    with pytest.raises(AmbiguousPredecessor) as exc_info:
        resolve_predecessor(by_id, "preprod", strict=True)

    assert exc_info.value.env == "preprod"
    assert exc_info.value.candidates == ["push-a-to-dev", "push-b-to-dev"]


def test_strict_mode_accepts_single_candidate(by_id):
    assert resolve_predecessor(by_id, "preprod", strict=True) == "push-my-app-to-dev-01"
