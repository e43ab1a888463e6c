import aws_cdk as cdk
import pytest
from aws_cdk.assertions import Template

from rafiki.pipeline import build_app


@pytest.fixture(scope="module")
def stages():
    app = cdk.App()
    return build_app(app)


@pytest.fixture(scope="module")
def network_template(stages):
    return Template.from_stack(stages.network)


@pytest.fixture(scope="module")
def compute_template(stages):
    return Template.from_stack(stages.compute)


@pytest.fixture(scope="module")
def edge_template(stages):
    return Template.from_stack(stages.edge)
