import logging
from typing import NamedTuple, Optional

import aws_cdk as cdk
from rafiki.stacks.compute_stack import ComputeStack
from rafiki.stacks.distribution_stack import DistributionStack
from rafiki.stacks.network_stack import NetworkStack

logger = logging.getLogger(__name__)


class Stages(NamedTuple):
    network: NetworkStack
    compute: ComputeStack
    edge: DistributionStack


def build_app(app: cdk.App, env: Optional[cdk.Environment] = None) -> Stages:
    """Declare the network, compute and edge stacks on ``app``, in that order."""

    # Network Layer
    vpc_stack = NetworkStack(app, "VpcStack", env=env)
    logger.debug("Declared %s", vpc_stack.stack_name)

    # Container Layer
    ecs_stack = ComputeStack(
        app,
        "WebSocketEcsStack",
        vpc=vpc_stack.vpc,
        env=env
    )
    logger.debug("Declared %s", ecs_stack.stack_name)

    # Edge Layer
    distribution_stack = DistributionStack(
        app,
        "DistributionStack",
        load_balancer=ecs_stack.load_balancer,
        env=env
    )
    logger.debug("Declared %s", distribution_stack.stack_name)

    ecs_stack.add_dependency(vpc_stack)
    distribution_stack.add_dependency(ecs_stack)

    return Stages(network=vpc_stack, compute=ecs_stack, edge=distribution_stack)
