from typing import Mapping, Optional
from aws_cdk import (
    aws_cloudfront as cloudfront,
    aws_elasticloadbalancingv2 as elbv2,
    Stack,
)
from constructs import Construct
from rafiki.constructs.distribution_construct import DistributionConstruct


class DistributionStack(Stack):

    def __init__(self,
                 scope: Construct,
                 id: str,
                 *,
                 load_balancer: elbv2.IApplicationLoadBalancer,
                 origin_custom_headers: Optional[Mapping[str, str]] = None,
                 access_logging: bool = False,
                 **kwargs):
        if load_balancer is None:
            raise ValueError(f"{id} requires a load balancer from the compute stack")

        super().__init__(scope, id, **kwargs)

        self.distribution_construct = DistributionConstruct(
            self,
            "DistributionResources",
            load_balancer=load_balancer,
            origin_custom_headers=origin_custom_headers,
            access_logging=access_logging
        )

        self.distribution: cloudfront.Distribution = self.distribution_construct.distribution
