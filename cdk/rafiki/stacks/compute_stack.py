from aws_cdk import (
    aws_ec2 as ec2,
    aws_ecs as ecs,
    aws_elasticloadbalancingv2 as elbv2,
    Stack,
)
from constructs import Construct
from rafiki.constructs.ecs_construct import EcsConstruct


class ComputeStack(Stack):

    def __init__(self, scope: Construct, id: str, *, vpc: ec2.IVpc, **kwargs):
        if vpc is None:
            raise ValueError(f"{id} requires a VPC from the network stack")

        super().__init__(scope, id, **kwargs)

        self.vpc: ec2.IVpc = vpc

        self.ecs_construct = EcsConstruct(
            self,
            "ECSResources",
            vpc=self.vpc
        )

        self.cluster: ecs.Cluster = self.ecs_construct.cluster
        self.load_balancer: elbv2.ApplicationLoadBalancer = self.ecs_construct.application_load_balancer
        self.alb_security_group = self.ecs_construct.alb_security_group
        self.service_security_group = self.ecs_construct.service_security_group
