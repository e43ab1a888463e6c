from aws_cdk import (
    aws_ec2 as ec2,
)
from constructs import Construct

class VpcConstruct(Construct):
    def __init__(self, scope: Construct, id: str, *, max_azs: int = 2, nat_gateways: int = 1, cidr_mask: int = 24):
        super().__init__(scope, id)

        # One NAT gateway shared by every private subnet
        self.vpc = ec2.Vpc(
            self, "VPC",
            max_azs=max_azs,
            nat_gateways=nat_gateways,
            subnet_configuration=[
                ec2.SubnetConfiguration(
                    name="ServerPrivate",
                    subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS,
                    cidr_mask=cidr_mask
                ),
                ec2.SubnetConfiguration(
                    name="ServerPublic",
                    subnet_type=ec2.SubnetType.PUBLIC,
                    cidr_mask=cidr_mask,
                    map_public_ip_on_launch=True
                )
            ]
        )
