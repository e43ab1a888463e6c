from aws_cdk import (
    aws_ec2 as ec2,
    CfnOutput,
    Stack,
)
from constructs import Construct
from rafiki.constructs.vpc_construct import VpcConstruct

class NetworkStack(Stack):
    def __init__(self, scope: Construct, id: str, **kwargs):
        super().__init__(scope, id, **kwargs)

        self.vpc_construct = VpcConstruct(self, "VPCResources")

        self.vpc: ec2.IVpc = self.vpc_construct.vpc

        CfnOutput(
            self,
            "VpcIdOutput",
            value=self.vpc.vpc_id,
            export_name="VpcId"
        )
