from aws_cdk import (
    aws_ec2 as ec2,
    aws_elasticloadbalancingv2 as elbv2,
)
from constructs import Construct

class AlbConstruct(Construct):

    @property
    def alb_security_group(self) -> ec2.SecurityGroup:
        return self._alb_security_group

    @property
    def application_target_group(self) -> elbv2.ApplicationTargetGroup:
        return self._application_target_group

    def __init__(self, scope:Construct, id:str, *, vpc: ec2.IVpc, target_port: int = 8080, listener_port: int = 80, **kwargs):
        super().__init__(scope, id, **kwargs)

        self._alb_security_group = ec2.SecurityGroup(
            self,
            "ALBSecurityGroup",
            vpc=vpc,
            description="Security Group for ALB",
            allow_all_outbound=True
        )

        # awsvpc tasks register by IP
        self._application_target_group = elbv2.ApplicationTargetGroup(
            self,
            "webSocketTargetGroup",
            vpc=vpc,
            port=target_port,
            protocol=elbv2.ApplicationProtocol.HTTP,
            target_type=elbv2.TargetType.IP,
            health_check=elbv2.HealthCheck(
                path="/",
                protocol=elbv2.Protocol.HTTP,
                port=str(target_port)
            )
        )

        self.alb = elbv2.ApplicationLoadBalancer(
            self,
            "ApplicationLoadBalancer",
            vpc=vpc,
            internet_facing=False,
            security_group=self._alb_security_group,
            vpc_subnets=ec2.SubnetSelection(subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS)
        )

        self.listener = self.alb.add_listener(
            "webSocketListener",
            port=listener_port,
            protocol=elbv2.ApplicationProtocol.HTTP,
            open=True,
            default_action=elbv2.ListenerAction.forward([self._application_target_group])
        )
