import os

from aws_cdk import (
    aws_ec2 as ec2,
    aws_ecs as ecs,
    aws_elasticloadbalancingv2 as elbv2,
    aws_iam as iam,
    Duration,
)
from constructs import Construct
from rafiki.constructs.alb_construct import AlbConstruct
from rafiki.constructs.asg_construct import AsgConstruct

CONTAINER_IMAGE_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "resources",
    "container_image",
)

class EcsConstruct(Construct):
    """
    Websocket service on an EC2-backed ECS cluster behind an internal ALB.

    Instance capacity (autoscaling group) and task count scale independently,
    both on the same CPU target and min/max bounds.
    """

    @property
    def cluster(self) -> ecs.Cluster:
        return self._cluster

    @property
    def application_load_balancer(self) -> elbv2.ApplicationLoadBalancer:
        return self.alb_construct.alb

    @property
    def service_security_group(self) -> ec2.SecurityGroup:
        return self._service_security_group

    def __init__(self,
                 scope: Construct,
                 id: str,
                 *,
                 vpc: ec2.IVpc,
                 instance_type: str = "t3.micro",
                 min_capacity: int = 1,
                 max_capacity: int = 1,
                 cpu_target_percent: int = 70,
                 container_port: int = 8080,
                 listener_port: int = 80,
                 memory_limit_mib: int = 512,
                 **kwargs) -> None:
        super().__init__(scope, id, **kwargs)

        self._cluster = ecs.Cluster(
            self,
            "Cluster",
            vpc=vpc,
            cluster_name="websocket-service"
        )

        self.asg_construct = AsgConstruct(
            self,
            "AsgConstruct",
            vpc=vpc,
            cluster=self._cluster,
            instance_type=instance_type,
            min_capacity=min_capacity,
            max_capacity=max_capacity,
            cpu_target_percent=cpu_target_percent
        )

        self.alb_construct = AlbConstruct(
            self,
            "AlbConstruct",
            vpc=vpc,
            target_port=container_port,
            listener_port=listener_port
        )

        self.alb_security_group = self.alb_construct.alb_security_group

        self._service_security_group = ec2.SecurityGroup(
            self,
            "webSocketServiceSecurityGroup",
            vpc=vpc,
            allow_all_outbound=True
        )

        # Only the ALB may reach the container port
        self._service_security_group.connections.allow_from(
            ec2.Connections(security_groups=[self.alb_security_group]),
            ec2.Port.tcp(container_port),
            f"allow traffic on port {container_port} from the ALB security group"
        )

        task_role = iam.Role(
            self, "WebSocketServiceRole",
            assumed_by=iam.ServicePrincipal("ecs-tasks.amazonaws.com")
        )

        self.task_definition = ecs.Ec2TaskDefinition(
            self,
            "WebSocketTaskDefinition",
            task_role=task_role,
            network_mode=ecs.NetworkMode.AWS_VPC
        )

        self.task_definition.add_container(
            "WebSocketContainer",
            image=ecs.ContainerImage.from_asset(CONTAINER_IMAGE_DIR),
            container_name="websocket-service",
            memory_limit_mib=memory_limit_mib,
            port_mappings=[
                ecs.PortMapping(container_port=container_port, host_port=container_port)
            ],
            logging=ecs.LogDrivers.aws_logs(stream_prefix="websocket-service"),
            health_check=ecs.HealthCheck(
                command=["CMD-SHELL", f"curl -f http://localhost:{container_port}/health"],
                interval=Duration.seconds(30),
                timeout=Duration.seconds(30)
            ),
            environment={}
        )

        self.service = ecs.Ec2Service(
            self,
            "WebSocketService",
            cluster=self._cluster,
            task_definition=self.task_definition,
            desired_count=1,
            vpc_subnets=ec2.SubnetSelection(subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS),
            security_groups=[self._service_security_group],
            assign_public_ip=False
        )

        scalable_target = self.service.auto_scale_task_count(
            min_capacity=min_capacity,
            max_capacity=max_capacity
        )

        scalable_target.scale_on_cpu_utilization(
            "CpuScaling",
            target_utilization_percent=cpu_target_percent
        )

        self.alb_construct.application_target_group.add_target(self.service)
