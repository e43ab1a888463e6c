from aws_cdk import (
    aws_ec2 as ec2,
    aws_autoscaling as autoscaling,
    aws_ecs as ecs,
    aws_iam as iam,
)
from constructs import Construct

class AsgConstruct(Construct):
    """EC2 capacity for the cluster: launch template, autoscaling group and capacity provider."""

    @property
    def auto_scaling_group(self) -> autoscaling.AutoScalingGroup:
        return self._asg

    @property
    def capacity_provider(self) -> ecs.AsgCapacityProvider:
        return self._capacity_provider

    def __init__(self,
                scope:Construct,
                id:str,
                *,
                vpc:ec2.IVpc,
                cluster:ecs.Cluster,
                instance_type:str = "t3.micro",
                min_capacity:int = 1,
                max_capacity:int = 1,
                cpu_target_percent:int = 70,
                **kwargs) -> None:
        super().__init__(scope, id, **kwargs)

        # Define IAM role and permissions
        instance_role = iam.Role(
            self, "EcsInstanceRole",
            assumed_by=iam.ServicePrincipal("ec2.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name("service-role/AmazonEC2ContainerServiceforEC2Role")
            ]
        )

        # SSM access
        instance_role.add_managed_policy(
            iam.ManagedPolicy.from_aws_managed_policy_name("AmazonSSMManagedInstanceCore")
        )

        # Register the instance with the cluster
        user_data = ec2.UserData.for_linux()
        user_data.add_commands(
            "#!/bin/bash",
            f"echo ECS_CLUSTER={cluster.cluster_name} >> /tmp/ecs.config"
        )

        self.launch_template_sg = ec2.SecurityGroup(
            self,
            "LaunchTemplateSecurityGroup",
            vpc=vpc,
            description="Security Group for EC2 cluster",
            allow_all_outbound=True
        )

        launch_template = ec2.LaunchTemplate(
            self,
            "EcsLaunchTemplate",
            instance_type=ec2.InstanceType(instance_type),
            machine_image=ecs.EcsOptimizedImage.amazon_linux2(),
            role=instance_role,
            security_group=self.launch_template_sg,
            user_data=user_data
        )

        self._asg = autoscaling.AutoScalingGroup(
            self,
            "AutoScalingGroup",
            vpc=vpc,
            vpc_subnets=ec2.SubnetSelection(subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS),
            launch_template=launch_template,
            min_capacity=min_capacity,
            max_capacity=max_capacity,
            new_instances_protected_from_scale_in=False
        )

        self._asg.scale_on_cpu_utilization(
            "CpuScaling",
            target_utilization_percent=cpu_target_percent
        )

        self._capacity_provider = ecs.AsgCapacityProvider(
            self,
            "capacityProvider",
            auto_scaling_group=self._asg
        )

        cluster.add_asg_capacity_provider(self._capacity_provider)
