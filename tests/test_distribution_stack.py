import aws_cdk as cdk
import pytest
from aws_cdk.assertions import Match, Template

from rafiki.stacks.compute_stack import ComputeStack
from rafiki.stacks.distribution_stack import DistributionStack
from rafiki.stacks.network_stack import NetworkStack

CACHING_DISABLED_POLICY_ID = "4135ea2d-6df8-44a3-9df3-4b5a84be39ad"
ALL_VIEWER_ORIGIN_REQUEST_POLICY_ID = "216adef6-5c7f-47e4-b989-5492eafa07d3"


def _edge_with(**kwargs):
    app = cdk.App()
    network = NetworkStack(app, "VpcStack")
    compute = ComputeStack(app, "WebSocketEcsStack", vpc=network.vpc)
    edge = DistributionStack(
        app, "DistributionStack", load_balancer=compute.load_balancer, **kwargs
    )
    return Template.from_stack(edge)


def _distribution_config(template):
    distributions = template.find_resources("AWS::CloudFront::Distribution")
    assert len(distributions) == 1
    return list(distributions.values())[0]["Properties"]["DistributionConfig"]


def test_single_distribution(edge_template):
    edge_template.resource_count_is("AWS::CloudFront::Distribution", 1)
    edge_template.resource_count_is("AWS::CloudFront::VpcOrigin", 1)


def test_pass_through_behavior(edge_template):
    edge_template.has_resource_properties(
        "AWS::CloudFront::Distribution",
        {
            "DistributionConfig": Match.object_like({
                "DefaultCacheBehavior": Match.object_like({
                    "ViewerProtocolPolicy": "allow-all",
                    "CachePolicyId": CACHING_DISABLED_POLICY_ID,
                    "OriginRequestPolicyId": ALL_VIEWER_ORIGIN_REQUEST_POLICY_ID,
                    "AllowedMethods": [
                        "GET", "HEAD", "OPTIONS", "PUT", "PATCH", "POST", "DELETE",
                    ],
                }),
                "DefaultRootObject": "index.html",
                "PriceClass": "PriceClass_100",
            }),
        },
    )


def test_logging_disabled_by_default(edge_template):
    config = _distribution_config(edge_template)
    assert "Logging" not in config
    edge_template.resource_count_is("AWS::S3::Bucket", 0)


def test_no_custom_headers_by_default(edge_template):
    config = _distribution_config(edge_template)
    assert len(config["Origins"]) == 1
    assert "OriginCustomHeaders" not in config["Origins"][0]


def test_origin_is_compute_load_balancer(stages, compute_template, edge_template):
    alb = stages.compute.load_balancer
    alb_id = stages.compute.get_logical_id(alb.node.default_child)

    exports = [
        output["Export"]["Name"]
        for output in compute_template.find_outputs("*").values()
        if output["Value"] == {"Ref": alb_id} and "Export" in output
    ]
    assert len(exports) == 1

    vpc_origins = edge_template.find_resources("AWS::CloudFront::VpcOrigin")
    (vpc_origin_id, vpc_origin), = vpc_origins.items()
    endpoint = vpc_origin["Properties"]["VpcOriginEndpointConfig"]
    assert endpoint["Arn"] == {"Fn::ImportValue": exports[0]}

    origin = _distribution_config(edge_template)["Origins"][0]
    assert origin["VpcOriginConfig"]["VpcOriginId"]["Fn::GetAtt"][0] == vpc_origin_id


def test_custom_headers_reach_origin():
    template = _edge_with(origin_custom_headers={"X-Origin-Verify": "rafiki"})
    origin = _distribution_config(template)["Origins"][0]
    assert origin["OriginCustomHeaders"] == [
        {"HeaderName": "X-Origin-Verify", "HeaderValue": "rafiki"},
    ]


def test_access_logging_creates_bucket():
    template = _edge_with(access_logging=True)
    bucket_id = list(template.find_resources("AWS::S3::Bucket"))[0]
    template.has_resource_properties(
        "AWS::S3::Bucket",
        {
            "OwnershipControls": {
                "Rules": [{"ObjectOwnership": "BucketOwnerPreferred"}],
            },
        },
    )
    config = _distribution_config(template)
    assert config["Logging"]["Bucket"] == {"Fn::GetAtt": [bucket_id, "RegionalDomainName"]}


def test_edge_requires_load_balancer():
    app = cdk.App()
    with pytest.raises(TypeError):
        DistributionStack(app, "DetachedDistributionStack")


def test_edge_rejects_none_load_balancer():
    app = cdk.App()
    with pytest.raises(ValueError, match="requires a load balancer"):
        DistributionStack(app, "DetachedDistributionStack", load_balancer=None)
