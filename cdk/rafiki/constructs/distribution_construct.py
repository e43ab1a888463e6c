from typing import Mapping, Optional
from aws_cdk import (
    aws_cloudfront as cloudfront,
    aws_cloudfront_origins as origins,
    aws_elasticloadbalancingv2 as elbv2,
    aws_s3 as s3,
    RemovalPolicy,
)
from constructs import Construct

class DistributionConstruct(Construct):
    """
    CloudFront in front of the internal ALB, acting as a pass-through proxy.

    Caching is disabled and every viewer method, header, cookie and query
    string is forwarded to the load balancer through a VPC origin.
    """

    @property
    def distribution(self) -> cloudfront.Distribution:
        return self._distribution

    def __init__(self,
                 scope: Construct,
                 id: str,
                 *,
                 load_balancer: elbv2.IApplicationLoadBalancer,
                 origin_custom_headers: Optional[Mapping[str, str]] = None,
                 access_logging: bool = False,
                 **kwargs) -> None:
        super().__init__(scope, id, **kwargs)

        self.log_bucket: Optional[s3.Bucket] = None
        if access_logging:
            self.log_bucket = s3.Bucket(
                self,
                "DistributionLoggingBucket",
                public_read_access=False,
                block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
                removal_policy=RemovalPolicy.DESTROY,
                auto_delete_objects=True,
                encryption=s3.BucketEncryption.S3_MANAGED,
                object_ownership=s3.ObjectOwnership.BUCKET_OWNER_PREFERRED
            )

        origin = origins.VpcOrigin.with_application_load_balancer(
            load_balancer,
            custom_headers=dict(origin_custom_headers) if origin_custom_headers else None
        )

        self._distribution = cloudfront.Distribution(
            self,
            "Distribution",
            default_behavior=cloudfront.BehaviorOptions(
                origin=origin,
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.ALLOW_ALL,
                cache_policy=cloudfront.CachePolicy.CACHING_DISABLED,
                allowed_methods=cloudfront.AllowedMethods.ALLOW_ALL,
                origin_request_policy=cloudfront.OriginRequestPolicy.ALL_VIEWER
            ),
            default_root_object="index.html",
            price_class=cloudfront.PriceClass.PRICE_CLASS_100,
            enable_logging=access_logging,
            log_bucket=self.log_bucket
        )
