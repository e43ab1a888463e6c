import logging
import os
from typing import Mapping, Optional

import aws_cdk as cdk

logger = logging.getLogger(__name__)

ACCOUNT_VAR = "CDK_DEFAULT_ACCOUNT"
REGION_VAR = "CDK_DEFAULT_REGION"


def _read(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name, "").strip()
    return value or None


def deployment_environment(environ: Optional[Mapping[str, str]] = None) -> cdk.Environment:
    """
    Build the deployment target from the CDK CLI's default account/region.

    Missing variables stay unresolved, which leaves the stacks
    environment-agnostic until deploy time.
    """
    if environ is None:
        environ = os.environ

    account = _read(environ, ACCOUNT_VAR)
    region = _read(environ, REGION_VAR)

    if account is None or region is None:
        logger.warning(
            "%s/%s not fully set, synthesizing environment-agnostic stacks",
            ACCOUNT_VAR, REGION_VAR,
        )
    else:
        logger.info("Deployment target account=%s region=%s", account, region)

    return cdk.Environment(account=account, region=region)
