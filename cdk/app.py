#!/usr/bin/env python3
import logging

import aws_cdk as cdk
from rafiki.config import deployment_environment
from rafiki.pipeline import build_app

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

app = cdk.App()

# VpcStack -> WebSocketEcsStack -> DistributionStack
build_app(app, env=deployment_environment())

app.synth()
