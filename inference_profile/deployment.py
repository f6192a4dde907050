# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Create one Application Inference Profile stack per model region.
"""

import logging
from typing import Dict, Optional

import aws_cdk as cdk
from constructs import Construct

from .inference_profile_stack import ApplicationInferenceProfileStack
from .stack_input import ProcessedStackInput

logger = logging.getLogger(__name__)


def build_inference_profile_stacks(
    scope: Construct,
    params: ProcessedStackInput,
    account: Optional[str] = None,
    **kwargs,
) -> Dict[str, ApplicationInferenceProfileStack]:
    """
    Deploy an inference profile stack into every region that hosts a model.

    Args:
        scope: Parent construct, usually the CDK app
        params: Processed stack input
        account: Target AWS account, None for environment-agnostic
        **kwargs: Extra stack properties such as description or tags

    Returns:
        Stacks keyed by region, in the order regions first appear in params
    """
    stacks: Dict[str, ApplicationInferenceProfileStack] = {}

    for region in params.model_regions():
        stacks[region] = ApplicationInferenceProfileStack(
            scope,
            f"ApplicationInferenceProfileStack{params.env}{region}",
            params=params,
            env=cdk.Environment(account=account, region=region),
            **kwargs,
        )
        logger.info(f"Configured inference profile stack for region {region}")

    return stacks
