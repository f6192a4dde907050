#!/usr/bin/env python3

# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import os
import logging
import aws_cdk as cdk
from cdk_nag import AwsSolutionsChecks

from inference_profile.deployment import build_inference_profile_stacks
from inference_profile.stack_input import ProcessedStackInput


logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

app = cdk.App()

project_name = app.node.try_get_context("project_name") or "bedrock-inference-profiles"

##########################
# Application Inference Profile Stacks
##########################

# Model lists and env tag come from cdk.json or -c overrides
params = ProcessedStackInput.from_context(app.node)

# One stack per region that hosts a configured model
inference_profile_stacks = build_inference_profile_stacks(
    app,
    params,
    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
    description="Amazon Bedrock application inference profiles for usage tracking",
)

for region, stack in inference_profile_stacks.items():
    # Add tags to the stack
    cdk.Tags.of(stack).add("Project", project_name)
    cdk.Tags.of(stack).add("ManagedBy", "CDK")
    cdk.Tags.of(stack).add("Component", "InferenceProfiles")

    # Add stack-level metadata for resource management
    stack.add_metadata("StackType", "ApplicationInferenceProfile")
    stack.add_metadata("ModelRegion", region)

# Apply CDK Nag security checks
cdk.Aspects.of(app).add(AwsSolutionsChecks(verbose=True))

app.synth()
