# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
AWS CDK Stack for Amazon Bedrock Application Inference Profiles.

For every configured model deployed in the stack's region this stack creates
an application inference profile that copies from either the system-defined
cross-region inference profile or the foundation model itself. The profile
ARNs are exported as a single JSON output keyed by model ID.
"""

import logging
from typing import Dict, List

from aws_cdk import (
    ArnFormat,
    CfnOutput,
    Stack,
    Token,
    aws_bedrock as bedrock,
)
from constructs import Construct

from .stack_input import ModelDescriptor, ProcessedStackInput


# Model ID prefixes of system-defined cross-region inference profiles
CROSS_REGION_PREFIXES = ("us.", "apac.", "eu.", "global", "jp")


def inference_profile_name_prefix(model_id: str) -> str:
    """Replace the characters not allowed in profile names with hyphens."""
    return model_id.replace(".", "-").replace(":", "-")


def is_cross_region_model(model_id: str) -> bool:
    """Check whether a model ID refers to a cross-region inference profile."""
    return model_id.startswith(CROSS_REGION_PREFIXES)


class ApplicationInferenceProfileStack(Stack):
    """CDK Stack that creates one application inference profile per model."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        params: ProcessedStackInput,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.logger = logging.getLogger(__name__)
        self.params = params

        # Environment-agnostic stacks only know the region at deploy time
        self.current_region = None if Token.is_unresolved(self.region) else self.region

        self.inference_profiles: Dict[str, bedrock.CfnApplicationInferenceProfile] = {}
        self.inference_profile_arns: Dict[str, str] = {}

        self._create_inference_profiles(params.model_ids)
        self._create_inference_profiles(params.image_generation_model_ids)
        self._create_inference_profiles(params.video_generation_model_ids)
        self._create_inference_profiles(params.speech_to_speech_model_ids)

        self._create_outputs()

    def _create_inference_profiles(self, model_ids: List[ModelDescriptor]) -> None:
        """Create profiles for the descriptors that belong to this region."""
        for model in model_ids:
            # Application inference profiles cannot be created for another region
            if model.region != self.current_region:
                self.logger.debug(
                    f"Skipping {model.model_id}: region {model.region} "
                    f"does not match {self.current_region}"
                )
                continue

            profile = bedrock.CfnApplicationInferenceProfile(
                self,
                f"ApplicationInferenceProfile{model.model_id}",
                inference_profile_name=(
                    f"{inference_profile_name_prefix(model.model_id)}{self.params.env}"
                ),
                model_source=bedrock.CfnApplicationInferenceProfile.InferenceProfileModelSourceProperty(
                    copy_from=self._model_source_arn(model.model_id)
                ),
            )

            self.inference_profiles[model.model_id] = profile
            self.inference_profile_arns[model.model_id] = (
                profile.attr_inference_profile_arn
            )
            self.logger.info(f"Declared application inference profile for {model.model_id}")

    def _model_source_arn(self, model_id: str) -> str:
        """Build the ARN of the profile or foundation model to copy from."""
        return Stack.of(self).format_arn(
            service="bedrock",
            resource=(
                "inference-profile"
                if is_cross_region_model(model_id)
                else "foundation-model"
            ),
            resource_name=model_id,
            arn_format=ArnFormat.SLASH_RESOURCE_NAME,
        )

    def _create_outputs(self) -> None:
        """Export all inference profile ARNs as a single JSON output."""
        if not self.inference_profile_arns:
            return

        CfnOutput(
            self,
            "InferenceProfileArns",
            value=self.to_json_string(self.inference_profile_arns),
            description="Application inference profile ARNs keyed by model ID",
        )
