# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Configuration classes for the Application Inference Profile stack.

This module turns the raw CDK context (as written in cdk.json or passed with
``-c``) into typed model descriptors grouped by use case.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from constructs import Node


DEFAULT_MODEL_REGION = "us-east-1"


@dataclass
class ModelDescriptor:
    """A Bedrock model identifier and the region it is deployed in."""

    model_id: str
    region: str

    def __post_init__(self):
        """Validate descriptor fields after initialization."""
        if not isinstance(self.model_id, str) or not self.model_id.strip():
            raise ValueError("Model ID cannot be empty")
        if not isinstance(self.region, str) or not self.region.strip():
            raise ValueError(f"Region cannot be empty for model {self.model_id}")

    @classmethod
    def parse(
        cls, raw: Union[str, Mapping[str, Any]], default_region: str
    ) -> "ModelDescriptor":
        """
        Build a descriptor from a context entry.

        Args:
            raw: Either a model ID string or a mapping with ``modelId`` and
                an optional ``region``
            default_region: Region used when the entry does not name one

        Returns:
            ModelDescriptor for the entry
        """
        if isinstance(raw, str):
            return cls(model_id=raw, region=default_region)

        if isinstance(raw, Mapping):
            if "modelId" not in raw:
                raise ValueError(f"Model entry is missing 'modelId': {raw}")
            return cls(
                model_id=raw["modelId"],
                region=raw.get("region") or default_region,
            )

        raise ValueError(
            f"Model entry must be a string or an object with 'modelId'. Got: {raw!r}"
        )


def _parse_group(
    raw_group: Optional[List[Any]], default_region: str, group_name: str
) -> List[ModelDescriptor]:
    if raw_group is None:
        return []
    if not isinstance(raw_group, list):
        raise ValueError(f"{group_name} must be a list. Got: {type(raw_group).__name__}")
    return [ModelDescriptor.parse(entry, default_region) for entry in raw_group]


@dataclass
class ProcessedStackInput:
    """Processed stack parameters consumed by the inference profile stacks."""

    # Suffix appended to every profile name, e.g. "-dev"
    env: str = ""

    # Region assumed for model entries that do not specify one
    model_region: str = DEFAULT_MODEL_REGION

    # Model groups, processed identically
    model_ids: List[ModelDescriptor] = field(default_factory=list)
    image_generation_model_ids: List[ModelDescriptor] = field(default_factory=list)
    video_generation_model_ids: List[ModelDescriptor] = field(default_factory=list)
    speech_to_speech_model_ids: List[ModelDescriptor] = field(default_factory=list)

    def __post_init__(self):
        """Validate configuration parameters after initialization."""
        if self.env is None:
            self.env = ""
        if not isinstance(self.env, str):
            raise ValueError(f"Environment tag must be a string. Got: {self.env!r}")
        if not isinstance(self.model_region, str) or not self.model_region.strip():
            raise ValueError("Model region cannot be empty")

    def all_model_ids(self) -> List[ModelDescriptor]:
        """Return every descriptor, general models first."""
        return [
            *self.model_ids,
            *self.image_generation_model_ids,
            *self.video_generation_model_ids,
            *self.speech_to_speech_model_ids,
        ]

    def model_regions(self) -> List[str]:
        """Return the distinct regions of all descriptors in first-seen order."""
        regions: List[str] = []
        for descriptor in self.all_model_ids():
            if descriptor.region not in regions:
                regions.append(descriptor.region)
        return regions

    @classmethod
    def from_context(cls, node: Node) -> "ProcessedStackInput":
        """Load stack input from CDK context values."""
        model_region = node.try_get_context("modelRegion") or DEFAULT_MODEL_REGION

        return cls(
            env=node.try_get_context("env") or "",
            model_region=model_region,
            model_ids=_parse_group(
                node.try_get_context("modelIds"), model_region, "modelIds"
            ),
            image_generation_model_ids=_parse_group(
                node.try_get_context("imageGenerationModelIds"),
                model_region,
                "imageGenerationModelIds",
            ),
            video_generation_model_ids=_parse_group(
                node.try_get_context("videoGenerationModelIds"),
                model_region,
                "videoGenerationModelIds",
            ),
            speech_to_speech_model_ids=_parse_group(
                node.try_get_context("speechToSpeechModelIds"),
                model_region,
                "speechToSpeechModelIds",
            ),
        )
