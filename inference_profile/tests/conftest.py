"""
Pytest configuration and shared fixtures for inference profile stack tests.
"""
import pytest
import warnings
import aws_cdk as cdk
from aws_cdk.assertions import Template
from inference_profile.inference_profile_stack import ApplicationInferenceProfileStack
from inference_profile.stack_input import ModelDescriptor, ProcessedStackInput

# Suppress warnings at the module level
warnings.filterwarnings("ignore", category=DeprecationWarning)
warnings.filterwarnings("ignore", category=PendingDeprecationWarning)
warnings.filterwarnings("ignore", category=UserWarning)
warnings.filterwarnings("ignore", category=FutureWarning)
warnings.filterwarnings("ignore", category=ResourceWarning)

# Suppress specific AWS/CDK warnings
warnings.filterwarnings("ignore", message=".*deprecated.*")
warnings.filterwarnings("ignore", message=".*jsii.*")
warnings.filterwarnings("ignore", message=".*constructs.*")
warnings.filterwarnings("ignore", message=".*CDK.*")

TEST_ACCOUNT = "123456789012"
TEST_REGION = "us-east-1"


@pytest.fixture(autouse=True)
def suppress_warnings():
    """Automatically suppress warnings for all tests."""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        yield


@pytest.fixture
def app():
    """Create a CDK app for testing."""
    return cdk.App()


@pytest.fixture
def test_env():
    """Create a concrete deployment environment in the test region."""
    return cdk.Environment(account=TEST_ACCOUNT, region=TEST_REGION)


@pytest.fixture
def empty_params():
    """Create stack input with no models configured."""
    return ProcessedStackInput(env="-dev")


@pytest.fixture
def test_params():
    """Create stack input with models in every group and two regions."""
    return ProcessedStackInput(
        env="-dev",
        model_ids=[
            ModelDescriptor("us.anthropic.claude-3-5-sonnet-20241022-v2:0", TEST_REGION),
            ModelDescriptor("anthropic.claude-3-haiku-20240307-v1:0", TEST_REGION),
            ModelDescriptor("eu.anthropic.claude-3-7-sonnet-20250219-v1:0", "eu-west-1"),
        ],
        image_generation_model_ids=[
            ModelDescriptor("amazon.nova-canvas-v1:0", TEST_REGION),
        ],
        video_generation_model_ids=[
            ModelDescriptor("amazon.nova-reel-v1:1", TEST_REGION),
        ],
        speech_to_speech_model_ids=[
            ModelDescriptor("amazon.nova-sonic-v1:0", "eu-north-1"),
        ],
    )


@pytest.fixture
def stack_with_test_params(app, test_params, test_env):
    """Create an inference profile stack with models in the test region."""
    return ApplicationInferenceProfileStack(
        app, "TestInferenceProfileStack", params=test_params, env=test_env
    )


@pytest.fixture
def stack_with_empty_params(app, empty_params, test_env):
    """Create an inference profile stack without any models."""
    return ApplicationInferenceProfileStack(
        app, "TestInferenceProfileStack", params=empty_params, env=test_env
    )


@pytest.fixture
def template_from_test_stack(stack_with_test_params):
    """Create a CloudFormation template from the test stack."""
    return Template.from_stack(stack_with_test_params)


@pytest.fixture
def template_from_empty_stack(stack_with_empty_params):
    """Create a CloudFormation template from the empty stack."""
    return Template.from_stack(stack_with_empty_params)
