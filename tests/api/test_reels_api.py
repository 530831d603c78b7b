"""
Tests for the reel intake endpoint.

Covers:
- Acceptance and run id assignment
- Request decoding errors (400) and method checks (405)
- Queue failures surfacing to the caller
"""

import json
import uuid
import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock
from botocore.exceptions import EndpointConnectionError

from reel_gateway.api.main import create_app
from reel_gateway.api.dependencies.services import get_publisher
from reel_gateway.bus.base import CommandPublisher, SerializationError, TransportError
from reel_gateway.bus.sqs import SQSPublisher
from reel_gateway.config.environment import Environment, EnvironmentConfig
from reel_gateway.config.secrets import SecretBundle

QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/reel-commands-test"


@pytest.fixture
def settings():
    return EnvironmentConfig(
        environment=Environment.DEV,
        sqs_queue_url=QUEUE_URL,
        s3_bucket="bucket-dev",
        ecs_cluster="cluster-dev",
        cluster_name="api-gateway-dev",
    )


@pytest.fixture
def sqs_client():
    client = Mock()
    client.send_message.return_value = {"MessageId": "msg-1"}
    return client


@pytest.fixture
def client(settings, sqs_client):
    """Test client wired to an SQS publisher over a mocked boto3 client."""
    app = create_app(
        settings=settings,
        secrets=SecretBundle(),
        publisher=SQSPublisher(QUEUE_URL, sqs_client),
    )
    return TestClient(app)


@pytest.fixture
def sample_reel_request():
    """Digital marketing ICP example."""
    return {
        "projectId": "proj_789",
        "icp": {
            "industry": "Digital marketing",
            "audiencePainPoints": ["Creating consistent content takes too much time"],
            "desiredOutcome": "Effortlessly generate high-quality AI twin reels to scale content production"
        },
        "idea": "Show how AI twins let you create reels in minutes instead of hours",
        "fluxModel": {
            "loraUrl": "https://v3.fal.media/files/elephant/T6tBgeMb8efOTD9xv2cif_pytorch_lora_weights.safetensors",
            "cfgScale": 8,
            "steps": 30
        },
        "fluxPrompt": {
            "prompt": "Professional digital marketer in modern home office setup",
            "negativePrompt": "blurry, low-resolution",
            "aspectRatio": "9:16",
            "batchSize": 4
        },
        "captionPreferences": {
            "hookStyle": "question",
            "callToAction": {"type": "comment", "keyword": "TWIN"}
        }
    }


def _published(sqs_client):
    kwargs = sqs_client.send_message.call_args.kwargs
    return json.loads(kwargs["MessageBody"]), kwargs["MessageAttributes"]["runId"]["StringValue"]


class TestCreateReel:
    """POST /reels"""

    def test_accepts_request_and_returns_run_id(self, client, sqs_client, sample_reel_request):
        response = client.post("/reels", json=sample_reel_request)

        assert response.status_code == 202
        run_id = response.json()["runId"]
        assert run_id
        assert str(uuid.UUID(run_id)) == run_id

        sqs_client.send_message.assert_called_once()
        body, tagged_run_id = _published(sqs_client)
        assert tagged_run_id == run_id
        assert body == sample_reel_request

    def test_minimal_example(self, client, sqs_client):
        payload = {
            "projectId": "proj_789",
            "icp": {"industry": "Digital marketing", "audiencePainPoints": ["time"]},
            "idea": "x",
            "fluxModel": {"loraUrl": "https://example.com/lora.safetensors"},
            "fluxPrompt": {"prompt": "y"}
        }

        response = client.post("/reels", json=payload)

        assert response.status_code == 202
        assert len(response.json()["runId"]) == 36
        body, _ = _published(sqs_client)
        assert body == payload

    def test_each_request_gets_new_run_id(self, client, sample_reel_request):
        first = client.post("/reels", json=sample_reel_request).json()["runId"]
        second = client.post("/reels", json=sample_reel_request).json()["runId"]

        assert first != second

    def test_missing_fields_are_not_rejected(self, client, sqs_client):
        response = client.post("/reels", json={"projectId": "proj_1"})

        assert response.status_code == 202
        body, _ = _published(sqs_client)
        assert body == {"projectId": "proj_1"}

    def test_published_body_matches_what_was_sent(self, client, sqs_client):
        payload = {
            "projectId": "proj_1",
            "fluxModel": {"loraUrl": "https://example.com/lora", "cfgScale": 8, "steps": 30},
            "klingPreferences": {"guidanceScale": 0.5, "durationSeconds": 5},
            "campaign": None,
            "icp": {"industry": "Retail", "desiredOutcome": None},
        }

        response = client.post("/reels", json=payload)

        assert response.status_code == 202
        raw = sqs_client.send_message.call_args.kwargs["MessageBody"]
        assert json.loads(raw) == payload
        assert '"cfgScale":8,' in raw
        assert '"durationSeconds":5' in raw
        assert '"campaign":null' in raw

    def test_invalid_json(self, client, sqs_client):
        response = client.post(
            "/reels",
            content=b"invalid json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Invalid request body"
        assert data["error_code"] == "invalid_request"
        sqs_client.send_message.assert_not_called()

    @pytest.mark.parametrize("payload", [
        [],
        "a string",
        {"icp": "not an object"},
        {"icp": {"audiencePainPoints": "time"}},
        {"fluxPrompt": {"batchSize": "four"}},
        {"projectId": 123},
        {"fluxModel": {"steps": "30"}},
        {"fluxModel": {"steps": 30.5}},
        {"fluxModel": {"cfgScale": "8"}},
        {"fluxPrompt": {"batchSize": True}},
        {"klingPreferences": {"durationSeconds": False}},
        {"icp": {"audiencePainPoints": [1, 2]}},
        {"idea": True},
    ])
    def test_wrong_shape(self, client, sqs_client, payload):
        response = client.post("/reels", json=payload)

        assert response.status_code == 400
        sqs_client.send_message.assert_not_called()

    def test_empty_body(self, client, sqs_client):
        response = client.post("/reels", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        sqs_client.send_message.assert_not_called()

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH"])
    def test_method_not_allowed(self, client, method):
        response = client.request(method, "/reels")

        assert response.status_code == 405
        assert response.json()["error_code"] == "method_not_allowed"
        assert "POST" in response.headers["allow"]


class TestCreateReelPublishFailures:
    """Queue failures are reported to the caller"""

    def test_queue_unreachable_returns_503(self, client, sqs_client, sample_reel_request):
        sqs_client.send_message.side_effect = EndpointConnectionError(endpoint_url=QUEUE_URL)

        response = client.post("/reels", json=sample_reel_request)

        assert response.status_code == 503
        data = response.json()
        assert "runId" not in data
        assert data["error"] == "Failed to queue reel request"
        assert QUEUE_URL not in response.text

    def test_serialization_failure_returns_500(self, settings, sample_reel_request):
        publisher = Mock(spec=CommandPublisher)
        publisher.publish.side_effect = SerializationError("bad payload")
        client = TestClient(create_app(settings=settings, publisher=publisher))

        response = client.post("/reels", json=sample_reel_request)

        assert response.status_code == 500
        assert response.json()["error_code"] == "internal_error"
        assert "bad payload" not in response.text

    def test_publisher_receives_run_id_and_request(self, settings, sample_reel_request):
        publisher = Mock(spec=CommandPublisher)
        app = create_app(settings=settings)
        app.dependency_overrides[get_publisher] = lambda: publisher
        client = TestClient(app)

        response = client.post("/reels", json=sample_reel_request)

        assert response.status_code == 202
        run_id, payload = publisher.publish.call_args.args
        assert run_id == response.json()["runId"]
        assert payload.project_id == "proj_789"
        assert payload.flux_prompt.batch_size == 4

    def test_transport_error_from_any_publisher(self, settings, sample_reel_request):
        publisher = Mock(spec=CommandPublisher)
        publisher.publish.side_effect = TransportError("down")
        client = TestClient(create_app(settings=settings, publisher=publisher))

        assert client.post("/reels", json=sample_reel_request).status_code == 503

    def test_unconfigured_publisher_returns_503(self, settings, sample_reel_request):
        client = TestClient(create_app(settings=settings))

        response = client.post("/reels", json=sample_reel_request)

        assert response.status_code == 503
        assert response.json()["error_code"] == "service_unavailable"
