"""Tests for the remote translation pipeline client: protocol, retries and error mapping"""

import pytest
import requests

from cultura.bhashini import BhashiniClient
from cultura.errors import AuthenticationError, NetworkError, RateLimitError, ServiceError
from conftest import FakeResponse, FakeSession

PIPELINE = {
    "pipelineResponseConfig": [{"taskType": "translation", "config": [{"serviceId": "ai4bharat/indictrans"}]}],
    "pipelineInferenceAPIEndPoint": {
        "callbackUrl": "https://inference.example.test/compute",
        "inferenceApiKey": {"name": "Authorization", "value": "inference-key"},
    },
}

COMPUTE = {"pipelineResponse": [{"taskType": "translation", "output": [{"source": "Festival", "target": "উৎসৱ"}]}]}


def make_client(outcomes=(), **kwargs):
    sleeps = []
    session = FakeSession(outcomes)
    client = BhashiniClient(
        user_id=kwargs.pop("user_id", "user-1"),
        api_key=kwargs.pop("api_key", "ulca-key"),
        session=session,
        sleep=sleeps.append,
        **kwargs,
    )
    return client, session, sleeps


class TestProtocol:
    """Pipeline discovery followed by compute."""

    def test_two_step_translation(self):
        client, session, _ = make_client([FakeResponse(200, PIPELINE), FakeResponse(200, COMPUTE)])
        assert client.translate("Festival", "en", "as") == "উৎসৱ"

        discovery, compute = session.calls
        assert discovery["method"] == "POST"
        assert discovery["headers"] == {"userID": "user-1", "ulcaApiKey": "ulca-key"}
        task = discovery["json"]["pipelineTasks"][0]
        assert task["config"]["language"] == {"sourceLanguage": "en", "targetLanguage": "as"}
        assert discovery["json"]["pipelineRequestConfig"] == {"pipelineId": "64392f96daac500b55c543cd"}

        assert compute["url"] == "https://inference.example.test/compute"
        assert compute["headers"] == {"Authorization": "inference-key"}
        assert compute["json"]["pipelineTasks"] == PIPELINE["pipelineResponseConfig"]
        assert compute["json"]["inputData"] == {"input": [{"source": "Festival"}]}

    def test_every_request_has_a_timeout(self):
        client, session, _ = make_client([FakeResponse(200, PIPELINE), FakeResponse(200, COMPUTE)])
        client.translate("Festival", "en", "as")
        assert all(call["timeout"] == 10 for call in session.calls)

    def test_default_compute_url_without_callback(self):
        pipeline = {"pipelineResponseConfig": PIPELINE["pipelineResponseConfig"]}
        client, session, _ = make_client([FakeResponse(200, pipeline), FakeResponse(200, COMPUTE)],
                                         compute_url="https://compute.example.test")
        client.translate("Festival", "en", "as")
        assert session.calls[1]["url"] == "https://compute.example.test"
        assert session.calls[1]["headers"] == {"Authorization": ""}

    def test_missing_credentials_issue_no_request(self):
        client, session, _ = make_client(user_id="", api_key="")
        with pytest.raises(AuthenticationError):
            client.translate("Festival", "en", "as")
        assert session.calls == []

    def test_missing_pipeline_config(self):
        client, _, _ = make_client([FakeResponse(200, {})])
        with pytest.raises(ServiceError) as exc:
            client.translate("Festival", "en", "as")
        assert exc.value.code == "NO_PIPELINE"

    @pytest.mark.parametrize("payload", [
        {},
        {"pipelineResponse": []},
        {"pipelineResponse": [{"output": []}]},
        {"pipelineResponse": [{"output": [{"target": ""}]}]},
    ])
    def test_malformed_compute_response(self, payload):
        client, _, _ = make_client([FakeResponse(200, PIPELINE), FakeResponse(200, payload)])
        with pytest.raises(ServiceError) as exc:
            client.translate("Festival", "en", "as")
        assert exc.value.code == "INVALID_RESPONSE"

    @pytest.mark.parametrize("payload", [
        [],
        "oops",
        42,
        {**PIPELINE, "pipelineInferenceAPIEndPoint": ["not", "a", "dict"]},
        {**PIPELINE, "pipelineInferenceAPIEndPoint": {"inferenceApiKey": "inference-key"}},
        {**PIPELINE, "pipelineInferenceAPIEndPoint": {"inferenceApiKey": {"value": 7}}},
    ])
    def test_malformed_discovery_response(self, payload):
        client, session, _ = make_client([FakeResponse(200, payload)])
        with pytest.raises(ServiceError) as exc:
            client.translate("Festival", "en", "as")
        assert exc.value.code == "INVALID_RESPONSE"
        assert len(session.calls) == 1

    @pytest.mark.parametrize("payload", [["x"], {"pipelineResponse": [{"output": [{"target": ["x"]}]}]}])
    def test_non_object_compute_response(self, payload):
        client, _, _ = make_client([FakeResponse(200, PIPELINE), FakeResponse(200, payload)])
        with pytest.raises(ServiceError) as exc:
            client.translate("Festival", "en", "as")
        assert exc.value.code == "INVALID_RESPONSE"

    def test_non_json_response(self):
        client, _, _ = make_client([FakeResponse(200, None)])
        with pytest.raises(ServiceError):
            client.search_pipeline("en", "as")


class TestRetryPolicy:
    """Up to 3 retries with 1s, 2s, 4s backoff for transient failures."""

    def test_timeouts_retried_with_exponential_backoff(self):
        client, session, sleeps = make_client([requests.exceptions.Timeout()] * 4)
        with pytest.raises(NetworkError):
            client.search_pipeline("en", "as")
        assert len(session.calls) == 4
        assert sleeps == [1.0, 2.0, 4.0]

    def test_recovers_after_transient_failure(self):
        client, session, sleeps = make_client([
            requests.exceptions.ConnectionError("reset"),
            FakeResponse(429),
            FakeResponse(200, PIPELINE),
        ])
        assert client.search_pipeline("en", "as") == PIPELINE
        assert sleeps == [1.0, 2.0]

    def test_rate_limit_classified(self):
        client, _, _ = make_client([FakeResponse(429)] * 4)
        with pytest.raises(RateLimitError) as exc:
            client.search_pipeline("en", "as")
        assert exc.value.status == 429

    @pytest.mark.parametrize("status", [401, 403])
    def test_auth_failure_not_retried(self, status):
        client, session, sleeps = make_client([FakeResponse(status)] * 4)
        with pytest.raises(AuthenticationError) as exc:
            client.search_pipeline("en", "as")
        assert exc.value.status == status
        assert len(session.calls) == 1
        assert sleeps == []

    def test_server_errors_retried(self):
        client, session, _ = make_client([FakeResponse(502)] * 4)
        with pytest.raises(ServiceError) as exc:
            client.search_pipeline("en", "as")
        assert exc.value.status == 502
        assert len(session.calls) == 4

    def test_client_errors_not_retried(self):
        client, session, _ = make_client([FakeResponse(404)])
        with pytest.raises(ServiceError):
            client.search_pipeline("en", "as")
        assert len(session.calls) == 1

    def test_retry_count_configurable(self):
        client, session, sleeps = make_client([requests.exceptions.Timeout()] * 2, max_retries=1,
                                              retry_delay=0.5)
        with pytest.raises(NetworkError):
            client.search_pipeline("en", "as")
        assert len(session.calls) == 2
        assert sleeps == [0.5]


class TestHealth:
    """check_health never raises."""

    def test_unconfigured(self):
        client, session, _ = make_client(user_id="", api_key="")
        assert client.check_health()["status"] == "unconfigured"
        assert session.calls == []

    def test_healthy(self):
        client, session, _ = make_client([FakeResponse(200, {})])
        assert client.check_health() == {"available": True, "status": "healthy"}
        assert session.calls[0]["method"] == "GET"

    def test_unhealthy(self):
        client, _, _ = make_client([FakeResponse(401)])
        health = client.check_health()
        assert health["available"] is False
        assert health["status"] == "unhealthy"
        assert "error" in health
