"""Client for the BHASHINI (ULCA) translation pipeline"""

import time
import logging
from typing import Callable, Dict, Optional

import requests
from requests.exceptions import RequestException, Timeout, ConnectionError

from . import config
from .errors import (
    AuthenticationError,
    NetworkError,
    RateLimitError,
    ServiceError,
)
from .languages import get_service_language_code

logger = logging.getLogger(__name__)


def _is_retryable(error: ServiceError) -> bool:
    """Network trouble, throttling and server-side faults are worth another try"""
    if isinstance(error, (NetworkError, RateLimitError)):
        return True
    if isinstance(error, AuthenticationError):
        return False
    return (error.status or 0) >= 500


class BhashiniClient:
    """
    Two-step translation client: pipeline discovery, then compute.

    Each HTTP call is bounded by ``timeout`` and retried up to
    ``max_retries`` times with exponential backoff (retry_delay * 2**n).
    Failures surface as ServiceError subclasses for the caller to handle.
    """

    def __init__(self, user_id: str = None, api_key: str = None,
                 session: requests.Session = None,
                 timeout: float = None, max_retries: int = None,
                 retry_delay: float = None,
                 sleep: Callable[[float], None] = time.sleep,
                 pipeline_url: str = None, compute_url: str = None,
                 pipeline_id: str = None):
        self.user_id = config.BHASHINI_USER_ID if user_id is None else user_id
        self.api_key = config.BHASHINI_API_KEY if api_key is None else api_key
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
        self.max_retries = config.MAX_RETRIES if max_retries is None else max_retries
        self.retry_delay = config.RETRY_BASE_DELAY if retry_delay is None else retry_delay
        self.pipeline_url = pipeline_url or config.BHASHINI_PIPELINE_URL
        self.compute_url = compute_url or config.BHASHINI_COMPUTE_URL
        self.pipeline_id = pipeline_id or config.BHASHINI_PIPELINE_ID
        self._sleep = sleep

        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": config.USER_AGENT})

    @property
    def is_configured(self) -> bool:
        return bool(self.user_id and self.api_key)

    def _require_credentials(self):
        if not self.is_configured:
            raise AuthenticationError(
                "BHASHINI credentials are not configured",
                details={"reason": "missing_credentials"},
            )

    # ── HTTP with retry ─────────────────────────────────────────────────────

    @staticmethod
    def _classify(response: requests.Response) -> Optional[ServiceError]:
        """Map a non-2xx response onto the error taxonomy"""
        status = response.status_code
        if status == 429:
            return RateLimitError("Rate limit exceeded", details={"status": status})
        if status in (401, 403):
            return AuthenticationError("Authentication failed", details={"status": status})
        if not response.ok:
            return ServiceError(f"HTTP error {status}", code="HTTP_ERROR", details={"status": status})
        return None

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        """Issue a request, retrying transient failures with exponential backoff"""
        attempt = 0
        while True:
            try:
                response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            except Timeout:
                error = NetworkError("Request timeout", details={"timeout": self.timeout})
            except ConnectionError as e:
                error = NetworkError(f"Connection failed: {e}")
            except RequestException as e:
                error = NetworkError(f"Request failed: {e}")
            else:
                error = self._classify(response)
                if error is None:
                    return response

            if attempt >= self.max_retries or not _is_retryable(error):
                raise error

            delay = self.retry_delay * (2 ** attempt)
            attempt += 1
            logger.debug(f"{type(error).__name__}: {error}, retrying in {delay}s "
                         f"({attempt}/{self.max_retries})")
            self._sleep(delay)

    @staticmethod
    def _json(response: requests.Response) -> Dict:
        try:
            data = response.json()
        except ValueError as e:
            raise ServiceError("Invalid JSON from translation service", code="INVALID_RESPONSE") from e
        if not isinstance(data, dict):
            raise ServiceError(f"Expected a JSON object from translation service, got {type(data).__name__}",
                               code="INVALID_RESPONSE")
        return data

    # ── Pipeline protocol ───────────────────────────────────────────────────

    def search_pipeline(self, source_lang: str, target_lang: str) -> Dict:
        """Discover the pipeline configuration for a language pair"""
        self._require_credentials()
        payload = {
            "pipelineTasks": [
                {
                    "taskType": "translation",
                    "config": {
                        "language": {
                            "sourceLanguage": get_service_language_code(source_lang),
                            "targetLanguage": get_service_language_code(target_lang),
                        }
                    },
                }
            ],
            "pipelineRequestConfig": {"pipelineId": self.pipeline_id},
        }
        headers = {"userID": self.user_id, "ulcaApiKey": self.api_key}
        response = self._request("POST", self.pipeline_url, json=payload, headers=headers)
        return self._json(response)

    def compute(self, text: str, pipeline: Dict) -> str:
        """Run the translation task described by a discovered pipeline"""
        if not isinstance(pipeline, dict):
            raise ServiceError("Malformed pipeline configuration", code="INVALID_RESPONSE")
        tasks = pipeline.get("pipelineResponseConfig")
        if not tasks:
            raise ServiceError("No translation pipeline available", code="NO_PIPELINE")

        endpoint = pipeline.get("pipelineInferenceAPIEndPoint") or {}
        if not isinstance(endpoint, dict):
            raise ServiceError("Malformed pipeline endpoint", code="INVALID_RESPONSE")
        inference_key = endpoint.get("inferenceApiKey") or {}
        if not isinstance(inference_key, dict):
            raise ServiceError("Malformed pipeline endpoint", code="INVALID_RESPONSE")
        api_key = inference_key.get("value") or ""
        url = endpoint.get("callbackUrl") or self.compute_url
        if not isinstance(api_key, str) or not isinstance(url, str):
            raise ServiceError("Malformed pipeline endpoint", code="INVALID_RESPONSE")

        payload = {
            "pipelineTasks": tasks,
            "inputData": {"input": [{"source": text}]},
        }
        response = self._request("POST", url, json=payload, headers={"Authorization": api_key})
        data = self._json(response)

        try:
            translated = data["pipelineResponse"][0]["output"][0]["target"]
        except (KeyError, IndexError, TypeError) as e:
            raise ServiceError("Invalid translation response", code="INVALID_RESPONSE") from e
        if not isinstance(translated, str) or not translated:
            raise ServiceError("Empty translation response", code="INVALID_RESPONSE")
        return translated

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        pipeline = self.search_pipeline(source_lang, target_lang)
        translated = self.compute(text, pipeline)
        logger.info(f"Remote pipeline translated {source_lang}->{target_lang} ({len(text)} chars)")
        return translated

    def check_health(self) -> Dict:
        """Probe the discovery endpoint; never raises"""
        if not self.is_configured:
            return {"available": False, "status": "unconfigured",
                    "error": "BHASHINI credentials are not configured"}
        headers = {"userID": self.user_id, "ulcaApiKey": self.api_key}
        try:
            self._request("GET", self.pipeline_url, headers=headers)
        except ServiceError as e:
            logger.warning(f"Translation service unhealthy ({type(e).__name__}): {e}")
            return {"available": False, "status": "unhealthy", "error": str(e)}
        return {"available": True, "status": "healthy"}
