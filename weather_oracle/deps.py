# ABOUTME: HTTP client factory for the geocoding and forecast calls.
# ABOUTME: Single attempt by default; opt-in tenacity retries through pydantic-ai's transport.

import httpx
from pydantic_ai.retries import AsyncTenacityTransport, RetryConfig, wait_retry_after
from tenacity import retry_if_exception_type, stop_after_attempt


def create_http_client(attempts: int = 1) -> httpx.AsyncClient:
    """Create an httpx client for Open-Meteo requests.

    With ``attempts`` above one, connection errors, timeouts and 429/5xx responses are
    retried with backoff that honours ``Retry-After``. The default makes exactly one
    round trip per call.
    """
    if attempts <= 1:
        return httpx.AsyncClient()

    transport = AsyncTenacityTransport(
        RetryConfig(
            retry=retry_if_exception_type((httpx.ConnectError, httpx.ReadTimeout, httpx.HTTPStatusError)),
            wait=wait_retry_after(max_wait=30),
            stop=stop_after_attempt(attempts),
            reraise=True,
        ),
        validate_response=_raise_for_retryable_status,
    )
    return httpx.AsyncClient(transport=transport)


def _raise_for_retryable_status(response: httpx.Response) -> None:
    # 4xx other than 429 will not change on retry; let the caller see the response.
    if response.status_code == 429 or response.status_code >= 500:
        response.raise_for_status()
