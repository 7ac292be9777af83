"""play.ht HTTP transport: the ONLY path to the network.

Auth: AUTHORIZATION: <secret key> + X-USER-ID: <user id>, attached to every call.
Credentials are read once at construction and never written afterwards, so
one Transport is safe to share between concurrent calls.

Failures:
  httpx.TransportError (DNS, TLS, timeout, reset) → TransportError
  non-2xx status                                   → ApiError
  undecodable / schema-mismatched body             → DecodeError
Nothing is retried here; callers retry if they want to.
"""
import json
import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from playht.config.settings import Settings, get_settings
from playht.config.validators import validate_base_url, validate_credentials
from playht.core.exceptions import ApiError, DecodeError, TransportError
from playht.observability.redaction import redact_headers

logger = logging.getLogger(__name__)

USER_ID_HEADER = "X-USER-ID"

APPLICATION_JSON = "application/json"
MULTIPART_FORM = "multipart/form-data"
TEXT_PLAIN = "text/plain"
TEXT_EVENT_STREAM = "text/event-stream"
AUDIO_MPEG = "audio/mpeg"

_UNSET: Any = object()

# Keys the API (and its proxies) use for the human-readable error message
_ERROR_MESSAGE_KEYS = ("error_message", "message", "error", "detail")


def _extract_error(body: Any) -> tuple:
    """Pull (message, error_id) out of a JSON error envelope."""
    if not isinstance(body, dict):
        return None, None
    error_id = body.get("error_id")
    for key in _ERROR_MESSAGE_KEYS:
        value = body.get(key)
        if isinstance(value, str) and value:
            return value, error_id
        if isinstance(value, dict):
            nested = value.get("message") or value.get("error_message")
            if nested:
                return str(nested), error_id or value.get("error_id")
    return None, error_id


def api_error_from_response(response: httpx.Response) -> ApiError:
    """Build an ApiError from a non-2xx response whose body has been read."""
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = response.text or None
    message, error_id = _extract_error(body)
    return ApiError(
        status_code=response.status_code,
        message=message or response.reason_phrase or "API request failed",
        error_id=error_id,
        body=body,
    )


def decode_json(response: httpx.Response, model: Any) -> Any:
    """Decode a successful response into a pydantic model (or list[...] type)."""
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"invalid JSON from {response.request.url.path}: {e}", raw=response.text[:500]) from e
    try:
        if isinstance(model, type) and issubclass(model, BaseModel):
            return model.model_validate(payload)
        return TypeAdapter(model).validate_python(payload)
    except ValidationError as e:
        raise DecodeError(
            f"unexpected response shape from {response.request.url.path}: {e.error_count()} error(s)",
            raw=response.text[:500],
        ) from e


class Transport:
    """Authenticated async HTTP transport for the play.ht v2 API."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        user_id: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = _UNSET,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        secret_key = secret_key if secret_key is not None else settings.PLAYHT_SECRET_KEY
        user_id = user_id if user_id is not None else settings.PLAYHT_USER_ID
        self.base_url = (base_url or settings.PLAYHT_BASE_URL).rstrip("/")
        validate_credentials(secret_key, user_id)
        validate_base_url(self.base_url)

        self.headers: Dict[str, str] = {
            "AUTHORIZATION": secret_key,
            USER_ID_HEADER: user_id,
            "User-Agent": settings.PLAYHT_USER_AGENT,
        }
        if timeout is _UNSET:
            timeout = settings.PLAYHT_TIMEOUT_S

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
        )
        logger.debug("[PlayHT:Transport] Initialized base_url=%s timeout=%s", self.base_url, timeout)

    # ── lifecycle ────────────────────────────────────────────────

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def remote_address(self) -> str:
        """Remote host as host:port."""
        return f"{urlparse(self.base_url).hostname}:443"

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    # ── requests ─────────────────────────────────────────────────

    def build_request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        data: Optional[Mapping[str, Any]] = None,
        files: Optional[Mapping[str, Any]] = None,
        accept: str = APPLICATION_JSON,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Request:
        """Build an authenticated request.

        Useful as an escape hatch for endpoints the resource classes do not
        wrap yet; pass the result to send().
        """
        merged = {**self.headers, "Accept": accept}
        if headers:
            merged.update(headers)
        return self._client.build_request(
            method,
            self.url(path),
            json=json,
            data=data,
            files=files,
            headers=merged,
        )

    async def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        """Send a request; return the response only if it is 2xx.

        With stream=True the body is left unread and the caller owns the
        response (must aclose() it).
        """
        logger.debug(
            "[PlayHT:Transport] %s %s headers=%s",
            request.method, request.url.path, redact_headers(request.headers),
        )
        try:
            response = await self._client.send(request, stream=stream)
        except httpx.TransportError as e:
            logger.error(
                "[PlayHT:Transport] %s %s failed: %s", request.method, request.url.path, type(e).__name__,
            )
            raise TransportError(f"{request.method} {request.url.path} failed: {str(e) or type(e).__name__}") from e

        if response.is_success:
            logger.debug(
                "[PlayHT:Transport] %s %s status=%d", request.method, request.url.path, response.status_code,
            )
            return response

        try:
            await response.aread()
        except httpx.TransportError as e:
            raise TransportError(f"{request.method} {request.url.path} failed reading error body: {e}") from e
        finally:
            await response.aclose()
        error = api_error_from_response(response)
        logger.warning(
            "[PlayHT:Transport] %s %s rejected: status=%d message=%s",
            request.method, request.url.path, error.status_code, error.message,
        )
        raise error

    async def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        return await self.send(self.build_request(method, path, **kwargs))

    async def request_json(self, method: str, path: str, model: Any, **kwargs) -> Any:
        response = await self.request(method, path, **kwargs)
        return decode_json(response, model)
