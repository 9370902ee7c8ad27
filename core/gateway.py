# =============================================================================
# core/gateway.py  —  The one outbound HTTP call
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends exactly one form-encoded POST to <WHMCS_URL>/includes/api.php per
#   tool call and hands back the parsed JSON body.  One attempt, no retry,
#   no timeout (the request waits as long as WHMCS takes).
#
# FORM BODY:
#   {action, identifier, secret, accesskey, responsetype="json"} followed by
#   the caller's params.  Params are merged LAST, so a param that shares a
#   name with a credential field replaces it.
#
# FAILURES (all subclasses of GatewayError, see core/exceptions.py):
#   - non-2xx status        → RemoteStatusError (status_code kept)
#   - connection/URL errors → TransportError
#   - body is not JSON      → InvalidResponseError
#   WHMCS's own {"result": "error"} payloads arrive with HTTP 200 and are NOT
#   failures here; they are returned like any other payload.
# =============================================================================

import logging
from typing import Any, Mapping, Optional

import httpx

from core.config import WHMCSConfig
from core.exceptions import InvalidResponseError, RemoteStatusError, TransportError

logger = logging.getLogger(__name__)

API_PATH = "/includes/api.php"
RESPONSE_TYPE = "json"


class WHMCSGateway:
    """Stateless apart from the immutable config it was built with."""

    def __init__(
        self,
        config: WHMCSConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        # Tests pass an httpx.MockTransport here; None means real network I/O.
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self.config.url.rstrip("/") + API_PATH

    def build_form(self, action: str, params: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        form: dict[str, Any] = {
            "action": action,
            "identifier": self.config.identifier,
            "secret": self.config.secret,
            "accesskey": self.config.accesskey,
            "responsetype": RESPONSE_TYPE,
        }
        form.update(params or {})
        return form

    async def call(self, action: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST `action` with `params` and return the decoded JSON body."""
        form = self.build_form(action, params)
        logger.debug("POST %s action=%s fields=%s", self.endpoint, action, sorted(params or {}))

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
                response = await client.post(self.endpoint, data=form)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise RemoteStatusError(status, f"HTTP {status} {e.response.reason_phrase}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(f"response is not valid JSON ({e})") from e
