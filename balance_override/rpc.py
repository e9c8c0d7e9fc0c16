import http.client
import itertools
import json
import logging
import urllib.error
import urllib.request
from typing import Any, List, Optional

from .errors import TransportFailure

logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = "http://127.0.0.1:8545"


class JsonRpcTransport:
    """Blocking JSON-RPC 2.0 client for a local development node.

    Every call is a single POST; failures are raised as ``TransportFailure``
    and never retried, since most of the methods used here mutate state.
    """

    def __init__(self, rpc_url: str = DEFAULT_RPC_URL, timeout: float = 30):
        self.rpc_url = rpc_url
        self.timeout = timeout
        self._ids = itertools.count(1)

    def send(self, method: str, params: Optional[List[Any]] = None) -> Any:
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params or []}
        data = json.dumps(payload).encode("utf-8")
        req = urllib.request.Request(
            self.rpc_url, data=data, headers={"Content-Type": "application/json"}, method="POST"
        )
        logger.debug("-> %s %s", method, payload["params"])
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                raw = resp.read().decode("utf-8")
        except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
            raise TransportFailure(method, str(e)) from e
        except UnicodeDecodeError as e:
            raise TransportFailure(method, f"response is not utf-8: {e}") from e

        try:
            j = json.loads(raw)
        except ValueError as e:
            raise TransportFailure(method, f"malformed response: {raw[:200]!r}") from e
        if not isinstance(j, dict):
            raise TransportFailure(method, f"response is not a JSON object: {raw[:200]!r}")
        if "error" in j:
            raise TransportFailure(method, f"rpc error: {j['error']}", error=j["error"])
        if "result" not in j:
            raise TransportFailure(method, "response has no result")
        logger.debug("<- %s %s", method, j["result"])
        return j["result"]
