"""HTTP metadata provider backed by the analyzer REST controller."""

from __future__ import annotations

from typing import Any

import requests

from analyzer_core.collectors import MetadataError


class MetadataClient:
    """Calls one endpoint per controller operation and returns decoded JSON.

    List endpoints may answer with a bare JSON list or with an envelope of the
    form ``{"data": [...]}``. Any transport failure, error status or
    undecodable body is raised as :class:`MetadataError` with a readable
    message, preferring the ``message`` the server put in its error body.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def get_omni_scripts(self) -> list[dict[str, Any]] | None:
        return self._list("getOmniScripts")

    def get_data_raptors(self) -> list[dict[str, Any]] | None:
        return self._list("getDataRaptors")

    def get_integration_procedures(self) -> list[dict[str, Any]] | None:
        return self._list("getIntegrationProcedures")

    def get_flex_cards(self) -> list[dict[str, Any]] | None:
        return self._list("getFlexCards")

    def get_lightning_web_components(self) -> list[dict[str, Any]] | None:
        return self._list("getLightningWebComponents")

    def get_flows(self) -> list[dict[str, Any]] | None:
        return self._list("getFlows")

    def get_component_dependencies(self, component_id: str, component_type: str) -> Any:
        payload = self._request_json(
            "getComponentDependencies",
            params={"componentId": component_id, "componentType": component_type},
        )
        if isinstance(payload, dict) and set(payload) == {"data"}:
            return payload["data"]
        return payload

    def _list(self, operation: str) -> list[dict[str, Any]] | None:
        payload = self._request_json(operation, params=None)
        if isinstance(payload, dict):
            payload = payload.get("data")
        if payload is None:
            return None
        if not isinstance(payload, list):
            raise MetadataError(f"Unexpected payload shape from {operation}")
        return payload

    def _request_json(self, operation: str, params: dict[str, Any] | None) -> Any:
        url = f"{self.base_url}/{operation}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise MetadataError(f"request to {operation} failed: {exc}") from exc

        if response.status_code >= 400:
            raise MetadataError(_error_message(response, operation))

        try:
            return response.json()
        except ValueError as exc:
            raise MetadataError(f"{operation} did not return valid JSON") from exc


def _error_message(response: Any, operation: str) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, list) and body and isinstance(body[0], dict):
        body = body[0]
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"{operation} failed with status {response.status_code}"
