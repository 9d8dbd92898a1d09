"""In-process client talking to a dispatcher through JSON text."""

from __future__ import annotations

import json
from collections.abc import Iterator

from ..models.agent_card import AgentCard
from ..protocols.jsonrpc import JsonRpcRequest, JsonRpcResponse
from ..server.dispatcher import JsonRpcDispatcher
from .base import A2AClient


class LocalA2AClient(A2AClient):
    """
    Client for an agent living in the same process.

    Every request and response is serialized to JSON text and parsed back, so
    the exchange goes through exactly the wire format a remote agent would see.
    """

    def __init__(self, dispatcher: JsonRpcDispatcher, agent_url: str | None = None) -> None:
        super().__init__(agent_url or dispatcher.server.agent_card.url)
        self.dispatcher = dispatcher

    def discover(self) -> AgentCard:
        self.agent_card = AgentCard.from_json(self.dispatcher.server.agent_card.to_json())
        return self.agent_card

    def send_request(self, request: JsonRpcRequest) -> JsonRpcResponse:
        data = self.dispatcher.handle_payload(request.to_json())
        if data is None:
            raise ValueError(f"No response for notification {request.method!r}")
        return self.parse_response(json.loads(json.dumps(data)))

    def send_streaming_request(self, request: JsonRpcRequest) -> Iterator[JsonRpcResponse]:
        parsed = JsonRpcRequest.from_json(request.to_json())
        for response in self.dispatcher.stream_request(parsed):
            yield JsonRpcResponse.from_json(response.to_json())
