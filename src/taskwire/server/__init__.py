"""
A2A server side: handler interface, JSON-RPC dispatching and task storage.

Example Usage:

    from taskwire.models import AgentCardBuilder
    from taskwire.server import InMemoryA2AServer, JsonRpcDispatcher

    card = AgentCardBuilder("Echo", "http://localhost:8080/a2a", "1.0.0").build()
    dispatcher = JsonRpcDispatcher(InMemoryA2AServer(card))
    dispatcher.handle_payload(
        '{"jsonrpc": "2.0", "id": 1, "method": "tasks/send", "params": {"id": "t-1",'
        ' "message": {"role": "user", "parts": [{"type": "text", "text": "hi"}]}}}'
    )
"""

from .base import A2AServer
from .dispatcher import JsonRpcDispatcher
from .in_memory import InMemoryA2AServer, InputRequired, TaskProcessor, echo_processor
from .task_store import InMemoryTaskStore, TaskStore

__all__ = [
    "A2AServer",
    "InMemoryA2AServer",
    "InMemoryTaskStore",
    "InputRequired",
    "JsonRpcDispatcher",
    "TaskProcessor",
    "TaskStore",
    "echo_processor",
]
