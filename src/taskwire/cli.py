from __future__ import annotations

import json
import logging
import pathlib
import sys
from enum import Enum
from typing import Any, Optional

import typer
from pydantic import ValidationError

from taskwire.config import get_settings
from taskwire.errors import ERROR_MESSAGES
from taskwire.models import (
    AgentCard,
    AgentCardBuilder,
    Artifact,
    Message,
    PushNotificationConfig,
    Task,
    WireModel,
    part_from_dict,
)
from taskwire.protocols import JsonRpcRequest, JsonRpcResponse
from taskwire.server import InMemoryA2AServer, JsonRpcDispatcher

app = typer.Typer(no_args_is_help=True, help="A2A task-exchange data model tools")


class Kind(str, Enum):
    request = "request"
    response = "response"
    task = "task"
    message = "message"
    artifact = "artifact"
    agent_card = "agent-card"
    part = "part"
    push_config = "push-config"


_MODELS: dict[Kind, type[WireModel]] = {
    Kind.request: JsonRpcRequest,
    Kind.response: JsonRpcResponse,
    Kind.task: Task,
    Kind.message: Message,
    Kind.artifact: Artifact,
    Kind.agent_card: AgentCard,
    Kind.push_config: PushNotificationConfig,
}


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override TASKWIRE_LOG_LEVEL for this run."
    ),
) -> None:
    """Configure logging for every command."""
    settings = get_settings()
    logging.basicConfig(
        level=(log_level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
        stream=sys.stderr,
    )


def _read_text(path: pathlib.Path | None) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _read_json(path: pathlib.Path | None) -> Any:
    try:
        return json.loads(_read_text(path))
    except json.JSONDecodeError as exc:
        typer.echo(f"Invalid JSON: {exc}", err=True)
        raise typer.Exit(1) from exc


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


@app.command("validate")
def validate(
    kind: Kind = typer.Argument(..., help="Entity type of the document."),
    path: Optional[pathlib.Path] = typer.Argument(
        None, help="JSON file to read ('-' or omitted reads stdin)."
    ),
) -> None:
    """Parse a JSON document as an A2A entity and print its canonical form."""
    data = _read_json(path)
    try:
        if kind is Kind.part:
            entity: WireModel = part_from_dict(data)
        else:
            entity = _MODELS[kind].from_dict(data)
    except ValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    _echo_json(entity.to_dict())


@app.command("error-codes")
def error_codes() -> None:
    """List the JSON-RPC error codes used by the protocol."""
    for code, message in ERROR_MESSAGES.items():
        typer.echo(f"{code:>7}  {message}")


@app.command("agent-card")
def agent_card(path: pathlib.Path = typer.Argument(..., help="Agent card JSON file.")) -> None:
    """Validate an agent card and show where it is served."""
    try:
        card = AgentCard.from_dict(_read_json(path))
    except ValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    typer.echo(f"Served at {card.url.rstrip('/')}{get_settings().AGENT_CARD_PATH}", err=True)
    _echo_json(card.to_dict())


@app.command("dispatch")
def dispatch(
    path: Optional[pathlib.Path] = typer.Argument(
        None, help="JSON-RPC request file ('-' or omitted reads stdin)."
    ),
) -> None:
    """Answer a JSON-RPC request with an in-memory echo agent."""
    card = (
        AgentCardBuilder("Echo Agent", "http://localhost:8080/a2a", "1.0.0")
        .with_description("Echoes back the text of every message")
        .add_skill("echo", "Echo", description="Echoes back your message")
        .build()
    )
    response = JsonRpcDispatcher(InMemoryA2AServer(card)).handle_payload(_read_text(path))
    if response is not None:
        _echo_json(response)


if __name__ == "__main__":
    app()
