"""
A2A data model.

Core data structures:
- Part variants (TextPart, FilePart, DataPart) and FileContent
- TaskState: closed lifecycle state set with the ``terminal`` predicate
- Message and Artifact: ordered part containers
- TaskStatus and Task: the unit of work, rebuilt for every lifecycle step
- AgentCard and its nested capabilities, skills, provider and authentication
- PushNotificationConfig

Every model projects to camelCase wire dictionaries with ``to_dict()`` and is
rebuilt with ``from_dict()``.
"""

from .agent_card import (
    AgentAuthentication,
    AgentCapabilities,
    AgentCard,
    AgentCardBuilder,
    AgentProvider,
    AgentSkill,
)
from .artifact import Artifact
from .base import WireModel
from .clock import Clock, fixed_clock, format_timestamp, system_clock
from .message import ROLES, Message, Role
from .parts import PART_TYPES, DataPart, FileContent, FilePart, Part, TextPart, part_from_dict
from .push_notification import PushNotificationConfig
from .task import Task, TaskStatus
from .task_state import TERMINAL_STATES, TaskState

__all__ = [
    # Base
    "WireModel",
    # Clock
    "Clock",
    "fixed_clock",
    "format_timestamp",
    "system_clock",
    # Parts
    "DataPart",
    "FileContent",
    "FilePart",
    "Part",
    "PART_TYPES",
    "TextPart",
    "part_from_dict",
    # Messages and artifacts
    "Artifact",
    "Message",
    "Role",
    "ROLES",
    # Task lifecycle
    "Task",
    "TaskState",
    "TaskStatus",
    "TERMINAL_STATES",
    # Agent discovery
    "AgentAuthentication",
    "AgentCapabilities",
    "AgentCard",
    "AgentCardBuilder",
    "AgentProvider",
    "AgentSkill",
    # Push notifications
    "PushNotificationConfig",
]
