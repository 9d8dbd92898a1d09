"""
A2A Agent Card - agent metadata and capability descriptor.

An AgentCard is the discovery document of an agent: who provides it, where it
is reachable, which optional protocol features it supports and which skills it
offers. It is conventionally served at ``/.well-known/agent.json`` and is
normally built once per agent process and served read-only.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import WireModel


class AgentCapabilities(WireModel):
    """Optional protocol features supported by an agent."""

    streaming: bool = Field(default=False, description="Supports tasks/sendSubscribe")
    push_notifications: bool = Field(default=False, description="Supports push notifications")
    state_transition_history: bool = Field(
        default=False, description="Exposes the history of task state transitions"
    )


class AgentSkill(WireModel):
    """A distinct capability the agent can perform."""

    id: str = Field(..., description="Unique skill identifier")
    name: str = Field(..., description="Human-readable skill name")
    description: str | None = Field(default=None, description="Skill description")
    tags: tuple[str, ...] | None = Field(
        default=None, description="Keywords describing the skill"
    )
    examples: tuple[str, ...] | None = Field(default=None, description="Example prompts")
    input_modes: tuple[str, ...] | None = Field(default=None, description="Accepted input modes")
    output_modes: tuple[str, ...] | None = Field(
        default=None, description="Produced output modes"
    )


class AgentProvider(WireModel):
    """Organization providing the agent."""

    organization: str = Field(..., description="Provider organization name")
    url: str | None = Field(default=None, description="Provider website")


class AgentAuthentication(WireModel):
    """Authentication schemes accepted by the agent."""

    schemes: tuple[str, ...] = Field(..., description="Supported schemes, e.g. 'Bearer'")
    credentials: str | None = Field(default=None, description="Credentials hint")


class AgentCard(WireModel):
    """
    Agent Card - complete agent descriptor.

    Nested sub-objects accept either built instances or raw wire dictionaries;
    omitted capability flags default to ``False``.
    """

    name: str = Field(..., description="Human-readable agent name")
    url: str = Field(..., description="Endpoint URL of the agent")
    version: str = Field(..., description="Agent version")
    capabilities: AgentCapabilities = Field(..., description="Supported protocol features")
    skills: tuple[AgentSkill, ...] = Field(..., description="Skills offered by the agent")
    description: str | None = Field(default=None, description="Agent description")
    provider: AgentProvider | None = Field(default=None, description="Agent provider")
    documentation_url: str | None = Field(default=None, description="Documentation URL")
    authentication: AgentAuthentication | None = Field(
        default=None, description="Accepted authentication schemes"
    )
    default_input_modes: tuple[str, ...] = Field(
        default_factory=lambda: ("text",), description="Input modes accepted by default"
    )
    default_output_modes: tuple[str, ...] = Field(
        default_factory=lambda: ("text",), description="Output modes produced by default"
    )

    def has_skill(self, skill_id: str) -> bool:
        """
        Check if agent offers a specific skill.

        Args:
            skill_id: Identifier of the skill to check

        Returns:
            True if the agent offers the skill, False otherwise
        """
        return any(skill.id == skill_id for skill in self.skills)

    def get_skill(self, skill_id: str) -> AgentSkill | None:
        """
        Get skill by id.

        Args:
            skill_id: Identifier of the skill

        Returns:
            AgentSkill if found, None otherwise
        """
        for skill in self.skills:
            if skill.id == skill_id:
                return skill
        return None

    def supports(self, capability: str) -> bool:
        """Check a capability flag by wire or attribute name, e.g. ``"pushNotifications"``."""
        for name, field in AgentCapabilities.model_fields.items():
            if capability in (name, field.alias):
                return bool(getattr(self.capabilities, name))
        return False


class AgentCardBuilder:
    """
    Builder for constructing AgentCard instances.

    Provides a fluent interface for building agent cards.
    """

    def __init__(self, name: str, url: str, version: str):
        """
        Initialize builder with required identity fields.

        Args:
            name: Human-readable agent name
            url: Endpoint URL of the agent
            version: Agent version
        """
        self._fields: dict[str, Any] = {"name": name, "url": url, "version": version}
        self._capabilities: dict[str, bool] = {}
        self._skills: list[AgentSkill] = []

    def with_description(self, description: str) -> AgentCardBuilder:
        """Set the agent description."""
        self._fields["description"] = description
        return self

    def with_provider(self, organization: str, url: str | None = None) -> AgentCardBuilder:
        """Set the agent provider."""
        self._fields["provider"] = AgentProvider(organization=organization, url=url)
        return self

    def with_documentation(self, documentation_url: str) -> AgentCardBuilder:
        """Set the documentation URL."""
        self._fields["documentation_url"] = documentation_url
        return self

    def with_authentication(
        self, schemes: list[str], credentials: str | None = None
    ) -> AgentCardBuilder:
        """Set accepted authentication schemes."""
        self._fields["authentication"] = AgentAuthentication(
            schemes=schemes, credentials=credentials
        )
        return self

    def with_capabilities(
        self,
        streaming: bool | None = None,
        push_notifications: bool | None = None,
        state_transition_history: bool | None = None,
    ) -> AgentCardBuilder:
        """Enable or disable optional protocol features."""
        flags = {
            "streaming": streaming,
            "push_notifications": push_notifications,
            "state_transition_history": state_transition_history,
        }
        self._capabilities.update({k: v for k, v in flags.items() if v is not None})
        return self

    def with_modes(
        self,
        input_modes: list[str] | None = None,
        output_modes: list[str] | None = None,
    ) -> AgentCardBuilder:
        """Override the default input/output modes."""
        if input_modes is not None:
            self._fields["default_input_modes"] = input_modes
        if output_modes is not None:
            self._fields["default_output_modes"] = output_modes
        return self

    def add_skill(
        self,
        skill_id: str,
        name: str,
        description: str | None = None,
        tags: list[str] | None = None,
        examples: list[str] | None = None,
        input_modes: list[str] | None = None,
        output_modes: list[str] | None = None,
    ) -> AgentCardBuilder:
        """Add a skill to the agent card."""
        skill = AgentSkill(
            id=skill_id,
            name=name,
            description=description,
            tags=tags,
            examples=examples,
            input_modes=input_modes,
            output_modes=output_modes,
        )
        self._skills.append(skill)
        return self

    def build(self) -> AgentCard:
        """
        Build the agent card.

        Returns:
            Constructed AgentCard instance
        """
        return AgentCard(
            capabilities=AgentCapabilities(**self._capabilities),
            skills=tuple(self._skills),
            **self._fields,
        )
