"""Catalog of the tools offered by the page."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str
    description: str
    icon: str
    tags: frozenset[str] = Field(default_factory=frozenset)


AVAILABLE_TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        id="converters.unit",
        name="Unit Converter",
        category="Converters",
        description="Convert between different units of measurement",
        icon="📏",
        tags=frozenset({"convert", "units", "measurement"}),
    ),
    ToolDescriptor(
        id="network.ping",
        name="Network Ping",
        category="Network",
        description="Test network connectivity and latency",
        icon="🌐",
        tags=frozenset({"network", "ping", "latency"}),
    ),
)


def get_tool(tool_id: str) -> Optional[ToolDescriptor]:
    for tool in AVAILABLE_TOOLS:
        if tool.id == tool_id:
            return tool
    return None
