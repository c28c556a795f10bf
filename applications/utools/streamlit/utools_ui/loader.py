"""Resolve a tool id to its form component and render it."""

import importlib
import logging
from typing import Callable, Optional

import streamlit as st

logger = logging.getLogger(__name__)

ToolComponent = Callable[[], None]


def _module_factory(module_name: str) -> Callable[[], ToolComponent]:
    def load() -> ToolComponent:
        return importlib.import_module(module_name).render

    return load


# Form modules are imported the first time their tool is selected.
TOOL_COMPONENTS: dict[str, Callable[[], ToolComponent]] = {
    "converters.unit": _module_factory("utools_ui.tools.unit_converter"),
    "network.ping": _module_factory("utools_ui.tools.network_ping"),
}


def resolve_component(tool_id: str) -> Optional[ToolComponent]:
    factory = TOOL_COMPONENTS.get(tool_id)
    if factory is None:
        return None
    return factory()


def not_found_message(tool_id: str) -> str:
    return f'Tool "{tool_id}" not found or not implemented yet.'


def render_tool(tool_id: str) -> bool:
    """Render the form for ``tool_id``; unknown ids get a placeholder.

    Returns True when a component was rendered.
    """
    if tool_id not in TOOL_COMPONENTS:
        logger.warning("tool_not_found", extra={"tool_id": tool_id})
        st.error(not_found_message(tool_id))
        return False

    with st.spinner("Loading tool..."):
        component = resolve_component(tool_id)
    with st.container(border=True):
        component()
    return True
