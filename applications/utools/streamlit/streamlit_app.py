import logging

import streamlit as st

from utools_ui.loader import render_tool
from utools_ui.registry import AVAILABLE_TOOLS, ToolDescriptor, get_tool

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

SELECTED_KEY = "selected_tool"


def select_tool(tool_id: str | None) -> None:
    st.session_state[SELECTED_KEY] = tool_id


def render_tool_card(tool: ToolDescriptor, is_selected: bool) -> None:
    with st.container(border=True):
        st.markdown(f"### {tool.icon} {tool.name}")
        st.caption(tool.category)
        st.write(tool.description)
        st.caption(" · ".join(sorted(tool.tags)))
        st.button(
            "Selected" if is_selected else "Open",
            key=f"open.{tool.id}",
            type="primary" if is_selected else "secondary",
            disabled=is_selected,
            on_click=select_tool,
            args=(tool.id,),
            use_container_width=True,
        )


st.set_page_config(page_title="u-tools", page_icon="🧰", layout="wide")
st.title("u-tools")
st.caption("Run small tools backed by the Python API.")

selected = st.session_state.get(SELECTED_KEY)

st.subheader("Available Tools")
columns = st.columns(3)
for index, tool in enumerate(AVAILABLE_TOOLS):
    with columns[index % len(columns)]:
        render_tool_card(tool, selected == tool.id)

if selected:
    st.divider()
    header, close = st.columns([4, 1])
    tool = get_tool(selected)
    header.subheader(tool.name if tool else selected)
    close.button("Close", key="close.tool", on_click=select_tool, args=(None,))
    render_tool(selected)
