"""Network ping form."""

from datetime import datetime
from typing import Any

import streamlit as st

from utools_ui.api_client import ToolApi, ToolApiError

TOOL_ID = "network.ping"
BASE_PATH = "/tools/network/ping"
MIN_COUNT = 1
MAX_COUNT = 10


def clamp_count(count: int) -> int:
    return max(MIN_COUNT, min(MAX_COUNT, int(count)))


def run_ping(api: ToolApi, host: str, count: int) -> dict[str, Any]:
    host = host.strip()
    if not host:
        raise ValueError("Please enter a valid host")
    result = api.post("/run", {"host": host, "count": clamp_count(count)})
    return {**result, "timestamp": datetime.now().strftime("%H:%M:%S")}


def describe_result(result: dict[str, Any]) -> str:
    if result.get("success"):
        return f"{result['host']} · RTT: {result['rttMs']}ms"
    return f"{result['host']} · {result.get('error') or 'Ping failed'}"


def render(api: ToolApi | None = None) -> None:
    api = api or ToolApi(BASE_PATH)
    state = st.session_state.setdefault(TOOL_ID, {"results": [], "error": None})

    st.subheader("Network Ping")
    host = st.text_input("Host", value="google.com", placeholder="e.g., google.com, 8.8.8.8", key=f"{TOOL_ID}.host")
    count = st.number_input(
        f"Count ({MIN_COUNT}-{MAX_COUNT})",
        min_value=MIN_COUNT,
        max_value=MAX_COUNT,
        value=4,
        step=1,
        key=f"{TOOL_ID}.count",
    )

    if st.button("Ping", type="primary", use_container_width=True, key=f"{TOOL_ID}.submit"):
        state["results"] = []
        state["error"] = None
        with st.spinner("Pinging..."):
            try:
                state["results"] = [run_ping(api, host, count)]
            except (ValueError, ToolApiError) as exc:
                state["error"] = str(exc)

    if state["error"]:
        st.error(state["error"])
    if state["results"]:
        st.markdown("**Results:**")
        for result in state["results"]:
            line = f"{describe_result(result)} ({result['timestamp']})"
            if result.get("success"):
                st.success(line)
            else:
                st.error(line)
