"""Unit converter form."""

import streamlit as st

from utools_ui.api_client import ToolApi, ToolApiError

TOOL_ID = "converters.unit"
BASE_PATH = "/tools/converters/unit"


def load_units(api: ToolApi) -> dict[str, str]:
    """Return ``{code: label}`` for the units the backend supports."""
    return {unit["code"]: unit["label"] for unit in api.get("/units")}


@st.cache_data(ttl=300, show_spinner=False)
def _cached_units(_api: ToolApi) -> dict[str, str]:
    return load_units(_api)


def convert(api: ToolApi, value: float, from_unit: str, to_unit: str) -> float:
    if not value or value <= 0:
        raise ValueError("Please enter a valid positive number")
    response = api.post("/convert", {"value": value, "from": from_unit, "to": to_unit})
    return response["result"]


def format_result(result: float, unit: str) -> str:
    return f"Result: {result:,} {unit}"


def render(api: ToolApi | None = None) -> None:
    api = api or ToolApi(BASE_PATH)
    state = st.session_state.setdefault(TOOL_ID, {"result": None, "unit": None, "error": None})

    st.subheader("Unit Converter")
    try:
        units = _cached_units(api)
    except ToolApiError as exc:
        st.error(f"Could not load units: {exc}")
        return
    codes = list(units)

    value = st.number_input("Value", min_value=0.0, value=1.0, step=1.0, key=f"{TOOL_ID}.value")
    col_from, col_to = st.columns(2)
    from_unit = col_from.selectbox(
        "From", codes, index=codes.index("m") if "m" in codes else 0,
        format_func=units.get, key=f"{TOOL_ID}.from",
    )
    to_unit = col_to.selectbox(
        "To", codes, index=codes.index("km") if "km" in codes else 0,
        format_func=units.get, key=f"{TOOL_ID}.to",
    )

    if st.button("Convert", type="primary", use_container_width=True, key=f"{TOOL_ID}.submit"):
        with st.spinner("Converting..."):
            try:
                state["result"] = convert(api, value, from_unit, to_unit)
                state["unit"] = to_unit
                state["error"] = None
            except (ValueError, ToolApiError) as exc:
                state["result"] = None
                state["error"] = str(exc)

    if state["error"]:
        st.error(state["error"])
    elif state["result"] is not None:
        st.success(format_result(state["result"], state["unit"]))
