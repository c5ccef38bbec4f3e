"""
UI layer
Purpose: Streamlit-only glue. Renders widgets/views, collects user inputs, and delegates
all work to the controllers. Keeps UI concerns (layout/state widgets) separate from
business logic so logic can be unit tested without Streamlit.
"""

import streamlit as st
import pandas as pd
import hashlib
import logging
import uuid

from core.config import AppConfig
from core.logger import setup_logger
from core.services.llm_openai import OpenAILLMClient
from core.controller import ConsultationController
from core.controller_trends import TrendsController
from core.persistence.session_store import JsonFileSessionStore, session_key_for
from core.education import EDUCATION_TOPICS, detail_lines
from core.models import ChatMode, LLMSettings, PointType, Role, Timeframe, ViewMode
from core.services.pricing import PRICE_TABLE, estimate_cost
from core.utils.images import data_url_to_bytes, to_data_url


# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="DAVID AI",
    page_icon="🩺",
    layout="wide",
    initial_sidebar_state="expanded",
)

config = AppConfig.from_env()
setup_logger(config.log_level, config.log_file)
logger = logging.getLogger("david_ai.ui")
if not config.api_key:
    logger.warning("GEMINI_API_KEY is not set; waiting for a key in the sidebar")

# ---------------------------
# UI constants
# ---------------------------
VIEW_LABELS = {
    ViewMode.CHAT.value: "💬 Consultation",
    ViewMode.STATS.value: "📊 Data & Predictions",
    ViewMode.EDUCATION.value: "📚 Education Hub",
}
TIMEFRAMES = [t.value for t in Timeframe]
MODELS = list(PRICE_TABLE.keys())
RISK_BY_TREND = {"Rising": "High", "Stabilizing": "Moderate", "Declining": "Low"}
AVATARS = {Role.USER: "🧑", Role.MODEL: "🩺"}

# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
st_session.setdefault("controller", None)
st_session.setdefault("trends_controller", TrendsController())
st_session.setdefault("api_key_set", False)
st_session.setdefault("view_mode", ViewMode.CHAT.value)
st_session.setdefault("model", config.model if config.model in MODELS else MODELS[0])
st_session.setdefault("temperature", config.temperature)
st_session.setdefault("show_clear_confirm", False)
st_session.setdefault("camera_open", False)
st_session.setdefault("last_capture_sig", None)
st_session.setdefault("timeframe", Timeframe.DAILY.value)


def browser_store_key() -> str:
    """
    Per-browser storage key. The client id rides in the URL (`?client=...`)
    so a reload or bookmark reopens the same history and other visitors
    never see it.
    """
    client_id = st.query_params.get("client", "")
    try:
        return session_key_for(client_id, config.sessions_key)
    except ValueError:
        client_id = uuid.uuid4().hex
        st.query_params["client"] = client_id
        return session_key_for(client_id, config.sessions_key)


if st_session.controller is None:
    st_session.controller = ConsultationController(
        llm=None,
        store=JsonFileSessionStore(config.data_dir, browser_store_key()),
    )


# ---------------------------
# Helpers
# ---------------------------
def get_controller() -> ConsultationController:
    """Return the consultation controller object."""
    return st_session.controller


def get_trends_controller() -> TrendsController:
    """Return the trends controller object."""
    return st_session.trends_controller


def get_ready_controller():
    """Return controller only if it has an LLM client."""
    controller = get_controller()
    return controller if controller.is_ready() else None


def make_llm_settings(max_tokens: int = 1024) -> LLMSettings:
    """Build LLMSettings from session state."""
    return LLMSettings(
        model=st_session.model,
        temperature=float(st_session.temperature),
        max_tokens=max_tokens,
    )


def connect_llm(api_key: str) -> None:
    """Attach a Gemini client to the controller once per browser session."""
    try:
        llm = OpenAILLMClient(api_key=api_key, base_url=config.base_url)
        llm.client.models.list()
    except Exception as e:
        logger.error("Gemini client init failed: %s", e)
        st.error(f"Gemini client init failed: {e}")
        st.stop()
    get_controller().llm = llm
    st_session.api_key_set = True


def run_turn(fn, *args, **kwargs) -> None:
    """Run one controller turn and surface guardrail errors as toasts."""
    controller = get_controller()
    controller.settings = make_llm_settings()
    try:
        with st.spinner("DAVID AI is thinking…"):
            fn(*args, **kwargs)
    except (ValueError, RuntimeError) as e:
        st.toast(str(e), icon="⚠️")


def on_new_session():
    get_controller().create_new_session()
    st_session.view_mode = ViewMode.CHAT.value


def on_select_session(session_id: str):
    try:
        get_controller().select_session(session_id)
    except KeyError as e:
        st.toast(str(e))
    st_session.view_mode = ViewMode.CHAT.value


def on_clear_confirmed():
    get_controller().clear_history()
    st_session.show_clear_confirm = False
    st_session.view_mode = ViewMode.CHAT.value
    st.toast("All chat history removed.", icon="🧹")


def render_message(msg) -> None:
    """One transcript bubble, with the captured image when present."""
    name = "user" if msg.role == Role.USER else "assistant"
    with st.chat_message(name, avatar=AVATARS[msg.role]):
        if msg.image:
            try:
                st.image(data_url_to_bytes(msg.image), width=320)
            except ValueError:
                st.caption("(image could not be displayed)")
        st.markdown(msg.text)


# ---------------------------
# SIDEBAR: navigation, sessions, settings
# ---------------------------
with st.sidebar:
    st.markdown("# DAVID AI")

    st.radio(
        "View",
        list(VIEW_LABELS.keys()),
        format_func=VIEW_LABELS.get,
        key="view_mode",
        label_visibility="collapsed",
    )
    st.divider()

    controller = get_controller()
    if st_session.view_mode == ViewMode.CHAT.value:
        head, plus = st.columns([4, 1])
        head.markdown("**Recent chats**")
        plus.button("➕", help="New consultation", on_click=on_new_session)
        for session in controller.sessions:
            active = session.id == controller.current_session_id
            st.button(
                session.title,
                key=f"session_{session.id}",
                type="primary" if active else "secondary",
                use_container_width=True,
                on_click=on_select_session,
                args=(session.id,),
            )
        st.divider()

    st.markdown("## Settings")
    user_api_key = st.text_input(
        "Gemini API key",
        value=config.api_key or "",
        type="password",
        help="We do not store your key. It stays in your session only.",
    )
    if user_api_key and not st_session.api_key_set:
        connect_llm(user_api_key)
    elif not user_api_key:
        st.warning("Please enter your Gemini API key to chat.")

    st_session.model = st.selectbox(
        "Model",
        MODELS,
        index=MODELS.index(st_session.model),
    )
    st_session.temperature = st.slider(
        "Temperature", 0.0, 1.0, float(st_session.temperature), 0.05
    )

    with st.expander("Usage & cost"):
        tokens_in = controller.tokens_in
        tokens_out = controller.tokens_out
        model_used = controller.model_used or st_session.model
        st.metric("Tokens (in)", f"{tokens_in:,}")
        st.metric("Tokens (out)", f"{tokens_out:,}")
        st.metric(
            "Estimated cost",
            f"${estimate_cost(model_used, tokens_in, tokens_out):,.4f}",
        )
        st.caption(f"Last used model: {model_used}")

    st.divider()
    if not st_session.show_clear_confirm:
        if st.button("🗑️ Clear Data", use_container_width=True):
            st_session.show_clear_confirm = True
            st.rerun()
    else:
        st.error("**Delete Data?** This will permanently remove all chat history.")
        c1, c2 = st.columns(2)
        if c1.button("Cancel", use_container_width=True):
            st_session.show_clear_confirm = False
            st.rerun()
        c2.button(
            "Delete",
            type="primary",
            use_container_width=True,
            on_click=on_clear_confirmed,
        )


# ---------------------------
# VIEW: CHAT
# ---------------------------
def render_chat_view():
    controller = get_controller()
    session = controller.get_current_session()
    st.title("Consultation")
    if session is None:
        st.info("Start a conversation to get COVID-19 assistance.")
        return

    mode = controller.current_mode().value.replace("_", " ")
    st.caption(f"**{session.title}** · mode: {mode}")

    transcript = st.container(height=520, border=True)
    with transcript:
        for msg in session.messages:
            render_message(msg)

    ready = get_ready_controller() is not None
    a1, a2, a3 = st.columns([1, 1, 3])
    if a1.button("🩺 Check Symptoms", disabled=not ready or controller.is_loading):
        run_turn(controller.start_symptom_check)
        st.rerun()
    if controller.current_mode() == ChatMode.SYMPTOM_CHECKER:
        if a2.button("End symptom check"):
            controller.end_symptom_check()
            st.rerun()
    st_session.camera_open = a3.toggle(
        "📷 Health scan", value=st_session.camera_open, disabled=not ready
    )

    if st_session.camera_open:
        st.caption("Temp. check mode: look at the camera and take a photo.")
        shot = st.camera_input("Health Scan", label_visibility="collapsed")
        if shot is not None:
            raw = shot.getvalue()
            sig = hashlib.sha1(raw).hexdigest()
            if sig != st_session.last_capture_sig:
                st_session.last_capture_sig = sig
                st_session.camera_open = False
                run_turn(controller.handle_camera_capture, to_data_url(raw))
                st.rerun()

    raw_text = st.chat_input(
        "Ask about symptoms, vaccines, or protocols…",
        disabled=not ready or controller.is_loading,
    )
    if raw_text is not None and raw_text.strip():
        run_turn(controller.send_message, raw_text.strip())
        st.rerun()


# ---------------------------
# VIEW: STATS
# ---------------------------
def render_stats_view():
    trends = get_trends_controller()
    st.title("Global Trends & Predictions")
    st.caption("AI-driven analysis of case trajectories to assist in future planning.")

    timeframe = st.radio(
        "Timeframe",
        TIMEFRAMES,
        key="timeframe",
        horizontal=True,
        format_func=str.capitalize,
    )
    if not trends.series or trends.timeframe.value != timeframe:
        with st.spinner("Loading analysis..."):
            trends.load(timeframe)

    summary = trends.summary
    c1, c2, c3 = st.columns(3)
    c1.metric(
        "Current Active Cases",
        f"{summary.last_historical:,}",
        delta=f"{summary.change_pct:+.1f}% forecast",
        delta_color="inverse",
    )
    c2.metric("Predicted Trend (7 steps)", summary.label)
    c3.metric("Risk Level", RISK_BY_TREND.get(summary.label, "Moderate"))
    st.caption("Public advisory: Maintain protocols")

    st.subheader("Infection Rate Analysis")
    rows = []
    last_hist = None
    for p in trends.series:
        row = {"day": p.day, "Historical Data": None, "AI Prediction": None}
        if p.type == PointType.HISTORICAL:
            row["Historical Data"] = p.cases
            last_hist = row
        else:
            row["AI Prediction"] = p.cases
        rows.append(row)
    if last_hist is not None:
        # join the two lines at the forecast start
        last_hist["AI Prediction"] = last_hist["Historical Data"]

    df = pd.DataFrame(rows).set_index("day")
    st.line_chart(
        df,
        y=["Historical Data", "AI Prediction"],
        color=["#10b981", "#f59e0b"],
    )
    st.caption(f"Forecast starts after {trends.forecast_start_label()}.")


# ---------------------------
# VIEW: EDUCATION
# ---------------------------
def render_education_view():
    st.title("COVID-19 Education Hub")
    st.caption("Verified information to keep you and your community safe.")

    cols = st.columns(3)
    for i, topic in enumerate(EDUCATION_TOPICS):
        with cols[i % 3]:
            with st.container(border=True):
                st.markdown(f"### {topic.icon} {topic.title}")
                st.write(topic.summary)
                with st.expander("Read Detailed Guide"):
                    for text, marker in detail_lines(topic):
                        st.markdown(f"{marker} {text}" if marker else text)


view = st_session.view_mode
if view == ViewMode.STATS.value:
    render_stats_view()
elif view == ViewMode.EDUCATION.value:
    render_education_view()
else:
    render_chat_view()

st.divider()
st.caption(
    "DAVID AI is not a doctor. In an emergency, contact your local emergency number."
)
