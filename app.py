"""
Page Replacement Visualizer — FIFO, LRU & Optimal

This application provides an interactive simulation and visualization of the
classic Operating System page replacement algorithms:
    - FIFO (First In First Out)
    - LRU (Least Recently Used)
    - Optimal (Belady's MIN)

A reference string is simulated once per run; the resulting step history can
then be played, paused, stepped in either direction or scrubbed on a timeline.

Built with Streamlit for the web interface and Plotly for visualizations.

Run with:
    streamlit run app.py
"""

# =============================================================================
# IMPORTS
# =============================================================================

import time                                  # For pacing the playback

import streamlit as st                       # Web application framework
import plotly.graph_objects as go            # Interactive plotting library

import config
from engine import BELADY_SEQUENCE, ReplacementPolicy, SimulationError, compare, simulate
from playback import PlaybackController, PlaybackState
from utils import frame_table, get_color, parse_reference_string


# =============================================================================
# STREAMLIT UI - Web Application Interface
# =============================================================================

# Configure the Streamlit page
st.set_page_config(page_title="Page Replacement Visualizer", layout="wide")

# -----------------------------------------------------------------------------
# SIDEBAR NAVIGATION
# -----------------------------------------------------------------------------

# Page selector for switching between Simulator and Concepts views
page = st.sidebar.radio("Choose View", ["Simulator", "Concepts"])

st.title("Page Replacement Visualizer — FIFO, LRU & Optimal")

# =============================================================================
# CONCEPTS PAGE - Educational Content
# =============================================================================

if page == "Concepts":
    st.header("Operating System Concepts Used in This Project")
    st.markdown(
        """
        ## 📘 Key Concepts

        ### **1. Frames and Pages**
        - Physical memory is divided into a fixed number of *frames*.
        - Each frame holds exactly one *page* at a time.

        ### **2. Reference String**
        - The ordered sequence of pages a program touches, e.g. `7 0 1 2 0 3`.

        ### **3. Hit and Fault**
        - **Hit**: the referenced page is already resident in a frame.
        - **Fault**: it is not; the page must be loaded, possibly evicting another.

        ### **4. Page Replacement Algorithms**
        When every frame is occupied, the OS must choose a *victim* to evict:

        #### **FIFO (First In First Out)**
        - Evict the page that entered memory earliest.
        - Re-using a page does not protect it.
        - Suffers from **Belady's anomaly**: more frames can mean more faults.

        #### **LRU (Least Recently Used)**
        - Evict the page that has not been used for the longest time.

        #### **Optimal (Belady's MIN)**
        - Evict the page whose next use lies furthest in the future.
        - Needs the whole future reference string, so it is a benchmark
          rather than a practical policy: no algorithm faults less.

        ---
        Try the **Belady preset** in the simulator with 3 and then 4 frames
        under FIFO to see the anomaly.
        """
    )
    st.stop()  # Stop rendering - don't show simulator on Concepts page

# -----------------------------------------------------------------------------
# SIDEBAR - Simulation Settings
# -----------------------------------------------------------------------------

st.sidebar.header("Simulation Settings")

if 'reference_string' not in st.session_state:
    st.session_state.reference_string = config.DEFAULT_REFERENCE_STRING

# Preset that demonstrates Belady's anomaly under FIFO
if st.sidebar.button("Load Belady preset"):
    st.session_state.reference_string = " ".join(map(str, BELADY_SEQUENCE))

access_input = st.sidebar.text_area(
    "Reference string (space or comma separated pages)",
    key="reference_string",
)

frame_count = st.sidebar.number_input(
    "Frames",
    min_value=config.MIN_FRAMES,
    max_value=config.MAX_FRAMES,
    value=config.DEFAULT_FRAMES,
    step=1,
)

policy = st.sidebar.selectbox(
    "Replacement Policy",
    options=list(ReplacementPolicy.ALL),
    index=ReplacementPolicy.ALL.index(config.DEFAULT_ALGORITHM),
    format_func=lambda p: ReplacementPolicy.LABELS[p],
)

run_speed = st.sidebar.slider(
    "Playback speed (steps/sec)",
    min_value=config.MIN_SPEED,
    max_value=config.MAX_SPEED,
    value=config.DEFAULT_SPEED,
)

# -----------------------------------------------------------------------------
# SESSION STATE - Controller Persistence
# -----------------------------------------------------------------------------

# The controller persists across Streamlit reruns
if 'controller' not in st.session_state:
    st.session_state.controller = PlaybackController()
    st.session_state.comparison = {}

controller: PlaybackController = st.session_state.controller


def run_simulation():
    """Simulate the current settings once and load the result for playback."""
    try:
        pages = parse_reference_string(access_input)
        result = simulate(pages, int(frame_count), policy)
        st.session_state.comparison = compare(pages, int(frame_count))
    except SimulationError as e:
        st.sidebar.error(str(e))
        return
    controller.load(result)
    st.sidebar.success(f"Simulated {len(result)} accesses")


if st.sidebar.button("Simulate"):
    run_simulation()

st.sidebar.markdown("---")

# =============================================================================
# MAIN CONTENT AREA - Two Column Layout
# =============================================================================

col1, col2 = st.columns([1, 2])


def render_frames(container):
    """Bar chart of the frames at the cursor."""
    step = controller.current
    capacity = controller.result.capacity if controller.result is not None else int(frame_count)

    x = []      # Frame indices
    y = []      # Bar heights (all 1 for uniform display)
    text = []   # Labels for each frame
    colors = [] # Color coding per step outcome

    for slot in range(capacity):
        resident = step.frames[slot] if step is not None and slot < len(step.frames) else None
        label = f"F{slot}: " + (f"P{resident}" if resident is not None else "Free")
        text.append(label)
        colors.append(get_color(step, slot))
        x.append(slot)
        y.append(1)

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=x,
        y=y,
        text=text,
        marker_color=colors,
        hovertext=text,
        hoverinfo='text'
    ))
    fig.update_layout(
        height=150,
        showlegend=False,
        yaxis=dict(showticklabels=False),
        xaxis=dict(title="Frame"),
    )
    container.plotly_chart(fig, use_container_width=True)

    if step is not None:
        status = "HIT" if step.hit else "FAULT"
        container.markdown(
            f"**Step {step.index}** — page **{step.page}** → "
            f"<span style='color:{get_color(step)}'>{status}</span>: {step.note}",
            unsafe_allow_html=True,
        )
    else:
        container.write("Before the first access")


def render_timeline(container):
    """Textbook frame-by-step grid: one column per access, one row per frame."""
    result = controller.result
    rows = frame_table(result)

    # Only steps up to the cursor are revealed
    visible = controller.position + 1
    text = [
        [("" if p is None or i >= visible else str(p)) for i, p in enumerate(row)]
        for row in rows
    ]
    z = [
        [(0 if p is None or i >= visible else (1 if result.steps[i].hit else 2)) for i, p in enumerate(row)]
        for row in rows
    ]

    fig = go.Figure(go.Heatmap(
        z=z,
        x=[f"{i}:{p}" for i, p in enumerate(result.pages)],
        y=[f"F{slot}" for slot in range(result.capacity)],
        text=text,
        texttemplate="%{text}",
        colorscale=[
            [0.0, config.EMPTY_COLOR], [0.33, config.EMPTY_COLOR],
            [0.34, config.HIT_COLOR], [0.66, config.HIT_COLOR],
            [0.67, config.FAULT_COLOR], [1.0, config.FAULT_COLOR],
        ],
        zmin=0,
        zmax=2,
        showscale=False,
        xgap=2,
        ygap=2,
    ))
    fig.update_layout(height=80 + 40 * result.capacity, yaxis=dict(autorange="reversed"))
    container.plotly_chart(fig, use_container_width=True)


def render_statistics(container):
    stats = controller.result.stats()

    c1, c2, c3 = container.columns(3)
    c1.metric("Page Accesses", stats['total_refs'])
    c2.metric("Page Faults", f"{controller.faults_so_far} / {stats['faults']}")
    c3.metric("Hit Ratio", stats['hit_ratio'])

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=["Hits", "Faults"],
        y=[controller.hits_so_far, controller.faults_so_far],
        marker_color=[config.HIT_COLOR, config.FAULT_COLOR],
    ))
    fig.update_layout(height=300, title="Hits vs Faults (so far)")
    container.plotly_chart(fig, use_container_width=True)


def render_comparison(container):
    comparison = st.session_state.comparison
    if not comparison:
        return
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=[ReplacementPolicy.LABELS[p] for p in comparison],
        y=[r.total_faults for r in comparison.values()],
        text=[r.total_faults for r in comparison.values()],
    ))
    fig.update_layout(height=300, title="Total faults by algorithm")
    container.plotly_chart(fig, use_container_width=True)


def render_event_log(container):
    # Most recent events first
    for ev in controller.event_log[-config.EVENT_LOG_LENGTH:][::-1]:
        container.write(ev)


# -----------------------------------------------------------------------------
# LEFT COLUMN - Controls and Event Log
# -----------------------------------------------------------------------------

with col1:
    st.subheader("Controls")

    if controller.result is None:
        st.info("Enter a reference string and click **Simulate** in the sidebar.")
    else:
        b1, b2, b3 = st.columns(3)
        if b1.button("▶ Play"):
            controller.play()
        if b2.button("⏸ Pause"):
            controller.pause()
        if b3.button("⏹ Stop"):
            controller.stop()

        b4, b5 = st.columns(2)
        if b4.button("◀ Step back"):
            controller.step_back()
        if b5.button("Step forward ▶"):
            controller.step_forward()

        if controller.total_steps > 0:
            # Scrubbing: -1 is the empty state before the first access.
            # The widget follows the cursor, which buttons and playback also move.
            st.session_state.timeline = controller.position
            st.slider(
                "Timeline",
                min_value=-1,
                max_value=controller.total_steps - 1,
                key="timeline",
                on_change=lambda: controller.seek(st.session_state.timeline),
            )

        st.caption(f"State: {controller.state} — step {controller.position + 1} / {controller.total_steps}")

    st.subheader("Event Log")
    log_area = st.container()

# -----------------------------------------------------------------------------
# RIGHT COLUMN - Visualizations
# -----------------------------------------------------------------------------

with col2:
    st.subheader("Physical Frames")
    frames_area = st.empty()

    if controller.result is not None:
        st.subheader("Frame Timeline")
        timeline_area = st.empty()

        st.subheader("Statistics")
        stats_area = st.empty()

        st.subheader("Algorithm Comparison")
        render_comparison(st.container())


def render_all():
    render_frames(frames_area.container())
    if controller.result is not None:
        render_timeline(timeline_area.container())
        render_statistics(stats_area.container())


render_all()

# Playback loop: each tick redraws the placeholders; a new button press
# reruns the script, which ends this loop.
while controller.state == PlaybackState.RUNNING:
    time.sleep(1.0 / run_speed)
    controller.tick()
    render_all()

render_event_log(log_area)

# =============================================================================
# FOOTER - Usage Tips and Examples
# =============================================================================

st.markdown("---")
st.markdown(
    "**Usage tips**:\n"
    "- Enter a reference string and a frame count, pick a policy and click **Simulate**.\n"
    "- Use **Play** / **Pause** / **Stop**, the step buttons or the timeline to move through the history.\n"
    "- The comparison chart shows how many faults each algorithm makes on the same input."
)

st.markdown("---")
st.markdown(
    "**Instructor examples**:\n"
    "1) Classic textbook string: `7 0 1 2 0 3 0 4 2 3 0 3 2` with 3 frames under each policy.\n"
    "2) Belady's anomaly: load the preset and compare FIFO with 3 and 4 frames."
)
