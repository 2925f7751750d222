from dataclasses import replace
import streamlit as st
from rainbow_smoke.canvas import Canvas
from rainbow_smoke.config import GrowthConfig
from rainbow_smoke.errors import ConfigurationError
from rainbow_smoke.growth import grow_from_config
from rainbow_smoke.palette import palette_size
from rainbow_smoke.renderer.image import canvas_to_image, scale_image
from rainbow_smoke.selection import DEFAULT_SELECTION, SELECT_FN_REGISTRY

MAX_PREVIEW_DEPTH = 63

st.set_page_config(layout="wide", page_title="Rainbow Smoke")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def set_default_config() -> None:
    if "growth_config" not in st.session_state:
        st.session_state["growth_config"] = GrowthConfig(
            width=64,
            height=64,
            depth=15,
            selection=DEFAULT_SELECTION,
            progress_interval=256,
        )


def get_config_from_widgets() -> GrowthConfig:
    growth_config: GrowthConfig = st.session_state["growth_config"]

    st.subheader("Canvas")
    width: int = st.slider("Width", 1, 256, growth_config.width, key="width")
    height: int = st.slider("Height", 1, 256, growth_config.height, key="height")

    st.subheader("Palette")
    depth: int = st.number_input(
        "Color depth",
        min_value=1,
        max_value=MAX_PREVIEW_DEPTH,
        value=growth_config.depth,
        key="depth",
    )
    st.caption(f"{palette_size(depth)} colors for {width * height} pixels")

    st.subheader("Engine")
    strategies = sorted(SELECT_FN_REGISTRY)
    selection: str = st.selectbox(
        "Selection strategy",
        strategies,
        index=strategies.index(growth_config.selection),
        key="selection",
    )

    return replace(
        growth_config, width=width, height=height, depth=depth, selection=selection
    )


def render_canvas(config: GrowthConfig) -> None:
    bar = st.progress(0.0, text="Growing...")

    def on_progress(iteration: int, total: int, frontier_size: int) -> None:
        bar.progress(
            iteration / total,
            text=f"{iteration}/{total} done, {frontier_size} elements in queue",
        )

    try:
        canvas: Canvas = grow_from_config(config, progress=on_progress)
    except ConfigurationError as exc:
        bar.empty()
        st.error(str(exc))
        return
    bar.empty()
    st.session_state["canvas"] = canvas


# --------- Main App ---------

set_default_config()
config_col, image_col = st.columns([0.3, 0.7])

with config_col:
    config = get_config_from_widgets()
    st.session_state["growth_config"] = config
    scale: int = st.slider("Preview scale", 1, 8, 4, key="scale")
    if st.button("🌈 Grow", key="grow_btn", use_container_width=True):
        render_canvas(config)

with image_col:
    if "canvas" in st.session_state:
        canvas: Canvas = st.session_state["canvas"]
        st.image(scale_image(canvas_to_image(canvas), scale))
    else:
        st.info("Pick a size and depth, then press Grow.")
