import logging

import dearpygui.dearpygui as dpg

import state
from presets import Preset
from renderer import DrawingSurface, amplitude_color
from scheduler import FrameScheduler

logger = logging.getLogger(__name__)

# --- SETTINGS ---
W_WIDTH = state.shared.window_width
W_HEIGHT = state.shared.window_height
PANEL_WIDTH = 320
PLOT_HEIGHT = state.shared.plot_height
DASH = 5.0


class DpgSurface(DrawingSurface):
    """Draws into a dearpygui drawlist."""

    def __init__(self, tag):
        self.tag = tag

    def clear(self):
        dpg.delete_item(self.tag, children_only=True)

    def draw_dashed_line(self, p1, p2):
        (x1, y1), (x2, y2) = p1, p2
        length = ((x2 - x1) ** 2 + (y2 - y1) ** 2) ** 0.5
        if length == 0:
            return
        dx, dy = (x2 - x1) / length, (y2 - y1) / length
        pos = 0.0
        while pos < length:
            end = min(pos + DASH, length)
            dpg.draw_line((x1 + dx * pos, y1 + dy * pos), (x1 + dx * end, y1 + dy * end),
                          color=state.shared.grid_color, thickness=1, parent=self.tag)
            pos += 2 * DASH

    def draw_polyline(self, points, color, width, glow=False):
        if glow:
            # Wider, translucent re-stroke stands in for a blur
            dpg.draw_polyline(points, color=(*color, state.shared.glow_alpha),
                              thickness=width + state.shared.glow_spread, parent=self.tag)
        else:
            dpg.draw_polyline(points, color=(*color, 255), thickness=width, parent=self.tag)


scheduler = FrameScheduler(DpgSurface("single_drawlist"), DpgSurface("sum_drawlist"))
slider_themes = {}


# --- INPUT HANDLERS ---
def on_slider(sender, app_data, user_data):
    value = scheduler.set_target(user_data, app_data)
    show_target(user_data, value)


def on_preset(sender, app_data, user_data):
    scheduler.apply_preset(user_data)
    for i, partial in enumerate(scheduler.bank):
        dpg.set_value(f"slider_{i}", partial.target_amplitude)
        show_target(i, partial.target_amplitude)


def show_target(index, value):
    dpg.set_value(f"value_{index}", f"{value:.2f}")
    dpg.set_value(slider_themes[index], (*amplitude_color(value), 255))


def on_resize(sender=None, app_data=None):
    width = max(0, dpg.get_viewport_client_width() - PANEL_WIDTH - 40)
    for tag in ("single_drawlist", "sum_drawlist"):
        dpg.configure_item(tag, width=width, height=PLOT_HEIGHT)
    scheduler.resize(width, PLOT_HEIGHT, 1.0)


class HoverTracker:
    """Turns per-frame hover/press polling into enter and leave events."""

    def __init__(self, n):
        self.engaged = [False] * n

    def poll(self):
        for i in range(len(self.engaged)):
            now = dpg.is_item_hovered(f"group_{i}") or dpg.is_item_active(f"slider_{i}")
            if now and not self.engaged[i]:
                scheduler.selection_enter(i)
            elif self.engaged[i] and not now:
                scheduler.selection_leave(i)
            self.engaged[i] = now


# --- DPG GUI SETUP ---
def build_ui():
    with dpg.window(tag="Primary Window"):

        # Split Layout: Left (Harmonics) | Right (Waves)
        with dpg.group(horizontal=True):

            # --- LEFT PANEL: HARMONICS ---
            with dpg.child_window(width=PANEL_WIDTH):
                dpg.add_text("PRESETS", color=(0, 255, 204))
                dpg.add_separator()
                with dpg.group(horizontal=True):
                    for preset in Preset:
                        dpg.add_button(label=preset.value.title(), callback=on_preset,
                                       user_data=preset)

                dpg.add_spacer(height=20)
                dpg.add_text("HARMONICS", color=(0, 255, 204))
                dpg.add_separator()

                for partial in scheduler.bank:
                    i = partial.index
                    with dpg.group(tag=f"group_{i}"):
                        with dpg.group(horizontal=True):
                            dpg.add_text(f"Wave {i + 1}")
                            dpg.add_text("0.00", tag=f"value_{i}")
                        dpg.add_slider_float(tag=f"slider_{i}", default_value=0.0, min_value=-1.0,
                                             max_value=1.0, format="", width=-1,
                                             callback=on_slider, user_data=i)
                    with dpg.theme() as theme:
                        with dpg.theme_component(dpg.mvSliderFloat):
                            slider_themes[i] = dpg.add_theme_color(
                                dpg.mvThemeCol_SliderGrab, (*amplitude_color(0.0), 255),
                                category=dpg.mvThemeCat_Core)
                    dpg.bind_item_theme(f"slider_{i}", theme)

            # --- RIGHT PANEL: WAVES ---
            with dpg.child_window(width=-1):
                dpg.add_text("Individual Wave", tag="single_label")
                dpg.add_drawlist(width=1, height=PLOT_HEIGHT, tag="single_drawlist")

                dpg.add_spacer(height=10)
                dpg.add_text("Sum of All Waves")
                dpg.add_drawlist(width=1, height=PLOT_HEIGHT, tag="sum_drawlist")


def run_frame(hover):
    # Queued widget/viewport callbacks run here, between ticks, on this thread
    dpg.run_callbacks(dpg.get_callback_queue())
    hover.poll()
    frame = scheduler.tick()
    dpg.set_value("single_label", scheduler.selection.label(scheduler.bank))
    return frame


def run():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    dpg.create_context()
    dpg.configure_app(manual_callback_management=True)
    build_ui()

    # --- STARTUP ---
    dpg.create_viewport(title="Harmonic Playground", width=W_WIDTH, height=W_HEIGHT)
    dpg.set_viewport_resize_callback(on_resize)
    dpg.setup_dearpygui()
    dpg.set_primary_window("Primary Window", True)
    dpg.show_viewport()
    on_resize()

    hover = HoverTracker(len(scheduler.bank))
    logger.info("Harmonic playground started with %d harmonics", len(scheduler.bank))

    # One tick per display refresh, on the GUI thread
    while dpg.is_dearpygui_running():
        run_frame(hover)
        dpg.render_dearpygui_frame()

    # --- CLEANUP ---
    dpg.destroy_context()


if __name__ == "__main__":
    run()
