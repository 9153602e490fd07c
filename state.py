# state.py
class AppState:
    def __init__(self):
        # --- Harmonics ---
        self.num_harmonics = 12   # Fixed for the lifetime of the bank
        self.smoothing = 0.1      # Fraction of remaining distance closed per tick

        # --- Animation ---
        self.time_step = 0.01     # Time cursor advance per frame
        self.single_wobble = (0.02, 2.0, 0.01)   # depth, time rate, x rate
        self.sum_wobble = (0.015, 1.5, 0.008)

        # --- Drawing ---
        self.margin = 20.0        # Vertical padding of the plotted wave
        self.grid_divisions = 10
        self.grid_color = (229, 231, 235)
        self.single_color = (236, 72, 153)
        self.sum_color = (14, 165, 233)
        self.line_width = 3.0
        self.glow_alpha = 90      # Alpha of the blurred re-stroke
        self.glow_spread = 4.0    # Extra thickness of the blurred re-stroke

        # --- Window ---
        self.window_width = 1200
        self.window_height = 800
        self.plot_height = 260

# Create a single shared instance
shared = AppState()
