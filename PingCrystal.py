import tkinter as tk
import threading
import queue
import traceback

from PIL import Image, ImageDraw, ImageFont, ImageTk

from config import Config
from ping_probe import ProbeRunner
from presenter import ColorToggle, DisplayState, describe, present


BACKGROUND = (34, 34, 34) # matches the "#222222" window background
READOUT_SIZE = (120, 60)
FONT_SIZE = 32


class CrystalApp(tk.Tk):
    """
    Foreground side of the readout. Owns the DisplayState: results arrive on
    result_queue from the ProbeRunner thread and are only applied here.
    """

    def __init__(self, config):
        print("[APP INIT] Initializing CrystalApp")
        super().__init__()
        self.config = config
        self.title("NA")
        self.configure(bg="#222222")
        self.resizable(False, False)

        self.result_queue = queue.Queue()
        self.stop_event = threading.Event()
        self.color_toggle = ColorToggle(enabled=config.color)
        self.display_state = DisplayState(color_enabled=self.color_toggle.is_enabled())
        self.last_result = None

        # image buffer attributes (the readout is drawn with Pillow, then shown on the canvas)
        self.font = ImageFont.load_default(size=FONT_SIZE)
        self.pil_image = None
        self.photo_image = None
        self.image_on_canvas = None

        self.canvas = tk.Canvas(
            self, width=READOUT_SIZE[0], height=READOUT_SIZE[1], bg="#222222", highlightthickness=0
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.bind("<KeyPress-c>", lambda event: self.toggle_color())
        self.protocol("WM_DELETE_WINDOW", self.on_close)

        self.render()
        self.runner = ProbeRunner(
            config.host, config.ping_timeout, config.interval, self.result_queue, self.stop_event
        )
        self.runner.start()
        print(f"[APP INIT COMPLETE] ProbeRunner started for {config.host}")

        self.after(50, self.process_probe_results) # Start processing queue

    def render(self):
        """Draws the current text in the current color and updates the title."""
        self.pil_image = Image.new("RGB", READOUT_SIZE, color=BACKGROUND)
        draw = ImageDraw.Draw(self.pil_image)

        # center the text inside the buffer
        left, top, right, bottom = draw.textbbox((0, 0), self.display_state.text, font=self.font)
        x = (READOUT_SIZE[0] - (right - left)) / 2 - left
        y = (READOUT_SIZE[1] - (bottom - top)) / 2 - top
        draw.text((x, y), self.display_state.text, fill=self.display_state.color, font=self.font)

        self.photo_image = ImageTk.PhotoImage(self.pil_image)
        if self.image_on_canvas:
            self.canvas.itemconfig(self.image_on_canvas, image=self.photo_image)
        else:
            self.image_on_canvas = self.canvas.create_image(0, 0, anchor=tk.NW, image=self.photo_image)

        self.title(self.display_state.title)

    def apply_result(self, result):
        color_enabled = self.color_toggle.is_enabled()
        self.last_result = result
        self.display_state = present(result, color_enabled)
        print(f"[RESULT] {describe(result, color_enabled)}")
        self.render()

    def toggle_color(self):
        enabled = self.color_toggle.toggle()
        print(f"[UI] Color-changing effect {'enabled' if enabled else 'disabled'}")
        if self.last_result is not None:
            self.display_state = present(self.last_result, enabled)
        else:
            self.display_state = DisplayState(color_enabled=enabled)
        self.render()

    def process_probe_results(self):
        """Processes results from the queue and updates the readout."""
        try:
            while True:
                self.apply_result(self.result_queue.get_nowait())
        except queue.Empty:
            pass
        except Exception as e:
            print(f"[ERROR] Exception in process_probe_results: {e}")
            traceback.print_exc()

        self.after(50, self.process_probe_results) # Reschedule check

    def on_close(self):
        """Stops the probe loop and closes the app."""
        print("Closing application...")
        self.stop_event.set()
        self.destroy()


def main(argv=None):
    config_parser = Config()
    args = config_parser.parse_args(argv)
    app = CrystalApp(args)
    try:
        app.mainloop()
    except KeyboardInterrupt:
        print("KeyboardInterrupt detected, closing.")
        app.on_close()


if __name__ == "__main__":
    main()
