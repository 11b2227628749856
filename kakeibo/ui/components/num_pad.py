import customtkinter as ctk

_KEYS = [
    ["7", "8", "9"],
    ["4", "5", "6"],
    ["1", "2", "3"],
    ["00", "0", "⌫"],
]


class NumPad(ctk.CTkFrame):
    """On-screen keypad for entering the amount."""

    def __init__(self, master, on_input, on_delete, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._on_input = on_input      # callable(str)
        self._on_delete = on_delete    # callable()

        for c in range(3):
            self.grid_columnconfigure(c, weight=1)
        for r, row in enumerate(_KEYS):
            for c, key in enumerate(row):
                ctk.CTkButton(
                    self, text=key, height=44,
                    font=ctk.CTkFont(size=18),
                    fg_color=("gray85", "gray25"),
                    text_color=("gray10", "gray90"),
                    hover_color=("gray75", "gray35"),
                    command=lambda k=key: self._press(k),
                ).grid(row=r, column=c, padx=3, pady=3, sticky="ew")

    def _press(self, key: str):
        if key == "⌫":
            self._on_delete()
        else:
            self._on_input(key)
