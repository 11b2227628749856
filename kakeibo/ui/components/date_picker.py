import tkinter as tk
from datetime import date

import customtkinter as ctk
from tkcalendar import Calendar

from kakeibo.utils.date_helpers import format_date, format_display_date, parse_date, parse_display_date

_INVALID_BORDER = "#F44336"
_NORMAL_BORDER = ("gray65", "gray35")


class DatePickerWidget(ctk.CTkFrame):
    """Editable day field with a calendar popup.

    The text is shown in the user's display format; get_date() returns
    None while it cannot be parsed.
    """

    def __init__(self, master, initial_date: date | None = None,
                 date_format: str = "YYYY/MM/DD", **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._date_format = date_format
        self._text = tk.StringVar()

        self._entry = ctk.CTkEntry(self, textvariable=self._text, width=120)
        self._entry.pack(side="left", fill="x", expand=True)
        for sequence in ("<FocusOut>", "<Return>"):
            self._entry.bind(sequence, self._normalize)
        ctk.CTkButton(self, text="📅", width=32, command=self._pick).pack(side="left", padx=(4, 0))

        self.set_date(initial_date or date.today())

    def get_date(self) -> date | None:
        raw = self._text.get().strip()
        if not raw:
            return None
        return parse_display_date(raw, self._date_format)

    def set_date(self, d: date):
        self._text.set(format_display_date(format_date(d), self._date_format))
        self._entry.configure(border_color=_NORMAL_BORDER)

    def is_valid(self) -> bool:
        return self.get_date() is not None

    def _normalize(self, _event=None):
        d = self.get_date()
        if d is None:
            self._entry.configure(border_color=_INVALID_BORDER)
        else:
            self.set_date(d)

    def _pick(self):
        picked = _CalendarPopup(self.winfo_toplevel(), self._entry, self.get_date() or date.today()).result
        if picked is not None:
            self.set_date(picked)


class _CalendarPopup(ctk.CTkToplevel):
    """Modal month calendar placed under `anchor`; .result is the chosen day."""

    def __init__(self, master, anchor, current: date):
        super().__init__(master)
        self.result: date | None = None
        self.title("Pick a date")
        self.resizable(False, False)

        dark = ctk.get_appearance_mode() == "Dark"
        bg, fg = ("#2b2b2b", "#ffffff") if dark else ("#ffffff", "#000000")
        self._cal = Calendar(
            self,
            selectmode="day",
            year=current.year, month=current.month, day=current.day,
            date_pattern="yyyy-mm-dd",
            background=bg, foreground=fg,
            headersbackground=bg, headersforeground=fg,
            weekendbackground=bg, weekendforeground=fg,
            othermonthforeground="gray60", bordercolor=bg,
            selectbackground="#1f6aa5",
        )
        self._cal.pack(padx=6, pady=6)
        self._cal.bind("<<CalendarSelected>>", lambda _e: self._choose(parse_date(self._cal.get_date())))

        ctk.CTkButton(self, text="Today", width=80,
                      command=lambda: self._choose(date.today())).pack(pady=(0, 6))
        self.bind("<Escape>", lambda _e: self.destroy())

        anchor.update_idletasks()
        self.geometry(f"+{anchor.winfo_rootx()}+{anchor.winfo_rooty() + anchor.winfo_height() + 2}")
        self.transient(master)
        self.grab_set()
        master.wait_window(self)

    def _choose(self, d: date | None):
        self.result = d
        self.destroy()
