import customtkinter as ctk
from tkinter import filedialog, messagebox

from kakeibo.database.db_manager import DatabaseManager
from kakeibo.utils.app_config import CONFIG_DIR, get_db_folder, set_db_folder
from kakeibo.utils.date_helpers import DATE_FORMAT_OPTIONS

_APPEARANCE_MODES = ["System", "Light", "Dark"]
_HINT_COLOR = "gray60"
_NOTICE_COLOR = "#FF9800"


class SettingsTab(ctk.CTkFrame):
    """Where the data file lives, plus appearance and date display."""

    def __init__(self, master, db: DatabaseManager, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._db = db
        self.grid_columnconfigure(0, weight=1)

        self._folder_var = ctk.StringVar(value=get_db_folder())
        self._appearance_var = ctk.StringVar()
        self._date_fmt_var = ctk.StringVar()
        self._notice_var = ctk.StringVar()

        self._build_storage_card(self._card("Data Folder", 0))
        self._build_display_card(self._card("Display", 1))
        ctk.CTkLabel(
            self, textvariable=self._notice_var, text_color=_NOTICE_COLOR,
            font=ctk.CTkFont(size=11),
        ).grid(row=2, column=0, padx=16, pady=4, sticky="w")

        self.refresh()

    def refresh(self):
        self._appearance_var.set(self._db.get_setting("appearance_mode").title())
        fmt = self._db.get_setting("date_format")
        self._date_fmt_var.set(fmt if fmt in DATE_FORMAT_OPTIONS else DATE_FORMAT_OPTIONS[0])

    def _card(self, title: str, row: int) -> ctk.CTkFrame:
        card = ctk.CTkFrame(self, corner_radius=8)
        card.grid(row=row, column=0, padx=12, pady=8, sticky="ew")
        card.grid_columnconfigure(1, weight=1)
        ctk.CTkLabel(card, text=title, font=ctk.CTkFont(size=14, weight="bold")).grid(
            row=0, column=0, columnspan=3, padx=12, pady=(10, 4), sticky="w"
        )
        return card

    # ── Storage folder (bootstrap config, applied on restart) ─────────────────

    def _build_storage_card(self, card):
        ctk.CTkLabel(
            card, text="kakeibo.db is kept in this folder.",
            text_color=_HINT_COLOR, font=ctk.CTkFont(size=11),
        ).grid(row=1, column=0, columnspan=3, padx=12, sticky="w")
        ctk.CTkEntry(card, textvariable=self._folder_var, state="readonly").grid(
            row=2, column=0, columnspan=3, padx=12, pady=6, sticky="ew"
        )
        ctk.CTkButton(card, text="Browse…", width=90, command=self._browse).grid(
            row=3, column=0, padx=12, pady=(0, 10), sticky="w"
        )
        ctk.CTkButton(
            card, text="Use Default", width=110,
            fg_color="transparent", border_width=1, text_color=("gray10", "gray90"),
            command=lambda: self._change_folder(None),
        ).grid(row=3, column=2, padx=12, pady=(0, 10), sticky="e")

    def _browse(self):
        folder = filedialog.askdirectory(title="Choose data folder", initialdir=self._folder_var.get())
        if folder:
            self._change_folder(folder)

    def _change_folder(self, folder: str | None):
        try:
            set_db_folder(folder)
        except OSError as e:
            messagebox.showerror("Could Not Save", str(e))
            return
        self._folder_var.set(folder or str(CONFIG_DIR))
        self._notice_var.set("Restart Kakeibo to use the new folder.")

    # ── Display preferences (app_settings table) ──────────────────────────────

    def _build_display_card(self, card):
        ctk.CTkLabel(card, text="Appearance").grid(row=1, column=0, padx=12, pady=6, sticky="w")
        ctk.CTkOptionMenu(
            card, values=_APPEARANCE_MODES, variable=self._appearance_var,
            command=self._on_appearance,
        ).grid(row=1, column=2, padx=12, pady=6, sticky="e")

        ctk.CTkLabel(card, text="Date format").grid(row=2, column=0, padx=12, pady=(6, 10), sticky="w")
        ctk.CTkOptionMenu(
            card, values=DATE_FORMAT_OPTIONS, variable=self._date_fmt_var,
            command=self._on_date_format,
        ).grid(row=2, column=2, padx=12, pady=(6, 10), sticky="e")

    def _on_appearance(self, choice: str):
        mode = choice.lower()
        self._db.set_setting("appearance_mode", mode)
        ctk.set_appearance_mode(mode)

    def _on_date_format(self, choice: str):
        self._db.set_setting("date_format", choice)
        self._notice_var.set("The new date format is used after a restart.")
