import customtkinter as ctk

from kakeibo.ui.theme import EXPENSE_COLOR


class ConfirmDialog(ctk.CTkToplevel):
    """Blocking yes/no prompt. Use ConfirmDialog.ask(...) for the answer."""

    def __init__(self, master, title: str, message: str, confirm_text: str = "Delete", **kwargs):
        super().__init__(master, **kwargs)
        self.result = False

        self.title(title)
        self.resizable(False, False)
        self.grid_columnconfigure((0, 1), weight=1)

        ctk.CTkLabel(self, text=message, wraplength=260).grid(
            row=0, column=0, columnspan=2, padx=24, pady=(20, 14)
        )
        ctk.CTkButton(
            self, text="Cancel", width=100,
            fg_color=("gray75", "gray30"), text_color=("gray10", "gray90"),
            command=lambda: self._close(False),
        ).grid(row=1, column=0, padx=(24, 6), pady=(0, 20))
        ctk.CTkButton(
            self, text=confirm_text, width=100, fg_color=EXPENSE_COLOR,
            command=lambda: self._close(True),
        ).grid(row=1, column=1, padx=(6, 24), pady=(0, 20))

        self.bind("<Return>", lambda _e: self._close(True))
        self.bind("<Escape>", lambda _e: self._close(False))
        self.protocol("WM_DELETE_WINDOW", lambda: self._close(False))

        self.transient(master)
        self.update_idletasks()
        x = master.winfo_rootx() + (master.winfo_width() - self.winfo_reqwidth()) // 2
        y = master.winfo_rooty() + (master.winfo_height() - self.winfo_reqheight()) // 3
        self.geometry(f"+{x}+{y}")
        self.grab_set()
        self.focus_set()

    @classmethod
    def ask(cls, master, title: str, message: str, **kwargs) -> bool:
        dialog = cls(master, title, message, **kwargs)
        master.wait_window(dialog)
        return dialog.result

    def _close(self, answer: bool):
        self.result = answer
        self.grab_release()
        self.destroy()
