import customtkinter as ctk
from kakeibo.services.transaction_service import TransactionService
from kakeibo.services.category_service import CategoryService
from kakeibo.ui.components.date_picker import DatePickerWidget
from kakeibo.ui.components.num_pad import NumPad
from kakeibo.ui.theme import category_icon, EXPENSE_COLOR, INCOME_COLOR
from kakeibo.utils.amount_input import append_digits, delete_last, is_submittable, parse_amount
from kakeibo.utils.currency import format_yen
from kakeibo.utils.date_helpers import combine_with_time, now_local

_TYPE_LABELS = {"expense": "Expense", "income": "Income"}


class TransactionForm(ctk.CTkToplevel):
    """Add an income or expense. Transactions are never edited in place."""

    def __init__(
        self,
        master,
        tx_service: TransactionService,
        category_service: CategoryService,
        initial_type: str = "expense",
        date_format: str = "YYYY/MM/DD",
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._tx_svc = tx_service
        self._cat_svc = category_service
        self._amount = ""
        self.saved = False

        self.title("Add Record")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        r = 0
        self._type_var = ctk.StringVar(value=_TYPE_LABELS[initial_type])
        ctk.CTkSegmentedButton(
            self, values=list(_TYPE_LABELS.values()),
            variable=self._type_var,
            command=lambda _: self._on_type_change(),
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(16, 8), sticky="ew")
        r += 1

        self._amount_label = ctk.CTkLabel(
            self, text=format_yen(0), anchor="e",
            font=ctk.CTkFont(size=28, weight="bold"),
        )
        self._amount_label.grid(row=r, column=0, columnspan=2, padx=16, pady=4, sticky="ew")
        r += 1

        self._label("Category:", r)
        self._cat_var = ctk.StringVar()
        self._cat_combo = ctk.CTkComboBox(
            self, variable=self._cat_var, width=200, state="readonly"
        )
        self._cat_combo.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
        r += 1

        self._label("Note:", r)
        self._note_var = ctk.StringVar()
        ctk.CTkEntry(self, textvariable=self._note_var, width=200).grid(
            row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
        )
        r += 1

        self._label("Date:", r)
        self._date_picker = DatePickerWidget(self, date_format=date_format)
        self._date_picker.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="w")
        r += 1

        NumPad(self, on_input=self._on_num_input, on_delete=self._on_num_delete).grid(
            row=r, column=0, columnspan=2, padx=12, pady=(8, 4), sticky="ew"
        )
        r += 1

        self._build_footer(r)
        self._on_type_change()

        self.transient(master)
        self.grab_set()
        self._center()

    def _label(self, text, row):
        ctk.CTkLabel(self, text=text).grid(
            row=row, column=0, padx=(16, 8), pady=4, sticky="e"
        )

    def _build_footer(self, r):
        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#F44336", wraplength=280, anchor="w"
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")
        r += 1

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=r, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        ).pack(side="left")
        self._save_btn = ctk.CTkButton(
            btn_frame, text="Save", width=110, state="disabled",
            command=self._on_save,
        )
        self._save_btn.pack(side="right")

    @property
    def _type(self) -> str:
        label = self._type_var.get()
        return next(k for k, v in _TYPE_LABELS.items() if v == label)

    def _on_type_change(self):
        self._cats = self._cat_svc.get_for_transaction_type(self._type)
        names = [f"{category_icon(c.id)} {c.name}" for c in self._cats]
        self._cat_combo.configure(values=names)
        # Reset to the first category of the newly selected list
        self._cat_var.set(names[0])
        self._cat_combo.set(names[0])
        color = INCOME_COLOR if self._type == "income" else EXPENSE_COLOR
        self._amount_label.configure(text_color=color)

    def _on_num_input(self, digits: str):
        self._amount = append_digits(self._amount, digits)
        self._refresh_amount()

    def _on_num_delete(self):
        self._amount = delete_last(self._amount)
        self._refresh_amount()

    def _refresh_amount(self):
        self._amount_label.configure(text=format_yen(parse_amount(self._amount)))
        self._save_btn.configure(state="normal" if is_submittable(self._amount) else "disabled")

    def _on_save(self):
        amount = parse_amount(self._amount)
        if amount <= 0:
            return

        picked = self._date_picker.get_date()
        if picked is None:
            self._error_var.set("Invalid date.")
            return

        names = list(self._cat_combo.cget("values"))
        idx = names.index(self._cat_var.get()) if self._cat_var.get() in names else 0
        tx = self._tx_svc.add(
            self._type,
            amount,
            self._cats[idx],
            self._note_var.get().strip(),
            combine_with_time(picked, now_local()),
        )
        self.saved = tx is not None
        self.destroy()

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")
