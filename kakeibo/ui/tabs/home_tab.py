import customtkinter as ctk
from kakeibo.models.transaction import Transaction
from kakeibo.services.month_navigator import MonthNavigator
from kakeibo.services.report_service import ReportService
from kakeibo.services.transaction_service import TransactionService
from kakeibo.ui.components.confirm_dialog import ConfirmDialog
from kakeibo.ui import theme
from kakeibo.utils.currency import format_signed_yen, format_yen
from kakeibo.utils.date_helpers import format_display_timestamp


class HomeTab(ctk.CTkFrame):
    """Monthly balance, income/expense totals and the month's records."""

    def __init__(
        self,
        master,
        tx_service: TransactionService,
        report_service: ReportService,
        navigator: MonthNavigator,
        notify_refresh,   # callable
        on_add,           # callable
        date_format: str = "YYYY/MM/DD",
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._tx_svc = tx_service
        self._report_svc = report_service
        self._nav = navigator
        self._notify_refresh = notify_refresh
        self._on_add = on_add
        self._date_format = date_format
        self._month_var = ctk.StringVar(value=navigator.label)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_month_nav()
        self._build_summary_cards()
        self._build_list()
        self._load()

    def refresh(self):
        self._load()

    def _build_month_nav(self):
        nav = ctk.CTkFrame(self, fg_color="transparent")
        nav.grid(row=0, column=0, sticky="ew", padx=16, pady=(12, 0))
        ctk.CTkButton(nav, text="◀", width=28, command=lambda: self._change_month(-1)).pack(side="left")
        ctk.CTkLabel(
            nav, textvariable=self._month_var,
            font=ctk.CTkFont(size=15, weight="bold"), width=150, anchor="center"
        ).pack(side="left", padx=8)
        ctk.CTkButton(nav, text="▶", width=28, command=lambda: self._change_month(1)).pack(side="left")
        ctk.CTkButton(nav, text="+ Add", width=80, command=self._on_add).pack(side="right")

    def _change_month(self, diff: int):
        self._nav.change_month(diff)
        self._notify_refresh("month")

    def _build_summary_cards(self):
        self._card_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._card_frame.grid(row=1, column=0, sticky="ew", padx=16, pady=12)
        self._card_frame.grid_columnconfigure((0, 1), weight=1)

    def _build_list(self):
        self._list_frame = ctk.CTkScrollableFrame(self, label_text="Records")
        self._list_frame.grid(row=2, column=0, sticky="nsew", padx=16, pady=(0, 12))
        self._list_frame.grid_columnconfigure(0, weight=1)

    def _load(self):
        month = self._nav.month
        self._month_var.set(self._nav.label)
        summary = self._report_svc.get_summary(month)
        transactions = self._report_svc.get_month_transactions(month)

        for w in self._card_frame.winfo_children():
            w.destroy()
        balance_color = theme.BALANCE_COLOR if summary.balance >= 0 else theme.NEGATIVE_BALANCE_COLOR
        self._make_card(self._card_frame, 0, 0, "Balance", summary.balance, balance_color, span=2, size=26)
        self._make_card(self._card_frame, 1, 0, "Income", summary.income, theme.INCOME_COLOR)
        self._make_card(self._card_frame, 1, 1, "Expenses", summary.expense, theme.EXPENSE_COLOR)

        for w in self._list_frame.winfo_children():
            w.destroy()
        self._list_frame.configure(label_text=f"Records ({len(transactions)})")
        if not transactions:
            ctk.CTkLabel(
                self._list_frame, text="No records for this month yet.\nUse + Add to record one.",
                text_color="gray60",
            ).pack(pady=30)
            return
        for idx, tx in enumerate(transactions):
            self._make_row(idx, tx)

    def _make_row(self, idx: int, tx: Transaction):
        bg = ("gray90", "gray20") if idx % 2 == 0 else ("gray86", "gray24")
        f = ctk.CTkFrame(self._list_frame, fg_color=bg, corner_radius=4)
        f.pack(fill="x", pady=1)
        f.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            f, text=theme.category_icon(tx.category.id), width=32,
            fg_color=theme.category_color(tx.category.id), corner_radius=16,
        ).grid(row=0, column=0, rowspan=2, padx=6, pady=4)

        meta = format_display_timestamp(tx.date, self._date_format)
        ctk.CTkLabel(f, text=tx.category.name, anchor="w",
                     font=ctk.CTkFont(weight="bold")).grid(row=0, column=1, sticky="ew")
        ctk.CTkLabel(
            f, text=f"{meta}  {tx.note}" if tx.note else meta,
            anchor="w", text_color="gray60", font=ctk.CTkFont(size=11),
        ).grid(row=1, column=1, sticky="ew")

        color = theme.INCOME_COLOR if tx.type == "income" else ("gray10", "gray90")
        ctk.CTkLabel(
            f, text=format_signed_yen(tx.amount, tx.type),
            text_color=color, anchor="e", width=100,
        ).grid(row=0, column=2, rowspan=2, padx=6)
        ctk.CTkButton(
            f, text="🗑", width=28,
            fg_color="transparent", text_color="gray60", hover_color=("gray80", "gray30"),
            command=lambda t=tx: self._delete(t),
        ).grid(row=0, column=3, rowspan=2, padx=(0, 6))

    def _delete(self, tx: Transaction):
        def confirm() -> bool:
            return ConfirmDialog.ask(
                self.winfo_toplevel(), "Delete Record", "Delete this record?"
            )

        if self._tx_svc.delete(tx.id, confirm):
            self._notify_refresh("transaction")

    def _make_card(self, parent, row, col, label, value, color, span=1, size=18):
        card = ctk.CTkFrame(parent, fg_color=("gray90", "gray20"), corner_radius=10)
        card.grid(row=row, column=col, columnspan=span, padx=6, pady=4, sticky="ew")
        card.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(
            card, text=label, font=ctk.CTkFont(size=12), text_color="gray60",
        ).grid(row=0, column=0, pady=(10, 0), padx=16)
        ctk.CTkLabel(
            card, text=format_yen(value),
            font=ctk.CTkFont(size=size, weight="bold"),
            text_color=color,
        ).grid(row=1, column=0, pady=(4, 10), padx=16)
