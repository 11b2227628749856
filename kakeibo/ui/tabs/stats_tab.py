import customtkinter as ctk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from kakeibo.models.summary import CategoryStat
from kakeibo.services.month_navigator import MonthNavigator
from kakeibo.services.report_service import ReportService
from kakeibo.ui import theme
from kakeibo.utils.currency import format_yen


class StatsTab(ctk.CTkFrame):
    """Expense report: per-category totals and shares for the selected month."""

    def __init__(
        self,
        master,
        report_service: ReportService,
        navigator: MonthNavigator,
        notify_refresh,   # callable
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._report_svc = report_service
        self._nav = navigator
        self._notify_refresh = notify_refresh
        self._month_var = ctk.StringVar(value=navigator.label)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_toolbar()
        self._build_total()
        self._build_body()
        self._load()

    def refresh(self):
        self._load()

    def _build_toolbar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))
        ctk.CTkLabel(
            bar, text="Expense Report", font=ctk.CTkFont(size=14, weight="bold"),
        ).pack(side="left", padx=12, pady=8)
        ctk.CTkButton(bar, text="▶", width=28, command=lambda: self._change_month(1)).pack(side="right", padx=(0, 12))
        ctk.CTkLabel(bar, textvariable=self._month_var, width=130, anchor="center").pack(side="right", padx=4)
        ctk.CTkButton(bar, text="◀", width=28, command=lambda: self._change_month(-1)).pack(side="right")

    def _change_month(self, diff: int):
        self._nav.change_month(diff)
        self._notify_refresh("month")

    def _build_total(self):
        card = ctk.CTkFrame(self, fg_color=("gray90", "gray20"), corner_radius=10)
        card.grid(row=1, column=0, sticky="ew", padx=16, pady=10)
        card.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(card, text="Total Expenses", text_color="gray60").grid(row=0, column=0, pady=(10, 0))
        self._total_label = ctk.CTkLabel(
            card, text="", font=ctk.CTkFont(size=22, weight="bold"),
            text_color=theme.EXPENSE_COLOR,
        )
        self._total_label.grid(row=1, column=0, pady=(4, 10))

    def _build_body(self):
        body = ctk.CTkFrame(self, fg_color="transparent")
        body.grid(row=2, column=0, sticky="nsew", padx=16, pady=(0, 12))
        body.grid_columnconfigure(0, weight=1)
        body.grid_rowconfigure(1, weight=1)

        pie_outer = ctk.CTkFrame(body, fg_color=("gray90", "gray20"), corner_radius=8)
        pie_outer.grid(row=0, column=0, sticky="ew", pady=(0, 8))
        self._pie_fig = Figure(figsize=(3, 2.4), dpi=80, tight_layout=True)
        self._pie_ax = self._pie_fig.add_subplot(111)
        self._pie_mpl = FigureCanvasTkAgg(self._pie_fig, master=pie_outer)
        self._pie_mpl.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=8)

        self._rows_frame = ctk.CTkScrollableFrame(body, label_text="By Category")
        self._rows_frame.grid(row=1, column=0, sticky="nsew")
        self._rows_frame.grid_columnconfigure(0, weight=1)

    def _load(self):
        month = self._nav.month
        self._month_var.set(self._nav.label)
        expense = self._report_svc.get_summary(month).expense
        breakdown = self._report_svc.get_category_breakdown(month)

        self._total_label.configure(text=format_yen(expense))
        self.after(50, lambda b=breakdown: self._draw_pie_chart(b))

        for w in self._rows_frame.winfo_children():
            w.destroy()
        if expense <= 0:
            ctk.CTkLabel(
                self._rows_frame, text="No expenses this month.", text_color="gray60",
            ).pack(pady=20)
            return
        for stat in breakdown:
            self._make_row(stat)

    def _make_row(self, stat: CategoryStat):
        color = theme.category_color(stat.category.id)
        f = ctk.CTkFrame(self._rows_frame, fg_color="transparent")
        f.pack(fill="x", pady=4, padx=4)
        top_row = ctk.CTkFrame(f, fg_color="transparent")
        top_row.pack(fill="x")
        ctk.CTkLabel(
            top_row, text=f"{theme.category_icon(stat.category.id)} {stat.category.name}", anchor="w",
        ).pack(side="left")
        ctk.CTkLabel(
            top_row, text=f"{format_yen(stat.total)}  ({stat.percentage:.1f}%)",
            anchor="e", text_color="gray60",
        ).pack(side="right")
        bar = ctk.CTkProgressBar(f, progress_color=color)
        bar.pack(fill="x", pady=2)
        bar.set(stat.percentage / 100)

    def _style_ax(self, ax, fig):
        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if is_dark else "#e4e4e4"
        fig.patch.set_facecolor(bg)
        ax.set_facecolor(bg)

    def _draw_pie_chart(self, breakdown: list[CategoryStat]):
        ax = self._pie_ax
        ax.clear()
        self._style_ax(ax, self._pie_fig)

        if not breakdown:
            ax.text(0.5, 0.5, "No expense data", ha="center", va="center",
                    transform=ax.transAxes, color="gray")
            ax.set_axis_off()
            self._pie_mpl.draw_idle()
            return

        ax.pie(
            [s.total for s in breakdown],
            colors=[theme.category_color(s.category.id) for s in breakdown],
            startangle=90,
            counterclock=False,
        )
        ax.set_aspect("equal")
        self._pie_mpl.draw_idle()
