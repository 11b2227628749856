import customtkinter as ctk
from kakeibo.database.db_manager import DatabaseManager
from kakeibo.database.local_store import LocalStore
from kakeibo.services.category_service import CategoryService
from kakeibo.services.month_navigator import MonthNavigator
from kakeibo.services.report_service import ReportService
from kakeibo.services.transaction_service import TransactionService
from kakeibo.ui.components.transaction_form import TransactionForm
from kakeibo.ui.tabs.home_tab import HomeTab
from kakeibo.ui.tabs.settings_tab import SettingsTab
from kakeibo.ui.tabs.stats_tab import StatsTab
from kakeibo.utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT, STORAGE_KEY, STORAGE_POLL_MS
from kakeibo.utils.log import get_logger

log = get_logger(__name__)

_REFRESH_SCOPES: dict[str, set[str]] = {
    "transaction": {"home", "stats"},
    "month":       {"home", "stats"},
    "full":        {"home", "stats", "settings"},
}


class AppWindow(ctk.CTk):
    def __init__(
        self,
        db: DatabaseManager,
        store: LocalStore,
        tx_service: TransactionService,
        report_service: ReportService,
        category_service: CategoryService,
        date_format: str = "YYYY/MM/DD",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._db = db
        self._store = store
        self._tx_svc = tx_service
        self._report_svc = report_service
        self._cat_svc = category_service
        self._date_format = date_format
        self._navigator = MonthNavigator()

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._build_tabs()

        self._unsubscribe = self._store.subscribe(STORAGE_KEY, self._on_external_change)
        self._poll_job = self.after(STORAGE_POLL_MS, self._poll_storage)

    def _build_tabs(self):
        self._tabview = ctk.CTkTabview(self)
        self._tabview.grid(row=0, column=0, sticky="nsew", padx=8, pady=(0, 8))

        for tab_name in ("Home", "Stats", "Settings"):
            self._tabview.add(tab_name)
            self._tabview.tab(tab_name).grid_columnconfigure(0, weight=1)
            self._tabview.tab(tab_name).grid_rowconfigure(0, weight=1)

        self._home_tab = HomeTab(
            self._tabview.tab("Home"),
            tx_service=self._tx_svc,
            report_service=self._report_svc,
            navigator=self._navigator,
            notify_refresh=self.notify_tabs_refresh,
            on_add=self._open_add_form,
            date_format=self._date_format,
        )
        self._home_tab.grid(row=0, column=0, sticky="nsew")

        self._stats_tab = StatsTab(
            self._tabview.tab("Stats"),
            report_service=self._report_svc,
            navigator=self._navigator,
            notify_refresh=self.notify_tabs_refresh,
        )
        self._stats_tab.grid(row=0, column=0, sticky="nsew")

        self._settings_tab = SettingsTab(self._tabview.tab("Settings"), db=self._db)
        self._settings_tab.grid(row=0, column=0, sticky="nsew")

    def _open_add_form(self):
        form = TransactionForm(
            self, self._tx_svc, self._cat_svc, date_format=self._date_format,
        )
        self.wait_window(form)
        if form.saved:
            self._tabview.set("Home")
            self.notify_tabs_refresh("transaction")

    # ── Refresh ──────────────────────────────────────────────────────────────
    def notify_tabs_refresh(self, scope: str = "full"):
        tabs = _REFRESH_SCOPES.get(scope, _REFRESH_SCOPES["full"])
        if "home"     in tabs: self._home_tab.refresh()
        if "stats"    in tabs: self._stats_tab.refresh()
        if "settings" in tabs: self._settings_tab.refresh()

    # ── Storage sync ─────────────────────────────────────────────────────────
    def _poll_storage(self):
        self._store.poll()
        self._poll_job = self.after(STORAGE_POLL_MS, self._poll_storage)

    def _on_external_change(self, key, _value):
        log.debug("Refreshing after external change to %r", key)
        self.notify_tabs_refresh("transaction")

    def shutdown(self):
        self.after_cancel(self._poll_job)
        self._unsubscribe()
        self._db.close()
        self.destroy()
