import customtkinter as ctk

from kakeibo.database.db_manager import DatabaseManager
from kakeibo.database.local_store import LocalStore

from kakeibo.services.category_service import CategoryService
from kakeibo.services.demo_data import demo_records
from kakeibo.services.report_service import ReportService
from kakeibo.services.transaction_service import TransactionService

from kakeibo.ui.app_window import AppWindow
from kakeibo.utils import app_config, log
from kakeibo.utils.date_helpers import now_local


def main():
    # ── Bootstrap: read folder and log level from pre-DB config ───────────────
    log.configure(app_config.get_log_level())

    # ── Database ─────────────────────────────────────────────────────────────
    db = DatabaseManager.open_in_folder(app_config.get_db_folder())
    store = LocalStore(db)

    # ── Services ─────────────────────────────────────────────────────────────
    category_svc = CategoryService()
    initial = demo_records(now_local()) if app_config.seed_demo_data() else []
    tx_svc = TransactionService(store, category_svc, initial_records=initial)
    report_svc = ReportService(tx_svc, category_svc)

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(db.get_setting("appearance_mode", "system"))
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        db=db,
        store=store,
        tx_service=tx_svc,
        report_service=report_svc,
        category_service=category_svc,
        date_format=db.get_setting("date_format", "YYYY/MM/DD"),
    )
    app.protocol("WM_DELETE_WINDOW", app.shutdown)
    app.mainloop()


if __name__ == "__main__":
    main()
