import os
import sys
import typer
from hrledger.config import settings
from hrledger.domain.enums import Currency
from hrledger.logging import logger, get_run_id

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    HR Ledger CLI: attendance, payroll and P&L reporting.
    """
    pass

@app.command(name="doctor")
def doctor():
    """
    Check configuration, data directory and database health.
    """
    logger.info("Running doctor check...")

    failures: list[str] = []
    passed = 0

    print("\n🩺 HR Ledger Doctor\n")

    # ── Check 1: Environment / Interpreter ──────────────────────────────────
    print("[Environment]")
    print(f"  Python: {sys.version.split()[0]}")
    print(f"  Run ID: {get_run_id()}")
    passed += 1

    # ── Check 2: Display currency ───────────────────────────────────────────
    print("\n[Configuration]")
    valid = {c.value for c in Currency}
    if settings.DEFAULT_DISPLAY_CURRENCY in valid:
        print(f"  DEFAULT_DISPLAY_CURRENCY:    ✅ {settings.DEFAULT_DISPLAY_CURRENCY}")
        passed += 1
    else:
        print(f"  DEFAULT_DISPLAY_CURRENCY:    ❌ {settings.DEFAULT_DISPLAY_CURRENCY!r}")
        failures.append(f"DEFAULT_DISPLAY_CURRENCY must be one of {', '.join(sorted(valid))}")

    print(f"  CURRENCY_STRICT:             {settings.CURRENCY_STRICT}")
    print(f"  EXCHANGE_RATE_URL:           {settings.EXCHANGE_RATE_URL}")
    print(f"  VACATION_ALLOWANCE_DAYS:     {settings.VACATION_ALLOWANCE_DAYS}")

    # ── Check 3: Data directory ──────────────────────────────────────────────
    print("\n[Data Directory]")
    data_dir = settings.data_dir
    if data_dir.is_dir() and os.access(data_dir, os.W_OK):
        print(f"  {data_dir}/  ✅ Writable: {data_dir.absolute()}")
        passed += 1
    else:
        print(f"  {data_dir}/  ❌ Missing or not writable: {data_dir.absolute()}")
        failures.append(f"{data_dir}/ must exist and be writable")

    # ── Check 4: Rate table ──────────────────────────────────────────────────
    print("\n[Database]")
    try:
        from hrledger.infra.db.uow import UnitOfWork
        from hrledger.infra.db.repositories.currency_repository import CurrencyRepository
        with UnitOfWork() as uow:
            count = len(CurrencyRepository(uow.session).list_all())
        if count:
            print(f"  currency_rates:              ✅ {count} rates")
            passed += 1
        else:
            print("  currency_rates:              ❌ Empty")
            failures.append("No currency rates stored; run `hrledger db init`")
    except Exception as e:
        print(f"  currency_rates:              ❌ {e}")
        failures.append("Database not reachable; run `hrledger db init`")

    # ── Summary ──────────────────────────────────────────────────────────────
    total = passed + len(failures)
    print(f"\n{'─' * 50}")
    if failures:
        print(f"Result: {passed}/{total} checks passed\n")
        for msg in failures:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    else:
        print(f"Result: {passed}/{total} checks passed, all good ✅")
        print()


db_app = typer.Typer(help="Database management commands.")
app.add_typer(db_app, name="db")

@db_app.command("init")
def init():
    """Create tables and seed the default currency rates."""
    from hrledger.db import init_db
    try:
        init_db()
        print("✅ Database initialized.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)


rates_app = typer.Typer(help="Currency rate commands.")
app.add_typer(rates_app, name="rates")

@rates_app.command("show")
def rates_show():
    """Print the stored rate table."""
    from hrledger.infra.db.uow import UnitOfWork
    from hrledger.services.currency_service import CurrencyService
    with UnitOfWork() as uow:
        table = CurrencyService(uow).list_rates()
    if not table.items:
        print("No rates stored.")
        return
    for r in table.items:
        print(f"  {r.from_curr.value} → {r.to_curr.value}: {r.rate:g}")
    if table.last_updated:
        print(f"Last updated: {table.last_updated:%Y-%m-%d %H:%M}")

@rates_app.command("refresh")
def rates_refresh():
    """Fetch live rates and replace the stored table."""
    from hrledger.infra.db.uow import UnitOfWork
    from hrledger.services.currency_service import CurrencyService
    with UnitOfWork() as uow:
        result = CurrencyService(uow).refresh_rates()
    if not result.success:
        print(f"❌ Failed: {result.error}")
        raise typer.Exit(code=1)
    print(f"✅ Updated {len(result.rates)} rates.")


report_app = typer.Typer(help="Reporting commands.")
app.add_typer(report_app, name="report")

@report_app.command("month")
def report_month(
    year: int,
    month: int = typer.Argument(..., min=1, max=12),
    currency: Currency | None = typer.Option(None, help="Display currency"),
):
    """Print income, expenses and net result for one month."""
    from hrledger.domain.currency import format_currency
    from hrledger.infra.db.uow import UnitOfWork
    from hrledger.services.reports_service import ReportsService
    with UnitOfWork() as uow:
        rep = ReportsService(uow).month(year, month, currency)

    cur = rep.currency
    print(f"\n{year}-{month:02d} ({cur.value})\n")
    print("[Income]")
    print(f"  Consultants:  {format_currency(rep.income.consultant, cur)}")
    print(f"  Ads:          {format_currency(rep.income.ads, cur)}")
    print(f"  In-app:       {format_currency(rep.income.iap, cur)}")
    print(f"  Total:        {format_currency(rep.income.total, cur)}")
    print("\n[Expenses]")
    print(f"  Salaries:     {format_currency(rep.expenses.salaries, cur)}"
          f" ({rep.expenses.sick_days} sick days, -{format_currency(rep.expenses.salary_deduction, cur)})")
    print(f"  Costs:        {format_currency(rep.expenses.costs, cur)}")
    print(f"  Total:        {format_currency(rep.expenses.total, cur)}")
    print(f"\n{'─' * 50}")
    marker = "✅ Profit" if rep.is_profit else "❌ Loss"
    print(f"Net: {format_currency(rep.net, cur)}  {marker}\n")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
):
    """Run the HTTP API."""
    import uvicorn
    from hrledger.api.app import create_app
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    app()
