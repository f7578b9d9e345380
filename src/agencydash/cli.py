import asyncio
import os
import sys
import typer
from agencydash.config import settings
from agencydash.logging import logger, get_session_id

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    Agency Dashboard CLI.
    """
    pass

@app.command(name="doctor")
def doctor():
    """
    Check configuration and environment health.
    """
    logger.info("Running doctor check...")

    failures: list[str] = []
    passed = 0

    print("\n🩺 Agency Dashboard Doctor\n")

    # ── Check 1: Environment / Interpreter ──────────────────────────────────
    print("[Environment]")
    print(f"  Python:     {sys.version.split()[0]}")
    print(f"  Session ID: {get_session_id()}")
    passed += 1

    # ── Check 2: Store backend ───────────────────────────────────────────────
    print("\n[Store]")
    print(f"  STORE_BACKEND:               {settings.STORE_BACKEND}")
    if settings.STORE_BACKEND == "postgrest":
        if settings.STORE_URL:
            print(f"  STORE_URL:                   ✅ {settings.STORE_URL}")
            passed += 1
        else:
            print("  STORE_URL:                   ❌ Missing")
            failures.append("STORE_URL is not set; add it to .env")
        if settings.store_api_key:
            print("  STORE_API_KEY:               ✅ Set")
            passed += 1
        else:
            print("  STORE_API_KEY:               ❌ Missing")
            failures.append("STORE_API_KEY is not set; add it to .env")
    else:
        db_file = settings.sqlite_path
        if db_file is None:
            print(f"  DATABASE_URL:                ✅ {settings.DATABASE_URL}")
            passed += 1
        elif db_file.exists() and os.access(db_file, os.W_OK):
            print(f"  {db_file}".ljust(31) + "✅ Exists and writable")
            passed += 1
        elif db_file.exists():
            print(f"  {db_file}".ljust(31) + "❌ Exists but NOT writable")
            failures.append(f"{db_file} exists but is not writable; check file permissions")
        else:
            print(f"  {db_file}".ljust(31) + "❌ Missing")
            failures.append(f"{db_file} not found; run `agencydash db init`")

    # ── Check 3: Counter animation ───────────────────────────────────────────
    print("\n[Dashboard]")
    print(f"  API_BASE_URL:                {settings.API_BASE_URL}")
    if settings.COUNTER_FRAME_INTERVAL_MS > 0:
        print(f"  COUNTER_FRAME_INTERVAL_MS:   ✅ {settings.COUNTER_FRAME_INTERVAL_MS}")
        passed += 1
    else:
        print(f"  COUNTER_FRAME_INTERVAL_MS:   ❌ {settings.COUNTER_FRAME_INTERVAL_MS}")
        failures.append("COUNTER_FRAME_INTERVAL_MS must be positive")
    print(f"  COUNTER_DURATION_MS:         {settings.COUNTER_DURATION_MS}")

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


async def _with_store(fn):
    from agencydash.infra.store import create_store
    store = create_store()
    try:
        return await fn(store)
    finally:
        await store.aclose()


@app.command(name="stats")
def stats():
    """Print the dashboard statistics."""
    from agencydash.domain.exceptions import RemoteStoreError
    from agencydash.services.dashboard_service import DashboardService
    try:
        result = asyncio.run(_with_store(lambda store: DashboardService(store).get_statistics()))
    except RemoteStoreError as e:
        print(f"❌ Failed: {e.message}")
        raise typer.Exit(code=1)

    print(f"Students:             {result.total_students:,}")
    print(f"Universities:         {result.total_universities:,}")
    print(f"Pending applications: {result.active_applications:,}")
    print(f"Total applicants:     {result.total_applicants:,}")
    print(f"Revenue:              {result.total_revenue:,.2f}")
    print(f"Pending tasks:        {result.pending_tasks:,}")
    print(f"Agents:               {result.total_agents:,}")


@app.command(name="commissions")
def commissions():
    """Print per-agent commission figures."""
    from agencydash.domain.exceptions import RemoteStoreError
    from agencydash.services.commission_service import CommissionService
    try:
        rows = asyncio.run(_with_store(lambda store: CommissionService(store).calculate()))
    except RemoteStoreError as e:
        print(f"❌ Failed: {e.message}")
        raise typer.Exit(code=1)

    if not rows:
        print("No agents found.")
        return
    for r in rows:
        print(f"{r.name}: {r.students_count} students, received {r.total_received:,.2f}, due {r.commission_due:,.2f}")


@app.command(name="count")
def count(
    target: int,
    duration_ms: int = typer.Option(settings.COUNTER_DURATION_MS, help="Animation length in milliseconds"),
    prefix: str = typer.Option("", help="Text shown before the number"),
):
    """Animate a counter up to TARGET in the terminal."""
    from agencydash.animation import AnimatedCounter, BlockingFrameScheduler
    scheduler = BlockingFrameScheduler(interval_ms=settings.COUNTER_FRAME_INTERVAL_MS)
    counter = AnimatedCounter(
        target, scheduler=scheduler, duration_ms=duration_ms, prefix=prefix,
        on_change=lambda v: print(f"\r{prefix}{v:,}", end="", flush=True),
    )
    counter.start()
    scheduler.run()
    counter.close()
    print()


db_app = typer.Typer(help="Local SQL mirror commands.")
app.add_typer(db_app, name="db")

@db_app.command("init")
def init():
    """Create the mirror tables in DATABASE_URL."""
    from sqlmodel import SQLModel
    from agencydash.infra.db.engine import engine
    try:
        if settings.sqlite_path is not None:
            settings.sqlite_path.parent.mkdir(parents=True, exist_ok=True)
        SQLModel.metadata.create_all(engine)
        logger.info("Database initialized successfully.")
        print("✅ Database initialized.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
