"""Admin dashboard CLI tool (admin-dashboard)."""

from typing import Optional

from sqlalchemy.engine import make_url
import typer

app = typer.Typer(name="admin-dashboard", help="Admin Dashboard CLI")
db_app = typer.Typer(help="Database management commands")
app.add_typer(db_app, name="db")


def _server_connection():
    """PyMySQL connection to the server named in DATABASE_URL, plus the db name."""
    import pymysql
    from admin_dashboard.core.config import settings

    url = make_url(settings.DATABASE_URL)
    if not url.drivername.startswith("mysql"):
        typer.echo(f"❌ Only MySQL URLs are supported here, got '{url.drivername}'")
        raise typer.Exit(code=1)
    conn = pymysql.connect(
        host=url.host or "localhost",
        port=url.port or 3306,
        user=url.username,
        password=url.password or "",
    )
    return conn, url.database


@db_app.command("create")
def db_create():
    """Create the MySQL database if it doesn't exist."""
    conn, db_name = _server_connection()
    try:
        cursor = conn.cursor()
        cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{db_name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()
        typer.echo(f"✅ Database '{db_name}' created (or already exists)")
    finally:
        conn.close()


@db_app.command("init")
def db_init():
    """Create all tables."""
    from admin_dashboard.db.session import init_db

    init_db()
    typer.echo("✅ Tables created")


@db_app.command("seed")
def db_seed(
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible data"),
    users: Optional[int] = typer.Option(None, help="Number of users to create"),
):
    """Replace users, subscriptions and tickets with demo data."""
    from admin_dashboard.db.session import SessionLocal
    from admin_dashboard.db.seeds.seed_demo_data import SeedState, make_faker, seed_demo_data

    db = SessionLocal()
    try:
        seed_demo_data(db, SeedState(), fake=make_faker(seed), user_count=users)
    finally:
        db.close()
    typer.echo("✅ All seeds applied")


@db_app.command("reset")
def db_reset():
    """Drop and recreate every table (DANGER)."""
    confirm = typer.confirm("⚠️  This will DROP all tables, activity logs included. Continue?")
    if not confirm:
        raise typer.Abort()
    from admin_dashboard.db.base import Base
    from admin_dashboard.db.session import engine, init_db

    import admin_dashboard.models  # noqa: F401
    Base.metadata.drop_all(bind=engine)
    init_db()
    typer.echo("✅ Tables reset")


@app.command("token")
def get_token(
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Admin password"),
    api_url: str = typer.Option("http://localhost:8000", help="API base URL"),
):
    """Log in through the API and print a bearer token."""
    import httpx
    resp = httpx.post(f"{api_url}/api/auth/login", json={"password": password}, timeout=10)
    if resp.status_code != 200:
        typer.echo(f"❌ Login failed: {resp.json().get('detail')}")
        raise typer.Exit(code=1)
    typer.echo(resp.json()["token"])


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="Host"),
    port: int = typer.Option(8000, help="Port"),
    reload: bool = typer.Option(True, help="Auto-reload"),
):
    """Start the FastAPI development server."""
    import uvicorn
    uvicorn.run("admin_dashboard.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
