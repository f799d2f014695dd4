import os
from pathlib import Path

import requests
import typer


app = typer.Typer(help="Client for the OddsTrack API")
BASE = os.getenv("API_BASE", "http://127.0.0.1:8000")
API_KEY = os.getenv("API_KEY")
USER_ID = os.getenv("USER_ID")
USER_ROLE = os.getenv("USER_ROLE", "user")


def _headers():
    h = {"X-User-Role": USER_ROLE}
    if USER_ID:
        h["X-User-Id"] = USER_ID
    if API_KEY:
        h["X-API-Key"] = API_KEY
    return h


def _show(r: requests.Response):
    typer.echo(r.json())
    if not r.ok:
        raise typer.Exit(code=1)


@app.command()
def upload(image: Path = typer.Argument(..., exists=True, dir_okay=False)):
    """Replace your history with the multipliers read from a screenshot."""
    with image.open("rb") as fh:
        r = requests.post(f"{BASE}/upload", files={"image": (image.name, fh)}, headers=_headers())
    _show(r)


@app.command()
def replace(text: str):
    """Replace your history with the multipliers found in TEXT."""
    _show(requests.post(f"{BASE}/replace", json={"text": text}, headers=_headers()))


@app.command()
def manual(values: list[str]):
    """Append one or more values, e.g. `manual 2.45 1.20x`."""
    _show(requests.post(f"{BASE}/manual", json={"values": values}, headers=_headers()))


@app.command()
def history():
    _show(requests.get(f"{BASE}/history", headers=_headers()))


@app.command()
def stats():
    _show(requests.get(f"{BASE}/stats", headers=_headers()))


@app.command()
def predict(mode: str = typer.Option("forecast", help="forecast | moving-window")):
    _show(requests.get(f"{BASE}/predict", params={"mode": mode}, headers=_headers()))


if __name__ == "__main__":
    app()
