"""
Typer-based command-line interface for City Weather Application.

This module exposes the catalog and the current-weather lookup as commands
for scriptable usage.
"""

import json
import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markdown import Markdown
from rich.text import Text
from rich import box

from ..core.app import WeatherApp
from ..core.conditions import ANIMATIONS
from ..core.exceptions import WeatherAppError
from ..core.models import ViewMode

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="City Weather - Command Line Interface",
    no_args_is_help=True,
    rich_markup_mode="rich"
)

console = Console()
_weather_app: Optional[WeatherApp] = None


def get_app() -> WeatherApp:
    """Build the weather application on first use."""
    global _weather_app
    if _weather_app is None:
        _weather_app = WeatherApp.from_config()
    return _weather_app


def match_city(weather_app: WeatherApp, name: str) -> str:
    """Find the catalog id for a city name, ignoring case."""
    country = weather_app.selection.selected_country
    for city in weather_app.get_cities(country):
        if city.id.lower() == name.strip().lower():
            return city.id
    return name


@app.command("countries")
def list_countries(
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format")
):
    """List the countries you can choose from."""
    countries = get_app().get_countries()
    if json_output:
        data = [{"code": c.code, "name": c.display_name} for c in countries]
        console.print(json.dumps(data, indent=2))
        return

    table = Table(title="🌍 Countries", box=box.ROUNDED)
    table.add_column("Code", style="cyan")
    table.add_column("Country", style="green")
    for country in countries:
        table.add_row(country.code, country.display_name)
    console.print(table)


@app.command("cities")
def list_cities(
    country: str = typer.Argument(..., help="Country code, e.g. IN"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format")
):
    """List the cities available for a country."""
    try:
        cities = get_app().get_cities(country.upper())
    except WeatherAppError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if json_output:
        console.print(json.dumps([city.id for city in cities], indent=2))
        return

    table = Table(title=f"🏙️  Cities in {country.upper()}", box=box.ROUNDED)
    table.add_column("City", style="green")
    for city in cities:
        table.add_row(city.display_name)
    console.print(table)


@app.command("current")
def current_weather(
    country: Optional[str] = typer.Option(None, "--country", "-c", help="Country code (default: first in catalog)"),
    city: Optional[str] = typer.Option(None, "--city", help="City name (default: first city of the country)"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format")
):
    """Get current weather for a city."""
    weather_app = get_app()
    try:
        if country:
            weather_app.select_country(country.upper())
        if city:
            weather_app.select_city(match_city(weather_app, city))
    except WeatherAppError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    state = weather_app.fetch_weather()
    if state.mode is not ViewMode.RESULT:
        console.print(f"[red]Error: {state.error}[/red]")
        raise typer.Exit(1)

    weather = state.weather
    selected_country = weather_app.selection.selected_country
    if json_output:
        data = weather.to_dict()
        data["country"] = selected_country
        data["animation"] = weather_app.animation_name()
        console.print(json.dumps(data, indent=2))
        return

    weather_info = "\n".join([
        f"- 📍 **Location:** {weather.location_name}, {selected_country}",
        f"- 🌤️  **Conditions:** {weather.condition_summary.title()}",
        f"- 🌡️  **Temperature:** {weather.temperature_c}°C",
        f"- 💧 **Humidity:** {weather.humidity_pct}%",
        f"- 💨 **Wind Speed:** {weather.wind_speed} m/s",
    ])
    console.print(Text(weather_app.animation_frames()[0]))
    console.print(Panel(
        Markdown(weather_info),
        title="Current Weather",
        border_style="green"
    ))


@app.command("animations")
def show_animations():
    """Preview the weather animations."""
    for name, frames in ANIMATIONS.items():
        console.print(Panel(Text(frames[0]), title=name.title(), border_style="blue"))


@app.command("interactive")
def interactive():
    """Launch the interactive Rich UI."""
    from .rich_ui import RichUI
    RichUI(get_app()).run()


class TyperCLI:
    """Typer CLI wrapper class."""

    def __init__(self):
        self.app = app

    def run(self, args: Optional[List[str]] = None):
        """Run the CLI with the given arguments."""
        self.app(args)
