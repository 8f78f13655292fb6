"""
Rich-based interactive UI for City Weather Application.

This module provides the interactive screen flow: choose a country and a
city, watch a spinner while the weather is fetched, then read the result
next to a small animation. Each screen is picked from the controller's
current view mode.
"""

import sys
import time
import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.markdown import Markdown
from rich.text import Text
from rich.live import Live
from rich.align import Align
from rich import box

from ..core.app import WeatherApp
from ..core.exceptions import WeatherAppError
from ..core.models import ViewMode, WeatherSnapshot

logger = logging.getLogger(__name__)

ANIMATION_STYLES = {
    "sunny": "bold yellow",
    "cloudy": "bold white",
    "rain": "bold cyan",
}


class RichUI:
    """Rich-based interactive UI for the weather application."""

    def __init__(self, app: Optional[WeatherApp] = None, animate: bool = True):
        """Initialize the Rich UI."""
        self.console = Console()
        self.app = app or WeatherApp.from_config()
        self.animate = animate
        self.running = True

    def run(self):
        """Start the main application loop."""
        try:
            self.show_welcome()
            while self.running:
                self.step()
        except KeyboardInterrupt:
            self.console.print("\n[yellow]Goodbye![/yellow]")
            sys.exit(0)
        except Exception as e:
            self.console.print(f"[red]An unexpected error occurred: {e}[/red]")
            logger.exception(f"Unexpected error: {e}")
            sys.exit(1)

    def step(self):
        """Render the screen for the current view mode and handle one action."""
        mode = self.app.view_mode
        try:
            if mode is ViewMode.SELECTING:
                self.selection_screen()
            elif mode is ViewMode.RESULT:
                self.result_screen()
            elif mode is ViewMode.ERROR:
                self.error_screen()
            else:
                # A fetch is still marked as in flight; start it again.
                self.fetch()
        except WeatherAppError as e:
            self.console.print(f"[red]Error: {e}[/red]")

    def show_welcome(self):
        """Display welcome screen."""
        welcome_text = """
        # 🌤️  City Weather

        Pick a country and a city to see the weather there right now.
        """

        welcome_panel = Panel(
            Markdown(welcome_text),
            title="Welcome",
            title_align="center",
            border_style="blue",
            padding=(1, 2),
        )

        self.console.print()
        self.console.print(welcome_panel)
        self.console.print()

    def show_menu(self, choices: Sequence[str], prompt: str = "Choose an option", default: int = 1) -> int:
        """Display menu and get user choice."""
        table = Table(show_header=False, box=box.SIMPLE)
        table.add_column("Choice", style="cyan", width=4)
        table.add_column("Option", style="white")

        for i, choice in enumerate(choices, 1):
            table.add_row(str(i), choice)

        self.console.print(table)

        choice = Prompt.ask(
            f"\n[bold]{prompt}[/bold]",
            choices=[str(i) for i in range(1, len(choices) + 1)],
            default=str(default),
        )
        return int(choice)

    def selection_screen(self):
        """Select country and city, then fetch."""
        self.console.print("\n[bold blue]═══ SELECT COUNTRY AND CITY ═══[/bold blue]\n")

        countries = self.app.get_countries()
        current = self.app.selection.selected_country
        default = next((i for i, c in enumerate(countries, 1) if c.code == current), 1)
        choice = self.show_menu(
            [f"{country.display_name} ({country.code})" for country in countries] + ["❌ Exit"],
            "Select country",
            default,
        )
        if choice == len(countries) + 1:
            self.quit()
            return
        country = countries[choice - 1]
        if country.code != current:
            self.app.select_country(country.code)

        cities = self.app.get_cities(country.code)
        current_city = self.app.selection.selected_city
        default = next((i for i, c in enumerate(cities, 1) if c.id == current_city), 1)
        choice = self.show_menu([city.display_name for city in cities], "Select city", default)
        self.app.select_city(cities[choice - 1].id)

        self.fetch()

    def fetch(self):
        """Fetch weather for the current selection behind a spinner."""
        city = self.app.selection.selected_city
        country = self.app.selection.selected_country
        self.with_spinner(f"Fetching weather for {city}, {country}...", self.app.fetch_weather)

    def retry(self):
        self.with_spinner("Retrying...", self.app.retry)

    def with_spinner(self, description: str, action):
        """Run a blocking action while a spinner is shown."""
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            task = progress.add_task(description, total=None)
            action()
            progress.update(task, completed=100)

    def result_screen(self):
        """Show the fetched weather and what to do next."""
        weather = self.app.weather
        self.display_weather(weather, self.app.selection.selected_country)

        choice = self.show_menu(["📍 Change Location", "↩️  Start Over", "❌ Exit"], "What next?")
        if choice == 1:
            self.app.change_location()
        elif choice == 2:
            self.app.reset()
        else:
            self.quit()

    def error_screen(self):
        """Show the error and offer retry or reset."""
        self.console.print(Panel(
            Text(self.app.error or "Unknown error", style="bold red"),
            title="Error",
            border_style="red",
        ))

        choice = self.show_menu(["🔄 Retry", "↩️  Start Over", "❌ Exit"], "What next?")
        if choice == 1:
            self.retry()
        elif choice == 2:
            self.app.reset()
        else:
            self.quit()

    def display_weather(self, weather: WeatherSnapshot, country: str):
        """Display the weather card with its animation."""
        self.console.print(f"\n[bold white]{weather.location_name}, {country}[/bold white]\n")
        self.play_animation(self.app.animation_name(), self.app.animation_frames())

        weather_info = "\n".join([
            f"- 🌤️  **Conditions:** {weather.condition_summary.title()}",
            f"- 🌡️  **Temperature:** {weather.temperature_c}°C",
            f"- 💧 **Humidity:** {weather.humidity_pct}%",
            f"- 💨 **Wind Speed:** {weather.wind_speed} m/s",
        ])

        panel = Panel(
            Markdown(weather_info),
            title="Current Weather",
            title_align="center",
            border_style="green",
            padding=(1, 2),
        )
        self.console.print(panel)

    def play_animation(self, name: Optional[str], frames: Sequence[str], cycles: int = 3, delay: float = 0.3):
        """Play an animation's frames in place, then leave the first frame on screen."""
        if not frames:
            return
        style = ANIMATION_STYLES.get(name, "bold white")
        if not self.animate:
            self.console.print(Align.center(Text(frames[0], style=style)))
            return

        with Live(console=self.console, refresh_per_second=10) as live:
            for _ in range(cycles):
                for frame in frames:
                    live.update(Align.center(Text(frame, style=style)))
                    time.sleep(delay)
            live.update(Align.center(Text(frames[0], style=style)))

    def quit(self):
        self.console.print("\n[yellow]Goodbye![/yellow]")
        self.running = False
