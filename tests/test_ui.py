"""
Tests for UI implementations.

This module drives the Rich screens with mocked prompts and the Typer
commands through CliRunner, using a mocked weather service.
"""

import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch, MagicMock

from typer.testing import CliRunner

from city_weather.__main__ import detect_ui_mode, main
from city_weather.core.app import WeatherApp
from city_weather.core.exceptions import RequestFailed
from city_weather.core.models import ViewMode, WeatherSnapshot
from city_weather.core.weather_service import WeatherService

DELHI = WeatherSnapshot("Delhi", 30, "clear sky", "Clear", 40, 2.1)
LONDON = WeatherSnapshot("London", 12.5, "moderate rain", "Rain", 88, 5.4)


def make_app(api_key="test_api_key"):
    service = MagicMock(spec=WeatherService)
    service.api_key = api_key
    return WeatherApp(service), service


class TestRichUI(unittest.TestCase):
    """Test the Rich UI implementation."""

    def setUp(self):
        """Set up test environment."""
        self.app, self.service = make_app()

        self.mock_console_patcher = patch('city_weather.ui.rich_ui.Console')
        self.mock_console_class = self.mock_console_patcher.start()
        self.mock_console = MagicMock()
        self.mock_console_class.return_value = self.mock_console

        self.mock_progress_patcher = patch('city_weather.ui.rich_ui.Progress')
        self.mock_progress_patcher.start()

        self.mock_prompt_patcher = patch('city_weather.ui.rich_ui.Prompt.ask')
        self.mock_ask = self.mock_prompt_patcher.start()

    def tearDown(self):
        """Clean up test environment."""
        self.mock_console_patcher.stop()
        self.mock_progress_patcher.stop()
        self.mock_prompt_patcher.stop()

    def make_ui(self):
        from city_weather.ui.rich_ui import RichUI
        return RichUI(self.app, animate=False)

    def printed_text(self):
        return " ".join(str(c.args[0]) for c in self.mock_console.print.call_args_list if c.args)

    def test_rich_ui_initialization(self):
        ui = self.make_ui()
        self.assertIs(ui.app, self.app)
        self.assertEqual(ui.console, self.mock_console)
        self.assertTrue(ui.running)

    def test_rich_ui_builds_app_from_config(self):
        from city_weather.ui.rich_ui import RichUI
        with patch('city_weather.ui.rich_ui.WeatherApp') as mock_app_class:
            ui = RichUI()
        self.assertIs(ui.app, mock_app_class.from_config.return_value)

    def test_show_welcome(self):
        ui = self.make_ui()
        ui.show_welcome()
        self.assertTrue(self.mock_console.print.called)

    def test_selection_screen_fetches_chosen_city(self):
        self.service.get_current_weather.return_value = LONDON
        self.mock_ask.side_effect = ["3", "1"]  # United Kingdom, London

        ui = self.make_ui()
        ui.selection_screen()

        self.service.get_current_weather.assert_called_once_with("GB", "London")
        self.assertEqual(self.app.view_mode, ViewMode.RESULT)

    def test_selection_screen_exit(self):
        self.mock_ask.side_effect = ["4"]

        ui = self.make_ui()
        ui.selection_screen()

        self.assertFalse(ui.running)
        self.service.get_current_weather.assert_not_called()

    def test_run_success_then_exit(self):
        self.service.get_current_weather.return_value = DELHI
        self.mock_ask.side_effect = ["1", "1", "3"]  # India, Delhi, Exit

        ui = self.make_ui()
        ui.run()

        self.assertFalse(ui.running)
        self.assertEqual(self.app.weather, DELHI)
        self.assertIn("Delhi, IN", self.printed_text())

    def test_run_error_retry_then_exit(self):
        self.service.get_current_weather.side_effect = [RequestFailed(500), DELHI]
        self.mock_ask.side_effect = ["1", "1", "1", "3"]  # India, Delhi, Retry, Exit

        ui = self.make_ui()
        ui.run()

        self.assertEqual(self.service.get_current_weather.call_count, 2)
        self.assertEqual(self.app.view_mode, ViewMode.RESULT)

    def test_error_screen_start_over(self):
        self.app.select("US", "Chicago")
        self.service.get_current_weather.side_effect = RequestFailed(404)
        self.app.fetch_weather()
        self.mock_ask.side_effect = ["2"]

        ui = self.make_ui()
        ui.error_screen()

        self.assertEqual(self.app.view_mode, ViewMode.SELECTING)
        self.assertEqual(self.app.selection.selected_country, "IN")

    def test_result_screen_change_location(self):
        self.app.select("GB", "Manchester")
        self.service.get_current_weather.return_value = LONDON
        self.app.fetch_weather()
        self.mock_ask.side_effect = ["1"]

        ui = self.make_ui()
        ui.result_screen()

        self.assertEqual(self.app.view_mode, ViewMode.SELECTING)
        self.assertEqual(self.app.selection.selected_city, "Manchester")

    def test_result_screen_start_over(self):
        self.app.select("GB", "Manchester")
        self.service.get_current_weather.return_value = LONDON
        self.app.fetch_weather()
        self.mock_ask.side_effect = ["2"]

        ui = self.make_ui()
        ui.result_screen()

        self.assertEqual(self.app.view_mode, ViewMode.SELECTING)
        self.assertIsNone(self.app.weather)
        self.assertEqual(self.app.selection.selected_country, "IN")
        self.assertEqual(self.app.selection.selected_city, "Delhi")

    @patch('city_weather.ui.rich_ui.sys.exit')
    @patch('city_weather.core.weather_service.requests.get')
    def test_run_wrong_types_in_response_stays_interactive(self, mock_get, mock_exit):
        response = MagicMock()
        response.status_code = 200
        response.json.return_value = {
            "name": "Delhi",
            "main": {"temp": 30, "humidity": 40},
            "weather": [{"main": 5, "description": None}],
            "wind": {"speed": 2.1},
        }
        mock_get.return_value = response
        self.app = WeatherApp(WeatherService("test_api_key"))
        self.mock_ask.side_effect = ["1", "1", "3"]  # India, Delhi, Exit

        ui = self.make_ui()
        ui.run()

        mock_exit.assert_not_called()
        self.assertFalse(ui.running)
        self.assertEqual(self.app.view_mode, ViewMode.ERROR)
        self.assertEqual(self.app.error, "Error fetching weather data")

    def test_missing_key_shows_error(self):
        self.app, self.service = make_app(api_key="")
        self.mock_ask.side_effect = ["1", "1", "3"]  # India, Delhi, Exit

        ui = self.make_ui()
        ui.run()

        self.service.get_current_weather.assert_not_called()
        self.assertEqual(self.app.view_mode, ViewMode.ERROR)

    @patch('city_weather.ui.rich_ui.time.sleep')
    @patch('city_weather.ui.rich_ui.Live')
    def test_play_animation(self, mock_live_class, mock_sleep):
        from city_weather.ui.rich_ui import RichUI
        ui = RichUI(self.app, animate=True)
        live = mock_live_class.return_value.__enter__.return_value

        ui.play_animation("rain", ("a", "b"), cycles=2, delay=0.1)

        self.assertEqual(mock_sleep.call_count, 4)
        self.assertEqual(live.update.call_count, 5)

    def test_play_animation_without_frames(self):
        ui = self.make_ui()
        ui.play_animation(None, ())
        self.mock_console.print.assert_not_called()


class TestTyperCLI(unittest.TestCase):
    """Test the Typer CLI implementation."""

    def setUp(self):
        self.runner = CliRunner()
        self.app, self.service = make_app()
        self.get_app_patcher = patch('city_weather.ui.typer_cli.get_app', return_value=self.app)
        self.get_app_patcher.start()

    def tearDown(self):
        self.get_app_patcher.stop()

    def invoke(self, *args):
        from city_weather.ui.typer_cli import app
        return self.runner.invoke(app, list(args))

    def test_countries(self):
        result = self.invoke("countries")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("United Kingdom", result.output)

    def test_countries_json(self):
        result = self.invoke("countries", "--json")
        self.assertEqual(result.exit_code, 0)
        data = json.loads(result.output)
        self.assertEqual(data[0], {"code": "IN", "name": "India"})

    def test_cities(self):
        result = self.invoke("cities", "us")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Los Angeles", result.output)

    def test_cities_unknown_country(self):
        result = self.invoke("cities", "FR")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Unknown country", result.output)

    def test_current_json(self):
        self.service.get_current_weather.return_value = DELHI

        result = self.invoke("current", "--country", "IN", "--city", "Delhi", "--json")

        self.assertEqual(result.exit_code, 0)
        data = json.loads(result.output)
        self.assertEqual(data["temp"], 30)
        self.assertEqual(data["humidity"], 40)
        self.assertEqual(data["wind_speed"], 2.1)
        self.assertEqual(data["category"], "Clear")
        self.assertEqual(data["animation"], "sunny")
        self.assertEqual(data["country"], "IN")

    def test_current_panel(self):
        self.service.get_current_weather.return_value = LONDON

        result = self.invoke("current", "--country", "GB")

        self.assertEqual(result.exit_code, 0)
        self.service.get_current_weather.assert_called_once_with("GB", "London")
        self.assertIn("88%", result.output)
        self.assertIn("5.4 m/s", result.output)

    def test_current_invalid_city(self):
        result = self.invoke("current", "--country", "GB", "--city", "Chicago")
        self.assertEqual(result.exit_code, 1)
        self.service.get_current_weather.assert_not_called()

    def test_current_city_ignores_case(self):
        self.service.get_current_weather.return_value = DELHI

        result = self.invoke("current", "--country", "us", "--city", "chicago")

        self.assertEqual(result.exit_code, 0)
        self.service.get_current_weather.assert_called_once_with("US", "Chicago")

    def test_current_request_failed(self):
        self.service.get_current_weather.side_effect = RequestFailed(404)

        result = self.invoke("current")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Failed to fetch weather data", result.output)

    def test_current_missing_key(self):
        self.app.weather_service.api_key = ""

        result = self.invoke("current")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("API key is missing", result.output)

    def test_animations(self):
        result = self.invoke("animations")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Sunny", result.output)

    def test_interactive(self):
        with patch('city_weather.ui.rich_ui.RichUI') as mock_ui_class:
            result = self.invoke("interactive")
        self.assertEqual(result.exit_code, 0)
        mock_ui_class.assert_called_once_with(self.app)
        mock_ui_class.return_value.run.assert_called_once()


class TestMain(unittest.TestCase):
    """Test the entry point helpers."""

    def test_detect_ui_mode(self):
        self.assertEqual(detect_ui_mode(["city-weather"]), "rich")
        self.assertEqual(detect_ui_mode(["city-weather", "interactive"]), "rich")
        self.assertEqual(detect_ui_mode(["city-weather", "countries"]), "typer")
        self.assertEqual(detect_ui_mode(["city-weather", "--help"]), "typer")

    @patch('builtins.print')
    def test_main_unwritable_log_dir_exits_with_error(self, mock_print):
        with tempfile.TemporaryDirectory() as temp_dir:
            blocker = Path(temp_dir) / "not-a-dir"
            blocker.write_text("")
            environ = {"WEATHER_LOG_DIR": str(blocker / "logs")}
            with patch.dict('os.environ', environ), \
                    patch('sys.argv', ["city-weather", "countries"]), \
                    patch('city_weather.__main__.run_typer_cli') as mock_cli:
                with self.assertRaises(SystemExit) as cm:
                    main()

        self.assertEqual(cm.exception.code, 1)
        mock_cli.assert_not_called()
        self.assertIn("Cannot write logs", mock_print.call_args.args[0])


if __name__ == '__main__':
    unittest.main()
