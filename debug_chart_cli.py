#!/usr/bin/env python3
"""
Command-line debug interface for the chart engine.
Load a grid from a JSON file (a list of rows), pick years and a chart mode,
and inspect the series, axis bounds and summary the engine produces.
"""

import json
import logging
import signal
import sys

from chart_engine import ChartData, build_chart
from chart_renderer import render_chart
from config import EMPTY_STATE_MESSAGES
from config_validator import validate_config
from data_summary import summarize
from logging_config import setup_logging
from series_builder import ChartMode

logger = logging.getLogger('statchart.debug_chart_cli')


class DebugChartCLI:
    """Command-line interface for debugging chart transformations"""

    def __init__(self):
        self.running = True
        self.grid = []
        self.grid_name = "(no grid)"
        self.mode = ChartMode.BAR
        self.years = []
        self.target_year = None

    def print_welcome(self):
        """Print welcome message and instructions"""
        print("=" * 60)
        print("📊 Chart Engine Debug CLI")
        print("=" * 60)
        print("Load a JSON grid and inspect how it becomes chart series.")
        print("Type .help for the list of commands.")
        print("=" * 60)
        print()

    def print_help(self):
        """Print help message"""
        print()
        print("🔧 Debug CLI Commands:")
        print("  .load <file.json>   - Load a grid (JSON list of rows)")
        print("  .mode <type>        - bar, line, pie or doughnut")
        print("  .years 2022,2023    - Set the selected years (empty to clear)")
        print("  .target <year>      - Year drawn by pie/doughnut charts")
        print("  .show               - Print the series set and axis bounds")
        print("  .summary            - Print grid statistics")
        print("  .render <file.png>  - Render the chart to a PNG file")
        print("  .help               - Show this help")
        print("  .quit or .exit      - Exit the debug interface")
        print()

    def load_grid(self, path: str) -> bool:
        try:
            with open(path, encoding='utf-8') as f:
                grid = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"❌ Could not load grid from {path}: {e}")
            logger.warning("Failed to load grid %s: %s", path, e)
            return False

        if not isinstance(grid, list) or not all(isinstance(row, list) for row in grid):
            print("❌ Grid file must contain a JSON list of rows")
            return False

        self.grid = grid
        self.grid_name = path
        print(f"✅ Loaded {len(grid)} row(s) from {path}")
        return True

    def current_chart(self) -> ChartData:
        return build_chart(self.grid, self.years or None, self.mode, self.target_year)

    def show_chart(self):
        chart_data = self.current_chart()
        if chart_data.is_empty:
            print(f"⚠️ {self._empty_state_message()}")
            return

        print(f"📋 {chart_data.mode} chart for {self.grid_name}")
        print(chart_data.series_set.to_dataframe().to_string())
        if chart_data.bounds is not None:
            print(f"📏 Axis: {chart_data.bounds.min} to {chart_data.bounds.max} (includes zero)")

    def show_summary(self):
        summary = summarize(self.grid)
        if summary is None:
            print(f"⚠️ {EMPTY_STATE_MESSAGES['no_data']}")
            return
        print(
            f"📈 {summary.category_count} wilayah, {summary.year_count} tahun, "
            f"{summary.point_count} titik data"
        )
        print(f"   Avg: {summary.average:.2f}  Max: {summary.max}  Min: {summary.min}")

    def _empty_state_message(self) -> str:
        if len(self.grid) < 2:
            return EMPTY_STATE_MESSAGES['no_data']
        if ChartMode.is_proportion(self.mode):
            year = self.target_year if self.target_year is not None else (self.years[0] if self.years else None)
            if year is None:
                return EMPTY_STATE_MESSAGES['no_year_selected']
            if self.years and year not in self.years:
                return EMPTY_STATE_MESSAGES['year_not_found'].format(year=year)
            return EMPTY_STATE_MESSAGES['no_positive_values'].format(year=year)
        return EMPTY_STATE_MESSAGES['no_data']

    def render_to_file(self, path: str):
        buf = render_chart(self.current_chart(), title=self.grid_name)
        if buf is None:
            print("❌ Nothing rendered")
            return
        with open(path, 'wb') as f:
            f.write(buf.getvalue())
        print(f"✅ Chart written to {path}")

    def handle_cli_command(self, command: str) -> bool:
        """
        Handle CLI commands (starting with .)

        Args:
            command: The command to handle

        Returns:
            True if the command was recognised
        """
        name, _, argument = command.strip().partition(' ')
        argument = argument.strip()

        if name in ['.quit', '.exit']:
            print("👋 Goodbye!")
            self.running = False
        elif name == '.help':
            self.print_help()
        elif name == '.load' and argument:
            self.load_grid(argument)
        elif name == '.mode' and argument:
            self.mode = ChartMode.normalize(argument)
            print(f"✅ Chart mode set to {self.mode}")
        elif name == '.years':
            try:
                self.years = [int(part) for part in argument.split(',') if part.strip()]
            except ValueError:
                print("❌ Years must be comma-separated integers. Example: .years 2022,2023")
                return True
            print(f"✅ Selected years: {self.years or 'none'}")
        elif name == '.target':
            try:
                self.target_year = int(argument) if argument else None
            except ValueError:
                print("❌ Please provide a year. Example: .target 2023")
                return True
            print(f"✅ Target year: {self.target_year}")
        elif name == '.show':
            self.show_chart()
        elif name == '.summary':
            self.show_summary()
        elif name == '.render' and argument:
            self.render_to_file(argument)
        else:
            print(f"❌ Unknown command: {command}. Type .help for the list of commands.")
            return False
        return True

    def run(self):
        """Main CLI loop"""
        self.print_welcome()

        # Set up signal handler for graceful shutdown
        def signal_handler(signum, frame):
            print("\n🛑 Received interrupt signal. Shutting down...")
            self.running = False

        signal.signal(signal.SIGINT, signal_handler)

        while self.running:
            try:
                user_input = input(f"[{self.mode}] > ").strip()
            except EOFError:
                print("\n👋 Goodbye!")
                break

            if user_input:
                self.handle_cli_command(user_input)

        print("🔄 Debug CLI shutting down...")


def main(argv=None):
    """Main entry point"""
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()
    if not validate_config():
        print("⚠️ Configuration has invalid values, see the log for details")
    cli = DebugChartCLI()
    if argv:
        cli.load_grid(argv[0])
    cli.run()


if __name__ == "__main__":
    main()
