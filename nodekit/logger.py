"""
Logging system for NodeKit
Writes install runs to log files in real-time with clean console output
"""

import re
from pathlib import Path
from datetime import datetime
from typing import Optional, TextIO, Union
from rich.console import Console

console = Console()

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


class InstallLogger:
    """
    Manages logging for payload preparation
    - Writes all output to log files in real-time
    - Shows clean progress UI in console (unless verbose)
    - Captures errors with context

    Secret material must never be passed in; pydantic SecretStr values
    render masked if they are.
    """

    def __init__(
        self,
        service_name: str,
        operation: str,
        log_dir: Union[str, Path] = "logs",
        verbose: bool = False,
        quiet: bool = False,
    ):
        """
        Initialize logger

        Args:
            service_name: Name of the service (e.g., 'firedancer')
            operation: Operation name (e.g., 'install', 'check')
            log_dir: Root directory for log files
            verbose: If True, show all output in console
            quiet: If True, write to the log file only
        """
        self.service_name = service_name
        self.operation = operation
        self.verbose = verbose
        self.quiet = quiet
        self.log_file: Optional[TextIO] = None
        self.log_path: Optional[Path] = None
        self.current_step = ""
        self.has_errors = False

        # Structure: logs/{service}/{date}/{time}_{operation}.log
        now = datetime.now()
        date_str = now.strftime("%Y-%m-%d")
        time_str = now.strftime("%H-%M-%S")

        service_logs_dir = Path(log_dir) / service_name / date_str
        service_logs_dir.mkdir(parents=True, exist_ok=True)

        self.log_path = service_logs_dir / f"{time_str}_{operation}.log"

        # Line buffered for real-time tailing
        self.log_file = open(self.log_path, "w", buffering=1)

        self._write_log_header()

    def _write_log_header(self):
        """Write log file header"""
        header = f"""
{"=" * 80}
NodeKit Install Log
{"=" * 80}
Service: {self.service_name}
Operation: {self.operation}
Started: {datetime.now().isoformat()}
{"=" * 80}

"""
        self.log_file.write(header)
        self.log_file.flush()

    def _print(self, *args, **kwargs):
        if not self.quiet:
            console.print(*args, **kwargs)

    def log(self, message: str, level: str = "INFO"):
        """
        Log a message to file and optionally console

        Args:
            message: Message to log
            level: Log level (INFO, WARNING, ERROR, DEBUG)
        """
        timestamp = datetime.now().strftime("%H:%M:%S")
        clean_message = _ANSI_ESCAPE.sub("", str(message))

        if self.log_file:
            self.log_file.write(f"[{timestamp}] [{level}] {clean_message}\n")
            self.log_file.flush()

        if self.verbose:
            if level == "ERROR":
                self._print(f"[red]{message}[/red]")
            elif level == "WARNING":
                self._print(f"[yellow]{message}[/yellow]")
            elif level == "DEBUG":
                self._print(f"[dim]{message}[/dim]")
            else:
                self._print(message)

    def log_error(
        self, error: str, context: Optional[str] = None, console_output: bool = True
    ):
        """
        Log an error with context

        Args:
            error: Error message
            context: Additional context (e.g., stage that failed)
            console_output: Also print to console (False when the caller reports it)
        """
        self.has_errors = True

        # Clear markers for grepping
        error_block = f"""
{"!" * 80}
ERROR OCCURRED
{"!" * 80}
{error}
"""
        if context:
            error_block += f"\nContext: {context}\n"

        error_block += f"{'!' * 80}\n\n"

        if self.log_file:
            self.log_file.write(error_block)
            self.log_file.flush()

        if not console_output:
            return

        if not self.verbose:
            self._print()

        self._print(f"[bold red]✗ {error}[/bold red]")
        if context:
            self._print(f"  [color(208)]{context}[/color(208)]")

    def step(self, step_name: str):
        """
        Start a new step

        Args:
            step_name: Name of the step
        """
        if self.current_step and not self.verbose:
            self._print()

        self.current_step = step_name
        self.log(f"Step: {step_name}", "INFO")

        if not self.verbose:
            self._print(f"[color(214)]▶[/color(214)] [white]{step_name}[/white]")

    def success(self, message: str):
        """Log a success message"""
        self.log(message, "INFO")

        if not self.verbose:
            self._print(f"  [dim]✓ {message}[/dim]")

    def warning(self, message: str):
        """Log a warning message"""
        self.log(message, "WARNING")

        if not self.verbose:
            self._print(f"  [yellow]⚠[/yellow] [dim]{message}[/dim]")

    def close(self):
        """Close log file"""
        if self.log_file:
            footer = f"""
{"=" * 80}
Completed: {datetime.now().isoformat()}
Status: {"FAILED" if self.has_errors else "SUCCESS"}
{"=" * 80}
"""
            self.log_file.write(footer)
            self.log_file.close()
            self.log_file = None

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb):
        """Context manager exit"""
        if exc_type is not None and exc_type != SystemExit and not self.has_errors:
            self.log_error(
                str(exc_val) if exc_val else "Operation failed",
                context=f"{exc_type.__name__}",
            )
        self.close()
        return False
