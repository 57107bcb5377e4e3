"""
Base Command Class

Abstract base for all NodeKit CLI commands.
Provides common functionality and structure.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Any, Dict, Union
import json
from rich.console import Console
from rich.markup import escape

from nodekit.exceptions import NodeKitError
from nodekit.logger import InstallLogger


class BaseCommand(ABC):
    """
    Abstract base command class.

    Provides:
    - Logger initialization
    - Error handling
    - JSON output support
    """

    def __init__(
        self,
        verbose: bool = False,
        json_output: bool = False,
        log_dir: Union[str, Path] = "logs",
    ):
        self.verbose = verbose
        self.json_output = json_output
        self.log_dir = Path(log_dir)
        self.console = Console()
        self.logger: Optional[InstallLogger] = None

    def init_logger(
        self, service_name: str, command_name: str, quiet: bool = False
    ) -> InstallLogger:
        """
        Initialize command logger.

        In JSON or quiet mode the logger still writes its file but stays off
        the console.

        Args:
            service_name: Service name
            command_name: Command name
        """
        self.logger = InstallLogger(
            service_name,
            command_name,
            log_dir=self.log_dir,
            verbose=self.verbose,
            quiet=quiet or self.json_output,
        )
        return self.logger

    def output_json(self, data: Dict[str, Any], exit_code: int = 0) -> None:
        """
        Output data as JSON and exit on failure.

        Args:
            data: Data to output as JSON
            exit_code: Exit code (0 for success, non-zero for error)
        """
        print(json.dumps(data, indent=2))
        if exit_code != 0:
            raise SystemExit(exit_code)

    def output_json_error(
        self, error: str, details: Optional[Dict[str, Any]] = None, exit_code: int = 1
    ) -> None:
        """Output error as JSON and exit."""
        error_data: Dict[str, Any] = {"error": error}
        if details:
            error_data["details"] = details
        self.output_json(error_data, exit_code=exit_code)

    def print_success(self, message: str) -> None:
        """Print success message (skip in JSON mode)."""
        if not self.json_output:
            self.console.print(f"[green]✓ {message}[/green]")

    def print_error(self, message: str) -> None:
        """Print error message (skip in JSON mode)."""
        if not self.json_output:
            self.console.print(f"[red]✗ {message}[/red]")

    def print_dim(self, message: str) -> None:
        """Print dim message (skip in JSON mode)."""
        if not self.json_output:
            self.console.print(f"[dim]{message}[/dim]")

    @abstractmethod
    def execute(self, **kwargs) -> None:
        """
        Execute command logic.

        Must be implemented by subclasses.
        """
        pass

    def run(self, **kwargs) -> None:
        """
        Run command with error handling.

        Args:
            **kwargs: Command arguments
        """
        try:
            self.execute(**kwargs)
        except KeyboardInterrupt:
            self.console.print("\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            raise SystemExit(130)
        except SystemExit:
            raise
        except NodeKitError as e:
            self._fail(type(e).__name__, e.message, e.context)
        except FileNotFoundError as e:
            self._fail("File not found", str(e))
        except PermissionError as e:
            self._fail("Permission denied", str(e))
        except Exception as e:
            self._fail(type(e).__name__, str(e))
        finally:
            if self.logger:
                self.logger.close()

    def _fail(self, title: str, message: str, context: Optional[str] = None) -> None:
        """Report a failure and exit with status 1."""
        if self.logger and not self.logger.has_errors:
            self.logger.log_error(
                f"{title}: {message}", context=context, console_output=False
            )

        if self.json_output:
            details = {"type": title}
            if context:
                details["context"] = context
            self.output_json_error(message, details=details)

        self.console.print(f"\n[bold red]✗ {title}:[/bold red] {escape(message)}")
        if context:
            self.console.print(f"  [color(208)]{escape(context)}[/color(208)]")
        if self.logger:
            self.console.print(f"\n[dim]Logs saved to:[/dim] {self.logger.log_path}\n")
        raise SystemExit(1)
