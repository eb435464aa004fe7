#!/usr/bin/env python3
import sys
from rich.console import Console
from rich.markup import escape

from progress_log import create_app
from progress_log.errors import StartupError

HOST = "0.0.0.0"
PORT = 8080

console = Console(stderr=True)


def main():
    try:
        app = create_app()
    except StartupError as exc:
        console.print(f"[red]Startup failed:[/red] {escape(str(exc))}")
        sys.exit(1)

    console.print(f"[bold cyan]Serving progress log on http://{HOST}:{PORT}[/bold cyan]")
    app.run(host=HOST, port=PORT, threaded=True)


if __name__ == "__main__":
    main()
