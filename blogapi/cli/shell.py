"""
Interactive Shell Mode.

Read-prompt-respond loop for the blog API. Each command is awaited to
completion before the next prompt, so responses never interleave with
prompts. Lines are read in a worker thread, which keeps the event loop
(and a server sharing it) responsive while waiting for input.
"""

import asyncio
from typing import Callable

from rich.console import Console
from rich.table import Table

from blogapi.backend.core.logging import get_logger, log_with_source
from blogapi.cli.client import APIClient, close_api_client, get_api_client
from blogapi.cli.commands import blogs

logger = get_logger(__name__)
console = Console()

COMMAND_PROMPT = "Enter command (GET/POST/PUT/DELETE): "


class InteractiveShell:
    """
    Interactive shell for blog commands.

    Usage:
        shell = InteractiveShell()
        await shell.run()
    """

    def __init__(
        self,
        client: APIClient | None = None,
        output: Console | None = None,
    ) -> None:
        """
        Initialize the interactive shell.

        Args:
            client: API client to use. Defaults to the module singleton.
            output: Console to print to. Defaults to the module console.
        """
        self.client = client or get_api_client()
        self.console = output or console
        self.running = False
        self.commands: dict[str, Callable] = {
            "GET": self._cmd_get,
            "POST": self._cmd_post,
            "PUT": self._cmd_put,
            "DELETE": self._cmd_delete,
            "HELP": self._cmd_help,
            "QUIT": self._cmd_quit,
            "EXIT": self._cmd_quit,
        }

    async def _read(self, prompt: str) -> str:
        """Read one line without blocking the event loop."""
        return await asyncio.to_thread(self.console.input, prompt)

    async def run(self) -> None:
        """Run the interactive shell until quit or end of input."""
        self.running = True
        self.console.print("CLI ready. Enter commands below:")

        while self.running:
            try:
                command = (await self._read(COMMAND_PROMPT)).strip().upper()
                if not command:
                    continue

                handler = self.commands.get(command)
                if handler is None:
                    self.console.print("Invalid command.", style="red")
                    continue

                log_with_source(logger, "cli", "debug", "Shell command", command=command)
                await handler()

            except (EOFError, KeyboardInterrupt):
                break
            except Exception as e:
                logger.exception("Shell command failed", extra={"error": str(e)})
                self.console.print(f"Error: {e}", style="red", markup=False)

        self.running = False
        self.console.print("Goodbye!", style="dim")

    async def _cmd_get(self) -> None:
        """Show one blog, or all of them when the id is left blank."""
        blog_id = (await self._read("Enter blog ID or leave blank for all: ")).strip()
        if blog_id:
            await blogs.get_blog(self.client, self.console, blog_id)
        else:
            await blogs.list_blogs(self.client, self.console)

    async def _cmd_post(self) -> None:
        """Create a blog."""
        content = await self._read("Enter blog content: ")
        await blogs.create_blog(self.client, self.console, content)

    async def _cmd_put(self) -> None:
        """Replace a blog's content."""
        blog_id = (await self._read("Enter blog ID to update: ")).strip()
        content = await self._read("Enter new blog content: ")
        await blogs.update_blog(self.client, self.console, blog_id, content)

    async def _cmd_delete(self) -> None:
        """Delete a blog."""
        blog_id = (await self._read("Enter blog ID to delete: ")).strip()
        await blogs.delete_blog(self.client, self.console, blog_id)

    async def _cmd_help(self) -> None:
        """Display help information."""
        table = Table(title="Available Commands", show_header=True)
        table.add_column("Command", style="cyan")
        table.add_column("Description")

        table.add_row("GET", "Show one blog by ID, or all blogs")
        table.add_row("POST", "Create a blog")
        table.add_row("PUT", "Replace a blog's content")
        table.add_row("DELETE", "Delete a blog")
        table.add_row("HELP", "Show this help message")
        table.add_row("QUIT / EXIT", "Exit the shell")

        self.console.print(table)

    async def _cmd_quit(self) -> None:
        """Exit the shell."""
        self.running = False


async def run_shell(client: APIClient | None = None) -> None:
    """Run the interactive shell and close the client afterwards."""
    shell = InteractiveShell(client=client)
    try:
        await shell.run()
    finally:
        if client is None:
            await close_api_client()
        else:
            await client.close()
