"""
MCP server for Money Cycle.

Exposes currency and billing calendar tools through the Model Context Protocol.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from money_cycle_mcp.core.exceptions import MoneyCycleError
from money_cycle_mcp.core.store import MoneyCycleStore
from money_cycle_mcp.tools.tools import DATA_TOOLS, MoneyCycleTools, create_tool_schemas

logger = logging.getLogger(__name__)

TOOL_NAMES = frozenset(schema["name"] for schema in create_tool_schemas())


class MoneyCycleServer:
    """MCP server for Money Cycle tools."""

    def __init__(self, data_path: Optional[Path] = None, today: Optional[date] = None):
        """
        Initialize the MCP server.

        Args:
            data_path: Optional path to the JSON data file.
                      If None, uses MONEY_CYCLE_DATA or the default location.
            today: Optional fixed reference date for billing calculations.
        """
        self.store = MoneyCycleStore(data_path)
        self.tools = MoneyCycleTools(self.store, today=today)
        self.server = Server("money-cycle-mcp")

        # Register handlers
        self._register_handlers()

    async def handle_call_tool(self, name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Route a tool call and format its result as text content."""
        if name in DATA_TOOLS and not self.store.is_available():
            error_msg = (
                f"Data file not available at {self.store.data_path}. "
                "Create it or provide a custom path with --data-path."
            )
            return [TextContent(type="text", text=error_msg)]

        handler = getattr(self.tools, name, None) if name in TOOL_NAMES else None
        if handler is None:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]

        try:
            result = handler(**arguments)
        except (ValueError, MoneyCycleError) as e:
            # Validation errors (bad day of month, unknown card, bad data file)
            logger.debug(f"Tool {name} rejected arguments {arguments}: {e}")
            return [TextContent(type="text", text=f"Error: {str(e)}")]
        except Exception as e:
            logger.exception(f"Error executing tool {name}")
            return [
                TextContent(
                    type="text",
                    text=f"Error executing tool: {str(e)}",
                )
            ]

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            """List available tools."""
            schemas = create_tool_schemas()
            return [
                Tool(
                    name=schema["name"],
                    description=schema["description"],
                    inputSchema=schema["inputSchema"],
                )
                for schema in schemas
            ]

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            """Handle tool calls."""
            return await self.handle_call_tool(name, arguments or {})

    async def run(self) -> None:  # pragma: no cover
        """Run the MCP server using stdio transport."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


async def run_server(
    data_path: Optional[Path] = None, today: Optional[date] = None
) -> None:  # pragma: no cover
    """
    Run the Money Cycle MCP server.

    Args:
        data_path: Optional path to the JSON data file.
        today: Optional fixed reference date for billing calculations.
    """
    server = MoneyCycleServer(data_path, today=today)
    await server.run()
