""" 
MCP Server Wrapping the To-Do API (`mcp_server.py`)
"""

import logging
import os
import sys

import requests
from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from todo_app.services.auth import issue_token

logging.basicConfig(stream=sys.stderr, level=logging.INFO)
logger = logging.getLogger(__name__)

load_dotenv()

API_URL = os.getenv("TODO_API_URL", "http://localhost:5001").rstrip("/")
TIMEOUT = 10

# Initialize MCP server
mcp = FastMCP("To-Do API MCP Server")


def api_token() -> str:
    """Token for protected routes: TODO_API_TOKEN, or one signed with JWT_SECRET."""
    token = os.getenv("TODO_API_TOKEN")
    if token:
        return token
    secret = os.getenv("JWT_SECRET")
    if not secret:
        raise RuntimeError("Set TODO_API_TOKEN or JWT_SECRET to call protected routes")
    return issue_token({"sub": "mcp-server"}, secret, os.getenv("JWT_ALGORITHM", "HS256"))


@mcp.resource("todo://list")
def list_tasks_resource() -> list:
    """Fetch all tasks from the To-Do API."""
    return list_tasks()


@mcp.tool()
def list_tasks() -> list:
    """List every task currently stored."""
    response = requests.get(f"{API_URL}/", timeout=TIMEOUT)
    response.raise_for_status()
    return response.json()


@mcp.tool()
def add_task(description: str) -> dict:
    """Add a new task via the To-Do API."""
    payload = {"task": {"description": description}}
    response = requests.post(
        f"{API_URL}/create",
        json=payload,
        headers={"Authorization": api_token()},
        timeout=TIMEOUT,
    )
    response.raise_for_status()
    return response.json()


@mcp.tool()
def delete_task(task_id: int) -> bool:
    """Delete a task by id. Returns False when no such task exists."""
    response = requests.delete(
        f"{API_URL}/{task_id}",
        headers={"Authorization": api_token()},
        timeout=TIMEOUT,
    )
    if response.status_code == 404:
        logger.info(f"Task {task_id} not found")
        return False
    response.raise_for_status()
    return True


if __name__ == "__main__":
    # Run MCP server with stdio transport for local testing
    mcp.run(transport="stdio")
