"""MCP server exposing the player upgrader as tools."""
