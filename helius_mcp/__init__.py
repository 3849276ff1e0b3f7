"""
Helius MCP server package.

This package exposes Solana RPC, Helius DAS, and Jito bundle methods as MCP
tools with a uniform text envelope. See DESIGN.md for details.
"""

__all__ = ["config"]
