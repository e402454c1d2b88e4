"""JSON-RPC envelope handling."""
