"""HTTP routers and the JSON error boundary."""
