"""Sheet catalog performance kit."""
