"""Provider-facing services for the plan advisor."""
