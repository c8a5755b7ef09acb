"""Cross-cutting concerns: settings, logging and metrics."""
