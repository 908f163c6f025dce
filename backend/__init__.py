"""Backend package: settings, application factory and entrypoint."""
