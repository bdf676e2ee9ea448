"""service-manager - list, start and stop macOS launchd and Homebrew services."""

__version__ = "0.1.0"
