"""Data models for the KubeWatch TUI."""
