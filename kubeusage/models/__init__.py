"""Data models for kubeusage."""
