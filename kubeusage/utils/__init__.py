"""Utility functions for kubeusage."""
