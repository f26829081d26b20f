"""kubeusage - live resource usage versus declared requests and limits."""

__version__ = "0.1.0"
