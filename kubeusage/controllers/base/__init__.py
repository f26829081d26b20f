"""Base controller classes."""

from kubeusage.controllers.base.base_controller import BaseController, FetchResult

__all__ = [
    "BaseController",
    "FetchResult",
]
