"""Centralized logging utilities.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import os
from typing import Literal

# Third-party (alphabetical)
import logfire

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("configure_logging", "get_logger")


# =============================================================================
# Section 12: Functions
# =============================================================================
def configure_logging(
    *,
    service_name: str = "nano-vectordb",
    environment: str | None = None,
    send_to_logfire: bool | Literal["if-token-present"] = "if-token-present",
    console: bool = True,
) -> None:
    """Configure logfire once at application startup.

    Args:
        service_name: Name of the service for tracing.
        environment: Deployment environment (dev, staging, prod).
        send_to_logfire: Whether to send telemetry to Logfire.
        console: Whether to echo log records to the console.
    """
    environment = environment or os.getenv("ENVIRONMENT", "development")
    logfire.configure(
        service_name=service_name,
        environment=environment,
        send_to_logfire=send_to_logfire,
        console=None if console else False,
    )


def get_logger(component: str) -> logfire.Logfire:
    """Return a component-specific logger."""
    return logfire.with_settings(tags=[f"component:{component}"])
