"""
Lambda wiring for the user registry.

    context = RegistryContext.from_env()   # once, at cold start
    handler = make_handler(context)
    handler(event, lambda_context)          # per invocation
"""

import logging
from typing import Any, Callable, Dict

from .config import RegistryConfig
from .context import RegistryContext
from .router import HttpRequest, Router

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "user_registry"


def configure_logging(config: RegistryConfig) -> None:
    """Set the package log level from configuration."""
    level = logging.DEBUG if config.enable_debug_logging else logging.INFO
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def make_handler(context: RegistryContext) -> Callable[[Dict[str, Any], Any], Dict[str, Any]]:
    """
    Build a Lambda handler bound to an already constructed context.

    Args:
        context: Registry context built at start-up

    Returns:
        Function with the Lambda ``(event, context)`` signature returning a
        Function URL response dictionary
    """
    router = Router(context)

    def handler(event: Dict[str, Any], lambda_context: Any = None) -> Dict[str, Any]:
        request = HttpRequest.from_event(event)
        return router.route(request).to_event()

    return handler


def create_lambda_handler() -> Callable[[Dict[str, Any], Any], Dict[str, Any]]:
    """
    Build the production handler from environment variables.

    Raises:
        ConfigurationError: Required configuration is missing; the function
            must not start serving
    """
    context = RegistryContext.from_env()
    configure_logging(context.config)
    return make_handler(context)
