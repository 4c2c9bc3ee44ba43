"""
Logging and Logfire observability configuration for BuyerMap.

Usage:
    # At app startup (API module or Streamlit app)
    from buyermap.core.observability import setup_logging, setup_logfire
    setup_logging()
    setup_logfire(app=app)

Environment Variables:
    LOG_LEVEL: stdlib logging level (default INFO)
    LOGFIRE_TOKEN: Your Logfire write token (required to send traces)
    LOGFIRE_PROJECT_NAME: Project name in Logfire dashboard
    LOGFIRE_ENVIRONMENT: Environment name (development, staging, production)
"""

import os
import logging
from typing import Optional

import logfire

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_logfire_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure stdlib logging for the process."""
    level_name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT
    )


def setup_logfire(
    app=None,
    project_name: Optional[str] = None,
    environment: Optional[str] = None,
    service_name: str = "buyermap"
) -> bool:
    """
    Configure Logfire for observability.

    Args:
        app: Optional FastAPI app to instrument
        project_name: Logfire project name (or LOGFIRE_PROJECT_NAME env var)
        environment: Environment name (or LOGFIRE_ENVIRONMENT env var)
        service_name: Service name for tracing

    Returns:
        True if Logfire was configured, False if skipped (no token)
    """
    global _logfire_configured

    if _logfire_configured:
        logger.debug("Logfire already configured")
        return True

    token = os.environ.get("LOGFIRE_TOKEN")
    if not token:
        logger.info("LOGFIRE_TOKEN not set, skipping Logfire configuration")
        return False

    project = project_name or os.environ.get("LOGFIRE_PROJECT_NAME", "buyermap")
    env = environment or os.environ.get("LOGFIRE_ENVIRONMENT", "development")

    try:
        logfire.configure(
            token=token,
            project_name=project,
            service_name=service_name,
            environment=env,
            send_to_logfire=True,
            console=False,
        )

        # Route stdlib logging through Logfire as well as the console
        logging.basicConfig(
            level=logging.INFO,
            format=LOG_FORMAT,
            handlers=[
                logfire.LogfireLoggingHandler(),
                logging.StreamHandler(),
            ],
            force=True,
        )

        logfire.instrument_pydantic()
        if app is not None:
            logfire.instrument_fastapi(app)

        _logfire_configured = True
        logger.info(f"Logfire configured: project={project}, environment={env}")
        return True

    except Exception as e:
        logger.error(f"Failed to configure Logfire: {e}")
        return False
