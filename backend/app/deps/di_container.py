"""
Dependency injection container using dependency-injector.
Wires configuration, the health service and the report controller.
"""

from dependency_injector import containers, providers

from app.core.config import settings
from app.services.health_service import HealthService
from app.controllers.health_controller import HealthController
from app.controllers.report_controller import ReportController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # Services
    health_service = providers.Singleton(
        HealthService,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )

    # Session is supplied per request: container.report_controller(session=db)
    report_controller = providers.Factory(
        ReportController,
        include_inactive_default=config.report_include_inactive,
    )


def build_container() -> Container:
    """Create a container configured from application settings."""
    container = Container()
    container.config.from_dict({
        "report_include_inactive": settings.REPORT_INCLUDE_INACTIVE,
    })
    return container


# Global container instance
_container: Container = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = build_container()
    return _container


def set_container(container: Container) -> None:
    """Replace the global container (application startup, tests)."""
    global _container
    _container = container
