"""Dependency injection container for AutoEyes services."""

from dependency_injector import containers, providers

from autoeyes.detection.pattern_locator import PatternLocator
from autoeyes.detection.template_matcher import TemplateMatcher
from autoeyes.orchestration.pattern_waiter import PatternWaiter
from autoeyes.services.app_data import AppData
from autoeyes.services.overlay_service import OverlayService
from autoeyes.services.screenshot_service import ScreenshotService


class Container(containers.DeclarativeContainer):
    """Application dependency injection container.

    This container manages all service dependencies and their lifecycles.
    Services are registered as either Singletons (shared instances) or
    Factories (new instance per request).
    """

    # Wiring configuration for automatic dependency injection
    wiring_config = containers.WiringConfiguration(
        modules=[
            "autoeyes.cli.find_cli",
            "autoeyes.cli.wait_cli",
            "autoeyes.cli.overlay_cli",
        ]
    )

    # Configuration provider for application settings
    config = providers.Configuration()

    # Singleton services (shared instance across application)
    app_data = providers.Singleton(
        AppData,
        data_dir=config.data_dir,
        debug_enabled=config.debug,
    )

    template_matcher = providers.Singleton(
        TemplateMatcher.from_name,
        config.match_method,
    )

    screenshot_service = providers.Singleton(
        ScreenshotService,
    )

    pattern_locator = providers.Singleton(
        PatternLocator,
        matcher=template_matcher,
    )

    # Factory services (new instance per operation)
    pattern_waiter = providers.Factory(
        PatternWaiter,
        capture=screenshot_service,
        locator=pattern_locator,
        default_timeout=config.default_timeout,
        poll_interval=config.poll_interval,
        debug_dir=app_data.provided.debug_dir,
    )

    overlay_service = providers.Factory(
        OverlayService,
        screenshot_service=screenshot_service,
    )
