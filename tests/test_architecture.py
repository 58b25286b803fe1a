"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Application services don't depend on adapters
- Adapters don't depend on application services
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("veloroute.domain.models*")
        .should_not_import("veloroute.adapters*")
        .should_not_import("veloroute.application*")
        .should_not_import("veloroute.domain.contracts*")
        .should_not_import("veloroute.domain.ports*")
        .may_import("veloroute.domain.models*")
        .check("veloroute")
    )


def test_domain_has_no_outward_dependencies() -> None:
    """Domain layer should not import adapters or application services."""
    (
        archrule("domain no cycles", comment="Domain layer should not depend on outer layers")
        .match("veloroute.domain*")
        .should_not_import("veloroute.adapters*")
        .should_not_import("veloroute.application*")
        .should_not_import("veloroute.cli")
        .should_not_import("veloroute.main")
        .may_import("veloroute.domain*")
        .check("veloroute", only_direct_imports=True)
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("veloroute.application*")
        .should_not_import("veloroute.adapters*")
        .may_import("veloroute.domain*")
        .may_import("veloroute.application*")
        .check("veloroute")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("veloroute.adapters*")
        .should_not_import("veloroute.application*")
        .may_import("veloroute.domain*")
        .may_import("veloroute.adapters*")
        .check("veloroute", only_direct_imports=True)
    )
