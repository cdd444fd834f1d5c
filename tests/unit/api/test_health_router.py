"""HTTP tests for the health endpoints and request dependencies."""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from src.storefront.api.http.app import app
from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.api.http.deps import get_principal
from src.storefront.core.services import (
    DbSessionService,
    ImageUploadService,
    OrderableService,
    SizeService,
)
from src.storefront.runtime.config.config_data import AppConfig, ConfigData
from src.storefront.runtime.context import with_context


def make_dependencies(database_service) -> ApplicationDependencies:
    return ApplicationDependencies(
        database_service=database_service,
        image_service=Mock(spec=ImageUploadService),
        size_service=SizeService(),
        orderable_service=OrderableService(),
    )


def make_request(**state) -> Request:
    request = Request({"type": "http", "method": "GET", "path": "/", "headers": []})
    for name, value in state.items():
        setattr(request.state, name, value)
    return request


class TestHealth:
    def test_liveness(self):
        response = TestClient(app).get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness_with_database(self, db_service: DbSessionService):
        app.state.app_dependencies = make_dependencies(db_service)

        response = TestClient(app).get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}

    def test_readiness_without_database(self, db_service: DbSessionService):
        broken = Mock(spec=DbSessionService)
        broken.health_check.return_value = False
        broken.engine = db_service.engine
        app.state.app_dependencies = make_dependencies(broken)

        response = TestClient(app).get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"


class TestGetPrincipal:
    def test_reads_principal_from_request_state(self):
        principal = get_principal(make_request(principal="alice", roles={"Administrator"}))

        assert principal.name == "alice"
        assert principal.roles == frozenset({"Administrator"})

    @pytest.mark.parametrize(
        "environment, expected_roles",
        [("development", frozenset({"Administrator"})), ("production", frozenset())],
    )
    def test_unauthenticated_request(self, environment, expected_roles):
        override = ConfigData(app=AppConfig(environment=environment))

        with with_context(override):
            principal = get_principal(make_request())

        assert principal.roles == expected_roles
