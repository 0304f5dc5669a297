"""
Tests for the icon API.
"""

import pytest
from fastapi.testclient import TestClient

from aperture_icons.api.app import create_app
from aperture_icons.services import IconService

from .conftest import PERSON_SVG


@pytest.fixture
def client(icon_dir):
    """Create a test client with the app lifespan running."""
    service = IconService.create(kind="basic", base_path=str(icon_dir))
    with TestClient(create_app(service)) as client:
        yield client


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Aperture Icons API"
    assert "icons" in data["endpoints"]


def test_health(client, icon_dir):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["handler"] == "BasicTypeHandler"
    assert data["base_path"] == str(icon_dir)


def test_health_unhealthy(tmp_path):
    """Test health reports an unreadable base path."""
    service = IconService.create(kind="basic", base_path=str(tmp_path / "missing"))
    with TestClient(create_app(service)) as client:
        data = client.get("/health").json()
    assert data["status"] == "unhealthy"
    assert data["icons_healthy"] is False


def test_get_icon(client):
    """Test fetching an icon."""
    response = client.get("/icons/Person-Node")
    assert response.status_code == 200
    assert response.content == PERSON_SVG
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert 'filename="personnode.svg"' in response.headers["content-disposition"]


def test_get_icon_ignores_attributes(client):
    """Test that query attributes do not change the basic icon."""
    plain = client.get("/icons/Person-Node")
    colored = client.get("/icons/Person-Node", params={"color": "red"})
    assert colored.status_code == 200
    assert colored.content == plain.content


def test_get_icon_missing(client):
    """Test that a missing icon is a 404."""
    response = client.get("/icons/Vehicle")
    assert response.status_code == 404
    assert "Vehicle" in response.json()["detail"]


def test_get_icon_invalid_type(client, icon_dir):
    """Test that a type without letters or digits is a 400."""
    (icon_dir / ".svg").write_bytes(b"hidden")
    response = client.get("/icons/---")
    assert response.status_code == 400
    assert "Invalid icon type" in response.json()["detail"]


def test_health_with_empty_package_reference():
    """Test health reports an unusable package reference instead of failing."""
    service = IconService.create(kind="basic", base_path="package:")
    with TestClient(create_app(service)) as client:
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "unhealthy"
