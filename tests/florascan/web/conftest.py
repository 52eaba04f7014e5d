import pytest
from fastapi.testclient import TestClient

from florascan.identification.models import IdentificationCandidate, IdentificationResult


@pytest.fixture
def client(app_with_temp_data):
    """TestClient with the app lifespan running."""
    with TestClient(app_with_temp_data) as test_client:
        yield test_client


@pytest.fixture
def peppermint_result() -> IdentificationResult:
    """Identification result for peppermint with property mentions."""
    return IdentificationResult(
        candidates=[
            IdentificationCandidate(
                scientific_name="Mentha piperita",
                common_names=["Peppermint"],
                description="A hybrid mint with anti-inflammatory and anti-viral uses.",
                citation="https://en.wikipedia.org/wiki/Peppermint",
                probability=0.91,
            )
        ]
    )


@pytest.fixture
def identify_peppermint(client, mock_plantid_client, peppermint_result):
    """Record one peppermint sighting through the API and return the response body."""
    mock_plantid_client.identify.return_value = peppermint_result
    response = client.post(
        "/api/identify", json={"photos": ["QUJD"], "latitude": 45.5, "longitude": -73.6}
    )
    assert response.status_code == 201
    return response.json()
