"""
Unit tests for GeocodingService
"""

import httpx
import pytest

from tests.fixtures import responses
from tests.fixtures.transport import MockMapboxTransport, makeHttpClient

from ..exceptions import DecodeError, InvalidTokenError, NetworkError, NotFoundError, RateLimitError, ValidationError
from ..transport import HttpTransport
from .models import BatchQuery, BatchRequest, ForwardRequest, ReverseRequest, StructuredForwardRequest
from .service import GeocodingService

TOKEN = "pk.test-token"


def makeService(mock: MockMapboxTransport) -> GeocodingService:
    return GeocodingService(TOKEN, HttpTransport("https://api.mapbox.com", makeHttpClient(mock)))


class TestGeocodingService:
    """Test suite for GeocodingService class."""

    @pytest.fixture
    def forwardMock(self):
        return MockMapboxTransport(responses.FORWARD_GEOCODING)

    async def test_forward(self, forwardMock):
        """Test forward geocoding request and response, dood!"""
        service = makeService(forwardMock)

        response = await service.forward(
            ForwardRequest(query="1600 Pennsylvania Ave", country=["us"], limit=1, autocomplete=False)
        )

        request = forwardMock.lastRequest
        assert request.method == "GET"
        assert request.url.path == "/search/geocode/v6/forward"
        params = forwardMock.lastParams()
        assert list(params)[0] == "access_token"
        assert params == {
            "access_token": TOKEN,
            "q": "1600 Pennsylvania Ave",
            "autocomplete": "false",
            "country": "us",
            "limit": "1",
        }
        assert response.first is not None
        assert response.first.properties.name == "1600 Pennsylvania Avenue NW"

    async def test_forward_validation_happens_before_io(self, forwardMock):
        service = makeService(forwardMock)

        with pytest.raises(ValidationError, match="query is required"):
            await service.forward(ForwardRequest(query=""))

        assert forwardMock.requests == []

    async def test_forward_structured(self, forwardMock):
        service = makeService(forwardMock)

        await service.forwardStructured(StructuredForwardRequest(addressNumber="1600", street="Pennsylvania Ave"))

        assert forwardMock.lastRequest.url.path == "/search/geocode/v6/forward"
        assert forwardMock.lastParams() == {
            "access_token": TOKEN,
            "address_number": "1600",
            "street": "Pennsylvania Ave",
        }

    async def test_forward_structured_requires_component(self, forwardMock):
        service = makeService(forwardMock)

        with pytest.raises(ValidationError):
            await service.forwardStructured(StructuredForwardRequest())

        assert forwardMock.requests == []

    async def test_reverse(self):
        mock = MockMapboxTransport(responses.REVERSE_GEOCODING)
        service = makeService(mock)

        response = await service.reverse(ReverseRequest(longitude=-122.419415, latitude=37.774929, limit=1))

        assert mock.lastRequest.url.path == "/search/geocode/v6/reverse"
        assert mock.lastParams() == {
            "access_token": TOKEN,
            "longitude": "-122.419415",
            "latitude": "37.774929",
            "limit": "1",
        }
        assert response.first is not None
        assert response.first.properties.name == "San Francisco"
        assert response.first.properties.context["region"].short_code == "US-CA"

    async def test_reverse_out_of_range(self):
        mock = MockMapboxTransport(responses.REVERSE_GEOCODING)
        service = makeService(mock)

        with pytest.raises(ValidationError, match="latitude must be between -90 and 90"):
            await service.reverse(ReverseRequest(longitude=0, latitude=95))

        assert mock.requests == []

    async def test_batch(self):
        """Test batch is a POST with a JSON body and the token in the query string, dood!"""
        mock = MockMapboxTransport(responses.BATCH_GEOCODING)
        service = makeService(mock)
        request = BatchRequest(
            [
                BatchQuery(id="query1", query="New York", limit=1),
                BatchQuery(id="query2", longitude=-118.243683, latitude=34.052235),
                BatchQuery(id="query3", query="???"),
            ]
        )

        response = await service.batch(request)

        httpRequest = mock.lastRequest
        assert httpRequest.method == "POST"
        assert httpRequest.url.path == "/search/geocode/v6/batch"
        assert mock.lastParams() == {"access_token": TOKEN}
        assert httpRequest.headers["Content-Type"] == "application/json"
        assert mock.lastJson() == {
            "queries": [
                {"id": "query1", "q": "New York", "limit": 1},
                {"id": "query2", "longitude": -118.243683, "latitude": 34.052235},
                {"id": "query3", "q": "???"},
            ]
        }
        assert len(response.results) == 3
        assert response.results[1].response is not None
        assert response.results[1].response.first is not None
        assert response.results[1].response.first.properties.name == "Los Angeles"
        assert response.results[2].error is not None
        assert response.results[2].error.code == "INVALID_QUERY"

    # Error Tests

    async def test_invalid_token(self):
        service = makeService(MockMapboxTransport(responses.INVALID_TOKEN_ERROR, statusCode=401))

        with pytest.raises(InvalidTokenError) as excInfo:
            await service.forward(ForwardRequest(query="Rome"))

        error = excInfo.value
        assert error.statusCode == 401
        assert error.code == "TOKEN_INVALID"
        assert error.endpoint == "forward geocoding"
        assert str(error) == "forward geocoding failed: HTTP 401: Invalid access token (TOKEN_INVALID)"

    @pytest.mark.parametrize(
        "statusCode, payload, errorClass",
        [(404, responses.NOT_FOUND_ERROR, NotFoundError), (429, responses.RATE_LIMIT_ERROR, RateLimitError)],
    )
    async def test_classified_errors(self, statusCode, payload, errorClass):
        service = makeService(MockMapboxTransport(payload, statusCode=statusCode))

        with pytest.raises(errorClass) as excInfo:
            await service.reverse(ReverseRequest(longitude=1.0, latitude=2.0))

        assert excInfo.value.endpoint == "reverse geocoding"

    async def test_batch_error_is_annotated(self):
        service = makeService(MockMapboxTransport(responses.RATE_LIMIT_ERROR, statusCode=429))

        with pytest.raises(RateLimitError, match="batch geocoding failed"):
            await service.batch(BatchRequest([BatchQuery(query="Rome")]))

    async def test_network_error(self):
        cause = httpx.ConnectError("connection refused")
        service = makeService(MockMapboxTransport(error=cause))

        with pytest.raises(NetworkError) as excInfo:
            await service.forwardStructured(StructuredForwardRequest(place="Rome"))

        assert excInfo.value.endpoint == "structured forward geocoding"
        assert excInfo.value.__cause__ is cause

    async def test_decode_error(self):
        service = makeService(MockMapboxTransport("{broken"))

        with pytest.raises(DecodeError) as excInfo:
            await service.forward(ForwardRequest(query="Rome"))

        assert excInfo.value.endpoint == "forward geocoding"
