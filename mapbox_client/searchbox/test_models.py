"""
Unit tests for Search Box API models
"""

import pytest

from tests.fixtures import responses

from ..constants import EtaType, NavigationProfile, ProximityMode
from ..exceptions import ValidationError
from ..models import Coordinate
from .models import (
    CategorySearchRequest,
    ContextElement,
    ForwardSearchRequest,
    ListCategoriesRequest,
    ListCategoriesResponse,
    NavigationOptions,
    RetrieveRequest,
    ReverseSearchRequest,
    SAROptions,
    SearchResponse,
    SuggestRequest,
    SuggestResponse,
)

SESSION = "0c0ad8c4-5a8b-4f8e-9d1e-0c6b7a3e2f10"


class TestSuggestRequest:
    """Test suite for SuggestRequest."""

    def test_query_params(self):
        request = SuggestRequest(
            query="blue bottle",
            sessionToken=SESSION,
            proximity=Coordinate(-122.4194, 37.7749),
            country=["US"],
            limit=5,
            poiCategory=["coffee", "cafe"],
        )
        request.validate()

        assert request.toQueryParams() == {
            "q": "blue bottle",
            "session_token": SESSION,
            "proximity": "-122.4194,37.7749",
            "country": "US",
            "limit": "5",
            "poi_category": "coffee,cafe",
        }

    def test_query_length(self):
        """Test 256 characters pass and 257 fail, dood!"""
        SuggestRequest(query="a" * 256, sessionToken=SESSION).validate()
        with pytest.raises(ValidationError, match="exceeds maximum length of 256 characters"):
            SuggestRequest(query="a" * 257, sessionToken=SESSION).validate()

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"query": "", "sessionToken": SESSION}, "query is required"),
            ({"query": "coffee", "sessionToken": ""}, "session_token is required"),
            ({"query": "coffee", "sessionToken": SESSION, "limit": 0}, "limit must be between 1 and 10"),
            ({"query": "coffee", "sessionToken": SESSION, "limit": 11}, "limit must be between 1 and 10"),
            ({"query": "coffee", "sessionToken": SESSION, "bbox": [1, 2]}, "bbox must have exactly 4 elements"),
        ],
    )
    def test_invalid(self, kwargs, message):
        with pytest.raises(ValidationError, match=message):
            SuggestRequest(**kwargs).validate()

    def test_navigation(self):
        request = SuggestRequest(
            query="coffee",
            sessionToken=SESSION,
            navigation=NavigationOptions(
                etaType=EtaType.NAVIGATION, origin=[-122.4, 37.8], profile=NavigationProfile.DRIVING
            ),
        )
        request.validate()

        params = request.toQueryParams()
        assert params["eta_type"] == "navigation"
        assert params["origin"] == "-122.4,37.8"
        assert params["navigation_profile"] == "driving"

    def test_navigation_origin_length(self):
        request = SuggestRequest(query="coffee", sessionToken=SESSION, navigation=NavigationOptions(origin=[1.0]))
        with pytest.raises(ValidationError, match="origin must have exactly 2 elements"):
            request.validate()


class TestRetrieveRequest:
    """Test suite for RetrieveRequest."""

    def test_query_params(self):
        request = RetrieveRequest(mapboxId="dXJuOm1ieHBvaTphYmNkZWY", sessionToken=SESSION)
        request.validate()
        assert request.toQueryParams() == {"session_token": SESSION}

    def test_with_navigation(self):
        request = RetrieveRequest(
            mapboxId="dXJuOm1ieHBvaTphYmNkZWY",
            sessionToken=SESSION,
            navigation=NavigationOptions(profile="walking", origin=[-122.4, 37.8]),
        )
        assert request.toQueryParams() == {
            "session_token": SESSION,
            "origin": "-122.4,37.8",
            "navigation_profile": "walking",
        }

    def test_invalid(self):
        with pytest.raises(ValidationError, match="mapbox_id is required"):
            RetrieveRequest(mapboxId="", sessionToken=SESSION).validate()
        with pytest.raises(ValidationError, match="session_token is required"):
            RetrieveRequest(mapboxId="abc", sessionToken="").validate()


class TestForwardSearchRequest:
    """Test suite for ForwardSearchRequest."""

    def test_query_params(self):
        request = ForwardSearchRequest(
            query="Colosseum Rome",
            language="en",
            limit=5,
            autocomplete=True,
            proximity=ProximityMode.IP,
            types=["poi"],
        )
        request.validate()

        assert request.toQueryParams() == {
            "q": "Colosseum Rome",
            "autocomplete": "true",
            "proximity": "ip",
            "language": "en",
            "limit": "5",
            "types": "poi",
        }

    def test_invalid(self):
        with pytest.raises(ValidationError, match="query is required"):
            ForwardSearchRequest(query="").validate()
        with pytest.raises(ValidationError, match="exceeds maximum length"):
            ForwardSearchRequest(query="x" * 300).validate()
        with pytest.raises(ValidationError, match="limit must be between 1 and 10"):
            ForwardSearchRequest(query="x", limit=20).validate()


class TestCategorySearchRequest:
    """Test suite for CategorySearchRequest."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"proximity": Coordinate(-122.4, 37.8)},
            {"proximity": [-122.4, 37.8]},
            {"proximity": ProximityMode.IP},
            {"proximity": "ip"},
            {"bbox": [-122.5, 37.7, -122.3, 37.8]},
            {"sar": SAROptions(route=[[-122.4, 37.8], [-122.5, 37.7]])},
        ],
    )
    def test_search_area(self, kwargs):
        """Test any one search area is enough, dood!"""
        CategorySearchRequest(categoryId="coffee", **kwargs).validate()

    @pytest.mark.parametrize(
        "kwargs",
        [{}, {"proximity": []}, {"bbox": []}, {"sar": SAROptions()}, {"sar": SAROptions(route=[])}],
    )
    def test_missing_search_area(self, kwargs):
        with pytest.raises(ValidationError, match="either proximity, bbox, or SAR is required"):
            CategorySearchRequest(categoryId="coffee", **kwargs).validate()

    def test_requires_category(self):
        with pytest.raises(ValidationError, match="category_id is required"):
            CategorySearchRequest(categoryId="", proximity=ProximityMode.IP).validate()

    def test_limit(self):
        CategorySearchRequest(categoryId="coffee", bbox=[1, 2, 3, 4], limit=25).validate()
        with pytest.raises(ValidationError, match="limit must be between 1 and 25"):
            CategorySearchRequest(categoryId="coffee", bbox=[1, 2, 3, 4], limit=26).validate()

    def test_sar_params(self):
        request = CategorySearchRequest(
            categoryId="gas_station",
            limit=10,
            sar=SAROptions(route=[[-122.4, 37.8], [-122.5, 37.7]], timeDeviation=10),
        )
        request.validate()

        assert request.toQueryParams() == {
            "limit": "10",
            "sar_type": "isochrone",
            "route": "-122.400000,37.800000;-122.500000,37.700000",
            "time_deviation": "10",
        }

    def test_sar_route_point_length(self):
        request = CategorySearchRequest(categoryId="coffee", sar=SAROptions(route=[[-122.4, 37.8, 0.0]]))
        with pytest.raises(ValidationError, match="route must have exactly 2 elements"):
            request.validate()

    def test_sar_without_route(self):
        request = CategorySearchRequest(categoryId="coffee", bbox=[1, 2, 3, 4], sar=SAROptions())
        request.validate()

        assert request.toQueryParams() == {"bbox": "1,2,3,4"}

    @pytest.mark.parametrize(
        "searchRequest",
        [
            ForwardSearchRequest(query="cafe", proximity=[200.0, 95.0]),
            CategorySearchRequest(categoryId="coffee", proximity=[-500, 0]),
            SuggestRequest(query="cafe", sessionToken=SESSION, proximity=[0, -91]),
        ],
    )
    def test_proximity_pair_out_of_range(self, searchRequest):
        with pytest.raises(ValidationError, match="must be between") as excInfo:
            searchRequest.validate()
        assert excInfo.value.field == "proximity"

    def test_category_id_is_not_a_param(self):
        request = CategorySearchRequest(categoryId="coffee", proximity=[-122.4, 37.8], country=["US"])
        assert request.toQueryParams() == {"proximity": "-122.4,37.8", "country": "US"}


class TestOtherRequests:
    """Test suite for ListCategoriesRequest and ReverseSearchRequest."""

    def test_list_categories(self):
        ListCategoriesRequest().validate()
        assert ListCategoriesRequest().toQueryParams() == {}
        assert ListCategoriesRequest(language="fr").toQueryParams() == {"language": "fr"}

    def test_reverse_search(self):
        request = ReverseSearchRequest(longitude=-122.419415, latitude=37.774929, limit=3, types=["address"])
        request.validate()

        assert request.toQueryParams() == {
            "longitude": "-122.419415",
            "latitude": "37.774929",
            "limit": "3",
            "types": "address",
        }

    def test_reverse_search_invalid(self):
        with pytest.raises(ValidationError, match="longitude must be between"):
            ReverseSearchRequest(longitude=-190, latitude=0).validate()
        with pytest.raises(ValidationError, match="limit must be between 1 and 10"):
            ReverseSearchRequest(longitude=0, latitude=0, limit=11).validate()


class TestSearchBoxResponses:
    """Test suite for response decoding."""

    def test_suggest_response(self):
        response = SuggestResponse.from_dict(responses.SUGGEST)

        assert len(response.suggestions) == 2
        first = response.suggestions[0]
        assert first.mapbox_id == "dXJuOm1ieHBvaTphYmNkZWY"
        assert first.name == "Blue Bottle Coffee"
        assert first.poi_category == ["coffee_shop"]
        assert first.brand == ["Blue Bottle Coffee"]
        assert first.maki == "cafe"
        assert first.distance == 234.5
        assert first.eta is None
        assert response.suggestions[1].brand == []
        assert response.attribution == "© 2024 Mapbox"

    def test_retrieve_response(self):
        """Test full feature details are decoded, dood!"""
        response = SearchResponse.from_dict(responses.RETRIEVE)

        feature = response.first
        assert feature is not None
        assert feature.geometry is not None
        assert feature.geometry.coordinates == [-122.394447, 37.789688]
        properties = feature.properties
        assert properties.address_number == "66"
        assert properties.context is not None
        assert properties.context.place is not None
        assert properties.context.place.name == "San Francisco"
        assert properties.context.country is not None
        assert properties.context.country.short_code == "US"
        assert properties.context.street is None
        assert properties.routable_points[0].name == "main entrance"
        assert properties.routable_points[0].coordinates == [-122.394447, 37.789688]
        assert properties.external_ids == {"foursquare": "4ad4c05df964a520c6f920e3"}

    def test_forward_response(self):
        response = SearchResponse.from_dict(responses.SEARCH_FORWARD)

        properties = response.features[0].properties
        assert properties.name == "Colosseum"
        assert properties.name_preferred == "Colosseo"
        assert properties.poi_category == ["historic_site", "landmark"]
        assert properties.eta == 900.0
        assert properties.coordinates is not None
        assert properties.coordinates.latitude == 41.902916

    def test_list_categories_response(self):
        response = ListCategoriesResponse.from_dict(responses.LIST_CATEGORIES)

        assert [category.canonical_name for category in response.categories] == [
            "airport",
            "coffee_shop",
            "restaurant",
            "gas_station",
        ]
        assert response.categories[3].name == "Gas Station"
        assert response.categories[3].maki_icon == "fuel"

    def test_context_element_wikidata(self):
        assert ContextElement.from_dict({"name": "Rome", "wikidata_id": "Q220"}).wikidata_id == "Q220"

        legacy = ContextElement.from_dict({"name": "Rome", "wikidata": "Q220"})
        assert legacy.wikidata_id == "Q220"
        assert legacy.api_kwargs == {}

    def test_empty_search_response(self):
        response = SearchResponse.from_dict({"type": "FeatureCollection", "features": [], "response_id": "abc"})
        assert response.first is None
        assert response.response_id == "abc"
