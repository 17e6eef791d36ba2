"""
Mapbox Search Box API v1 service.

Interactive suggest/retrieve workflow plus one-shot forward, category and
reverse search.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

from ..constants import (
    ACCESS_TOKEN_PARAM,
    SEARCHBOX_CATEGORY_PATH,
    SEARCHBOX_FORWARD_PATH,
    SEARCHBOX_LIST_CATEGORIES_PATH,
    SEARCHBOX_RETRIEVE_PATH,
    SEARCHBOX_REVERSE_PATH,
    SEARCHBOX_SUGGEST_PATH,
)
from ..encoding import QueryParams
from ..transport import HttpTransport, callEndpoint
from .models import (
    CategorySearchRequest,
    ForwardSearchRequest,
    ListCategoriesRequest,
    ListCategoriesResponse,
    RetrieveRequest,
    ReverseSearchRequest,
    SearchResponse,
    SuggestRequest,
    SuggestResponse,
)


class SearchBoxService:
    """Search Box API v1 facade, dood!

    Typical autocomplete flow:
        >>> token = newSessionToken()
        >>> suggestions = await service.suggest(SuggestRequest(query="blue bottle", sessionToken=token))
        >>> picked = suggestions.suggestions[0]
        >>> feature = await service.retrieve(RetrieveRequest(mapboxId=picked.mapbox_id, sessionToken=token))

    Reusing the session token between suggest and retrieve is up to the caller.
    """

    __slots__ = ("_token", "_transport")

    def __init__(self, token: str, transport: HttpTransport) -> None:
        self._token = token
        self._transport = transport

    def _queryParams(self, request: Any) -> Dict[str, str]:
        return QueryParams().set(ACCESS_TOKEN_PARAM, self._token).update(request.toQueryParams()).toDict()

    async def suggest(self, request: SuggestRequest) -> SuggestResponse:
        """Get autocomplete suggestions (without coordinates) for partial text.

        Raises:
            ValidationError: If query or session token is missing, query is
                longer than 256 characters or limit is outside 1-10
        """
        request.validate()
        return await callEndpoint(
            "suggest search",
            self._transport.get(SEARCHBOX_SUGGEST_PATH, self._queryParams(request), SuggestResponse),
        )

    async def retrieve(self, request: RetrieveRequest) -> SearchResponse:
        """Get the full feature, with coordinates, for a suggestion's mapbox_id."""
        request.validate()
        path = f"{SEARCHBOX_RETRIEVE_PATH}/{quote(request.mapboxId, safe='')}"
        return await callEndpoint(
            "retrieve feature",
            self._transport.get(path, self._queryParams(request), SearchResponse),
        )

    async def forward(self, request: ForwardSearchRequest) -> SearchResponse:
        """One-shot text search returning features with coordinates."""
        request.validate()
        return await callEndpoint(
            "forward search",
            self._transport.get(SEARCHBOX_FORWARD_PATH, self._queryParams(request), SearchResponse),
        )

    async def categorySearch(self, request: CategorySearchRequest) -> SearchResponse:
        """Find POIs of a category around a proximity, inside a bbox or along a route."""
        request.validate()
        path = f"{SEARCHBOX_CATEGORY_PATH}/{quote(request.categoryId, safe='')}"
        return await callEndpoint(
            "category search",
            self._transport.get(path, self._queryParams(request), SearchResponse),
        )

    async def listCategories(self, request: Optional[ListCategoriesRequest] = None) -> ListCategoriesResponse:
        """List the POI categories usable with categorySearch()."""
        if request is None:
            request = ListCategoriesRequest()
        request.validate()
        return await callEndpoint(
            "list categories",
            self._transport.get(SEARCHBOX_LIST_CATEGORIES_PATH, self._queryParams(request), ListCategoriesResponse),
        )

    async def reverse(self, request: ReverseSearchRequest) -> SearchResponse:
        """Find addresses and POIs at the given coordinates."""
        request.validate()
        return await callEndpoint(
            "reverse search",
            self._transport.get(SEARCHBOX_REVERSE_PATH, self._queryParams(request), SearchResponse),
        )
