import logging
import requests
import azure.functions as func

from typing              import TYPE_CHECKING, Optional, List
from shared.config       import settings
from shared.address      import build_suggestions, extract_street_and_number
from shared.autocomplete import AutocompleteSession, SelectFn
from shared.models       import AddressSuggestion, FormatRequest, Location
from utils.response      import success_response, error_response

if TYPE_CHECKING:
    from azure.functions import FunctionApp

logger = logging.getLogger(__name__)


def search_addresses(query: str) -> Optional[List[Location]]:
    url = f"{settings.NOMINATIM_URL}/search"

    params = {
        "q"             : query,
        "format"        : "json",
        "addressdetails": 1,
        "limit"         : settings.NOMINATIM_LIMIT,
        "countrycodes"  : settings.NOMINATIM_COUNTRY_CODES,
    }

    headers = {
        "User-Agent": settings.NOMINATIM_USER_AGENT
    }

    try:
        response = requests.get(url, params=params, headers=headers, timeout=settings.NOMINATIM_TIMEOUT)
        response.raise_for_status()

        data = response.json()

    except requests.RequestException as e:
        logger.warning("Address search failed for %r: %s", query, e)
        return None

    except ValueError:
        logger.warning("Address search for %r returned invalid JSON", query)
        return None

    if not isinstance(data, list) or not data:
        return None

    locations = []
    for item in data:
        try:
            locations.append(Location.from_nominatim(item))
        except (KeyError, TypeError, ValueError):
            logger.debug("Skipping malformed search result: %r", item)

    return locations or None


def format_results(query: str, records: List[Location]) -> List[AddressSuggestion]:
    hint = extract_street_and_number(query)

    return build_suggestions(
        records,
        hint,
        require_road = settings.ADDRESS_REQUIRE_ROAD,
        override     = settings.ADDRESS_OVERRIDE_POLICY,
    )


def autocomplete_address(query: str) -> List[AddressSuggestion]:
    query = (query or "").strip()

    if len(query) < settings.MIN_QUERY_LENGTH:
        return []

    locations = search_addresses(query)
    if not locations:
        return []

    suggestions = format_results(query, locations)
    logger.debug("Autocomplete %r: %d results, %d suggestions", query, len(locations), len(suggestions))

    return suggestions


def new_session(on_select: SelectFn, value: str = "") -> AutocompleteSession:
    return AutocompleteSession(autocomplete_address, on_select, delay=settings.DEBOUNCE_SECONDS, value=value)


def handle_autocomplete(req: func.HttpRequest) -> func.HttpResponse:
    try:
        query = req.params.get("q")

        if not query:
            return error_response("Missing required parameter: q", 400)

        suggestions = autocomplete_address(query)

        return success_response([s.model_dump() for s in suggestions])

    except Exception as e:
        logger.exception("Autocomplete failed")
        return error_response(f"Internal server error: {str(e)}", 500)


def handle_format(req: func.HttpRequest) -> func.HttpResponse:
    try:
        try:
            payload = FormatRequest.model_validate(req.get_json())
        except ValueError as e:
            return error_response("Invalid request body", 400, details=str(e))

        try:
            records = [Location.from_nominatim(item) for item in payload.results]
        except (KeyError, TypeError, ValueError) as e:
            return error_response("Invalid result entry", 400, details=str(e))

        suggestions = format_results(payload.query, records)

        return success_response([s.model_dump() for s in suggestions])

    except Exception as e:
        logger.exception("Formatting failed")
        return error_response(f"Internal server error: {str(e)}", 500)


def handle_search(req: func.HttpRequest) -> func.HttpResponse:
    try:
        query = req.params.get("q")

        if not query:
            return error_response("Missing required parameter: q", 400)

        locations = search_addresses(query)

        if not locations:
            return error_response("No results found for query", 404)

        return success_response([loc.model_dump() for loc in locations])

    except Exception as e:
        logger.exception("Search failed")
        return error_response(f"Internal server error: {str(e)}", 500)


def register_routes(app: 'FunctionApp'):

    @app.route(route="geocoding/autocomplete", methods=["GET"])
    def autocomplete(req: func.HttpRequest) -> func.HttpResponse:
        return handle_autocomplete(req)

    @app.route(route="geocoding/format", methods=["POST"])
    def format_addresses(req: func.HttpRequest) -> func.HttpResponse:
        return handle_format(req)

    @app.route(route="geocoding/search", methods=["GET"])
    def forward_geocode(req: func.HttpRequest) -> func.HttpResponse:
        return handle_search(req)
