import asyncio
import logging
from contextlib import asynccontextmanager
from typing import List, Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from src.airway_router.application import FlightRoutePlanner
from src.airway_router.config import RouterConfig, configure_logging
from src.airway_router.exceptions import (
    AirportNotFoundError,
    InvalidIdentifierError,
    ReferenceDataUnavailableError,
    RouteEngineError,
)
from src.airway_router.schemas.route import WaypointType

config = RouterConfig.from_env()
configure_logging(config.log_level)
logger = logging.getLogger(__name__)

planner = FlightRoutePlanner(config=config)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the SQLite connection and the AVWX client on shutdown."""
    yield
    planner.shutdown()


app = FastAPI(title="Airway Router API", lifespan=lifespan)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Pydantic Schemas (The JSON Contract) ---


class EndpointResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    icao: str
    name: str
    lat: float
    lng: float


class WaypointResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    lat: float
    lng: float
    type: WaypointType
    airway: Optional[str] = None


class AirwayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    from_point: str
    to_point: str
    points: List[Tuple[float, float]]
    distance_nm: Optional[float] = None


class RouteLegResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    from_name: str
    to_name: str
    distance_nm: float


class RouteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    origin: EndpointResponse
    destination: EndpointResponse
    distance_nm: float
    estimated_time: str
    waypoints: List[WaypointResponse]
    airways: List[AirwayResponse]
    legs: List[RouteLegResponse]


class AirportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    icao: str
    name: str
    lat: float
    lng: float
    elevation: Optional[float] = None
    country: Optional[str] = None
    city: Optional[str] = None


class WindResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    direction: int
    speed: int
    unit: str
    gust: Optional[int] = None


class VisibilityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    distance: float
    unit: str


class CloudLayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    cover: str
    altitude: int


class BarometerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    hg: float
    hpa: float


class MetarResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    icao: str
    raw: str
    temperature: Optional[float] = None
    dewpoint: Optional[float] = None
    wind: Optional[WindResponse] = None
    visibility: Optional[VisibilityResponse] = None
    clouds: List[CloudLayerResponse] = []
    humidity: Optional[float] = None
    barometer: Optional[BarometerResponse] = None
    flight_category: Optional[str] = None


class GenerateRouteRequest(BaseModel):
    # Missing fields fall through to identifier validation (400)
    origin: str = ""
    destination: str = ""


# --- Error mapping ---


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(InvalidIdentifierError)
async def invalid_identifier_handler(request: Request, exc: InvalidIdentifierError):
    return _error(400, "Invalid ICAO code. Must have 4 characters.")


@app.exception_handler(AirportNotFoundError)
async def airport_not_found_handler(request: Request, exc: AirportNotFoundError):
    return _error(404, f"{exc.side.capitalize()} airport {exc.icao} not found")


@app.exception_handler(ReferenceDataUnavailableError)
async def reference_unavailable_handler(
    request: Request, exc: ReferenceDataUnavailableError
):
    logger.error("Reference data unavailable: %s", exc)
    return _error(503, "Navigation data temporarily unavailable")


@app.exception_handler(RouteEngineError)
async def route_engine_error_handler(request: Request, exc: RouteEngineError):
    logger.error("Route engine failure: %s", exc)
    return _error(500, "Error generating route")


async def _run_with_timeout(operation: str, func, *args):
    """Run a blocking planner call in the executor under the request timeout."""
    loop = asyncio.get_running_loop()
    try:
        return await asyncio.wait_for(
            loop.run_in_executor(None, func, *args),
            timeout=planner.config.request_timeout_s,
        )
    except asyncio.TimeoutError as exc:
        raise ReferenceDataUnavailableError(
            operation, f"timed out after {planner.config.request_timeout_s}s"
        ) from exc


# --- API Endpoints ---


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "ok" if planner.is_ready else "degraded",
        "service": "Airway Router",
        "reference_data": planner.provider_name,
        "weather": planner.weather_name,
    }


@app.post("/generate-route", response_model=RouteResponse)
async def generate_route(request: GenerateRouteRequest):
    return await _run_with_timeout(
        "generate_route", planner.generate_route, request.origin, request.destination
    )


@app.get("/airports", response_model=List[AirportResponse])
async def search_airports(q: Optional[str] = None, limit: Optional[int] = None):
    """
    Search airports by ICAO code, name or city.

    Without a query, returns the first 10 airports.
    """
    if limit is not None and limit < 0:
        return _error(400, "limit must be >= 0")
    return await _run_with_timeout("list_airports", planner.search_airports, q, limit)


@app.get("/metar/{icao}", response_model=MetarResponse)
async def get_metar(icao: str):
    return await _run_with_timeout("metar", planner.get_weather, icao)
