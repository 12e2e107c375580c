"""FastAPI main application."""

import json
import logging
from typing import Any, Dict, List, Optional
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field
from ...domain.entities.crop_metrics import CropMetrics
from ...domain.entities.nutrient_reading import NutrientReading
from ...domain.entities.weather_reading import WeatherReading
from ...domain.repositories.weather_repository import WeatherServiceError
from ..container import build_service
from config.settings import API_SETTINGS, LOG_FORMAT, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

# Initialize service
service = build_service()


# Request/Response models
class NutrientInput(BaseModel):
    """Soil nutrient reading."""

    model_config = ConfigDict(allow_inf_nan=False)

    nitrogen: float = Field(..., description="Nitrogen, % dry weight")
    phosphorus: float = Field(..., description="Phosphorus, % dry weight")
    potassium: float = Field(..., description="Potassium, % dry weight")
    ph: float = Field(..., description="Soil pH")


class WeatherInput(BaseModel):
    """Weather conditions used for scoring."""

    model_config = ConfigDict(allow_inf_nan=False)

    temperature: float = Field(..., description="Celsius")
    humidity: float = Field(..., description="Relative humidity, %")
    rainfall: float = Field(0.0, description="Monthly rainfall, mm")
    wind_speed: float = Field(0.0, description="m/s")


class CropInput(BaseModel):
    """Measured crop metrics."""

    model_config = ConfigDict(allow_inf_nan=False)

    height: float = Field(80.0, description="cm")
    leaf_area_index: float = Field(3.2, description="Leaf area index")
    antioxidant_score: float = Field(85.0, description="Total antioxidant capacity")


class CropHealthRequest(BaseModel):
    """Request model for crop health scoring; omitted parts use defaults."""

    nutrients: Optional[NutrientInput] = None
    weather: Optional[WeatherInput] = None
    crop: Optional[CropInput] = None


class HealthIssueResponse(BaseModel):
    type: str
    severity: str
    description: str
    impact: int


class CropHealthResponse(BaseModel):
    """Response model for crop health scoring."""

    overall_health: float
    growth_rate: float
    health_percent: int
    status: str
    grade: str
    issues: List[HealthIssueResponse]
    recommendations: List[str]
    details: Dict[str, int]


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Farm Monitor API",
        "version": API_SETTINGS["version"],
        "endpoints": {
            "crop_health": "/crop-health",
            "weather": "/weather",
            "dashboard": "/dashboard",
            "scenarios": "/scenarios",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/crop-health", response_model=CropHealthResponse)
async def crop_health(request: CropHealthRequest) -> CropHealthResponse:
    """
    Score crop health from field readings.

    Args:
        request: Nutrient, weather and crop readings

    Returns:
        Crop health score, issues and recommendations
    """
    result = service.assess(
        NutrientReading(**request.nutrients.model_dump()) if request.nutrients else None,
        WeatherReading(**request.weather.model_dump()) if request.weather else None,
        CropMetrics(**request.crop.model_dump()) if request.crop else None,
    )
    return CropHealthResponse(
        **result.to_dict(),
        health_percent=result.health_percent,
        status=result.status.value,
        grade=result.grade,
    )


@app.get("/weather")
def weather(city: Optional[str] = Query(None, description="City name")) -> Dict[str, Any]:
    """Current weather for a city, or the default location."""
    try:
        return service.current_weather(city=city).to_dict()
    except WeatherServiceError as e:
        logger.error(f"Weather error: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except RuntimeError as e:
        raise HTTPException(status_code=503, detail=str(e))


@app.get("/dashboard")
def dashboard(
    city: Optional[str] = Query(None, description="City name"),
    rainfall: float = Query(0.0, description="Monthly rainfall, mm", allow_inf_nan=False),
) -> Dict[str, Any]:
    """Weather, crop health, insights and alerts in one snapshot."""
    try:
        return service.dashboard(city=city, rainfall=rainfall)
    except WeatherServiceError as e:
        logger.error(f"Dashboard weather error: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except RuntimeError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Dashboard error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/scenarios")
def scenarios() -> Dict[str, Any]:
    """Crop health for each built-in test scenario."""
    df = service.scenario_report()
    return {"scenarios": json.loads(df.reset_index().to_json(orient="records"))}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
