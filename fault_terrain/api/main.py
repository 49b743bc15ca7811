"""FastAPI host for fault terrain generation."""

import threading
from typing import List, Optional

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .. import __version__
from ..config import list_palettes, settings
from ..core.errors import InvalidConfigurationError, TerrainError
from ..core.colors import palette_name
from ..core.fault_generator import FaultConfig
from ..core.random_source import NumpyRandomSource
from ..core.statistics import summarize
from ..core.terrain import FaultTerrain
from ..log_config import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Fault Terrain API",
    description="Fault Formation heightmap generation and rendering",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One terrain per process; generate/regenerate/redraw run one at a time
_terrain: Optional[FaultTerrain] = None
_terrain_seed: Optional[int] = None
_lock = threading.Lock()


# Request/Response models
class TerrainRequest(BaseModel):
    """Request to generate a new terrain."""

    width: int = Field(default_factory=lambda: settings.terrain_width, ge=1, description="Terrain width")
    height: int = Field(default_factory=lambda: settings.terrain_height, ge=1, description="Terrain height")
    iterations: int = Field(default_factory=lambda: settings.fault_iterations, ge=0, description="Number of fault lines")
    max_change: float = Field(default_factory=lambda: settings.max_change, description="Height change at the first iteration")
    min_change: float = Field(default_factory=lambda: settings.min_change, description="Height change at the last iteration")
    seed: Optional[int] = Field(None, ge=0, description="Random seed for reproducible terrain")


class TerrainSummary(BaseModel):
    """Summary of the current terrain."""

    width: int
    height: int
    iterations: int
    seed: Optional[int]
    mean_height: float
    min_height: float
    max_height: float
    palette: int
    palette_name: str
    generation_seconds: Optional[float]


class HeightmapResponse(BaseModel):
    """Raw heights of the extended grid, indexed ``heights[x][y]``."""

    width: int
    height: int
    heights: List[List[float]]


class ColorsResponse(BaseModel):
    """Flat color buffer, index ``x * height + y``."""

    width: int
    height: int
    palette: int
    colors: List[str]


def _summary(terrain: FaultTerrain) -> TerrainSummary:
    stats = summarize(terrain.heightmap)
    return TerrainSummary(
        width=terrain.config.width,
        height=terrain.config.height,
        iterations=terrain.config.iterations,
        seed=_terrain_seed,
        mean_height=terrain.mean_height,
        min_height=stats.minimum,
        max_height=stats.maximum,
        palette=terrain.palette,
        palette_name=palette_name(terrain.palette),
        generation_seconds=terrain.generation_seconds,
    )


def _current_terrain() -> FaultTerrain:
    if _terrain is None or _terrain.heightmap is None:
        raise HTTPException(status_code=404, detail="No terrain generated yet")
    return _terrain


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Fault Terrain API",
        "version": __version__,
        "status": "running",
        "palettes": list_palettes(),
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "terrain_loaded": _terrain is not None}


@app.post("/terrain/generate", response_model=TerrainSummary)
def generate_terrain(request: TerrainRequest):
    """Generate a new terrain, replacing the current one."""
    global _terrain, _terrain_seed
    logger.info("Terrain generation requested", request=request.model_dump())

    if max(request.width, request.height) > settings.max_terrain_size:
        raise HTTPException(
            status_code=400,
            detail=f"Terrain size exceeds maximum of {settings.max_terrain_size}",
        )

    try:
        config = FaultConfig(
            width=request.width,
            height=request.height,
            iterations=request.iterations,
            max_change=request.max_change,
            min_change=request.min_change,
        )
    except InvalidConfigurationError as e:
        logger.warning("Rejected terrain configuration", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    seed = request.seed if request.seed is not None else settings.random_seed
    with _lock:
        terrain = FaultTerrain(config, NumpyRandomSource(seed))
        try:
            terrain.initialize()
        except TerrainError as e:
            logger.error("Terrain generation failed", error=str(e))
            raise HTTPException(status_code=500, detail=f"Terrain generation failed: {str(e)}")
        _terrain, _terrain_seed = terrain, seed
        return _summary(terrain)


@app.post("/terrain/regenerate", response_model=TerrainSummary)
def regenerate_terrain():
    """Generate a fresh heightmap with the current configuration."""
    with _lock:
        terrain = _current_terrain()
        try:
            terrain.on_regenerate_requested()
        except TerrainError as e:
            logger.error("Terrain regeneration failed", error=str(e))
            raise HTTPException(status_code=500, detail=f"Terrain regeneration failed: {str(e)}")
        return _summary(terrain)


@app.post("/terrain/redraw", response_model=TerrainSummary)
def redraw_terrain():
    """Render the current heightmap again with a new palette."""
    with _lock:
        terrain = _current_terrain()
        terrain.redraw()
        return _summary(terrain)


@app.get("/terrain", response_model=TerrainSummary)
def get_terrain():
    """Get a summary of the current terrain."""
    with _lock:
        return _summary(_current_terrain())


@app.get("/terrain/heightmap", response_model=HeightmapResponse)
def get_heightmap():
    """Get the extended-grid heights of the current terrain."""
    with _lock:
        heightmap = _current_terrain().heightmap
        return HeightmapResponse(
            width=heightmap.extended_width,
            height=heightmap.extended_height,
            heights=heightmap.grid().tolist(),
        )


@app.get("/terrain/colors", response_model=ColorsResponse)
def get_colors():
    """Get the color buffer of the current terrain."""
    with _lock:
        render = _current_terrain().last_render
        return ColorsResponse(
            width=render.width,
            height=render.height,
            palette=render.palette,
            colors=render.to_hex(),
        )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
