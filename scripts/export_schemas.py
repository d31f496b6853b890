"""Export JSON schemas for the planning action contracts."""

import json
from pathlib import Path

from pydantic import BaseModel

from backend.app.models import (
    GenerateRouteInput,
    GenerateRouteOutput,
    RouteAdjustment,
    RouteAdjustmentInput,
    RouteSummary,
    SavedRoute,
    SummarizeRouteInput,
)

CONTRACTS: list[type[BaseModel]] = [
    GenerateRouteInput,
    GenerateRouteOutput,
    SummarizeRouteInput,
    RouteSummary,
    RouteAdjustmentInput,
    RouteAdjustment,
    SavedRoute,
]


def main(schemas_dir: Path = Path("docs/schemas")) -> list[Path]:
    """Export wire-format (camelCase) schemas to docs/schemas/."""
    schemas_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for model in CONTRACTS:
        path = schemas_dir / f"{model.__name__}.schema.json"
        with open(path, "w") as f:
            json.dump(model.model_json_schema(by_alias=True), f, indent=2)
        print(f"Exported {model.__name__} schema to {path}")
        written.append(path)
    return written


if __name__ == "__main__":
    main()
