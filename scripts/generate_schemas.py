#!/usr/bin/env python3
"""
Generate JSON Schemas from Pydantic models.

The Pydantic models in isospline.io.loaders are the source of truth for
the saved input, result and profile documents.

Usage:
    python scripts/generate_schemas.py
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pydantic import __version__ as PYDANTIC_VERSION

from isospline.io.loaders import SplineInput, SplineResult, ProfileData
from isospline.io.schema import SCHEMA_VERSION
from isospline.calculator.bridge import CalculatorInputs, CalculatorOutput
from isospline.enums import RootType, SplineSide

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def get_model_schema(model_class) -> dict:
    """Get JSON schema from a Pydantic model.

    Uses by_alias=False to use field names (not aliases) in the schema.
    This ensures the schema matches what model_dump() produces by default.
    """
    return model_class.model_json_schema(by_alias=False)


def main():
    output_dir = Path(__file__).parent.parent / "schemas"
    output_dir.mkdir(exist_ok=True)

    print("Generating JSON schemas from Pydantic models...")
    print(f"  Pydantic version: {PYDANTIC_VERSION}")

    documents = {
        "spline-input": (SplineInput, "Involute spline input parameters"),
        "spline-result": (SplineResult, "Complete ISO 4156-1 spline calculation result"),
        "spline-profile": (ProfileData, "External tooth and internal space profile coordinates"),
        "calculator-inputs": (CalculatorInputs, "JSON bridge input"),
        "calculator-output": (CalculatorOutput, "JSON bridge output"),
    }

    for name, (model, description) in documents.items():
        schema = get_model_schema(model)
        schema["$schema"] = SCHEMA_DIALECT
        schema["title"] = model.__name__
        schema["description"] = description

        schema_file = output_dir / f"{name}-v{SCHEMA_VERSION}.json"
        with open(schema_file, "w") as f:
            json.dump(schema, f, indent=2)
        print(f"  Generated: {schema_file}")

    enums_schema = {
        "$schema": SCHEMA_DIALECT,
        "title": "IsosplineEnums",
        "description": "Enum definitions for isospline types",
        "definitions": {
            "RootType": {
                "type": "string",
                "enum": [e.value for e in RootType],
                "description": "Tooth root form"
            },
            "SplineSide": {
                "type": "string",
                "enum": [e.value for e in SplineSide],
                "description": "Member of the spline connection"
            }
        }
    }

    enums_file = output_dir / f"enums-v{SCHEMA_VERSION}.json"
    with open(enums_file, "w") as f:
        json.dump(enums_schema, f, indent=2)
    print(f"  Generated: {enums_file}")

    print(f"\nAll schemas written to: {output_dir}/")


if __name__ == "__main__":
    main()
