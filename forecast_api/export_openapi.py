"""
Write the generated OpenAPI (Swagger) JSON document to disk.

Usage: python -m forecast_api.export_openapi [PATH]
"""

import json
import logging
import os
import sys
from pathlib import Path

from forecast_api.app import app

OPENAPI_OUTPUT = Path(os.getenv("OPENAPI_OUTPUT", "openapi.json"))


def export_openapi(output_path: Path = OPENAPI_OUTPUT) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(app.openapi(), indent=2))
    logging.info(f"📁 Saved OpenAPI document → {output_path}")
    return output_path


if __name__ == "__main__":
    export_openapi(Path(sys.argv[1]) if len(sys.argv) > 1 else OPENAPI_OUTPUT)
