"""Schema validation for image-ref receipts."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path

from jsonschema import Draft202012Validator

from seavan.types import ImageRef

IMAGE_REF_FILENAME = "image-ref.json"


def _load_schema(package: str, resource_name: str) -> dict:
    with resources.files(package).joinpath(resource_name).open("r", encoding="utf-8") as f:
        return json.load(f)


def _image_ref_schema() -> dict:
    return _load_schema("seavan.schema", "image-ref.schema.json")


def validate_image_ref(data: dict) -> None:
    Draft202012Validator(_image_ref_schema()).validate(data)


def write_image_ref(outdir: Path, ref: ImageRef) -> Path:
    """Validate *ref* and write it to ``<outdir>/image-ref.json``.

    Returns the path of the written file.
    """
    payload = ref.model_dump()
    validate_image_ref(payload)
    outdir.mkdir(parents=True, exist_ok=True)
    ref_file = outdir / IMAGE_REF_FILENAME
    ref_file.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return ref_file
