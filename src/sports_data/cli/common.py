from __future__ import annotations

import json

import typer

from sports_data.data_layer.facade import DataLayer, get_data_layer
from sports_data.domain.response import DataLayerResponse, to_jsonable


def data_layer() -> DataLayer:
    return get_data_layer()


def emit(response: DataLayerResponse[object]) -> None:
    """
    Print the envelope as JSON.
    Exits with status 1 when the call did not succeed.
    """
    typer.echo(json.dumps(to_jsonable(response), indent=2, ensure_ascii=False))
    if not response.success:
        raise typer.Exit(code=1)
